"""Tests for the end-to-end rendering entry points."""

import unittest
from concurrent.futures import ThreadPoolExecutor

from fencat import (
    ActiveColor, MalformedRank, NoFenFound, RenderOptions, get_palette, parse_fen, render_fen
)

START = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


class TestParseFen(unittest.TestCase):
    """Test suite for parse_fen."""

    def test_noisy_input(self):
        board = parse_fen(f"garbage {START} w trailing-junk")
        self.assertEqual(board.to_placement(), START)
        self.assertEqual(board.active_color, ActiveColor.WHITE)

    def test_malformed_rank(self):
        with self.assertRaises(MalformedRank):
            parse_fen("88/8/8/8/8/8/8/8")

    def test_lenient(self):
        with self.assertLogs('fencat.board', level='WARNING'):
            board = parse_fen("88/8/8/8/8/8/8/8", strict=False)
        self.assertEqual(len(board.rank(8)), 16)


class TestRenderFen(unittest.TestCase):
    """Test suite for render_fen."""

    def test_noisy_input_renders(self):
        lines = render_fen(f"garbage {START} w trailing-junk")
        self.assertEqual(len(lines), 11)
        self.assertEqual(lines[-1], "Active color: White")

    def test_empty_input(self):
        with self.assertRaises(NoFenFound):
            render_fen("")

    def test_options_passed_through(self):
        lines = render_fen(START, options=RenderOptions(palette=get_palette('basic')))
        self.assertIn("\x1b[47m", lines[1])
        self.assertNotIn("\x1b[48;5;249m", lines[1])

    def test_lenient_options(self):
        with self.assertLogs('fencat.board', level='WARNING'):
            lines = render_fen("7/8/8/8/8/8/8/8", options=RenderOptions(strict=False))
        self.assertEqual(len(lines), 10)

    def test_repeated_calls_identical(self):
        first = render_fen(START, flip=True)
        for _ in range(5):
            self.assertEqual(render_fen(START, flip=True), first)

    def test_concurrent_calls_do_not_interfere(self):
        """Parallel renders match their sequential counterparts."""
        inputs = [
            (f"{START} w", False),
            (f"{START} b", True),
            ("r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R", False),
            ("8/8/8/8/8/8/8/8", True),
        ] * 10
        expected = [render_fen(text, flip=flip) for text, flip in inputs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(lambda args: render_fen(args[0], flip=args[1]), inputs))
        self.assertEqual(actual, expected)


if __name__ == '__main__':
    unittest.main()
