"""Command line interface: read a FEN from a file or stdin and print the board."""

import argparse
import sys
from typing import List, Optional, TextIO

import constants
from common.base.logging_config import LOG_LEVELS, configure_logging, get_logger
from common.config.display_config import ConfigError, init_display_config
from fencat.board import MalformedPlacement, MalformedRank
from fencat.extractor import NoFenFound
from fencat.formatter import ActiveColorDisplay, format_board
from fencat.renderer import GLYPH_SETS
from fencat import parse_fen

logger = get_logger(__name__)

USAGE_EPILOG = """
fencat reads a FEN string from a file or stdin and prints the chessboard.
The first FEN string found is used.

Examples:
  echo rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR | %(prog)s
  %(prog)s fen.txt
  %(prog)s < fen.txt
  %(prog)s --flip fen.txt
  %(prog)s --palette basic --glyphs ascii fen.txt
"""

NO_FEN_MESSAGE = "No FEN string provided or not readable."

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='A simple FEN viewer for the terminal.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog='fencat'
    )

    parser.add_argument('file', nargs='?', metavar='FILE',
                        help='File containing a FEN string (default: stdin)')
    parser.add_argument('--flip', '-f', action='store_true', default=None,
                        help="Show the board from Black's side")

    # Display configuration
    parser.add_argument('--config', metavar='PATH',
                        help='TOML configuration file (default: ~/.config/fencat/fencat.toml)')
    parser.add_argument('--palette',
                        help='Color palette (built-in: classic, basic)')
    parser.add_argument('--glyphs', choices=list(GLYPH_SETS),
                        help='Piece glyph set')
    parser.add_argument('--active-color', choices=[option.value for option in ActiveColorDisplay],
                        help='When to print the side to move (default: known)')
    parser.add_argument('--lenient', action='store_true',
                        help='Render ranks that are not 8 squares wide instead of failing')
    parser.add_argument('--list-palettes', action='store_true',
                        help='List available palettes and exit')

    # Logging configuration
    parser.add_argument('--log-level', default='WARNING', choices=LOG_LEVELS,
                        help='Set the logging level (default: WARNING)')
    parser.add_argument('--log-file', metavar='NAME',
                        help='Also log to NAME in the log directory')

    parser.epilog = USAGE_EPILOG % {'prog': parser.prog}
    return parser.parse_args(argv)

def read_input(path: Optional[str], stdin: TextIO) -> str:
    """
    Read the whole input text.

    :param path: File to read, or None for stdin
    :param stdin: Stream used when no file is given
    :return: Input text
    :raises OSError: if the file cannot be read
    """
    if path is None or path == '-':
        return stdin.read()
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return f.read()

def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Main entry point."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = parse_args(argv)
    if not constants.TESTING:
        constants.init_production()
    configure_logging(log_level=args.log_level, log_filename=args.log_file)

    try:
        config = init_display_config(args.config)
        if args.list_palettes:
            for name in sorted(config.palettes):
                marker = " (default)" if name == config.display.palette else ""
                print(f"{name}{marker}", file=stdout)
            return 0

        options = config.render_options(
            palette=args.palette,
            glyphs=args.glyphs,
            active_color=args.active_color,
            strict=False if args.lenient else None
        )
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Error: {e}", file=stderr)
        return 1

    flip = config.display.flip if args.flip is None else args.flip

    try:
        text = read_input(args.file, stdin)
    except OSError as e:
        logger.error(f"Cannot read {args.file}: {e}")
        print(NO_FEN_MESSAGE, file=stderr)
        print(f"Cannot read {args.file}: {e.strerror or e}", file=stderr)
        return 1

    try:
        board = parse_fen(text, strict=options.strict)
    except NoFenFound as e:
        logger.error(str(e))
        print(NO_FEN_MESSAGE, file=stderr)
        print(USAGE_EPILOG % {'prog': 'fencat'}, file=stderr)
        return 1
    except (MalformedPlacement, MalformedRank) as e:
        logger.error(f"Malformed board: {e}")
        print(f"Error: {e}", file=stderr)
        return 1

    for line in format_board(board, flip=flip, options=options):
        print(line, file=stdout)
    return 0

def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)

if __name__ == '__main__':
    run()
