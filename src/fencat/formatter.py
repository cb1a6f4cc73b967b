"""Lay out a board as printable terminal lines."""

import enum
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from fencat.board import BOARD_SIZE, FILES, Board, Square
from fencat.renderer import (
    CLASSIC, DEFAULT_GLYPHS, GLYPH_SETS, Palette, render_square
)

class ActiveColorDisplay(enum.Enum):
    """When to print the trailing "Active color" line."""
    ALWAYS = "always"
    KNOWN = "known"
    NEVER = "never"

@dataclass(frozen=True)
class RenderOptions:
    """Everything the formatter needs besides the board and orientation."""
    palette: Palette = CLASSIC
    glyphs: Mapping[str, str] = field(default_factory=lambda: GLYPH_SETS[DEFAULT_GLYPHS])
    active_color: ActiveColorDisplay = ActiveColorDisplay.KNOWN
    strict: bool = True

DEFAULT_OPTIONS = RenderOptions()

GridCell = Tuple[int, int, Square]

def file_labels(flip: bool = False) -> List[str]:
    """File letters left to right: a..h, or h..a when flipped."""
    labels = list(FILES)
    return labels[::-1] if flip else labels

def rank_labels(flip: bool = False) -> List[int]:
    """Rank numbers top to bottom: 8..1, or 1..8 when flipped."""
    if flip:
        return [row_index + 1 for row_index in range(BOARD_SIZE)]
    return [BOARD_SIZE - row_index for row_index in range(BOARD_SIZE)]

def display_grid(board: Board, flip: bool = False) -> List[List[GridCell]]:
    """
    Squares in screen order, each tagged with its absolute coordinates.

    :param board: Board to lay out
    :param flip: Show the board from Black's side
    :return: Rows top to bottom of (rank_index, file_index, square)
    """
    rows = []
    for rank_index, squares in enumerate(board.ranks):
        row = [(rank_index, file_index, square) for file_index, square in enumerate(squares)]
        rows.append(row[::-1] if flip else row)
    return rows[::-1] if flip else rows

def format_header(flip: bool = False) -> str:
    """File label line, aligned with the centre of each 3-column cell."""
    return "   " + "  ".join(file_labels(flip))

def format_board(board: Board, flip: bool = False,
                 options: Optional[RenderOptions] = None) -> List[str]:
    """
    Format a board for the terminal.

    Parity is taken from absolute coordinates, so a square keeps its shade
    whichever way the board faces.

    :param board: Board to format
    :param flip: Show the board from Black's side
    :param options: Palette, glyphs and active-color policy
    :return: Header, 8 rank lines, footer and the optional active-color line
    """
    options = options or DEFAULT_OPTIONS
    header = format_header(flip)

    lines = [header]
    for label, row in zip(rank_labels(flip), display_grid(board, flip)):
        cells = "".join(
            render_square(square, Board.parity(rank_index, file_index),
                          options.palette, options.glyphs)
            for rank_index, file_index, square in row
        )
        lines.append(f"{label} {cells} {label}")
    lines.append(header)

    if options.active_color is ActiveColorDisplay.ALWAYS or (
            options.active_color is ActiveColorDisplay.KNOWN and board.active_color.is_known):
        lines.append(f"Active color: {board.active_color.value}")

    return lines
