"""Terminal styling of single board squares.

Each square becomes a 3-column cell wrapped in ANSI SGR escape sequences:
background tone by parity, foreground tone by piece color, then a reset so
the styling never leaks into the rank labels or the line terminator.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from common.base.logging_config import get_logger
from fencat.board import Color, Square

logger = get_logger(__name__)

ESC = "\x1b"
RESET = f"{ESC}[0m"
BLANK_CELL = "   "

SGR_PATTERN = re.compile(r'^\d{1,3}(;\d{1,3})*$')

def sgr(params: str) -> str:
    """
    Build an SGR escape sequence.

    :param params: Parameter string such as "48;5;249"
    :return: Escape sequence, e.g. "\\x1b[48;5;249m"
    """
    return f"{ESC}[{params}m"

@dataclass(frozen=True)
class Palette:
    """Colors used for one board, as SGR parameter strings."""
    name: str
    light_background: str
    dark_background: str
    white_piece: str
    black_piece: str

    def background(self, parity: int) -> str:
        """Background SGR parameters for a square parity (0 = light)."""
        return self.light_background if parity % 2 == 0 else self.dark_background

    def foreground(self, color: Color) -> str:
        """Foreground SGR parameters for a piece color."""
        return self.white_piece if color is Color.WHITE else self.black_piece

    def validate(self) -> None:
        """
        Check every field is a well-formed SGR parameter string.

        :raises ValueError: if a field is malformed
        """
        for field_name in ('light_background', 'dark_background', 'white_piece', 'black_piece'):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not SGR_PATTERN.match(value):
                raise ValueError(f"Palette '{self.name}': invalid SGR value for {field_name}: {value!r}")

# Grey 256-color board; both piece tones stay readable on either square.
CLASSIC = Palette(
    name="classic",
    light_background="48;5;249",
    dark_background="48;5;246",
    white_piece="38;5;231",
    black_piece="38;5;0",
)

# 16-color fallback for terminals without 256-color support
BASIC = Palette(
    name="basic",
    light_background="47",
    dark_background="100",
    white_piece="97",
    black_piece="30",
)

PALETTES: Mapping[str, Palette] = MappingProxyType({
    CLASSIC.name: CLASSIC,
    BASIC.name: BASIC,
})

DEFAULT_PALETTE = CLASSIC.name

# U+FE0E keeps the black pawn from turning into a double-width emoji.
_PAWN = "\u265f\ufe0e"

GLYPH_SETS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    'unicode': MappingProxyType({
        'K': '♔', 'Q': '♕', 'R': '♖', 'B': '♗', 'N': '♘', 'P': '♙',  # White pieces
        'k': '♚', 'q': '♛', 'r': '♜', 'b': '♝', 'n': '♞', 'p': _PAWN,  # Black pieces
    }),
    'solid': MappingProxyType({
        'K': '♚', 'Q': '♛', 'R': '♜', 'B': '♝', 'N': '♞', 'P': _PAWN,
        'k': '♚', 'q': '♛', 'r': '♜', 'b': '♝', 'n': '♞', 'p': _PAWN,
    }),
    'ascii': MappingProxyType({letter: letter for letter in 'KQRBNPkqrbnp'}),
})

DEFAULT_GLYPHS = 'unicode'

def get_piece_map(glyph_set: str = DEFAULT_GLYPHS) -> Mapping[str, str]:
    """
    Get mapping of FEN piece letters to display glyphs.

    :param glyph_set: Name of a built-in glyph set
    :return: Read-only mapping of the 12 piece letters
    :raises KeyError: for an unknown glyph set
    """
    return GLYPH_SETS[glyph_set]

def get_palette(name: str = DEFAULT_PALETTE) -> Palette:
    """
    Get a built-in palette by name.

    :raises KeyError: for an unknown palette
    """
    return PALETTES[name]

def render_square(square: Square, parity: int, palette: Palette = CLASSIC,
                  glyphs: Mapping[str, str] = GLYPH_SETS[DEFAULT_GLYPHS]) -> str:
    """
    Render one square as a styled 3-column cell.

    :param square: Square to draw
    :param parity: 0 for a light square, 1 for a dark one
    :param palette: Colors to use
    :param glyphs: Mapping of FEN letters to glyphs
    :return: Background, optional foreground, cell text and reset
    """
    background = sgr(palette.background(parity))
    if square.piece is None:
        return f"{background}{BLANK_CELL}{RESET}"

    glyph = glyphs.get(square.piece.fen)
    if not glyph:
        logger.debug(f"No glyph for {square.piece.fen!r}, drawing a blank cell")
        return f"{background}{BLANK_CELL}{RESET}"

    foreground = sgr(palette.foreground(square.piece.color))
    return f"{background}{foreground} {glyph} {RESET}"
