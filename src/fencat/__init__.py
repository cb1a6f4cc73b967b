"""fencat - render FEN chess positions as colored terminal boards."""

from typing import List, Optional

from .board import ActiveColor, Board, MalformedPlacement, MalformedRank, build_board, decode_rank
from .extractor import FenMatch, NoFenFound, extract_fen, is_fen
from .formatter import ActiveColorDisplay, RenderOptions, format_board
from .renderer import Palette, get_palette, get_piece_map, render_square

__version__ = "1.0.0"

def parse_fen(text: str, strict: bool = True) -> Board:
    """Extract the first FEN field in *text* and build its board."""
    match = extract_fen(text)
    return build_board(match.placement, match.color_token, strict=strict)

def render_fen(text: str, flip: bool = False,
               options: Optional[RenderOptions] = None) -> List[str]:
    """Main entry point: raw text in, printable board lines out."""
    options = options or RenderOptions()
    board = parse_fen(text, strict=options.strict)
    return format_board(board, flip=flip, options=options)

__all__ = [
    'ActiveColor', 'ActiveColorDisplay', 'Board', 'FenMatch', 'MalformedPlacement',
    'MalformedRank', 'NoFenFound', 'Palette', 'RenderOptions', 'build_board',
    'decode_rank', 'extract_fen', 'format_board', 'get_palette', 'get_piece_map',
    'is_fen', 'parse_fen', 'render_fen', 'render_square',
]
