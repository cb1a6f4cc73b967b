"""Locate the FEN piece-placement field inside arbitrary text."""

import re
from dataclasses import dataclass
from typing import Optional

from common.base.logging_config import get_logger
logger = get_logger(__name__)

PIECE_LETTERS = 'rnbqkpRNBQKP'

# Eight rank groups joined by seven slashes. No letter or digit may touch the
# field on either side, and a trailing "/" means a ninth rank, so
# "8/8/8/8/8/8/8/89" or ".../RNBXKBNR" is a miss instead of a truncated match.
FIELD_PATTERN = re.compile(
    fr'(?<![A-Za-z0-9])'
    fr'((?:[{PIECE_LETTERS}1-8]+/){{7}}[{PIECE_LETTERS}1-8]+)'
    fr'(?![A-Za-z0-9/])'
)

# A rank group and slash right before a candidate field, as in a ninth rank.
# Other text ending in "/" (a URL path, say) does not count.
RANK_BEFORE_PATTERN = re.compile(fr'(?<![A-Za-z0-9])[{PIECE_LETTERS}0-9]+/$')

# Side-to-move token: whitespace, then a "w" or "b" not followed by a letter or digit
COLOR_PATTERN = re.compile(r'\s+([wb])(?![A-Za-z0-9])')

PREVIEW_LENGTH = 40

class NoFenFound(ValueError):
    """Raised when the input holds no piece-placement field."""
    def __init__(self, text: str):
        self.preview = text[:PREVIEW_LENGTH]
        if not text.strip():
            message = "No FEN string found: input is empty"
        else:
            suffix = "..." if len(text) > PREVIEW_LENGTH else ""
            message = f"No FEN string found in input: {self.preview!r}{suffix}"
        super().__init__(message)

@dataclass(frozen=True)
class FenMatch:
    """Result of a successful extraction."""
    placement: str
    color_token: Optional[str] = None
    start: int = 0
    end: int = 0

def find_placement(text: str) -> Optional[re.Match]:
    """Grammar scan: return the first piece-placement match, or None."""
    pos = 0
    while True:
        match = FIELD_PATTERN.search(text, pos)
        if match is None:
            return None
        if not RANK_BEFORE_PATTERN.search(text, 0, match.start()):
            return match
        pos = match.start() + 1

def parse_color_token(text: str, pos: int) -> Optional[str]:
    """
    Parse the optional side-to-move token that follows the field.

    :param text: Full input text
    :param pos: Index just past the piece-placement field
    :return: "w", "b" or None
    """
    match = COLOR_PATTERN.match(text, pos)
    return match.group(1) if match else None

def extract_fen(text: str) -> FenMatch:
    """
    Extract the first piece-placement field and its optional color token.

    Text before and after the field is ignored, as are any later fields.

    :param text: Arbitrary input text
    :return: FenMatch describing the field
    :raises NoFenFound: if the text holds no piece-placement field
    """
    match = find_placement(text)
    if match is None:
        raise NoFenFound(text)

    color_token = parse_color_token(text, match.end())
    logger.debug(f"Found placement {match.group(1)!r} at {match.start()}, color token {color_token!r}")
    return FenMatch(
        placement=match.group(1),
        color_token=color_token,
        start=match.start(),
        end=match.end()
    )

def is_fen(text: str) -> bool:
    """Whether the text contains a piece-placement field."""
    return find_placement(text) is not None
