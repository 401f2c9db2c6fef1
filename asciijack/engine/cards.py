"""
Card constants, card-face art, and deck composition.

A rank is identified by its name; suits are not modeled. Each rank has a fixed
point value:
    ace = 11 (resolved to 1 or 11 when dealt, see hand.py)
    king, queen, jack, 10 = 10
    9 .. 2 = face value

The rank order below is the order in which the 13 faces are supplied by the
art loader: ace, king, queen, jack, 10, 9, ..., 2.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

RANK_NAMES: tuple[str, ...] = (
    'A', 'K', 'Q', 'J', '10', '9', '8', '7', '6', '5', '4', '3', '2',
)
RANK_POINTS: tuple[int, ...] = (11, 10, 10, 10, 10, 9, 8, 7, 6, 5, 4, 3, 2)

NUM_RANKS: int = len(RANK_NAMES)
COPIES_PER_RANK: int = 4
DECK_SIZE: int = NUM_RANKS * COPIES_PER_RANK

ACE_POINTS: int = 11


@dataclass(frozen=True)
class CardFace:
    """Text art for one rank: `height` lines of exactly `width` characters.

    Lines are stored without their trailing newlines so a renderer can index
    a face by row number.
    """
    lines: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.lines:
            raise ValueError("A card face needs at least one line.")
        width = len(self.lines[0])
        for row, line in enumerate(self.lines):
            if '\n' in line:
                raise ValueError(f"Face line {row} contains a newline.")
            if len(line) != width:
                raise ValueError(
                    f"Face line {row} is {len(line)} characters wide, expected {width}."
                )

    @property
    def width(self) -> int:
        return len(self.lines[0])

    @property
    def height(self) -> int:
        return len(self.lines)

    @classmethod
    def from_text(cls, text: str) -> CardFace:
        """Build a face from newline-terminated text.

        Examples:
            >>> CardFace.from_text('ABCDE\\nFGHIJ\\n').lines
            ('ABCDE', 'FGHIJ')
        """
        if text.endswith('\n'):
            text = text[:-1]
        return cls(tuple(text.split('\n')) if text else ())


@dataclass(frozen=True)
class Card:
    """A dealt or undealt card. Only the rank's points and face matter."""
    rank: str
    points: int
    face: CardFace

    @property
    def is_ace(self) -> bool:
        return self.points == ACE_POINTS


def build_deck(faces: Sequence[CardFace]) -> list[Card]:
    """Expand the 13 rank faces into an ordered 52-card list.

    Args:
        faces: One face per rank, in RANK_NAMES order (ace first, 2 last).

    Returns:
        52 cards, four consecutive copies of each rank in RANK_NAMES order.

    Raises:
        ValueError: If the number of faces is not 13 or their dimensions differ.
    """
    if len(faces) != NUM_RANKS:
        raise ValueError(f"Expected {NUM_RANKS} card faces, got {len(faces)}.")
    first = faces[0]
    for name, face in zip(RANK_NAMES, faces):
        if (face.width, face.height) != (first.width, first.height):
            raise ValueError(
                f"Face for {name} is {face.width}x{face.height}, "
                f"expected {first.width}x{first.height}."
            )

    return [
        Card(name, points, face)
        for name, points, face in zip(RANK_NAMES, RANK_POINTS, faces)
        for _ in range(COPIES_PER_RANK)
    ]


def rank_counts(cards: Sequence[Card]) -> Counter[str]:
    """Count cards per rank name. A full deck maps every rank to 4."""
    return Counter(card.rank for card in cards)


def hand_to_str(cards: Sequence[Card]) -> str:
    """Convert a sequence of cards to a short human-readable string, e.g. 'A K 7'."""
    return ' '.join(card.rank for card in cards)
