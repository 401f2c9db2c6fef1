"""
Shared pytest fixtures for asciijack tests.

Provides small synthetic card faces and helpers for building known hands and
stacked decks by rank name.
"""

from __future__ import annotations

import io

import pytest

from asciijack.engine.cards import (
    RANK_NAMES,
    RANK_POINTS,
    Card,
    CardFace,
    build_deck,
)
from asciijack.engine.deck import Deck
from asciijack.engine.game_state import RoundContext


def make_face(label: str, width: int = 5, height: int = 2) -> CardFace:
    """Build a width x height face whose first line starts with `label`.

    Examples:
        >>> make_face('A').lines
        ('A....', '.....')
    """
    first = label.ljust(width, '.')
    return CardFace((first,) + tuple('.' * width for _ in range(height - 1)))


FACES: tuple[CardFace, ...] = tuple(make_face(name) for name in RANK_NAMES)
CARDS_BY_RANK: dict[str, Card] = {
    name: Card(name, points, face)
    for name, points, face in zip(RANK_NAMES, RANK_POINTS, FACES)
}


def hand(*ranks: str) -> list[Card]:
    """Build a list of cards from rank names.

    Examples:
        >>> [c.points for c in hand('A', 'K', '7')]
        [11, 10, 7]
    """
    return [CARDS_BY_RANK[r] for r in ranks]


def stacked_deck(*top: str) -> Deck:
    """Build a full 52-card deck whose first cards are the given ranks, in order.

    The remaining cards follow in build_deck() order, so the deck always keeps
    four cards of each rank.
    """
    remaining = build_deck(FACES)
    for rank in top:
        remaining.remove(CARDS_BY_RANK[rank])
    return Deck(hand(*top) + remaining)


def stacked_round(*top: str) -> RoundContext:
    """RoundContext on a stacked deck, drawing to an in-memory stream."""
    return RoundContext(deck=stacked_deck(*top), out=io.StringIO())


@pytest.fixture
def faces() -> tuple[CardFace, ...]:
    return FACES


@pytest.fixture
def fresh_deck() -> Deck:
    """Return an unshuffled 52-card deck."""
    return Deck(build_deck(FACES))


@pytest.fixture
def h():
    """Expose the hand() helper as a fixture for convenience."""
    return hand
