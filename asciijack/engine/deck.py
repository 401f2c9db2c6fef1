"""
Deck shuffling and bounded dealing.

The deck is an ordered list of exactly 52 cards (4 per rank) plus a cursor:
    cards[:cursor]  have been dealt
    cards[cursor:]  are still available

Composition is fixed at construction; shuffling only changes the order.
Dealing is bounds-checked up front so a deal either moves every requested
card or none of them.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from .cards import COPIES_PER_RANK, DECK_SIZE, RANK_NAMES, Card, rank_counts
from .hand import Hand

logger = logging.getLogger(__name__)

# Generator seeds must be non-negative; negative seeds wrap into [0, 2**64).
SEED_MODULUS: int = 2**64


class DeckExhaustedError(ValueError):
    """Raised when a deal asks for more cards than remain in the deck."""


def shuffle(cards: Sequence[Card], seed: int) -> list[Card]:
    """Return a Fisher-Yates permutation of `cards`, leaving the input untouched.

    Walks i from len-1 down to 1, drawing j uniformly in [0, i] from a NumPy
    PCG64 generator seeded once with `seed`, and swaps positions i and j.
    The same seed always produces the same ordering. Any integer is a valid
    seed, negative ones included.

    Examples:
        >>> shuffle([], 7)
        []
    """
    shuffled = list(cards)
    rng = np.random.default_rng(seed % SEED_MODULUS)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


class Deck:
    """A 52-card deck with a monotonically advancing deal cursor."""

    def __init__(self, cards: Sequence[Card]) -> None:
        if len(cards) != DECK_SIZE:
            raise ValueError(f"A deck holds {DECK_SIZE} cards, got {len(cards)}.")
        counts = rank_counts(cards)
        expected = {name: COPIES_PER_RANK for name in RANK_NAMES}
        if counts != expected:
            raise ValueError(f"Deck must hold {COPIES_PER_RANK} cards of each rank.")
        self._cards: list[Card] = list(cards)
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def cursor(self) -> int:
        """Index of the next undealt card."""
        return self._cursor

    def cards_remaining(self) -> int:
        return len(self._cards) - self._cursor

    def shuffled(self, seed: int) -> Deck:
        """Return a new, undealt deck holding the same cards in shuffled order."""
        logger.debug("Shuffling deck with seed %d", seed)
        return Deck(shuffle(self._cards, seed))

    def draw(self, amount: int = 1) -> list[Card]:
        """Take the next `amount` cards off the deck.

        Raises:
            ValueError: If amount is negative.
            DeckExhaustedError: If fewer than `amount` cards remain. The cursor
                is left unchanged.
        """
        if amount < 0:
            raise ValueError(f"Cannot deal a negative number of cards ({amount}).")
        if self._cursor + amount > len(self._cards):
            raise DeckExhaustedError(
                f"Cannot deal {amount} card(s): only {self.cards_remaining()} left."
            )
        drawn = self._cards[self._cursor:self._cursor + amount]
        self._cursor += amount
        return drawn


def deal(deck: Deck, hand: Hand, amount: int = 1) -> None:
    """Move `amount` cards from the deck cursor into `hand`, scoring each one.

    Cards are appended in deal order and the hand's score is updated card by
    card with the ace rule (see Hand.add).

    Args:
        deck: Deck to deal from; its cursor advances by `amount`.
        hand: Receiving hand, modified in place.
        amount: Number of cards to move.

    Raises:
        DeckExhaustedError: If the deck holds fewer than `amount` cards. Neither
            the deck nor the hand is modified in that case.
    """
    for card in deck.draw(amount):
        hand.add(card)
        logger.debug("Dealt %s (hand score now %d)", card.rank, hand.score)
