"""
Hand scoring with the incremental ace rule.

An ace is valued at the moment it is dealt, using the score accumulated so
far:
    score before ace <= 10  ->  ace counts 11
    score before ace  > 10  ->  ace counts 1

The value is never revisited, so the result depends on deal order:
    A, 9     -> 11 + 9       = 20
    9, A     -> 9 + 11       = 20
    A, 9, A  -> 11 + 9 + 1   = 21
    A, 5, 9  -> 11 + 5 + 9   = 25   (bust, although A=1 would give 15)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .cards import Card

BLACKJACK: int = 21


def ace_points(score_before: int) -> int:
    """Return what an ace adds to a hand currently scoring `score_before`.

    Examples:
        >>> ace_points(0)
        11
        >>> ace_points(10)
        11
        >>> ace_points(11)
        1
    """
    return 11 if score_before <= 10 else 1


def card_points(card: Card, score_before: int) -> int:
    """Return what `card` adds to a hand currently scoring `score_before`."""
    if card.is_ace:
        return ace_points(score_before)
    return card.points


def score_cards(cards: Iterable[Card]) -> int:
    """Score cards as if dealt one by one in the given order."""
    score = 0
    for card in cards:
        score += card_points(card, score)
    return score


def is_bust(score: int) -> bool:
    return score > BLACKJACK


@dataclass
class Hand:
    """Cards dealt to one side, in deal order, with their running score."""
    cards: list[Card] = field(default_factory=list)
    score: int = 0

    def __len__(self) -> int:
        return len(self.cards)

    def add(self, card: Card) -> None:
        # Score first: the ace rule looks at the score before this card.
        self.score += card_points(card, self.score)
        self.cards.append(card)

    def is_natural(self) -> bool:
        """True for exactly two cards scoring 21."""
        return len(self.cards) == 2 and self.score == BLACKJACK
