"""
Round outcomes and settlement.

Settlement happens at three points of a round:
    1. After the opening deal, when the player holds 21   -> settle_blackjack()
    2. During the player's turn, on a bust                -> Outcome.PLAYER_BUST
    3. After the dealer stops drawing                     -> settle_dealer_turn()

The dealer draws until its score reaches the player's, so when the dealer
stands without busting its score is always >= the player's.

PLAYER_BLACKJACK (player 21 off the deal), DEALER_BUST and PLAYER_WIN are all
player wins; PLAYER_WINS groups them.
"""

from __future__ import annotations

from enum import Enum, auto

from .hand import BLACKJACK


class Outcome(Enum):
    PLAYER_BLACKJACK = auto()
    PLAYER_BUST = auto()
    DEALER_BLACKJACK = auto()
    DEALER_BUST = auto()
    PLAYER_WIN = auto()
    DEALER_WIN = auto()
    PUSH = auto()


# Message printed when the round ends on each outcome.
OUTCOME_MESSAGES: dict[Outcome, str] = {
    Outcome.PLAYER_BLACKJACK: 'YOU WIN!',
    Outcome.PLAYER_BUST: 'BUST! YOU LOSE!',
    Outcome.DEALER_BLACKJACK: 'BLACKJACK! YOU LOSE!',
    Outcome.DEALER_BUST: 'BUST! YOU WIN!',
    Outcome.PLAYER_WIN: 'YOU WIN!',
    Outcome.DEALER_WIN: 'YOU LOSE!',
    Outcome.PUSH: 'PUSH!',
}

PLAYER_WINS: frozenset[Outcome] = frozenset({
    Outcome.PLAYER_BLACKJACK, Outcome.DEALER_BUST, Outcome.PLAYER_WIN,
})
DEALER_WINS: frozenset[Outcome] = frozenset({
    Outcome.PLAYER_BUST, Outcome.DEALER_BLACKJACK, Outcome.DEALER_WIN,
})

# A push straight off the opening deal is announced differently.
DOUBLE_BLACKJACK_MESSAGE: str = 'BLACKJACK! PUSH!'


def settle_blackjack(dealer_score: int) -> Outcome:
    """Settle a round where the player was dealt 21.

    Examples:
        >>> settle_blackjack(16)
        <Outcome.PLAYER_BLACKJACK: 1>
        >>> settle_blackjack(21).name
        'PUSH'
    """
    if dealer_score == BLACKJACK:
        return Outcome.PUSH
    return Outcome.PLAYER_BLACKJACK


def settle_dealer_turn(player_score: int, dealer_score: int) -> Outcome:
    """Settle a round after the dealer has finished drawing.

    Args:
        player_score: Player's final score (<= 21, a bust never gets here).
        dealer_score: Dealer's final score.

    Returns:
        PUSH or DEALER_WIN at dealer 21, DEALER_BUST above 21, otherwise a
        plain comparison (the dealer is never below the player here, but a
        lower dealer score still settles as PLAYER_WIN).
    """
    if dealer_score == BLACKJACK:
        return Outcome.PUSH if player_score == BLACKJACK else Outcome.DEALER_WIN
    if dealer_score > BLACKJACK:
        return Outcome.DEALER_BUST
    if dealer_score > player_score:
        return Outcome.DEALER_WIN
    if dealer_score == player_score:
        return Outcome.PUSH
    return Outcome.PLAYER_WIN
