"""
Round state machine: one game of Blackjack, player against dealer.

Flow:
    DEALING → (player 21? settle) → PLAYER_TURN → DEALER_TURN → RESOLVED

Rules modelled here:
    - Opening deal is two cards to the player, then two to the dealer, taken
      from the deck in order (fixed seed => reproducible round).
    - A player 21 off the deal settles at once: win, or push if the dealer
      also holds 21.
    - Player hits or stands; unrecognised commands are ignored and the prompt
      repeats. Reaching 21 ends the turn; going over 21 loses at once.
    - Dealer with a two-card 21 wins outright. Otherwise the dealer draws
      until its score reaches the player's score (not draw-to-17).

Every step function takes the shared RoundContext, mutates it, and returns
an Outcome when the round resolves at that step (None otherwise).
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, Sequence, TextIO

from .cards import Card, CardFace, build_deck, hand_to_str
from .deck import Deck, deal
from .hand import BLACKJACK, Hand, is_bust
from .render import show_hand
from .rules import (
    DOUBLE_BLACKJACK_MESSAGE,
    OUTCOME_MESSAGES,
    Outcome,
    settle_blackjack,
    settle_dealer_turn,
)

logger = logging.getLogger(__name__)


# ─── Enumerations ─────────────────────────────────────────────────────────────

class Phase(Enum):
    DEALING = auto()
    PLAYER_TURN = auto()
    DEALER_TURN = auto()
    RESOLVED = auto()


class PlayerAction(Enum):
    HIT = auto()
    STAND = auto()


COMMANDS: dict[str, PlayerAction] = {
    'h': PlayerAction.HIT,
    's': PlayerAction.STAND,
}

PROMPT: str = 'HIT (h) or STAND (s)'
BLACKJACK_ANNOUNCEMENT: str = 'BLACKJACK!'
DEALER_TURN_ANNOUNCEMENT: str = "DEALER'S TURN"
DEALER_DRAW_ANNOUNCEMENT: str = 'DEALER GETS ANOTHER CARD..'


class InputClosedError(EOFError):
    """Raised when the command stream ends before the player's turn is over."""


def parse_command(token: str) -> PlayerAction | None:
    """Map a command token to an action; None for anything unrecognised.

    Examples:
        >>> parse_command('h')
        <PlayerAction.HIT: 1>
        >>> parse_command('hit') is None
        True
    """
    return COMMANDS.get(token)


def read_commands(stream: TextIO | None = None) -> Iterator[str]:
    """Yield whitespace-delimited tokens from `stream` (stdin by default).

    Lines are read lazily, so a prompt written before each next() call is
    visible before the read blocks.
    """
    source = stream if stream is not None else sys.stdin
    for line in source:
        yield from line.split()


# ─── State / Result types ──────────────────────────────────────────────────────

@dataclass
class RoundContext:
    """Everything one round mutates: the deck cursor, both hands and the phase.

    `out` is the text stream the round is drawn on (stdout when None).
    """
    deck: Deck
    player: Hand = field(default_factory=Hand)
    dealer: Hand = field(default_factory=Hand)
    phase: Phase = Phase.DEALING
    outcome: Outcome | None = None
    seed: int | None = None
    out: TextIO | None = None

    def say(self, text: str) -> None:
        print(text, file=self.out if self.out is not None else sys.stdout)

    def show_player(self) -> None:
        show_hand(self.player.cards, len(self.player), self.player.score,
                  is_player=True, out=self.out)

    def show_dealer(self, count: int, score: int | None = None) -> None:
        show_hand(self.dealer.cards, count,
                  self.dealer.score if score is None else score,
                  is_player=False, out=self.out)

    def enter(self, phase: Phase) -> None:
        logger.debug("Phase %s -> %s", self.phase.name, phase.name)
        self.phase = phase

    def resolve(self, outcome: Outcome, message: str | None = None) -> Outcome:
        self.say(OUTCOME_MESSAGES[outcome] if message is None else message)
        self.outcome = outcome
        self.enter(Phase.RESOLVED)
        logger.debug(
            "Round resolved: %s (player %d, dealer %d)",
            outcome.name, self.player.score, self.dealer.score,
        )
        return outcome


@dataclass(frozen=True)
class RoundResult:
    """Summary of a finished round."""
    outcome: Outcome
    player_cards: tuple[Card, ...]
    dealer_cards: tuple[Card, ...]
    player_score: int
    dealer_score: int
    seed: int | None = None

    @classmethod
    def from_context(cls, context: RoundContext) -> RoundResult:
        if context.outcome is None:
            raise ValueError("Round has not been resolved yet.")
        return cls(
            outcome=context.outcome,
            player_cards=tuple(context.player.cards),
            dealer_cards=tuple(context.dealer.cards),
            player_score=context.player.score,
            dealer_score=context.dealer.score,
            seed=context.seed,
        )

    def __str__(self) -> str:
        return (
            f"Player: {hand_to_str(self.player_cards)} (score={self.player_score}) | "
            f"Dealer: {hand_to_str(self.dealer_cards)} (score={self.dealer_score}) | "
            f"{self.outcome.name}"
        )


def _expect_phase(context: RoundContext, phase: Phase) -> None:
    if context.phase is not phase:
        raise ValueError(
            f"Step requires phase {phase.name}, round is in {context.phase.name}."
        )


# ─── Round setup ──────────────────────────────────────────────────────────────

def new_round(
    faces: Sequence[CardFace],
    seed: int,
    out: TextIO | None = None,
) -> RoundContext:
    """Build a fresh 52-card deck from the 13 rank faces and shuffle it with `seed`."""
    deck = Deck(build_deck(faces)).shuffled(seed)
    return RoundContext(deck=deck, seed=seed, out=out)


# ─── Step functions ───────────────────────────────────────────────────────────

def deal_opening(context: RoundContext) -> None:
    """Deal two cards to the player then two to the dealer, and show them.

    Only the dealer's first card is shown, scored at its raw point value.
    """
    _expect_phase(context, Phase.DEALING)
    deal(context.deck, context.player, 2)
    deal(context.deck, context.dealer, 2)

    up_card = context.dealer.cards[0]
    context.show_dealer(1, score=up_card.points)
    context.show_player()


def check_blackjack(context: RoundContext) -> Outcome | None:
    """Settle a player 21 off the deal, otherwise hand the turn to the player."""
    _expect_phase(context, Phase.DEALING)
    if context.player.score != BLACKJACK:
        context.enter(Phase.PLAYER_TURN)
        return None

    context.say(BLACKJACK_ANNOUNCEMENT)
    context.show_dealer(2)
    outcome = settle_blackjack(context.dealer.score)
    if outcome is Outcome.PUSH:
        return context.resolve(outcome, DOUBLE_BLACKJACK_MESSAGE)
    return context.resolve(outcome)


def player_turn(context: RoundContext, commands: Iterable[str]) -> Outcome | None:
    """Read hit/stand commands until the player stands, reaches 21 or busts.

    Tokens other than 'h' and 's' are skipped without comment; the loop just
    prompts again.

    Raises:
        InputClosedError: If `commands` runs out first.
    """
    _expect_phase(context, Phase.PLAYER_TURN)
    tokens = iter(commands)

    while True:
        context.say(PROMPT)
        try:
            token = next(tokens)
        except StopIteration:
            raise InputClosedError("No more commands before the player stood.") from None

        action = parse_command(token)
        if action is None:
            logger.debug("Ignoring unrecognised command %r", token)
            continue

        if action is PlayerAction.STAND:
            break

        deal(context.deck, context.player, 1)
        context.show_player()
        if context.player.score == BLACKJACK:
            break
        if is_bust(context.player.score):
            return context.resolve(Outcome.PLAYER_BUST)

    context.enter(Phase.DEALER_TURN)
    return None


def dealer_turn(context: RoundContext) -> Outcome:
    """Reveal the dealer's hand and draw until it reaches the player's score."""
    _expect_phase(context, Phase.DEALER_TURN)
    player, dealer = context.player, context.dealer

    context.say(DEALER_TURN_ANNOUNCEMENT)
    context.show_dealer(2)
    if dealer.is_natural():
        return context.resolve(Outcome.DEALER_BLACKJACK)

    while dealer.score < player.score:
        context.say(DEALER_DRAW_ANNOUNCEMENT)
        deal(context.deck, dealer, 1)
        context.show_dealer(len(dealer))

    return context.resolve(settle_dealer_turn(player.score, dealer.score))


# ─── Core game loop ───────────────────────────────────────────────────────────

def play_round(context: RoundContext, commands: Iterable[str] | None = None) -> RoundResult:
    """Play one round to completion and return its result.

    Args:
        context: A fresh round (phase DEALING), e.g. from new_round().
        commands: Player command tokens. Defaults to tokens read from stdin.

    Returns:
        RoundResult for the resolved round.

    Raises:
        InputClosedError: If the commands run out during the player's turn.
    """
    if commands is None:
        commands = read_commands()

    deal_opening(context)
    if check_blackjack(context) is None:
        if player_turn(context, commands) is None:
            dealer_turn(context)

    return RoundResult.from_context(context)
