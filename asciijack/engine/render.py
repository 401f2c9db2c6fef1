"""
Side-by-side card-art compositor.

Each face is a tuple of equal-width lines, so row `r` of a hand is simply the
r-th line of every shown face joined by a two-space gutter:

    faces  ABCDE   KLMNO
           FGHIJ   PQRST

    row 0  'ABCDE  KLMNO'
    row 1  'FGHIJ  PQRST'

A rendered hand is framed by a header, a rule, the composed rows, the score
footer and a closing rule.
"""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from .cards import Card

CARD_GAP: str = '  '
RULE: str = '_' * 60

PLAYER_HEADER: str = "YOUR CARDS:"
DEALER_HEADER: str = "DEALER'S CARDS:"


def render_row(cards: Sequence[Card], row: int) -> str:
    """Compose line `row` of every card face, in hand order."""
    return CARD_GAP.join(card.face.lines[row] for card in cards)


def render_hand(
    cards: Sequence[Card],
    count: int,
    score: int,
    is_player: bool,
) -> str:
    """Render the first `count` cards of a hand as one block of text.

    Args:
        cards: Cards in deal order.
        count: How many of them to show (1 shows only the dealer's up-card).
        score: Score printed in the footer.
        is_player: Selects the "YOUR CARDS" or "DEALER'S CARDS" header.

    Returns:
        The block, newline-terminated.

    Raises:
        ValueError: If count is outside 1..len(cards) or the shown faces do not
            share one height.
    """
    if not 1 <= count <= len(cards):
        raise ValueError(f"Cannot show {count} of {len(cards)} card(s).")
    shown = cards[:count]
    height = shown[0].face.height
    if any(card.face.height != height for card in shown):
        raise ValueError("All card faces in a hand must have the same height.")

    lines = [PLAYER_HEADER if is_player else DEALER_HEADER, '', RULE]
    lines.extend(render_row(shown, row) for row in range(height))
    lines.extend([f"score:{score}", '', RULE])
    return '\n'.join(lines) + '\n'


def show_hand(
    cards: Sequence[Card],
    count: int,
    score: int,
    is_player: bool,
    out: TextIO | None = None,
) -> None:
    """Write render_hand(...) to `out` (stdout by default)."""
    stream = out if out is not None else sys.stdout
    stream.write(render_hand(cards, count, score, is_player))
