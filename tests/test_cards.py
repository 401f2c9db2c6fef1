"""Tests for asciijack/engine/cards.py — rank table, card faces, deck composition."""

from __future__ import annotations

import pytest

from asciijack.engine.cards import (
    ACE_POINTS,
    DECK_SIZE,
    NUM_RANKS,
    RANK_NAMES,
    RANK_POINTS,
    Card,
    CardFace,
    build_deck,
    hand_to_str,
    rank_counts,
)
from tests.conftest import FACES, hand, make_face


class TestRankTable:
    def test_thirteen_ranks(self):
        assert NUM_RANKS == 13
        assert len(RANK_POINTS) == 13

    def test_ace_first_two_last(self):
        assert RANK_NAMES[0] == 'A'
        assert RANK_NAMES[-1] == '2'

    def test_points_in_loader_order(self):
        assert RANK_POINTS == (11, 10, 10, 10, 10, 9, 8, 7, 6, 5, 4, 3, 2)

    def test_deck_size(self):
        assert DECK_SIZE == 52


class TestCardFace:
    def test_dimensions(self):
        face = CardFace(('ABCDE', 'FGHIJ', 'KLMNO'))
        assert face.width == 5
        assert face.height == 3

    def test_from_text_strips_final_newline(self):
        face = CardFace.from_text('ABCDE\nFGHIJ\n')
        assert face.lines == ('ABCDE', 'FGHIJ')

    def test_from_text_without_final_newline(self):
        face = CardFace.from_text('ABCDE\nFGHIJ')
        assert face.lines == ('ABCDE', 'FGHIJ')

    def test_ragged_lines_raise(self):
        with pytest.raises(ValueError, match="wide"):
            CardFace(('ABCDE', 'FGH'))

    def test_empty_face_raises(self):
        with pytest.raises(ValueError):
            CardFace(())

    def test_empty_text_raises(self):
        with pytest.raises(ValueError):
            CardFace.from_text('')

    def test_embedded_newline_raises(self):
        with pytest.raises(ValueError, match="newline"):
            CardFace(('AB\nC', 'DEFG'))

    def test_blank_interior_line_is_ragged(self):
        with pytest.raises(ValueError):
            CardFace.from_text('ABC\n\nDEF\n')


class TestCard:
    def test_ace_flag(self):
        ace, king = hand('A', 'K')
        assert ace.is_ace
        assert not king.is_ace

    def test_ace_points_constant(self):
        assert hand('A')[0].points == ACE_POINTS == 11

    def test_cards_are_immutable(self):
        card = hand('7')[0]
        with pytest.raises(AttributeError):
            card.points = 8  # type: ignore[misc]

    def test_equal_by_value(self):
        face = make_face('Q')
        assert Card('Q', 10, face) == Card('Q', 10, face)


class TestBuildDeck:
    def test_fifty_two_cards(self):
        assert len(build_deck(FACES)) == 52

    def test_four_of_each_rank(self):
        counts = rank_counts(build_deck(FACES))
        assert set(counts) == set(RANK_NAMES)
        assert all(n == 4 for n in counts.values())

    def test_points_follow_rank(self):
        for card in build_deck(FACES):
            assert card.points == RANK_POINTS[RANK_NAMES.index(card.rank)]

    def test_faces_are_shared_not_copied(self):
        deck = build_deck(FACES)
        aces = [c for c in deck if c.rank == 'A']
        assert all(c.face is FACES[0] for c in aces)

    def test_wrong_face_count_raises(self):
        with pytest.raises(ValueError, match="13"):
            build_deck(FACES[:12])

    def test_mismatched_face_size_raises(self):
        faces = FACES[:12] + (make_face('2', width=6),)
        with pytest.raises(ValueError, match="expected 5x2"):
            build_deck(faces)


class TestHandToStr:
    def test_basic(self):
        assert hand_to_str(hand('A', '10', '3')) == 'A 10 3'

    def test_empty(self):
        assert hand_to_str([]) == ''
