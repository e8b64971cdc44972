"""
Unit tests for the data models (Entrant, Slot, Match).
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from brackets.models import Entrant, Match, Slot, BYE, SEEDED, as_entrant


class TestEntrant:
    """Tests for the Entrant model."""

    def test_entrant_creation_with_name(self):
        entrant = Entrant(name="Alice")
        assert entrant.name == "Alice"
        assert entrant.seed is None
        assert entrant.attributes == {}

    def test_entrant_creation_with_seed_and_attributes(self):
        entrant = Entrant(name="Alice", seed=3, attributes={"club": "North"})
        assert entrant.seed == 3
        assert entrant.attributes["club"] == "North"

    def test_entrant_repr(self):
        repr_str = repr(Entrant(name="Alice", seed=1))
        assert "Alice" in repr_str
        assert "1" in repr_str

    def test_as_entrant_accepts_dict_and_name(self):
        entrant = as_entrant({'name': 'Bob', 'seed': 2})
        assert (entrant.name, entrant.seed) == ('Bob', 2)
        assert as_entrant('Carol').name == 'Carol'
        alice = Entrant(name="Alice")
        assert as_entrant(alice) is alice


class TestSlot:
    """Tests for the Slot model."""

    def test_seeded_slot(self):
        slot = Slot.seeded(0, 2, 4, "Dave")
        assert slot.kind == SEEDED
        assert slot.is_seeded
        assert slot.visible

    def test_bye_slot_is_hidden(self):
        slot = Slot.bye(0, 0, seed=1)
        assert slot.kind == BYE
        assert slot.name is None
        assert not slot.visible

    def test_pending_and_champion_visible(self):
        assert Slot.winner_pending(1, 0).visible
        assert Slot.champion(3).visible

    def test_carries_seed(self):
        assert Slot.bye(0, 0, seed=2).carries_seed(5)
        assert not Slot.bye(0, 1).carries_seed(5)
        assert not Slot.bye(0, 1, seed=8).carries_seed(5)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            Slot(0, 0, 'ghost')

    def test_equality(self):
        assert Slot.seeded(0, 1, 2, "Bob") == Slot.seeded(0, 1, 2, "Bob")
        assert Slot.seeded(0, 1, 2, "Bob") != Slot.bye(0, 1, seed=2)

    def test_summary_is_one_based(self):
        assert Slot.winner_pending(1, 0).to_summary() == {
            'position': 1, 'type': 'winner', 'seed': None, 'name': None, 'visible': True,
        }


class TestMatch:
    """Tests for the derived Match model."""

    def test_real_match(self):
        match = Match(0, 0, Slot.seeded(0, 0, 4, "Dave"), Slot.seeded(0, 1, 5, "Erin"))
        assert match.is_real_match
        assert match.visible

    def test_bye_pair_not_real(self):
        match = Match(0, 0, Slot.bye(0, 0, seed=1), Slot.bye(0, 1))
        assert not match.is_real_match
        assert not match.visible

    def test_later_round_always_real(self):
        match = Match(1, 0, Slot.seeded(1, 0, 1, "Alice"), Slot.winner_pending(1, 1))
        assert match.is_real_match

    def test_to_dict(self):
        match = Match(0, 1, Slot.seeded(0, 2, 4, "Dave"), Slot.seeded(0, 3, 5, "Erin"))
        data = match.to_dict()
        assert data['match_index'] == 1
        assert data['position2']['name'] == "Erin"
