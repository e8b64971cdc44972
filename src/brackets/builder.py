"""
Single elimination bracket construction.

The bracket is an array of rounds, each an array of slots. Slots 2p and 2p+1
of round r-1 feed slot p of round r, so no slot keeps a reference to another.
"""
import logging
from typing import Dict, List, Optional, Sequence

from brackets.models import Slot, as_entrant
from brackets.seeding import calculate_bracket_size, calculate_rounds, generate_seed_order

logger = logging.getLogger(__name__)


class BracketBuilder:
    """
    Build the complete slot tree for an ordered list of entrants.

    Entrants are seeded by list position (1-based) unless they carry a seed.
    The tree is computed once in the constructor and is read-only afterwards.
    No validation happens here: an empty list, duplicate seeds or seeds
    outside 1..len(entrants) give unspecified results and must be rejected
    upstream (see brackets.validation).
    """

    def __init__(self, entrants: Sequence):
        self.entrants = [as_entrant(e) for e in entrants]
        self.actual_player_count = len(self.entrants)
        self.bracket_size = calculate_bracket_size(self.actual_player_count)
        self.num_byes = self.bracket_size - self.actual_player_count
        # Playing rounds; the champion round comes on top of these.
        self.num_rounds = calculate_rounds(self.actual_player_count)
        self.seed_order = generate_seed_order(self.bracket_size) if self.bracket_size else []
        self._names = self._map_seeds_to_names()
        self.rounds = self._build_rounds()

        logger.debug(
            "Built bracket: %d entrants, size %d, %d byes, %d rounds",
            self.actual_player_count, self.bracket_size, self.num_byes, self.num_rounds,
        )

    def _map_seeds_to_names(self) -> Dict[int, str]:
        names = {}
        for index, entrant in enumerate(self.entrants):
            seed = entrant.seed if entrant.seed is not None else index + 1
            names[seed] = entrant.name
        return names

    def name_for_seed(self, seed: int) -> Optional[str]:
        return self._names.get(seed)

    def _build_rounds(self) -> List[List[Slot]]:
        rounds = []
        if self.num_rounds > 0:
            rounds.append(self._build_first_round())
            for round_index in range(1, self.num_rounds):
                rounds.append(self._build_next_round(round_index, rounds[round_index - 1]))
        rounds.append([self._build_champion_slot(len(rounds))])
        return rounds

    def _first_round_slot(self, position_index: int, seed: int) -> Slot:
        # Depends only on (seed, player count, byes), never on other slots.
        if seed <= self.num_byes:
            return Slot.bye(0, position_index, seed)
        if seed <= self.actual_player_count:
            return Slot.seeded(0, position_index, seed, self.name_for_seed(seed))
        return Slot.bye(0, position_index)

    def _build_first_round(self) -> List[Slot]:
        return [self._first_round_slot(i, seed) for i, seed in enumerate(self.seed_order)]

    def _advance(self, round_index: int, position_index: int, left: Slot, right: Slot) -> Slot:
        """Work out what reaches slot (round_index, position_index) from its two feeders."""
        count = self.actual_player_count

        if left.is_bye and right.is_bye:
            for side in (left, right):
                if side.carries_seed(count):
                    return Slot.seeded(round_index, position_index, side.seed,
                                       self.name_for_seed(side.seed))
            return Slot.bye(round_index, position_index)

        if left.is_bye or right.is_bye:
            bye_side, other = (left, right) if left.is_bye else (right, left)
            if bye_side.carries_seed(count):
                # Top seed wins by walkover
                return Slot.seeded(round_index, position_index, bye_side.seed,
                                   self.name_for_seed(bye_side.seed))
            if other.is_seeded:
                return Slot.seeded(round_index, position_index, other.seed, other.name)
            return Slot.winner_pending(round_index, position_index)

        return Slot.winner_pending(round_index, position_index)

    def _build_next_round(self, round_index: int, previous: List[Slot]) -> List[Slot]:
        return [
            self._advance(round_index, p, previous[2 * p], previous[2 * p + 1])
            for p in range(len(previous) // 2)
        ]

    def _build_champion_slot(self, round_index: int) -> Slot:
        if self.num_rounds == 0 and self.actual_player_count == 1:
            # A lone entrant is champion without playing.
            seed = self.seed_order[0]
            return Slot.champion(round_index, 0, seed, self.name_for_seed(seed))
        return Slot.champion(round_index)

    @property
    def champion_round_index(self) -> int:
        return len(self.rounds) - 1

    def get_round_label(self, round_index: int) -> str:
        if round_index == self.champion_round_index:
            return 'Champion'
        return f'Round {round_index + 1}'

    def get_all_positions(self, round_index: int) -> List[Slot]:
        """All slots of a round, byes included."""
        return list(self.rounds[round_index])

    def get_visible_positions(self, round_index: int) -> List[Slot]:
        return [slot for slot in self.rounds[round_index] if slot.visible]

    def export_structure(self) -> Dict[str, List[Dict]]:
        """
        Dump the bracket as {round label: [slot summary, ...]}.

        Labels are "Round 1".."Round n" followed by "Champion".
        """
        return {
            self.get_round_label(round_index): [slot.to_summary() for slot in round_slots]
            for round_index, round_slots in enumerate(self.rounds)
        }

    def get_summary(self) -> Dict:
        return {
            'actual_player_count': self.actual_player_count,
            'bracket_size': self.bracket_size,
            'num_byes': self.num_byes,
            'num_rounds': self.num_rounds,
        }

    def __repr__(self):
        return (f"BracketBuilder(entrants={self.actual_player_count}, "
                f"bracket_size={self.bracket_size}, byes={self.num_byes})")
