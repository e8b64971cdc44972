"""
Winner advancement between adjacent rounds.

Maps "winner of source match" to "destination slot in the next round" so a
renderer or formula writer can place match results. Match indices refer to
renderable_matches() of the source round, which in round 0 has bye pairs
removed.
"""
import logging
from typing import Dict, List

from brackets.builder import BracketBuilder
from brackets.matches import renderable_matches
from brackets.validation import AdvancementError

logger = logging.getLogger(__name__)


def match_code(round_index: int, match_index: int) -> str:
    """Human-facing code for a match, e.g. W1-M3 (both numbers 1-based)."""
    return f"W{round_index + 1}-M{match_index + 1}"


class Advancement:
    """The winner of one source match goes into one destination slot."""

    def __init__(self, source_round: int, source_match_index: int,
                 dest_round: int, dest_match_index: int, dest_position_index: int):
        self.source_round = source_round
        self.source_match_index = source_match_index
        self.dest_round = dest_round
        self.dest_match_index = dest_match_index
        self.dest_position_index = dest_position_index  # 0 = position 1, 1 = position 2

    @property
    def dest_slot_index(self) -> int:
        return self.dest_match_index * 2 + self.dest_position_index

    @property
    def source_code(self) -> str:
        return match_code(self.source_round, self.source_match_index)

    @property
    def dest_code(self) -> str:
        return match_code(self.dest_round, self.dest_match_index)

    def to_dict(self) -> Dict:
        return {
            'source_round': self.source_round,
            'source_match_index': self.source_match_index,
            'source_code': self.source_code,
            'dest_round': self.dest_round,
            'dest_match_index': self.dest_match_index,
            'dest_position_index': self.dest_position_index,
            'dest_code': self.dest_code,
        }

    def _key(self):
        return (self.source_round, self.source_match_index, self.dest_round,
                self.dest_match_index, self.dest_position_index)

    def __eq__(self, other):
        if not isinstance(other, Advancement):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (f"Advancement({self.source_code} -> {self.dest_code} "
                f"P{self.dest_position_index + 1})")


def _check_transition(bracket: BracketBuilder, round_index: int):
    # Both rounds must be playing rounds; the final feeds the champion slot
    # through champion_advancement().
    if round_index < 0 or round_index + 1 >= bracket.num_rounds:
        raise IndexError(
            f"No advancement from round {round_index}: bracket has {bracket.num_rounds} playing rounds"
        )


def pending_slots(bracket: BracketBuilder, round_index: int) -> List[tuple]:
    """
    (match_index, position_index) of every WinnerPending slot in a round.

    Scan order is match top-to-bottom, and position 1 before position 2
    inside each match.
    """
    holes = []
    for slot_index, slot in enumerate(bracket.rounds[round_index]):
        if slot.is_pending:
            holes.append((slot_index // 2, slot_index % 2))
    return holes


def round_one_mappings(bracket: BracketBuilder) -> List[Advancement]:
    """
    Round 0 -> round 1.

    Round 0 numbering skips bye pairs, so destinations cannot be computed
    arithmetically. Instead the pending slots of round 1 (in scan order) are
    merged one-for-one with the real round-0 matches (in order). Slots that
    already hold a seed were filled by a walkover and take no winner.
    """
    _check_transition(bracket, 0)
    holes = pending_slots(bracket, 1)
    sources = renderable_matches(bracket, 0)
    if len(holes) != len(sources):
        raise AdvancementError(
            f"Round 1 has {len(holes)} pending slots but round 0 has {len(sources)} real matches"
        )

    mappings = []
    for source_index, (dest_match, dest_position) in enumerate(holes):
        mappings.append(Advancement(0, source_index, 1, dest_match, dest_position))
    logger.debug("Mapped %d round 0 winners into round 1", len(mappings))
    return mappings


def standard_mappings(bracket: BracketBuilder, round_index: int) -> List[Advancement]:
    """Round r -> r+1 for r >= 1: matches 2k and 2k+1 feed match k, positions 1 and 2."""
    if round_index < 1:
        raise ValueError("Standard advancement starts at round 1; use round_one_mappings for round 0")
    _check_transition(bracket, round_index)
    source_count = len(renderable_matches(bracket, round_index))
    dest_count = len(renderable_matches(bracket, round_index + 1))

    mappings = []
    for dest_match in range(dest_count):
        for position in (0, 1):
            source_match = dest_match * 2 + position
            if source_match < source_count:
                mappings.append(Advancement(round_index, source_match, round_index + 1,
                                            dest_match, position))
    return mappings


def get_advancement_mappings(bracket: BracketBuilder, round_index: int) -> List[Advancement]:
    if round_index == 0:
        return round_one_mappings(bracket)
    return standard_mappings(bracket, round_index)


def all_advancement_mappings(bracket: BracketBuilder) -> List[Advancement]:
    """Every mapping between playing rounds, round 0 first."""
    mappings = []
    for round_index in range(bracket.num_rounds - 1):
        mappings.extend(get_advancement_mappings(bracket, round_index))
    return mappings


def champion_advancement(bracket: BracketBuilder) -> Advancement:
    """The final's winner fills the champion slot."""
    if bracket.num_rounds < 1:
        raise IndexError("Bracket has no final to advance from")
    final_round = bracket.num_rounds - 1
    return Advancement(final_round, 0, bracket.champion_round_index, 0, 0)
