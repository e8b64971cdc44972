"""
Match views over a built bracket.
"""
from typing import List

from brackets.builder import BracketBuilder
from brackets.models import Match


def _check_round(bracket: BracketBuilder, round_index: int):
    if round_index < 0 or round_index >= len(bracket.rounds):
        raise IndexError(f"Round {round_index} does not exist (bracket has {len(bracket.rounds)} rounds)")


def matches_for_round(bracket: BracketBuilder, round_index: int) -> List[Match]:
    """
    Pair adjacent slots (2i, 2i+1) of a round into matches.

    Bye placeholders are kept so a layout can reserve cells for them. The
    single champion slot comes back as one match with no second position.
    """
    _check_round(bracket, round_index)
    slots = bracket.rounds[round_index]
    matches = []
    for i in range(0, len(slots), 2):
        second = slots[i + 1] if i + 1 < len(slots) else None
        matches.append(Match(round_index, i // 2, slots[i], second))
    return matches


def renderable_matches(bracket: BracketBuilder, round_index: int) -> List[Match]:
    """
    Matches to show and number for users.

    In round 0 only pairs of two seeded entrants are kept, so bye pairs do
    not take a match number. Later rounds hold no structural byes and are
    returned as they are.
    """
    matches = matches_for_round(bracket, round_index)
    if round_index == 0:
        return [match for match in matches if match.is_real_match]
    return matches


def count_playable_matches(bracket: BracketBuilder) -> int:
    """Matches that are actually played: renderable round 0 plus every later round."""
    total = 0
    for round_index in range(bracket.num_rounds):
        total += len(renderable_matches(bracket, round_index))
    return total
