"""
Bracket sizing and the standard single elimination seed order.
"""
import math
from typing import List


def calculate_bracket_size(num_entrants: int) -> int:
    """Calculate the bracket size (next power of 2)."""
    if num_entrants <= 0:
        return 0
    return 2 ** math.ceil(math.log2(num_entrants))


def calculate_byes(num_entrants: int) -> int:
    """Calculate number of byes needed."""
    return calculate_bracket_size(num_entrants) - num_entrants


def calculate_rounds(num_entrants: int) -> int:
    """Number of playing rounds, not counting the champion round."""
    if num_entrants <= 1:
        return 0
    return math.ceil(math.log2(num_entrants))


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def get_round_name(slots_in_round: int) -> str:
    """Get the name of a round based on the number of slots it holds."""
    if slots_in_round == 1:
        return "Champion"
    elif slots_in_round == 2:
        return "Final"
    elif slots_in_round == 4:
        return "Semifinal"
    elif slots_in_round == 8:
        return "Quarterfinal"
    else:
        return f"Round of {slots_in_round}"


def generate_seed_order(bracket_size: int) -> List[int]:
    """
    Generate the standard tournament bracket order.
    This ensures that if all higher seeds win, they meet in the proper rounds.

    For 8 slots: [1, 8, 4, 5, 2, 7, 3, 6]
    This gives matchups: 1v8, 4v5, 2v7, 3v6
    Winners: 1v4 side, 2v3 side
    Final: 1v2 (if chalk)
    """
    if not is_power_of_two(bracket_size):
        raise ValueError(f"Bracket size must be a power of 2, got {bracket_size}")
    if bracket_size == 1:
        return [1]
    if bracket_size == 2:
        return [1, 2]

    previous = generate_seed_order(bracket_size // 2)

    # Each seed is followed by its complement in the doubled bracket
    order = []
    for seed in previous:
        order.extend([seed, bracket_size + 1 - seed])
    return order
