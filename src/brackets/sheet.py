"""
Match tracking sheet layout and winner advancement formulas.

Each playing round occupies a block of columns:

    Match | Seed | Name | Score | Game 1..best_of | Loss T | (spacer)

Match m of a round uses rows 2 + 3m (position 1) and 3 + 3m (position 2),
leaving one blank row between matches. A winner formula copies the seed or
name of whichever source row reached max_score into the destination cell.
A Loss T formula totals what a match loser scored in the games they lost,
once every game cell of the match is filled in.
"""
from typing import Dict, List

from brackets.advancement import all_advancement_mappings, match_code
from brackets.builder import BracketBuilder
from brackets.matches import renderable_matches
from brackets.seeding import get_round_name

FIXED_COLUMNS = 4  # Match, Seed, Name, Score
SEED_OFFSET = 1
NAME_OFFSET = 2
SCORE_OFFSET = 3
GAMES_OFFSET = 4
FIRST_MATCH_ROW = 2
ROWS_PER_MATCH = 3


def columns_per_round(best_of: int) -> int:
    # Fixed columns, one column per game, Loss T and a spacer
    return FIXED_COLUMNS + best_of + 1 + 1


def column_letter(index: int) -> str:
    """0-based column index to A1 letters: 0 -> A, 25 -> Z, 26 -> AA."""
    if index < 0:
        raise ValueError(f"Column index must be >= 0, got {index}")
    letters = ''
    while index >= 0:
        letters = chr(65 + index % 26) + letters
        index = index // 26 - 1
    return letters


def player_row(match_index: int, position_index: int) -> int:
    """1-based sheet row of a player line."""
    return FIRST_MATCH_ROW + match_index * ROWS_PER_MATCH + position_index


def generate_match_data(bracket: BracketBuilder, bracket_type: str = 'gold') -> Dict:
    """
    Number every playable match across the bracket, round by round.

    Returns dict with:
    - rounds: list of {round_index, round_number, round_name, matches}
    - total_matches: number of matches numbered
    - num_rounds: playing rounds
    - bracket_type
    """
    rounds = []
    match_number = 1
    for round_index in range(bracket.num_rounds):
        round_matches = renderable_matches(bracket, round_index)
        if not round_matches:
            continue
        matches = []
        for index, match in enumerate(round_matches):
            matches.append({
                'match_number': match_number,
                'match_code': match_code(round_index, index),
                'round_index': round_index,
                'round_number': round_index + 1,
                'position1': match.position1.to_summary(),
                'position2': match.position2.to_summary(),
                'is_real_match': match.is_real_match,
                'bracket_type': bracket_type,
            })
            match_number += 1
        rounds.append({
            'round_index': round_index,
            'round_number': round_index + 1,
            'round_name': get_round_name(len(bracket.rounds[round_index])),
            'matches': matches,
        })

    return {
        'rounds': rounds,
        'total_matches': match_number - 1,
        'num_rounds': bracket.num_rounds,
        'bracket_type': bracket_type,
    }


def winner_formulas(bracket: BracketBuilder, max_score: int, best_of: int = 3) -> List[Dict]:
    """Seed and name formulas for every winner advancement in the bracket."""
    width = columns_per_round(best_of)
    formulas = []

    for mapping in all_advancement_mappings(bracket):
        source_start = mapping.source_round * width
        row1 = player_row(mapping.source_match_index, 0)
        row2 = player_row(mapping.source_match_index, 1)
        score = column_letter(source_start + SCORE_OFFSET)
        seed = column_letter(source_start + SEED_OFFSET)
        name = column_letter(source_start + NAME_OFFSET)

        dest_start = mapping.dest_round * width
        dest_row = player_row(mapping.dest_match_index, mapping.dest_position_index)
        dest_seed = column_letter(dest_start + SEED_OFFSET)
        dest_name = column_letter(dest_start + NAME_OFFSET)

        formulas.append({
            'source': mapping.source_code,
            'destination': f'{mapping.dest_code}-P{mapping.dest_position_index + 1}',
            'seed_cell': f'{dest_seed}{dest_row}',
            'name_cell': f'{dest_name}{dest_row}',
            'seed_formula': (f'=IF({score}{row1}={max_score},{seed}{row1},'
                             f'IF({score}{row2}={max_score},{seed}{row2},""))'),
            'name_formula': (f'=IF({score}{row1}={max_score},{name}{row1},'
                             f'IF({score}{row2}={max_score},{name}{row2},""))'),
        })

    return formulas


def loss_total_formulas(bracket: BracketBuilder, max_score: int, best_of: int = 3) -> List[Dict]:
    """
    Loss T formulas for both players of every playable match.

    A player's Loss T is the sum of the games where they scored less than
    their opponent. It only shows once the opponent has reached max_score,
    this player has not, and every game cell of both rows holds a value.
    """
    width = columns_per_round(best_of)
    formulas = []

    for round_index in range(bracket.num_rounds):
        start = round_index * width
        score = column_letter(start + SCORE_OFFSET)
        loss_total = column_letter(start + GAMES_OFFSET + best_of)
        games = [column_letter(start + GAMES_OFFSET + g) for g in range(best_of)]

        for match_index, _ in enumerate(renderable_matches(bracket, round_index)):
            for position_index in (0, 1):
                row = player_row(match_index, position_index)
                other = player_row(match_index, 1 - position_index)
                filled = [f'{g}{row}<>""' for g in games] + [f'{g}{other}<>""' for g in games]
                losing_sum = '+'.join(f'IF({g}{row}<{g}{other},{g}{row},0)' for g in games)
                formulas.append({
                    'match': match_code(round_index, match_index),
                    'position': position_index + 1,
                    'cell': f'{loss_total}{row}',
                    'formula': (f'=IF(AND({score}{row}<>{max_score},{score}{other}={max_score},'
                                f'{",".join(filled)}),{losing_sum},"")'),
                })

    return formulas
