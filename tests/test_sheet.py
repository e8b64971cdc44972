"""
Unit tests for match sheet numbering and winner advancement formulas.
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from brackets.builder import BracketBuilder
from brackets.sheet import (
    column_letter,
    columns_per_round,
    generate_match_data,
    loss_total_formulas,
    player_row,
    winner_formulas,
)


class TestLayoutHelpers:
    """Tests for A1 column letters and row placement."""

    @pytest.mark.parametrize("index,letters", [
        (0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"),
        (51, "AZ"), (52, "BA"), (701, "ZZ"), (702, "AAA"),
    ])
    def test_column_letter(self, index, letters):
        assert column_letter(index) == letters

    def test_column_letter_negative(self):
        with pytest.raises(ValueError):
            column_letter(-1)

    def test_columns_per_round(self):
        assert columns_per_round(3) == 9
        assert columns_per_round(5) == 11

    def test_player_row(self):
        assert player_row(0, 0) == 2
        assert player_row(0, 1) == 3
        assert player_row(2, 0) == 8


class TestMatchData:
    """Tests for global match numbering."""

    def test_five_entrants(self, five_bracket):
        data = generate_match_data(five_bracket, 'gold')
        assert data['total_matches'] == 4
        assert data['num_rounds'] == 3
        numbers = [[m['match_number'] for m in r['matches']] for r in data['rounds']]
        assert numbers == [[1], [2, 3], [4]]
        names = [r['round_name'] for r in data['rounds']]
        assert names == ['Quarterfinal', 'Semifinal', 'Final']

    def test_first_round_skips_byes(self, five_bracket):
        first = generate_match_data(five_bracket)['rounds'][0]['matches'][0]
        assert first['match_code'] == 'W1-M1'
        assert (first['position1']['seed'], first['position2']['seed']) == (4, 5)
        assert first['bracket_type'] == 'gold'

    @pytest.mark.parametrize("n", [2, 3, 7, 12, 16, 23])
    def test_total_is_n_minus_one(self, make_entrants, n):
        data = generate_match_data(BracketBuilder(make_entrants(n)), 'silver')
        assert data['total_matches'] == n - 1


class TestWinnerFormulas:
    """Tests for the generated cross-cell references."""

    def test_one_formula_per_mapping(self, five_bracket):
        assert len(winner_formulas(five_bracket, max_score=2)) == 3

    def test_round_one_formula(self, five_bracket):
        formula = winner_formulas(five_bracket, max_score=2, best_of=3)[0]
        assert formula['source'] == 'W1-M1'
        assert formula['destination'] == 'W2-M1-P2'
        assert formula['seed_cell'] == 'K3'
        assert formula['name_cell'] == 'L3'
        assert formula['seed_formula'] == '=IF(D2=2,B2,IF(D3=2,B3,""))'
        assert formula['name_formula'] == '=IF(D2=2,C2,IF(D3=2,C3,""))'

    def test_later_round_formula(self, five_bracket):
        formula = winner_formulas(five_bracket, max_score=2, best_of=3)[2]
        assert formula['source'] == 'W2-M2'
        assert formula['destination'] == 'W3-M1-P2'
        assert formula['seed_cell'] == 'T3'
        assert formula['seed_formula'] == '=IF(M5=2,K5,IF(M6=2,K6,""))'

    def test_best_of_shifts_columns(self, five_bracket):
        formula = winner_formulas(five_bracket, max_score=3, best_of=5)[0]
        # Round 2 block starts at column 11 (L), seed column is M
        assert formula['seed_cell'] == 'M3'
        assert '=3' in formula['seed_formula']

    def test_two_entrants_have_no_formulas(self, make_entrants):
        assert winner_formulas(BracketBuilder(make_entrants(2)), max_score=2) == []


class TestLossTotalFormulas:
    """Tests for the Loss T column formulas."""

    def test_two_formulas_per_playable_match(self, five_bracket):
        formulas = loss_total_formulas(five_bracket, max_score=2, best_of=3)
        assert len(formulas) == 8
        assert [(f['match'], f['position']) for f in formulas[:2]] == [('W1-M1', 1), ('W1-M1', 2)]

    def test_loser_formula(self, five_bracket):
        formula = loss_total_formulas(five_bracket, max_score=2, best_of=3)[1]
        assert formula['cell'] == 'H3'
        assert formula['formula'] == (
            '=IF(AND(D3<>2,D2=2,E3<>"",F3<>"",G3<>"",E2<>"",F2<>"",G2<>""),'
            'IF(E3<E2,E3,0)+IF(F3<F2,F3,0)+IF(G3<G2,G3,0),"")'
        )

    def test_later_round_columns(self, five_bracket):
        formulas = loss_total_formulas(five_bracket, max_score=2, best_of=3)
        second_match = [f for f in formulas if f['match'] == 'W2-M2']
        # Round 2 block starts at column J: score M, games N..P, Loss T in Q
        assert [f['cell'] for f in second_match] == ['Q5', 'Q6']
        assert second_match[0]['formula'].startswith('=IF(AND(M5<>2,M6=2,N5<>""')

    def test_game_count_follows_best_of(self, five_bracket):
        formula = loss_total_formulas(five_bracket, max_score=3, best_of=5)[0]
        assert formula['cell'] == 'J2'
        assert formula['formula'].count('IF(') == 6

    def test_two_entrants(self, make_entrants):
        formulas = loss_total_formulas(BracketBuilder(make_entrants(2)), max_score=2)
        assert [f['cell'] for f in formulas] == ['H2', 'H3']
