"""
Tournament wrappers: one bracket per division, several divisions per event.
"""
import logging
from typing import Dict, List

from brackets.builder import BracketBuilder
from brackets.config import TournamentConfig
from brackets.matches import count_playable_matches, matches_for_round
from brackets.validation import (
    validate_bracket_structure,
    validate_entrants,
    validate_seeding,
)

logger = logging.getLogger(__name__)


class Tournament:
    def __init__(self, name, entrants, bracket_type='gold', bracket_name=None):
        self.name = name
        self.bracket_type = bracket_type
        self.bracket_name = bracket_name or f'{bracket_type.capitalize()} Bracket'
        self.bracket = BracketBuilder(entrants)
        self.entrants = self.bracket.entrants

    def get_matches_for_round(self, round_index: int):
        return matches_for_round(self.bracket, round_index)

    def get_summary(self) -> Dict:
        summary = self.bracket.get_summary()
        summary.update({
            'tournament_name': self.name,
            'bracket_name': self.bracket_name,
            'bracket_type': self.bracket_type,
            'playable_matches': count_playable_matches(self.bracket),
        })
        return summary

    def validate(self) -> List[str]:
        errors = []
        errors.extend(validate_entrants(self.entrants))
        errors.extend(validate_bracket_structure(self.bracket))
        errors.extend(validate_seeding(self.entrants))
        return errors

    def is_ready(self) -> bool:
        return not self.validate()

    def __repr__(self):
        return f"Tournament(name={self.name}, type={self.bracket_type}, bracket={self.bracket!r})"


class MultiBracketTournament:
    """
    Gold and silver brackets built from a single configuration.

    Brackets share nothing; each is built from its own slice of players.
    """

    def __init__(self, config: TournamentConfig):
        self.config = config
        self.bracket_types = config.get_available_bracket_types()
        self.brackets = {}
        for bracket_type in self.bracket_types:
            self.brackets[bracket_type] = Tournament(
                config.tournament_name,
                config.get_entrants(bracket_type),
                bracket_type=bracket_type,
                bracket_name=config.get_bracket_name(bracket_type),
            )
            logger.debug('Created %s bracket with %d players', bracket_type,
                         len(self.brackets[bracket_type].entrants))

    def get_bracket(self, bracket_type: str) -> Tournament:
        return self.brackets.get(bracket_type)

    def validate(self) -> List[str]:
        errors = list(self.config.validate())
        for bracket_type in self.bracket_types:
            for error in self.brackets[bracket_type].validate():
                errors.append(f'{bracket_type} bracket: {error}')
        return errors

    def is_ready(self) -> bool:
        return not self.validate()

    def is_multi_bracket(self) -> bool:
        return len(self.bracket_types) > 1

    def has_silver_bracket(self) -> bool:
        return 'silver' in self.bracket_types

    def get_summary(self) -> Dict:
        return {
            'tournament_name': self.config.tournament_name,
            'total_players_configured': len(self.config.players),
            'total_players_used': self.config.get_total_players_used(),
            'brackets': {t: self.brackets[t].get_summary() for t in self.bracket_types},
        }
