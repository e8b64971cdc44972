"""
Tournament configuration loaded from YAML.

Example file:

    tournament_name: Spring Open
    gold:
      bracket_size: 8
      bracket_name: Gold Bracket
    silver:
      bracket_size: 4
      best_of: 5
    players:
      - Alice
      - name: Bob
      - name: Carol

Players are listed strongest first. A player given an explicit seed is
ranked by it instead, ahead of unseeded players. The gold bracket takes the
first gold.bracket_size players of that ranking, the silver bracket the next
silver.bracket_size. Seeds restart at 1 in each bracket.
"""
import logging
import os
from typing import Dict, List, Optional

import yaml

from brackets.models import Entrant
from brackets.validation import ConfigurationError

logger = logging.getLogger(__name__)

BRACKET_TYPES = ('gold', 'silver')
DEFAULT_BRACKET_SIZE = 8
DEFAULT_BEST_OF = 3
DEFAULT_TOURNAMENT_NAME = 'Tournament Bracket'

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DEFAULT_CONFIG_FILE = os.path.join(BASE_DIR, 'data', 'tournament.yaml')


def get_config_file() -> str:
    """Config path, overridable with BRACKET_CONFIG_FILE."""
    return os.environ.get('BRACKET_CONFIG_FILE', DEFAULT_CONFIG_FILE)


def _read_yaml(file_path):
    if not os.path.exists(file_path):
        raise ConfigurationError(f'Configuration file not found: {file_path}')
    try:
        with open(file_path, mode='r', encoding='utf-8') as file:
            return yaml.safe_load(file)
    except yaml.YAMLError as e:
        raise ConfigurationError(f'Failed to parse {file_path}: {e}') from e


def parse_entrants(raw_players) -> List[Entrant]:
    """Turn a YAML list of names or {name, seed} mappings into entrants."""
    entrants = []
    for item in raw_players or []:
        if isinstance(item, dict):
            seed = item.get('seed')
            attributes = {k: v for k, v in item.items() if k not in ('name', 'seed')}
            entrants.append(Entrant(
                name=str(item.get('name') or '').strip(),
                seed=int(seed) if seed is not None else None,
                attributes=attributes,
            ))
        else:
            entrants.append(Entrant(name=str(item).strip() if item is not None else ''))
    return entrants


def load_entrants(file_path) -> List[Entrant]:
    """Load a plain entrant list (a YAML sequence) from file."""
    data = _read_yaml(file_path)
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get('players', [])
    if not isinstance(data, list):
        raise ConfigurationError(f'Expected a list of players in {file_path}')
    return parse_entrants(data)


def _rank_players(players: List[Entrant]) -> List[Entrant]:
    """Explicitly seeded players first, by seed; the rest keep list order."""
    ranked = sorted(enumerate(players), key=lambda item: (
        item[1].seed is None, item[1].seed if item[1].seed is not None else 0, item[0]))
    return [player for _, player in ranked]


class TournamentConfig:
    def __init__(self, options: Optional[Dict], players: Optional[List]):
        self.options = options or {}
        self.players = _rank_players(parse_entrants(players))

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> 'TournamentConfig':
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError('Tournament configuration must be a mapping')
        options = {k: v for k, v in data.items() if k != 'players'}
        players = data.get('players')
        if players is not None and not isinstance(players, list):
            raise ConfigurationError('players must be a list')
        return cls(options, players)

    @classmethod
    def from_file(cls, file_path) -> 'TournamentConfig':
        return cls.from_dict(_read_yaml(file_path))

    @property
    def tournament_name(self) -> str:
        return self.options.get('tournament_name') or DEFAULT_TOURNAMENT_NAME

    def get_bracket_options(self, bracket_type: str = 'gold') -> Dict:
        return self.options.get(bracket_type) or {}

    def get_available_bracket_types(self) -> List[str]:
        return [t for t in BRACKET_TYPES if self.options.get(t) is not None]

    def has_silver_bracket(self) -> bool:
        return 'silver' in self.get_available_bracket_types()

    def get_bracket_size(self, bracket_type: str = 'gold') -> int:
        try:
            size = int(self.get_bracket_options(bracket_type).get('bracket_size', 0))
        except (TypeError, ValueError):
            size = 0
        return size or DEFAULT_BRACKET_SIZE

    def get_bracket_name(self, bracket_type: str = 'gold') -> str:
        return (self.get_bracket_options(bracket_type).get('bracket_name')
                or f'{bracket_type.capitalize()} Bracket')

    def _get_int_option(self, bracket_type: str, key: str, default=None) -> Optional[int]:
        value = self.get_bracket_options(bracket_type).get(key, default)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f'{bracket_type}.{key} must be an integer, got {value!r}') from e

    def get_best_of(self, bracket_type: str = 'gold') -> int:
        return self._get_int_option(bracket_type, 'best_of', DEFAULT_BEST_OF)

    def get_max_score(self, bracket_type: str = 'gold') -> int:
        """Games needed to win a match; defaults to a majority of best_of."""
        max_score = self._get_int_option(bracket_type, 'max_score')
        if max_score is not None:
            return max_score
        return self.get_best_of(bracket_type) // 2 + 1

    def get_entrants(self, bracket_type: str = 'gold') -> List[Entrant]:
        """Players assigned to a bracket, reseeded from 1."""
        if bracket_type == 'gold':
            start = 0
        elif bracket_type == 'silver':
            start = self.get_bracket_size('gold')
        else:
            return []
        chosen = self.players[start:start + self.get_bracket_size(bracket_type)]
        return [
            Entrant(name=p.name, seed=index + 1, attributes=dict(p.attributes, bracket=bracket_type))
            for index, p in enumerate(chosen)
        ]

    def get_total_players_used(self) -> int:
        total = sum(self.get_bracket_size(t) for t in self.get_available_bracket_types())
        return min(total, len(self.players))

    def validate(self) -> List[str]:
        errors = []

        if not self.players:
            errors.append('No players configured')

        bracket_types = self.get_available_bracket_types()
        if not bracket_types:
            errors.append("No bracket configurations found (need at least 'gold' bracket)")

        for bracket_type in bracket_types:
            if self.get_bracket_size(bracket_type) < 2:
                errors.append(f'{bracket_type} bracket size must be at least 2')

        for index, player in enumerate(self.players):
            if not player.name:
                errors.append(f'Player at index {index} is missing a name')

        seeds = [p.seed for p in self.players if p.seed is not None]
        if len(set(seeds)) != len(seeds):
            errors.append('Duplicate player seeds in configuration')

        for warning in self.get_warnings():
            logger.warning(warning)

        return errors

    def get_warnings(self) -> List[str]:
        warnings = []
        unused = len(self.players) - self.get_total_players_used()
        if self.get_available_bracket_types() and unused > 0:
            warnings.append(f'{unused} players will not be included in any bracket')
        return warnings

    def get_summary(self) -> Dict:
        brackets = {}
        for bracket_type in self.get_available_bracket_types():
            brackets[bracket_type] = {
                'bracket_name': self.get_bracket_name(bracket_type),
                'bracket_size': self.get_bracket_size(bracket_type),
                'player_count': len(self.get_entrants(bracket_type)),
            }
        return {
            'tournament_name': self.tournament_name,
            'total_players_configured': len(self.players),
            'total_players_used': self.get_total_players_used(),
            'brackets': brackets,
        }

    def __repr__(self):
        return (f"TournamentConfig(name={self.tournament_name}, "
                f"brackets={self.get_available_bracket_types()}, players={len(self.players)})")


def load_tournament_config(file_path=None) -> TournamentConfig:
    file_path = file_path or get_config_file()
    logger.debug('Loading tournament configuration from %s', file_path)
    return TournamentConfig.from_file(file_path)
