"""
Validation for entrant lists and built brackets.

The bracket builder trusts its input; these checks run before construction.
Each check returns a list of error strings so callers can report all
problems at once. ensure_valid() raises instead.
"""
import logging
from typing import List, Optional, Sequence

from brackets.matches import matches_for_round
from brackets.models import as_entrant
from brackets.seeding import calculate_byes

logger = logging.getLogger(__name__)


class BracketError(Exception):
    """Base class for bracket errors."""


class ConfigurationError(BracketError):
    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = list(errors) if errors else [message]


class AdvancementError(BracketError):
    pass


def _name_of(entrant) -> Optional[str]:
    name = as_entrant(entrant).name
    if name is None:
        return None
    return str(name).strip()


def find_duplicate_names(entrants: Sequence) -> List[str]:
    counts = {}
    for entrant in entrants:
        name = _name_of(entrant)
        if name:
            counts[name] = counts.get(name, 0) + 1
    return [name for name, count in counts.items() if count > 1]


def validate_entrants(entrants: Optional[Sequence]) -> List[str]:
    errors = []
    if not entrants:
        errors.append('At least one player is required')
        return errors

    if len(entrants) < 2:
        errors.append('Tournament must have at least 2 players')

    duplicates = find_duplicate_names(entrants)
    if duplicates:
        errors.append(f"Duplicate player names found: {', '.join(duplicates)}")

    empty = [e for e in entrants if not _name_of(e)]
    if empty:
        errors.append(f'{len(empty)} players have empty names')

    return errors


def validate_seeding(entrants: Optional[Sequence]) -> List[str]:
    """
    Check pre-assigned seeds.

    Entrants without a seed take their list position, so a list with no
    explicit seeds is always valid.
    """
    errors = []
    if not entrants:
        return errors

    seeds = []
    for index, entrant in enumerate(entrants):
        seed = as_entrant(entrant).seed
        seeds.append(seed if seed is not None else index + 1)

    if len(set(seeds)) != len(seeds):
        errors.append('Duplicate seeds found')

    if min(seeds) < 1:
        errors.append('Seeds must start from 1')

    if max(seeds) > len(entrants):
        errors.append(f'Highest seed ({max(seeds)}) exceeds player count ({len(entrants)})')

    missing = [seed for seed in range(1, len(entrants) + 1) if seed not in seeds]
    if missing:
        errors.append(f"Missing seeds: {', '.join(str(s) for s in missing)}")

    return errors


def validate_bracket_structure(bracket) -> List[str]:
    errors = []
    if bracket is None:
        errors.append('Bracket is required')
        return errors

    if bracket.num_rounds < 1:
        errors.append('Bracket must have at least 1 round')

    if bracket.actual_player_count < 1:
        errors.append('Bracket must have at least 1 player')

    if bracket.bracket_size < bracket.actual_player_count:
        errors.append('Bracket size cannot be smaller than actual player count')

    for round_index in range(bracket.num_rounds):
        if not matches_for_round(bracket, round_index):
            errors.append(f'Round {round_index + 1} has no matches')

    return errors


def get_validation_warnings(entrants: Sequence, all_entrants: Optional[Sequence] = None) -> List[str]:
    """Non-blocking issues: unused entrants and a bracket dominated by byes."""
    warnings = []
    if not entrants:
        return warnings

    if all_entrants is not None and len(all_entrants) > len(entrants):
        unused = len(all_entrants) - len(entrants)
        warnings.append(f'{unused} players will not be included due to bracket size limit')

    byes = calculate_byes(len(entrants))
    if byes > len(entrants) / 2:
        warnings.append(f'High number of byes ({byes}) relative to player count ({len(entrants)})')

    return warnings


def ensure_valid(entrants: Sequence):
    """Raise ConfigurationError listing every entrant and seeding problem."""
    errors = validate_entrants(entrants) + validate_seeding(entrants)
    if errors:
        logger.warning("Rejected entrant list: %s", '; '.join(errors))
        raise ConfigurationError(f'Invalid entrants: {errors[0]}', errors)
