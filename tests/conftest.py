"""
Shared pytest fixtures for bracket tests.

Running tests:
    pytest tests/                  - full suite
    pytest tests/ -m "not slow"   - skip the bracket size sweeps
"""
import pytest
import sys
import os
import yaml

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from brackets.models import Entrant
from brackets.builder import BracketBuilder


PLAYER_NAMES = [
    "Alice", "Bob", "Carol", "Dave", "Erin", "Frank", "Grace", "Heidi",
    "Ivan", "Judy", "Mallory", "Niaj", "Olivia", "Peggy", "Rupert", "Sybil",
]


@pytest.fixture
def make_entrants():
    """Factory returning n entrants seeded by list position."""
    def _make(n):
        return [Entrant(name=PLAYER_NAMES[i] if i < len(PLAYER_NAMES) else f"Player {i + 1}")
                for i in range(n)]
    return _make


@pytest.fixture
def five_entrants(make_entrants):
    return make_entrants(5)


@pytest.fixture
def five_bracket(five_entrants):
    """Bracket of 8 with 3 byes: seeds 1, 2 and 3 skip the first round."""
    return BracketBuilder(five_entrants)


@pytest.fixture
def tournament_data():
    """Gold bracket of 5 and silver bracket of 6 drawn from 11 players."""
    return {
        'tournament_name': 'Spring Open',
        'gold': {'bracket_size': 5, 'bracket_name': 'Gold Bracket', 'best_of': 3},
        'silver': {'bracket_size': 6, 'best_of': 5},
        'players': PLAYER_NAMES[:11],
    }


@pytest.fixture
def config_file(tmp_path, tournament_data):
    """Write tournament_data to a YAML file and return its path."""
    path = tmp_path / "tournament.yaml"
    path.write_text(yaml.dump(tournament_data, default_flow_style=False))
    return str(path)


@pytest.fixture
def client(config_file, monkeypatch):
    """Flask test client reading the temporary config file."""
    import app as app_module
    monkeypatch.setattr(app_module, 'CONFIG_FILE', config_file)
    app_module.app.config['TESTING'] = True
    with app_module.app.test_client() as client:
        yield client
