"""
Data models for bracket entrants, slots and matches.
"""
from typing import Dict, Optional

SEEDED = 'seeded'
BYE = 'bye'
WINNER_PENDING = 'winner'
CHAMPION = 'champion'

SLOT_KINDS = (SEEDED, BYE, WINNER_PENDING, CHAMPION)


class Entrant:
    def __init__(self, name, seed=None, attributes=None):
        self.name = name
        self.seed = seed
        self.attributes = attributes if attributes else {}

    def __repr__(self):
        return f"Entrant(name={self.name}, seed={self.seed})"


def as_entrant(entrant) -> Entrant:
    """Accept an Entrant, a {name, seed} dict or a bare name."""
    if isinstance(entrant, Entrant):
        return entrant
    if isinstance(entrant, dict):
        return Entrant(name=entrant.get('name'), seed=entrant.get('seed'))
    return Entrant(name=entrant)


class Slot:
    """
    One cell of the bracket tree.

    A slot never changes after the builder creates it. Its kind is one of
    SEEDED, BYE, WINNER_PENDING or CHAMPION; seed and name are only set for
    seeded slots, for byes handed to a top seed, and for a decided champion.
    """

    __slots__ = ('round_index', 'position_index', 'kind', 'seed', 'name')

    def __init__(self, round_index: int, position_index: int, kind: str,
                 seed: Optional[int] = None, name: Optional[str] = None):
        if kind not in SLOT_KINDS:
            raise ValueError(f"Unknown slot kind: {kind}")
        self.round_index = round_index
        self.position_index = position_index
        self.kind = kind
        self.seed = seed
        self.name = name

    @classmethod
    def seeded(cls, round_index: int, position_index: int, seed: int, name: str) -> 'Slot':
        return cls(round_index, position_index, SEEDED, seed, name)

    @classmethod
    def bye(cls, round_index: int, position_index: int, seed: Optional[int] = None) -> 'Slot':
        # A bye never shows a name, even when it holds a top seed's place.
        return cls(round_index, position_index, BYE, seed, None)

    @classmethod
    def winner_pending(cls, round_index: int, position_index: int) -> 'Slot':
        return cls(round_index, position_index, WINNER_PENDING)

    @classmethod
    def champion(cls, round_index: int, position_index: int = 0,
                 seed: Optional[int] = None, name: Optional[str] = None) -> 'Slot':
        return cls(round_index, position_index, CHAMPION, seed, name)

    @property
    def is_bye(self) -> bool:
        return self.kind == BYE

    @property
    def is_seeded(self) -> bool:
        return self.kind == SEEDED

    @property
    def is_pending(self) -> bool:
        return self.kind == WINNER_PENDING

    @property
    def visible(self) -> bool:
        return self.kind != BYE

    def carries_seed(self, player_count: int) -> bool:
        """True if the slot holds a real seed (1..player_count)."""
        return self.seed is not None and 1 <= self.seed <= player_count

    def to_summary(self) -> Dict:
        return {
            'position': self.position_index + 1,
            'type': self.kind,
            'seed': self.seed,
            'name': self.name,
            'visible': self.visible,
        }

    def _key(self):
        return (self.round_index, self.position_index, self.kind, self.seed, self.name)

    def __eq__(self, other):
        if not isinstance(other, Slot):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (f"Slot(round={self.round_index}, position={self.position_index}, "
                f"kind={self.kind}, seed={self.seed}, name={self.name})")


class Match:
    """Two adjacent slots of one round, derived on demand and never stored."""

    def __init__(self, round_index: int, match_index: int, position1: Slot,
                 position2: Optional[Slot]):
        self.round_index = round_index
        self.match_index = match_index
        self.position1 = position1
        self.position2 = position2

    @property
    def visible(self) -> bool:
        return self.position1.visible or (self.position2 is not None and self.position2.visible)

    @property
    def is_real_match(self) -> bool:
        """Both sides hold a seeded entrant. Only round 0 can contain bye pairs."""
        if self.round_index != 0:
            return True
        return (self.position2 is not None
                and self.position1.visible and self.position1.is_seeded
                and self.position2.visible and self.position2.is_seeded)

    def to_dict(self) -> Dict:
        return {
            'round_index': self.round_index,
            'match_index': self.match_index,
            'position1': self.position1.to_summary(),
            'position2': self.position2.to_summary() if self.position2 is not None else None,
            'visible': self.visible,
            'is_real_match': self.is_real_match,
        }

    def __repr__(self):
        return (f"Match(round={self.round_index}, index={self.match_index}, "
                f"position1={self.position1!r}, position2={self.position2!r})")
