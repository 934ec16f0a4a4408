"""
Manager domain model.
"""

from dataclasses import dataclass
from typing import Any

# Store field names (camelCase, as written by the game client)
FIELD_MANAGER_NAME = "managerName"
FIELD_EMAIL = "email"
FIELD_BUDGET = "budget"
FIELD_POINTS = "points"
FIELD_WINS = "wins"
FIELD_LOSSES = "losses"
FIELD_DRAWS = "draws"
FIELD_MATCHES_PLAYED = "matchesPlayed"

# Every performance counter; budget is deliberately absent
COUNTER_FIELDS = (FIELD_POINTS, FIELD_WINS, FIELD_LOSSES, FIELD_DRAWS, FIELD_MATCHES_PLAYED)
# League-table counters only (matchesPlayed is kept)
POINTS_FIELDS = (FIELD_POINTS, FIELD_WINS, FIELD_LOSSES, FIELD_DRAWS)


def _as_number(value: Any) -> int | float:
    """Read a numeric store value as-is, treating missing or non-numeric as 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def _as_int(value: Any) -> int:
    return int(_as_number(value))


@dataclass
class Manager:
    """
    A registered player's profile as stored under managers/{id}.

    This is a pure domain model with no infrastructure dependencies.
    """

    manager_id: str
    manager_name: str | None = None
    email: str | None = None
    budget: int | float = 0
    points: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    matches_played: int = 0

    @classmethod
    def from_record(cls, manager_id: str, record: Any) -> "Manager":
        """
        Build a Manager from a raw store record.

        A record that is not a mapping yields a manager with default values.
        """
        if not isinstance(record, dict):
            record = {}
        name = record.get(FIELD_MANAGER_NAME)
        email = record.get(FIELD_EMAIL)
        return cls(
            manager_id=str(manager_id),
            manager_name=name if isinstance(name, str) else None,
            email=email if isinstance(email, str) else None,
            budget=_as_number(record.get(FIELD_BUDGET)),
            points=_as_int(record.get(FIELD_POINTS)),
            wins=_as_int(record.get(FIELD_WINS)),
            losses=_as_int(record.get(FIELD_LOSSES)),
            draws=_as_int(record.get(FIELD_DRAWS)),
            matches_played=_as_int(record.get(FIELD_MATCHES_PLAYED)),
        )

    @property
    def display_name(self) -> str:
        return self.manager_name or self.email or self.manager_id

    def matches_identifier(self, identifier: str) -> bool:
        """Case-insensitive match against email or manager name."""
        needle = identifier.strip().lower()
        if not needle:
            return False
        return any(
            value is not None and value.lower() == needle
            for value in (self.email, self.manager_name)
        )
