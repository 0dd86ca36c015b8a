"""Player roster and team assignment."""

from __future__ import annotations

import logging
import math
import random

from .models import Player, Team
from .words import shuffle

logger = logging.getLogger(__name__)


class Roster:
    """Ordered players on the device.

    A player's identity is its position in the roster; names need not be
    unique.
    """

    def __init__(self, rng: random.Random | None = None):
        self._players: list[Player] = []
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._players)

    @property
    def players(self) -> list[Player]:
        return list(self._players)

    def player(self, index: int) -> Player | None:
        if 0 <= index < len(self._players):
            return self._players[index]
        return None

    def add_player(self, name: str) -> bool:
        """Append a player with no team. Blank names are ignored."""
        name = (name or "").strip()
        if not name:
            return False
        self._players.append(Player(name=name))
        return True

    def remove_player(self, index: int) -> bool:
        if not 0 <= index < len(self._players):
            return False
        removed = self._players.pop(index)
        logger.debug("Removed player %r", removed.name)
        return True

    def randomize_teams(self) -> None:
        """Shuffle the roster, first half (rounded up) goes to team A."""
        shuffled = shuffle(self._players, self._rng)
        half = math.ceil(len(shuffled) / 2)
        self._players = [
            p.model_copy(update={"team": Team.A if idx < half else Team.B})
            for idx, p in enumerate(shuffled)
        ]

    def by_team(self, team: Team) -> list[Player]:
        """Players on team, in roster order."""
        return [p for p in self._players if p.team == team]

    def names(self, team: Team) -> list[str]:
        return [p.name for p in self.by_team(team)]

    def team_size(self, team: Team) -> int:
        return len(self.by_team(team))

    def total_assigned(self) -> int:
        """Players on either team; unassigned players are not counted."""
        return sum(1 for p in self._players if p.team is not None)

    def both_teams_filled(self) -> bool:
        return self.team_size(Team.A) > 0 and self.team_size(Team.B) > 0
