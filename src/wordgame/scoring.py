"""Score accounting and the history of adjudicated events."""

from __future__ import annotations

from .models import HistoryEvent, Team


class ScoreBoard:
    """Per-team running totals. No clamping; totals can go negative."""

    def __init__(self):
        self._scores: dict[Team, int] = {Team.A: 0, Team.B: 0}

    def __getitem__(self, team: Team) -> int:
        return self._scores[team]

    def award(self, team: Team, points: int = 2) -> int:
        self._scores[team] += points
        return self._scores[team]

    def penalize(self, team: Team, points: int = -1) -> int:
        self._scores[team] += points
        return self._scores[team]

    def as_dict(self) -> dict[Team, int]:
        return dict(self._scores)

    def as_pair(self) -> tuple[int, int]:
        return self._scores[Team.A], self._scores[Team.B]

    def leader(self) -> Team | None:
        """Team with the higher score, None on a tie."""
        a, b = self.as_pair()
        if a == b:
            return None
        return Team.A if a > b else Team.B

    def reset(self) -> None:
        for team in self._scores:
            self._scores[team] = 0


class HistoryLog:
    """Append-only, chronological log of game events."""

    def __init__(self):
        self._events: list[HistoryEvent] = []

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> list[HistoryEvent]:
        return list(self._events)

    def next_index(self) -> int:
        return len(self._events) + 1

    def record(self, event: HistoryEvent) -> None:
        self._events.append(event)

    def recent(
        self, limit: int | None = None, team: Team | None = None
    ) -> list[HistoryEvent]:
        """Most recent first, as displayed, optionally for one team."""
        events = self._events if team is None else self.for_team(team)
        newest_first = events[::-1]
        if limit is not None:
            return newest_first[:limit]
        return newest_first

    def for_team(self, team: Team) -> list[HistoryEvent]:
        return [e for e in self._events if e.team == team]

    def clear(self) -> None:
        self._events.clear()
