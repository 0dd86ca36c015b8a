"""Polish labels for teams and history lines."""
from __future__ import annotations

from src.wordgame import Correct, GameConfig, HistoryEvent, RoundEnded, Skipped, Team

NO_HISTORY = "Brak akcji jeszcze."


def team_letter(team: Team) -> str:
    return "A" if team == Team.A else "B"


def team_label(team: Team) -> str:
    return f"Drużyna {team_letter(team)}"


def format_event(event: HistoryEvent, config: GameConfig | None = None) -> str:
    """One history line; point prefixes follow the game's scoring config."""
    config = config or GameConfig()
    if isinstance(event, Correct):
        return f"{config.correct_points:+d}: {team_label(event.team)} — słowo {event.word}"
    if isinstance(event, Skipped):
        return f"{config.skip_penalty:+d}: {team_label(event.team)} — pominięte {event.word}"
    if isinstance(event, RoundEnded):
        return (
            f"~ Koniec rundy dla drużyny {team_letter(event.team)} "
            f"(zostało {event.remaining_seconds}s)"
        )
    raise TypeError(f"Unknown history event: {event!r}")
