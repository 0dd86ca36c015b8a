"""Data models for the P-word game engine."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, model_validator

PLACEHOLDER = "—"


class Team(int, Enum):
    """Team enumeration (A starts every game)."""
    A = 0
    B = 1

    def other(self) -> "Team":
        return Team.B if self is Team.A else Team.A


class Phase(str, Enum):
    """Game phase enumeration."""
    SETUP = "SETUP"
    READY = "READY"          # Waiting for the next hint-giver to confirm
    ACTIVE = "ACTIVE"        # Round clock is live
    GAME_OVER = "GAME_OVER"


class Player(BaseModel):
    """A player on the shared device."""
    name: str = Field(min_length=1)
    team: Team | None = None  # Unset until teams are drawn


class GameConfig(BaseModel):
    """Configuration for a P-word game."""
    round_seconds: int = 60
    round_duration_options: tuple[int, ...] = (60, 90, 120)
    correct_points: int = 2
    skip_penalty: int = -1
    tick_interval: float = 1.0  # Seconds of real time per clock tick
    seed: int | None = None
    placeholder: str = PLACEHOLDER

    @model_validator(mode="after")
    def check_round_seconds(self) -> "GameConfig":
        if any(option <= 0 for option in self.round_duration_options):
            raise ValueError("Round durations must be positive")
        if self.round_seconds not in self.round_duration_options:
            raise ValueError(
                f"round_seconds {self.round_seconds} is not one of "
                f"{list(self.round_duration_options)}"
            )
        return self


# History events

class Correct(BaseModel):
    """A word guessed by the hint-giver's team."""
    event_type: Literal["correct"] = "correct"
    turn_number: int
    event_index: int
    team: Team
    word: str


class Skipped(BaseModel):
    """A word the team gave up on."""
    event_type: Literal["skip"] = "skip"
    turn_number: int
    event_index: int
    team: Team
    word: str


class RoundEnded(BaseModel):
    """End of a round, by timeout or ended early."""
    event_type: Literal["round_end"] = "round_end"
    turn_number: int
    event_index: int
    team: Team
    remaining_seconds: int


# Union type for history events
HistoryEvent = Correct | Skipped | RoundEnded


class GameSnapshot(BaseModel):
    """Read-only view of a game session for rendering."""
    phase: Phase
    players: list[Player]
    teams: dict[Team, list[str]]
    current_team: Team
    current_hint_giver: str
    hint_givers: dict[Team, str]
    remaining_seconds: int
    running: bool
    round_seconds: int
    round_duration_options: list[int]
    scores: dict[Team, int]
    current_word: str | None = None  # Only shown to the hint-giver mid-round
    history: list[HistoryEvent] = Field(default_factory=list)
    turns_played: int = 0
    total_turns: int = 0
    winner: Team | None = None
