"""Request/response models for the UI API."""
from __future__ import annotations

from pydantic import BaseModel, Field

from src.wordgame import GameSnapshot


class AddPlayerRequest(BaseModel):
    name: str


class RoundDurationRequest(BaseModel):
    seconds: int = Field(gt=0)


class IntentResponse(BaseModel):
    """Whether an intent took effect, plus the state after it."""
    accepted: bool
    state: GameSnapshot


class HistoryLine(BaseModel):
    event_type: str
    team: int
    text: str


class HistoryResponse(BaseModel):
    lines: list[HistoryLine]
    empty_text: str | None = None
