from .models import (
    Team, Phase, Player, GameConfig, GameSnapshot, PLACEHOLDER,
    Correct, Skipped, RoundEnded, HistoryEvent,
)
from .words import shuffle, load_wordlist, WordQueue
from .roster import Roster
from .clock import RoundClock
from .scoring import ScoreBoard, HistoryLog
from .engine import GameSession, TurnEngine
from .config import load_config

__all__ = [
    "Team", "Phase", "Player", "GameConfig", "GameSnapshot", "PLACEHOLDER",
    "Correct", "Skipped", "RoundEnded", "HistoryEvent",
    "shuffle", "load_wordlist", "WordQueue",
    "Roster", "RoundClock", "ScoreBoard", "HistoryLog",
    "GameSession", "TurnEngine",
    "load_config",
]
