"""Environment-driven configuration."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from .models import GameConfig
from .words import load_wordlist


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[2]


def load_config(env_file: Path | None = None) -> tuple[GameConfig, list[str]]:
    """Build the game config and canonical word list from the environment.

    Reads ``WORDGAME_WORDLIST``, ``WORDGAME_ROUND_SECONDS`` and
    ``WORDGAME_SEED``, after loading ``.env`` from the repo root if present.
    """
    load_dotenv(env_file or _repo_root() / ".env")

    overrides: dict[str, int] = {}
    round_seconds = os.environ.get("WORDGAME_ROUND_SECONDS")
    if round_seconds:
        overrides["round_seconds"] = int(round_seconds)
    seed = os.environ.get("WORDGAME_SEED")
    if seed:
        overrides["seed"] = int(seed)
    config = GameConfig(**overrides)

    wordlist = os.environ.get("WORDGAME_WORDLIST")
    words = load_wordlist(Path(wordlist) if wordlist else None)
    return config, words
