"""Turn engine: the round/turn state machine and scoring rules."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .clock import RoundClock
from .models import (
    Correct, GameConfig, GameSnapshot, Phase, Player, RoundEnded, Skipped, Team,
)
from .roster import Roster
from .scoring import HistoryLog, ScoreBoard
from .words import WordQueue, load_wordlist

logger = logging.getLogger(__name__)

Listener = Callable[[GameSnapshot], None]


@dataclass
class GameSession:
    """Everything that makes up one play-through on the device."""
    roster: Roster
    words: WordQueue
    clock: RoundClock
    scores: ScoreBoard = field(default_factory=ScoreBoard)
    history: HistoryLog = field(default_factory=HistoryLog)
    phase: Phase = Phase.SETUP
    current_team: Team = Team.A
    turn_pointers: dict[Team, int] = field(
        default_factory=lambda: {Team.A: 0, Team.B: 0}
    )
    turns_played: int = 0

    def reset_play(self) -> None:
        """Zero the play-through state, keeping roster and words."""
        self.clock.reset()
        self.scores.reset()
        self.history.clear()
        self.current_team = Team.A
        self.turn_pointers = {Team.A: 0, Team.B: 0}
        self.turns_played = 0


class TurnEngine:
    """Owns the game session and is its only writer.

    Every intent returns True when it took effect and False when it was
    ignored. Ignored intents leave the session untouched.
    """

    def __init__(
        self,
        word_list: Sequence[str] | None = None,
        config: GameConfig | None = None,
    ):
        if config is None:
            config = GameConfig()
        if word_list is None:
            word_list = load_wordlist()

        self.config = config
        rng = random.Random(config.seed)
        self.session = GameSession(
            roster=Roster(rng),
            words=WordQueue(word_list, rng, placeholder=config.placeholder),
            clock=RoundClock(
                config.round_seconds,
                on_expire=self._on_clock_expired,
                on_tick=self._on_clock_tick,
                interval=config.tick_interval,
            ),
        )
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self.session.phase

    @property
    def current_team(self) -> Team:
        return self.session.current_team

    @property
    def turns_played(self) -> int:
        return self.session.turns_played

    @property
    def total_turns(self) -> int:
        """One hint-giving turn per player on either team."""
        return self.session.roster.total_assigned()

    def current_word(self) -> str | None:
        if self.session.phase != Phase.ACTIVE:
            return None
        return self.session.words.current()

    def current_hint_giver(self, team: Team | None = None) -> Player | None:
        """Player whose turn it is on team (the current team by default)."""
        if team is None:
            team = self.session.current_team
        players = self.session.roster.by_team(team)
        if not players:
            return None
        return players[self.session.turn_pointers[team] % max(1, len(players))]

    def _hint_giver_name(self, team: Team) -> str:
        player = self.current_hint_giver(team)
        return player.name if player else self.config.placeholder

    def snapshot(self) -> GameSnapshot:
        s = self.session
        return GameSnapshot(
            phase=s.phase,
            players=s.roster.players,
            teams={team: s.roster.names(team) for team in Team},
            current_team=s.current_team,
            current_hint_giver=self._hint_giver_name(s.current_team),
            hint_givers={team: self._hint_giver_name(team) for team in Team},
            remaining_seconds=s.clock.remaining,
            running=s.clock.running,
            round_seconds=s.clock.duration,
            round_duration_options=list(self.config.round_duration_options),
            scores=s.scores.as_dict(),
            current_word=self.current_word(),
            history=s.history.events,
            turns_played=s.turns_played,
            total_turns=self.total_turns,
            winner=s.scores.leader() if s.phase == Phase.GAME_OVER else None,
        )

    def subscribe(self, listener: Listener) -> None:
        """Call listener with a fresh snapshot after every change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            # A failing subscriber must not stop the round or the other subscribers
            try:
                listener(snapshot)
            except Exception:
                logger.exception("State listener %r failed", listener)

    def _reject(self, intent: str, reason: str) -> bool:
        logger.debug("Ignored %s: %s", intent, reason)
        return False

    # ------------------------------------------------------------------
    # Setup intents
    # ------------------------------------------------------------------

    def add_player(self, name: str) -> bool:
        if not self.session.roster.add_player(name):
            return self._reject("add_player", "blank name")
        self._notify()
        return True

    def remove_player(self, index: int) -> bool:
        if not self.session.roster.remove_player(index):
            return self._reject("remove_player", f"no player at {index}")
        self._notify()
        return True

    def randomize_teams(self) -> bool:
        if self.session.phase != Phase.SETUP:
            return self._reject("randomize_teams", f"phase is {self.session.phase.value}")
        self.session.roster.randomize_teams()
        self._notify()
        return True

    def set_round_duration(self, seconds: int) -> bool:
        if self.session.phase == Phase.ACTIVE:
            return self._reject("set_round_duration", "round in progress")
        if seconds not in self.config.round_duration_options:
            return self._reject("set_round_duration", f"{seconds}s is not an option")
        self.session.clock.reconfigure(seconds)
        self._notify()
        return True

    def start_game(self) -> bool:
        s = self.session
        if s.phase != Phase.SETUP:
            return self._reject("start_game", f"phase is {s.phase.value}")
        if not s.roster.both_teams_filled():
            return self._reject("start_game", "both teams need at least one player")

        s.reset_play()
        if s.words.is_empty():
            s.words.reshuffle()
        s.words.rewind()
        s.phase = Phase.READY
        logger.info(
            "Game started: %d vs %d players, %ds rounds",
            s.roster.team_size(Team.A), s.roster.team_size(Team.B), s.clock.duration,
        )
        self._notify()
        return True

    # ------------------------------------------------------------------
    # Round intents
    # ------------------------------------------------------------------

    def mark_ready(self) -> bool:
        s = self.session
        if s.phase != Phase.READY:
            return self._reject("mark_ready", f"phase is {s.phase.value}")
        s.clock.reset()
        s.phase = Phase.ACTIVE
        s.clock.start()
        logger.info(
            "Round %d: %s describing for team %s",
            s.turns_played + 1, self._hint_giver_name(s.current_team), s.current_team.name,
        )
        self._notify()
        return True

    def correct(self) -> bool:
        return self._adjudicate(correct=True)

    def skip(self) -> bool:
        return self._adjudicate(correct=False)

    def _adjudicate(self, correct: bool) -> bool:
        s = self.session
        intent = "correct" if correct else "skip"
        if s.phase != Phase.ACTIVE:
            return self._reject(intent, f"phase is {s.phase.value}")
        if not s.clock.running:
            return self._reject(intent, "clock is paused")

        word = s.words.current()
        event_cls = Correct if correct else Skipped
        if correct:
            s.scores.award(s.current_team, self.config.correct_points)
        else:
            s.scores.penalize(s.current_team, self.config.skip_penalty)
        s.history.record(event_cls(
            turn_number=s.turns_played + 1,
            event_index=s.history.next_index(),
            team=s.current_team,
            word=word,
        ))
        s.words.advance()
        self._notify()
        return True

    def pause(self) -> bool:
        if self.session.phase != Phase.ACTIVE:
            return self._reject("pause", f"phase is {self.session.phase.value}")
        if not self.session.clock.pause():
            return self._reject("pause", "clock already paused")
        self._notify()
        return True

    def resume(self) -> bool:
        if self.session.phase != Phase.ACTIVE:
            return self._reject("resume", f"phase is {self.session.phase.value}")
        if not self.session.clock.start():
            return self._reject("resume", "clock already running")
        self._notify()
        return True

    def toggle_pause(self) -> bool:
        if self.session.clock.running:
            return self.pause()
        return self.resume()

    def end_turn_early(self) -> bool:
        if self.session.phase != Phase.ACTIVE:
            return self._reject("end_turn_early", f"phase is {self.session.phase.value}")
        self._end_round()
        return True

    def _on_clock_tick(self, remaining: int) -> None:
        # Expiry notifies through _end_round
        if remaining > 0:
            self._notify()

    def _on_clock_expired(self) -> None:
        if self.session.phase == Phase.ACTIVE:
            self._end_round()

    def _end_round(self) -> None:
        s = self.session
        s.clock.stop()
        s.history.record(RoundEnded(
            turn_number=s.turns_played + 1,
            event_index=s.history.next_index(),
            team=s.current_team,
            remaining_seconds=s.clock.remaining,
        ))
        s.turns_played += 1
        logger.info(
            "Round %d over for team %s with %ds left, score %d:%d",
            s.turns_played, s.current_team.name, s.clock.remaining, *s.scores.as_pair(),
        )

        if s.turns_played >= self.total_turns:
            s.phase = Phase.GAME_OVER
            logger.info("Game over after %d rounds", s.turns_played)
        else:
            team = s.current_team
            team_size = max(1, s.roster.team_size(team))
            s.turn_pointers[team] = (s.turn_pointers[team] + 1) % team_size
            s.current_team = team.other()
            s.phase = Phase.READY
        self._notify()

    # ------------------------------------------------------------------
    # Leaving a play-through
    # ------------------------------------------------------------------

    def back_to_setup(self) -> bool:
        """Return to setup from anywhere. Roster and word order are kept."""
        self.session.reset_play()
        self.session.phase = Phase.SETUP
        self._notify()
        return True

    def reset_game(self) -> bool:
        """Like back_to_setup, with a freshly shuffled word queue."""
        self.session.reset_play()
        self.session.words.reshuffle()
        self.session.phase = Phase.SETUP
        logger.info("Game reset")
        self._notify()
        return True
