"""FastAPI app for the single-device game UI."""
from __future__ import annotations

import asyncio
import logging
from typing import AsyncGenerator, Callable

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse

from src.wordgame import GameSnapshot, Team, TurnEngine, load_config

from .formatters import NO_HISTORY, format_event
from .models import (
    AddPlayerRequest,
    HistoryLine,
    HistoryResponse,
    IntentResponse,
    RoundDurationRequest,
)

app = FastAPI(title="P-word Game UI API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger = logging.getLogger("ui_api")

_engine: TurnEngine | None = None
# Handlers are all async so the round clock and these queues share one loop
_streams: set[asyncio.Queue[GameSnapshot]] = set()


def get_engine() -> TurnEngine:
    global _engine
    if _engine is None:
        config, words = load_config()
        _engine = TurnEngine(words, config)
        _engine.subscribe(_broadcast)
        logger.info("Engine ready with %d words", len(words))
    return _engine


def reset_engine(engine: TurnEngine | None = None) -> None:
    """Replace the engine (None means build one from config on next use)."""
    global _engine
    if _engine is not None:
        _engine.session.clock.stop()
        _engine.unsubscribe(_broadcast)
    _engine = engine
    if engine is not None:
        engine.subscribe(_broadcast)


def _broadcast(snapshot: GameSnapshot) -> None:
    for queue in list(_streams):
        queue.put_nowait(snapshot)


def _apply(intent: Callable[[], bool]) -> IntentResponse:
    accepted = intent()
    return IntentResponse(accepted=accepted, state=get_engine().snapshot())


@app.get("/api/game", response_model=GameSnapshot)
async def game_state() -> GameSnapshot:
    return get_engine().snapshot()


@app.get("/api/game/history", response_model=HistoryResponse)
async def game_history(
    limit: int | None = Query(None, ge=0),
    team: Team | None = None,
) -> HistoryResponse:
    engine = get_engine()
    events = engine.session.history.recent(limit, team)
    lines = [
        HistoryLine(event_type=e.event_type, team=int(e.team), text=format_event(e, engine.config))
        for e in events
    ]
    return HistoryResponse(lines=lines, empty_text=None if lines else NO_HISTORY)


@app.post("/api/players", response_model=IntentResponse)
async def add_player(req: AddPlayerRequest) -> IntentResponse:
    return _apply(lambda: get_engine().add_player(req.name))


@app.delete("/api/players/{index}", response_model=IntentResponse)
async def remove_player(index: int) -> IntentResponse:
    return _apply(lambda: get_engine().remove_player(index))


@app.post("/api/teams/randomize", response_model=IntentResponse)
async def randomize_teams() -> IntentResponse:
    return _apply(lambda: get_engine().randomize_teams())


@app.put("/api/settings/round-duration", response_model=IntentResponse)
async def set_round_duration(req: RoundDurationRequest) -> IntentResponse:
    return _apply(lambda: get_engine().set_round_duration(req.seconds))


@app.post("/api/game/start", response_model=IntentResponse)
async def start_game() -> IntentResponse:
    return _apply(lambda: get_engine().start_game())


@app.post("/api/game/ready", response_model=IntentResponse)
async def mark_ready() -> IntentResponse:
    return _apply(lambda: get_engine().mark_ready())


@app.post("/api/game/correct", response_model=IntentResponse)
async def correct() -> IntentResponse:
    return _apply(lambda: get_engine().correct())


@app.post("/api/game/skip", response_model=IntentResponse)
async def skip() -> IntentResponse:
    return _apply(lambda: get_engine().skip())


@app.post("/api/game/pause", response_model=IntentResponse)
async def pause() -> IntentResponse:
    return _apply(lambda: get_engine().pause())


@app.post("/api/game/resume", response_model=IntentResponse)
async def resume() -> IntentResponse:
    return _apply(lambda: get_engine().resume())


@app.post("/api/game/toggle-pause", response_model=IntentResponse)
async def toggle_pause() -> IntentResponse:
    return _apply(lambda: get_engine().toggle_pause())


@app.post("/api/game/end-turn", response_model=IntentResponse)
async def end_turn() -> IntentResponse:
    return _apply(lambda: get_engine().end_turn_early())


@app.post("/api/game/back-to-setup", response_model=IntentResponse)
async def back_to_setup() -> IntentResponse:
    return _apply(lambda: get_engine().back_to_setup())


@app.post("/api/game/reset", response_model=IntentResponse)
async def reset_game() -> IntentResponse:
    return _apply(lambda: get_engine().reset_game())


async def _sse_stream(queue: asyncio.Queue[GameSnapshot]) -> AsyncGenerator[str, None]:
    try:
        yield f"event: state\ndata: {get_engine().snapshot().model_dump_json()}\n\n"
        while True:
            snapshot = await queue.get()
            yield f"event: state\ndata: {snapshot.model_dump_json()}\n\n"
    finally:
        _streams.discard(queue)


@app.get("/api/game/stream")
async def game_stream() -> StreamingResponse:
    queue: asyncio.Queue[GameSnapshot] = asyncio.Queue()
    _streams.add(queue)
    return StreamingResponse(_sse_stream(queue), media_type="text/event-stream")
