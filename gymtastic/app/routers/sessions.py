"""Routes for executing workouts as live sessions.

A client posts a workout definition to start a session, then drives it with
`advance`, `pause` and `resume`, polling `GET /sessions/{id}` about once a
second to refresh countdowns. `stop` or `complete` returns the summary and
discards the session.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from gymtastic.execution import (
    CannotAdvanceError,
    ExecutionEngine,
    SessionNotActiveError,
    SessionNotFoundError,
    SessionStore,
    WorkoutNotValidError,
)
from gymtastic.models import Session, Summary, WorkoutDefinition
from gymtastic.utils.formatting import format_clock
from gymtastic.app.dependencies import execution_engine, session_store, upcoming_entries_count
from gymtastic.app.models import SessionList, SessionState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _build_session_state(
    session: Session, engine: ExecutionEngine, upcoming_count: int
) -> SessionState:
    progress = engine.progress(session)
    return SessionState(
        session=session,
        progress=progress,
        progress_text=progress.progress_text(),
        elapsed_display=format_clock(progress.elapsed_seconds),
        current_entry=session.current_entry,
        upcoming=engine.upcoming_entries(session, upcoming_count),
        remaining_set_break_seconds=engine.remaining_set_break_seconds(session),
        remaining_regular_break_seconds=engine.remaining_regular_break_seconds(session),
        is_complete=engine.is_complete(session),
    )


def _not_found(e: SessionNotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Session {e.session_id} not found")


@router.post("", status_code=201, response_model=SessionState)
def start_session(
    workout: WorkoutDefinition,
    engine: ExecutionEngine = Depends(execution_engine),
    store: SessionStore = Depends(session_store),
    upcoming_count: int = Depends(upcoming_entries_count),
) -> SessionState:
    """Start executing a workout."""
    try:
        session = store.start(engine, workout)
    except WorkoutNotValidError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _build_session_state(session, engine, upcoming_count)


@router.get("", response_model=SessionList)
def list_sessions(store: SessionStore = Depends(session_store)) -> SessionList:
    return SessionList(session_ids=store.ids())


@router.get("/{session_id}", response_model=SessionState)
def read_session(
    session_id: UUID,
    engine: ExecutionEngine = Depends(execution_engine),
    store: SessionStore = Depends(session_store),
    upcoming_count: int = Depends(upcoming_entries_count),
) -> SessionState:
    """Current state of a session, with countdowns computed at request time."""
    try:
        session = store.get(session_id)
    except SessionNotFoundError as e:
        raise _not_found(e)
    return _build_session_state(session, engine, upcoming_count)


@router.post("/{session_id}/advance", response_model=SessionState)
def advance_session(
    session_id: UUID,
    engine: ExecutionEngine = Depends(execution_engine),
    store: SessionStore = Depends(session_store),
    upcoming_count: int = Depends(upcoming_entries_count),
) -> SessionState:
    """Finish the current set, rest or entry."""
    try:
        session = store.apply(session_id, engine.advance)
    except SessionNotFoundError as e:
        raise _not_found(e)
    except (SessionNotActiveError, CannotAdvanceError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _build_session_state(session, engine, upcoming_count)


@router.post("/{session_id}/pause", response_model=SessionState)
def pause_session(
    session_id: UUID,
    engine: ExecutionEngine = Depends(execution_engine),
    store: SessionStore = Depends(session_store),
    upcoming_count: int = Depends(upcoming_entries_count),
) -> SessionState:
    try:
        session = store.apply(session_id, engine.pause)
    except SessionNotFoundError as e:
        raise _not_found(e)
    return _build_session_state(session, engine, upcoming_count)


@router.post("/{session_id}/resume", response_model=SessionState)
def resume_session(
    session_id: UUID,
    engine: ExecutionEngine = Depends(execution_engine),
    store: SessionStore = Depends(session_store),
    upcoming_count: int = Depends(upcoming_entries_count),
) -> SessionState:
    try:
        session = store.apply(session_id, engine.resume)
    except SessionNotFoundError as e:
        raise _not_found(e)
    return _build_session_state(session, engine, upcoming_count)


@router.post("/{session_id}/stop", response_model=Summary)
def stop_session(
    session_id: UUID,
    engine: ExecutionEngine = Depends(execution_engine),
    store: SessionStore = Depends(session_store),
) -> Summary:
    """End a session early and return its summary."""
    try:
        return store.finish(session_id, engine.stop)
    except SessionNotFoundError as e:
        raise _not_found(e)


@router.post("/{session_id}/complete", response_model=Summary)
def complete_session(
    session_id: UUID,
    engine: ExecutionEngine = Depends(execution_engine),
    store: SessionStore = Depends(session_store),
) -> Summary:
    """Finish a session and return its summary.

    Completion is reported as 100% even if entries remain; clients should
    check `is_complete` on the session state first.
    """
    try:
        summary = store.finish(session_id, engine.complete)
    except SessionNotFoundError as e:
        raise _not_found(e)
    logger.info(f"Session {session_id} completed: {summary.formatted_duration()}")
    return summary
