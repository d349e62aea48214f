from uuid import UUID

from pydantic import BaseModel

from gymtastic.models import Progress, SequenceEntry, Session
from .env_loader import EnvironmentName


class SessionState(BaseModel):
    """Everything a session view needs to render one refresh."""

    session: Session
    progress: Progress
    progress_text: str
    elapsed_display: str
    current_entry: SequenceEntry | None
    upcoming: list[SequenceEntry]
    remaining_set_break_seconds: int | None = None
    remaining_regular_break_seconds: int | None = None
    is_complete: bool


class SessionList(BaseModel):
    session_ids: list[UUID]


class EnvironmentResponse(BaseModel):
    """Response model for the environment endpoint."""

    environment: EnvironmentName
