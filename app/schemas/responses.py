from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from app.schemas.batch import BatchStats


class JobSubmittedResponse(BaseModel):
    job_id: str
    status: str
    message: str


class JobStatusResponse(BaseModel):
    job_id: str
    status: str
    created_at: datetime
    finished_at: datetime | None = None
    filename: str | None = None
    stats: BatchStats
    progress: int  # percent
    error: str | None = None
