from datetime import datetime

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Message-bearing result of gated and delete operations."""

    message: str = Field(..., description="Human-readable outcome")


class ActivityEntry(BaseModel):
    message: str
    timestamp: datetime
    level: str


class ActivityLogResponse(BaseModel):
    count: int
    entries: list[ActivityEntry]
