from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(SQLModel, table=True):
    """Task row for todo items.

    ``seq`` only exists to keep insertion order; callers address tasks by ``id``.
    """
    __tablename__ = "tasks"

    seq: Optional[int] = Field(default=None, primary_key=True)
    id: str = Field(default_factory=lambda: str(uuid4()), unique=True, index=True)
    name: str
    category: str
    completed: bool = Field(default=False)
    created_at: datetime = Field(default_factory=_utcnow)
