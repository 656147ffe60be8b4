from pydantic import BaseModel, computed_field
from datetime import datetime

COMPLETED_MARK = "✅"


class TaskBase(BaseModel):
    """Base task schema with common fields."""
    name: str
    category: str


class TaskCreate(TaskBase):
    """Schema for creating new tasks."""
    pass


class Task(TaskBase):
    """Immutable snapshot of a stored task."""
    id: str
    completed: bool = False
    created_at: datetime

    class Config:
        from_attributes = True
        frozen = True

    @computed_field
    @property
    def status_mark(self) -> str:
        return COMPLETED_MARK if self.completed else ""


class TaskResponse(Task):
    """Task response schema for API responses."""
    pass
