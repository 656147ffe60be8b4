from typing import Optional


class TaskStoreError(Exception):
    """Base class for task store failures."""


class ValidationError(TaskStoreError):
    """A required task field was empty."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"Task {field} must not be empty")


class NotFoundError(TaskStoreError):
    """No task exists with the requested id."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")


class PersistenceError(TaskStoreError):
    """The underlying database failed to read or write.

    The message never includes the driver error, which may carry SQL and
    bound parameters; the original exception is kept on ``cause`` and
    chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)
