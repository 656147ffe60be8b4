import logging
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from .config import DATABASE_URL
from .database import build_engine, build_session_factory, create_tables
from .errors import NotFoundError, PersistenceError, ValidationError
from .models import Task as TaskModel
from .schemas.task import Task

logger = logging.getLogger(__name__)


def _require_text(field: str, value: Optional[str]) -> str:
    if not value:
        raise ValidationError(field)
    return value


class TaskStore:
    """Durable collection of tasks.

    Every operation runs in its own short session and returns frozen
    snapshots; ORM rows never leave the store. Operations are serialized
    by an internal lock, so callers on worker threads see one writer.
    """

    def __init__(self, database_url: str = DATABASE_URL, engine: Optional[Engine] = None):
        self._owns_engine = engine is None
        self._engine = engine if engine is not None else build_engine(database_url)
        self._session_factory = build_session_factory(self._engine)
        self._lock = threading.Lock()
        try:
            create_tables(self._engine)
            total = self.count()
        except SQLAlchemyError as exc:
            logger.error("Could not create task tables: %s", exc, exc_info=True)
            self.close()
            raise PersistenceError("Could not initialise task storage", exc) from exc
        except PersistenceError:
            self.close()
            raise
        logger.info("TaskStore ready db=%s total=%s", self._engine.url, total)

    @property
    def engine(self) -> Engine:
        return self._engine

    def close(self) -> None:
        """Release the engine if this store created it."""
        if self._owns_engine:
            self._engine.dispose()

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        with self._lock:
            session = self._session_factory()
            try:
                yield session
            except SQLAlchemyError as exc:
                logger.error("Could not %s: %s", action, exc, exc_info=True)
                try:
                    session.rollback()
                except SQLAlchemyError as rollback_exc:
                    logger.error("Rollback failed after %s: %s", action, rollback_exc)
                raise PersistenceError(f"Could not {action}", exc) from exc
            finally:
                session.close()

    @staticmethod
    def _fetch(session: Session, task_id: str) -> TaskModel:
        task = session.exec(select(TaskModel).where(TaskModel.id == task_id)).first()
        if task is None:
            raise NotFoundError(task_id)
        return task

    def create(self, name: str, category: str) -> Task:
        """Persist a new, not yet completed task."""
        name = _require_text("name", name)
        category = _require_text("category", category)

        with self._session("save task") as session:
            db_task = TaskModel(name=name, category=category, completed=False)
            session.add(db_task)
            session.commit()
            session.refresh(db_task)
            task = Task.model_validate(db_task)

        logger.info("Task created id=%s category=%s", task.id, task.category)
        return task

    def list(self) -> List[Task]:
        """All tasks in insertion order."""
        with self._session("fetch tasks") as session:
            rows = session.exec(select(TaskModel).order_by(TaskModel.seq)).all()
            return [Task.model_validate(row) for row in rows]

    def get(self, task_id: str) -> Task:
        with self._session("fetch task") as session:
            return Task.model_validate(self._fetch(session, task_id))

    def count(self) -> int:
        with self._session("count tasks") as session:
            return session.exec(select(func.count()).select_from(TaskModel)).one()

    def toggle_completed(self, task_id: str) -> Task:
        """Flip ``completed`` on one task and return the updated snapshot."""
        with self._session("save task") as session:
            db_task = self._fetch(session, task_id)
            db_task.completed = not db_task.completed
            session.commit()
            session.refresh(db_task)
            task = Task.model_validate(db_task)

        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        return task

    def delete(self, task_id: str) -> None:
        """Remove one task permanently."""
        with self._session("delete task") as session:
            db_task = self._fetch(session, task_id)
            session.delete(db_task)
            session.commit()

        logger.info("Task deleted id=%s", task_id)
