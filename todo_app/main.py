import logging
from typing import Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import Settings, get_settings
from .errors import NotFoundError, PersistenceError, ValidationError
from .routers import tasks
from .routers.tasks import get_store
from .store import TaskStore

logger = logging.getLogger(__name__)


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app(store: Optional[TaskStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around one task store.

    When ``store`` is omitted one is opened from ``settings.database_url``
    and closed again on shutdown.
    """
    settings = settings or get_settings()
    owns_store = store is None
    if store is None:
        store = TaskStore(settings.database_url)

    app = FastAPI(
        title="Todo API",
        description="Single-list todo application API",
        version=__version__,
    )
    app.state.store = store

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return _error_response(422, exc)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(PersistenceError)
    async def handle_persistence_error(request: Request, exc: PersistenceError):
        logger.warning("Storage unavailable for %s %s", request.method, request.url.path)
        return _error_response(status.HTTP_503_SERVICE_UNAVAILABLE, exc)

    # Include routers
    app.include_router(tasks.router, prefix="/api", tags=["tasks"])

    @app.on_event("shutdown")
    def on_shutdown():
        if owns_store:
            store.close()

    @app.get("/")
    def read_root():
        return {"message": "Todo API"}

    @app.get("/health")
    def health_check(store: TaskStore = Depends(get_store)):
        return {"status": "healthy", "tasks": store.count()}

    return app
