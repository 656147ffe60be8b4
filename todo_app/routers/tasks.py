from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from ..schemas.task import TaskCreate, TaskResponse
from ..store import TaskStore

router = APIRouter()


def get_store(request: Request) -> TaskStore:
    """Dependency returning the store the app was built with."""
    return request.app.state.store


@router.get("/tasks", response_model=List[TaskResponse])
def list_tasks(store: TaskStore = Depends(get_store)):
    """Get all tasks in the order they were added."""
    return store.list()


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(task: TaskCreate, store: TaskStore = Depends(get_store)):
    """Create a new task."""
    return store.create(task.name, task.category)


@router.get("/tasks/{task_id}", response_model=TaskResponse)
def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Get a specific task by ID."""
    return store.get(task_id)


@router.patch("/tasks/{task_id}/toggle", response_model=TaskResponse)
def toggle_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Flip the completion state of a task."""
    return store.toggle_completed(task_id)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Delete a specific task."""
    store.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
