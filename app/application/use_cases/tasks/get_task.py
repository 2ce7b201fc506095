"""Use cases for reading and deleting single tasks."""

from sqlalchemy.orm import Session

from app.domain.entities import Task
from app.infrastructure.repositories import TaskRepository


def get_task(session: Session, task_id: str) -> Task:
    """Return the task identified by ``task_id`` or raise an error."""

    task = TaskRepository(session).get(task_id)
    if task is None:
        raise ValueError("Task not found")
    return task


def delete_task(session: Session, task_id: str) -> Task:
    """Delete a task with its activities and return its last state."""

    repository = TaskRepository(session)
    task = repository.get(task_id)
    if task is None:
        raise ValueError("Task not found")
    repository.delete(task_id)
    return task


__all__ = ["delete_task", "get_task"]
