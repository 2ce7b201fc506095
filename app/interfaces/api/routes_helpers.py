"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from app.application.use_cases.tasks import ProjectBoard
from app.interfaces.api.schemas import BoardColumnRead, ProjectBoardRead, TaskRead


def http_error_from(exc: Exception) -> HTTPException:
    """Translate a use case error into the matching HTTP error.

    ``PermissionError`` becomes 403, a ``ValueError`` whose message reports a
    missing resource becomes 404 and any other ``ValueError`` becomes 400.
    """

    detail = str(exc)
    if isinstance(exc, PermissionError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
    if detail.lower().endswith("not found"):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def board_to_schema(board: ProjectBoard) -> ProjectBoardRead:
    project = board.project
    return ProjectBoardRead(
        id=project.id,
        name=project.name,
        slug=project.slug,
        icon=project.icon,
        description=project.description,
        is_public=project.is_public,
        workspace_id=project.workspace_id,
        columns=[
            BoardColumnRead(
                id=column.id,
                name=column.name,
                tasks=[TaskRead.model_validate(task) for task in column.tasks],
            )
            for column in board.columns
        ],
        planned_tasks=[TaskRead.model_validate(task) for task in board.planned_tasks],
        archived_tasks=[TaskRead.model_validate(task) for task in board.archived_tasks],
    )


__all__ = ["board_to_schema", "http_error_from"]
