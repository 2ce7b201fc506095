"""Schemas for the workspace search endpoint."""

from pydantic import BaseModel

from .project import ProjectRead
from .task import TaskRead


class SearchResultsRead(BaseModel):
    tasks: list[TaskRead]
    projects: list[ProjectRead]


__all__ = ["SearchResultsRead"]
