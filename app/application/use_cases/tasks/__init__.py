"""Use cases for managing tasks."""

from .create_task import create_task
from .get_task import delete_task, get_task
from .import_export import export_tasks, import_tasks
from .list_tasks import (
    BoardColumn,
    ProjectBoard,
    build_board,
    get_project_board,
    list_workspace_tasks,
)
from .publish_changes import publish_task_changes
from .update_task import (
    update_task,
    update_task_assignee,
    update_task_description,
    update_task_due_date,
    update_task_priority,
    update_task_status,
    update_task_title,
)

__all__ = [
    "BoardColumn",
    "ProjectBoard",
    "build_board",
    "create_task",
    "delete_task",
    "export_tasks",
    "get_project_board",
    "get_task",
    "import_tasks",
    "list_workspace_tasks",
    "publish_task_changes",
    "update_task",
    "update_task_assignee",
    "update_task_description",
    "update_task_due_date",
    "update_task_priority",
    "update_task_status",
    "update_task_title",
]
