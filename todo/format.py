"""Task formatting for CLI display."""

from todo.models import TaskList
from todo.operations import list_tasks

EMPTY_MESSAGE = "No tasks found."


def format_task_list(task_list: TaskList) -> str:
    """Format tasks as a numbered list, one line per task."""
    if not task_list.tasks:
        return EMPTY_MESSAGE

    lines = ["Your tasks:"]
    for position, task in list_tasks(task_list):
        lines.append(f"{position}. {task.description}")

    return "\n".join(lines)
