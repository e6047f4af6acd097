"""Task operations: append, remove and enumerate entries of a TaskList."""

from todo.errors import InvalidIndexError
from todo.models import Task, TaskList


def add_task(task_list: TaskList, description: str) -> Task:
    task = Task(description=description)
    task_list.tasks.append(task)
    return task


def remove_task(task_list: TaskList, index: int) -> Task:
    """Remove the task at 1-based `index`. The list is untouched on failure."""
    if index < 1 or index > len(task_list):
        raise InvalidIndexError(index, upper=len(task_list))
    return task_list.tasks.pop(index - 1)


def list_tasks(task_list: TaskList) -> list[tuple[int, Task]]:
    return list(enumerate(task_list.tasks, start=1))


__all__ = ["add_task", "list_tasks", "remove_task"]
