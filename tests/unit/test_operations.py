"""Task operations: positional add/remove contracts."""

import pytest

from todo.errors import InvalidIndexError
from todo.models import Task, TaskList
from todo.operations import add_task, list_tasks, remove_task


def _tasks(*descriptions):
    return TaskList(tasks=[Task(d) for d in descriptions])


def test_add_appends_to_end():
    task_list = _tasks("a")

    task = add_task(task_list, "b")

    assert task == Task("b")
    assert [t.description for t in task_list] == ["a", "b"]


def test_add_accepts_empty_description():
    task_list = TaskList()
    add_task(task_list, "")
    assert task_list.tasks == [Task("")]


@pytest.mark.parametrize("index", [1, 2, 3])
def test_remove_drops_exactly_one_and_keeps_order(index):
    descriptions = ["a", "b", "c"]
    task_list = _tasks(*descriptions)

    removed = remove_task(task_list, index)

    expected = descriptions[: index - 1] + descriptions[index:]
    assert removed.description == descriptions[index - 1]
    assert [t.description for t in task_list] == expected


def test_remove_shifts_later_positions_down():
    task_list = _tasks("a", "b")

    remove_task(task_list, 1)

    assert list_tasks(task_list) == [(1, Task("b"))]


@pytest.mark.parametrize(
    ("descriptions", "index"),
    [((), 0), ((), 1), (("a",), 0), (("a",), 2), (("a", "b"), -1), (("a", "b"), 3)],
)
def test_remove_out_of_range_leaves_list_untouched(descriptions, index):
    task_list = _tasks(*descriptions)

    with pytest.raises(InvalidIndexError) as exc_info:
        remove_task(task_list, index)

    assert [t.description for t in task_list] == list(descriptions)
    assert exc_info.value.lower == 1
    assert exc_info.value.upper == len(descriptions)
    assert exc_info.value.index == index


def test_invalid_index_message_reports_range():
    with pytest.raises(InvalidIndexError) as exc_info:
        remove_task(_tasks("a"), 2)

    assert str(exc_info.value) == "Invalid index 2. Please use a number between 1 and 1"


def test_list_tasks_is_one_based():
    assert list_tasks(_tasks("a", "b")) == [(1, Task("a")), (2, Task("b"))]
    assert list_tasks(TaskList()) == []
