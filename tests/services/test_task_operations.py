"""Unit tests for the pure task list operations.

Every mutating operation must return a new list and leave its input, and
the tasks inside it, untouched.
"""

from __future__ import annotations

import pytest

from taskflow.models import TaskCounts
from taskflow.services.task_factory import create_task
from taskflow.services.task_operations import (
    add_task,
    clear_completed,
    count_tasks,
    delete_task,
    filter_tasks,
    find_task,
    sort_by_priority,
    toggle_task,
)


@pytest.fixture()
def mixed(make_task):
    return [
        make_task("a", "A", completed=False),
        make_task("b", "B", completed=True),
        make_task("c", "C", completed=False),
    ]


class TestAddTask:
    def test_add_to_empty_list(self):
        result = add_task([], create_task("Test"))

        assert len(result) == 1
        assert result[0].text == "Test"

    def test_appends_at_end(self):
        t1, t2 = create_task("A"), create_task("B")

        result = add_task(add_task([], t1), t2)

        assert [task.text for task in result] == ["A", "B"]

    def test_does_not_modify_input(self):
        tasks = [create_task("A")]

        result = add_task(tasks, create_task("B"))

        assert len(result) == 2
        assert len(tasks) == 1
        assert result is not tasks

    def test_accepts_tuple(self, make_task):
        result = add_task((make_task("a"),), make_task("b"))
        assert isinstance(result, list)
        assert [task.id for task in result] == ["a", "b"]


class TestDeleteTask:
    def test_deletes_by_id(self, make_task):
        tasks = [make_task("a"), make_task("b")]

        result = delete_task(tasks, "a")

        assert [task.id for task in result] == ["b"]
        assert len(tasks) == 2

    def test_missing_id_keeps_content_but_new_list(self, make_task):
        tasks = [make_task("a")]

        result = delete_task(tasks, "missing")

        assert result == tasks
        assert result is not tasks

    def test_empty_list(self):
        assert delete_task([], "anything") == []

    def test_preserves_order(self, mixed):
        assert [task.id for task in delete_task(mixed, "b")] == ["a", "c"]


class TestToggleTask:
    def test_flips_only_target(self, make_task):
        tasks = [make_task("a"), make_task("b")]

        result = toggle_task(tasks, "a")

        assert result[0].id == "a"
        assert result[0].completed is True
        assert result[1].completed is False
        assert result[1] == tasks[1]

    def test_toggle_twice_restores(self, make_task):
        tasks = [make_task("a")]
        assert toggle_task(toggle_task(tasks, "a"), "a") == tasks

    def test_input_untouched(self, make_task):
        tasks = [make_task("a")]

        toggle_task(tasks, "a")

        assert tasks[0].completed is False

    def test_missing_id_returns_fresh_equal_list(self, make_task):
        tasks = [make_task("a")]

        result = toggle_task(tasks, "missing")

        assert result == tasks
        assert result is not tasks


class TestFilterTasks:
    def test_active(self, mixed):
        result = filter_tasks(mixed, "active")
        assert [task.id for task in result] == ["a", "c"]

    def test_completed(self, mixed):
        result = filter_tasks(mixed, "completed")
        assert [task.id for task in result] == ["b"]

    @pytest.mark.parametrize("mode", ["all", "weird", "", None])
    def test_other_modes_return_same_list(self, mixed, mode):
        assert filter_tasks(mixed, mode) is mixed


class TestClearCompleted:
    def test_removes_completed(self, mixed):
        result = clear_completed(mixed)

        assert [task.id for task in result] == ["a", "c"]
        assert all(not task.completed for task in result)
        assert len(mixed) == 3

    def test_returns_new_list_when_nothing_to_clear(self, make_task):
        tasks = [make_task("a")]

        result = clear_completed(tasks)

        assert result == tasks
        assert result is not tasks


class TestCountTasks:
    def test_counts(self, make_task):
        tasks = [
            make_task("a", completed=False),
            make_task("b", completed=True),
            make_task("c", completed=True),
        ]

        assert count_tasks(tasks) == TaskCounts(total=3, active=1, completed=2)

    def test_empty(self):
        assert count_tasks([]).model_dump() == {"total": 0, "active": 0, "completed": 0}

    def test_active_plus_completed_is_total(self, mixed):
        counts = count_tasks(mixed)
        assert counts.active + counts.completed == counts.total == len(mixed)


class TestSortByPriority:
    def test_high_medium_low(self, make_task):
        tasks = [
            make_task("l", priority="low"),
            make_task("m", priority="medium"),
            make_task("h", priority="high"),
        ]

        result = sort_by_priority(tasks)

        assert [task.priority for task in result] == ["high", "medium", "low"]

    def test_stable_within_priority(self, make_task):
        tasks = [
            make_task("l1", priority="low"),
            make_task("h1", priority="high"),
            make_task("m1", priority="medium"),
            make_task("h2", priority="high"),
            make_task("l2", priority="low"),
            make_task("m2", priority="medium"),
        ]

        result = sort_by_priority(tasks)

        assert [task.id for task in result] == ["h1", "h2", "m1", "m2", "l1", "l2"]

    def test_does_not_modify_input(self, make_task):
        tasks = [make_task("a", priority="low"), make_task("b", priority="high")]

        result = sort_by_priority(tasks)

        assert result is not tasks
        assert tasks[0].id == "a"

    def test_empty(self):
        assert sort_by_priority([]) == []


class TestFindTask:
    def test_found(self, mixed):
        assert find_task(mixed, "b") is mixed[1]

    def test_missing(self, mixed):
        assert find_task(mixed, "zzz") is None


def test_add_toggle_delete_scenario():
    """Add "Buy bread", complete it, then delete it."""
    task = create_task("Buy bread")
    tasks = add_task([], task)

    assert len(tasks) == 1
    assert tasks[0].text == "Buy bread"
    assert tasks[0].completed is False
    assert tasks[0].priority == "medium"

    tasks = toggle_task(tasks, task.id)
    assert tasks[0].completed is True

    tasks = delete_task(tasks, task.id)
    assert tasks == []
