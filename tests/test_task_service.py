# tests/test_task_service.py

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from faros.application import (
    add_subtask,
    add_tag,
    add_task,
    build_due_date,
    complete_task,
    modify_task,
    remove_task,
)
from faros.domain.shared import (
    BlockedByIncompleteChildren,
    Err,
    InvalidInput,
    NotFound,
    Ok,
)
from faros.domain.task import (
    ListFilter,
    Priority,
    TaskList,
    find_by_uuid,
    flatten,
    select_tasks,
)

from .fakes import FakeSelector


def _ok(result):
    assert isinstance(result, Ok), result
    return result.value


def test_add_task_appends_top_level(now) -> None:
    task_list, event = _ok(add_task(TaskList(), "A", "first", Priority.HIGH, now))

    assert [t.name for t in task_list.tasks] == ["A"]
    assert task_list.tasks[0].priority == Priority.HIGH
    assert task_list.tasks[0].due_date == now
    assert event.task_uuid == task_list.tasks[0].uuid
    assert event.parent_uuid is None


def test_add_task_rejects_naive_due_date() -> None:
    result = add_task(TaskList(), "A", due_date=datetime(2026, 1, 1, 9, 0))

    assert isinstance(result, Err)
    assert isinstance(result.error, InvalidInput)


def test_identities_stay_unique_across_adds() -> None:
    task_list = TaskList()
    for i in range(20):
        task_list, _ = _ok(add_task(task_list, f"t{i}"))
        task_list, _ = _ok(add_subtask(task_list, f"t{i}", f"s{i}"))

    uuids = [t.uuid for t in flatten(task_list)]
    assert len(uuids) == 40
    assert len(set(uuids)) == 40


def test_add_subtask_appends_to_incomplete_parent(sample_list: TaskList) -> None:
    task_list, event = _ok(add_subtask(sample_list, "plan", "edit"))

    plan = task_list.tasks[0]
    assert [c.name for c in plan.children] == ["research", "write", "edit"]
    assert event.parent_uuid == plan.uuid
    assert not event.reopened_parent


def test_add_subtask_reopens_completed_parent_keeping_children(make_task) -> None:
    task_list = TaskList(
        tasks=[make_task("parent", make_task("old", complete=True), complete=True)]
    )

    task_list, event = _ok(add_subtask(task_list, "parent", "new"))

    parent = task_list.tasks[0]
    assert not parent.is_complete
    assert [c.name for c in parent.children] == ["old", "new"]
    assert event.reopened_parent


def test_add_subtask_compatibility_mode_leaves_single_child(make_task) -> None:
    task_list = TaskList(tasks=[make_task("parent", make_task("old", complete=True))])
    task_list, _ = _ok(complete_task(task_list, "parent", preserve_children=False))

    task_list, _ = _ok(add_subtask(task_list, "parent", "new"))

    assert [c.name for c in task_list.tasks[0].children] == ["new"]


def test_add_subtask_missing_parent(sample_list: TaskList) -> None:
    result = add_subtask(sample_list, "nope", "child")

    assert isinstance(result, Err)
    assert isinstance(result.error, NotFound)
    assert "nope" in result.error.message


def test_add_subtask_with_ambiguous_parent_uses_selector(make_task) -> None:
    task_list = TaskList(tasks=[make_task("dup"), make_task("dup")])
    selector = FakeSelector("1")

    task_list, _ = _ok(add_subtask(task_list, "dup", "child", select=selector))

    assert task_list.tasks[0].children == []
    assert [c.name for c in task_list.tasks[1].children] == ["child"]


def test_complete_task(sample_list: TaskList) -> None:
    task_list, event = _ok(complete_task(sample_list, "review"))

    assert task_list.tasks[1].is_complete
    assert not sample_list.tasks[1].is_complete
    assert not event.already_complete


def test_complete_task_twice_reports_already_complete(sample_list: TaskList) -> None:
    task_list, _ = _ok(complete_task(sample_list, "review"))

    again, event = _ok(complete_task(task_list, "review"))

    assert event.already_complete
    assert again is task_list


def test_complete_task_blocked(sample_list: TaskList) -> None:
    result = complete_task(sample_list, "plan")

    assert isinstance(result, Err)
    assert isinstance(result.error, BlockedByIncompleteChildren)


def test_complete_task_not_found(sample_list: TaskList) -> None:
    result = complete_task(sample_list, "nope")

    assert isinstance(result, Err)
    assert result.error == NotFound("No task with name nope.")


def test_scenario_add_complete_list() -> None:
    reference = datetime.now().astimezone()
    task_list, _ = _ok(add_task(TaskList(), "A", due_date=reference + timedelta(days=1)))
    task_list, _ = _ok(
        add_subtask(task_list, "A", "B", due_date=reference + timedelta(days=2))
    )

    task_list, _ = _ok(complete_task(task_list, "B"))
    task_list, _ = _ok(complete_task(task_list, "A"))

    listed = select_tasks(task_list, ListFilter(), reference)
    assert [t.name for t in listed] == ["A"]
    assert listed[0].is_complete
    assert select_tasks(task_list, ListFilter(include_complete=False), reference) == []
    # B is kept under A, just not traversed
    assert [c.name for c in task_list.tasks[0].children] == ["B"]


def test_modify_task_changes_only_given_fields(make_task) -> None:
    original = make_task("A")
    task_list = TaskList(tasks=[original])

    task_list, event = _ok(modify_task(task_list, "A", name="A2", priority=Priority.LOW))

    task = task_list.tasks[0]
    assert (task.name, task.priority, task.description) == ("A2", Priority.LOW, original.description)
    assert task.due_date == original.due_date
    assert task.uuid == original.uuid
    assert event.changed == ["name", "priority"]
    assert event.task_name == "A2"


def test_modify_task_substitutes_date_components(make_task) -> None:
    task_list = TaskList(tasks=[make_task("A")])
    before = task_list.tasks[0].due_date.astimezone()

    task_list, event = _ok(modify_task(task_list, "A", day=1, hour=8))

    after = task_list.tasks[0].due_date
    assert (after.year, after.month, after.day) == (before.year, before.month, 1)
    assert (after.hour, after.minute, after.second) == (8, before.minute, 0)
    assert event.changed == ["due_date"]


def test_modify_task_impossible_date(make_task) -> None:
    task_list = TaskList(tasks=[make_task("A")])

    result = modify_task(task_list, "A", month=2, day=31)

    assert isinstance(result, Err)
    assert isinstance(result.error, InvalidInput)


def test_modify_task_not_found(sample_list: TaskList) -> None:
    result = modify_task(sample_list, "nope", name="x")

    assert result == Err(NotFound("There is no task named nope."))


def test_remove_task_recursive(sample_list: TaskList) -> None:
    task_list, event = _ok(remove_task(sample_list, "research"))

    assert [t.name for t in flatten(task_list)] == ["plan", "write", "review"]
    assert event.task_name == "research"


def test_remove_task_shallow_cannot_reach_top_level(sample_list: TaskList) -> None:
    result = remove_task(sample_list, "review", depth="shallow")

    assert isinstance(result, Err)
    assert isinstance(result.error, NotFound)


def test_remove_task_invalid_selection(make_task) -> None:
    task_list = TaskList(tasks=[make_task("dup"), make_task("dup")])

    result = remove_task(task_list, "dup", FakeSelector("2"))

    assert isinstance(result, Err)
    assert isinstance(result.error, InvalidInput)


def test_add_tag() -> None:
    task_list, event = _ok(add_tag(TaskList(), "work", "day job"))

    assert [t.name for t in task_list.tags] == ["work"]
    assert event.tag_uuid == task_list.tags[0].uuid


def test_build_due_date_defaults_to_end_of_today() -> None:
    due = _ok(build_due_date())
    today = datetime.now().astimezone()

    assert due.tzinfo is not None
    assert (due.year, due.month, due.day) == (today.year, today.month, today.day)
    assert (due.hour, due.minute, due.second) == (23, 59, 0)


def test_build_due_date_applies_components() -> None:
    due = _ok(build_due_date(2030, 6, 15, 9, 30))

    assert (due.year, due.month, due.day, due.hour, due.minute) == (2030, 6, 15, 9, 30)


@pytest.mark.parametrize(
    "components",
    [{"month": 13}, {"day": 0}, {"hour": 24}, {"minute": 60}, {"year": 0}],
)
def test_build_due_date_rejects_out_of_range(components) -> None:
    result = build_due_date(**components)

    assert isinstance(result, Err)
    assert isinstance(result.error, InvalidInput)


def test_removed_task_is_gone_by_identity(sample_list: TaskList) -> None:
    plan_uuid = sample_list.tasks[0].uuid

    task_list, _ = _ok(remove_task(sample_list, "plan"))

    assert find_by_uuid(task_list, plan_uuid) is None
