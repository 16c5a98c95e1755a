# tests/test_traversal.py

from __future__ import annotations

import pytest

from faros.domain.shared import InconsistentTreeError
from faros.domain.task import (
    TaskList,
    count_tasks,
    find_by_uuid,
    flatten,
    remove_by_uuid,
    resolve_by_identity,
    update_by_uuid,
)


def _names(tasks) -> list[str]:
    return [task.name for task in tasks]


def test_flatten_is_pre_order(make_task) -> None:
    g1 = make_task("g1")
    node = make_task("node", make_task("c1", g1), make_task("c2"))

    assert _names(flatten(node)) == ["node", "c1", "g1", "c2"]


def test_flatten_task_list(sample_list: TaskList) -> None:
    assert _names(flatten(sample_list)) == [
        "plan",
        "research",
        "read papers",
        "write",
        "review",
    ]


def test_flatten_does_not_descend_into_completed_tasks(make_task) -> None:
    task_list = TaskList(
        tasks=[make_task("done", make_task("hidden", complete=True), complete=True)]
    )

    assert _names(flatten(task_list)) == ["done"]


def test_flatten_is_recomputed_after_mutation(sample_list: TaskList, make_task) -> None:
    before = flatten(sample_list)
    sample_list.tasks.append(make_task("later"))

    assert len(flatten(sample_list)) == len(before) + 1


def test_find_by_uuid_reaches_kept_children(make_task) -> None:
    hidden = make_task("hidden", complete=True)
    task_list = TaskList(tasks=[make_task("done", hidden, complete=True)])

    assert find_by_uuid(task_list, hidden.uuid) is hidden


def test_resolve_by_identity_raises_for_unknown_uuid(sample_list: TaskList, make_task) -> None:
    stranger = make_task("stranger")

    with pytest.raises(InconsistentTreeError):
        resolve_by_identity(sample_list, stranger.uuid)


def test_update_by_uuid_replaces_deep_node(sample_list: TaskList) -> None:
    target = flatten(sample_list)[2]  # read papers

    updated = update_by_uuid(
        sample_list, target.uuid, lambda node: node.model_copy(update={"name": "skim"})
    )

    assert _names(flatten(updated))[2] == "skim"
    assert _names(flatten(sample_list))[2] == "read papers"
    # Untouched subtrees are shared, not copied
    assert updated.tasks[1] is sample_list.tasks[1]


def test_update_by_uuid_unknown_raises(sample_list: TaskList, make_task) -> None:
    with pytest.raises(InconsistentTreeError):
        update_by_uuid(sample_list, make_task("x").uuid, lambda node: node)


def test_recursive_removal_at_any_depth(sample_list: TaskList) -> None:
    grandchild = flatten(sample_list)[2]

    updated = remove_by_uuid(sample_list, grandchild.uuid)

    assert _names(flatten(updated)) == ["plan", "research", "write", "review"]


def test_recursive_removal_of_top_level_takes_subtree(sample_list: TaskList) -> None:
    plan = sample_list.tasks[0]

    updated = remove_by_uuid(sample_list, plan.uuid)

    assert _names(flatten(updated)) == ["review"]


def test_shallow_removal_only_reaches_direct_children(sample_list: TaskList) -> None:
    plan, research, grandchild = flatten(sample_list)[:3]

    assert find_by_uuid(remove_by_uuid(sample_list, research.uuid, "shallow"), research.uuid) is None
    assert find_by_uuid(remove_by_uuid(sample_list, grandchild.uuid, "shallow"), grandchild.uuid)
    assert find_by_uuid(remove_by_uuid(sample_list, plan.uuid, "shallow"), plan.uuid)


def test_count_tasks(make_task) -> None:
    task_list = TaskList(
        tasks=[make_task("a", make_task("b", complete=True)), make_task("c", complete=True)]
    )

    assert count_tasks(task_list) == (2, 3)
