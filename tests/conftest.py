# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from faros.domain.task import Completion, Priority, TaskList, TaskNode

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone(timedelta(hours=2)))


@pytest.fixture()
def now() -> datetime:
    """Fixed reference instant for due-date arithmetic."""
    return NOW


@pytest.fixture()
def faros_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point the config directory at a temp dir for the duration of a test.

    Nothing under the real ~/.config/faros is read or written.
    """
    home = tmp_path / "faros-home"
    monkeypatch.setenv("FAROS_HOME", str(home))
    monkeypatch.delenv("FAROS_LOG_LEVEL", raising=False)
    return home


@pytest.fixture()
def make_task() -> Callable[..., TaskNode]:
    """Factory for tasks with sensible defaults relative to NOW."""

    def factory(
        name: str,
        *children: TaskNode,
        due_in_days: float = 1,
        priority: Priority = Priority.MEDIUM,
        complete: bool = False,
    ) -> TaskNode:
        return TaskNode(
            name=name,
            description=f"{name} description",
            priority=priority,
            due_date=NOW + timedelta(days=due_in_days),
            completion=Completion.COMPLETE if complete else Completion.INCOMPLETE,
            children=list(children),
        )

    return factory


@pytest.fixture()
def sample_list(make_task: Callable[..., TaskNode]) -> TaskList:
    """
    A small forest:

        plan
          research
            read papers
          write
        review
    """
    return TaskList(
        tasks=[
            make_task(
                "plan",
                make_task("research", make_task("read papers")),
                make_task("write"),
            ),
            make_task("review"),
        ]
    )
