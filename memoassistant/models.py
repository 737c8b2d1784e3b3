"""Core data types for memo tasks and users, and task ordering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable


@dataclass
class Task:
    """A single memo item."""

    task_id: int
    name: str
    is_continuous: bool
    start_time: datetime
    stop_time: datetime
    priority: int
    tags: list[str] = field(default_factory=list)


@dataclass
class User:
    """An account holder and the name of their task database."""

    id: int
    name: str
    email: str
    db_name: str


def _by_date(task: Task) -> tuple:
    # Earlier first; equal start times put the higher priority first.
    return (task.start_time, -task.priority)


def _by_priority(task: Task) -> tuple:
    # Higher priority first; equal priorities put the earlier start first.
    return (-task.priority, task.start_time)


def _by_tags(task: Task) -> tuple:
    # Tag lists compared lexicographically; equal lists put higher priority first.
    return (tuple(task.tags), -task.priority)


class SortOrder(enum.Enum):
    """The orderings a task list can be shown in."""

    BY_DATE = "date"
    BY_PRIORITY = "priority"
    BY_TAGS = "tags"

    @property
    def key(self) -> Callable[[Task], tuple]:
        return _SORT_KEYS[self]


_SORT_KEYS: dict[SortOrder, Callable[[Task], tuple]] = {
    SortOrder.BY_DATE: _by_date,
    SortOrder.BY_PRIORITY: _by_priority,
    SortOrder.BY_TAGS: _by_tags,
}


def sort_tasks(tasks: Iterable[Task], order: SortOrder) -> list[Task]:
    """Return the tasks as a new list sorted in the given order."""
    return sorted(tasks, key=SortOrder(order).key)