"""
Data models representing schedule objects (rules, tasks, groups, logs).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List


# groupName -> taskName -> completion value, in insertion order
Header = Dict[str, Dict[str, Any]]


class Frequency(str, Enum):
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"
    yearly = "yearly"


@dataclass(frozen=True)
class RecurrenceRule:
    frequency: Frequency
    numerator: int = 1
    denominator: int = 1
    restrictor: FrozenSet[str] = frozenset()
    raw: str = ""


@dataclass(frozen=True)
class Task:
    name: str
    rule: RecurrenceRule

    @property
    def when(self) -> str:
        return self.rule.raw


@dataclass
class TaskGroup:
    name: str
    tasks: List[Task] = field(default_factory=list)

    def task_names(self) -> List[str]:
        return [task.name for task in self.tasks]


@dataclass
class DailyLog:
    entries: Header = field(default_factory=dict)
    notes: str = ""

    def is_empty(self) -> bool:
        return not self.entries

    def get(self, group: str, task: str, default: Any = "") -> Any:
        return self.entries.get(group, {}).get(task, default)
