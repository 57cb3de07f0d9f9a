"""
Build today's checklist header from the schedule and yesterday's log.
"""

from datetime import date
from typing import Iterable, Optional

from .data_models import DailyLog, Header, TaskGroup
from .daily_log import is_incomplete
from .recurrence import DateLike, evaluate_rule
from ..utils.logger import get_logger

log = get_logger(__name__)


def materialize(
    groups: Iterable[TaskGroup],
    on: DateLike,
    previous: Optional[DailyLog] = None,
    carry_over: bool = True,
    now: Optional[date] = None,
) -> Header:
    """
    Return ``{group: {task: ""}}`` for every task due on `on`.

    Tasks scheduled by their rule come first, in schedule order. When
    `carry_over` is on, every task left incomplete in `previous` is added too,
    whatever its rule says. Rule errors propagate: a half-built checklist is
    never returned.
    """
    header: Header = {}

    for group in groups:
        for task in group.tasks:
            if evaluate_rule(task.rule, on, now=now):
                log.debug("%s / %s is due (%s)", group.name, task.name, task.when)
                header.setdefault(group.name, {})[task.name] = ""

    if carry_over and previous is not None:
        for group_name, tasks in previous.entries.items():
            for task_name, value in tasks.items():
                if is_incomplete(value):
                    if task_name not in header.get(group_name, {}):
                        log.debug("Carrying over %s / %s", group_name, task_name)
                    header.setdefault(group_name, {})[task_name] = ""

    return header
