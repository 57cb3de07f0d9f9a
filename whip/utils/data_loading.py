"""
Load the schedule definition file into TaskGroups with parsed rules.
"""

import os
from typing import Any, List, Optional

import yaml
from pydantic import ValidationError

from ..schedule_api.data_models import Task, TaskGroup
from ..schedule_api.exceptions import ScheduleError
from ..schedule_api.recurrence import parse_rule
from .logger import get_logger
from .schedule_schema import ScheduleModel

log = get_logger(__name__)


def build_task_groups(raw_data: Any, source: str = "<schedule>") -> List[TaskGroup]:
    """Validate raw schedule data and parse every task's rule."""
    try:
        schedule = ScheduleModel.model_validate(raw_data)
    except ValidationError as e:
        raise ScheduleError(f"Invalid schedule in {source}:\n{e}") from e

    groups = []
    for group in schedule.root:
        tasks = [Task(name=sub.name, rule=parse_rule(sub.when)) for sub in group.subs]
        groups.append(TaskGroup(name=group.name, tasks=tasks))
    log.debug(
        "Loaded %d group(s), %d task(s) from %s",
        len(groups), sum(len(g.tasks) for g in groups), source,
    )
    return groups


def load_schedule(file_path: Optional[str]) -> List[TaskGroup]:
    """Read a YAML schedule (a list of ``{name, subs: [{name, when}]}``)."""
    if not file_path:
        raise ScheduleError("Missing input...")
    file_path = os.path.expanduser(file_path)
    if not os.path.exists(file_path):
        raise ScheduleError(f"Non-existent input file: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            raw_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ScheduleError(f"Could not parse YAML from {file_path}: {e}") from e

    return build_task_groups(raw_data or [], source=file_path)
