"""
Export completion history of every scheduled task as a CSV table.
"""

import csv
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

import typer

from ..schedule_api.data_models import TaskGroup
from ..schedule_api.daily_log import is_incomplete, read_daily_log
from ..utils.data_loading import load_schedule
from ..utils.dates import ISO_FORMAT, iter_days, log_path
from ..utils.logger import get_logger

log = get_logger(__name__)


def stats_cell(value) -> str:
    """Empty for anything not done; booleans written the way YAML spells them."""
    if is_incomplete(value):
        return ""
    if isinstance(value, bool):
        return "true"
    return str(value)


def stats_columns(groups: Iterable[TaskGroup]) -> List[str]:
    """``date`` followed by ``<group>-<task>`` in schedule order."""
    columns = ["date"]
    for group in groups:
        for task_name in group.task_names():
            columns.append(f"{group.name}-{task_name}")
    return columns


def build_stats_rows(
    groups: List[TaskGroup],
    path_format: str,
    start: date,
    end: date,
) -> List[List[str]]:
    """One header row, then one row per day in [start, end) read from the daily logs."""
    rows = [stats_columns(groups)]
    for day in iter_days(start, end):
        daily = read_daily_log(log_path(path_format, day))
        row = [day.strftime(ISO_FORMAT)]
        for group in groups:
            for task_name in group.task_names():
                row.append(stats_cell(daily.get(group.name, task_name)))
        rows.append(row)
    return rows


def handle_stats(
    schedule_path: Optional[str],
    path_format: Optional[str],
    start: date,
    end: date,
    output: str = "stats.csv",
    open_file: bool = True,
) -> Path:
    """Write the stats CSV for [start, end) and optionally open it."""
    groups = load_schedule(schedule_path)
    rows = build_stats_rows(groups, path_format, start, end)

    output_path = Path(output).expanduser()
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        csv.writer(f).writerows(rows)
    log.info(f"Wrote {len(rows) - 1} day(s) of stats to {output_path}")

    if open_file:
        typer.launch(str(output_path))
    return output_path
