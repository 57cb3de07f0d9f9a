from datetime import date
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..schedule_api.daily_log import encode_daily_log, read_daily_log
from ..schedule_api.exceptions import ScheduleError
from ..schedule_api.materializer import materialize
from ..utils.data_loading import load_schedule
from ..utils.dates import log_path, previous_day
from ..utils.logger import get_logger

log = get_logger(__name__)
console = Console()


def generate_daily_log(
    schedule_path: str,
    path_format: str,
    on: date,
    yesterday: bool = True,
) -> str:
    """Return the encoded daily log for `on` without touching the target file."""
    groups = load_schedule(schedule_path)

    previous = None
    if yesterday:
        old_log = log_path(path_format, previous_day(on))
        previous = read_daily_log(old_log)
        if previous.is_empty():
            log.debug("Nothing to carry over from %s", old_log)
        else:
            log.debug("Read previous log %s (%d group(s))", old_log, len(previous.entries))

    header = materialize(groups, on, previous=previous, carry_over=yesterday)
    return encode_daily_log(header, on)


def handle_generate(
    schedule_path: Optional[str],
    path_format: Optional[str],
    on: date,
    yesterday: bool = True,
    force: bool = False,
    open_file: bool = True,
) -> Path:
    """Write today's checklist to the log path for `on` and optionally open it."""
    if not schedule_path:
        raise ScheduleError("Missing input...")
    target = log_path(path_format, on)
    content = generate_daily_log(schedule_path, path_format, on, yesterday=yesterday)

    if target.exists() and not force:
        console.print(f"File {target} already exists, so you have to --force this!", soft_wrap=True)
    else:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        log.info(f"Wrote daily log {target}")

    if open_file:
        typer.launch(str(target))
    return target
