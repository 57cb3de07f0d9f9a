"""
Daily log reader/writer.

A daily log is a plain text file with one YAML front-matter block, delimited by
two ``---`` lines, mapping group -> task -> completion value. Everything after
the closing delimiter is free-form notes::

    ---
    Health:
      Stretch: done
      Run: ''
    ---

    # Monday Notes:

    -
"""

from datetime import date
from pathlib import Path
from typing import Any, Iterable, Union

import yaml

from .data_models import DailyLog, Header
from .exceptions import MalformedLog
from ..utils.logger import get_logger

log = get_logger(__name__)

DELIMITER = "---"

# Completion values that still count as "not done"
FALSE_TOKENS = frozenset({"no", "false", "off"})


class _LogDumper(yaml.SafeDumper):
    """Keeps every scalar on one line so no raw delimiter can appear inside the block."""


def _represent_str(dumper, data):
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style='"')
    return dumper.represent_str(data)


_LogDumper.add_representer(str, _represent_str)


def is_incomplete(value: Any) -> bool:
    """True if a completion value means the task has not been done."""
    if not value:
        return True
    if isinstance(value, str):
        return value.strip().lower() in FALSE_TOKENS
    return False


def _load_front_matter(raw: str, source: str) -> Header:
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise MalformedLog(f"Failed to parse {source}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedLog(
            f"Failed to parse {source}: front matter must be a mapping of groups, "
            f"got {type(data).__name__}"
        )

    entries: Header = {}
    for group_name, group in data.items():
        if group is None:
            group = {}
        if not isinstance(group, dict):
            raise MalformedLog(
                f"Failed to parse {source}: group '{group_name}' must be a mapping of tasks"
            )
        entries[str(group_name)] = {str(task): value for task, value in group.items()}
    return entries


def decode_daily_log(lines: Iterable[str], source: str = "<daily log>") -> DailyLog:
    """
    Decode a daily log from an iterable of lines (an open file works).

    Content with no opening delimiter yields an empty log. An opened block that
    is never closed, or YAML that doesn't describe group -> task mappings,
    raises MalformedLog.
    """
    raw_lines = []
    notes_lines = []
    in_block = False
    entries = None

    for line in lines:
        if entries is not None:
            notes_lines.append(line)
            continue
        if line.strip() == DELIMITER:
            in_block = not in_block
            if not in_block:
                entries = _load_front_matter("".join(raw_lines), source)
            continue
        if in_block:
            raw_lines.append(line if line.endswith("\n") else line + "\n")

    if in_block:
        raise MalformedLog(f"Failed to parse {source}: front matter is never closed")
    if entries is None:
        log.debug("No front matter found in %s", source)
        return DailyLog()

    log.debug("Decoded %d group(s) from %s", len(entries), source)
    return DailyLog(entries=entries, notes="".join(notes_lines))


def read_daily_log(path: Union[str, Path]) -> DailyLog:
    """Read a daily log file; a missing file is an empty log (nothing logged yet)."""
    path = Path(path)
    if not path.exists():
        log.debug("No daily log at %s", path)
        return DailyLog()
    with open(path, "r", encoding="utf-8") as f:
        return decode_daily_log(f, source=str(path))


def encode_daily_log(header: Header, on: date) -> str:
    """Serialize a header into front matter followed by a notes prompt for `on`."""
    front_matter = yaml.dump(
        header,
        Dumper=_LogDumper,
        width=float("inf"),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return f"{DELIMITER}\n{front_matter}{DELIMITER}\n\n# {on:%A} Notes:\n\n- "
