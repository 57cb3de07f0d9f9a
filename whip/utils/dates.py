from datetime import date, datetime
from pathlib import Path
from typing import Iterator, Optional

import dateparser
from dateutil.relativedelta import relativedelta

from ..schedule_api.exceptions import WhipError

ISO_FORMAT = "%Y-%m-%d"


def parse_cli_date(date_str: Optional[str], default: Optional[date] = None) -> date:
    """
    Parse a user-supplied date.
    Handles:
      - YYYY-MM-DD (e.g., 2025-07-13)
      - Natural language (e.g., 'yesterday', 'next Friday')
    Falls back to `default` (today when not given) for an empty value.
    """
    if not date_str or not date_str.strip():
        return default or date.today()
    # Try YYYY-MM-DD first
    try:
        return datetime.strptime(date_str.strip(), ISO_FORMAT).date()
    except ValueError:
        pass
    # Fallback to dateparser
    dt = dateparser.parse(date_str)
    if dt is None:
        raise WhipError(f"Could not parse date: {date_str}")
    return dt.date()


def previous_day(on: date) -> date:
    return on - relativedelta(days=1)


def month_before(on: date) -> date:
    return on - relativedelta(months=1)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from `start` up to, but excluding, `end`."""
    current = start
    while current < end:
        yield current
        current += relativedelta(days=1)


def log_path(path_format: str, on: date) -> Path:
    """Apply a strftime path pattern (e.g. ``~/logs/%Y/%Y-%m-%d.md``) to a date."""
    if not path_format:
        raise WhipError("Missing format...")
    return Path(on.strftime(path_format)).expanduser()
