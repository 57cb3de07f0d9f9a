"""
Recurrence rules: parse a compact `when` string and decide whether it fires on a date.

A rule reads ``<frequency> [<num>/<denom>] [<restrictor,...>]``, e.g.::

    daily                 every day
    daily 1/2             every other day
    weekly mon,wed        Mondays and Wednesdays
    weekly 2/3 fri        the second Friday of every three weeks
    monthly 01,15,last    1st, 15th and last day of the month
    yearly 12-25          Christmas

The expander (``num/denom``) is anchored to fixed epochs so that the cadence is
stable across runs: a rule fires when ``(units since epoch) % denom + 1 == num``.
"""

import re
from datetime import date, datetime
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from .data_models import Frequency, RecurrenceRule
from .exceptions import (
    ExpanderOutOfRange,
    InvalidFrequency,
    InvalidRestrictor,
    MalformedExpander,
    UnexpectedRestrictor,
)
from ..utils.logger import get_logger

log = get_logger(__name__)

DAY_EPOCH = date(1970, 1, 1)
# A Monday, so week numbers roll over on week boundaries
WEEK_EPOCH = date(1970, 1, 5)

# Indexed by date.weekday()
WEEKDAYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")
LAST_DAY = "last"

_DAY_OF_MONTH_RE = re.compile(r"^\d\d$")
_MONTH_DAY_RE = re.compile(r"^(\d\d)-(\d\d)$")

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_rule(when: str) -> RecurrenceRule:
    """
    Parse a rule string into a RecurrenceRule.

    Only the syntax is checked here. Restrictor contents depend on the
    frequency (and on the date, for ``last``) and are validated by
    evaluate_rule().

    Raises:
        InvalidFrequency: unknown or missing frequency token.
        MalformedExpander: expander halves are not integers, or denom < 1.
        ExpanderOutOfRange: num < 1 or num > denom (the rule could never fire).
        InvalidRestrictor: trailing tokens after the restrictor list.
    """
    tokens = (when or "").split()
    if not tokens:
        raise InvalidFrequency("Missing frequency in empty rule!")

    try:
        frequency = Frequency(tokens[0])
    except ValueError:
        raise InvalidFrequency(f"Unrecognized frequency: {tokens[0]}!") from None

    rest = tokens[1:]
    if rest and "/" in rest[0]:
        expander = rest.pop(0)
    else:
        expander = "1/1"

    if len(rest) > 1:
        raise InvalidRestrictor(
            f"Unexpected tokens after restrictor in '{when}' "
            "(restrictor lists are comma-separated, without spaces)"
        )

    parts = expander.split("/")
    if len(parts) != 2:
        raise MalformedExpander(
            f"Expander has to be formatted num/denom, got '{expander}'!"
        )
    try:
        num, denom = int(parts[0]), int(parts[1])
    except ValueError:
        raise MalformedExpander(
            "Expander has to be formatted num/denom, where both num and denom "
            f"are valid integers (got '{expander}')!"
        ) from None
    if denom < 1:
        raise MalformedExpander(f"Expander denom has to be positive (got {denom})!")
    if num < 1 or num > denom:
        raise ExpanderOutOfRange(
            f"Expander num ({num}) is outside 1..{denom}, which will never happen!"
        )

    restrictor = frozenset(r.strip() for r in rest[0].split(",")) if rest else frozenset()

    rule = RecurrenceRule(
        frequency=frequency,
        numerator=num,
        denominator=denom,
        restrictor=restrictor,
        raw=" ".join(tokens),
    )
    log.debug("Parsed rule %r -> %s", when, rule)
    return rule


def last_day_of_month(on: date) -> int:
    return (on + relativedelta(day=31)).day


def _require_restrictor(rule: RecurrenceRule) -> None:
    if not rule.restrictor:
        raise InvalidRestrictor(
            f"{rule.frequency.value.capitalize()} rule needs a restrictor: '{rule.raw}'"
        )


def _invalid(rule: RecurrenceRule, bad) -> InvalidRestrictor:
    return InvalidRestrictor(
        f"Invalid {rule.frequency.value} restrictor {sorted(bad)} in '{rule.raw}'"
    )


def _weekly_matches(rule: RecurrenceRule, on: date) -> bool:
    _require_restrictor(rule)
    bad = rule.restrictor - set(WEEKDAYS)
    if bad:
        raise _invalid(rule, bad)
    return WEEKDAYS[on.weekday()] in rule.restrictor


def _monthly_matches(rule: RecurrenceRule, on: date) -> bool:
    _require_restrictor(rule)
    days = set()
    bad = set()
    for entry in rule.restrictor:
        if entry == LAST_DAY:
            days.add(f"{last_day_of_month(on):02d}")
        elif _DAY_OF_MONTH_RE.match(entry) and 1 <= int(entry) <= 31:
            days.add(entry)
        else:
            bad.add(entry)
    if bad:
        raise _invalid(rule, bad)
    return f"{on.day:02d}" in days


def _valid_month_day(entry: str) -> bool:
    match = _MONTH_DAY_RE.match(entry)
    if not match:
        return False
    try:
        # 2000 is a leap year, so 02-29 is accepted
        date(2000, int(match.group(1)), int(match.group(2)))
    except ValueError:
        return False
    return True


def _yearly_matches(rule: RecurrenceRule, on: date) -> bool:
    _require_restrictor(rule)
    bad = {entry for entry in rule.restrictor if not _valid_month_day(entry)}
    if bad:
        raise _invalid(rule, bad)
    return f"{on.month:02d}-{on.day:02d}" in rule.restrictor


def units_since_epoch(frequency: Frequency, anchor: date) -> int:
    """Whole cadence units between the epoch and `anchor` (floored)."""
    if frequency is Frequency.daily:
        return (anchor - DAY_EPOCH).days
    if frequency is Frequency.weekly:
        return (anchor - WEEK_EPOCH).days // 7
    if frequency is Frequency.monthly:
        return (anchor.year - DAY_EPOCH.year) * 12 + (anchor.month - DAY_EPOCH.month)
    return anchor.year - DAY_EPOCH.year


def evaluate_rule(rule: RecurrenceRule, on: DateLike, now: Optional[DateLike] = None) -> bool:
    """
    Decide whether `rule` fires on the reference date `on`.

    A restrictor that simply doesn't match `on` is a normal "not today"
    (returns False); a restrictor of the wrong shape raises.

    The expander cadence is counted up to `now` when given, otherwise up to
    `on` itself. Passing ``now=date.today()`` reproduces cadence anchored to
    the wall clock regardless of which day is being generated.
    """
    on = _as_date(on)
    anchor = _as_date(now) if now is not None else on

    if rule.frequency is Frequency.daily:
        if rule.restrictor:
            raise UnexpectedRestrictor(
                f"Frequency is daily already, what are you trying to restrict? "
                f"({','.join(sorted(rule.restrictor))})"
            )
        matches = True
    elif rule.frequency is Frequency.weekly:
        matches = _weekly_matches(rule, on)
    elif rule.frequency is Frequency.monthly:
        matches = _monthly_matches(rule, on)
    else:
        matches = _yearly_matches(rule, on)

    if not matches:
        log.debug("Rule '%s' restricted out on %s", rule.raw, on)
        return False

    diff = units_since_epoch(rule.frequency, anchor)
    fires = (diff % rule.denominator) + 1 == rule.numerator
    log.debug("Rule '%s' on %s: cycle %d -> %s", rule.raw, on, diff, fires)
    return fires


def actual(when: str, on: DateLike, now: Optional[DateLike] = None) -> bool:
    """Parse and evaluate a rule string in one go."""
    return evaluate_rule(parse_rule(when), on, now=now)
