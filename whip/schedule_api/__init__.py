"""
Schedule API layer package.
Implements recurrence rules, the daily log format and checklist materialization.
"""

from .exceptions import (
    WhipError,
    RecurrenceRuleError,
    MalformedExpander,
    ExpanderOutOfRange,
    InvalidFrequency,
    InvalidRestrictor,
    UnexpectedRestrictor,
    MalformedLog,
    ScheduleError,
    ConfigError,
)
from .data_models import Frequency, RecurrenceRule, Task, TaskGroup, DailyLog
from .recurrence import parse_rule, evaluate_rule, actual
from .daily_log import decode_daily_log, encode_daily_log, read_daily_log, is_incomplete
from .materializer import materialize

__all__ = [
    'WhipError',
    'RecurrenceRuleError',
    'MalformedExpander',
    'ExpanderOutOfRange',
    'InvalidFrequency',
    'InvalidRestrictor',
    'UnexpectedRestrictor',
    'MalformedLog',
    'ScheduleError',
    'ConfigError',
    'Frequency',
    'RecurrenceRule',
    'Task',
    'TaskGroup',
    'DailyLog',
    'parse_rule',
    'evaluate_rule',
    'actual',
    'decode_daily_log',
    'encode_daily_log',
    'read_daily_log',
    'is_incomplete',
    'materialize',
]
