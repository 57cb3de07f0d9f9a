"""Errors raised by the schedule API layer."""


class WhipError(Exception):
    """Base class for every error the CLI reports to the user."""


class RecurrenceRuleError(WhipError):
    """A task's `when` rule cannot be parsed or evaluated."""


class MalformedExpander(RecurrenceRuleError):
    pass


class ExpanderOutOfRange(RecurrenceRuleError):
    pass


class InvalidFrequency(RecurrenceRuleError):
    pass


class InvalidRestrictor(RecurrenceRuleError):
    pass


class UnexpectedRestrictor(RecurrenceRuleError):
    pass


class MalformedLog(WhipError):
    """The front-matter block of a daily log could not be deserialized."""


class ScheduleError(WhipError):
    """The schedule definition file is missing or invalid."""


class ConfigError(WhipError):
    pass
