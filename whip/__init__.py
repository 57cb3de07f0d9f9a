"""
Whip: generate recurring daily checklists from a declarative schedule.

Each run evaluates the recurrence rule of every scheduled task against a
reference date, carries over anything left undone the day before, and writes
the result as a front-matter daily log ready to be filled in.
"""

__version__ = "1.0.0"
__author__ = "Whip Contributors"

__all__ = ["__version__"]
