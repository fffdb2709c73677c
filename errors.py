"""
🚨 ERRORS — What can go wrong
=============================
Only one thing is the user's problem: a broken catalog (ConfigurationError).
A slot that cannot be filled is NOT an error; it simply stays free.
"""


class SchedulerError(Exception):
    """Base exception for everything raised by the timetable generator."""

    pass


class ConfigurationError(SchedulerError):
    """The catalog is malformed and no timetable can be built from it.

    Examples: a subject with no teachers, an empty class list, two teaching
    periods with the same number. The message is shown to the user as-is.
    """

    pass


class ScheduleWriteError(SchedulerError):
    """Someone tried to write a cell the grid does not allow.

    Break cells, unknown cells and sealed schedules are read-only.
    """

    pass
