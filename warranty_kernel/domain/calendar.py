"""
Calendar -- Year arithmetic on calendar dates.

Responsibility:
    Advances a ``date`` by whole years, keeping month and day, with an
    explicit policy for February 29 landing in a non-leap year.

Architecture position:
    Kernel > Domain -- pure functions, zero I/O.

Failure modes:
    - ValueError if the policy is unknown or the resulting year is outside
      the range ``datetime.date`` supports.
"""

from __future__ import annotations

from datetime import date
from enum import Enum


class LeapDayPolicy(str, Enum):
    """
    Where February 29 goes when the target year has no leap day.

    CLAMP        -- last day of February (Feb 28).
    ROLL_FORWARD -- first day of March (Mar 1).
    """

    CLAMP = "clamp"
    ROLL_FORWARD = "roll_forward"


def is_leap_day(value: date) -> bool:
    return value.month == 2 and value.day == 29


def add_years(
    value: date,
    years: int,
    policy: LeapDayPolicy = LeapDayPolicy.CLAMP,
) -> date:
    """
    Return ``value`` moved by ``years`` whole years.

    Postconditions:
        - Month and day are preserved whenever they exist in the target year.
        - Feb 29 into a non-leap year resolves per ``policy``.
    """
    target_year = value.year + years
    try:
        return value.replace(year=target_year)
    except ValueError:
        if not is_leap_day(value):
            raise
        policy = LeapDayPolicy(policy)
        if policy is LeapDayPolicy.CLAMP:
            return date(target_year, 2, 28)
        return date(target_year, 3, 1)
