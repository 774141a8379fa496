"""
Date utilities for memberships and salary months.
"""

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Tuple

import pytz
from dateutil.relativedelta import relativedelta

SALARY_MONTH_PATTERN = re.compile(r"^(\d{4})-(0[1-9]|1[0-2])$")


def today(timezone: str = "UTC") -> date:
    """Get current date in specified timezone"""
    tz_obj = pytz.timezone(timezone)
    return datetime.now(tz_obj).date()


def parse_salary_month(salary_month: str) -> Tuple[int, int]:
    """
    Parse a ``YYYY-MM`` salary month.

    Raises:
        ValueError: If the string is not a valid salary month
    """
    match = SALARY_MONTH_PATTERN.match(salary_month or "")
    if not match:
        raise ValueError(f"Invalid salary month: {salary_month!r} (expected YYYY-MM)")
    return int(match.group(1)), int(match.group(2))


def days_in_month(salary_month: str) -> int:
    """Number of calendar days (28-31) in a ``YYYY-MM`` month."""
    year, month = parse_salary_month(salary_month)
    return calendar.monthrange(year, month)[1]


def salary_period_label(salary_month: str) -> str:
    """``2026-01`` -> ``January 2026``"""
    year, month = parse_salary_month(salary_month)
    return f"{calendar.month_name[month]} {year}"


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative when end is earlier)."""
    return (end - start).days


def add_days(start: date, days: int) -> date:
    return start + timedelta(days=days)


def add_months(start: date, months: int) -> date:
    """Add calendar months, clamping the day to the end of the target month."""
    return start + relativedelta(months=months)
