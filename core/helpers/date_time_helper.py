"""
date_time_helpers.py

Provides helper functions for conversion and formatting of date and time values,
with special focus on UTC and Europe/Berlin timezone handling for logging and display.
"""

from datetime import datetime
from zoneinfo import ZoneInfo

# Local timezone for display
LOCAL_TZ = ZoneInfo("Europe/Berlin")


def local_now() -> datetime:
    return datetime.now(LOCAL_TZ)


def current_year_str() -> str:
    """Current local year as text, used as the default order year."""
    return str(local_now().year)


def utc_to_local_str(utc_iso: str) -> str:
    """
    Formats a UTC ISO8601 timestamp as a localized, human-readable string for display.

    :param utc_iso: UTC time as ISO string
    :return: String in format "DD.MM.YYYY HH:mm:ss" (local time)
    """
    dt_utc = datetime.fromisoformat(utc_iso)
    dt_local = dt_utc.astimezone(LOCAL_TZ)
    return dt_local.strftime("%d.%m.%Y %H:%M:%S")
