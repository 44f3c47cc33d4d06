# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
General utility functions for the qsge library.

This module provides helpers for converting time durations between
`timedelta` objects and the string formats used by users and by SGE,
and for YAML output.
"""

import re
from datetime import timedelta
from functools import lru_cache

import yaml

from .error import QSGEError
from .logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def load_yaml_dumper() -> type[yaml.Dumper]:
    """Return the fastest available YAML dumper (CDumper if possible)."""
    try:
        from yaml import CDumper as Dumper  # type: ignore[attr-defined]

        logger.debug("Loaded YAML CDumper.")
    except ImportError:
        from yaml import Dumper

        logger.debug("Loaded default YAML dumper.")
    return Dumper


def format_duration_hhmmss(td: timedelta) -> str:
    """
    Format a timedelta as zero-padded HH:MM:SS.

    Hours are not wrapped into days, so durations longer than a day
    produce more than two digits of hours.

    Examples:
        0:00:45          -> "00:00:45"
        1 day, 2:03:04   -> "26:03:04"
        4 days, 4:00:00  -> "100:00:00"

    Args:
        td (timedelta): The duration to format.

    Returns:
        str: Formatted string in HH:MM:SS format.
    """
    total_seconds = int(td.total_seconds())

    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    return f"{hours:02}:{minutes:02}:{seconds:02}"


def hhmmss_to_duration(timestr: str) -> timedelta:
    """
    Convert a time string in HH:MM:SS (or HHH:MM:SS) format to a timedelta object.

    Examples:
        "0:00:00"   -> 0 seconds
        "1:23:45"   -> 1 hour, 23 minutes, 45 seconds
        "100:00:00" -> 100 hours

    Args:
        timestr (str): Input string in HH:MM:SS format.

    Returns:
        timedelta: The corresponding duration.

    Raises:
        QSGEError: If the input string is not in a valid HH:MM:SS format.
    """
    pattern = re.compile(r"^\s*(\d+):([0-5]?\d):([0-5]?\d)\s*$")
    match = pattern.fullmatch(timestr)
    if not match:
        raise QSGEError(f"Invalid HH:MM:SS time string '{timestr}'.")

    hours, minutes, seconds = map(int, match.groups())

    return timedelta(hours=hours, minutes=minutes, seconds=seconds)


def wdhms_to_duration(timestr: str) -> timedelta:
    """
    Convert a time specification in the wdhms format into a timedelta object.

    The accepted format is a sequence of one or more integer + unit tokens,
    where unit is one of:
      w = weeks, d = days, h = hours, m = minutes, s = seconds

    Tokens may be compact (e.g. "1w2d3h") or space-separated
    (e.g. "1w 2d 3h"). The function is case-insensitive.

    Examples:
      "1w2d3h4m5s" -> 195 hours, 4 minutes, 5 seconds
      "90m"        -> 1 hour, 30 minutes

    Args:
        timestr: Input duration string in wdhms format.

    Returns:
        timedelta: The corresponding duration.

    Raises:
        QSGEError: If the string does not conform to the token pattern.
    """
    full_pattern = re.compile(r"^\s*(?:\d+\s*[wdhms]\s*)+$", re.IGNORECASE)
    if not full_pattern.fullmatch(timestr):
        raise QSGEError(f"Invalid time string '{timestr}'.")

    units = {"w": "weeks", "d": "days", "h": "hours", "m": "minutes", "s": "seconds"}
    amounts = dict.fromkeys(units.values(), 0)

    for value, unit in re.findall(r"(\d+)\s*([wdhms])", timestr, re.IGNORECASE):
        amounts[units[unit.lower()]] += int(value)

    return timedelta(**amounts)


def parse_walltime(timestr: str) -> timedelta:
    """
    Convert a walltime given either as HH:MM:SS or in the wdhms format into a timedelta.

    Args:
        timestr (str): Walltime string, e.g. "12:00:00", "1d", or "2h30m".

    Returns:
        timedelta: The corresponding duration.

    Raises:
        QSGEError: If the string matches neither format.
    """
    if ":" in timestr:
        return hhmmss_to_duration(timestr)

    try:
        duration = wdhms_to_duration(timestr)
    except QSGEError as e:
        raise QSGEError(
            f"Invalid walltime '{timestr}'. Use HH:MM:SS or a duration like '1d' or '2h30m'."
        ) from e

    logger.debug(f"Converted walltime '{timestr}' to '{duration}'.")
    return duration
