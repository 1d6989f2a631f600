#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ids.py - Object ID generation

Object IDs are timestamps in the same format one would get by running
`date +0%Y%m%d%H%M%S` in the shell. The leading "0" leaves room for a fifth
year digit, so plain string comparison of two IDs orders them by creation
time.
"""

import re
from datetime import datetime
from typing import Callable

# Type of the clock used to stamp new objects
Clock = Callable[[], datetime]

# Length of every object ID
ID_LENGTH = 15

# Regular expression for a well-formed ID. Calendar fields are constrained so
# that, e.g., a month "13" or a minute "60" does not look like an ID.
ID_PATTERN = (
    r"0[0-9]{4}"
    r"(?:0[1-9]|1[0-2])"
    r"(?:0[1-9]|[12][0-9]|3[01])"
    r"(?:[01][0-9]|2[0-3])"
    r"[0-5][0-9]"
    r"[0-5][0-9]"
)

_ID_RE = re.compile(ID_PATTERN)


def new_id(now: datetime) -> str:
    """
    Build the object ID for a given moment.

    Args:
        now: Local calendar time the object is created at

    Returns:
        The 15-character ID
    """
    return (
        f"0{now.year:04d}{now.month:02d}{now.day:02d}"
        f"{now.hour:02d}{now.minute:02d}{now.second:02d}"
    )


def timestamp(clock: Clock = datetime.now) -> str:
    """Return the ID for the current moment as reported by `clock`."""
    return new_id(clock())


def is_valid_id(text: str) -> bool:
    """Check whether `text` is a well-formed object ID."""
    return _ID_RE.fullmatch(text) is not None
