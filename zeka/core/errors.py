#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
errors.py - Exceptions raised by Zeka

Only faults the user has to act on are raised. Problems reading a single
object (a reference that fails to parse, a file with an unexpected name)
are logged and the affected value falls back to its default instead.
"""

from typing import List


class ZekaError(Exception):
    """Base class for all errors reported to the user."""


class ConfigurationError(ZekaError):
    """The repository root is not configured or does not exist."""


class NotFoundError(ZekaError):
    """
    No file matches a link's target pattern.

    Attributes:
        pattern: The glob pattern that matched nothing
    """

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"No file matching '{pattern}' found.")


class AmbiguityError(ZekaError):
    """
    More than one file matches a link's target pattern.

    This means two objects in the repository share an ID, which should never
    happen. No attempt is made to pick one of them.

    Attributes:
        pattern: The glob pattern used for the lookup
        matches: Every path that matched the pattern
    """

    def __init__(self, pattern: str, matches: List[str]):
        self.pattern = pattern
        self.matches = list(matches)
        listing = ", ".join(f"'{m}'" for m in self.matches)
        super().__init__(f"Multiple files matching '{pattern}' found: {listing}.")
