#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
editor.py - Interface to the editor hosting the Zeka commands

The commands never talk to a user interface directly. They go through an
Editor, which a host (a text editor plugin, the terminal front end, a test)
implements.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple


class Editor(ABC):
    """
    Abstract base class for the user interface the commands run in.

    Prompts return None when the user cancels them; cancelling is not an
    error, the command just stops.
    """

    @abstractmethod
    def prompt_short_text(self, placeholder: str) -> Optional[str]:
        """
        Ask the user for a short string.

        Args:
            placeholder: Hint shown to the user

        Returns:
            The string entered, or None if cancelled
        """

    @abstractmethod
    def prompt_choice(self, options: List[str], placeholder: str) -> Optional[str]:
        """
        Ask the user to pick one of several options.

        Args:
            options: Options to pick from
            placeholder: Hint shown to the user

        Returns:
            The option picked, or None if cancelled
        """

    @abstractmethod
    def open_in_viewer(self, path: str) -> None:
        """Show the file at `path` to the user."""

    @abstractmethod
    def current_cursor_context(self) -> Tuple[str, int]:
        """
        Get the text being edited and where the cursor is.

        Returns:
            Tuple of (document text, cursor offset in characters)
        """

    @abstractmethod
    def insert_text(self, text: str) -> None:
        """Insert `text` at the cursor."""

    @abstractmethod
    def report_error(self, message: str) -> None:
        """Tell the user an operation failed."""

    @abstractmethod
    def report_warning(self, message: str) -> None:
        """Tell the user about a non-fatal problem."""
