#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
console.py - Terminal implementation of the Editor interface

Used by the `zeka` command line tool. Prompts are read from standard input,
files are opened with a configurable external command, and inserted text is
printed.
"""

import shlex
import subprocess
import sys
from typing import List, Optional, Tuple

from .editor import Editor


class ConsoleEditor(Editor):
    """
    Editor talking to the user through the terminal.

    Attributes:
        viewer_command: Command used to open files (the path is appended);
            when empty, the path is printed instead
        document: Text of the document commands operate on
        offset: Cursor offset within `document`
    """

    def __init__(self, viewer_command: str = "", document: str = "", offset: int = 0):
        self.viewer_command = viewer_command
        self.document = document
        self.offset = offset
        self.errors: List[str] = []

    def _input(self, prompt: str) -> Optional[str]:
        try:
            return input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return None

    def prompt_short_text(self, placeholder: str) -> Optional[str]:
        return self._input(f"{placeholder}: ")

    def prompt_choice(self, options: List[str], placeholder: str) -> Optional[str]:
        print(placeholder)
        for i, option in enumerate(options, start=1):
            print(f"  {i:3d}. {option}")

        while True:
            answer = self._input("Choice (empty to cancel): ")
            if answer is None or not answer.strip():
                return None

            answer = answer.strip()
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1]

            # Accept an unambiguous piece of an option's text, too
            matching = [o for o in options if answer.lower() in o.lower()]
            if len(matching) == 1:
                return matching[0]

            print(f"Please enter a number between 1 and {len(options)}.")

    def open_in_viewer(self, path: str) -> None:
        if not self.viewer_command:
            print(path)
            return

        subprocess.run(shlex.split(self.viewer_command) + [path], check=False)

    def current_cursor_context(self) -> Tuple[str, int]:
        return self.document, self.offset

    def insert_text(self, text: str) -> None:
        print(text)

    def report_error(self, message: str) -> None:
        self.errors.append(message)
        print(f"Error: {message}", file=sys.stderr)

    def report_warning(self, message: str) -> None:
        print(f"Warning: {message}", file=sys.stderr)
