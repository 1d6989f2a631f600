#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Commands package - User-level commands for Zeka

This package contains the commands and the interface they talk through:
- Editor: the user interface the commands run in
- Commands: create note/reference/sketch, follow link, create link
- ConsoleEditor: Editor implementation for the terminal
"""

from .editor import Editor
from .commands import command_registry, register_command, run_command
from .console import ConsoleEditor
