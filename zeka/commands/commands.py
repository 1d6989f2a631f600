#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
commands.py - The user-level Zeka commands

Each command is one action the user can trigger: create a note, a reference
or a sketch, follow the link under the cursor, or insert a link to an
existing object. Commands receive the repository root and the Editor to talk
to; errors are reported through the Editor and never propagate to the host.
"""

import functools
import logging
import os
from datetime import datetime
from typing import Callable, Dict, Optional

from ..core.catalog import CatalogEntry, list_objects
from ..core.config import Config, require_repository
from ..core.errors import ZekaError
from ..core.ids import Clock, timestamp
from ..core.objects import (
    ObjectType,
    OBJECT_KINDS,
    REFERENCE_TEMPLATES,
    note_template,
    render_reference_template,
)
from ..linking.grammar import find_link_at, format_link
from ..linking.resolver import resolve
from ..utils.filenames import object_filename
from .editor import Editor

logger = logging.getLogger(__name__)

# Registry of command implementations, by name
command_registry: Dict[str, Callable[..., Optional[str]]] = {}


def register_command(name: str):
    """
    Register a command under `name`.

    The registered function reports ZekaError, OSError and ValueError (e.g.,
    a title that cannot be encoded) through the editor's `report_error` and
    returns None instead of raising.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(repo_root: str, editor: Editor, *args, **kwargs):
            try:
                return func(repo_root, editor, *args, **kwargs)
            except (ZekaError, OSError, ValueError) as e:
                logger.error("Command '%s' failed: %s", name, e)
                editor.report_error(str(e))
                return None

        command_registry[name] = wrapper
        return wrapper

    return decorator


def run_command(name: str, config: Config, editor: Editor, **kwargs) -> Optional[str]:
    """
    Run a registered command against the configured repository.

    The repository root is read from the configuration once, here, and
    checked before the command runs.

    Args:
        name: Name of the command
        config: Configuration to take the repository root from
        editor: Editor the command interacts with
        **kwargs: Extra arguments for the command (e.g., `clock`)

    Returns:
        Whatever the command returns, or None if it failed or was cancelled

    Raises:
        KeyError: If no command is registered under `name`
    """
    command = command_registry[name]

    try:
        repo_root = require_repository(config.repository())
    except ZekaError as e:
        editor.report_error(str(e))
        return None

    return command(repo_root, editor, **kwargs)


def write_new_object(repo_root: str, object_type: ObjectType, title: str,
                     contents: str, clock: Clock = datetime.now) -> str:
    """
    Write a new object file in a single write.

    An existing file is never overwritten: creating two objects with the same
    title within the same second fails.

    Args:
        repo_root: Path to the Zeka repository
        object_type: Type of the new object
        title: Title given by the user
        contents: Full contents of the file
        clock: Source of the creation time

    Returns:
        Path to the new file

    Raises:
        OSError: If the file cannot be created
        UnicodeEncodeError: If `contents` cannot be encoded; nothing is written
    """
    kind = OBJECT_KINDS[object_type]
    filename = object_filename(timestamp(clock), title, kind.extension)
    path = os.path.join(repo_root, kind.subdir, filename)
    data = contents.encode("utf-8")

    with open(path, "xb") as f:
        f.write(data)

    logger.info("Created %s %s", object_type.value, path)
    return path


@register_command("create_note")
def create_note(repo_root: str, editor: Editor, clock: Clock = datetime.now) -> Optional[str]:
    """
    The "Create Note" command.

    Used to (...drum roll...) create a note.
    """
    title = editor.prompt_short_text("Note title")
    if title is None:
        return None

    path = write_new_object(repo_root, ObjectType.NOTE, title, note_template(title), clock)
    editor.open_in_viewer(path)
    return path


@register_command("create_reference")
def create_reference(repo_root: str, editor: Editor, clock: Clock = datetime.now) -> Optional[str]:
    """
    The "Create Reference" command.

    Which creates references (to books, papers, movies, etc).
    """
    kind = editor.prompt_choice(list(REFERENCE_TEMPLATES), "Create what type of reference?")
    if kind is None or kind not in REFERENCE_TEMPLATES:
        return None

    title = editor.prompt_short_text("Reference title")
    if title is None:
        return None

    contents = render_reference_template(kind, title)
    path = write_new_object(repo_root, ObjectType.REFERENCE, title, contents, clock)
    editor.open_in_viewer(path)
    return path


@register_command("create_sketch")
def create_sketch(repo_root: str, editor: Editor, clock: Clock = datetime.now) -> Optional[str]:
    """The "Create Sketch" command."""
    title = editor.prompt_short_text("Sketch title")
    if title is None:
        return None

    path = write_new_object(repo_root, ObjectType.SKETCH, title, note_template(title), clock)
    editor.open_in_viewer(path)
    return path


@register_command("follow_link")
def follow_link_under_cursor(repo_root: str, editor: Editor) -> Optional[str]:
    """
    The "Follow Link Under Cursor" command.

    Opens the note, reference or attachment whose link is right under the
    cursor.
    """
    text, offset = editor.current_cursor_context()
    link = find_link_at(text, offset)
    if link is None:
        editor.report_warning("No link under the cursor.")
        return None

    path = resolve(repo_root, link)
    editor.open_in_viewer(path)
    return path


def entry_display(entry: CatalogEntry) -> str:
    """Text shown for a catalog entry in the object picker."""
    text = f"{entry.label} [{entry.source_type.value} {entry.id}]"
    if entry.description:
        text += f" - {entry.description}"
    return text


def entry_to_link(entry: CatalogEntry) -> str:
    """Link text pointing to a catalog entry, labeled with its title."""
    return format_link(entry.source_type, entry.id, entry.label)


@register_command("create_link")
def create_link(repo_root: str, editor: Editor) -> Optional[str]:
    """
    The "Create Link" command.

    Lets the user pick any object in the repository and inserts a link to it
    at the cursor.
    """
    entries = list_objects(repo_root)
    if not entries:
        editor.report_warning("The repository has no objects to link to.")
        return None

    by_display: Dict[str, CatalogEntry] = {}
    for entry in entries:
        by_display.setdefault(entry_display(entry), entry)

    choice = editor.prompt_choice(list(by_display), "Link to what?")
    if choice is None or choice not in by_display:
        return None

    link = entry_to_link(by_display[choice])
    editor.insert_text(link)
    return link
