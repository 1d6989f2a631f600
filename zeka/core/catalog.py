#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
catalog.py - Listing the objects stored in a Zeka repository

Builds the list of linkable objects shown to the user when creating a link.
Each entry gets a display label and a secondary description:

- Notes: the first-line Markdown heading, if any.
- References: title, subtitle and edition from the TOML document, with the
  authors as description.
- Attachments: the file name.

The list is rebuilt from the filesystem on every call. Problems with a
single file are logged and never stop the scan.
"""

import logging
import os
import re
import tomllib
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .ids import ID_PATTERN
from .objects import ObjectType, OBJECT_KINDS, LINKABLE_TYPES

logger = logging.getLogger(__name__)

# Name of a managed file: well-formed ID, a dash, and the rest
OBJECT_FILENAME = re.compile(rf"^(?P<id>{ID_PATTERN})-(?P<rest>.+)$")

# Markdown heading marker a note title line starts with
HEADING_MARKER = "# "


@dataclass(frozen=True)
class CatalogEntry:
    """
    One object found in the repository.

    Attributes:
        id: ID of the object
        label: Display title
        description: Secondary display text (e.g., authors); may be empty
        source_type: Type of the object
        path: Path to the object's file
    """
    id: str
    label: str
    description: str
    source_type: ObjectType
    path: str


def list_objects(repo_root: str) -> List[CatalogEntry]:
    """
    List every linkable object in the repository.

    Entries come grouped by type (notes, references, attachments); within a
    type they follow the filesystem's enumeration order.

    Args:
        repo_root: Path to the Zeka repository

    Returns:
        List of catalog entries
    """
    entries: List[CatalogEntry] = []
    for object_type in LINKABLE_TYPES:
        entries.extend(scan_directory(repo_root, object_type))

    logger.debug("Found %d objects in %s", len(entries), repo_root)
    return entries


def scan_directory(repo_root: str, object_type: ObjectType) -> List[CatalogEntry]:
    """
    List the objects of one type.

    Args:
        repo_root: Path to the Zeka repository
        object_type: Type of the objects to list

    Returns:
        List of catalog entries for that type
    """
    directory = os.path.join(repo_root, OBJECT_KINDS[object_type].subdir)
    if not os.path.isdir(directory):
        logger.warning("Directory %s does not exist, skipping %s objects",
                       directory, object_type.value)
        return []

    entries = []
    with os.scandir(directory) as it:
        for dir_entry in it:
            if not dir_entry.is_file():
                continue

            match = OBJECT_FILENAME.match(dir_entry.name)
            if not match:
                logger.warning("Skipping %s: not named like a Zeka object", dir_entry.path)
                continue

            entries.append(read_entry(dir_entry.path, object_type,
                                      match.group("id"), match.group("rest")))
    return entries


def read_entry(path: str, object_type: ObjectType, object_id: str, rest: str) -> CatalogEntry:
    """
    Build the catalog entry for one file.

    Args:
        path: Path to the object's file
        object_type: Type of the object
        object_id: ID taken from the file name
        rest: Part of the file name after the ID and dash

    Returns:
        The catalog entry
    """
    label = os.path.splitext(rest)[0] or rest
    description = ""

    if object_type in (ObjectType.NOTE, ObjectType.SKETCH):
        label = read_note_title(path) or label
    elif object_type == ObjectType.REFERENCE:
        data = load_reference(path)
        if data is not None:
            label = reference_label(data, label, path)
            description = reference_description(data, path)

    return CatalogEntry(object_id, label, description, object_type, path)


def read_note_title(path: str) -> Optional[str]:
    """
    Read a note's title from its first line.

    Args:
        path: Path to the note

    Returns:
        The heading text if the first line is a `# ` heading, else None
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            first_line = f.readline()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Error reading note %s: %s", path, e)
        return None

    first_line = first_line.rstrip("\r\n")
    if first_line.startswith(HEADING_MARKER):
        return first_line[len(HEADING_MARKER):]
    return None


def load_reference(path: str) -> Optional[Dict[str, Any]]:
    """
    Parse a reference file.

    Args:
        path: Path to the TOML reference file

    Returns:
        The parsed document, or None if it could not be read or parsed
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        logger.warning("Error parsing reference %s: %s", path, e)
        return None


def _string_or_list(value: Any) -> Optional[str]:
    """A string as is, or a list of strings joined with "; ". None otherwise."""
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return "; ".join(value)
    return None


def reference_label(data: Dict[str, Any], default: str, path: str = "") -> str:
    """
    Build the display label of a reference.

    Args:
        data: Parsed reference document
        default: Label to use when the document has no usable title
        path: Path of the reference, used in log messages

    Returns:
        Title, followed by subtitle and edition when present
    """
    label = default

    if "title" in data:
        title = _string_or_list(data["title"])
        if title:
            label = title
        elif title is None:
            logger.warning("Reference %s: 'title' is neither a string nor a list of strings", path)

    if "subtitle" in data:
        subtitle = data["subtitle"]
        if not isinstance(subtitle, str):
            logger.warning("Reference %s: 'subtitle' is not a string", path)
        elif subtitle:
            label += ": " + subtitle

    if "edition" in data:
        edition = data["edition"]
        if isinstance(edition, bool) or not isinstance(edition, (str, int, float)):
            logger.warning("Reference %s: 'edition' is neither a string nor a number", path)
        elif edition != "":
            label += ", " + str(edition) + "Ed."

    return label


def reference_description(data: Dict[str, Any], path: str = "") -> str:
    """
    Build the description of a reference from its authors.

    Args:
        data: Parsed reference document
        path: Path of the reference, used in log messages

    Returns:
        The authors, joined with "; ", or an empty string
    """
    if "author" not in data:
        return ""

    authors = _string_or_list(data["author"])
    if authors is None:
        logger.warning("Reference %s: 'author' is neither a string nor a list of strings", path)
        return ""
    return authors
