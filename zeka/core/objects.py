#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
objects.py - The kinds of object stored in a Zeka repository

Every object type maps to one subdirectory of the repository and one file
extension. This table is the single place where that mapping lives: the
link resolver, the catalog scanner and the creation commands all read it.
"""

import re
from enum import Enum
from typing import Dict, NamedTuple, Tuple


class ObjectType(Enum):
    """Type of an object in the repository."""
    NOTE = "note"
    REFERENCE = "reference"
    ATTACHMENT = "attachment"
    SKETCH = "sketch"


class ObjectKind(NamedTuple):
    """Storage convention for one object type."""
    subdir: str
    extension: str  # Empty for attachments, which keep whatever they have
    linkable: bool


OBJECT_KINDS: Dict[ObjectType, ObjectKind] = {
    ObjectType.NOTE: ObjectKind("notes", ".md", True),
    ObjectType.REFERENCE: ObjectKind("references", ".toml", True),
    ObjectType.ATTACHMENT: ObjectKind("attachments", "", True),
    ObjectType.SKETCH: ObjectKind("sketches", ".md", False),
}

LINKABLE_TYPES: Tuple[ObjectType, ...] = tuple(
    t for t, kind in OBJECT_KINDS.items() if kind.linkable
)


def note_template(title: str) -> str:
    """Initial contents of a new note or sketch."""
    return f"# {title}\n\n"


# Templates used when creating a new reference. Empty values are left for the
# user to fill in, so a fresh reference is not valid TOML until edited.
REFERENCE_TEMPLATES: Dict[str, str] = {
    "Book": '''type = "book"
title = ""
subtitle = ""
author = "" # ["", ""]
year =
month =
edition = # 1 or "Special Edition"
volume =
numPages =
publisher = ""

review = """
"""
''',

    "ConferencePaper": '''type = "conferencePaper"
title = ""
subtitle = ""
author = "" # ["", ""]
year =
month =
numPages =
conference = ""

review = """
"""
''',

    "JournalPaper": '''type = "journalPaper"
title = ""
subtitle = ""
author = "" # ["", ""]
year =
month =
numPages =
journal = ""
volume =
number =

review = """
"""
''',

    "TechnicalReport": '''type = "technicalReport"
title = ""
subtitle = ""
author = "" # ["", ""]
year =
month =
numPages =
institution = ""
code = ""

review = """
"""
''',

    "BlogPost": '''type = "blogPost"
title = ""
subtitle = ""
author = "" # ["", ""]
year =
month =
url = ""

review = """
"""
''',

    "Movie": '''type = "movie"
title = ""
subtitle = ""
director = "" # ["", ""]
actors = "" # ["", ""]
year =

review = """
"""
''',

    "Game": '''type = "game"
title = ""
subtitle = ""
designer = "" # ["", ""]
studio = ""
publisher = ""
platform = "" # ["", ""]
year =

review = """
"""
''',
}

# Control characters TOML basic strings do not allow unescaped
CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def toml_string(value: str) -> str:
    """
    Quote a string as a TOML basic string.

    Args:
        value: Raw string

    Returns:
        The string with surrounding double quotes and escapes applied
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    escaped = escaped.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
    escaped = CONTROL_CHARS.sub(lambda m: f"\\u{ord(m.group()):04X}", escaped)
    return f'"{escaped}"'


def render_reference_template(kind: str, title: str) -> str:
    """
    Render the template for a new reference with its title filled in.

    Args:
        kind: One of the keys of REFERENCE_TEMPLATES
        title: Title of the reference

    Returns:
        TOML text of the new reference

    Raises:
        KeyError: If `kind` is not a known reference kind
    """
    template = REFERENCE_TEMPLATES[kind]
    return template.replace('title = ""', f"title = {toml_string(title)}", 1)
