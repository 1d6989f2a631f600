#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grammar.py - The syntax of links between Zeka objects

Links are written inline in notes and come in three shapes, one per type of
object they point to:

    Note:        [extra][[020200514084500]]
    Reference:   {extra}{{020200514084500}}
    Attachment:  (extra)((020200514084500))

The bracketed `extra` in front of the ID is optional display text. Each
bracket family gets its own pattern; the three are only combined to probe
whether some link exists at a given position.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.ids import ID_PATTERN
from ..core.objects import ObjectType, LINKABLE_TYPES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZekaLink:
    """
    A link to an object, as parsed from (or about to be inserted in) text.

    Attributes:
        type: Type of the target object (note, reference or attachment)
        id: ID of the target object
        extra: Optional display text
    """
    type: ObjectType
    id: str
    extra: Optional[str] = None


# Opening and closing delimiter of each link family
DELIMITERS = {
    ObjectType.NOTE: ("[", "]"),
    ObjectType.REFERENCE: ("{", "}"),
    ObjectType.ATTACHMENT: ("(", ")"),
}


def _link_regex(open_: str, close: str, named: bool = True) -> str:
    o, c = re.escape(open_), re.escape(close)
    extra, id_ = ("?P<extra>", "?P<id>") if named else ("?:", "?:")
    return (
        rf"(?:{o}({extra}[^{o}{c}]+){c})?"
        rf"{o}{o}({id_}{ID_PATTERN}){c}{c}"
    )


NOTE_LINK: re.Pattern = re.compile(_link_regex(*DELIMITERS[ObjectType.NOTE]))
REFERENCE_LINK: re.Pattern = re.compile(_link_regex(*DELIMITERS[ObjectType.REFERENCE]))
ATTACHMENT_LINK: re.Pattern = re.compile(_link_regex(*DELIMITERS[ObjectType.ATTACHMENT]))

# Classification order when looking at a link-shaped span
LINK_RULES: Tuple[Tuple[ObjectType, re.Pattern], ...] = (
    (ObjectType.NOTE, NOTE_LINK),
    (ObjectType.REFERENCE, REFERENCE_LINK),
    (ObjectType.ATTACHMENT, ATTACHMENT_LINK),
)

# Probe for any link-shaped span. Brackets count as part of the token, so the
# span must not be glued to a word character on either side.
ANY_LINK: re.Pattern = re.compile(
    r"(?<!\w)(?:"
    + "|".join(f"(?:{_link_regex(*DELIMITERS[t], named=False)})" for t, _ in LINK_RULES)
    + r")(?!\w)"
)


def classify(span: str) -> Optional[ZekaLink]:
    """
    Parse a link-shaped span of text.

    Args:
        span: Text expected to be exactly one link

    Returns:
        The parsed link, or None if no link rule matches the whole span
    """
    for object_type, pattern in LINK_RULES:
        match = pattern.fullmatch(span)
        if match:
            return ZekaLink(object_type, match.group("id"), match.group("extra"))
    return None


def find_link_at(text: str, offset: int) -> Optional[ZekaLink]:
    """
    Find the link at a given position in text.

    A cursor placed right after the last bracket of a link still counts as
    being on that link.

    Args:
        text: Text to look in (usually a whole document)
        offset: Character offset of the cursor

    Returns:
        The link spanning `offset`, or None if there is none
    """
    for match in ANY_LINK.finditer(text):
        if match.start() > offset:
            break
        if offset <= match.end():
            link = classify(match.group(0))
            if link is None:
                logger.error(
                    "Link-shaped text '%s' at offset %d matches no link rule",
                    match.group(0), match.start())
            return link
    return None


def find_links(text: str) -> List[ZekaLink]:
    """Return every link in `text`, in order of appearance."""
    links = []
    for match in ANY_LINK.finditer(text):
        link = classify(match.group(0))
        if link is None:
            logger.error("Link-shaped text '%s' matches no link rule", match.group(0))
            continue
        links.append(link)
    return links


def format_link(object_type: ObjectType, object_id: str, extra: Optional[str] = None) -> str:
    """
    Render a link for insertion in text.

    Delimiters of the link's own family are removed from `extra`, so the
    result always parses back to the same type and ID.

    Args:
        object_type: Type of the target object
        object_id: ID of the target object
        extra: Optional display text

    Returns:
        The link text

    Raises:
        ValueError: If objects of `object_type` cannot be linked to
    """
    if object_type not in LINKABLE_TYPES:
        raise ValueError(f"Objects of type '{object_type.value}' cannot be linked")

    open_, close = DELIMITERS[object_type]
    target = f"{open_}{open_}{object_id}{close}{close}"

    if extra:
        extra = extra.replace(open_, "").replace(close, "")
    if not extra:
        return target
    return f"{open_}{extra}{close}{target}"
