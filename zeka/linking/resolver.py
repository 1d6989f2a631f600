#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
resolver.py - Finding the file a link points to

There is no index: a link is resolved by globbing its type's subdirectory
for files whose name starts with the link's ID. Exactly one file must match.
"""

import glob
import logging
import os

from ..core.errors import AmbiguityError, NotFoundError
from ..core.objects import OBJECT_KINDS
from .grammar import ZekaLink

logger = logging.getLogger(__name__)


def link_pattern(repo_root: str, link: ZekaLink) -> str:
    """
    Build the glob pattern matching the file a link points to.

    Args:
        repo_root: Path to the Zeka repository
        link: The link to resolve

    Returns:
        Glob pattern of the form `{root}/{subdir}/{id}*{extension}`
    """
    kind = OBJECT_KINDS[link.type]
    return os.path.join(glob.escape(repo_root), kind.subdir, f"{link.id}*{kind.extension}")


def resolve(repo_root: str, link: ZekaLink) -> str:
    """
    Resolve a link to the one file it points to.

    Args:
        repo_root: Path to the Zeka repository
        link: The link to resolve

    Returns:
        Path to the linked file

    Raises:
        NotFoundError: If no file matches the link
        AmbiguityError: If more than one file matches the link
    """
    pattern = link_pattern(repo_root, link)
    matches = sorted(glob.glob(pattern))

    if not matches:
        raise NotFoundError(pattern)

    if len(matches) > 1:
        logger.warning("Link to %s %s is ambiguous: %s", link.type.value, link.id, matches)
        raise AmbiguityError(pattern, matches)

    logger.debug("Resolved %s %s to %s", link.type.value, link.id, matches[0])
    return matches[0]
