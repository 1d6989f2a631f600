#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
filenames.py - Turning free-form titles into file names

Object files are named `{id}-{canonical title}{extension}`. The canonical
title keeps only letters, digits, "-" and "_", so it is safe on any
filesystem and never looks like an object ID.
"""

import re
import unicodedata


def strip_diacritics(s: str) -> str:
    """Decompose accented characters and drop the combining marks."""
    decomposed = unicodedata.normalize("NFD", s)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def canonicalize(title: str) -> str:
    """
    Convert a title to a format suitable for use in file names.

    Removes diacritics, brackets, quotes and punctuation, and replaces
    spaces with underscores. Any other character that is not a letter, digit,
    "-" or "_" becomes an underscore too. Applying it twice gives the same
    result as applying it once.

    Args:
        title: The title to be canonicalized

    Returns:
        The canonical form of the title (possibly empty)
    """
    s = strip_diacritics(title)
    s = re.sub(r"[(\[{]", "-", s)
    s = re.sub(r"[)\]}]", "", s)
    s = re.sub(r"['\"`]", "", s)
    s = re.sub(r"[.,!?;/\\]", " ", s)
    s = s.replace(":", "-")
    s = re.sub(r" *- *", "-", s)
    s = s.strip(" ")
    s = re.sub(r" +", " ", s)
    s = s.replace(" ", "_")
    return re.sub(r"[^\w-]", "_", s)


def object_filename(object_id: str, title: str, extension: str) -> str:
    """
    Build the file name of a new object.

    Args:
        object_id: ID of the object
        title: Free-form title given by the user
        extension: File extension, including the leading dot

    Returns:
        File name (without directory)
    """
    return f"{object_id}-{canonicalize(title)}{extension}"
