#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Zeka - Tools for a personal Zettelkasten repository

This package provides functionality for:
- Creating timestamped notes, references and sketches
- Parsing the typed links between them
- Resolving links to the files they point to
- Listing the objects in a repository, to pick link targets from
"""

__version__ = "0.1.0"

# Import core modules
from .core.objects import ObjectType
from .core.ids import new_id
from .core.errors import ZekaError, ConfigurationError, NotFoundError, AmbiguityError
from .core.catalog import CatalogEntry, list_objects
from .core.config import Config
from .utils.filenames import canonicalize

# Import linking
from .linking.grammar import ZekaLink, find_link_at, format_link
from .linking.resolver import resolve

# Import commands
from .commands import command_registry, run_command, Editor
