#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core package - Core functionality for Zeka

This package contains the core functionality:
- Objects: Object types and their storage conventions
- IDs: Timestamp-based object IDs
- Catalog: Listing the objects in a repository
- Config: Configuration management
- Errors: Exceptions reported to the user
"""

from .objects import ObjectType, ObjectKind, OBJECT_KINDS, LINKABLE_TYPES, REFERENCE_TEMPLATES
from .ids import new_id, timestamp, is_valid_id, ID_PATTERN
from .errors import ZekaError, ConfigurationError, NotFoundError, AmbiguityError
from .catalog import CatalogEntry, list_objects
from .config import Config, require_repository
