#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utils package - Utility functions for Zeka

- Filename utilities for turning titles into safe file names
"""

from .filenames import (
    canonicalize,
    strip_diacritics,
    object_filename
)
