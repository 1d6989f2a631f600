#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Linking package - Links between Zeka objects

- Grammar: parsing and rendering the three link syntaxes
- Resolver: finding the file a link points to
"""

from .grammar import ZekaLink, find_link_at, find_links, format_link
from .resolver import resolve, link_pattern
