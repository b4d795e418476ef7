#!/usr/bin/env python3
"""
Shared utilities for component source analysis.

This module provides component discovery in JavaScript/TypeScript sources and
extraction of member descriptors from component syntax trees.
"""

from .component_parser import ComponentParser
from .member_extractor import extract_members, members_for_validation, get_property_name

__all__ = [
    "ComponentParser",
    "extract_members",
    "members_for_validation",
    "get_property_name",
]
