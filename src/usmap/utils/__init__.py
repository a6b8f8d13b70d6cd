"""Utility functions for usmap.

This module provides helpers for consumers of a decoded model.
"""

from __future__ import annotations

from .hierarchy import collect_properties, iter_super_chain, total_property_count

__all__ = [
    "iter_super_chain",
    "collect_properties",
    "total_property_count",
]
