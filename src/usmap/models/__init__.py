"""Pydantic models for decoded usmap data.

This module provides the immutable entities produced by the parser and the
fixed enumerations of the format.
"""

from __future__ import annotations

from .base import UsmapModel
from .enums import MAGIC, CompressionMethod, PropertyKind, UsmapVersion
from .types import AtomicType, EnumType, MapType, PropertyType, SequenceType, StructType
from .usmap import (
    CustomVersion,
    EnumEntry,
    Guid,
    PackageFileVersion,
    PackageVersioning,
    PropertyInfo,
    StructEntry,
    Usmap,
)

__all__ = [
    "UsmapModel",
    "MAGIC",
    "UsmapVersion",
    "CompressionMethod",
    "PropertyKind",
    "PropertyType",
    "AtomicType",
    "EnumType",
    "StructType",
    "SequenceType",
    "MapType",
    "Guid",
    "CustomVersion",
    "PackageFileVersion",
    "PackageVersioning",
    "EnumEntry",
    "PropertyInfo",
    "StructEntry",
    "Usmap",
]
