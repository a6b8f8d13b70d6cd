"""usmap: Unreal usmap mappings decoder

A Python library for reading usmap files, the binary type mappings that
describe the class hierarchies, enums and property layouts of a game
engine's reflection system. Consumers use the decoded model to interpret
otherwise opaque serialized object data.

Key Features:
- Versioned header parsing (Initial through LargeEnums)
- Uncompressed, Brotli and Zstandard bodies
- Recursive property type grammar (Enum, Struct, Array/Set/Optional, Map)
- Immutable Pydantic models

Quick Start:
    >>> from usmap import parse_file
    >>>
    >>> model = parse_file("Mappings.usmap")
    >>> actor = model.get_struct("Actor")
    >>> for prop in actor.properties:
    ...     print(prop.index, prop.name, prop.type.type_name)
"""

from __future__ import annotations

from .codec import ByteReader
from .config import ParserConfig
from .exceptions import (
    DecodeError,
    DecompressionError,
    InvalidMagicError,
    InvalidPropertyTagError,
    MissingRequiredNameError,
    OutOfBoundsError,
    SizeMismatchError,
    UnsupportedCompressionError,
    UnsupportedVersionError,
    UsmapError,
)
from .models import (
    MAGIC,
    AtomicType,
    CompressionMethod,
    CustomVersion,
    EnumEntry,
    EnumType,
    Guid,
    MapType,
    PackageFileVersion,
    PackageVersioning,
    PropertyInfo,
    PropertyKind,
    PropertyType,
    SequenceType,
    StructEntry,
    StructType,
    Usmap,
    UsmapVersion,
)
from .parser import parse, parse_file
from .utils import collect_properties, iter_super_chain, total_property_count

__version__ = "0.1.0"

__all__ = [
    # Core API
    "parse",
    "parse_file",
    "ParserConfig",
    "ByteReader",
    # Model
    "Usmap",
    "EnumEntry",
    "StructEntry",
    "PropertyInfo",
    "PackageVersioning",
    "PackageFileVersion",
    "CustomVersion",
    "Guid",
    # Property types
    "PropertyType",
    "AtomicType",
    "EnumType",
    "StructType",
    "SequenceType",
    "MapType",
    # Format enums
    "MAGIC",
    "UsmapVersion",
    "CompressionMethod",
    "PropertyKind",
    # Exceptions
    "UsmapError",
    "DecodeError",
    "InvalidMagicError",
    "UnsupportedVersionError",
    "UnsupportedCompressionError",
    "SizeMismatchError",
    "DecompressionError",
    "OutOfBoundsError",
    "InvalidPropertyTagError",
    "MissingRequiredNameError",
    # Hierarchy
    "iter_super_chain",
    "collect_properties",
    "total_property_count",
    # Version
    "__version__",
]
