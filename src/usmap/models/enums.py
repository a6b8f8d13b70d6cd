"""Fixed enumerations of the usmap format."""

from __future__ import annotations

import enum

MAGIC = 0x30C4


class UsmapVersion(enum.IntEnum):
    """Format versions, in the order they were introduced."""

    INITIAL = 0
    PACKAGE_VERSIONING = 1  # optional package versioning block in the header
    LONG_FNAME = 2  # name lengths widen from u8 to u16
    LARGE_ENUMS = 3  # enum member counts widen from u8 to u16

    LATEST = 3


class CompressionMethod(enum.IntEnum):
    """Compression applied to the body."""

    NONE = 0
    OODLE = 1
    BROTLI = 2
    ZSTANDARD = 3


class PropertyKind(enum.IntEnum):
    """Property type tags.

    The ordinal is the on-wire tag, so members must never be reordered.
    """

    BYTE_PROPERTY = 0
    BOOL_PROPERTY = 1
    INT_PROPERTY = 2
    FLOAT_PROPERTY = 3
    OBJECT_PROPERTY = 4
    NAME_PROPERTY = 5
    DELEGATE_PROPERTY = 6
    DOUBLE_PROPERTY = 7
    ARRAY_PROPERTY = 8
    STRUCT_PROPERTY = 9
    STR_PROPERTY = 10
    TEXT_PROPERTY = 11
    INTERFACE_PROPERTY = 12
    MULTICAST_DELEGATE_PROPERTY = 13
    WEAK_OBJECT_PROPERTY = 14
    LAZY_OBJECT_PROPERTY = 15
    ASSET_OBJECT_PROPERTY = 16
    SOFT_OBJECT_PROPERTY = 17
    UINT64_PROPERTY = 18
    UINT32_PROPERTY = 19
    UINT16_PROPERTY = 20
    INT64_PROPERTY = 21
    INT16_PROPERTY = 22
    INT8_PROPERTY = 23
    MAP_PROPERTY = 24
    SET_PROPERTY = 25
    ENUM_PROPERTY = 26
    FIELD_PATH_PROPERTY = 27
    OPTIONAL_PROPERTY = 28
    UTF8_STR_PROPERTY = 29
    ANSI_STR_PROPERTY = 30

    @property
    def type_name(self) -> str:
        """Engine name of the tag, e.g. ``"ByteProperty"``."""
        return _TYPE_NAMES[self]

    @property
    def is_atomic(self) -> bool:
        """Whether the tag alone describes the whole type."""
        return self not in COMPOSITE_KINDS


SEQUENCE_KINDS = frozenset(
    {
        PropertyKind.ARRAY_PROPERTY,
        PropertyKind.SET_PROPERTY,
        PropertyKind.OPTIONAL_PROPERTY,
    }
)

COMPOSITE_KINDS = SEQUENCE_KINDS | {
    PropertyKind.ENUM_PROPERTY,
    PropertyKind.STRUCT_PROPERTY,
    PropertyKind.MAP_PROPERTY,
}

_TYPE_NAMES = {
    PropertyKind.BYTE_PROPERTY: "ByteProperty",
    PropertyKind.BOOL_PROPERTY: "BoolProperty",
    PropertyKind.INT_PROPERTY: "IntProperty",
    PropertyKind.FLOAT_PROPERTY: "FloatProperty",
    PropertyKind.OBJECT_PROPERTY: "ObjectProperty",
    PropertyKind.NAME_PROPERTY: "NameProperty",
    PropertyKind.DELEGATE_PROPERTY: "DelegateProperty",
    PropertyKind.DOUBLE_PROPERTY: "DoubleProperty",
    PropertyKind.ARRAY_PROPERTY: "ArrayProperty",
    PropertyKind.STRUCT_PROPERTY: "StructProperty",
    PropertyKind.STR_PROPERTY: "StrProperty",
    PropertyKind.TEXT_PROPERTY: "TextProperty",
    PropertyKind.INTERFACE_PROPERTY: "InterfaceProperty",
    PropertyKind.MULTICAST_DELEGATE_PROPERTY: "MulticastDelegateProperty",
    PropertyKind.WEAK_OBJECT_PROPERTY: "WeakObjectProperty",
    PropertyKind.LAZY_OBJECT_PROPERTY: "LazyObjectProperty",
    PropertyKind.ASSET_OBJECT_PROPERTY: "AssetObjectProperty",
    PropertyKind.SOFT_OBJECT_PROPERTY: "SoftObjectProperty",
    PropertyKind.UINT64_PROPERTY: "UInt64Property",
    PropertyKind.UINT32_PROPERTY: "UInt32Property",
    PropertyKind.UINT16_PROPERTY: "UInt16Property",
    PropertyKind.INT64_PROPERTY: "Int64Property",
    PropertyKind.INT16_PROPERTY: "Int16Property",
    PropertyKind.INT8_PROPERTY: "Int8Property",
    PropertyKind.MAP_PROPERTY: "MapProperty",
    PropertyKind.SET_PROPERTY: "SetProperty",
    PropertyKind.ENUM_PROPERTY: "EnumProperty",
    PropertyKind.FIELD_PATH_PROPERTY: "FieldPathProperty",
    PropertyKind.OPTIONAL_PROPERTY: "OptionalProperty",
    PropertyKind.UTF8_STR_PROPERTY: "Utf8StrProperty",
    PropertyKind.ANSI_STR_PROPERTY: "AnsiStrProperty",
}
