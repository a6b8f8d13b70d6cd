"""Usmap body decoder.

This module reconstructs the name, enum and struct tables from a
decompressed body. Property types are decoded by recursive descent over the
leading kind tag of each type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..config import DEFAULT_CONFIG, ParserConfig
from ..exceptions import DecodeError, InvalidPropertyTagError, MissingRequiredNameError
from ..models import (
    AtomicType,
    EnumEntry,
    EnumType,
    MapType,
    PropertyInfo,
    PropertyKind,
    PropertyType,
    SequenceType,
    StructEntry,
    StructType,
    UsmapVersion,
)
from ..models.enums import SEQUENCE_KINDS
from .reader import Buffer, ByteReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UsmapBody:
    """Tables decoded from the body, before assembly into a Usmap."""

    names: tuple[str, ...]
    enums: tuple[EnumEntry, ...]
    structs: tuple[StructEntry, ...]


def decode_body(
    data: Buffer, version: UsmapVersion, config: ParserConfig | None = None
) -> UsmapBody:
    """Decode the name, enum and struct tables.

    Args:
        data: Decompressed body
        version: Format version from the header; selects the width of name
            lengths and enum member counts
        config: Parser configuration (defaults to ParserConfig())

    Returns:
        Decoded tables

    Raises:
        OutOfBoundsError: If the body is truncated
        InvalidPropertyTagError: If a property type tag is unknown
        MissingRequiredNameError: If a required name index is out of range
        DecodeError: If property types nest deeper than config.max_type_depth
    """
    config = config or DEFAULT_CONFIG
    reader = ByteReader(data)

    names = read_name_table(reader, version)
    enums = read_enum_table(reader, names, version)
    structs = read_struct_table(reader, names, config)

    logger.debug(
        "Decoded usmap body: %d names, %d enums, %d structs",
        len(names),
        len(enums),
        len(structs),
    )
    return UsmapBody(names=names, enums=enums, structs=structs)


def read_name_table(reader: ByteReader, version: UsmapVersion) -> tuple[str, ...]:
    num_names = reader.read_u32()
    names = []
    for _ in range(num_names):
        if version >= UsmapVersion.LONG_FNAME:
            length = reader.read_u16()
        else:
            length = reader.read_u8()
        names.append(reader.read_ascii_string(length))
    return tuple(names)


def read_enum_table(
    reader: ByteReader, names: Sequence[str], version: UsmapVersion
) -> tuple[EnumEntry, ...]:
    """Read the enum table.

    The first enum with a given name wins; later duplicates are read (to keep
    the cursor in step) and then dropped.
    """
    num_enums = reader.read_u32()
    enums: dict[str, EnumEntry] = {}
    for _ in range(num_enums):
        enum_name = _read_required_name(reader, names, "enum name")

        if version >= UsmapVersion.LARGE_ENUMS:
            num_members = reader.read_u16()
        else:
            num_members = reader.read_u8()
        members = tuple(
            _read_required_name(reader, names, f"member of enum {enum_name}")
            for _ in range(num_members)
        )

        if enum_name in enums:
            logger.debug("Dropping duplicate enum %s", enum_name)
            continue
        enums[enum_name] = EnumEntry(name=enum_name, members=members)

    return tuple(enums.values())


def read_struct_table(
    reader: ByteReader, names: Sequence[str], config: ParserConfig
) -> tuple[StructEntry, ...]:
    """Read the struct table.

    A later struct with an already-seen name replaces the earlier content but
    keeps the earlier position.
    """
    num_structs = reader.read_u32()
    structs: dict[str, StructEntry] = {}
    for _ in range(num_structs):
        struct = read_struct(reader, names, config)
        if struct.name in structs:
            logger.debug("Overwriting duplicate struct %s", struct.name)
        structs[struct.name] = struct
    return tuple(structs.values())


def read_struct(reader: ByteReader, names: Sequence[str], config: ParserConfig) -> StructEntry:
    name = _read_required_name(reader, names, "struct name")
    super_type = reader.read_name(names)
    property_count = reader.read_u16()
    serializable_property_count = reader.read_u16()

    properties = tuple(
        read_property_info(reader, names, config) for _ in range(serializable_property_count)
    )

    return StructEntry(
        name=name,
        super_type=super_type,
        property_count=property_count,
        properties=properties,
    )


def read_property_info(
    reader: ByteReader, names: Sequence[str], config: ParserConfig
) -> PropertyInfo:
    index = reader.read_u16()
    array_size = reader.read_u8()
    name = _read_required_name(reader, names, "property name")
    property_type = read_property_type(reader, names, config)

    return PropertyInfo(index=index, name=name, array_size=array_size, type=property_type)


def read_property_type(
    reader: ByteReader, names: Sequence[str], config: ParserConfig, depth: int = 1
) -> PropertyType:
    """Decode one property type, recursing into inner and value types.

    Args:
        reader: Reader positioned at the type's kind tag
        names: Name table
        config: Parser configuration (for max_type_depth)
        depth: Nesting depth of this type, 1 for a property's own type

    Returns:
        Decoded property type

    Raises:
        InvalidPropertyTagError: If the kind tag is unknown
        DecodeError: If nesting exceeds config.max_type_depth
    """
    if depth > config.max_type_depth:
        raise DecodeError(f"Property type nesting exceeds {config.max_type_depth} levels")

    tag = reader.read_u8()
    try:
        kind = PropertyKind(tag)
    except ValueError:
        raise InvalidPropertyTagError(
            f"Invalid property type tag {tag} at offset {reader.position - 1}"
        ) from None

    if kind is PropertyKind.ENUM_PROPERTY:
        inner_type = read_property_type(reader, names, config, depth + 1)
        enum_name = _read_required_name(reader, names, "enum type name")
        return EnumType(inner_type=inner_type, enum_name=enum_name)

    if kind is PropertyKind.STRUCT_PROPERTY:
        struct_type = _read_required_name(reader, names, "struct type name")
        return StructType(struct_type=struct_type)

    if kind in SEQUENCE_KINDS:
        inner_type = read_property_type(reader, names, config, depth + 1)
        return SequenceType(kind=kind, inner_type=inner_type)

    if kind is PropertyKind.MAP_PROPERTY:
        inner_type = read_property_type(reader, names, config, depth + 1)
        value_type = read_property_type(reader, names, config, depth + 1)
        return MapType(inner_type=inner_type, value_type=value_type)

    return AtomicType(kind=kind)


def _read_required_name(reader: ByteReader, names: Sequence[str], what: str) -> str:
    offset = reader.position
    name = reader.read_name(names)
    if name is None:
        raise MissingRequiredNameError(
            f"Name index for {what} at offset {offset} is outside "
            f"the name table ({len(names)} names)"
        )
    return name
