#!/usr/bin/env python3
"""Basic usage example for usmap.

This example demonstrates:
1. Parsing a usmap file (or a small built-in sample)
2. Walking enums and structs
3. Printing property types, inherited properties included
"""

from __future__ import annotations

import struct
import sys

from usmap import (
    EnumType,
    MapType,
    PropertyType,
    SequenceType,
    StructType,
    collect_properties,
    parse,
    parse_file,
)


def sample_usmap() -> bytes:
    """Build a tiny uncompressed version-0 usmap in memory."""
    names = ["Object", "Actor", "EMode", "Off", "On", "Mode", "Tags"]
    body = bytearray(struct.pack("<I", len(names)))
    for name in names:
        body += struct.pack("<B", len(name)) + name.encode("ascii")

    # one enum: EMode { Off, On }
    body += struct.pack("<I", 1) + struct.pack("<iBii", 2, 2, 3, 4)

    # Object (no super), Actor : Object with Mode and Tags
    body += struct.pack("<I", 2)
    body += struct.pack("<iiHH", 0, -1, 0, 0)
    body += struct.pack("<iiHH", 1, 0, 2, 2)
    body += struct.pack("<HBi", 0, 1, 5) + bytes([26, 0]) + struct.pack("<i", 2)  # Enum<Byte>
    body += struct.pack("<HBi", 1, 1, 6) + bytes([8, 5])  # Array<Name>

    header = struct.pack("<HBBII", 0x30C4, 0, 0, len(body), len(body))
    return header + bytes(body)


def describe(prop_type: PropertyType) -> str:
    """Render a property type as a compact string."""
    if isinstance(prop_type, EnumType):
        return f"{prop_type.type_name}<{describe(prop_type.inner_type)}, {prop_type.enum_name}>"
    if isinstance(prop_type, StructType):
        return f"{prop_type.type_name}<{prop_type.struct_type}>"
    if isinstance(prop_type, SequenceType):
        return f"{prop_type.type_name}<{describe(prop_type.inner_type)}>"
    if isinstance(prop_type, MapType):
        key = describe(prop_type.inner_type)
        value = describe(prop_type.value_type)
        return f"{prop_type.type_name}<{key}, {value}>"
    return prop_type.type_name


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("usmap Basic Usage Example")
    print("=" * 60)
    print()

    if len(sys.argv) > 1:
        model = parse_file(sys.argv[1])
    else:
        model = parse(sample_usmap())

    print(f"1. {len(model.names)} names, {len(model.enums)} enums, {len(model.structs)} structs")
    if model.package_versioning is not None:
        version = model.package_versioning.file_version
        print(f"   UE4 {version.ue4} / UE5 {version.ue5}, CL {model.package_versioning.net_cl}")
    print()

    print("2. Enums...")
    for entry in model.enums[:10]:
        print(f"   {entry.name}: {', '.join(entry.members)}")
    print()

    print("3. Structs...")
    for struct_entry in model.structs[:10]:
        parent = f" : {struct_entry.super_type}" if struct_entry.super_type else ""
        print(f"   {struct_entry.name}{parent}")
        for prop in collect_properties(model, struct_entry.name):
            print(f"     [{prop.index}] {prop.name}: {describe(prop.type)}")


if __name__ == "__main__":
    main()
