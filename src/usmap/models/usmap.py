"""Decoded usmap entities.

This module defines the immutable model returned by ``usmap.parse``: the
optional package versioning block and the name, enum and struct tables.
"""

from __future__ import annotations

from pydantic import Field

from .base import UsmapModel
from .types import PropertyType


class Guid(UsmapModel):
    """A 128-bit GUID stored as four little-endian u32 words."""

    a: int = Field(ge=0, le=0xFFFFFFFF)
    b: int = Field(ge=0, le=0xFFFFFFFF)
    c: int = Field(ge=0, le=0xFFFFFFFF)
    d: int = Field(ge=0, le=0xFFFFFFFF)

    def __str__(self) -> str:
        return f"{self.a:08X}{self.b:08X}{self.c:08X}{self.d:08X}"


class CustomVersion(UsmapModel):
    """A GUID-keyed schema version stamp."""

    key: Guid
    version: int


class PackageFileVersion(UsmapModel):
    ue4: int
    ue5: int


class PackageVersioning(UsmapModel):
    """Engine versioning the mappings were dumped with.

    Attributes:
        file_version: Package file version for UE4 and UE5
        custom_versions: Custom version stamps, in file order
        net_cl: Changelist number of the engine build
    """

    file_version: PackageFileVersion
    custom_versions: tuple[CustomVersion, ...] = ()
    net_cl: int = Field(ge=0, le=0xFFFFFFFF)


class EnumEntry(UsmapModel):
    """A named enumeration and its members in declaration order."""

    name: str
    members: tuple[str, ...] = ()


class PropertyInfo(UsmapModel):
    """A single serializable field of a struct.

    Attributes:
        index: Position of the property within its struct
        name: Property name
        array_size: Static array dimension (1 for a scalar)
        type: Recursive type description
    """

    index: int = Field(ge=0, le=0xFFFF)
    name: str
    array_size: int = Field(ge=0, le=0xFF)
    type: PropertyType


class StructEntry(UsmapModel):
    """A class or struct layout.

    ``property_count`` is the declared total and may exceed
    ``len(properties)``: only serializable properties are stored.
    """

    name: str
    super_type: str | None = None
    property_count: int = Field(ge=0, le=0xFFFF)
    properties: tuple[PropertyInfo, ...] = ()


class Usmap(UsmapModel):
    """A fully decoded usmap file.

    Attributes:
        package_versioning: Versioning block, or None when absent
        names: Name table in file order
        enums: Enums, first occurrence of each name kept
        structs: Structs in first-seen order, content from the last occurrence

    Example:
        >>> model = parse(data)
        >>> actor = model.get_struct("Actor")
        >>> [p.name for p in actor.properties]
    """

    package_versioning: PackageVersioning | None = None
    names: tuple[str, ...] = ()
    enums: tuple[EnumEntry, ...] = ()
    structs: tuple[StructEntry, ...] = ()

    def get_enum(self, name: str) -> EnumEntry | None:
        """Return the enum called ``name``, or None."""
        return next((entry for entry in self.enums if entry.name == name), None)

    def get_struct(self, name: str) -> StructEntry | None:
        """Return the struct called ``name``, or None."""
        return next((entry for entry in self.structs if entry.name == name), None)
