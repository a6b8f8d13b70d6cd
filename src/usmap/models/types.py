"""Property type grammar.

A property type is a closed union with one variant per grammar rule:

- AtomicType: the tag alone (ByteProperty, IntProperty, ...)
- EnumType: an underlying type plus the enum it draws values from
- StructType: a reference to a struct by name
- SequenceType: Array, Set and Optional, all "some T"
- MapType: a key type and a value type

Inner and value types may be any variant, so types nest to arbitrary depth.
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator

from .base import UsmapModel
from .enums import SEQUENCE_KINDS, PropertyKind


class AtomicType(UsmapModel):
    """A type fully described by its tag."""

    kind: PropertyKind

    @field_validator("kind")
    @classmethod
    def _check_atomic(cls, kind: PropertyKind) -> PropertyKind:
        if not kind.is_atomic:
            raise ValueError(f"{kind.type_name} is not an atomic property kind")
        return kind

    @property
    def type_name(self) -> str:
        return self.kind.type_name


class EnumType(UsmapModel):
    """An enum-valued property stored as ``inner_type``."""

    kind: Literal[PropertyKind.ENUM_PROPERTY] = PropertyKind.ENUM_PROPERTY
    inner_type: PropertyType
    enum_name: str

    @property
    def type_name(self) -> str:
        return self.kind.type_name


class StructType(UsmapModel):
    """A property holding an instance of the named struct."""

    kind: Literal[PropertyKind.STRUCT_PROPERTY] = PropertyKind.STRUCT_PROPERTY
    struct_type: str

    @property
    def type_name(self) -> str:
        return self.kind.type_name


class SequenceType(UsmapModel):
    """Array, Set or Optional of ``inner_type``."""

    kind: PropertyKind
    inner_type: PropertyType

    @field_validator("kind")
    @classmethod
    def _check_sequence(cls, kind: PropertyKind) -> PropertyKind:
        if kind not in SEQUENCE_KINDS:
            raise ValueError(f"{kind.type_name} is not a sequence property kind")
        return kind

    @property
    def type_name(self) -> str:
        return self.kind.type_name


class MapType(UsmapModel):
    """A map from ``inner_type`` keys to ``value_type`` values."""

    kind: Literal[PropertyKind.MAP_PROPERTY] = PropertyKind.MAP_PROPERTY
    inner_type: PropertyType
    value_type: PropertyType

    @property
    def type_name(self) -> str:
        return self.kind.type_name


PropertyType = AtomicType | EnumType | StructType | SequenceType | MapType

for _model in (EnumType, SequenceType, MapType):
    _model.model_rebuild()
