"""Struct hierarchy utilities.

This module provides helpers for walking the super-type chain of a decoded
struct, which consumers need to lay out inherited properties when reading
serialized object data.
"""

from __future__ import annotations

from typing import Iterator

from ..models import PropertyInfo, StructEntry, Usmap


def iter_super_chain(usmap: Usmap, name: str) -> Iterator[StructEntry]:
    """Yield a struct and its ancestors, nearest first.

    The walk stops at a super type that is not in the model (engine base
    classes are often omitted from mappings) or when a struct repeats.

    Args:
        usmap: Decoded model
        name: Name of the struct to start from

    Yields:
        The named struct, then its super type, and so on

    Raises:
        KeyError: If no struct called ``name`` exists

    Example:
        >>> [s.name for s in iter_super_chain(model, "Pawn")]
        ['Pawn', 'Actor', 'Object']
    """
    struct = usmap.get_struct(name)
    if struct is None:
        raise KeyError(name)

    seen: set[str] = set()
    while struct is not None and struct.name not in seen:
        seen.add(struct.name)
        yield struct
        if struct.super_type is None:
            break
        struct = usmap.get_struct(struct.super_type)


def collect_properties(usmap: Usmap, name: str) -> list[PropertyInfo]:
    """Return the serializable properties of a struct, inherited ones included.

    Properties are ordered base-most struct first, which is the order the
    engine serializes them in.

    Args:
        usmap: Decoded model
        name: Name of the struct

    Returns:
        All serializable properties along the chain

    Raises:
        KeyError: If no struct called ``name`` exists
    """
    chain = list(iter_super_chain(usmap, name))
    properties: list[PropertyInfo] = []
    for struct in reversed(chain):
        properties.extend(struct.properties)
    return properties


def total_property_count(usmap: Usmap, name: str) -> int:
    """Sum the declared property counts along a struct's chain.

    Raises:
        KeyError: If no struct called ``name`` exists
    """
    return sum(struct.property_count for struct in iter_super_chain(usmap, name))
