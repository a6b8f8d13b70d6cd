"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest
from usmap_writer import BodyWriter, array_of, atomic, enum_of, map_of, struct_of

from usmap import PropertyKind, UsmapVersion


@pytest.fixture
def sample_names() -> list[str]:
    """Name table shared by the sample body."""
    return [
        "Object",  # 0
        "Actor",  # 1
        "Pawn",  # 2
        "ECollisionChannel",  # 3
        "ECC_WorldStatic",  # 4
        "ECC_Pawn",  # 5
        "bHidden",  # 6
        "Tags",  # 7
        "RootComponent",  # 8
        "SceneComponent",  # 9
        "ChannelMap",  # 10
        "Health",  # 11
    ]


@pytest.fixture
def sample_body(sample_names: list[str]) -> bytes:
    """A small but complete body: one enum, three chained structs."""
    return (
        BodyWriter(UsmapVersion.LATEST)
        .names(sample_names)
        .enums([(3, [4, 5])])
        .structs(
            [
                (0, -1, 0, []),
                (
                    1,
                    0,
                    4,
                    [
                        (0, 1, 6, atomic(PropertyKind.BOOL_PROPERTY)),
                        (1, 1, 7, array_of(atomic(PropertyKind.NAME_PROPERTY))),
                        (2, 1, 8, struct_of(9)),
                    ],
                ),
                (
                    2,
                    1,
                    2,
                    [
                        (
                            0,
                            1,
                            10,
                            map_of(
                                array_of(enum_of(atomic(PropertyKind.BYTE_PROPERTY), 3)),
                                atomic(PropertyKind.INT_PROPERTY),
                            ),
                        ),
                        (1, 1, 11, atomic(PropertyKind.FLOAT_PROPERTY)),
                    ],
                ),
            ]
        )
        .to_bytes()
    )
