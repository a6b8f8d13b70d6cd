"""Unit tests for struct hierarchy helpers."""

from __future__ import annotations

import pytest
from usmap_writer import build_usmap

from usmap import (
    AtomicType,
    PropertyInfo,
    PropertyKind,
    StructEntry,
    Usmap,
    collect_properties,
    iter_super_chain,
    parse,
    total_property_count,
)


def _prop(index: int, name: str) -> PropertyInfo:
    return PropertyInfo(
        index=index, name=name, array_size=1, type=AtomicType(kind=PropertyKind.INT_PROPERTY)
    )


class TestSuperChain:
    """Test walking super types."""

    def test_chain_from_sample(self, sample_body: bytes) -> None:
        """Test the chain runs nearest first up to the root."""
        model = parse(build_usmap(sample_body))
        assert [s.name for s in iter_super_chain(model, "Pawn")] == ["Pawn", "Actor", "Object"]
        assert [s.name for s in iter_super_chain(model, "Object")] == ["Object"]

    def test_unknown_struct(self) -> None:
        """Test an unknown start name raises KeyError."""
        with pytest.raises(KeyError):
            list(iter_super_chain(Usmap(), "Nope"))

    def test_missing_super_stops_chain(self) -> None:
        """Test a super type absent from the model ends the walk."""
        child = StructEntry(name="Child", super_type="EngineBase", property_count=0)
        model = Usmap(structs=(child,))
        assert [s.name for s in iter_super_chain(model, "Child")] == ["Child"]

    def test_cycle_stops_chain(self) -> None:
        """Test a corrupt super-type cycle does not loop forever."""
        model = Usmap(
            structs=(
                StructEntry(name="A", super_type="B", property_count=0),
                StructEntry(name="B", super_type="A", property_count=0),
            )
        )
        assert [s.name for s in iter_super_chain(model, "A")] == ["A", "B"]


class TestCollectProperties:
    """Test inherited property collection."""

    def test_base_first(self, sample_body: bytes) -> None:
        """Test inherited properties come before the struct's own."""
        model = parse(build_usmap(sample_body))
        names = [p.name for p in collect_properties(model, "Pawn")]
        assert names == ["bHidden", "Tags", "RootComponent", "ChannelMap", "Health"]

    def test_total_property_count(self, sample_body: bytes) -> None:
        """Test declared counts are summed along the chain."""
        model = parse(build_usmap(sample_body))
        assert total_property_count(model, "Pawn") == 6
        assert total_property_count(model, "Actor") == 4

    def test_declared_count_may_exceed_serialized(self) -> None:
        """Test the declared count is independent of stored properties."""
        struct = StructEntry(name="S", property_count=10, properties=(_prop(0, "X"),))
        model = Usmap(structs=(struct,))
        assert total_property_count(model, "S") == 10
        assert len(collect_properties(model, "S")) == 1
