"""Configuration for usmap parsing.

This module provides the configuration dataclass that tunes how strictly a
usmap buffer is decoded. The defaults reproduce the reference reader exactly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for parsing a usmap buffer.

    Attributes:
        verify_decompressed_size: Check that the decompressed body length matches
            the size declared in the header (default False). Brotli and Zstandard
            output is otherwise trusted as-is.

        max_type_depth: Maximum nesting depth of a property type (default 64).
            Real engine types rarely nest more than four levels
            (e.g. Map<Name, Array<Enum<Byte>>>); the limit only guards against
            corrupt input recursing without end.

    Examples:
        ```python
        from usmap import ParserConfig, parse

        strict = ParserConfig(verify_decompressed_size=True)
        model = parse(data, config=strict)
        ```
    """

    verify_decompressed_size: bool = False
    max_type_depth: int = 64

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_type_depth < 1:
            raise ValueError(f"max_type_depth must be >= 1, got {self.max_type_depth}")


DEFAULT_CONFIG = ParserConfig()
