"""Base model class and usmap-specific Pydantic configuration.

Every decoded entity inherits from UsmapModel, which makes instances
immutable once the decoder has built them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UsmapModel(BaseModel):
    """Base class for all decoded usmap entities.

    Instances are frozen: the model is built once by the parser and then only
    read by consumers. Equality is structural, so two parses of the same bytes
    compare equal.
    """

    # ConfigDict for Pydantic v2
    model_config = ConfigDict(
        # Immutable after construction
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        # Keep enum members (not raw ints) on the model
        use_enum_values=False,
    )
