"""Exception hierarchy for usmap.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from UsmapError for easy catching of any usmap-specific error.
Every failure is fatal to the current parse; no partial model is ever returned.
"""

from __future__ import annotations


class UsmapError(Exception):
    """Base exception for all usmap errors."""

    pass


class DecodeError(UsmapError):
    """Raised when decoding a usmap buffer fails.

    Examples:
        - Truncated data (insufficient bytes)
        - Corrupted header or body
        - Property type nesting deeper than the configured limit
    """

    pass


class InvalidMagicError(DecodeError):
    """Raised when the header magic is not 0x30C4."""

    pass


class UnsupportedVersionError(DecodeError):
    """Raised when the format version is newer than the latest known version."""

    pass


class UnsupportedCompressionError(DecodeError):
    """Raised when the body uses a compression method that cannot be decoded.

    Examples:
        - Oodle compression (never supported)
        - Unknown compression tag
    """

    pass


class SizeMismatchError(DecodeError):
    """Raised when declared sizes disagree with each other or with the payload.

    Examples:
        - Uncompressed body with size_compressed != size_decompressed
        - Decompressed body length differs from the header (when verified)
    """

    pass


class DecompressionError(DecodeError):
    """Raised when a decompression library rejects the body."""

    pass


class OutOfBoundsError(DecodeError):
    """Raised when a read would run past the end of the buffer."""

    pass


class InvalidPropertyTagError(DecodeError):
    """Raised when a property type tag is outside the known property kinds."""

    pass


class MissingRequiredNameError(DecodeError):
    """Raised when a name index that must resolve falls outside the name table.

    Examples:
        - Struct or property name index out of range
        - Enum member index out of range
    """

    pass
