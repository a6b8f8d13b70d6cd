"""Usmap header decoding.

The header is a fixed grammar:

- u16 magic (0x30C4)
- u8 format version
- [version >= PackageVersioning] i32 flag, then the versioning block if flag == 1
- u8 compression method, u32 compressed size, u32 decompressed size

Everything after the header is the (possibly compressed) body.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..exceptions import DecodeError, InvalidMagicError, UnsupportedVersionError
from ..models import (
    MAGIC,
    CustomVersion,
    Guid,
    PackageFileVersion,
    PackageVersioning,
    UsmapVersion,
)
from .reader import ByteReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UsmapHeader:
    """Decoded header fields.

    Attributes:
        version: Format version
        package_versioning: Versioning block, or None when absent
        compression_method: Raw compression tag (validated by the dispatcher)
        size_compressed: Declared body size on disk
        size_decompressed: Declared body size after decompression
    """

    version: UsmapVersion
    package_versioning: PackageVersioning | None
    compression_method: int
    size_compressed: int
    size_decompressed: int


def read_guid(reader: ByteReader) -> Guid:
    return Guid(
        a=reader.read_u32(),
        b=reader.read_u32(),
        c=reader.read_u32(),
        d=reader.read_u32(),
    )


def read_package_versioning(reader: ByteReader) -> PackageVersioning:
    """Read the package versioning block.

    Args:
        reader: Reader positioned at the start of the block

    Returns:
        Decoded versioning block

    Raises:
        DecodeError: If the custom version count is negative
        OutOfBoundsError: If the block is truncated
    """
    file_version = PackageFileVersion(ue4=reader.read_i32(), ue5=reader.read_i32())

    num_custom_versions = reader.read_i32()
    if num_custom_versions < 0:
        raise DecodeError(f"Negative custom version count: {num_custom_versions}")

    custom_versions = []
    for _ in range(num_custom_versions):
        key = read_guid(reader)
        custom_versions.append(CustomVersion(key=key, version=reader.read_i32()))

    net_cl = reader.read_u32()

    return PackageVersioning(
        file_version=file_version,
        custom_versions=tuple(custom_versions),
        net_cl=net_cl,
    )


def read_header(reader: ByteReader) -> UsmapHeader:
    """Read the usmap header, leaving the reader at the start of the body.

    Args:
        reader: Reader positioned at the start of the file

    Returns:
        Decoded header

    Raises:
        InvalidMagicError: If the magic is not 0x30C4
        UnsupportedVersionError: If the version is newer than UsmapVersion.LATEST
        OutOfBoundsError: If the header is truncated
    """
    magic = reader.read_u16()
    if magic != MAGIC:
        raise InvalidMagicError(f"Usmap has invalid magic: 0x{magic:04X} (expected 0x{MAGIC:04X})")

    raw_version = reader.read_u8()
    if raw_version > UsmapVersion.LATEST:
        raise UnsupportedVersionError(
            f"Usmap has unsupported version {raw_version} (latest is {int(UsmapVersion.LATEST)})"
        )
    version = UsmapVersion(raw_version)

    package_versioning = None
    if version >= UsmapVersion.PACKAGE_VERSIONING:
        has_versioning = reader.read_i32() == 1
        if has_versioning:
            package_versioning = read_package_versioning(reader)

    compression_method = reader.read_u8()
    size_compressed = reader.read_u32()
    size_decompressed = reader.read_u32()

    logger.debug(
        "usmap header: version=%s versioning=%s compression=%d sizes=%d/%d",
        version.name,
        package_versioning is not None,
        compression_method,
        size_compressed,
        size_decompressed,
    )

    return UsmapHeader(
        version=version,
        package_versioning=package_versioning,
        compression_method=compression_method,
        size_compressed=size_compressed,
        size_decompressed=size_decompressed,
    )
