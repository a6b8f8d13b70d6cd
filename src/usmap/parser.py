"""Usmap parsing entry points.

This module provides parse(), which runs the decoding stages in order and
assembles their output into an immutable Usmap:

1. the header decoder consumes the fixed-grammar prefix,
2. the compression dispatcher turns the rest into the raw body,
3. the body decoder rebuilds the name, enum and struct tables.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .codec.compression import decompress_body
from .codec.decoder import UsmapBody, decode_body
from .codec.header import UsmapHeader, read_header
from .codec.reader import Buffer, ByteReader
from .config import DEFAULT_CONFIG, ParserConfig
from .models import Usmap

logger = logging.getLogger(__name__)


def parse(data: Buffer, config: ParserConfig | None = None) -> Usmap:
    """Parse a complete usmap buffer.

    Args:
        data: Entire usmap file contents
        config: Parser configuration (defaults to ParserConfig())

    Returns:
        Decoded model

    Raises:
        InvalidMagicError: If the magic is not 0x30C4
        UnsupportedVersionError: If the format version is unknown
        UnsupportedCompressionError: If the body uses Oodle or an unknown method
        SizeMismatchError: If declared sizes are inconsistent
        DecompressionError: If the compressed body is corrupt
        OutOfBoundsError: If the header or body is truncated
        InvalidPropertyTagError: If a property type tag is unknown
        MissingRequiredNameError: If a required name index is out of range

    Examples:
        ```python
        from usmap import parse

        with open("Mappings.usmap", "rb") as f:
            model = parse(f.read())

        for struct in model.structs:
            print(struct.name, struct.super_type, len(struct.properties))
        ```
    """
    config = config or DEFAULT_CONFIG
    reader = ByteReader(data)

    header = read_header(reader)
    body_bytes = decompress_body(
        header.compression_method,
        reader.remaining_bytes(),
        header.size_compressed,
        header.size_decompressed,
        config,
    )
    body = decode_body(body_bytes, header.version, config)

    return assemble(header, body)


def parse_file(path: str | os.PathLike[str], config: ParserConfig | None = None) -> Usmap:
    """Read a usmap file from disk and parse it.

    Args:
        path: Path to the .usmap file
        config: Parser configuration (defaults to ParserConfig())

    Returns:
        Decoded model
    """
    file_path = Path(path)
    logger.debug("Parsing usmap file %s", file_path)
    return parse(file_path.read_bytes(), config)


def assemble(header: UsmapHeader, body: UsmapBody) -> Usmap:
    """Merge header versioning with the body tables into the final model."""
    return Usmap(
        package_versioning=header.package_versioning,
        names=body.names,
        enums=body.enums,
        structs=body.structs,
    )
