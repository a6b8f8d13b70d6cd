"""Body decompression.

Each compression method maps to a Decompressor. The set is fixed: Oodle is
permanently unsupported and unknown tags are rejected before the body is
touched.
"""

from __future__ import annotations

import logging
from typing import Protocol

import brotli
import zstandard as zstd

from ..config import DEFAULT_CONFIG, ParserConfig
from ..exceptions import DecompressionError, SizeMismatchError, UnsupportedCompressionError
from ..models import CompressionMethod
from .reader import Buffer

logger = logging.getLogger(__name__)


class Decompressor(Protocol):
    """Turns a compressed body into raw body bytes."""

    def decompress(self, data: Buffer, size_compressed: int, size_decompressed: int) -> bytes:
        """Decompress ``data``.

        Args:
            data: Body bytes following the header
            size_compressed: Compressed size declared in the header
            size_decompressed: Decompressed size declared in the header

        Returns:
            Decompressed body

        Raises:
            DecodeError: If the body cannot be decompressed
        """
        ...


class RawDecompressor:
    """Uncompressed body: both declared sizes must agree."""

    def decompress(self, data: Buffer, size_compressed: int, size_decompressed: int) -> bytes:
        if size_compressed != size_decompressed:
            raise SizeMismatchError(
                f"No compression specified but size_compressed ({size_compressed}) "
                f"!= size_decompressed ({size_decompressed})"
            )
        return bytes(data)


class OodleDecompressor:
    """Oodle is proprietary and never supported."""

    def decompress(self, data: Buffer, size_compressed: int, size_decompressed: int) -> bytes:
        raise UnsupportedCompressionError("Usmap uses Oodle compression, which is unsupported")


class BrotliDecompressor:
    def decompress(self, data: Buffer, size_compressed: int, size_decompressed: int) -> bytes:
        try:
            return brotli.decompress(bytes(data))
        except brotli.error as e:
            raise DecompressionError(f"Brotli decompression failed: {e}") from e


class ZstandardDecompressor:
    def decompress(self, data: Buffer, size_compressed: int, size_decompressed: int) -> bytes:
        # Read to the end of the stream, across every frame
        dctx = zstd.ZstdDecompressor()
        try:
            with dctx.stream_reader(bytes(data), read_across_frames=True) as reader:
                return reader.read()
        except zstd.ZstdError as e:
            raise DecompressionError(f"Zstandard decompression failed: {e}") from e


DECOMPRESSORS: dict[CompressionMethod, Decompressor] = {
    CompressionMethod.NONE: RawDecompressor(),
    CompressionMethod.OODLE: OodleDecompressor(),
    CompressionMethod.BROTLI: BrotliDecompressor(),
    CompressionMethod.ZSTANDARD: ZstandardDecompressor(),
}


def get_decompressor(method: int) -> Decompressor:
    """Return the decompressor for a raw compression tag.

    Raises:
        UnsupportedCompressionError: If the tag is not a known method
    """
    try:
        return DECOMPRESSORS[CompressionMethod(method)]
    except ValueError:
        raise UnsupportedCompressionError(f"Unsupported compression method: {method}") from None


def decompress_body(
    method: int,
    data: Buffer,
    size_compressed: int,
    size_decompressed: int,
    config: ParserConfig | None = None,
) -> bytes:
    """Decompress a usmap body according to its header.

    Args:
        method: Raw compression tag from the header
        data: Body bytes following the header
        size_compressed: Compressed size declared in the header
        size_decompressed: Decompressed size declared in the header
        config: Parser configuration (defaults to ParserConfig())

    Returns:
        Decompressed body, never a view into ``data``

    Raises:
        UnsupportedCompressionError: Oodle or an unknown method
        SizeMismatchError: Inconsistent sizes
        DecompressionError: The compression library rejected the body
    """
    config = config or DEFAULT_CONFIG
    decompressor = get_decompressor(method)
    logger.debug("Decompressing %d body bytes with %s", len(data), CompressionMethod(method).name)

    body = decompressor.decompress(data, size_compressed, size_decompressed)

    if config.verify_decompressed_size and len(body) != size_decompressed:
        raise SizeMismatchError(
            f"Decompressed body is {len(body)} bytes, header declares {size_decompressed}"
        )

    return body
