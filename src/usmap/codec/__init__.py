"""Binary codec for the usmap format.

This module provides the decoding stages: the byte reader, the header
decoder, the compression dispatcher and the body decoder.
"""

from __future__ import annotations

from .compression import Decompressor, decompress_body, get_decompressor
from .decoder import UsmapBody, decode_body
from .header import UsmapHeader, read_header
from .reader import ByteReader

__all__ = [
    "ByteReader",
    "UsmapHeader",
    "read_header",
    "Decompressor",
    "get_decompressor",
    "decompress_body",
    "UsmapBody",
    "decode_body",
]
