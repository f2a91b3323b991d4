#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Self-describing archive container around a Huffman payload.

Layout (little-endian):

    magic(4) version(1) flags(1) symbol_count(u16)
    original_len(u64) bit_length(u64) crc32(u32)
    symbol_count x [symbol(u8) frequency(u64)]
    payload

The frequency table is enough to rebuild the exact tree because the node
heap breaks ties deterministically. ``bit_length`` marks where the payload
padding starts. ``crc32`` covers the original bytes and catches a wrong
XOR key that still happens to decode.
"""

from __future__ import annotations

import struct
import zlib

from attrs import define
from provide.foundation import logger

from huffxor.coding.codec import HuffmanCodec
from huffxor.coding.tree import FrequencyTable
from huffxor.config.defaults import (
    ALPHABET_SIZE,
    ARCHIVE_ENTRY_FORMAT,
    ARCHIVE_HEADER_FORMAT,
    ARCHIVE_MAGIC,
    ARCHIVE_VERSION,
    FLAG_XOR,
)
from huffxor.exceptions import ArchiveFormatError, MalformedStreamError
from huffxor.utils.xor import xor_apply

HEADER_SIZE = struct.calcsize(ARCHIVE_HEADER_FORMAT)
ENTRY_SIZE = struct.calcsize(ARCHIVE_ENTRY_FORMAT)


@define(frozen=True)
class ArchiveHeader:
    """Decoded archive header and frequency table."""

    version: int
    flags: int
    original_length: int
    bit_length: int
    checksum: int
    frequencies: FrequencyTable

    @property
    def xored(self) -> bool:
        return bool(self.flags & FLAG_XOR)

    @property
    def symbol_count(self) -> int:
        return len(self.frequencies)

    @property
    def size(self) -> int:
        """Bytes occupied by the header and its frequency table."""
        return HEADER_SIZE + ENTRY_SIZE * self.symbol_count


def pack_archive(data: bytes, xor_key: bytes | str | None = None) -> bytes:
    """
    Compress ``data`` into a self-describing archive.

    Args:
        data: Bytes to compress
        xor_key: When given, the payload is XOR-obfuscated with this key

    Returns:
        Archive bytes

    Raises:
        EmptyInputError: If ``data`` is empty
        EmptyKeyError: If ``xor_key`` is given but empty
    """
    codec = HuffmanCodec()
    payload = codec.compress(data)
    frequencies = codec.frequencies
    assert codec.bit_length is not None

    flags = 0
    if xor_key is not None:
        payload = xor_apply(payload, xor_key)
        flags |= FLAG_XOR

    parts = [
        struct.pack(
            ARCHIVE_HEADER_FORMAT,
            ARCHIVE_MAGIC,
            ARCHIVE_VERSION,
            flags,
            len(frequencies),
            len(data),
            codec.bit_length,
            zlib.crc32(data),
        )
    ]
    for symbol in sorted(frequencies):
        parts.append(struct.pack(ARCHIVE_ENTRY_FORMAT, symbol, frequencies[symbol]))
    parts.append(payload)
    archive = b"".join(parts)

    logger.debug(
        "Packed archive",
        original_size=len(data),
        archive_size=len(archive),
        symbols=len(frequencies),
        xored=bool(flags & FLAG_XOR),
    )
    return archive


def read_archive_header(archive: bytes) -> ArchiveHeader:
    """
    Parse and validate the header and frequency table of ``archive``.

    Raises:
        ArchiveFormatError: If the header is truncated or inconsistent
    """
    if len(archive) < HEADER_SIZE:
        raise ArchiveFormatError("Malformed archive: header too short")

    magic, version, flags, symbol_count, original_length, bit_length, checksum = struct.unpack_from(
        ARCHIVE_HEADER_FORMAT, archive, 0
    )
    if magic != ARCHIVE_MAGIC:
        raise ArchiveFormatError(f"Bad magic number: {magic!r}")
    if version != ARCHIVE_VERSION:
        raise ArchiveFormatError(f"Unsupported archive version: {version}")
    if flags & ~FLAG_XOR:
        raise ArchiveFormatError(f"Unknown archive flags: 0x{flags:02x}")
    if not 1 <= symbol_count <= ALPHABET_SIZE:
        raise ArchiveFormatError(f"Invalid symbol count: {symbol_count}")

    table_end = HEADER_SIZE + ENTRY_SIZE * symbol_count
    if len(archive) < table_end:
        raise ArchiveFormatError("Malformed archive: frequency table truncated")

    frequencies: FrequencyTable = {}
    for offset in range(HEADER_SIZE, table_end, ENTRY_SIZE):
        symbol, frequency = struct.unpack_from(ARCHIVE_ENTRY_FORMAT, archive, offset)
        if symbol in frequencies:
            raise ArchiveFormatError(f"Duplicate symbol in frequency table: {symbol}")
        if frequency == 0:
            raise ArchiveFormatError(f"Zero frequency for symbol {symbol}")
        frequencies[symbol] = frequency

    if sum(frequencies.values()) != original_length:
        raise ArchiveFormatError("Frequency table does not match original length")

    return ArchiveHeader(
        version=version,
        flags=flags,
        original_length=original_length,
        bit_length=bit_length,
        checksum=checksum,
        frequencies=frequencies,
    )


def unpack_archive(archive: bytes, xor_key: bytes | str | None = None) -> bytes:
    """
    Restore the original bytes from an archive produced by ``pack_archive``.

    Args:
        archive: Archive bytes
        xor_key: Key for an XOR-obfuscated payload

    Returns:
        The original bytes

    Raises:
        ArchiveFormatError: If the archive is invalid, the key is missing,
            or the payload does not decode to the recorded length
    """
    header = read_archive_header(archive)
    payload = archive[header.size :]

    if len(payload) != (header.bit_length + 7) // 8:
        raise ArchiveFormatError(
            f"Payload is {len(payload)} bytes, expected {(header.bit_length + 7) // 8}"
        )

    if header.xored:
        if xor_key is None:
            raise ArchiveFormatError("Archive payload is XOR-obfuscated but no key was given")
        payload = xor_apply(payload, xor_key)

    codec = HuffmanCodec.from_frequencies(header.frequencies)
    try:
        data = codec.decompress(payload, bit_length=header.bit_length)
    except MalformedStreamError as e:
        raise ArchiveFormatError(f"Corrupt archive payload: {e}") from e

    if len(data) != header.original_length:
        raise ArchiveFormatError(
            f"Decoded {len(data)} bytes, archive records {header.original_length}"
        )
    if zlib.crc32(data) != header.checksum:
        raise ArchiveFormatError("Checksum mismatch: wrong XOR key or corrupt payload")

    logger.debug("Unpacked archive", archive_size=len(archive), original_size=len(data))
    return data


# 🌶️📦🔚
