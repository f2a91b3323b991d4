#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public file-level API for huffxor."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from provide.foundation import logger

from huffxor.coding.codec import HuffmanCodec
from huffxor.container import pack_archive, read_archive_header, unpack_archive
from huffxor.utils.io import read_all_bytes, read_all_text, write_all_bytes
from huffxor.utils.xor import xor_apply


def _ratio(original: int, compressed: int) -> float:
    return compressed / original if original else 0.0


def compress_file(
    input_path: Path,
    output_path: Path,
    raw: bool = False,
    xor_key: bytes | str | None = None,
) -> dict[str, Any]:
    """Compress a file into an archive, or a headerless packed stream.

    Args:
        input_path: File to compress
        output_path: Destination file
        raw: Write only the packed Huffman bits with no header. Such output
            can only be decoded by the codec that produced it.
        xor_key: Optional key to XOR-obfuscate the compressed bytes

    Returns:
        Dictionary with 'input_size', 'output_size' and 'ratio'

    Raises:
        EmptyInputError: If the input file is empty
        StorageError: If reading or writing fails
    """
    data = read_all_bytes(input_path)

    if raw:
        output = HuffmanCodec().compress(data)
        if xor_key is not None:
            output = xor_apply(output, xor_key)
    else:
        output = pack_archive(data, xor_key=xor_key)

    write_all_bytes(output_path, output)
    logger.info(
        "Compressed file",
        input=str(input_path),
        output=str(output_path),
        raw=raw,
        input_size=len(data),
        output_size=len(output),
    )
    return {
        "input_size": len(data),
        "output_size": len(output),
        "ratio": _ratio(len(data), len(output)),
    }


def decompress_file(
    input_path: Path,
    output_path: Path,
    xor_key: bytes | str | None = None,
) -> dict[str, Any]:
    """Restore a file from an archive written by ``compress_file``.

    Raises:
        ArchiveFormatError: If the input is not a valid archive
        StorageError: If reading or writing fails
    """
    archive = read_all_bytes(input_path)
    data = unpack_archive(archive, xor_key=xor_key)
    write_all_bytes(output_path, data)
    logger.info(
        "Decompressed file",
        input=str(input_path),
        output=str(output_path),
        output_size=len(data),
    )
    return {"input_size": len(archive), "output_size": len(data)}


def xor_file(input_path: Path, output_path: Path, key: bytes | str) -> int:
    """XOR a file with a repeating key and return the number of bytes written."""
    data = read_all_bytes(input_path)
    transformed = xor_apply(data, key)
    write_all_bytes(output_path, transformed)
    logger.info("XOR operation completed", input=str(input_path), output=str(output_path))
    return len(transformed)


def inspect_archive(input_path: Path) -> dict[str, Any]:
    """Return the header fields of an archive file."""
    archive = read_all_bytes(input_path)
    header = read_archive_header(archive)
    return {
        "version": header.version,
        "xored": header.xored,
        "symbol_count": header.symbol_count,
        "original_length": header.original_length,
        "bit_length": header.bit_length,
        "checksum": f"{header.checksum:08x}",
        "payload_size": len(archive) - header.size,
        "ratio": _ratio(header.original_length, len(archive)),
    }


def run_pipeline(
    input_path: Path,
    compressed_path: Path,
    decompressed_path: Path,
    encrypted_path: Path,
    decrypted_path: Path,
    key: bytes | str,
    text: bool = False,
) -> dict[str, Any]:
    """Run compress, decompress, XOR encrypt and XOR decrypt with one codec.

    The compressed file is the headerless packed stream, decoded with the
    tree left resident in the codec by the compress step.

    Args:
        input_path: Source file
        compressed_path: Where the packed Huffman stream is written
        decompressed_path: Where the decoded copy of the source is written
        encrypted_path: Where the XORed compressed stream is written
        decrypted_path: Where the XOR-restored compressed stream is written
        key: XOR key
        text: Read the source as UTF-8 text (newlines normalized)

    Returns:
        Dictionary with sizes and whether decoding restored the source
    """
    if text:
        data = read_all_text(input_path).encode("utf-8")
    else:
        data = read_all_bytes(input_path)

    codec = HuffmanCodec()
    compressed = codec.compress(data)
    write_all_bytes(compressed_path, compressed)
    logger.info("Compression done", output=str(compressed_path), size=len(compressed))

    decompressed = codec.decompress(read_all_bytes(compressed_path))
    write_all_bytes(decompressed_path, decompressed)
    logger.info("Decompression done", output=str(decompressed_path), size=len(decompressed))

    xor_file(compressed_path, encrypted_path, key)
    xor_file(encrypted_path, decrypted_path, key)

    return {
        "input_size": len(data),
        "compressed_size": len(compressed),
        "bit_length": codec.bit_length,
        "symbols": len(codec.codes or {}),
        "roundtrip_ok": decompressed == data,
    }


# 🌶️📦🔚
