"""Hashing of length-prefixed byte records stored as text or binary."""

from __future__ import annotations

import argparse
import struct
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

_SEED = 104395301
_MULTIPLIER = 2654435789
_MASK = (1 << 64) - 1
_SIZE = struct.Struct("<Q")
_MAX_TEXT_VALUE = 0xFFFF


def hash_bytes(data: Iterable[int]) -> int:
    """Hash a sequence of byte values into an unsigned 64-bit integer."""
    value = _SEED
    for byte in data:
        value = (value + (((_MULTIPLIER * byte) & _MASK) ^ (value >> 23))) & _MASK
    return value


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], limit: int | None = None) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of text data") from None
    try:
        number = int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None
    if number < 0 or (limit is not None and number > limit):
        raise ValueError(f"value out of range: {number}")
    return number


def iter_text_records(stream: TextIO) -> Iterator[list[int]]:
    """Yield the records of whitespace-separated text data.

    The data holds a record count, then for each record its length
    followed by that many values.
    """
    tokens = _tokens(stream)
    count = _read_int(tokens)
    for _ in range(count):
        length = _read_int(tokens)
        yield [_read_int(tokens, _MAX_TEXT_VALUE) for _ in range(length)]


def iter_binary_records(data: bytes) -> Iterator[bytes]:
    """Yield the records of binary data.

    The data holds a little-endian 64-bit record count, then for each
    record a 64-bit length followed by that many bytes.
    """
    view = memoryview(data)
    if len(view) < _SIZE.size:
        raise ValueError("binary data too short for record count")
    (count,) = _SIZE.unpack_from(view, 0)
    offset = _SIZE.size
    for _ in range(count):
        if offset + _SIZE.size > len(view):
            raise ValueError("binary data truncated in record length")
        (length,) = _SIZE.unpack_from(view, offset)
        offset += _SIZE.size
        end = offset + length
        if end > len(view):
            raise ValueError("binary data truncated in record body")
        yield bytes(view[offset:end])
        offset = end


def encode_binary_records(records: Iterable[bytes]) -> bytes:
    """Encode records in the binary layout read by iter_binary_records."""
    items = [bytes(record) for record in records]
    parts = [_SIZE.pack(len(items))]
    for record in items:
        parts.append(_SIZE.pack(len(record)))
        parts.append(record)
    return b"".join(parts)


def hash_text_file(path: str | Path) -> list[int]:
    """Return the hash of every record in a text data file."""
    with open(path, encoding="ascii") as stream:
        return [hash_bytes(record) for record in iter_text_records(stream)]


def hash_binary_file(path: str | Path) -> list[int]:
    """Return the hash of every record in a binary data file."""
    data = Path(path).read_bytes()
    return [hash_bytes(record) for record in iter_binary_records(data)]


def write_hashes(hashes: Iterable[int], path: str | Path) -> None:
    """Write hashes as decimal numbers, one per line."""
    with open(path, "w", encoding="ascii") as out:
        for value in hashes:
            out.write(f"{value}\n")


def main(argv: list[str] | None = None) -> int:
    """Hash every record of a data file and write the results."""
    parser = argparse.ArgumentParser(
        prog="datahash", description="Hash the records of a data file."
    )
    parser.add_argument("input", type=Path, help="data file to hash")
    parser.add_argument(
        "-f",
        "--format",
        choices=("text", "binary"),
        help="input format (default: text for .txt files, otherwise binary)",
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=Path("datahash.txt"),
        help="file to write hashes to",
    )
    args = parser.parse_args(argv)

    fmt = args.format or ("text" if args.input.suffix == ".txt" else "binary")
    try:
        if fmt == "text":
            hashes = hash_text_file(args.input)
        else:
            hashes = hash_binary_file(args.input)
    except (OSError, ValueError) as err:
        parser.exit(1, f"datahash: {err}\n")
    write_hashes(hashes, args.output)
    return 0