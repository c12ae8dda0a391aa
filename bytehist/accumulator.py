"""Streaming byte-frequency accumulation."""
from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import BinaryIO, Tuple

from .errors import InputOpenError, ReadError

CHUNK_SIZE = 1_048_576
_BYTE_VALUES = 256


def _read_chunk(stream: BinaryIO, chunk_size: int) -> bytes:
    # A read interrupted by a signal returns no data, so retrying it is safe.
    while True:
        try:
            return stream.read(chunk_size)
        except InterruptedError:
            continue
        except OSError as exc:
            raise ReadError(f"read failed: {exc}") from exc


def accumulate(stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Tuple[Tuple[int, ...], int]:
    """Count every byte value in *stream* until end-of-stream.

    The stream is read in chunks of at most *chunk_size* bytes. Returns the
    256-entry frequency table (index = byte value) and the total byte count,
    with ``sum(table) == total``. On a read failure :class:`ReadError` is
    raised and nothing counted so far is returned.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    table = [0] * _BYTE_VALUES
    total = 0
    while True:
        chunk = _read_chunk(stream, chunk_size)
        if not chunk:
            break
        total += len(chunk)
        for value, count in Counter(chunk).items():
            table[value] += count
    return tuple(table), total


def accumulate_path(path: str | Path, chunk_size: int = CHUNK_SIZE) -> Tuple[Tuple[int, ...], int]:
    """Open *path* in binary mode and accumulate its contents."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise InputOpenError(str(path), exc.strerror or str(exc)) from exc
    with handle:
        return accumulate(handle, chunk_size)
