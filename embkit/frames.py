"""Packing and unpacking of small fixed-layout binary frames."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from dataclasses import dataclass

FRAME_LENGTH = 8
MAX_SINGLE_FRAME_PAYLOAD = FRAME_LENGTH - 1

_WORD_RECORD = struct.Struct("<IBH")
_PACKED_RECORD = struct.Struct("<IBHI")


@dataclass(frozen=True)
class WordRecord:
    """A 32-bit word, a byte and a 16-bit half word."""

    word: int
    byte: int
    hword: int


@dataclass(frozen=True)
class PackedRecord:
    """Two 32-bit words, a byte and a 16-bit half word."""

    word1: int
    word2: int
    byte: int
    hword: int


def _frame(data: Iterable[int]) -> bytes:
    try:
        frame = bytes(data)
    except ValueError as exc:
        raise ValueError(f"frame values must be bytes: {exc}") from None
    if len(frame) != FRAME_LENGTH:
        raise ValueError(f"frame must be {FRAME_LENGTH} bytes, got {len(frame)}")
    return frame


def single_frame_tx(data: Iterable[int], size: int) -> bytes:
    """Build a single frame: the size byte followed by the first seven data bytes."""
    frame = _frame(data)
    if not 0 <= size <= 0xFF:
        raise ValueError(f"size must fit in one byte: {size}")
    return bytes([size]) + frame[:MAX_SINGLE_FRAME_PAYLOAD]


def single_frame_rx(data: Iterable[int]) -> tuple[int, bytes]:
    """Split a single frame into its size and its payload, zero-padded to 8 bytes."""
    frame = _frame(data)
    size = frame[0]
    if size > MAX_SINGLE_FRAME_PAYLOAD:
        raise ValueError(f"payload size {size} exceeds {MAX_SINGLE_FRAME_PAYLOAD}")
    payload = frame[1 : 1 + size]
    return size, payload.ljust(FRAME_LENGTH, b"\x00")


def unpack_record(data: Iterable[int]) -> WordRecord:
    """Read a little-endian word, byte and half word from 7 bytes."""
    raw = bytes(data)
    if len(raw) != _WORD_RECORD.size:
        raise ValueError(f"record must be {_WORD_RECORD.size} bytes, got {len(raw)}")
    word, byte, hword = _WORD_RECORD.unpack(raw)
    return WordRecord(word=word, byte=byte, hword=hword)


def pack_record(record: PackedRecord) -> bytes:
    """Serialise a record as word1, byte, hword, word2, all little-endian (11 bytes)."""
    try:
        return _PACKED_RECORD.pack(record.word1, record.byte, record.hword, record.word2)
    except struct.error as exc:
        raise ValueError(f"record field out of range: {exc}") from None