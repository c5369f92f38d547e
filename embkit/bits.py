"""Bit manipulation helpers for 8-bit values."""

from __future__ import annotations

_BYTE = 0xFF


def format_binary(byte: int) -> str:
    """Return the 8-bit binary form of byte with a 0b prefix."""
    return "0b" + format(byte & _BYTE, "08b")


def shift_right(byte: int, shift: int) -> int:
    """Shift byte right by shift places."""
    return (byte >> shift) & _BYTE


def shift_left(byte: int, shift: int) -> int:
    """Shift byte left by shift places, keeping only the low 8 bits."""
    return (byte << shift) & _BYTE


def set_mask(byte: int, mask: int) -> int:
    """Set every bit of byte that is set in mask."""
    return (byte | mask) & _BYTE


def clear_mask(byte: int, mask: int) -> int:
    """Clear every bit of byte that is set in mask."""
    return byte & ~mask & _BYTE


def toggle_mask(byte: int, mask: int) -> int:
    """Invert every bit of byte that is set in mask."""
    return (byte ^ mask) & _BYTE


def set_bit(byte: int, bit: int) -> int:
    """Set one bit of byte."""
    return (byte | (1 << bit)) & _BYTE


def clear_bit(byte: int, bit: int) -> int:
    """Clear one bit of byte."""
    return byte & ~(1 << bit) & _BYTE


def toggle_bit(byte: int, bit: int) -> int:
    """Invert one bit of byte."""
    return (byte ^ (1 << bit)) & _BYTE


def get_bit(byte: int, bit: int) -> int:
    """Return 1 if the given bit of byte is set, else 0."""
    if bit < 0:
        raise ValueError("negative bit position")
    return ((byte & _BYTE) >> bit) & 1