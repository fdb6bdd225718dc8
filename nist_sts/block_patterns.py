"""Overlapping m-bit block patterns, shared by the serial and approximate entropy tests."""

from __future__ import annotations

from typing import List

from .bitvec import BitVec

MAX_BLOCK_LENGTH = 64


def validate_block_length(block_length: int) -> int:
    """Return ``block_length`` if it lies in 2..=64, else raise ValueError."""
    if 1 < block_length <= MAX_BLOCK_LENGTH:
        return block_length
    raise ValueError("block_length was out of range.")


def access_bits(data: BitVec, start_idx: int, block_length: int) -> int:
    """Return the ``block_length`` bits starting at ``start_idx`` as an integer.

    Reading wraps around to the start of the sequence once the end is reached.
    """
    length = len(data)
    if not 0 <= start_idx < length:
        raise IndexError(f"start index {start_idx} out of range for {length} bits")
    if not 0 <= block_length <= MAX_BLOCK_LENGTH:
        raise ValueError(f"block length must be between 0 and {MAX_BLOCK_LENGTH}")

    bits = data._bits
    value = 0
    for offset in range(block_length):
        value = (value << 1) | bits[(start_idx + offset) % length]
    return value


def pattern_counts(data: BitVec, block_length: int) -> List[int]:
    """Count every overlapping ``block_length``-bit pattern, wrapping around at the end.

    The returned list has ``2 ** block_length`` entries indexed by pattern value; the
    counts add up to ``len(data)``.
    """
    if block_length < 0:
        raise ValueError("block length must not be negative")

    bits = data._bits
    length = len(bits)
    if block_length == 0:
        return [length]

    counts = [0] * (1 << block_length)
    if length == 0:
        return counts

    mask = (1 << block_length) - 1
    wrap = bytes(bits[offset % length] for offset in range(block_length - 1))
    stream = bits + wrap

    value = 0
    for bit in stream[: block_length - 1]:
        value = (value << 1) | bit
    for bit in stream[block_length - 1 :]:
        value = ((value << 1) | bit) & mask
        counts[value] += 1
    return counts