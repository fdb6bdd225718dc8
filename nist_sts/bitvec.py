"""A sequence of bits, the input type of all statistical tests."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

_BYTE_BITS = tuple(
    bytes((value >> shift) & 1 for shift in range(7, -1, -1)) for value in range(256)
)
_ASCII_TO_BIT = bytes.maketrans(b"01", b"\x00\x01")
_NOT_A_BIT = re.compile(r"[^01]+")


def _bits_from_bytes(data: Iterable[int]) -> bytes:
    return b"".join(_BYTE_BITS[value] for value in data)


def _bits_from_str(text: str, lossy: bool) -> bytes:
    if lossy:
        text = _NOT_A_BIT.sub("", text)
    elif text.translate({ord("0"): None, ord("1"): None}):
        raise ValueError(
            "Given string contains an other character than '0' or '1', "
            "but lossy=True was not specified"
        )
    return text.encode("ascii").translate(_ASCII_TO_BIT)


def _bits_from_items(data: Iterable[object]) -> bytes:
    try:
        items = list(data)
    except TypeError:
        raise TypeError(
            "Only strings, list of bytes and lists of bits are supported."
        ) from None
    if items and all(isinstance(item, bool) for item in items):
        return bytes(items)
    if all(isinstance(item, int) and 0 <= item <= 255 for item in items):
        return _bits_from_bytes(items)
    raise TypeError("Only strings, list of bytes and lists of bits are supported.")


@dataclass(frozen=True, init=False, repr=False, eq=True)
class BitVec:
    """An immutable list of bits, used as the data type for all tests.

    ``len(bitvec)`` is the count of bits stored.
    """

    _bits: bytes

    def __init__(
        self,
        data: Union[str, bytes, bytearray, Iterable[int], Iterable[bool]],
        lossy: bool = False,
        max_length: Optional[int] = None,
    ) -> None:
        """Create a bit vector.

        ``data`` is a string of '0' and '1', bytes (or a list of byte values, read
        most significant bit first) or a list of bools. With ``lossy`` set, other
        characters of a string are skipped instead of raising ValueError.
        ``max_length`` caps the number of bits kept.
        """
        if max_length is not None and max_length < 0:
            raise ValueError("max_length must not be negative")

        if isinstance(data, str):
            bits = _bits_from_str(data, lossy)
        elif isinstance(data, (bytes, bytearray, memoryview)):
            bits = _bits_from_bytes(bytes(data))
        else:
            bits = _bits_from_items(data)

        if max_length is not None:
            bits = bits[:max_length]
        object.__setattr__(self, "_bits", bits)

    @classmethod
    def _from_bits(cls, bits: bytes) -> "BitVec":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_bits", bytes(bits))
        return instance

    def __len__(self) -> int:
        return len(self._bits)

    def __getitem__(self, index: Union[int, slice]) -> Union[bool, "BitVec"]:
        if isinstance(index, slice):
            return BitVec._from_bits(self._bits[index])
        return bool(self._bits[index])

    def __iter__(self) -> Iterator[bool]:
        return map(bool, self._bits)

    def crop(self, new_bit_len: int) -> "BitVec":
        """Return a copy holding at most the first ``new_bit_len`` bits."""
        if new_bit_len < 0:
            raise ValueError("new_bit_len must not be negative")
        return BitVec._from_bits(self._bits[:new_bit_len])

    def __str__(self) -> str:
        return f"BitVec(length={len(self)})"

    __repr__ = __str__