"""The linear complexity test (No. 10).

Measures the length of the shortest linear feedback shift register that
produces each block of the sequence; random sequences need long registers.
The probability constants are exact fractions, so results can differ from
reference values that use the rounded (and partly mistyped) decimals.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

from scipy.special import gammaincc

from .bitvec import BitVec
from .result import TestError, TestResult

MIN_INPUT_LENGTH = 1_000_000
MIN_BLOCK_LENGTH = 500
MAX_BLOCK_LENGTH = 5000
MIN_BLOCK_COUNT = 200
AUTOMATIC_BLOCK_LENGTH = 512
FREEDOM_DEGREES = 6

PI_VALUES = (
    1.0 / (32.0 * 3.0),
    1.0 / 32.0,
    1.0 / 8.0,
    1.0 / 2.0,
    1.0 / 4.0,
    1.0 / 16.0,
    2.0 / (32.0 * 3.0),
)

_BIN_UPPER_BOUNDS = (-2.5, -1.5, -0.5, 0.5, 1.5, 2.5)


class LinearComplexityTestArg:
    """The block length for the linear complexity test.

    With no block length (or 0) the length is chosen automatically. A manual
    length must satisfy 500 <= length <= 5000 and give at least 200 blocks;
    this is checked when the test runs.
    """

    __slots__ = ("block_length",)

    def __init__(self, block_length: Optional[int] = None) -> None:
        if block_length is not None and block_length < 0:
            raise ValueError("block_length must not be negative")
        self.block_length: Optional[int] = block_length or None

    def __repr__(self) -> str:
        if self.block_length is None:
            return "LinearComplexityTestArg()"
        return f"LinearComplexityTestArg(block_length={self.block_length})"

    __str__ = __repr__


def _check(value: float, what: str) -> float:
    if not math.isfinite(value):
        raise TestError(f"{what} is not a finite number: {value}")
    return value


def berlekamp_massey(bits: Iterable[int]) -> int:
    """Return the linear complexity of a bit sequence (Berlekamp-Massey, HAC 6.30)."""
    connection = 1  # C(D): bit i holds coefficient c_i
    previous = 1  # B(D)
    complexity = 0
    last_change = -1
    window = 0  # bit i holds s_{n-i}

    for n, bit in enumerate(bits):
        window = (window << 1) | (1 if bit else 0)
        relevant = (1 << (complexity + 1)) - 1
        if (connection & window & relevant).bit_count() & 1:
            old_connection = connection
            connection ^= previous << (n - last_change)
            if complexity <= n // 2:
                complexity = n + 1 - complexity
                last_change = n
                previous = old_connection
    return complexity


def _bin_index(t_value: float) -> int:
    for index, bound in enumerate(_BIN_UPPER_BOUNDS):
        if t_value <= bound:
            return index
    return len(_BIN_UPPER_BOUNDS)


def _block_parameters(length: int, arg: LinearComplexityTestArg) -> "tuple[int, int]":
    if arg.block_length is None:
        return AUTOMATIC_BLOCK_LENGTH, length // AUTOMATIC_BLOCK_LENGTH

    block_length = arg.block_length
    if not MIN_BLOCK_LENGTH <= block_length <= MAX_BLOCK_LENGTH:
        raise TestError(
            f"block length must be between {MIN_BLOCK_LENGTH} and {MAX_BLOCK_LENGTH}. "
            f"Is: {block_length}"
        )
    count_blocks = length // block_length
    if count_blocks < MIN_BLOCK_COUNT:
        raise TestError("the chosen block length leads to fewer than 200 blocks!")
    return block_length, count_blocks


def linear_complexity_test(
    data: BitVec, test_arg: Optional[LinearComplexityTestArg] = None
) -> TestResult:
    """Linear complexity test - No. 10.

    Raises TestError for inputs shorter than 10^6 bits or an invalid block length.
    """
    length = len(data)
    if length < MIN_INPUT_LENGTH:
        raise TestError(f"Length of input data must be >= 10^6. Is: {length}")

    arg = LinearComplexityTestArg() if test_arg is None else test_arg
    block_length, count_blocks = _block_parameters(length, arg)

    mean = (
        block_length / 2.0
        + (9.0 + (-1.0) ** (block_length + 1)) / 36.0
        - (block_length / 3.0 + 2.0 / 9.0) * 2.0 ** -block_length
    )
    sign = (-1.0) ** block_length

    table: List[int] = [0] * (FREEDOM_DEGREES + 1)
    bits = data._bits
    for start in range(0, count_blocks * block_length, block_length):
        complexity = berlekamp_massey(bits[start : start + block_length])
        t_value = _check(sign * (complexity - mean) + 2.0 / 9.0, "T_i")
        table[_bin_index(t_value)] += 1

    chi = sum(
        (observed - count_blocks * pi) ** 2 / (count_blocks * pi)
        for observed, pi in zip(table, PI_VALUES)
    )
    _check(chi, "chi^2")

    p_value = _check(float(gammaincc(FREEDOM_DEGREES / 2.0, chi / 2.0)), "p-value")
    return TestResult(p_value)