"""The binary matrix rank test (No. 5).

Checks for linear dependence among 32x32 bit matrices cut from the sequence.
"""

from __future__ import annotations

import math
from typing import Iterator, List, Sequence

from scipy.special import gammaincc

from .bitvec import BitVec
from .result import TestError, TestResult

MIN_INPUT_LENGTH = 38_912
MATRIX_SIZE = 32

_P_FULL = 0.2887880951538411
_P_FULL_MINUS_ONE = 0.5775761901732046
PROBABILITIES = (_P_FULL, _P_FULL_MINUS_ONE, 1.0 - _P_FULL - _P_FULL_MINUS_ONE)

_TO_ASCII = bytes.maketrans(b"\x00\x01", b"01")


def _check(value: float, what: str) -> float:
    if not math.isfinite(value):
        raise TestError(f"{what} is not a finite number: {value}")
    return value


def binary_rank(rows: Sequence[int]) -> int:
    """Return the binary rank of a square bit matrix, as in Appendix F.1.

    Each row is an integer whose most significant of ``len(rows)`` bits is column 0.
    The input is not modified.
    """
    matrix = list(rows)
    size = len(matrix)
    if any(not 0 <= row < (1 << size) for row in matrix):
        raise ValueError(f"each row must fit into {size} bits")

    def bit(row: int, col: int) -> int:
        return (matrix[row] >> (size - 1 - col)) & 1

    def eliminate(i: int, others: List[int]) -> None:
        if not bit(i, i):
            pivot = next((row for row in others if bit(row, i)), None)
            if pivot is None:
                return
            matrix[i], matrix[pivot] = matrix[pivot], matrix[i]
        for row in others:
            if bit(row, i):
                matrix[row] ^= matrix[i]

    for i in range(size - 1):
        eliminate(i, list(range(i + 1, size)))
    for i in range(size - 1, 0, -1):
        eliminate(i, list(range(i - 1, -1, -1)))

    return sum(1 for row in matrix if row)


def _matrices(data: BitVec) -> Iterator[List[int]]:
    text = data._bits.translate(_TO_ASCII)
    block = MATRIX_SIZE * MATRIX_SIZE
    for start in range(0, len(text) - block + 1, block):
        yield [
            int(text[offset : offset + MATRIX_SIZE], 2)
            for offset in range(start, start + block, MATRIX_SIZE)
        ]


def binary_matrix_rank_test(data: BitVec) -> TestResult:
    """Binary matrix rank test - No. 5.

    Inputs shorter than 38 912 bits give a P-value of 0.0 with a comment.
    """
    if len(data) < MIN_INPUT_LENGTH:
        return TestResult(0.0, "Data is too short! Minimum is 38 912 Bits.")

    categories = [0, 0, 0]
    for matrix in _matrices(data):
        rank = binary_rank(matrix)
        if rank == MATRIX_SIZE:
            categories[0] += 1
        elif rank == MATRIX_SIZE - 1:
            categories[1] += 1
        else:
            categories[2] += 1

    block_count = sum(categories)
    chi = 0.0
    for observed, probability in zip(categories, PROBABILITIES):
        expected = probability * block_count
        chi += (observed - expected) ** 2 / expected
    _check(chi, "chi^2")

    p_value = _check(float(gammaincc(1.0, chi / 2.0)), "p-value")
    return TestResult(p_value)