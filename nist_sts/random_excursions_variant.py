"""The random excursions variant test (No. 15).

Counts how often each state -9..-1, +1..+9 of the cumulative-sum random walk
is visited over all cycles, and compares this with a random sequence.
"""

from __future__ import annotations

import math
from collections import Counter
from itertools import accumulate
from typing import List, Tuple

from .bitvec import BitVec
from .result import TestError, TestResult

MIN_INPUT_LENGTH = 1_000_000
MIN_CYCLES = 500.0

STATES: Tuple[int, ...] = tuple(range(-9, 0)) + tuple(range(1, 10))


def _check(value: float, what: str) -> float:
    if not math.isfinite(value):
        raise TestError(f"{what} is not a finite number: {value}")
    return value


def _excursions(data: BitVec) -> Tuple[List[int], int]:
    """Return the visit counts of every state in STATES and the number of cycles."""
    visits = Counter(accumulate(2 * bit - 1 for bit in data._bits))
    return [visits[state] for state in STATES], 1 + visits[0]


def _p_values(frequencies: List[int], num_cycles: int) -> Tuple[TestResult, ...]:
    results = []
    for state, frequency in zip(STATES, frequencies):
        p_value = math.erfc(
            abs(frequency - num_cycles)
            / math.sqrt(2.0 * num_cycles * (4.0 * abs(state) - 2.0))
        )
        _check(p_value, "p-value")
        results.append(TestResult(p_value, f"x = {state:+d}"))
    return tuple(results)


def _unchecked_test(data: BitVec) -> Tuple[TestResult, ...]:
    """Run the test without the minimum length and minimum cycle checks."""
    frequencies, num_cycles = _excursions(data)
    return _p_values(frequencies, num_cycles)


def random_excursions_variant_test(data: BitVec) -> Tuple[TestResult, ...]:
    """Random excursions variant test - No. 15.

    Returns 18 results, for the states -9..-1 and +1..+9 in that order, each
    commented with its state (e.g. "x = +3"). If there are too few cycles, all
    results have a P-value of 0.0 and the comment "Too few cycles". Raises
    TestError for inputs shorter than 10^6 bits.
    """
    length = len(data)
    if length < MIN_INPUT_LENGTH:
        raise TestError(f"The input bit length must be at >= 10^6. Is: {length}")

    frequencies, num_cycles = _excursions(data)

    min_cycles = max(0.005 * math.sqrt(length), MIN_CYCLES)
    if num_cycles < min_cycles:
        return tuple(TestResult(0.0, "Too few cycles") for _ in STATES)

    return _p_values(frequencies, num_cycles)