"""Test results and the exceptions raised by the statistical tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Optional


class TestError(Exception):
    """A statistical test failed."""

    __test__ = False


class RunnerError(Exception):
    """A problem with the runner itself, and not with the tests it runs."""


class StsError(Exception):
    """The library was used very wrong."""


LibError = StsError


def _format_float(value: float) -> str:
    """Format a float in plain positional notation, without a trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class TestResult:
    """The common result of every statistical test: a P-value and an optional comment."""

    __test__: ClassVar[bool] = False

    DEFAULT_THRESHOLD: ClassVar[float] = 0.01

    p_value: float
    comment: Optional[str] = None

    def passed(self, threshold: float = DEFAULT_THRESHOLD) -> bool:
        """Return True if the P-value is at least ``threshold``."""
        return self.p_value >= threshold

    def __repr__(self) -> str:
        p_value = _format_float(self.p_value)
        if self.comment is not None:
            return f'TestResult(p_value = {p_value}, comment = "{self.comment}")'
        return f"TestResult(p_value = {p_value})"

    def __str__(self) -> str:
        return self.__repr__()