from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

from pph21.tax.ptkp import TerCategory

# Infinity rather than the largest finite float: it also bounds any grossed-up total.
TOP = math.inf


@dataclass(frozen=True)
class Bracket:
    up_to: float
    rate: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.up_to, self.rate))


@dataclass(frozen=True)
class TerTable:
    """One TER category's brackets, ascending and closed by a ``TOP`` sentinel.

    Upper bounds are inclusive: an income equal to ``up_to`` takes that
    bracket's rate, not the next one.
    """

    category: TerCategory
    brackets: tuple[Bracket, ...]

    def __post_init__(self) -> None:
        assert self.brackets, f"TER {self.category.value} table is empty"
        assert self.brackets[-1].up_to == TOP, f"TER {self.category.value} table lacks a top sentinel"
        prev_bound, prev_rate = -1.0, 0.0
        for bound, rate in self.brackets:
            assert bound > prev_bound, f"TER {self.category.value} bounds not ascending at {bound}"
            assert 0 <= rate < 100, f"TER {self.category.value} rate {rate} outside [0, 100)"
            assert rate >= prev_rate, f"TER {self.category.value} rates decrease at {bound}"
            prev_bound, prev_rate = bound, rate

    @classmethod
    def from_rows(cls, category: TerCategory, rows: Iterable[tuple[float, float]]) -> "TerTable":
        return cls(category, tuple(Bracket(float(up_to), float(rate)) for up_to, rate in rows))

    def rate_for(self, income: float) -> float:
        assert income >= 0, f"income must be non-negative, got {income}"
        for bracket in self.brackets:
            if income <= bracket.up_to:
                return bracket.rate
        # unreachable while the sentinel holds
        return self.brackets[-1].rate

    def __len__(self) -> int:
        return len(self.brackets)


__all__ = ["Bracket", "TOP", "TerTable"]
