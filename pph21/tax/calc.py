from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from pph21.config import get_settings
from pph21.tax.brackets import TerTable
from pph21.tax.ptkp import PtkpStatus, TerCategory, ter_category
from pph21.tax.ter2024 import get_ter_table

logger = logging.getLogger("pph21.calc")

# The published tables settle in a few passes; the cap bounds work per call.
MAX_ITERATIONS = 10
CONVERGENCE_TOLERANCE = 0.0001


class CalculationMethod(str, Enum):
    GROSS = "gross"
    GROSS_UP = "gross-up"


class GrossUpConvergenceError(RuntimeError):
    pass


@dataclass(frozen=True)
class GrossUpResult:
    allowance: int
    tax: int
    rate: float
    converged: bool = True
    iterations: int = 0

    def __iter__(self) -> Iterator[float]:
        return iter((self.allowance, self.tax, self.rate))


@dataclass(frozen=True)
class CalculationResult:
    method: CalculationMethod
    category: TerCategory
    income: int
    rate: float
    tax: int
    allowance: int = 0
    converged: bool = True
    iterations: int = 0
    status: PtkpStatus | None = None

    @property
    def total_income(self) -> int:
        return self.income + self.allowance

    @property
    def take_home(self) -> int:
        return self.total_income - self.tax


def gross_tax(income: float, rate: float) -> int:
    assert income >= 0, f"income must be non-negative, got {income}"
    return math.floor(income * rate / 100)


def _grossed_up_total(income: float, rate: float) -> int:
    assert rate < 100, f"TER rate must stay below 100%, got {rate}"
    return math.floor(income * (100.0 / (100.0 - rate)))


def _settle(income: int, total: int, rate: float, *, converged: bool, iterations: int) -> GrossUpResult:
    return GrossUpResult(
        allowance=total - income,
        tax=math.floor(total * rate / 100),
        rate=rate,
        converged=converged,
        iterations=iterations,
    )


def gross_up_tax(
    income: int,
    category: TerCategory,
    *,
    table: TerTable | None = None,
    strict: bool = False,
) -> GrossUpResult:
    """Find the TER rate that is consistent with its own tax allowance.

    The allowance is taxable, so it may lift the grossed-up total into a higher
    bracket. Re-evaluate until the looked-up rate reproduces itself, at most
    ``MAX_ITERATIONS`` times.

    If the cap is hit the last candidate rate is used and the result carries
    ``converged=False``; with ``strict=True`` a ``GrossUpConvergenceError`` is
    raised instead.
    """
    assert income >= 0, f"income must be non-negative, got {income}"
    ter = table if table is not None else get_ter_table(category)
    rate = ter.rate_for(income)

    for iteration in range(1, MAX_ITERATIONS + 1):
        total = _grossed_up_total(income, rate)
        new_rate = ter.rate_for(total)
        logger.debug(
            "gross-up pass %s: category=%s rate=%s total=%s new_rate=%s",
            iteration,
            ter.category.value,
            rate,
            total,
            new_rate,
        )
        if abs(new_rate - rate) < CONVERGENCE_TOLERANCE:
            return _settle(income, total, rate, converged=True, iterations=iteration)
        rate = new_rate

    if strict:
        raise GrossUpConvergenceError(
            f"Gross-up for income {income} in TER {ter.category.value} did not settle "
            f"within {MAX_ITERATIONS} passes (last rate {rate}%)"
        )
    logger.warning(
        "Gross-up for income %s in TER %s did not settle within %s passes; using rate %s%%",
        income,
        ter.category.value,
        MAX_ITERATIONS,
        rate,
    )
    return _settle(income, _grossed_up_total(income, rate), rate, converged=False, iterations=MAX_ITERATIONS)


def calculate(
    income: int,
    status: PtkpStatus | TerCategory,
    method: CalculationMethod,
    *,
    strict: bool | None = None,
) -> CalculationResult:
    if strict is None:
        strict = get_settings().strict_convergence

    if isinstance(status, PtkpStatus):
        category = ter_category(status)
        ptkp: PtkpStatus | None = status
    else:
        category = status
        ptkp = None

    method = CalculationMethod(method)
    if method is CalculationMethod.GROSS:
        rate = get_ter_table(category).rate_for(income)
        return CalculationResult(
            method=method,
            category=category,
            income=income,
            rate=rate,
            tax=gross_tax(income, rate),
            status=ptkp,
        )
    outcome = gross_up_tax(income, category, strict=strict)
    return CalculationResult(
        method=method,
        category=category,
        income=income,
        rate=outcome.rate,
        tax=outcome.tax,
        allowance=outcome.allowance,
        converged=outcome.converged,
        iterations=outcome.iterations,
        status=ptkp,
    )


__all__ = [
    "CONVERGENCE_TOLERANCE",
    "CalculationMethod",
    "CalculationResult",
    "GrossUpConvergenceError",
    "GrossUpResult",
    "MAX_ITERATIONS",
    "calculate",
    "gross_tax",
    "gross_up_tax",
]
