from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

from pph21.formatting import format_rupiah
from pph21.tax.brackets import TerTable
from pph21.tax.calc import CalculationMethod, CalculationResult
from pph21.tax.ptkp import PtkpStatus, TerCategory


class CalculationResponse(BaseModel):
    method: CalculationMethod
    status: PtkpStatus | None = None
    status_label: str | None = None
    ter_category: TerCategory
    rate: float
    income: int
    allowance: int
    total_income: int
    pph21: int
    take_home: int
    converged: bool
    iterations: int
    display: dict[str, str]

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_result(cls, result: CalculationResult) -> "CalculationResponse":
        return cls(
            method=result.method,
            status=result.status,
            status_label=result.status.label if result.status is not None else None,
            ter_category=result.category,
            rate=result.rate,
            income=result.income,
            allowance=result.allowance,
            total_income=result.total_income,
            pph21=result.tax,
            take_home=result.take_home,
            converged=result.converged,
            iterations=result.iterations,
            display={
                "income": format_rupiah(result.income),
                "allowance": format_rupiah(result.allowance),
                "total_income": format_rupiah(result.total_income),
                "pph21": format_rupiah(result.tax),
                "take_home": format_rupiah(result.take_home),
            },
        )


class TerRateResponse(BaseModel):
    ter_category: TerCategory
    income: float
    rate: float


class BracketOut(BaseModel):
    up_to: float | None
    rate: float


class TerTableResponse(BaseModel):
    ter_category: TerCategory
    brackets: list[BracketOut]

    @classmethod
    def from_table(cls, table: TerTable) -> "TerTableResponse":
        # JSON has no infinity; the open top bracket is reported as null
        return cls(
            ter_category=table.category,
            brackets=[
                BracketOut(up_to=None if math.isinf(b.up_to) else b.up_to, rate=b.rate)
                for b in table.brackets
            ],
        )


__all__ = [
    "BracketOut",
    "CalculationResponse",
    "TerRateResponse",
    "TerTableResponse",
]
