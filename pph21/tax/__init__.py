from __future__ import annotations

from pph21.tax.brackets import Bracket, TerTable
from pph21.tax.calc import (
    CONVERGENCE_TOLERANCE,
    MAX_ITERATIONS,
    CalculationMethod,
    CalculationResult,
    GrossUpConvergenceError,
    GrossUpResult,
    calculate,
    gross_tax,
    gross_up_tax,
)
from pph21.tax.ptkp import PtkpStatus, TerCategory, UnknownStatusError, parse_status, ter_category
from pph21.tax.ter2024 import TER_TABLES, get_ter_table, ter_rate

__all__ = [
    "Bracket",
    "CONVERGENCE_TOLERANCE",
    "CalculationMethod",
    "CalculationResult",
    "GrossUpConvergenceError",
    "GrossUpResult",
    "MAX_ITERATIONS",
    "PtkpStatus",
    "TER_TABLES",
    "TerCategory",
    "TerTable",
    "UnknownStatusError",
    "calculate",
    "get_ter_table",
    "gross_tax",
    "gross_up_tax",
    "parse_status",
    "ter_category",
    "ter_rate",
]
