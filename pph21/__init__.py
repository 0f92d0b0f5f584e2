"""
PPh 21 monthly withholding calculator.

Implements the TER (tarif efektif rata-rata) tables from PP 58/2023 and the
gross and gross-up payment conventions.
"""
from __future__ import annotations

__version__ = "0.1.0"
