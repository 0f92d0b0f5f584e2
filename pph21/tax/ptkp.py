from __future__ import annotations

import re
from enum import Enum


class TerCategory(str, Enum):
    A = "A"
    B = "B"
    C = "C"


class PtkpStatus(str, Enum):
    TK0 = "TK0"
    TK1 = "TK1"
    TK2 = "TK2"
    TK3 = "TK3"
    K0 = "K0"
    K1 = "K1"
    K2 = "K2"
    K3 = "K3"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[PtkpStatus, str] = {
    PtkpStatus.TK0: "TK/0 - Tidak Kawin, Tanpa Tanggungan",
    PtkpStatus.TK1: "TK/1 - Tidak Kawin, 1 Tanggungan",
    PtkpStatus.TK2: "TK/2 - Tidak Kawin, 2 Tanggungan",
    PtkpStatus.TK3: "TK/3 - Tidak Kawin, 3 Tanggungan",
    PtkpStatus.K0: "K/0  - Kawin, Tanpa Tanggungan",
    PtkpStatus.K1: "K/1  - Kawin, 1 Tanggungan",
    PtkpStatus.K2: "K/2  - Kawin, 2 Tanggungan",
    PtkpStatus.K3: "K/3  - Kawin, 3 Tanggungan",
}

# PP 58/2023 Lampiran: TER A covers the lowest PTKP amounts, TER C only K/3.
_CATEGORY_BY_STATUS: dict[PtkpStatus, TerCategory] = {
    PtkpStatus.TK0: TerCategory.A,
    PtkpStatus.TK1: TerCategory.A,
    PtkpStatus.K0: TerCategory.A,
    PtkpStatus.TK2: TerCategory.B,
    PtkpStatus.TK3: TerCategory.B,
    PtkpStatus.K1: TerCategory.B,
    PtkpStatus.K2: TerCategory.B,
    PtkpStatus.K3: TerCategory.C,
}

_STATUS_CLEAN_RE = re.compile(r"[\s/_-]")


class UnknownStatusError(ValueError):
    pass


def ter_category(status: PtkpStatus) -> TerCategory:
    return _CATEGORY_BY_STATUS[status]


def parse_status(raw: str | PtkpStatus) -> PtkpStatus:
    """Accept ``TK0``, ``tk/0``, ``K 3`` and friends."""
    if isinstance(raw, PtkpStatus):
        return raw
    code = _STATUS_CLEAN_RE.sub("", str(raw)).upper()
    try:
        return PtkpStatus(code)
    except ValueError as exc:
        raise UnknownStatusError(f"Status PTKP tidak dikenal: {raw!r}") from exc


__all__ = [
    "PtkpStatus",
    "TerCategory",
    "UnknownStatusError",
    "parse_status",
    "ter_category",
]
