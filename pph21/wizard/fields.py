from __future__ import annotations

from typing import Sequence

from pph21.config import MAX_INCOME
from pph21.tax.calc import CalculationMethod
from pph21.tax.ptkp import PtkpStatus, UnknownStatusError, parse_status

STATUS_CHOICES: tuple[tuple[str, str], ...] = tuple((status.value, status.label) for status in PtkpStatus)

METHOD_CHOICES: tuple[tuple[str, str], ...] = (
    (CalculationMethod.GROSS.value, "Gross    - Pajak ditanggung karyawan (dipotong dari gaji)"),
    (CalculationMethod.GROSS_UP.value, "Gross Up - Pajak ditunjang perusahaan (dapat tunjangan pajak)"),
)

_METHOD_ALIASES: dict[str, CalculationMethod] = {
    "gross": CalculationMethod.GROSS,
    "grossup": CalculationMethod.GROSS_UP,
    "gross-up": CalculationMethod.GROSS_UP,
    "gross_up": CalculationMethod.GROSS_UP,
    "gross up": CalculationMethod.GROSS_UP,
}


def parse_income(text: str, *, maximum: int = MAX_INCOME) -> int:
    raw = text.strip()
    if "." in raw or "," in raw:
        raise ValueError(
            "Tidak menerima tanda pemisah atau desimal. Hanya boleh angka tanpa format.\n"
            "   Contoh benar: 10000 (bukan 10.000 atau 10,000)"
        )
    if not raw:
        raise ValueError("Input tidak boleh kosong.")
    # str.isdigit() also accepts superscripts and other Unicode digits
    if not all("0" <= ch <= "9" for ch in raw):
        raise ValueError("Hanya boleh angka 0-9 tanpa spasi atau simbol.")
    value = int(raw)
    if value > maximum:
        raise ValueError(f"Angka terlalu besar. Maksimal adalah {maximum}.")
    return value


def match_choice(text: str, choices: Sequence[tuple[str, str]]) -> str | None:
    cleaned = text.strip()
    if not cleaned:
        return None
    if cleaned.isdecimal():
        index = int(cleaned)
        if 1 <= index <= len(choices):
            return choices[index - 1][0]
        return None
    lower = cleaned.lower()
    for code, description in choices:
        if lower == code.lower() or lower == description.lower():
            return code
    return None


def parse_status_choice(text: str) -> PtkpStatus:
    matched = match_choice(text, STATUS_CHOICES)
    if matched is not None:
        return PtkpStatus(matched)
    if text.strip().isdecimal():
        raise ValueError(f"Pilihan tidak valid. Masukkan angka 1-{len(STATUS_CHOICES)}.")
    try:
        return parse_status(text)
    except UnknownStatusError as exc:
        raise ValueError("Pilihan tidak valid.") from exc


def parse_method_choice(text: str) -> CalculationMethod:
    matched = match_choice(text, METHOD_CHOICES)
    if matched is not None:
        return CalculationMethod(matched)
    method = _METHOD_ALIASES.get(" ".join(text.strip().lower().split()))
    if method is None:
        raise ValueError("Pilihan tidak valid.")
    return method


__all__ = [
    "METHOD_CHOICES",
    "STATUS_CHOICES",
    "match_choice",
    "parse_income",
    "parse_method_choice",
    "parse_status_choice",
]
