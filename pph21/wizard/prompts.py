from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from rich.console import Console

from pph21.config import get_settings
from pph21.tax.calc import CalculationMethod
from pph21.tax.ptkp import PtkpStatus
from pph21.wizard.fields import (
    METHOD_CHOICES,
    STATUS_CHOICES,
    parse_income,
    parse_method_choice,
    parse_status_choice,
)

T = TypeVar("T")


def console_print(console: Console, message: str = "") -> None:
    console.print(message, markup=False, highlight=False)


def print_choices(console: Console, title: str, choices: Sequence[tuple[str, str]]) -> None:
    console_print(console, f"\n{title}")
    for index, (_, description) in enumerate(choices, start=1):
        console_print(console, f"   {index}. {description}")


def ask_until_valid(console: Console, prompt: str, parser: Callable[[str], T]) -> T:
    while True:
        raw = input(prompt)
        try:
            return parser(raw)
        except ValueError as exc:
            console_print(console, f"❌ {exc}\n")


def ask_income(console: Console) -> int:
    maximum = get_settings().max_income
    return ask_until_valid(
        console,
        "💵 Masukkan Penghasilan Bruto Bulanan (contoh: 10000000): ",
        lambda raw: parse_income(raw, maximum=maximum),
    )


def ask_status(console: Console) -> PtkpStatus:
    print_choices(console, "👤 Pilih Status PTKP:", STATUS_CHOICES)
    return ask_until_valid(console, f"\nPilihan Anda (1-{len(STATUS_CHOICES)}): ", parse_status_choice)


def ask_method(console: Console) -> CalculationMethod:
    print_choices(console, "📋 Pilih Metode Perhitungan:", METHOD_CHOICES)
    return ask_until_valid(console, f"\nPilihan Anda (1-{len(METHOD_CHOICES)}): ", parse_method_choice)


__all__ = [
    "ask_income",
    "ask_method",
    "ask_status",
    "ask_until_valid",
    "console_print",
    "print_choices",
]
