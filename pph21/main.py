from __future__ import annotations

import argparse
import logging
import os
from typing import Literal

from fastapi import FastAPI, HTTPException, Query
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from pph21 import __version__
from pph21.config import MAX_INCOME, get_settings
from pph21.formatting import format_rate, format_rupiah
from pph21.lifespan import build_application_lifespan, configure_logging, release_logging
from pph21.models import CalculationResponse, TerRateResponse, TerTableResponse
from pph21.tax.brackets import TerTable
from pph21.tax.calc import CalculationMethod, CalculationResult, GrossUpConvergenceError, calculate
from pph21.tax.ptkp import TerCategory, UnknownStatusError, parse_status
from pph21.tax.ter2024 import TER_TABLES, get_ter_table
from pph21.wizard import (
    ask_income,
    ask_method,
    ask_status,
    console_print,
    parse_income,
    parse_method_choice,
    parse_status_choice,
)

logger = logging.getLogger("pph21.cli")

app = FastAPI(
    title="PPh 21 TER Calculator",
    version=__version__,
    lifespan=build_application_lifespan("api"),
)


@app.get("/pph21/calculate", response_model=CalculationResponse)
def calculate_pph21(
    income: int = Query(..., ge=0, le=MAX_INCOME, description="Penghasilan bruto bulanan (rupiah)"),
    status: str = Query(..., description="Status PTKP, e.g. TK0 or K/1"),
    method: CalculationMethod = Query(CalculationMethod.GROSS),
):
    settings = getattr(app.state, "settings", get_settings())
    if income > settings.max_income:
        raise HTTPException(status_code=422, detail=f"income exceeds maximum {settings.max_income}")
    try:
        ptkp = parse_status(status)
    except UnknownStatusError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    try:
        result = calculate(income, ptkp, method, strict=settings.strict_convergence)
    except GrossUpConvergenceError as exc:
        logging.getLogger("pph21.api").error("Gross-up did not settle: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return CalculationResponse.from_result(result)


@app.get("/pph21/ter-rate", response_model=TerRateResponse)
def ter_rate_lookup(category: TerCategory, income: float = Query(..., ge=0, le=MAX_INCOME)):
    return TerRateResponse(ter_category=category, income=income, rate=get_ter_table(category).rate_for(income))


@app.get("/pph21/ter-tables/{category}", response_model=TerTableResponse)
def ter_table(category: TerCategory):
    return TerTableResponse.from_table(get_ter_table(category))


@app.get("/health")
def health():
    settings = getattr(app.state, "settings", get_settings())
    return {
        "ok": True,
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
        },
        "ter_tables": {category.value: len(table) for category, table in TER_TABLES.items()},
    }


ColorPreference = Literal["auto", "always", "never"]

_METHOD_TITLES = {
    CalculationMethod.GROSS: "Gross",
    CalculationMethod.GROSS_UP: "Gross Up",
}


def _resolve_color_preference(pref: ColorPreference) -> ColorPreference:
    if pref == "auto" and os.getenv("NO_COLOR"):
        return "never"
    return pref


def _get_console(pref: ColorPreference) -> Console:
    resolved = _resolve_color_preference(pref)
    return Console(
        force_terminal=True if resolved == "always" else None,
        no_color=resolved == "never",
    )


def _print_banner(console: Console) -> None:
    console.print(Panel.fit("KALKULATOR PPh 21 BULANAN", border_style="cyan"))


def _print_summary(result: CalculationResult, console: Console) -> None:
    rows: list[tuple[str, str]] = []
    if result.status is not None:
        rows.append(("Status PTKP", result.status.label))
    rows.append(("Kategori TER", f"TER {result.category.value}"))
    rows.append(("Metode", _METHOD_TITLES[result.method]))
    rows.append(("Penghasilan bruto", format_rupiah(result.income)))
    if result.method is CalculationMethod.GROSS_UP:
        rows.append(("Tunjangan pajak", format_rupiah(result.allowance)))
        rows.append(("Total penghasilan bruto", format_rupiah(result.total_income)))
    rows.append(("Tarif TER", format_rate(result.rate)))
    rows.append(("PPh 21 terutang", format_rupiah(result.tax)))
    rows.append(("Take home pay", format_rupiah(result.take_home)))

    table = Table(title="Hasil Perhitungan")
    table.add_column("Keterangan")
    table.add_column("Nilai", justify="right")
    for label, value in rows:
        table.add_row(label, value)
    console.print(table)
    if not result.converged:
        console_print(
            console,
            f"⚠ Tarif belum stabil setelah {result.iterations} iterasi; hasil memakai tarif terakhir.",
        )


def _print_ter_table(table: TerTable, console: Console) -> None:
    view = Table(title=f"Tabel TER {table.category.value}")
    view.add_column("No", justify="right")
    view.add_column("Penghasilan bruto bulanan")
    view.add_column("Tarif", justify="right")
    lower = 0
    for index, bracket in enumerate(table.brackets, start=1):
        if index == len(table.brackets):
            band = f"di atas {format_rupiah(lower)}"
        else:
            band = f"s.d. {format_rupiah(int(bracket.up_to))}"
            lower = int(bracket.up_to)
        view.add_row(str(index), band, format_rate(bracket.rate))
    console.print(view)


def _parse_args(argv: list[str] | None = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(
        prog="pph21",
        description="Kalkulator PPh 21 bulanan dengan tarif efektif rata-rata (TER).",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="calculate",
        choices=["calculate", "table"],
        help="Action to perform.",
    )
    parser.add_argument("--income", help="Monthly gross income in whole rupiah, digits only.")
    parser.add_argument("--status", help="PTKP status (TK0-TK3, K0-K3) or menu number 1-8.")
    parser.add_argument("--method", help="gross or gross-up (or menu number 1-2).")
    parser.add_argument(
        "--category",
        choices=[category.value for category in TerCategory],
        default=TerCategory.A.value,
        help="TER category for the table command (default: A).",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output preference (default: auto).",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_const",
        const="never",
        help="Alias for --color never.",
    )
    return parser, parser.parse_args(argv)


def _run_calculate(parser: argparse.ArgumentParser, args: argparse.Namespace, console: Console) -> None:
    settings = get_settings()
    try:
        income = parse_income(args.income, maximum=settings.max_income) if args.income is not None else None
        status = parse_status_choice(args.status) if args.status is not None else None
        method = parse_method_choice(args.method) if args.method is not None else None
    except ValueError as exc:
        parser.error(str(exc))

    if income is None or status is None or method is None:
        _print_banner(console)
    if income is None:
        income = ask_income(console)
    if status is None:
        status = ask_status(console)
    if method is None:
        method = ask_method(console)

    result = calculate(income, status, method, strict=settings.strict_convergence)
    logger.info(
        "Calculated PPh 21: method=%s status=%s category=%s rate=%s tax=%s",
        result.method.value,
        status.value,
        result.category.value,
        result.rate,
        result.tax,
    )
    console_print(console)
    _print_summary(result, console)


def main(argv: list[str] | None = None) -> None:
    parser, args = _parse_args(argv)
    console = _get_console(args.color)
    log_handler = configure_logging(get_settings(), "cli")
    try:
        if args.command == "table":
            _print_ter_table(get_ter_table(TerCategory(args.category)), console)
            return
        _run_calculate(parser, args, console)
    finally:
        release_logging(log_handler)


if __name__ == "__main__":
    main()
