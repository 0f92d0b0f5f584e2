from __future__ import annotations

CURRENCY_MARKER = "Rp"


def format_rupiah(amount: int) -> str:
    """Render whole rupiah as ``Rp 1.234.567``."""
    assert amount >= 0, "amount should never be negative here"
    return f"{CURRENCY_MARKER} {int(amount):,}".replace(",", ".")


def format_rate(rate: float) -> str:
    # 2.0 -> "2%", 0.25 -> "0.25%"
    return f"{rate:g}%"


__all__ = ["CURRENCY_MARKER", "format_rate", "format_rupiah"]
