from __future__ import annotations

from pph21.wizard.fields import (
    METHOD_CHOICES,
    STATUS_CHOICES,
    match_choice,
    parse_income,
    parse_method_choice,
    parse_status_choice,
)
from pph21.wizard.prompts import ask_income, ask_method, ask_status, console_print, print_choices

__all__ = [
    "METHOD_CHOICES",
    "STATUS_CHOICES",
    "ask_income",
    "ask_method",
    "ask_status",
    "console_print",
    "match_choice",
    "parse_income",
    "parse_method_choice",
    "parse_status_choice",
    "print_choices",
]
