import math

import pytest

from pph21.tax.brackets import TOP, Bracket, TerTable
from pph21.tax.ptkp import TerCategory
from pph21.tax.ter2024 import TER_A_2024, TER_B_2024, TER_C_2024, TER_TABLES, get_ter_table, ter_rate


def test_tables_registered_per_category() -> None:
    assert set(TER_TABLES) == set(TerCategory)
    for category, table in TER_TABLES.items():
        assert table.category is category
        assert get_ter_table(category) is table


def test_table_sizes_match_pp_58_2023() -> None:
    assert len(TER_A_2024) == 44
    assert len(TER_B_2024) == 40
    assert len(TER_C_2024) == 41


@pytest.mark.parametrize("table", [TER_A_2024, TER_B_2024, TER_C_2024])
def test_tables_are_sorted_monotone_and_sentinel_terminated(table: TerTable) -> None:
    bounds = [b.up_to for b in table.brackets]
    rates = [b.rate for b in table.brackets]
    assert bounds == sorted(bounds)
    assert len(set(bounds)) == len(bounds)
    assert rates == sorted(rates)
    assert math.isinf(bounds[-1])
    assert rates[0] == 0.0
    assert rates[-1] == 34.0
    assert all(0 <= r < 100 for r in rates)


@pytest.mark.parametrize("table", [TER_A_2024, TER_B_2024, TER_C_2024])
def test_upper_bounds_are_inclusive(table: TerTable) -> None:
    finite = table.brackets[:-1]
    for current, following in zip(finite, table.brackets[1:]):
        assert table.rate_for(current.up_to) == current.rate
        assert table.rate_for(current.up_to + 1) == following.rate


@pytest.mark.parametrize("table", [TER_A_2024, TER_B_2024, TER_C_2024])
def test_rate_is_non_decreasing_in_income(table: TerTable) -> None:
    previous = table.rate_for(0)
    for income in range(0, 1_600_000_000, 7_654_321):
        rate = table.rate_for(income)
        assert rate >= previous
        previous = rate


def test_category_a_ten_million_is_two_percent() -> None:
    assert ter_rate(TerCategory.A, 10_000_000) == 2.0


@pytest.mark.parametrize(
    ("category", "income", "rate"),
    [
        (TerCategory.A, 0, 0.0),
        (TerCategory.A, 5_400_000, 0.0),
        (TerCategory.A, 5_400_001, 0.25),
        (TerCategory.A, 10_050_000.5, 2.25),
        (TerCategory.B, 6_200_000, 0.0),
        (TerCategory.B, 9_200_001, 1.5),
        (TerCategory.C, 6_600_001, 0.25),
        (TerCategory.C, 12_050_001, 3.0),
    ],
)
def test_lookup_examples(category: TerCategory, income: float, rate: float) -> None:
    assert ter_rate(category, income) == rate


@pytest.mark.parametrize(
    ("table", "last_bound"),
    [
        (TER_A_2024, 1_400_000_000),
        (TER_B_2024, 1_405_000_000),
        (TER_C_2024, 1_419_000_000),
    ],
)
def test_top_boundary_takes_second_highest_rate(table: TerTable, last_bound: int) -> None:
    assert table.rate_for(last_bound) == 33.0
    assert table.rate_for(last_bound + 1) == 34.0
    assert table.rate_for(10**15) == 34.0


def test_negative_income_is_a_contract_violation() -> None:
    with pytest.raises(AssertionError):
        TER_A_2024.rate_for(-1)


def test_from_rows_builds_a_valid_table() -> None:
    table = TerTable.from_rows(TerCategory.B, [(100, 0), (200, 5), (TOP, 10)])
    assert table.brackets[0] == Bracket(100.0, 0.0)
    assert table.rate_for(150) == 5.0
    assert table.rate_for(1e30) == 10.0


@pytest.mark.parametrize(
    "rows",
    [
        [],
        [(100, 0), (200, 5)],
        [(200, 0), (100, 5), (TOP, 10)],
        [(100, 5), (200, 1), (TOP, 10)],
        [(100, 0), (TOP, 100)],
    ],
)
def test_malformed_tables_are_rejected(rows) -> None:
    with pytest.raises(AssertionError):
        TerTable.from_rows(TerCategory.A, rows)
