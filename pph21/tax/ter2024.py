from __future__ import annotations

from pph21.tax.brackets import TOP, Bracket, TerTable
from pph21.tax.ptkp import TerCategory

# Tarif efektif rata-rata bulanan, PP 58/2023 Lampiran (berlaku 1 Januari 2024).
# Each row is (monthly bruto up to and including, rate in percent).

TER_A_2024 = TerTable(
    TerCategory.A,
    (
        Bracket(5_400_000, 0.0),
        Bracket(5_650_000, 0.25),
        Bracket(5_950_000, 0.5),
        Bracket(6_300_000, 0.75),
        Bracket(6_750_000, 1.0),
        Bracket(7_500_000, 1.25),
        Bracket(8_550_000, 1.5),
        Bracket(9_650_000, 1.75),
        Bracket(10_050_000, 2.0),
        Bracket(10_350_000, 2.25),
        Bracket(10_700_000, 2.5),
        Bracket(11_050_000, 3.0),
        Bracket(11_600_000, 3.5),
        Bracket(12_500_000, 4.0),
        Bracket(13_750_000, 5.0),
        Bracket(15_100_000, 6.0),
        Bracket(16_950_000, 7.0),
        Bracket(19_750_000, 8.0),
        Bracket(24_150_000, 9.0),
        Bracket(26_450_000, 10.0),
        Bracket(28_000_000, 11.0),
        Bracket(30_050_000, 12.0),
        Bracket(32_400_000, 13.0),
        Bracket(35_400_000, 14.0),
        Bracket(39_100_000, 15.0),
        Bracket(43_850_000, 16.0),
        Bracket(47_800_000, 17.0),
        Bracket(51_400_000, 18.0),
        Bracket(56_300_000, 19.0),
        Bracket(62_200_000, 20.0),
        Bracket(68_600_000, 21.0),
        Bracket(77_500_000, 22.0),
        Bracket(89_000_000, 23.0),
        Bracket(103_000_000, 24.0),
        Bracket(125_000_000, 25.0),
        Bracket(157_000_000, 26.0),
        Bracket(206_000_000, 27.0),
        Bracket(337_000_000, 28.0),
        Bracket(454_000_000, 29.0),
        Bracket(550_000_000, 30.0),
        Bracket(695_000_000, 31.0),
        Bracket(910_000_000, 32.0),
        Bracket(1_400_000_000, 33.0),
        Bracket(TOP, 34.0),
    ),
)

TER_B_2024 = TerTable(
    TerCategory.B,
    (
        Bracket(6_200_000, 0.0),
        Bracket(6_500_000, 0.25),
        Bracket(6_850_000, 0.5),
        Bracket(7_300_000, 0.75),
        Bracket(9_200_000, 1.0),
        Bracket(10_750_000, 1.5),
        Bracket(11_250_000, 2.0),
        Bracket(11_600_000, 2.5),
        Bracket(12_600_000, 3.0),
        Bracket(13_600_000, 4.0),
        Bracket(14_950_000, 5.0),
        Bracket(16_400_000, 6.0),
        Bracket(18_450_000, 7.0),
        Bracket(21_850_000, 8.0),
        Bracket(26_000_000, 9.0),
        Bracket(27_700_000, 10.0),
        Bracket(29_350_000, 11.0),
        Bracket(31_450_000, 12.0),
        Bracket(33_950_000, 13.0),
        Bracket(37_100_000, 14.0),
        Bracket(41_100_000, 15.0),
        Bracket(45_800_000, 16.0),
        Bracket(49_500_000, 17.0),
        Bracket(53_800_000, 18.0),
        Bracket(58_500_000, 19.0),
        Bracket(64_000_000, 20.0),
        Bracket(71_000_000, 21.0),
        Bracket(80_000_000, 22.0),
        Bracket(93_000_000, 23.0),
        Bracket(109_000_000, 24.0),
        Bracket(129_000_000, 25.0),
        Bracket(163_000_000, 26.0),
        Bracket(211_000_000, 27.0),
        Bracket(374_000_000, 28.0),
        Bracket(459_000_000, 29.0),
        Bracket(555_000_000, 30.0),
        Bracket(704_000_000, 31.0),
        Bracket(957_000_000, 32.0),
        Bracket(1_405_000_000, 33.0),
        Bracket(TOP, 34.0),
    ),
)

TER_C_2024 = TerTable(
    TerCategory.C,
    (
        Bracket(6_600_000, 0.0),
        Bracket(6_950_000, 0.25),
        Bracket(7_350_000, 0.5),
        Bracket(7_800_000, 0.75),
        Bracket(8_850_000, 1.0),
        Bracket(9_800_000, 1.25),
        Bracket(10_950_000, 1.5),
        Bracket(11_200_000, 1.75),
        Bracket(12_050_000, 2.0),
        Bracket(12_950_000, 3.0),
        Bracket(14_150_000, 4.0),
        Bracket(15_550_000, 5.0),
        Bracket(17_050_000, 6.0),
        Bracket(19_500_000, 7.0),
        Bracket(22_700_000, 8.0),
        Bracket(26_600_000, 9.0),
        Bracket(28_100_000, 10.0),
        Bracket(30_100_000, 11.0),
        Bracket(32_600_000, 12.0),
        Bracket(35_400_000, 13.0),
        Bracket(38_900_000, 14.0),
        Bracket(43_000_000, 15.0),
        Bracket(47_400_000, 16.0),
        Bracket(51_200_000, 17.0),
        Bracket(55_800_000, 18.0),
        Bracket(60_400_000, 19.0),
        Bracket(66_700_000, 20.0),
        Bracket(74_500_000, 21.0),
        Bracket(83_200_000, 22.0),
        Bracket(95_600_000, 23.0),
        Bracket(110_000_000, 24.0),
        Bracket(134_000_000, 25.0),
        Bracket(169_000_000, 26.0),
        Bracket(221_000_000, 27.0),
        Bracket(390_000_000, 28.0),
        Bracket(463_000_000, 29.0),
        Bracket(561_000_000, 30.0),
        Bracket(709_000_000, 31.0),
        Bracket(965_000_000, 32.0),
        Bracket(1_419_000_000, 33.0),
        Bracket(TOP, 34.0),
    ),
)

TER_TABLES: dict[TerCategory, TerTable] = {
    TerCategory.A: TER_A_2024,
    TerCategory.B: TER_B_2024,
    TerCategory.C: TER_C_2024,
}


def get_ter_table(category: TerCategory) -> TerTable:
    return TER_TABLES[category]


def ter_rate(category: TerCategory, income: float) -> float:
    return TER_TABLES[category].rate_for(income)


__all__ = [
    "TER_A_2024",
    "TER_B_2024",
    "TER_C_2024",
    "TER_TABLES",
    "get_ter_table",
    "ter_rate",
]
