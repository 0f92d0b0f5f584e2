import builtins

import pytest

from pph21 import main


def _feed(monkeypatch, answers: list[str]) -> None:
    replies = iter(answers)
    monkeypatch.setattr(builtins, "input", lambda _prompt="": next(replies))


def test_cli_gross_with_flags(capsys) -> None:
    main.main(["--income", "10000000", "--status", "TK0", "--method", "gross", "--no-color"])
    out = capsys.readouterr().out
    assert "TER A" in out
    assert "Rp 10.000.000" in out
    assert "Rp 200.000" in out
    assert "Rp 9.800.000" in out
    assert "2%" in out
    assert "Tunjangan pajak" not in out


def test_cli_gross_up_with_flags(capsys) -> None:
    main.main(["--income", "50000000", "--status", "1", "--method", "2", "--no-color"])
    out = capsys.readouterr().out
    assert "Tunjangan pajak" in out
    assert "Rp 13.291.139" in out
    assert "Rp 63.291.139" in out
    assert "21%" in out


def test_cli_prompts_until_input_is_valid(monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["10.000", "", "abc", "50000000", "9", "8", "3", "2"])
    main.main(["--no-color"])
    out = capsys.readouterr().out
    assert "KALKULATOR PPh 21 BULANAN" in out
    assert "Tidak menerima tanda pemisah atau desimal" in out
    assert "Input tidak boleh kosong." in out
    assert "Hanya boleh angka 0-9" in out
    assert out.count("Pilihan tidak valid") == 2
    assert "K/3  - Kawin, 3 Tanggungan" in out
    assert "TER C" in out
    assert "Tunjangan pajak" in out


def test_cli_prompts_only_for_missing_fields(monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["1"])
    main.main(["--income", "10000000", "--status", "K/1", "--no-color"])
    out = capsys.readouterr().out
    assert "Pilih Metode Perhitungan" in out
    assert "Pilih Status PTKP" not in out
    assert "TER B" in out
    assert "Rp 150.000" in out


@pytest.mark.parametrize(
    "argv",
    [
        ["--income", "10.000"],
        ["--income", "1", "--status", "TK9"],
        ["--income", "1", "--status", "TK0", "--method", "net"],
        ["--color", "sometimes"],
    ],
)
def test_cli_rejects_invalid_flags(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main.main(argv)
    assert excinfo.value.code == 2


def test_cli_table_command(capsys) -> None:
    main.main(["table", "--category", "C", "--no-color"])
    out = capsys.readouterr().out
    assert "Tabel TER C" in out
    assert "Rp 6.600.000" in out
    assert "di atas Rp 1.419.000.000" in out
    assert "34%" in out


def test_no_color_env_disables_color(monkeypatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert main._resolve_color_preference("auto") == "never"
    assert main._resolve_color_preference("always") == "always"
