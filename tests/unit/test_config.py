import pytest
from pydantic import ValidationError

from pph21.config import MAX_INCOME, Settings, get_settings


def test_defaults(monkeypatch) -> None:
    for name in ("PPH21_LOG_LEVEL", "PPH21_LOG_DIR", "PPH21_STRICT_CONVERGENCE", "PPH21_MAX_INCOME"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.log_dir is None
    assert settings.strict_convergence is False
    assert settings.max_income == MAX_INCOME == 10**15


def test_env_parsing(monkeypatch) -> None:
    monkeypatch.setenv("PPH21_LOG_LEVEL", "debug")
    monkeypatch.setenv("PPH21_STRICT_CONVERGENCE", "yes")
    monkeypatch.setenv("PPH21_MAX_INCOME", "1000000")
    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.strict_convergence is True
    assert settings.max_income == 1_000_000
    assert get_settings() is settings


def test_settings_are_frozen() -> None:
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.log_level = "INFO"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("PPH21_LOG_LEVEL", "chatty"),
        ("PPH21_MAX_INCOME", "0"),
        ("PPH21_MAX_INCOME", str(10**15 + 1)),
    ],
)
def test_invalid_env_values_are_rejected(monkeypatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()
