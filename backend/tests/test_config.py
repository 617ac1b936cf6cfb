"""Tests for application settings."""

import pytest

from warehouse_api.config import DATA_DIR, Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("API_PORT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_port == 3000
    assert settings.api_prefix == ""
    assert settings.orders_file == DATA_DIR / "orders.json"
    assert settings.product_mapping_file == DATA_DIR / "product_mapping.json"


def test_port_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("API_PORT", raising=False)
    monkeypatch.setenv("PORT", "8080")

    assert Settings(_env_file=None).api_port == 8080


def test_file_paths_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("ORDERS_FILE", str(tmp_path / "o.json"))

    assert Settings(_env_file=None).orders_file == tmp_path / "o.json"


def test_cors_origins_from_comma_separated_string() -> None:
    settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")

    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_rejects_unknown_log_format() -> None:
    with pytest.raises(ValueError):
        Settings(_env_file=None, log_format="xml")
