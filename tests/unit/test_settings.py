"""Unit tests for environment settings."""

import pytest

from vitae.utils.settings import DEFAULT_PORT, resolve_port


@pytest.mark.unit
def test_port_defaults_when_unset(monkeypatch):
    """Test PORT unset falls back to 8081."""
    monkeypatch.delenv("PORT", raising=False)
    assert resolve_port() == DEFAULT_PORT == 8081


@pytest.mark.unit
def test_port_defaults_when_blank(monkeypatch):
    monkeypatch.setenv("PORT", "  ")
    assert resolve_port() == 8081


@pytest.mark.unit
def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    assert resolve_port() == 9090


@pytest.mark.unit
def test_port_explicit_value_wins(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    assert resolve_port("7000") == 7000


@pytest.mark.unit
@pytest.mark.parametrize("value", ["abc", "80.5", "0", "70000"])
def test_port_rejects_invalid(value):
    with pytest.raises(ValueError):
        resolve_port(value)
