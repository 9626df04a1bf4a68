"""Tests for environment configuration."""

import logging

import pytest

from dtview.config import DEFAULT_FETCH_TIMEOUT, Config


def test_timeout_from_environment(monkeypatch):
    monkeypatch.setenv("DTVIEW_FETCH_TIMEOUT", "2.5")
    assert Config().fetch_timeout == 2.5
    assert Config().timeout == 2.5


def test_zero_disables_timeout(monkeypatch):
    monkeypatch.setenv("DTVIEW_FETCH_TIMEOUT", "0")
    assert Config().timeout is None


def test_unset_timeout_uses_default(monkeypatch):
    monkeypatch.delenv("DTVIEW_FETCH_TIMEOUT", raising=False)
    assert Config().fetch_timeout == DEFAULT_FETCH_TIMEOUT


@pytest.mark.parametrize("raw", ["ten", "-3", "nan"])
def test_invalid_timeout_keeps_default(monkeypatch, caplog, raw):
    monkeypatch.setenv("DTVIEW_FETCH_TIMEOUT", raw)
    with caplog.at_level(logging.WARNING):
        config = Config()
    assert config.fetch_timeout == DEFAULT_FETCH_TIMEOUT
    assert "DTVIEW_FETCH_TIMEOUT" in caplog.text


def test_remote_url_from_environment(monkeypatch):
    monkeypatch.setenv("DTVIEW_REMOTE_URL", "https://example.test/p.json")
    assert Config().remote_url == "https://example.test/p.json"
