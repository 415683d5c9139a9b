"""Tests for configuration loading and the configuration check"""
import logging

import pytest
from pydantic import ValidationError

from capture.settings import WEBHOOK_PLACEHOLDER, Settings, check_configuration


def test_defaults():
    cfg = Settings(_env_file=None)
    assert cfg.success_reenable_delay_ms == 2000
    assert cfg.download_delay_ms == 500
    assert cfg.ebook_href == "/ebook.pdf"
    assert cfg.ebook_filename == "Overcome_Procrastination_Guide.pdf"
    assert cfg.webhook_timeout is None


def test_env_alias(monkeypatch):
    monkeypatch.setenv("GOOGLE_SCRIPT_URL", "  https://script.google.com/macros/s/abc/exec ")
    monkeypatch.setenv("DOWNLOAD_DELAY_MS", "750")
    cfg = Settings(_env_file=None)
    assert cfg.webhook_url == "https://script.google.com/macros/s/abc/exec"
    assert cfg.download_delay_ms == 750
    assert cfg.webhook_configured is True


def test_placeholder_warns_without_failing(caplog):
    cfg = Settings(_env_file=None, GOOGLE_SCRIPT_URL=WEBHOOK_PLACEHOLDER)
    with caplog.at_level(logging.WARNING, logger="capture.settings"):
        assert check_configuration(cfg) is False
    assert "not configured" in caplog.text


def test_configured_logs_info(caplog, test_settings):
    with caplog.at_level(logging.INFO, logger="capture.settings"):
        assert check_configuration(test_settings) is True
    assert "configured" in caplog.text


def test_negative_delay_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, SUCCESS_REENABLE_DELAY_MS=-1)


def test_visitor_form_cap_must_be_positive():
    assert Settings(_env_file=None).max_visitor_forms == 1000
    with pytest.raises(ValidationError):
        Settings(_env_file=None, MAX_VISITOR_FORMS=0)
