"""Tests for configuration helpers."""

import logging

import pytest

from treetiles import config


def test_resolve_log_level_names_and_numbers():
    assert config.resolve_log_level("debug") == logging.DEBUG
    assert config.resolve_log_level(logging.ERROR) == logging.ERROR


def test_resolve_log_level_from_environment(monkeypatch):
    monkeypatch.setenv(config.LOG_LEVEL_ENV, "info")
    assert config.resolve_log_level() == logging.INFO
    monkeypatch.delenv(config.LOG_LEVEL_ENV)
    assert config.resolve_log_level() == logging.WARNING


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValueError):
        config.resolve_log_level("chatty")


def test_configure_logging_installs_one_handler():
    package_logger = logging.getLogger("treetiles")
    config.configure_logging("debug")
    config.configure_logging("error")
    assert package_logger.handlers.count(config._handler) == 1
    assert sum(isinstance(h, logging.StreamHandler) for h in package_logger.handlers) == 1
    assert package_logger.level == logging.ERROR


def test_launch_log_path_override(monkeypatch, tmp_path):
    monkeypatch.setenv(config.LAUNCH_LOG_ENV, str(tmp_path / "launch.log"))
    assert config.launch_log_path() == tmp_path / "launch.log"
