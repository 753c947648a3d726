"""Test lending configuration."""
import dataclasses

import pytest
from patterns.domain_config import LendingConfig


def test_defaults():
    config = LendingConfig.default()
    assert config.library_name == "Library"
    assert config.enforce_premium_access is True
    assert config.event_log_level == "INFO"
    assert config.event_logger_name == "lending.events"


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        LendingConfig().library_name = "Other"


def test_from_env(monkeypatch):
    monkeypatch.setenv("LENDING_LIBRARY_NAME", "Branch 7")
    monkeypatch.setenv("LENDING_ENFORCE_PREMIUM_ACCESS", "false")
    monkeypatch.setenv("LENDING_EVENT_LOG_LEVEL", "debug")
    config = LendingConfig.from_env()
    assert config.library_name == "Branch 7"
    assert config.enforce_premium_access is False
    assert config.event_log_level == "DEBUG"


def test_from_env_ignores_missing(monkeypatch):
    for name in ("LIBRARY_NAME", "ENFORCE_PREMIUM_ACCESS", "EVENT_LOG_LEVEL", "EVENT_LOGGER_NAME"):
        monkeypatch.delenv(f"LENDING_{name}", raising=False)
    assert LendingConfig.from_env() == LendingConfig()


def test_from_env_custom_prefix(monkeypatch):
    monkeypatch.setenv("BRANCH_EVENT_LOGGER_NAME", "branch.events")
    assert LendingConfig.from_env(prefix="BRANCH_").event_logger_name == "branch.events"
