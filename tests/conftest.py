"""Root conftest - isolate process-wide singletons between tests."""

import pytest

import tickwindow.registry as registry_module
import tickwindow.system.config as config_module
from tickwindow.system import LoggerFactory


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch, tmp_path):
    """Give every test a fresh config/registry/logging and no ambient config file."""
    monkeypatch.delenv("TICKWINDOW_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    config_module._system_config = None
    registry_module._indicator_registry = None
    yield
    config_module._system_config = None
    registry_module._indicator_registry = None
    LoggerFactory.reset()
