"""Test module for persisted settings and logging setup."""

from __future__ import annotations

import json
import logging

from deskscan.core import config as config_mod
from deskscan.core import logger as logger_mod
from deskscan.core.entry import BUFFER_SIZE


def test_defaults_and_directories(isolated_config) -> None:
    assert isolated_config.get("max_line") == BUFFER_SIZE
    assert isolated_config.get("extra_dirs") == []
    assert config_mod.CONFIG_DIR.is_dir()
    assert config_mod.CUSTOM_ICONS_DIR.is_dir()


def test_config_is_singleton(isolated_config) -> None:
    assert config_mod.Config() is isolated_config


def test_set_persists_and_reloads(isolated_config, monkeypatch) -> None:
    isolated_config.set("extra_dirs", ["/opt/apps"])

    saved = json.loads(config_mod.SETTINGS_FILE.read_text())
    assert saved["extra_dirs"] == ["/opt/apps"]

    monkeypatch.setattr(config_mod.Config, "_instance", None)
    assert config_mod.Config().get("extra_dirs") == ["/opt/apps"]


def test_corrupt_settings_fall_back_to_defaults(isolated_config, monkeypatch) -> None:
    config_mod.SETTINGS_FILE.write_text("{not json")
    monkeypatch.setattr(config_mod.Config, "_instance", None)

    assert config_mod.Config().get("terminal") == ""


def test_setup_logging_writes_rotating_file(tmp_path, monkeypatch) -> None:
    root = logging.getLogger("deskscan")
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(logger_mod, "CACHE_DIR", tmp_path / "cache")
    monkeypatch.setattr(logger_mod, "LOG_FILE", tmp_path / "cache" / "deskscan.log")
    monkeypatch.setattr("sys.excepthook", logger_mod.sys.excepthook)

    logger_mod.setup_logging(verbose=True)
    logger_mod.get_logger("test").info("hello from test")
    for handler in root.handlers:
        handler.flush()

    assert len(root.handlers) == 2
    assert "hello from test" in (tmp_path / "cache" / "deskscan.log").read_text()
    for handler in root.handlers:
        handler.close()
