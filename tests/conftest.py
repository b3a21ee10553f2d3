import os
from pathlib import Path

import pytest

# Ensure Qt runs headless in CI/CLI environments without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture()
def isolated_config(tmp_path: Path, monkeypatch):
    """Point the settings singleton at a throwaway directory."""
    from deskscan.core import config as config_mod

    config_dir = tmp_path / "config"
    monkeypatch.setattr(config_mod, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_mod, "SETTINGS_FILE", config_dir / "settings.json")
    monkeypatch.setattr(config_mod, "CUSTOM_ICONS_DIR", config_dir / "custom-icons")
    monkeypatch.setattr(config_mod.Config, "_instance", None)
    return config_mod.Config()


@pytest.fixture()
def write_entry():
    """Return a helper writing a desktop file into a directory."""

    def _write(directory: Path, name: str, body: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(body, encoding="utf-8")
        return path

    return _write
