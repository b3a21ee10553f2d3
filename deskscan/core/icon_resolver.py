"""Icon resolution for desktop entries.

Resolution order:
  1. User-custom icon (~/.config/deskscan/custom-icons/{name}.png)
  2. Icon= as an absolute path
  3. Qt theme lookup
  4. Manual search of the system icon themes (hicolor, breeze, Adwaita, Papirus)
  5. Generic fallback
"""

from __future__ import annotations

import os
from pathlib import Path

from PyQt6.QtGui import QIcon, QPixmap

from deskscan.core.config import CUSTOM_ICONS_DIR

ICON_THEME_DIRS = [
    Path.home() / ".local" / "share" / "icons",
    Path.home() / ".icons",
    Path("/usr/share/icons"),
]

THEME_SEARCH_ORDER = ["hicolor", "breeze", "Adwaita", "Papirus"]

ICON_EXTENSIONS = [".svg", ".png", ".xpm"]
ICON_SIZES = ["scalable", "128x128", "64x64", "48x48", "32x32"]
PIXMAP_DIR = Path("/usr/share/pixmaps")

_FALLBACK_PIXMAP: QPixmap | None = None
_resolved: dict[str, QIcon] = {}


def _get_fallback_pixmap() -> QPixmap:
    global _FALLBACK_PIXMAP
    if _FALLBACK_PIXMAP is None:
        _FALLBACK_PIXMAP = QPixmap(48, 48)
        _FALLBACK_PIXMAP.fill()
    return _FALLBACK_PIXMAP


def resolve_icon(icon_name: str) -> QIcon:
    """Resolve the Icon= value of an entry to a QIcon."""
    if icon_name in _resolved:
        return _resolved[icon_name]
    icon = _resolve(icon_name)
    _resolved[icon_name] = icon
    return icon


def _resolve(icon_name: str) -> QIcon:
    fallback = QIcon.fromTheme("application-x-executable", QIcon(_get_fallback_pixmap()))
    if not icon_name:
        return fallback

    icon = _check_custom(icon_name)
    if icon and not icon.isNull():
        return icon

    if os.path.isabs(icon_name):
        return QIcon(icon_name) if os.path.isfile(icon_name) else fallback

    icon = QIcon.fromTheme(icon_name)
    if icon and not icon.isNull():
        return icon

    icon = _search_themes(icon_name)
    if icon and not icon.isNull():
        return icon

    return fallback


def _check_custom(name: str) -> QIcon | None:
    for ext in ICON_EXTENSIONS:
        p = CUSTOM_ICONS_DIR / f"{name}{ext}"
        if p.is_file():
            return QIcon(str(p))
    return None


def _search_themes(icon_name: str) -> QIcon | None:
    for base_dir in ICON_THEME_DIRS:
        if not base_dir.is_dir():
            continue
        for theme in THEME_SEARCH_ORDER:
            theme_dir = base_dir / theme
            if not theme_dir.is_dir():
                continue
            for size in ICON_SIZES:
                for ext in ICON_EXTENSIONS:
                    candidate = theme_dir / size / "apps" / f"{icon_name}{ext}"
                    if candidate.is_file():
                        return QIcon(str(candidate))
    for ext in ICON_EXTENSIONS:
        candidate = PIXMAP_DIR / f"{icon_name}{ext}"
        if candidate.is_file():
            return QIcon(str(candidate))
    return None
