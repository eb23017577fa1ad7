from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path

from mdconv.domain.interfaces import IAppConfig
from mdconv.domain.models import ViewMode
from mdconv.services.config.ini_config_service import IniConfigService
from mdconv.utils.constants import DEFAULT_DEBOUNCE_MS

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode uses this file location to walk upward
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # mdconv/services/config/app_config.py -> parents[3] is the repository root
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    if not m:
        return None

    # normalized X.Y.Z (no leading v)
    return m.group(1)


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Adapter that wraps IniConfigService and adds typed lookups for the app.

    Precedence for version:
      1) <project_root>/version file (semantic e.g. v1.0.5)
      2) ini_config_service.app_version() (fallback)
      3) "0.0.0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    def debounce_ms(self) -> int:
        """Delay between the last keystroke and the render; 0 renders on every edit."""
        v = self.ini.get_int("preview", "debounce_ms", DEFAULT_DEBOUNCE_MS)
        if v is None or v < 0:
            return DEFAULT_DEBOUNCE_MS
        return v

    def default_view(self) -> str:
        raw = (self.ini.get("preview", "default_view", ViewMode.PREVIEW.value) or "").strip().lower()
        try:
            return ViewMode(raw).value
        except ValueError:
            return ViewMode.PREVIEW.value

    def log_level(self) -> str:
        return (self.ini.get("logging", "level", "WARNING") or "WARNING").strip().upper()

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
