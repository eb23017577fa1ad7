from __future__ import annotations

import configparser
from pathlib import Path

from platformdirs import user_config_dir

from mdconv.domain.interfaces import IConfigService
from mdconv.utils.logger import get_logger

log = get_logger(__name__)


class IniConfigService(IConfigService):
    r"""
    Reads `config.ini` for the converter.

    The first readable file of `candidate_paths()` wins:
      1. an explicit path given by the caller,
      2. the per-user file (~/.config/MarkdownConverter/config.ini,
         %LOCALAPPDATA%\MarkdownConverter\config.ini, ...),
      3. <project_root>/config/config.ini shipped with the app.
    Missing or broken files are skipped, so every lookup has a default.
    """

    DEFAULT_APP_DIR = "MarkdownConverter"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Path | None = None, project_root: Path | None = None) -> None:
        self._explicit_path = explicit_path
        self._project_root = project_root
        self._parser = configparser.ConfigParser()
        self._loaded_from: Path | None = None

        for path in self.candidate_paths():
            parser = self._read(path)
            if parser is not None:
                self._parser, self._loaded_from = parser, path
                break
        else:
            log.debug("No config file found; using built-in defaults")

    def candidate_paths(self) -> list[Path]:
        paths = [Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE]
        if self._explicit_path:
            paths.insert(0, self._explicit_path)
        if self._project_root:
            paths.append(self._project_root / "config" / self.DEFAULT_FILE)
        return paths

    @staticmethod
    def _read(path: Path) -> configparser.ConfigParser | None:
        if not path.is_file():
            return None
        parser = configparser.ConfigParser()
        try:
            with path.open("r", encoding="utf-8") as fh:
                parser.read_file(fh)
        except (OSError, UnicodeDecodeError, configparser.Error) as e:
            log.warning("Ignoring unreadable config %s: %s", path, e)
            return None
        log.debug("Loaded config from %s", path)
        return parser

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self._parser.get(section, key, fallback=default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        raw = self.get(section, key)
        if raw is None:
            return default
        try:
            return int(raw.strip())
        except ValueError:
            log.warning("[%s] %s = %r is not an integer; using %r", section, key, raw, default)
            return default

    def app_version(self) -> str:
        return self.get("app", "version") or "0.0.0"

    @property
    def loaded_from(self) -> Path | None:
        """Which file was read, for diagnostics."""
        return self._loaded_from
