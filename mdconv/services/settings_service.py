from __future__ import annotations

from PyQt6.QtCore import QByteArray, QSettings

from mdconv.domain.interfaces import ISettingsService
from mdconv.utils.constants import SETTINGS_ACTIVE_VIEW, SETTINGS_GEOMETRY, SETTINGS_SPLITTER


class SettingsService(ISettingsService):
    """Persist small UI bits like geometry, splitter position, and the active output tab."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_splitter(self) -> bytes | None:
        v = self._s.value(SETTINGS_SPLITTER)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_splitter(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_SPLITTER, QByteArray(blob))

    def get_active_view(self) -> str | None:
        v = self._s.value(SETTINGS_ACTIVE_VIEW)
        return str(v) if v else None

    def set_active_view(self, view: str) -> None:
        self._s.setValue(SETTINGS_ACTIVE_VIEW, view)
