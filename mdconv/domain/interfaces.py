from __future__ import annotations

from pathlib import Path
from typing import Protocol
from xml.etree.ElementTree import Element

from mdconv.domain.models import RenderResult


class IMarkdownParser(Protocol):
    """Turn Markdown text into a node tree rooted at a synthetic container element."""

    def parse(self, text: str) -> Element: ...


class IHtmlSerializer(Protocol):
    """Turn a (styled) node tree into literal HTML markup."""

    def serialize(self, tree: Element) -> str: ...


class IRenderPipeline(Protocol):
    """Text in, styled tree and its HTML out, from one pass."""

    def render(self, markdown_text: str) -> RenderResult: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_splitter(self) -> bytes | None: ...
    def set_splitter(self, blob: bytes) -> None: ...
    def get_active_view(self) -> str | None: ...
    def set_active_view(self, view: str) -> None: ...


class IConfigService(Protocol):
    """Read-only access to INI-style configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def app_version(self) -> str: ...

    @property
    def loaded_from(self) -> Path | None: ...


class IAppConfig(IConfigService, Protocol):
    """Configuration plus application-level lookups."""

    def get_version(self) -> str: ...
    def debounce_ms(self) -> int: ...
    def default_view(self) -> str: ...
    def log_level(self) -> str: ...
