from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from xml.etree.ElementTree import Element


class ViewMode(str, Enum):
    """Which artifact the output pane shows."""

    PREVIEW = "preview"
    CODE = "code"


@dataclass
class MarkdownDocument:
    text: str = ""
    revision: int = 0


@dataclass(frozen=True)
class RenderResult:
    """Both artifacts of a single render pass, plus the text they came from."""

    source: str
    tree: Element
    html: str


@dataclass
class ViewState:
    document: MarkdownDocument = field(default_factory=MarkdownDocument)
    html: str = ""
    active_view: ViewMode = ViewMode.PREVIEW
