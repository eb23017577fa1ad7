"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import (
    IAppConfig,
    IConfigService,
    IHtmlSerializer,
    IMarkdownParser,
    IRenderPipeline,
    ISettingsService,
)
from .models import MarkdownDocument, RenderResult, ViewMode, ViewState

__all__ = [
    "IMarkdownParser",
    "IHtmlSerializer",
    "IRenderPipeline",
    "ISettingsService",
    "IConfigService",
    "IAppConfig",
    "MarkdownDocument",
    "RenderResult",
    "ViewMode",
    "ViewState",
]
