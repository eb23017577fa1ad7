"""Concrete service implementations: parsing, styling, serialization, settings."""

from .html_serializer import HtmlSerializer
from .markdown_parser import MarkdownParser
from .render_pipeline import RenderPipeline, style_tree
from .settings_service import SettingsService
from .style_registry import IDENTITY_RULE, StyleRule, style_for

__all__ = [
    "HtmlSerializer",
    "MarkdownParser",
    "RenderPipeline",
    "SettingsService",
    "StyleRule",
    "IDENTITY_RULE",
    "style_for",
    "style_tree",
]
