"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    CSS_PREVIEW,
    DEFAULT_DEBOUNCE_MS,
    DEMO_MARKDOWN,
    HTML_TEMPLATE,
    SETTINGS_ACTIVE_VIEW,
    SETTINGS_GEOMETRY,
    SETTINGS_SPLITTER,
)
from .logger import configure_logging, get_logger

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "CSS_PREVIEW",
    "HTML_TEMPLATE",
    "DEMO_MARKDOWN",
    "DEFAULT_DEBOUNCE_MS",
    "SETTINGS_GEOMETRY",
    "SETTINGS_SPLITTER",
    "SETTINGS_ACTIVE_VIEW",
    "configure_logging",
    "get_logger",
]
