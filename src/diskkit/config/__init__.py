"""Configuration package.

This package provides centralized settings via pydantic-settings and the
YAML loader for extra sanitizer rules.
"""

from diskkit.config.loader import (
    DispositionRules,
    build_sanitizer,
    load_disposition_table,
)
from diskkit.config.settings import (
    LoggingSettings,
    SanitizerSettings,
    Settings,
    WorkspaceSettings,
    get_settings,
)

__all__ = [
    "build_sanitizer",
    "DispositionRules",
    "get_settings",
    "load_disposition_table",
    "LoggingSettings",
    "SanitizerSettings",
    "Settings",
    "WorkspaceSettings",
]
