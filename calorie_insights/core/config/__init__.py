"""
Application configuration.
"""

from .settings import DecoderSettings, ReportSettings, Settings, SourceSettings
from .settings_loader import SettingsLoader, load_settings

__all__ = [
    "Settings",
    "SourceSettings",
    "DecoderSettings",
    "ReportSettings",
    "SettingsLoader",
    "load_settings",
]
