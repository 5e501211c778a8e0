"""Configuration management."""

from .settings import PagingSettings, Settings, SettingsManager

__all__ = ["PagingSettings", "Settings", "SettingsManager"]
