"""Configuration — settings model, YAML loader, and install layout."""

from zeppctl.config.layout import InstallLayout
from zeppctl.config.loader import SettingsLoader
from zeppctl.config.models import ZeppelinSettings

__all__ = [
    "InstallLayout",
    "SettingsLoader",
    "ZeppelinSettings",
]
