"""Configuration for the crab game."""

from crab.config.settings import DisplaySettings, GameSettings, Settings, get_settings

__all__ = ["DisplaySettings", "GameSettings", "Settings", "get_settings"]
