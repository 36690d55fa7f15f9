from .settings import (
    ApplicationSettings,
    I18nSettings,
    LogFormat,
    LoggingSettings,
    PathSettings,
    get_settings,
    reload_settings,
)

__all__ = [
    "ApplicationSettings",
    "PathSettings",
    "LoggingSettings",
    "LogFormat",
    "I18nSettings",
    "get_settings",
    "reload_settings",
]
