"""Custom exceptions for restdoc."""


class RestDocError(Exception):
    """Base exception for restdoc errors."""

    pass


class ConfigError(RestDocError):
    """Configuration file is missing, unreadable or invalid."""

    pass


class CommandLoadError(RestDocError):
    """Target reference does not resolve to a Click command."""

    pass
