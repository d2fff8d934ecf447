"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Base error for configuration and wiring problems."""


class ConfigurationError(UtilError):
    """Settings point at data or assets that cannot be used."""


class DependencyInjectionError(UtilError):
    """No provider implementation matches a requested component."""
