"""Exceptions raised by the :mod:`accrete` package."""


class AccreteError(Exception):
    """Base exception for planetary system generation errors."""


class ConfigurationError(AccreteError, ValueError):
    """Invalid simulation parameters, detected before any accretion starts."""


__all__ = ["AccreteError", "ConfigurationError"]
