"""
Errors raised while reading sub-model parameters.

Both kinds are fatal: the caller must stop the startup sequence.
"""


class ParameterError(Exception):
    """Base class of all configuration errors."""


class MissingParameterError(ParameterError, KeyError):
    """A required key is absent from the parameter file."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"Cannot find '{self.key}' in the parameter file."


class InvalidParameterError(ParameterError, ValueError):
    """A value, or a combination of values, is not acceptable."""
