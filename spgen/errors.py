"""
Error taxonomy for the password generator.

ConfigError and its subclasses are recoverable: the caller fixes the
request and tries again. EntropySourceError is fatal.
"""

from __future__ import annotations


class SpgenError(Exception):
    """Base class for every error raised by spgen."""

    default_message = "Password generation failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ConfigError(SpgenError):
    """The generation request cannot be satisfied as configured."""

    default_message = "Invalid generator configuration."


class NoClassSelected(ConfigError):
    default_message = "Please select at least one character type."


class EmptyAlphabet(ConfigError):
    default_message = "Cannot generate a password from an empty alphabet."


class InvalidLength(ConfigError):
    default_message = "Password length must be a non-negative integer."


class EntropySourceError(SpgenError):
    """The operating-system random source failed. Never retried."""

    default_message = "Secure random source is unavailable."
