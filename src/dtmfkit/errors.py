"""Exception hierarchy for dtmfkit."""

from __future__ import annotations


class DTMFKitError(Exception):
    """Base exception for all dtmfkit errors."""


class ConfigurationError(DTMFKitError):
    """Raised when a detection session is created with invalid parameters."""
