"""Exception types raised by chatbridge adapters and the dispatcher."""

from __future__ import annotations


class BridgeError(RuntimeError):
    """Base class for errors raised by the normalization layer."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class AuthenticationError(BridgeError):
    """Raised when no API key can be resolved for a request."""


class ValidationError(BridgeError):
    """Raised when a request cannot be sent to a provider as given."""


class AdapterError(BridgeError):
    """Raised when a provider response cannot be read."""


class UnsupportedModelError(BridgeError, LookupError):
    """Raised when no adapter is registered for a model identifier."""


__all__ = [
    "AdapterError",
    "AuthenticationError",
    "BridgeError",
    "UnsupportedModelError",
    "ValidationError",
]
