"""Credential resolution and the default provider table."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from .core.errors import AuthenticationError

GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"


@dataclass(frozen=True, slots=True)
class CredentialSource:
    """Process-wide fallback credential for one provider.

    Attributes
    ----------
    env_var:
        Name of the environment variable consulted at call time.
    default:
        Optional key configured programmatically. It takes precedence over
        the environment variable but never over a per-request key.
    """

    env_var: str
    default: str | None = field(default=None, repr=False)

    def resolve(
        self,
        explicit: str | None = None,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> str:
        """Return the effective API key or raise :class:`AuthenticationError`."""

        if explicit:
            return explicit
        if self.default:
            return self.default
        env = os.environ if environ is None else environ
        value = env.get(self.env_var)
        if value:
            return value
        raise AuthenticationError("No API key provided")


@dataclass(frozen=True, slots=True)
class ProviderSettings:
    """Routing and credential settings for one provider."""

    name: str
    prefixes: tuple[str, ...]
    credentials: CredentialSource


def _default_providers() -> dict[str, ProviderSettings]:
    return {
        "gemini": ProviderSettings(
            name="gemini",
            prefixes=("gemini",),
            credentials=CredentialSource(GEMINI_API_KEY_ENV),
        ),
        "openai": ProviderSettings(
            name="openai",
            prefixes=("gpt-", "o1", "o3", "o4"),
            credentials=CredentialSource(OPENAI_API_KEY_ENV),
        ),
    }


@dataclass(slots=True)
class BridgeConfig:
    """Provider table used to build the default dispatcher."""

    providers: dict[str, ProviderSettings] = field(default_factory=_default_providers)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BridgeConfig":
        """Build a config whose credential defaults are captured from ``environ``.

        Keys found now become the configured defaults; variables that are
        unset keep being looked up lazily at call time.
        """

        env = os.environ if environ is None else environ
        providers: dict[str, ProviderSettings] = {}
        for name, settings in _default_providers().items():
            source = settings.credentials
            providers[name] = ProviderSettings(
                name=settings.name,
                prefixes=settings.prefixes,
                credentials=CredentialSource(source.env_var, default=env.get(source.env_var) or None),
            )
        return cls(providers=providers)

    def provider(self, name: str) -> ProviderSettings:
        """Return the settings for ``name``."""

        try:
            return self.providers[name]
        except KeyError:
            raise KeyError(f"unknown provider: {name!r}") from None


__all__ = [
    "BridgeConfig",
    "CredentialSource",
    "GEMINI_API_KEY_ENV",
    "OPENAI_API_KEY_ENV",
    "ProviderSettings",
]
