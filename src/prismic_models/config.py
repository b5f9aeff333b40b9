"""Content API settings sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


@dataclass(frozen=True)
class ContentApiSettings:
    """Immutable connection settings for the content API."""

    api_url: str | None = None
    access_token: str | None = None
    timeout: float = 30.0
    default_lang: str | None = None

    @classmethod
    def from_env(cls) -> ContentApiSettings:
        return cls(
            api_url=os.getenv("PRISMIC_API_URL") or None,
            access_token=os.getenv("PRISMIC_ACCESS_TOKEN") or None,
            timeout=_env_float("PRISMIC_TIMEOUT", cls.timeout),
            default_lang=os.getenv("PRISMIC_LANG") or None,
        )


__all__ = ["ContentApiSettings"]
