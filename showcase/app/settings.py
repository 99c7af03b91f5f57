from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping, Optional

from ..adapters.feed_rest import DEFAULT_FEED_URL
from ..adapters.store_rest import DEFAULT_STORE_URL
from ..usecases.fetch_resource import DEFAULT_TODO_LIMIT

_ENV_KEYS = {
    "store_base_url": "SHOWCASE_STORE_URL",
    "feed_base_url": "SHOWCASE_FEED_URL",
    "request_timeout_s": "SHOWCASE_REQUEST_TIMEOUT_S",
    "todo_limit": "SHOWCASE_TODO_LIMIT",
    "excerpt_length": "SHOWCASE_EXCERPT_LENGTH",
    "debug_logging": "SHOWCASE_DEBUG_LOGGING",
}


@dataclass(frozen=True)
class ShowcaseSettings:
    """Runtime settings for the API endpoints and screen constants; no I/O here."""

    store_base_url: str = DEFAULT_STORE_URL
    feed_base_url: str = DEFAULT_FEED_URL
    request_timeout_s: int = 10
    todo_limit: int = DEFAULT_TODO_LIMIT
    excerpt_length: int = 100
    debug_logging: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShowcaseSettings":
        """Build settings from ``SHOWCASE_*`` variables over the defaults."""
        env = os.environ if environ is None else environ
        payload = {key: env[var] for key, var in _ENV_KEYS.items() if env.get(var)}
        return cls().apply_dict(payload)

    def apply_dict(self, payload: Mapping[str, Any]) -> "ShowcaseSettings":
        """Return a copy with ``payload`` applied.

        Raises:
            ValueError: For non-mapping payloads, unknown keys or bad values.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")
        allowed = {f.name for f in fields(self)}
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")
        updates = {key: self._coerce(key, value) for key, value in payload.items()}
        return replace(self, **updates) if updates else self

    def to_dict(self) -> dict:
        return asdict(self)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce(self, key: str, raw: Any) -> Any:
        if key in {"store_base_url", "feed_base_url"}:
            return self._coerce_url(key, raw)
        if key in {"request_timeout_s", "todo_limit", "excerpt_length"}:
            return self._coerce_positive_int(key, raw)
        if key == "debug_logging":
            return self._coerce_bool(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_url(name: str, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{name} must be a non-empty URL string.")
        text = value.strip()
        if not text.startswith(("http://", "https://")):
            raise ValueError(f"{name} must start with http:// or https://.")
        return text.rstrip("/")

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_positive_int(name: str, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if coerced <= 0:
            raise ValueError(f"{name} must be positive.")
        return coerced


__all__ = ["ShowcaseSettings"]
