"""Provider API credentials and the process-level credential store."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict

ENV_PRIMARY_KEY = "WEATHERHUB_PRIMARY_KEY"
ENV_FALLBACK_KEY = "WEATHERHUB_FALLBACK_KEY"
ENV_ASSISTANT_KEY = "WEATHERHUB_ASSISTANT_KEY"

# Field names of the persisted flat record
_RECORD_FIELDS = {
    "primary_key": "tomorrow",
    "fallback_key": "openWeather",
    "assistant_key": "ai",
}


class Credentials(BaseModel):
    """Opaque API keys. A blank key means that provider is disabled."""

    model_config = ConfigDict(frozen=True)

    primary_key: str = ""
    fallback_key: str = ""
    assistant_key: str = ""

    @property
    def has_primary(self) -> bool:
        return bool(self.primary_key.strip())

    @property
    def has_fallback(self) -> bool:
        return bool(self.fallback_key.strip())

    @property
    def has_assistant(self) -> bool:
        return bool(self.assistant_key.strip())

    def to_record(self) -> dict[str, str]:
        """Flatten to the three-field record used for persistence."""
        return {record_key: getattr(self, attr) for attr, record_key in _RECORD_FIELDS.items()}

    @classmethod
    def from_record(cls, record: dict[str, Any] | None) -> Credentials:
        """Restore from a persisted record; missing or non-string fields become blank."""
        record = record or {}
        values = {}
        for attr, record_key in _RECORD_FIELDS.items():
            value = record.get(record_key)
            values[attr] = value if isinstance(value, str) else ""
        return cls(**values)

    @classmethod
    def from_env(cls) -> Credentials:
        """Read keys from ``WEATHERHUB_*_KEY`` environment variables."""
        return cls(
            primary_key=os.environ.get(ENV_PRIMARY_KEY, ""),
            fallback_key=os.environ.get(ENV_FALLBACK_KEY, ""),
            assistant_key=os.environ.get(ENV_ASSISTANT_KEY, ""),
        )


class CredentialStore:
    """Holds the current credentials and notifies a persistence hook on change.

    Usage:
        store = CredentialStore(on_change=lambda c: save(c.to_record()))
        store.load(saved_record)
        store.set("tomorrow-key", "owm-key", "")
        service = WeatherAggregationService.from_store(store)
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        on_change: Callable[[Credentials], None] | None = None,
    ) -> None:
        self._credentials = credentials or Credentials()
        self._on_change = on_change

    def get(self) -> Credentials:
        """Return the current credentials snapshot."""
        return self._credentials

    def set(self, primary: str, fallback: str, assistant: str) -> Credentials:
        """Replace all three keys and ask the caller to persist them."""
        self._credentials = Credentials(
            primary_key=primary,
            fallback_key=fallback,
            assistant_key=assistant,
        )
        if self._on_change is not None:
            self._on_change(self._credentials)
        return self._credentials

    def load(self, record: dict[str, Any] | None) -> Credentials:
        """Restore credentials from a persisted record without re-persisting."""
        self._credentials = Credentials.from_record(record)
        return self._credentials
