"""Custom exceptions for the weatherhub client."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weatherhub.models.report import ReportExtras


class WeatherHubError(Exception):
    """Base exception for all weatherhub errors."""


class MissingCredential(WeatherHubError):
    """Raised when a provider is called without an API key."""


class TransportError(WeatherHubError):
    """Raised when the provider cannot be reached (connection, DNS, timeout)."""


class TransportTimeout(TransportError):
    """Raised when a request to the provider times out."""


class UpstreamRejected(WeatherHubError):
    """Raised when the provider returns a non-success status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class MalformedPayload(WeatherHubError):
    """Raised when a response body does not have the expected shape."""


class CapabilityUnsupported(WeatherHubError):
    """Raised when a provider does not offer the requested capability."""


class NoProviderAvailable(WeatherHubError):
    """Raised when every provider in a fallback chain failed.

    ``errors`` holds the per-provider failures in the order they were tried.
    When raised from a full report, ``extras`` carries the enrichment data
    (forecast, air quality, UV) that was still collected.
    """

    def __init__(
        self,
        capability: str,
        errors: list[WeatherHubError] | None = None,
        extras: ReportExtras | None = None,
    ) -> None:
        self.capability = capability
        self.errors = list(errors or [])
        self.extras = extras
        detail = "; ".join(f"{type(e).__name__}: {e}" for e in self.errors) or "no providers configured"
        super().__init__(f"No provider available for {capability} ({detail})")
