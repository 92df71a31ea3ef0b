"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from weatherhub.exceptions import (
    MalformedPayload,
    TransportError,
    TransportTimeout,
    UpstreamRejected,
)

DEFAULT_TIMEOUT = 30.0


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if not response.is_success:
        raise UpstreamRejected(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise MalformedPayload(f"Response from {response.url} is not JSON: {exc}") from exc


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> Any:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.TimeoutException as exc:
            raise TransportTimeout(str(exc)) from exc
        except httpx.DecodingError as exc:
            raise MalformedPayload(f"Could not decode response body: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
