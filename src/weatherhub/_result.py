"""Tagged results and the "first success wins" fallback combinator."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from weatherhub.exceptions import NoProviderAvailable, WeatherHubError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A capability that produced a value."""

    value: T


@dataclass(frozen=True)
class Err:
    """A capability whose providers all failed."""

    error: NoProviderAvailable


Result: TypeAlias = "Ok[T] | Err"

Attempt: TypeAlias = Callable[[], Awaitable[T]]


async def first_success(capability: str, attempts: Sequence[Attempt[T]]) -> Result[T]:
    """Run ``attempts`` in order and return the first value produced.

    Only weatherhub errors fall through to the next attempt; anything else is
    a bug and propagates.
    """
    errors: list[WeatherHubError] = []
    for attempt in attempts:
        try:
            return Ok(await attempt())
        except WeatherHubError as exc:
            errors.append(exc)
    return Err(NoProviderAvailable(capability, errors))


def unwrap_or(result: Result[T], default: T) -> T:
    """Return the value of an ``Ok`` or ``default`` for an ``Err``."""
    if isinstance(result, Ok):
        return result.value
    return default
