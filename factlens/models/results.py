"""
result wrappers that make best-effort vs fail-fast calls explicit.

- Recoverable[T]: always holds a value. when the call failed, the value is a
  degraded fallback and `error` records why.
- Fallible[T]: holds either a value or the error; unwrap() re-raises.
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Recoverable(Generic[T]):
    value: T
    error: Optional[BaseException] = None

    @property
    def degraded(self) -> bool:
        return self.error is not None

    @classmethod
    def ok(cls, value: T) -> "Recoverable[T]":
        return cls(value=value)

    @classmethod
    def fallback(cls, value: T, error: BaseException) -> "Recoverable[T]":
        return cls(value=value, error=error)


@dataclass(frozen=True)
class Fallible(Generic[T]):
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


async def attempt(
    call: Callable[[], Awaitable[T]],
    timeout: Optional[float] = None
) -> Fallible[T]:
    """
    run `call` once, capturing any failure (including a timeout) in a Fallible.

    cancellation of the surrounding task is not captured.
    """
    try:
        value = await asyncio.wait_for(call(), timeout=timeout)
    except asyncio.CancelledError:
        raise
    except Exception as e:
        return Fallible(error=e)
    return Fallible(value=value)
