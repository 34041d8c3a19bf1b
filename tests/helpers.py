"""Test helpers: a domain error, call recorders and slow async bodies."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

DELAY_S = 0.01


class MockError(Exception):
    """Failure payload used throughout the suite."""

    def __init__(self, code: str = "test") -> None:
        self.code = code
        super().__init__(f"MockError.{code}")


@dataclass
class Recorder:
    """Callable that remembers every argument it was called with."""

    calls: list[Any] = field(default_factory=list)
    returns: Any = None

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)


def raise_(error: BaseException) -> Any:
    """Raise from inside a lambda."""
    raise error


async def simulated_success[T](value: T) -> T:
    await asyncio.sleep(DELAY_S)
    return value


async def simulated_failure(error: BaseException) -> Any:
    await asyncio.sleep(DELAY_S)
    raise error
