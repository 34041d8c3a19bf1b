"""
Core type definitions for trykit.

Алиасы для колбэков, которые принимают комбинаторы Outcome.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

# ============================================================================
# Type aliases
# ============================================================================

# Thunk = zero-arg computation that may raise
type Thunk[T] = Callable[[], T]

# AsyncThunk = zero-arg callable producing an awaitable (coroutine function, lambda)
type AsyncThunk[T] = Callable[[], Awaitable[T]]

# Effect = side-effecting observer, result is ignored
type Effect[T] = Callable[[T], object]

# Catch = exception classes a wrapping combinator turns into Failure
type Catch = tuple[type[BaseException], ...]

# ============================================================================
# Defaults
# ============================================================================

# NOTE: BaseException subclasses outside Exception (KeyboardInterrupt,
#       SystemExit, CancelledError) are not caught unless listed explicitly.
DEFAULT_CATCH: Catch = (Exception,)

# Cancellation raised by an async body is an ordinary failure.
DEFAULT_ASYNC_CATCH: Catch = (Exception, asyncio.CancelledError)

__all__ = (
    "AsyncThunk",
    "Catch",
    "DEFAULT_ASYNC_CATCH",
    "DEFAULT_CATCH",
    "Effect",
    "Thunk",
)
