"""
trykit: success/failure outcomes for exception-based code.

Core building blocks:
- `Success` / `Failure`: the two immutable variants of `Outcome`
- `attempt` / `attempt_async`: run a body, capture its error as a value
- `attempting` / `attempting_async`: the same as decorators
- `from_result` / `attempt_lazy`: bridge to kungfu pipelines

Example:
    from trykit import attempt

    settings = (
        attempt(lambda: "user")
        .flat_map(lambda name: attempt(lambda: f"{name}-settings"))
        .on_failure(print)
        .recover(lambda _: "defaults")
    )
"""

import logging

# Core types
from ._types import DEFAULT_ASYNC_CATCH, DEFAULT_CATCH, AsyncThunk, Catch, Effect, Thunk
from .outcome import Failure, Outcome, Success

# Wrapping combinators
from .attempt import (
    Attempting,
    AttemptingAsync,
    attempt,
    attempt_async,
    attempting,
    attempting_async,
)

# kungfu bridge
from .bridge import attempt_lazy, from_result

# Library stays silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "AsyncThunk",
    "Catch",
    "Effect",
    "Failure",
    "Outcome",
    "Success",
    "Thunk",
    # Defaults
    "DEFAULT_ASYNC_CATCH",
    "DEFAULT_CATCH",
    # Wrapping
    "Attempting",
    "AttemptingAsync",
    "attempt",
    "attempt_async",
    "attempting",
    "attempting_async",
    # Bridge
    "attempt_lazy",
    "from_result",
)
