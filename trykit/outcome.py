"""
Outcome - success or failure as a value
=======================================

Two frozen variants, `Success` and `Failure`, sharing one method set.
Every combinator returns a new value (or the same instance); nothing mutates.

    from trykit import Failure, Success, attempt

    match attempt(lambda: int(raw)).map(abs):
        case Success(n):
            print(n)
        case Failure(err):
            print(f"bad input: {err}")
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from ._types import Effect

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Success[T, E: BaseException]:
    """
    Successful outcome carrying `value`.

    `E` is phantom here: it is the error type the outcome would carry had it
    failed, so chains keep one error type from start to end.
    """

    value: T

    @property
    def is_success(self) -> typing.Literal[True]:
        return True

    @property
    def is_failure(self) -> typing.Literal[False]:
        return False

    def get(self) -> T:
        """Return the payload."""
        return self.value

    def on_success(self, handler: Effect[T]) -> Success[T, E]:
        """Call `handler` with the payload, then return this same outcome."""
        handler(self.value)
        return self

    def on_failure(self, handler: Effect[E]) -> Success[T, E]:
        _ = handler
        return self

    def map[U](self, transform: Callable[[T], U]) -> Success[U, E]:
        """Apply `transform` to the payload and wrap the result."""
        return Success(transform(self.value))

    def flat_map[U](self, transform: Callable[[T], Outcome[U, E]]) -> Outcome[U, E]:
        """
        Chain a dependent fallible step.

        The outcome returned by `transform` is passed through as is.
        An `Exception` raised by `transform` is captured as `Failure`.

        NOTE: BaseException outside Exception (KeyboardInterrupt, SystemExit,
              CancelledError) is not an error value and propagates.
        """
        try:
            return transform(self.value)
        except Exception as exc:
            logger.debug("flat_map captured %s: %s", type(exc).__name__, exc)
            return Failure(typing.cast("E", exc))

    def recover(self, handler: Callable[[E], T]) -> T:
        _ = handler
        return self.value

    def recover_with(self, handler: Callable[[E], Outcome[T, E]]) -> Success[T, E]:
        _ = handler
        return self

    def to_result(self) -> Result[T, E]:
        """Convert to `kungfu.Ok`."""
        return Ok(self.value)


@dataclass(frozen=True, slots=True)
class Failure[T, E: BaseException]:
    """
    Failed outcome carrying `error`.

    `get()` re-raises the exact exception object that was captured.
    """

    error: E

    @property
    def is_success(self) -> typing.Literal[False]:
        return False

    @property
    def is_failure(self) -> typing.Literal[True]:
        return True

    def get(self) -> typing.NoReturn:
        """Raise the contained error."""
        raise self.error

    def on_success(self, handler: Effect[T]) -> Failure[T, E]:
        _ = handler
        return self

    def on_failure(self, handler: Effect[E]) -> Failure[T, E]:
        """Call `handler` with the error, then return this same outcome."""
        handler(self.error)
        return self

    def map[U](self, transform: Callable[[T], U]) -> Failure[U, E]:
        _ = transform
        return Failure(self.error)

    def flat_map[U](self, transform: Callable[[T], Outcome[U, E]]) -> Failure[U, E]:
        _ = transform
        return Failure(self.error)

    def recover(self, handler: Callable[[E], T]) -> T:
        """Produce a replacement value from the error."""
        return handler(self.error)

    def recover_with(self, handler: Callable[[E], Outcome[T, E]]) -> Outcome[T, E]:
        """
        Replace the failure with whatever `handler` returns.

        The handler may itself fail: its result is returned verbatim.
        """
        return handler(self.error)

    def to_result(self) -> Result[T, E]:
        """Convert to `kungfu.Error`."""
        return Error(self.error)


# Outcome = the two-variant union every combinator speaks
type Outcome[T, E: BaseException] = Success[T, E] | Failure[T, E]


__all__ = (
    "Failure",
    "Outcome",
    "Success",
)
