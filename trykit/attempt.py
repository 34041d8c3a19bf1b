"""
Wrapping combinators.

Функции, которые превращают код с исключениями в Outcome.
Only a single call of `body` is guarded, nothing around it.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Awaitable, Callable
from functools import wraps

from ._types import DEFAULT_ASYNC_CATCH, DEFAULT_CATCH, AsyncThunk, Catch, Thunk
from .outcome import Failure, Outcome, Success

logger = logging.getLogger(__name__)

# Decorated forms
type Attempting[**P, T] = Callable[P, Outcome[T, BaseException]]
type AttemptingAsync[**P, T] = Callable[P, Awaitable[Outcome[T, BaseException]]]


def attempt[T](
    body: Thunk[T],
    *,
    catch: Catch = DEFAULT_CATCH,
) -> Outcome[T, BaseException]:
    """
    Call `body` once and capture how it ended.

    **When to use:** Bridge between exception-based code and Outcome chains.

    Example:
        from trykit import attempt

        config = attempt(lambda: json.loads(raw))
        if config.is_failure:
            ...

    `catch` narrows which exceptions become `Failure`; anything else
    propagates to the caller untouched.

    NOTE: body must be a zero-arg callable. Arguments are evaluated by the
          caller, outside the guarded call.
    """
    try:
        value = body()
    except catch as exc:
        logger.debug("attempt captured %s: %s", type(exc).__name__, exc)
        return Failure(exc)
    return Success(value)


async def attempt_async[T](
    body: AsyncThunk[T],
    *,
    catch: Catch = DEFAULT_ASYNC_CATCH,
) -> Outcome[T, BaseException]:
    """
    Await `body()` once and capture how it ended.

    **When to use:** Async version of attempt() for coroutines, I/O clients,
    anything that raises instead of returning a value.

    Example:
        from trykit import attempt_async

        page = await attempt_async(lambda: client.get(url))
        page.on_failure(report).map(parse)

    No suspension is added beyond what `body` performs, and there is no
    timeout. If the awaiting task is cancelled and `body` raises
    `asyncio.CancelledError`, it is captured like any other error; pass
    `catch=(Exception,)` to let cancellation propagate.

    NOTE: A captured cancellation is withdrawn from the current task
          (`Task.uncancel`), so its `cancelling()` count is left balanced.
    """
    try:
        value = await body()
    except catch as exc:
        logger.debug("attempt_async captured %s: %s", type(exc).__name__, exc)
        if isinstance(exc, asyncio.CancelledError):
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                task.uncancel()
        return Failure(exc)
    return Success(value)


@typing.overload
def attempting[**P, T](
    func: Callable[P, T],
    *,
    catch: Catch = ...,
) -> Attempting[P, T]: ...


@typing.overload
def attempting[**P, T](
    func: None = None,
    *,
    catch: Catch = ...,
) -> Callable[[Callable[P, T]], Attempting[P, T]]: ...


def attempting[**P, T](
    func: Callable[P, T] | None = None,
    *,
    catch: Catch = DEFAULT_CATCH,
) -> Attempting[P, T] | Callable[[Callable[P, T]], Attempting[P, T]]:
    """
    Decorator: every call of `func` returns an Outcome instead of raising.

    Works bare or with arguments:

        @attempting
        def load(path: str) -> bytes: ...

        @attempting(catch=(OSError,))
        def load_strict(path: str) -> bytes: ...

        load("missing").is_failure  # True
    """

    def decorate(fn: Callable[P, T]) -> Attempting[P, T]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T, BaseException]:
            return attempt(lambda: fn(*args, **kwargs), catch=catch)

        return wrapper

    if func is None:
        return decorate
    return decorate(func)


@typing.overload
def attempting_async[**P, T](
    func: Callable[P, Awaitable[T]],
    *,
    catch: Catch = ...,
) -> AttemptingAsync[P, T]: ...


@typing.overload
def attempting_async[**P, T](
    func: None = None,
    *,
    catch: Catch = ...,
) -> Callable[[Callable[P, Awaitable[T]]], AttemptingAsync[P, T]]: ...


def attempting_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    catch: Catch = DEFAULT_ASYNC_CATCH,
) -> AttemptingAsync[P, T] | Callable[[Callable[P, Awaitable[T]]], AttemptingAsync[P, T]]:
    """
    Decorator for coroutine functions, async counterpart of `attempting`.

        @attempting_async
        async def fetch(url: str) -> bytes: ...

        outcome = await fetch("https://example.org")
    """

    def decorate(fn: Callable[P, Awaitable[T]]) -> AttemptingAsync[P, T]:
        @wraps(fn)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T, BaseException]:
            return await attempt_async(lambda: fn(*args, **kwargs), catch=catch)

        return wrapper

    if func is None:
        return decorate
    return decorate(func)


__all__ = (
    "Attempting",
    "AttemptingAsync",
    "attempt",
    "attempt_async",
    "attempting",
    "attempting_async",
)
