"""
Bridge between Outcome and kungfu.

Lets outcomes enter `kungfu.Result` / `LazyCoroResult` pipelines and come
back out. The other direction is `Outcome.to_result()`.
"""

from __future__ import annotations

from kungfu import Error, LazyCoroResult, Ok, Result

from ._types import DEFAULT_ASYNC_CATCH, AsyncThunk, Catch
from .attempt import attempt_async
from .outcome import Failure, Outcome, Success


def from_result[T, E: BaseException](result: Result[T, E]) -> Outcome[T, E]:
    """
    Convert an already-computed `kungfu.Result` into an Outcome.

    Example:
        from kungfu import Ok
        from trykit import from_result

        from_result(Ok(42)).get()  # 42

    NOTE: Outcome failures must carry an exception, so an `Error` whose
          payload is not a BaseException raises TypeError.
    """
    match result:
        case Ok(value):
            return Success(value)
        case Error(error):
            if not isinstance(error, BaseException):
                raise TypeError(
                    f"Error payload must be an exception, got {type(error).__name__}"
                )
            return Failure(error)


def attempt_lazy[T](
    thunk: AsyncThunk[T],
    *,
    catch: Catch = DEFAULT_ASYNC_CATCH,
) -> LazyCoroResult[T, BaseException]:
    """
    Lazy `attempt_async` speaking `kungfu.Result`.

    **When to use:** Feeding raising async code into kungfu-based
    combinator pipelines (retry, timeout, fallback).

    Example:
        from trykit import attempt_lazy

        fetch = attempt_lazy(lambda: client.get_user(42))
        result = await fetch()  # Ok(User) or Error(APIException)

    NOTE: Nothing runs until awaited; each await calls thunk again.
    """

    async def run() -> Result[T, BaseException]:
        outcome = await attempt_async(thunk, catch=catch)
        return outcome.to_result()

    return LazyCoroResult(run)


__all__ = (
    "attempt_lazy",
    "from_result",
)
