from __future__ import annotations

import pytest
from kungfu import Error, Ok

from trykit import Failure, Success, attempt_lazy, from_result
from tests.helpers import MockError, simulated_failure, simulated_success

pytestmark = pytest.mark.bridge


def test_to_result_success() -> None:
    match Success(5).to_result():
        case Ok(value):
            assert value == 5
        case Error(_):
            pytest.fail("expected Ok")


def test_to_result_failure(error: MockError) -> None:
    match Failure(error).to_result():
        case Ok(_):
            pytest.fail("expected Error")
        case Error(err):
            assert err is error


def test_from_result() -> None:
    error = MockError()

    assert from_result(Ok("x")) == Success("x")
    assert from_result(Error(error)) == Failure(error)


def test_from_result_rejects_non_exception_payload() -> None:
    with pytest.raises(TypeError, match="must be an exception"):
        from_result(Error("plain string"))


def test_round_trip_preserves_error_identity(error: MockError) -> None:
    assert from_result(Failure(error).to_result()).error is error  # type: ignore[union-attr]


@pytest.mark.asyncio
async def test_attempt_lazy_is_lazy_and_rerunnable() -> None:
    calls: list[int] = []

    async def body() -> int:
        calls.append(1)
        return await simulated_success(len(calls))

    lazy = attempt_lazy(body)
    assert calls == []

    first = await lazy()
    second = await lazy()

    assert calls == [1, 1]
    match first, second:
        case Ok(1), Ok(2):
            pass
        case _:
            pytest.fail(f"unexpected results: {first!r}, {second!r}")


@pytest.mark.asyncio
async def test_attempt_lazy_captures_failure(error: MockError) -> None:
    result = await attempt_lazy(lambda: simulated_failure(error))()

    match result:
        case Error(err):
            assert err is error
        case Ok(_):
            pytest.fail("expected Error")
