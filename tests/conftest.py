"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging

import pytest

from tests.helpers import MockError, Recorder


@pytest.fixture
def error() -> MockError:
    return MockError("test")


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def trykit_debug(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture trykit DEBUG records."""
    caplog.set_level(logging.DEBUG, logger="trykit")
    return caplog
