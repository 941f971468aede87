"""Shared fixtures for langtest unit tests."""

from __future__ import annotations

import pytest

from fakes import RuntimeRecorder


@pytest.fixture
def recorder() -> RuntimeRecorder:
    return RuntimeRecorder()
