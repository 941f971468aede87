"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.toy_runtime import make_runtime


def get_available_runtimes():
    """Return ``(name, factory)`` pairs for every runtime the suites run against."""
    runtimes = [("toy", make_runtime)]
    return runtimes


@pytest.fixture(params=get_available_runtimes(), ids=lambda r: r[0])
def runtime_factory(request):
    """Provide a runtime factory for testing.

    This fixture is parametrized to run every language test against all
    available runtimes. Currently includes:
    - toy: the small agent language in ``runners/toy_runtime.py``
    """
    return request.param[1]
