"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.assert_runner import AssertRunner
from tests.conformance.runners.library_runner import LibraryRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [LibraryRunner(), AssertRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners.
    Currently includes:
    - library: CapacityChecker, collecting every error
    - assert: assert_consistency, stopping at the first error
    """
    return request.param
