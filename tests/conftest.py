"""Shared fixtures used in the tests"""
from __future__ import annotations

# Standard Imports
import os
import shutil
import tempfile

# Third-Party Imports
import pytest

# Asymptote Imports
from asymptote.testing.utils import FakeClock, FakeHeap
from asymptote.utils import decorators, log


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def heap() -> FakeHeap:
    return FakeHeap()


@pytest.fixture(scope="function")
def cleandir():
    """Runs the test in the clean new dir, which is purged afterwards"""
    previous_cwd = os.getcwd()
    temp_path = tempfile.mkdtemp()
    os.chdir(temp_path)
    yield temp_path
    os.chdir(previous_cwd)
    shutil.rmtree(temp_path)


@pytest.fixture(autouse=True)
def setup():
    """Cleans the caches before each test"""
    # Cleans up the caching of all singleton instances
    for singleton in decorators.registered_singletons:
        singleton.instance = None
    for singleton_with_args in decorators.func_args_cache.values():
        singleton_with_args.clear()

    # Reset the verbosity to release and disable the colours
    log.VERBOSITY = log.VERBOSE_RELEASE
    log.CURRENT_INDENT = 0
    log.COLOR_OUTPUT = False
    yield
