"""pytest plugin: enable with ``pytest_plugins = ["envexec.plugin"]``."""

import pytest

from envexec.executor import Executor


@pytest.fixture
def executor():
    """Factory for Executors; call with (name, value) bindings."""

    def make(env=()) -> Executor:
        return Executor(env)

    return make
