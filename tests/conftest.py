"""Shared test fixtures."""

import pytest

pytest_plugins = ["envexec.plugin"]


@pytest.fixture
def mock_process(monkeypatch):
    """Mock process.run for tests."""
    from envexec import process

    calls = []
    responses = []

    def fake_run(args, env=None):
        calls.append(("run", args, env))
        if responses:
            response = responses.pop(0)
            if isinstance(response, BaseException):
                raise response
            return response
        return process.Result(returncode=0, stdout=b"", stderr=b"")

    monkeypatch.setattr(process, "run", fake_run)

    return type("MockProcess", (), {"calls": calls, "responses": responses})()


@pytest.fixture
def no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture(autouse=True)
def _clean_output_env(monkeypatch):
    """Keep colors and annotations independent of the host environment."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
