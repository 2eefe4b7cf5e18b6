"""Shared fixtures and fake providers for the Newslingo tests."""
import os
import sys

import pytest

# Add parent directory to path to import from main project
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from enricher.errors import NetworkFailure


@pytest.fixture(autouse=True)
def isolated_error_log(tmp_path, monkeypatch):
    """Keep error.log writes inside the test's temporary directory."""
    monkeypatch.setenv('LOG_DIR', str(tmp_path / 'logs'))
    return tmp_path / 'logs'


class ScriptedProvider:
    """Provider whose responses are scripted; exceptions in the script are raised."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.invoke_calls = []
        self.complete_calls = []

    def _next(self):
        if not self.responses:
            raise NetworkFailure("no scripted response left")
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    async def invoke(self, text, target_language):
        self.invoke_calls.append((text, target_language))
        return self._next()

    async def complete(self, system_prompt, content, temperature=None, max_tokens=None):
        self.complete_calls.append((system_prompt, content))
        return self._next()


class RecordingSleep:
    """Replacement for asyncio.sleep that records delays and returns immediately."""

    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


@pytest.fixture
def recording_sleep():
    return RecordingSleep()
