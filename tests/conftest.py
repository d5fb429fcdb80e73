"""
Shared fixtures for the game rating tests.
"""

from unittest.mock import MagicMock

import pytest


class ScriptedIO:
    """Console fake that answers prompts from a script and records output."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def prompt(self, text=""):
        self.prompts.append(text)
        if not self.answers:
            return ""
        return self.answers.pop(0)

    def write(self, line=""):
        self.output.append(line)


@pytest.fixture
def scripted_io():
    """Factory for a ScriptedIO with the given answers."""
    return ScriptedIO


@pytest.fixture
def fake_rng():
    """Factory for a mock random generator returning the given integers in order."""
    def _make(values):
        rng = MagicMock()
        rng.integers.side_effect = list(values)
        return rng
    return _make
