from __future__ import annotations

import os
import sys

import pytest


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `snlib/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()

from snlib.entry import StatEntry  # noqa: E402


class RecordingSink:
    """Collects (message, interrupt) pairs handed to the speech sink."""

    def __init__(self):
        self.calls = []

    def __call__(self, message, interrupt=False):
        self.calls.append((message, interrupt))

    @property
    def messages(self):
        return [message for message, _ in self.calls]

    @property
    def last(self):
        return self.calls[-1][0] if self.calls else None


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def status_entries():
    return [
        StatEntry("Level", "12", "Status"),
        StatEntry("HP", "30/30", "Status"),
        StatEntry("Gil", "100", "Options"),
    ]
