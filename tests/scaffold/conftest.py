"""Shared fixtures for scaffolder tests."""

import os
import sys

import pytest

# Ensure tests/scaffold/ is on sys.path so test files can import
# fake_command_runner unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402

from create_ers_web.scaffold_opts import ScaffoldOpts  # noqa: E402
from create_ers_web.scaffolder import Scaffolder  # noqa: E402


@pytest.fixture
def fake_runner():
    return FakeCommandRunner()


@pytest.fixture
def make_scaffolder(tmp_path, fake_runner):
    """Build a Scaffolder rooted at tmp_path; keyword args become ScaffoldOpts."""

    def _make(**opts):
        return Scaffolder(str(tmp_path), fake_runner, ScaffoldOpts(directory=str(tmp_path), **opts))

    return _make
