"""Shared fixtures for filekv tests."""

import shutil
import tempfile
from pathlib import Path

import pytest

from filekv import Settings


@pytest.fixture
def tmpdir_path():
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def settings(tmpdir_path):
    return Settings(base_dir=tmpdir_path)
