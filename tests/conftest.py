"""Shared fixtures for cellnav tests."""

from pathlib import Path

import pytest

from cellnav.history import History


@pytest.fixture
def history():
    """A fresh history with the default capacity."""
    return History()


@pytest.fixture
def notebook_file(tmp_path):
    """Create a small notebook with two markdown cells and one code cell."""
    path = tmp_path / "notebook.md"
    path.write_text(
        "# Intro\n\nFirst paragraph.\n\n"
        "```python\nx = 1\ny = 2\nprint(x + y)\n```\n\n"
        "## Notes\n\nSecond line\nThird line\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_config(tmp_path, notebook_file):
    """Create a Config pointing at notebook_file."""
    from cellnav.config import Config, HistoryConfig

    return Config(
        notebook=notebook_file,
        data_directory=tmp_path / "data",
        log_level="DEBUG",
        history=HistoryConfig(),
    )
