"""Tests for cellnav.__main__ module."""

import logging

import pytest

from cellnav import __main__ as entry


@pytest.fixture
def patched_config(monkeypatch, sample_config):
    monkeypatch.setattr(entry.Config, "load", classmethod(lambda cls: sample_config))
    yield sample_config
    for handler in list(logging.getLogger("cellnav").handlers):
        logging.getLogger("cellnav").removeHandler(handler)
        handler.close()


class TestMain:
    def test_runs_app_with_path(self, monkeypatch, patched_config, tmp_path):
        calls = []
        monkeypatch.setattr(entry, "run_app", lambda config, path: calls.append((config, path)))
        assert entry.main([str(tmp_path / "other.md")]) == 0
        assert calls == [(patched_config, tmp_path / "other.md")]

    def test_runs_app_without_path(self, monkeypatch, patched_config):
        calls = []
        monkeypatch.setattr(entry, "run_app", lambda config, path: calls.append(path))
        assert entry.main([]) == 0
        assert calls == [None]

    def test_configures_log_file(self, monkeypatch, patched_config):
        monkeypatch.setattr(entry, "run_app", lambda config, path: None)
        entry.main([])
        logger = logging.getLogger("cellnav")
        assert logger.level == logging.DEBUG
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert patched_config.get_log_path().exists()

    def test_keyboard_interrupt(self, monkeypatch, patched_config):
        def interrupt(config, path):
            raise KeyboardInterrupt

        monkeypatch.setattr(entry, "run_app", interrupt)
        assert entry.main([]) == 0

    def test_error_reported(self, monkeypatch, patched_config, capsys):
        def fail(config, path):
            raise RuntimeError("boom")

        monkeypatch.setattr(entry, "run_app", fail)
        assert entry.main([]) == 1
        assert "Error: boom" in capsys.readouterr().err
