import sys

import pytest

from clickoverlay import logging_utils


def test_default_log_dir_respects_xdg_state_home(monkeypatch, tmp_path):
    if sys.platform == "win32":
        pytest.skip("XDG state paths apply to non-Windows platforms")

    state_home = tmp_path / "state"
    monkeypatch.setenv("XDG_STATE_HOME", str(state_home))

    assert logging_utils._default_log_dir() == state_home / "clickoverlay" / "logs"


def test_configure_logging_skips_file_logging_on_error(monkeypatch, tmp_path):
    def _raise(*_args, **_kwargs):
        raise PermissionError("blocked")

    monkeypatch.setattr(logging_utils.Path, "mkdir", _raise)

    # Should not raise even if the log directory cannot be created.
    logging_utils.configure_logging(log_dir=tmp_path / "logs")


def test_component_is_bound(capsys):
    logging_utils.configure_logging(log_dir=None, level="INFO")
    logging_utils.get_logger("indicators.test").info("hello overlay")
    captured = capsys.readouterr()
    assert "indicators.test" in captured.out
    assert "hello overlay" in captured.out


def test_file_sink_written(tmp_path):
    logging_utils.configure_logging(log_dir=tmp_path, level="INFO")
    logging_utils.get_logger("file").info("to disk")
    logging_utils.logger.complete()
    assert "to disk" in (tmp_path / "clickoverlay.log").read_text(encoding="utf-8")
