# tests/test_logger_utils.py

import io

import pytest

from prefix_autocompleter.utils.logger_utils import Log


def _log(level="DEBUG", **kw):
    buf = io.StringIO()
    return Log(level=level, use_color=False, stream=buf, **kw), buf


def test_line_format():
    log, buf = _log()
    log.info("hello")
    line = buf.getvalue().strip()
    assert line.endswith("INFO    | hello")
    assert line.startswith("[")


def test_level_threshold():
    log, buf = _log(level="WARNING")
    log.debug("quiet")
    log.info("quiet")
    log.warning("loud")
    log.error("louder")
    out = buf.getvalue()
    assert "quiet" not in out
    assert "loud" in out and "louder" in out


def test_warn_alias_and_unknown_level():
    log, _ = _log(level="warn")
    assert log.level == "WARNING"
    with pytest.raises(ValueError):
        Log(level="chatty")


def test_color_codes_when_enabled():
    buf = io.StringIO()
    Log(level="INFO", use_color=True, stream=buf).error("boom")
    assert buf.getvalue().startswith(Log.COLORS["ERROR"])


def test_file_output(tmp_path):
    path = tmp_path / "sub" / "app.log"
    log, _ = _log(path=str(path))
    log.info("to file")
    assert "to file" in path.read_text(encoding="utf-8")


def test_configure_updates_in_place(tmp_path):
    log, buf = _log(level="ERROR")
    log.configure(level="DEBUG", path=str(tmp_path / "x.log"))
    log.debug("now visible")
    assert "now visible" in buf.getvalue()
    log.configure(path="")
    assert log.path is None


def test_time_block_records_elapsed():
    log, buf = _log()
    with log.time_block("work") as t:
        sum(range(1000))
    assert t.elapsed >= 0
    assert "work done" in buf.getvalue()
