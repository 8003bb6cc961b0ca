import logging

import pytest

from wndframe import logger
from wndframe.logger import DuplicateFilter, Level, LoggerType


@pytest.fixture
def log_path(tmp_path):
    path = tmp_path / "Framework.log"
    logger.init(str(path))
    yield path
    for kind in LoggerType:
        lg = logging.getLogger(kind.value)
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()


def _lines(path):
    return path.read_text(encoding="utf-8").splitlines()


class _Collect(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def _record(name, msg, created):
    return logging.makeLogRecord({"name": name, "msg": msg, "created": created})


def test_app_message_goes_to_file(log_path):
    logger.info("hello")
    lines = _lines(log_path)
    assert len(lines) == 1
    assert lines[0].endswith("[info] APP: hello")


def test_core_levels_in_file(log_path):
    logger.core_trace("t")
    logger.core_critical("boom")
    lines = _lines(log_path)
    assert lines[0].endswith("CORE: t")
    assert lines[1].endswith("[critical] CORE: boom")


def test_arguments_are_formatted(log_path):
    logger.log(LoggerType.APP, Level.ERROR, "Enter pressed on window {}.", 1)
    assert _lines(log_path)[0].endswith("APP: Enter pressed on window 1.")


def test_positional_format_fields(log_path):
    logger.log(LoggerType.APP, Level.TRACE, "Framebuffer Size Changed: {0}_{1}", 640, 480)
    assert _lines(log_path)[0].endswith("Framebuffer Size Changed: 640_480")


def test_each_shortcut_writes_one_line(log_path):
    shortcuts = [
        logger.core_trace, logger.core_info, logger.core_warn,
        logger.core_error, logger.core_critical,
        logger.info, logger.warn, logger.error, logger.critical,
    ]
    for i, fn in enumerate(shortcuts):
        fn("msg {}", i)
    lines = _lines(log_path)
    assert len(lines) == len(shortcuts)
    assert all(line.endswith(f"msg {i}") for i, line in enumerate(lines))


def test_log_once_per_call_site(log_path):
    for _ in range(3):
        logger.log_once("Once")
    logger.log_once("Once")
    lines = [line for line in _lines(log_path) if line.endswith("LOG: Once")]
    assert len(lines) == 1


def test_without_duplicates_drops_repeats(log_path):
    for _ in range(4):
        logger.log_without_duplicates("same")
    logger.log_without_duplicates("other")
    lines = _lines(log_path)
    assert sum(line.endswith("LOG: same") for line in lines) == 1
    assert lines[-1].endswith("LOG: other")
    assert any("Skipped 3" in line for line in lines)


def test_filter_drops_within_window():
    f = DuplicateFilter(5)
    assert f.filter(_record("wndframe-test-a", "m", 100.0)) is True
    assert f.filter(_record("wndframe-test-a", "m", 101.0)) is False
    assert f.filter(_record("wndframe-test-a", "m", 105.0)) is False
    assert f.skipped == 2


def test_filter_passes_after_window():
    f = DuplicateFilter(5)
    assert f.filter(_record("wndframe-test-b", "m", 100.0)) is True
    assert f.filter(_record("wndframe-test-b", "m", 105.5)) is True
    assert f.skipped == 0


def test_filter_passes_different_message():
    f = DuplicateFilter(5)
    assert f.filter(_record("wndframe-test-c", "m", 100.0)) is True
    assert f.filter(_record("wndframe-test-c", "n", 100.1)) is True


def test_filter_reports_skipped_count():
    name = "wndframe-test-d"
    collector = _Collect()
    lg = logging.getLogger(name)
    lg.addHandler(collector)
    try:
        f = DuplicateFilter(5)
        f.filter(_record(name, "m", 100.0))
        f.filter(_record(name, "m", 100.5))
        f.filter(_record(name, "m", 101.0))
        assert collector.messages == []
        assert f.filter(_record(name, "n", 102.0)) is True
        assert len(collector.messages) == 1
        assert "Skipped 2" in collector.messages[0]
        assert f.skipped == 0
    finally:
        lg.removeHandler(collector)