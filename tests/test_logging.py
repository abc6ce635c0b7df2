import json
import logging

import pytest

from pxtext.logging import (
    AUDIT,
    ConsoleFormatter,
    JsonFormatter,
    audit,
    get_logger,
    setup_logging,
    trace,
)


def _record(event="demo.event", **ctx):
    log = get_logger("test")
    record = log.makeRecord(log.name, AUDIT, "", 0, "", (), None)
    record.event = event
    record.ctx = ctx
    return record


def test_get_logger_namespace():
    assert get_logger("renderer").name == "pxtext.renderer"


def test_json_formatter():
    entry = json.loads(JsonFormatter().format(_record(count=2)))
    assert entry["level"] == "AUDIT"
    assert entry["src"] == "pxtext.test"
    assert entry["event"] == "demo.event"
    assert entry["ctx"] == {"count": 2}
    assert entry["ts"].endswith("Z")


def test_console_formatter_truncates_context():
    line = ConsoleFormatter().format(_record(text="x" * 200))
    assert "demo.event" in line
    assert "[pxtext.test]" in line
    assert "x" * 80 + "..." in line
    assert "x" * 81 not in line


def test_audit_emits_structured_record(caplog):
    caplog.set_level(logging.DEBUG, logger="pxtext")
    audit("thing.happened", logger=get_logger("test"), answer=42)
    record = caplog.records[-1]
    assert record.levelno == AUDIT
    assert record.event == "thing.happened"
    assert record.ctx == {"answer": 42}


def test_audit_respects_level(caplog):
    caplog.set_level(logging.ERROR, logger="pxtext")
    audit("quiet.event", logger=get_logger("test"))
    assert not [r for r in caplog.records if getattr(r, "event", "") == "quiet.event"]


class Refused(Exception):
    pass


@trace(logger_name="test")
def _double(x):
    return [x, x]


@trace(logger_name="test", expected=(Refused,))
def _refuse(kind):
    if kind == "expected":
        raise Refused("nope")
    raise KeyError(kind)


def _events(caplog):
    return [(r.levelno, r.event) for r in caplog.records if hasattr(r, "event")]


def test_trace_logs_entry_and_exit(caplog):
    caplog.set_level(logging.DEBUG, logger="pxtext")
    assert _double(3) == [3, 3]
    assert _events(caplog) == [(logging.DEBUG, "_double.enter"), (logging.INFO, "_double.done")]
    done = caplog.records[-1]
    assert done.ctx == {"result": "list[2]"}
    assert done.duration_ms >= 0


def test_trace_expected_exception_is_quiet(caplog):
    caplog.set_level(logging.DEBUG, logger="pxtext")
    with pytest.raises(Refused):
        _refuse("expected")
    rejected = caplog.records[-1]
    assert rejected.levelno == logging.DEBUG
    assert rejected.event == "_refuse.rejected"
    assert rejected.ctx["reason"] == "Refused"
    assert not rejected.exc_info


def test_trace_unexpected_exception_logs_error(caplog):
    caplog.set_level(logging.DEBUG, logger="pxtext")
    with pytest.raises(KeyError):
        _refuse("other")
    error = caplog.records[-1]
    assert error.levelno == logging.ERROR
    assert error.event == "_refuse.error"
    assert error.exc_info is not None


def test_setup_logging_writes_json_file(tmp_path):
    log_file = tmp_path / "pxtext.log"
    setup_logging(level="AUDIT", log_file=str(log_file))
    audit("file.event", logger=get_logger("test"), n=1)
    for handler in logging.getLogger("pxtext").handlers:
        handler.flush()

    lines = log_file.read_text().splitlines()
    assert json.loads(lines[-1])["event"] == "file.event"
    assert logging.getLogger("pxtext").level == AUDIT
