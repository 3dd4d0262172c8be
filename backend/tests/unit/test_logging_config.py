"""
Unit tests for logging setup, formatters and the file handler fallback.
"""

import json
import logging

import pytest

from hr_app.core.logging_config import ConsoleFormatter, JSONFormatter, setup_logging

pytestmark = pytest.mark.logging


def _record(msg="hello", level=logging.INFO, **extra):
    record = logging.LogRecord("hr_app.test", level, __file__, 10, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_context():
    payload = json.loads(JSONFormatter().format(_record(context={"employee_id": 1})))

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["context"] == {"employee_id": 1}


def test_console_formatter_leaves_record_untouched():
    record = _record()

    output = ConsoleFormatter("%(levelname)s %(message)s").format(record)

    assert "hello" in output
    assert record.levelname == "INFO"


def test_file_handlers_write_json(tmp_path):
    setup_logging(log_level="INFO", log_to_file=True, log_dir=tmp_path)

    logging.getLogger("hr_app.test").error("boom")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert (tmp_path / "app.log").exists()
    lines = (tmp_path / "hr_app_errors.log").read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["message"] == "boom"


def test_unwritable_log_dir_falls_back_to_console(tmp_path, capsys):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x")

    setup_logging(log_level="INFO", log_to_file=True, log_dir=blocker / "logs")

    root_handlers = logging.getLogger().handlers
    assert len(root_handlers) == 1
    assert "Falling back to console-only logging" in capsys.readouterr().out


def test_requests_get_request_id_header(client):
    response = client.get("/api/employees/health", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"
