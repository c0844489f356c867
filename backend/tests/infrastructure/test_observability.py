"""Observability — resource context on log records, JSON formatter and setup."""

import json
import logging

from jsonapi_resource.core.errors import (
    ErrorContext, ResourceErrorKind, ResourceValidationError,
)
from jsonapi_resource.infrastructure.observability import (
    JSONFormatter, error_log_extra, setup_logging,
)


def _record(**extra):
    record = logging.LogRecord(
        "jsonapi_resource.test", logging.WARNING, __file__, 1, "bad %s", ("input",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "jsonapi_resource.test"
    assert log["message"] == "bad input"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(resource_type="articles", error_code="FIELD_NAME_CONFLICT", field="title", other="x"),
    ))
    assert log["resource_type"] == "articles"
    assert log["error_code"] == "FIELD_NAME_CONFLICT"
    assert log["field"] == "title"
    assert "other" not in log
    assert "resource_id" not in log


def test_setup_logging_installs_handler():
    previous_level = logging.root.level
    handler = setup_logging("debug", "json")
    try:
        assert handler in logging.root.handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)


def test_setup_logging_text_format():
    previous_level = logging.root.level
    handler = setup_logging("INFO", "text")
    try:
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)


def test_error_log_extra_reads_error_context():
    error = ResourceValidationError(
        "conflict", ResourceErrorKind.FIELD_NAME_CONFLICT, {"field": "author"},
        context=ErrorContext(resource_type="articles", resource_id="1"),
    )
    assert error_log_extra(error) == {
        "error_code": "FIELD_NAME_CONFLICT",
        "resource_type": "articles",
        "resource_id": "1",
        "field": "author",
    }


def test_error_log_extra_keywords_override_context():
    error = ResourceValidationError("no type", ResourceErrorKind.TYPE_REQUIRED)
    extra = error_log_extra(error, resource_type="people", path="/api/v1/people")
    assert extra["resource_type"] == "people"
    assert extra["path"] == "/api/v1/people"
    assert extra["resource_id"] is None


def test_text_format_fills_missing_resource_type():
    previous_level = logging.root.level
    handler = setup_logging("INFO", "text")
    try:
        line = handler.formatter.format(_record())
        assert "[-]: bad input" in line
        assert "[articles]" in handler.formatter.format(_record(resource_type="articles"))
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)
