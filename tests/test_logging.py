"""Tests for log formatting and request correlation."""

from __future__ import annotations

import json
import logging
from io import StringIO

from video_mock.core.config import LogSettings
from video_mock.core.logging import (
    JsonFormatter,
    PlainFormatter,
    RequestIdFilter,
    clear_request_id,
    configure_logging,
    set_request_id,
)


def _logger_with(formatter: logging.Formatter, name: str) -> tuple[logging.Logger, StringIO]:
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.handlers.clear()
    logger.propagate = False

    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger, stream


def test_json_formatter_includes_extras_and_timestamp():
    logger, stream = _logger_with(JsonFormatter(), "test_json_extras")

    logger.info(
        "video.redirect",
        extra={"endpoint": "video-5", "video_id": 5, "attempt": 3, "video_url": "https://x/"},
    )

    data = json.loads(stream.getvalue())
    assert data["message"] == "video.redirect"
    assert data["level"] == "info"
    assert data["endpoint"] == "video-5"
    assert data["attempt"] == 3
    assert data["video_url"] == "https://x/"
    assert "timestamp" in data


def test_json_formatter_attaches_request_id_from_context():
    logger, stream = _logger_with(JsonFormatter(), "test_json_request_id")

    set_request_id("req-123")
    try:
        logger.info("video.retry_later")
    finally:
        clear_request_id()

    assert json.loads(stream.getvalue())["request_id"] == "req-123"


def test_plain_formatter_appends_key_values():
    logger, stream = _logger_with(PlainFormatter(), "test_plain")

    logger.info("video.retry_later", extra={"video_id": 8, "attempt": 2})

    line = stream.getvalue().strip()
    assert "video.retry_later" in line
    assert "video_id=8" in line
    assert "attempt=2" in line


def test_configure_logging_to_file(tmp_path):
    log_file = tmp_path / "logs" / "mock.log"
    root = logging.getLogger()
    previous_handlers = list(root.handlers)
    previous_level = root.level

    try:
        configure_logging(LogSettings(output="file", file_path=str(log_file), max_bytes=1024))
        logging.getLogger("test_file_output").warning("video.invalid_endpoint", extra={"path": "/foo"})
        for handler in root.handlers:
            handler.flush()
            handler.close()
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)

    data = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert data["path"] == "/foo"
