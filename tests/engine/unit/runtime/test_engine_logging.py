from __future__ import annotations

import json
import logging

from engine.api.logging import EngineLoggingConfig, JsonFormatter, get_logger
from engine.runtime.logging import (
    configure_engine_logging,
    setup_engine_logging,
    shutdown_engine_logging,
)


def test_setup_engine_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("ENGINE_LOG_LEVEL", "DEBUG")
        setup_engine_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_engine_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_engine_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_engine_logging_streams_json_to_file(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "logs" / "engine.jsonl"
    try:
        configure_engine_logging(
            EngineLoggingConfig(level_name="INFO", console_format="text", file_path=str(log_file))
        )
        get_logger("test.engine.file").info("hello %s", "file", extra={"machine": "m1"})
        shutdown_engine_logging()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        payload = json.loads(lines[-1])
        assert payload["msg"] == "hello file"
        assert payload["level"] == "INFO"
        assert payload["fields"]["machine"] == "m1"
    finally:
        shutdown_engine_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_json_formatter_serializes_non_json_extras() -> None:
    logger = logging.getLogger("test.engine.json")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.DEBUG,
        fn=__file__,
        lno=1,
        msg="transition",
        args=(),
        exc_info=None,
        extra={"target": object(), "count": 2},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "transition"
    assert payload["fields"]["count"] == 2
    assert payload["fields"]["target"].startswith("<object object")
