from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
forced re-configuration and log file rotation.
"""

import logging
import time
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

import pytest

from unpackedsize.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up root logger handlers before and after each test."""
    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and listener._thread is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)
        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()
        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial, "Handlers were duplicated."


def test_force_reconfigures_level() -> None:
    """TC-02: Verify that force=True replaces handlers and applies the new level."""
    configure_logging(LoggingConfig(level="WARNING"))
    first_listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG"), force=True)
    root = logging.getLogger()

    assert root.level == logging.DEBUG
    assert len(_our_handlers()) == 1
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not first_listener


def test_unknown_level_defaults_to_warning() -> None:
    """TC-03: Verify unknown level names fall back to WARNING."""
    configure_logging(LoggingConfig(level="chatty"))

    assert logging.getLogger().level == logging.WARNING


def test_queue_listener_architecture() -> None:
    """TC-04: Verify that the root logger uses a QueueHandler-based architecture."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    handlers = _our_handlers()

    assert len(handlers) == 1
    assert isinstance(handlers[0], QueueHandler)
    assert isinstance(getattr(root, _QUEUE_LISTENER_ATTR), QueueListener)


def test_no_sinks_installs_nothing() -> None:
    """TC-05: Verify that disabling every sink leaves the root untouched."""
    configure_logging(LoggingConfig(console=False, log_file=None))

    assert _our_handlers() == []


def test_log_rotation(tmp_path: Path) -> None:
    """TC-06: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = get_logger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Give time for the QueueListener to process
    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "test_rotate.log.1").exists(), "Rotation backup file was not created."


def test_unwritable_log_file_falls_back_to_console(tmp_path: Path, capsys) -> None:
    """TC-07: Verify a log path that cannot be opened does not abort configuration."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    configure_logging(LoggingConfig(level="INFO", log_file=str(blocker / "x.log")))

    assert "Cannot open log file" in capsys.readouterr().err
    assert len(_our_handlers()) == 1
