from __future__ import annotations

import logging

import pytest

from snapgrid.runtime.errors import RECOVERABLE_COLLABORATOR_ERRORS, log_recoverable


def test_log_recoverable_attaches_exception(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("test.snapgrid.recoverable")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    try:
        raise RuntimeError("surface gone")
    except RECOVERABLE_COLLABORATOR_ERRORS:
        log_recoverable(logger, "collaborator_failed")

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.DEBUG
    assert record.exc_info is not None
    assert "surface gone" in caplog.text


def test_recoverable_set_excludes_programming_errors() -> None:
    assert not issubclass(ZeroDivisionError, RECOVERABLE_COLLABORATOR_ERRORS)
    assert issubclass(KeyError, RECOVERABLE_COLLABORATOR_ERRORS)
