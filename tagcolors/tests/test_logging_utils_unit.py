from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

from tagcolors.core import logging_utils
from tagcolors.core.logging_utils import log_throttled, reset_throttle


def test_logs_first_message_for_key() -> None:
    logger = MagicMock()

    assert log_throttled(logger, "k", interval_s=60, level=logging.WARNING, msg="hello") is True
    logger.log.assert_called_once_with(logging.WARNING, "hello")


def test_suppresses_repeat_within_interval() -> None:
    logger = MagicMock()

    with patch.object(logging_utils.time, "monotonic", side_effect=[100.0, 110.0]):
        assert log_throttled(logger, "k", interval_s=60, level=logging.WARNING, msg="a") is True
        assert log_throttled(logger, "k", interval_s=60, level=logging.WARNING, msg="b") is False

    assert logger.log.call_count == 1


def test_logs_again_after_interval() -> None:
    logger = MagicMock()

    with patch.object(logging_utils.time, "monotonic", side_effect=[100.0, 161.0]):
        log_throttled(logger, "k", interval_s=60, level=logging.WARNING, msg="a")
        assert log_throttled(logger, "k", interval_s=60, level=logging.WARNING, msg="b") is True

    assert logger.log.call_count == 2


def test_keys_are_independent() -> None:
    logger = MagicMock()

    log_throttled(logger, "a", interval_s=60, level=logging.INFO, msg="a")
    log_throttled(logger, "b", interval_s=60, level=logging.INFO, msg="b")

    assert logger.log.call_count == 2


def test_passes_exception_info() -> None:
    logger = MagicMock()
    exc = ValueError("boom")

    log_throttled(logger, "k", interval_s=60, level=logging.ERROR, msg="failed", exc=exc)

    logger.log.assert_called_once_with(logging.ERROR, "failed", exc_info=exc)


def test_reset_single_key() -> None:
    logger = MagicMock()

    log_throttled(logger, "k", interval_s=60, level=logging.INFO, msg="a")
    reset_throttle("k")

    assert log_throttled(logger, "k", interval_s=60, level=logging.INFO, msg="b") is True
