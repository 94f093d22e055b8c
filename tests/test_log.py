"""Tests for logging setup."""

from __future__ import annotations

import logging
import threading

import pytest

from userdirs.log import _StderrHandler, get_logger, setup_logging


@pytest.fixture()
def _caplog_userdirs(caplog):
    """Attach caplog to the ``userdirs`` logger, which stops propagation once set up."""
    setup_logging()
    root = logging.getLogger("userdirs")
    root.addHandler(caplog.handler)
    yield
    root.removeHandler(caplog.handler)


class TestGetLogger:
    def test_child_of_userdirs(self):
        log = get_logger("resolver")
        assert log.name == "userdirs.resolver"
        assert log.parent is not None
        assert log.parent.name == "userdirs"


class TestSetupLogging:
    def test_idempotent(self):
        root = logging.getLogger("userdirs")
        setup_logging()
        count = len(root.handlers)
        setup_logging()
        assert len(root.handlers) == count
        assert root.propagate is False

    def test_concurrent_calls_attach_one_handler(self):
        threads = [threading.Thread(target=setup_logging) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        root = logging.getLogger("userdirs")
        assert sum(isinstance(h, _StderrHandler) for h in root.handlers) == 1

    def test_handler_follows_current_stderr(self, capsys):
        setup_logging()
        get_logger("streamtest").warning("to stderr")
        assert "[streamtest] to stderr" in capsys.readouterr().err

    def test_verbose_sets_debug(self):
        setup_logging(verbose=True)
        assert logging.getLogger("userdirs").level == logging.DEBUG
        setup_logging()
        assert logging.getLogger("userdirs").level == logging.WARNING


class TestOutput:
    @pytest.mark.usefixtures("_caplog_userdirs")
    def test_tagged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="userdirs.tagtest"):
            get_logger("tagtest").warning("hello")
        assert "[tagtest] hello" in caplog.text
