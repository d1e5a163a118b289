"""Console startup and diagnostics logging tests."""

from __future__ import annotations

import io
import logging
import unittest
from unittest import mock

from listfiles.console import DiagnosticFormatter, configure_logging, prepare_console


class ConsoleTests(unittest.TestCase):
    def tearDown(self) -> None:
        logger = logging.getLogger("listfiles")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    def test_diagnostics_use_warning_and_error_prefixes(self) -> None:
        stream = io.StringIO()
        configure_logging(stream=stream)
        logging.getLogger("listfiles.file_tree_model.fs").warning("disk vanished")
        logging.getLogger("listfiles.output").error("Cannot create output file - x")
        self.assertEqual(stream.getvalue(), "Warning: disk vanished\nError: Cannot create output file - x\n")

    def test_debug_only_when_verbose(self) -> None:
        stream = io.StringIO()
        configure_logging(stream=stream)
        logging.getLogger("listfiles.x").debug("quiet")
        self.assertEqual(stream.getvalue(), "")

        verbose_stream = io.StringIO()
        configure_logging(verbose=True, stream=verbose_stream)
        logging.getLogger("listfiles.x").debug("loud")
        self.assertEqual(verbose_stream.getvalue(), "Debug: loud\n")
        self.assertEqual(stream.getvalue(), "")

    def test_repeated_configuration_does_not_stack_handlers(self) -> None:
        configure_logging(stream=io.StringIO())
        configure_logging(stream=io.StringIO())
        handlers = [h for h in logging.getLogger("listfiles").handlers if isinstance(h.formatter, DiagnosticFormatter)]
        self.assertEqual(len(handlers), 1)

    def test_prepare_console_reconfigures_streams_for_utf8_with_escaped_bytes(self) -> None:
        stdout = mock.Mock(encoding="cp1252", errors="strict")
        stderr = mock.Mock(encoding="utf-8", errors="surrogateescape")
        with mock.patch("sys.stdout", stdout), mock.patch("sys.stderr", stderr):
            prepare_console()
        stdout.reconfigure.assert_called_once_with(encoding="utf-8", errors="surrogateescape")
        stderr.reconfigure.assert_not_called()

    def test_prepare_console_relaxes_strict_utf8_streams(self) -> None:
        stdout = mock.Mock(encoding="UTF-8", errors="strict")
        with mock.patch("sys.stdout", stdout), mock.patch("sys.stderr", io.StringIO()):
            prepare_console()
        stdout.reconfigure.assert_called_once_with(encoding="utf-8", errors="surrogateescape")


if __name__ == "__main__":
    unittest.main()
