"""Diagnostics logging setup tests."""

from __future__ import annotations

import io
import logging
import unittest

from zebrals.diagnostics import LOGGER_NAME, configure_logging


class ConfigureLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(stream=io.StringIO())

    def test_messages_are_written_bare_to_stream(self) -> None:
        stream = io.StringIO()
        configure_logging(stream=stream)
        logging.getLogger(f"{LOGGER_NAME}.listing.collect").warning("Error accessing %s: %s", "x", "boom")
        self.assertEqual(stream.getvalue(), "Error accessing x: boom\n")

    def test_debug_is_hidden_unless_enabled(self) -> None:
        stream = io.StringIO()
        configure_logging(stream=stream)
        logging.getLogger(LOGGER_NAME).debug("quiet")
        self.assertEqual(stream.getvalue(), "")

        configure_logging(debug=True, stream=stream)
        logging.getLogger(LOGGER_NAME).debug("loud")
        self.assertIn("DEBUG zebrals loud", stream.getvalue())

    def test_repeated_configuration_does_not_stack_handlers(self) -> None:
        first = io.StringIO()
        second = io.StringIO()
        configure_logging(stream=first)
        configure_logging(stream=second)
        logging.getLogger(LOGGER_NAME).info("once")
        self.assertEqual(first.getvalue(), "")
        self.assertEqual(second.getvalue(), "once\n")


if __name__ == "__main__":
    unittest.main()
