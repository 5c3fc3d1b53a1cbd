import json
import logging
import sys
import unittest

from deregex.utils.logging_utils import (
    TRACE_LEVEL,
    JSONFormatter,
    configure_logging,
)


def _record(**extra):
    record = logging.LogRecord(
        name="deregex.core.deserializer",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=10,
        msg="Deserialized match",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter(unittest.TestCase):
    def test_format_structure(self):
        formatter = JSONFormatter()

        data = json.loads(formatter.format(_record()))

        self.assertEqual(data["message"], "Deserialized match")
        self.assertEqual(data["level"], "DEBUG")
        self.assertEqual(data["logger"], "deregex.core.deserializer")
        self.assertEqual(data["line"], 10)
        self.assertTrue("timestamp" in data)

    def test_extra_fields(self):
        formatter = JSONFormatter()

        data = json.loads(
            formatter.format(_record(target="Dimension", fields=["height", "width"]))
        )

        self.assertEqual(data["target"], "Dimension")
        self.assertEqual(data["fields"], ["height", "width"])

    def test_non_json_values_are_stringified(self):
        formatter = JSONFormatter()

        data = json.loads(formatter.format(_record(value=object)))

        self.assertIn("object", data["value"])

    def test_exception_info(self):
        formatter = JSONFormatter()
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        data = json.loads(formatter.format(record))

        self.assertIn("ValueError: boom", data["exception"])


class TestConfigureLogging(unittest.TestCase):
    def setUp(self):
        self.package_logger = logging.getLogger("deregex")
        self.root_handlers = list(logging.getLogger().handlers)

    def tearDown(self):
        for handler in list(self.package_logger.handlers):
            self.package_logger.removeHandler(handler)
        self.package_logger.setLevel(logging.NOTSET)
        self.package_logger.propagate = True

    def test_json_handler_is_attached_to_package_logger(self):
        handler = configure_logging(level="debug", log_format="json")

        self.assertIn(handler, self.package_logger.handlers)
        self.assertIsInstance(handler.formatter, JSONFormatter)
        self.assertEqual(self.package_logger.level, logging.DEBUG)
        self.assertFalse(self.package_logger.propagate)
        self.assertEqual(logging.getLogger().handlers, self.root_handlers)

    def test_human_format_uses_rich(self):
        from rich.logging import RichHandler

        handler = configure_logging(log_format="human", propagate=True)

        self.assertIsInstance(handler, RichHandler)
        self.assertTrue(self.package_logger.propagate)

    def test_reconfiguring_replaces_previous_handler(self):
        first = configure_logging(log_format="json")
        second = configure_logging(log_format="human")

        self.assertNotIn(first, self.package_logger.handlers)
        self.assertIn(second, self.package_logger.handlers)

    def test_foreign_handlers_are_kept(self):
        foreign = logging.NullHandler()
        self.package_logger.addHandler(foreign)

        configure_logging(log_format="json")
        configure_logging(log_format="json")

        self.assertIn(foreign, self.package_logger.handlers)
        self.assertEqual(len(self.package_logger.handlers), 2)

    def test_trace_level(self):
        configure_logging(level="trace", log_format="json")

        self.assertEqual(self.package_logger.level, TRACE_LEVEL)
        self.assertEqual(logging.getLevelName(TRACE_LEVEL), "TRACE")

    def test_unknown_level_defaults_to_info(self):
        configure_logging(level="verbose", log_format="json")

        self.assertEqual(self.package_logger.level, logging.INFO)

    def test_unknown_format_is_rejected(self):
        with self.assertRaises(ValueError):
            configure_logging(log_format="xml")
