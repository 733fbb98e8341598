"""Console and null logger behaviour."""

from io import StringIO
import unittest

from rich.console import Console

from sln_post_action.application.ports.services import LoggerPort
from sln_post_action.infrastructure.logging import (
    ConsoleLogger,
    LogContext,
    LogLevel,
    NullLogger,
)


class TestLoggerPort(unittest.TestCase):
    """Test that logger implementations comply with LoggerPort protocol."""

    def test_console_logger_implements_loggerport(self):
        logger = ConsoleLogger()
        self.assertIsInstance(logger, LoggerPort)

    def test_null_logger_implements_loggerport(self):
        logger = NullLogger()
        self.assertIsInstance(logger, LoggerPort)

    def test_loggerport_has_required_methods(self):
        """LoggerPort protocol should define all required methods."""
        required_methods = {"info", "success", "warning", "error", "debug", "verbose"}
        protocol_methods = {
            name for name in dir(LoggerPort) if not name.startswith("_")
        }
        self.assertTrue(required_methods.issubset(protocol_methods))


class TestConsoleLogger(unittest.TestCase):
    """Test ConsoleLogger implementation."""

    def setUp(self):
        self.buffer = StringIO()
        self.console = Console(file=self.buffer, force_terminal=False, width=200)
        self.logger = ConsoleLogger(console=self.console, verbosity=LogLevel.DEBUG)

    def test_initialization(self):
        logger = ConsoleLogger()
        self.assertEqual(logger.verbosity, 0)
        self.assertIsNone(logger._context)
        self.assertEqual(logger.get_stats()["errors"], 0)

    def test_info_logging(self):
        self.logger.info("Adding projects to solution")
        self.assertIn("Adding projects to solution", self.buffer.getvalue())

    def test_success_logging(self):
        self.logger.success("Successfully added project(s)")
        output = self.buffer.getvalue()
        self.assertIn("✓", output)
        self.assertIn("Successfully added project(s)", output)

    def test_warning_logging(self):
        """warning() should output message and increment warning count."""
        self.logger.warning("Warning message")
        self.assertIn("Warning message", self.buffer.getvalue())
        self.assertEqual(self.logger.get_stats()["warnings"], 1)

    def test_error_logging(self):
        """error() should output message and increment error count."""
        self.logger.error("Error message")
        self.assertIn("Error message", self.buffer.getvalue())
        self.assertEqual(self.logger.get_stats()["errors"], 1)

    def test_markup_in_messages_is_not_interpreted(self):
        """Captured command output may contain square brackets."""
        self.logger.info("error [bold]MSB1009[/bold]: project file missing")
        self.assertIn("[bold]MSB1009[/bold]", self.buffer.getvalue())

    def test_debug_logging_with_verbosity(self):
        """debug() should only output when verbosity >= DEBUG."""
        self.logger.debug("Debug message")
        self.assertIn("Debug message", self.buffer.getvalue())

        self.buffer.truncate(0)
        self.buffer.seek(0)
        normal_logger = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        normal_logger.debug("Should not appear")
        normal_logger.verbose("Should not appear either")
        self.assertEqual(self.buffer.getvalue().strip(), "")

    def test_context_prefix_at_debug_level(self):
        self.logger.set_context(action_id="d396686c-de0e-4de6-906d-291cd29fc5de")
        self.logger.info("message")
        self.assertIn("[d396686c] message", self.buffer.getvalue())

    def test_context_management(self):
        self.logger.set_context(action_id="abc", output_path="/out", unknown="x")
        self.assertIsInstance(self.logger._context, LogContext)
        self.assertEqual(self.logger._context.action_id, "abc")
        self.assertEqual(self.logger._context.output_path, "/out")

        self.logger.clear_context()
        self.assertIsNone(self.logger._context)

    def test_final_stats(self):
        self.logger.set_context(action_id="abc")
        self.logger.success("done")
        self.logger.error("bad")
        self.logger.log_final_stats()
        output = self.buffer.getvalue()
        self.assertIn("Finished in", output)
        self.assertIn("Errors: 1", output)

    def test_final_stats_silent_at_normal_verbosity(self):
        logger = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        logger.log_final_stats()
        self.assertEqual(self.buffer.getvalue(), "")

    def test_reset_stats(self):
        self.logger.error("bad")
        self.logger.reset_stats()
        self.assertEqual(self.logger.get_stats(), {"messages": 0, "warnings": 0, "errors": 0})


class TestNullLogger(unittest.TestCase):
    def test_all_methods_are_silent(self):
        logger = NullLogger()
        for method in ("info", "success", "warning", "error", "debug", "verbose"):
            self.assertIsNone(getattr(logger, method)("message"))
