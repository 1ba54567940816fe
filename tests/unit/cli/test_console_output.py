"""Unit tests for cli.output module."""

from unittest.mock import patch

from umbraco_builder.cli.models import RunSummary
from umbraco_builder.cli.output import OutputHandler


class TestOutputHandler:
    """Test cases for OutputHandler messages."""

    def test_no_color(self):
        """no_color=True disables colors."""
        handler = OutputHandler(no_color=True)

        assert handler.console.no_color is True

    def test_info_hidden_at_verbosity_0(self):
        """info() prints nothing at verbosity 0."""
        handler = OutputHandler(verbosity=0)

        with patch.object(handler.console, "print") as mock_print:
            handler.info("Provisioning https://umbraco.test")

        mock_print.assert_not_called()

    def test_info_shown_at_verbosity_1(self):
        """info() prints plain text at verbosity 1."""
        handler = OutputHandler(verbosity=1)

        with patch.object(handler.console, "print") as mock_print:
            handler.info("Provisioning https://umbraco.test")

        mock_print.assert_called_once_with("Provisioning https://umbraco.test")

    def test_error_is_red(self):
        """error() prints a red cross."""
        handler = OutputHandler()

        with patch.object(handler.console, "print") as mock_print:
            handler.error("boom")

        mock_print.assert_called_once_with("[red]✗[/red] boom", style="red")


class TestPrintSummary:
    """Test cases for print_summary()."""

    def _printed(self, summary):
        handler = OutputHandler(no_color=True)
        with patch.object(handler.console, "print") as mock_print:
            handler.print_summary(summary)
        return "\n".join(str(call.args[0]) for call in mock_print.call_args_list)

    def test_completed_run(self):
        """A completed run lists its steps and the step count."""
        text = self._printed(RunSummary(completed=["templates", "media"]))

        assert "templates" in text
        assert "Provisioning completed: 2 step(s)" in text

    def test_failed_run(self):
        """A failed run names the failing step."""
        text = self._printed(RunSummary(completed=["templates"], failed="media", error="boom"))

        assert "Provisioning stopped at 'media'" in text

    def test_nothing_run(self):
        """An empty summary says nothing was run."""
        assert "No steps were run" in self._printed(RunSummary())
