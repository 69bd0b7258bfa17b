"""tests for progress module."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from rich.console import Console

from mdmath.progress import Outcome, ProgressHandler, RunSummary


def test_run_summary_counts_outcomes() -> None:
    """RunSummary counts each outcome separately."""
    summary = RunSummary()
    summary.add(Outcome.RENDERED)
    summary.add(Outcome.RENDERED)
    summary.add(Outcome.SKIPPED)
    summary.add(Outcome.FAILED)

    assert (summary.rendered, summary.skipped, summary.failed) == (2, 1, 1)
    assert summary.total == 4
    assert summary.describe() == (
        "Processed 4 file(s): 2 rendered, 1 skipped, 1 failed"
    )


def test_progress_handler_defaults() -> None:
    """ProgressHandler is verbose, bar-less and starts with an empty summary."""
    handler = ProgressHandler()

    assert handler.quiet is False
    assert handler.show_progress is False
    assert handler.summary.total == 0


def test_start_does_nothing_when_progress_disabled() -> None:
    """no progress display is created unless show_progress is set."""
    with patch("mdmath.progress.Progress") as mock_progress_class:
        handler = ProgressHandler(show_progress=False, quiet=True)
        handler.start()
        handler.set_total(3)
        handler.record(Path("a.md"), Outcome.RENDERED)

        mock_progress_class.assert_not_called()
        assert handler.summary.rendered == 1


def test_set_total_turns_spinner_into_bar() -> None:
    """one display is reused: set_total gives the discovery task a total."""
    with patch("mdmath.progress.Progress") as mock_progress_class:
        mock_progress = MagicMock()
        mock_progress_class.return_value = mock_progress
        mock_progress.add_task.return_value = 7

        handler = ProgressHandler(show_progress=True)
        handler.start()
        handler.set_total(4)

        mock_progress_class.assert_called_once()
        mock_progress.update.assert_called_once_with(
            7, description="Rendering", total=4
        )


def test_record_advances_bar_with_file_name() -> None:
    """each recorded file advances the bar by one."""
    with patch("mdmath.progress.Progress") as mock_progress_class:
        mock_progress = MagicMock()
        mock_progress_class.return_value = mock_progress
        mock_progress.add_task.return_value = 7

        handler = ProgressHandler(show_progress=True)
        handler.start()
        handler.record(Path("docs/notes.md"), Outcome.RENDERED)

        mock_progress.update.assert_called_once_with(7, advance=1, name="notes.md")


def test_exit_stops_progress() -> None:
    """leaving the context stops a running progress display."""
    with patch("mdmath.progress.Progress") as mock_progress_class:
        mock_progress = MagicMock()
        mock_progress_class.return_value = mock_progress

        with ProgressHandler(show_progress=True) as handler:
            handler.start()

        mock_progress.stop.assert_called_once()


def test_record_failure_prints_error_even_when_quiet() -> None:
    """failures are always printed with the file name and error."""
    with patch.object(Console, "print") as mock_print:
        handler = ProgressHandler(quiet=True)
        handler.record(Path("bad.md"), Outcome.FAILED, ValueError("broken"))

        mock_print.assert_called_once()
        message = mock_print.call_args[0][0]
        assert "bad.md" in message
        assert "broken" in message
        assert handler.summary.failed == 1


def test_record_skip_prints_info() -> None:
    """skipped files are reported as info."""
    with patch.object(Console, "print") as mock_print:
        ProgressHandler().record(Path("old.md"), Outcome.SKIPPED)

        assert "Skipped old.md" in mock_print.call_args[0][0]


def test_log_info_skips_when_quiet_or_progress() -> None:
    """info output is suppressed in quiet and progress modes."""
    with patch.object(Console, "print") as mock_print:
        ProgressHandler(quiet=True).log_info("info")
        ProgressHandler(show_progress=True).log_info("info")

        mock_print.assert_not_called()


def test_finish_prints_and_returns_summary() -> None:
    """finish prints the run summary and returns it."""
    with patch.object(Console, "print") as mock_print:
        handler = ProgressHandler()
        handler.summary.add(Outcome.RENDERED)
        handler.summary.add(Outcome.SKIPPED)

        summary = handler.finish()

        assert summary is handler.summary
        assert "1 rendered, 1 skipped, 0 failed" in mock_print.call_args[0][0]


def test_finish_skips_summary_when_quiet() -> None:
    """finish prints nothing in quiet mode."""
    with patch.object(Console, "print") as mock_print:
        ProgressHandler(quiet=True).finish()

        mock_print.assert_not_called()
