"""console output and progress display for batch rendering."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
)


class Outcome(Enum):
    """result of rendering one file."""

    RENDERED = "rendered"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class RunSummary:
    """per-run counts of file outcomes."""

    rendered: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        """number of files recorded."""
        return self.rendered + self.skipped + self.failed

    def add(self, outcome: Outcome) -> None:
        """counts one outcome."""
        setattr(self, outcome.value, getattr(self, outcome.value) + 1)

    def describe(self) -> str:
        """one-line summary for the console."""
        return (
            f"Processed {self.total} file(s): {self.rendered} rendered, "
            f"{self.skipped} skipped, {self.failed} failed"
        )


class ProgressHandler:
    """
    reports per-file outcomes of a batch run.

    With show_progress, one transient rich progress display is used: it
    spins while files are discovered and becomes a bar once the total is
    known. Errors are always printed; info and the summary respect quiet.
    """

    def __init__(self, quiet: bool = False, show_progress: bool = False) -> None:
        self.quiet = quiet
        self.show_progress = show_progress
        self.summary = RunSummary()
        self._console = Console(stderr=True)
        self._progress: Optional[Progress] = None
        self._task_id: Optional[TaskID] = None

    def __enter__(self) -> "ProgressHandler":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[object],
    ) -> None:
        self._stop()

    def start(self) -> None:
        """shows a spinner while markdown files are discovered."""
        if not self.show_progress:
            return

        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TextColumn("{task.fields[name]}"),
            console=self._console,
            transient=True,
        )
        self._progress.start()
        self._task_id = self._progress.add_task(
            "Discovering markdown files...", total=None, name=""
        )

    def set_total(self, total: int) -> None:
        """turns the spinner into a bar over total files."""
        if self._progress is None or self._task_id is None:
            return

        self._progress.update(self._task_id, description="Rendering", total=total)

    def record(
        self, path: Path, outcome: Outcome, error: Optional[BaseException] = None
    ) -> None:
        """counts the outcome for path and reports it."""
        self.summary.add(outcome)

        if outcome is Outcome.FAILED:
            self.log_error(f"Failed: {path.name}: {error}")
        elif outcome is Outcome.SKIPPED:
            self.log_info(f"Skipped {path.name}: output exists")

        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, advance=1, name=path.name)

    def log_error(self, message: str) -> None:
        """prints error message (always shown, even in quiet mode)."""
        self._console.print(f"[red]ERROR:[/red] {message}")

    def log_info(self, message: str) -> None:
        """prints info message (only when not quiet and progress disabled)."""
        if self.quiet or self.show_progress:
            return

        self._console.print(message)

    def finish(self) -> RunSummary:
        """stops progress, prints the summary unless quiet and returns it."""
        self._stop()
        if not self.quiet:
            self._console.print(self.summary.describe())
        return self.summary

    def _stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task_id = None
