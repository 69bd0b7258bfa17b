"""Batch conversion of markdown files to HTML."""

import logging
from pathlib import Path
from typing import Optional

from mdmath.core.errors import MathStoreError
from mdmath.core.parser import load_document
from mdmath.exporters.html import HTMLExporter
from mdmath.exporters.markdown import RenderOptions
from mdmath.progress import Outcome, ProgressHandler

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


def discover_files(source: Path) -> list[Path]:
    """
    discovers markdown files from source path.

    Args:
        source: path to a markdown file or a directory

    Returns:
        list of paths to markdown files

    Raises:
        FileNotFoundError: if source doesn't exist
    """
    if not source.exists():
        raise FileNotFoundError(f"Source not found: {source}")

    if source.is_file():
        return [source] if source.suffix.lower() in MARKDOWN_SUFFIXES else []

    if source.is_dir():
        return sorted(
            path
            for path in source.iterdir()
            if path.is_file() and path.suffix.lower() in MARKDOWN_SUFFIXES
        )

    return []


def convert_files(
    source: Path,
    output_dir: Optional[Path] = None,
    dry_run: bool = False,
    overwrite: bool = False,
    standalone: bool = True,
    options: Optional[RenderOptions] = None,
    quiet: bool = False,
    progress: bool = False,
) -> int:
    """
    renders markdown files from source to HTML.

    Args:
        source: path to a markdown file or a directory
        output_dir: directory for HTML files (defaults to each file's directory)
        dry_run: if True, don't write anything
        overwrite: if True, replace existing HTML files
        standalone: if True, write full pages loading MathJax
        options: render options
        quiet: if True, suppress non-error output
        progress: if True, show progress bar

    Returns:
        exit code (0 success, 1 partial failure)
    """
    with ProgressHandler(quiet=quiet, show_progress=progress) as handler:
        handler.start()

        files = discover_files(source)
        if not files:
            handler.log_info(f"No markdown files found in {source}")
            return 0

        handler.log_info(f"Found {len(files)} markdown file(s) to render")
        handler.set_total(len(files))

        exporter = HTMLExporter(options=options, standalone=standalone)

        for file_path in files:
            _convert_file(file_path, exporter, output_dir, dry_run, overwrite, handler)

        summary = handler.finish()

        if summary.failed > 0:
            return 1
        return 0


def _convert_file(
    file_path: Path,
    exporter: HTMLExporter,
    output_dir: Optional[Path],
    dry_run: bool,
    overwrite: bool,
    handler: ProgressHandler,
) -> None:
    """renders a single file and records its outcome with handler."""
    try:
        document = load_document(file_path)
        output_path = exporter.export(
            document,
            output_dir or file_path.parent,
            dry_run=dry_run,
            overwrite=overwrite,
        )
    except (OSError, UnicodeDecodeError, MathStoreError) as e:
        handler.record(file_path, Outcome.FAILED, e)
        return

    if output_path is None:
        handler.record(file_path, Outcome.SKIPPED)
        return

    logger.debug("Rendered %s -> %s", file_path, output_path)
    handler.record(file_path, Outcome.RENDERED)
