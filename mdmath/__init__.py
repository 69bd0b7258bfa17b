"""Markdown to HTML converter that keeps TeX math intact for MathJax."""

import argparse
import logging
from pathlib import Path
from typing import Optional

from mdmath.convert import convert_files
from mdmath.exporters.markdown import RenderOptions

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for mdmath CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 1 partial failure, 2 fatal error)
    """
    parser = argparse.ArgumentParser(
        description="Render markdown with TeX math to HTML for MathJax"
    )
    parser.add_argument(
        "source",
        help="markdown file or directory of markdown files",
    )
    parser.add_argument(
        "output_dir",
        nargs="?",
        default=None,
        help="directory for HTML files (default: next to each source file)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="render files but don't write anything",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="replace existing HTML files",
    )
    parser.add_argument(
        "--fragment",
        action="store_true",
        help="write HTML body fragments instead of standalone pages",
    )
    parser.add_argument(
        "--no-mathjax",
        action="store_true",
        help="render math as ordinary markdown text",
    )
    parser.add_argument(
        "--allow-html",
        action="store_true",
        help="pass raw HTML in the markdown through",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="show progress bar",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="suppress non-error output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )

    args = parser.parse_args(argv)

    # configures logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    # validates source path exists
    source_path = Path(args.source)
    if not source_path.exists():
        logger.error("Source not found: %s", args.source)
        return 2

    options = RenderOptions(
        mathjax=not args.no_mathjax,
        allow_html=args.allow_html,
    )

    try:
        return convert_files(
            source=source_path,
            output_dir=Path(args.output_dir) if args.output_dir else None,
            dry_run=args.dry_run,
            overwrite=args.overwrite,
            standalone=not args.fragment,
            options=options,
            quiet=args.quiet,
            progress=args.progress,
        )
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("Fatal error: %s", e)
        return 2
