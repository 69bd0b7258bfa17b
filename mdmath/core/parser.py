"""Loads markdown documents from disk."""

import re
from pathlib import Path

from mdmath.core.models import Document

TITLE_PATTERN = re.compile(r"^#[ \t]+(.+?)[ \t#]*$", re.MULTILINE)


def load_document(path: Path) -> Document:
    """
    Load a markdown document.

    Args:
        path: markdown file, read as UTF-8

    Returns:
        Document titled by its first level-1 heading, or by the file stem
    """
    text = path.read_text(encoding="utf-8")
    return Document(path=path, title=extract_title(text, path.stem), text=text)


def extract_title(text: str, default: str) -> str:
    """Return the first level-1 ATX heading in text, or default."""
    match = TITLE_PATTERN.search(text)
    return match.group(1) if match else default
