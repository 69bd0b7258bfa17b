"""Data models for documents and math scanning."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Document:
    """Markdown document loaded from disk."""

    path: Path
    title: str
    text: str


@dataclass
class ScanState:
    """State of the span scanner for one document pass."""

    span_start: Optional[int] = None
    fallback_end: Optional[int] = None
    brace_balance: int = 0  # -1 inside code spans: no balancing
    end_delimiter: Optional[str] = None
    indent_seen: bool = False  # persists for the whole pass

    def open(self, index: int, end_delimiter: str, brace_balance: int = 0) -> None:
        """opens a span at token index, closing on end_delimiter."""
        self.span_start = index
        self.end_delimiter = end_delimiter
        self.brace_balance = brace_balance
        self.fallback_end = index if brace_balance < 0 else None

    def reset(self) -> None:
        """returns to idle, keeping indent_seen."""
        self.span_start = None
        self.fallback_end = None
        self.end_delimiter = None
        self.brace_balance = 0
