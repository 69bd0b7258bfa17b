"""Math protection for markdown rendering."""

from typing import Optional

from mdmath.core.errors import StoreConsumedError, StoreNotInitializedError
from mdmath.core.scanner import scan_blocks
from mdmath.core.store import MathStore
from mdmath.core.tokenizer import split_blocks


def remove_math(text: str) -> tuple[str, MathStore]:
    """
    replaces math with placeholders to protect it from markdown processing.

    Args:
        text: markdown text containing math

    Returns:
        tuple of (text with placeholders, store holding the removed math)
    """
    store = MathStore()
    blocks = split_blocks(text)
    scan_blocks(blocks, store)
    return "".join(blocks), store


def replace_math(text: str, store: MathStore) -> str:
    """
    restores math from placeholders.

    Args:
        text: text with placeholders, usually rendered HTML
        store: store returned by remove_math() for the same document

    Returns:
        text with math restored (HTML-escaped when it was removed)

    Raises:
        StoreConsumedError: if store was already used
        DanglingPlaceholderError: if a placeholder has no stored math
    """
    return store.restore(text)


class MathJax:
    """
    two-call math protection for a single document.

    remove_math() and replace_math() must be called once each, in that
    order. Use one instance per document.
    """

    def __init__(self) -> None:
        self._store: Optional[MathStore] = None

    @property
    def store(self) -> Optional[MathStore]:
        """store from the last remove_math() call, if any."""
        return self._store

    def remove_math(self, text: str) -> str:
        """replaces math in text with placeholders and keeps the store."""
        if self._store is not None:
            raise StoreConsumedError()
        text, self._store = remove_math(text)
        return text

    def replace_math(self, text: str) -> str:
        """restores math removed by remove_math()."""
        if self._store is None:
            raise StoreNotInitializedError()
        return replace_math(text, self._store)
