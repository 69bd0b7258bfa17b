"""Indexed storage for protected math and the placeholder format."""

import re

from mdmath.core.errors import DanglingPlaceholderError, StoreConsumedError

PLACEHOLDER_PATTERN = re.compile(r"@@(\d+)@@")


def make_placeholder(index: int) -> str:
    """returns the placeholder text for a store index."""
    return f"@@{index}@@"


class MathStore:
    """
    append-only list of protected content for one document round-trip.

    Span entries hold escaped math and may embed placeholders of literal
    entries captured inside the span. Literal entries hold placeholder-shaped
    text found in the input and are always restored verbatim.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._literals: set[int] = set()
        self._consumed = False

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[str, ...]:
        """stored content in index order."""
        return tuple(self._entries)

    @property
    def consumed(self) -> bool:
        """True once the store has been used by restore()."""
        return self._consumed

    def add(self, content: str) -> str:
        """stores span content and returns its placeholder."""
        self._entries.append(content)
        return make_placeholder(len(self._entries) - 1)

    def add_literal(self, content: str) -> str:
        """stores a pre-existing placeholder verbatim and returns a new one."""
        self._literals.add(len(self._entries))
        return self.add(content)

    def is_literal(self, index: int) -> bool:
        """True if the entry was captured from placeholder text in the input."""
        return index in self._literals

    def resolve(self, index: int) -> str:
        """
        returns the content for a placeholder index.

        Args:
            index: store index taken from a placeholder

        Returns:
            stored content with embedded placeholders expanded

        Raises:
            DanglingPlaceholderError: if no entry exists for index
        """
        if not 0 <= index < len(self._entries):
            raise DanglingPlaceholderError(index, len(self._entries))

        content = self._entries[index]
        if index in self._literals:
            return content

        # embedded placeholders always point at earlier literal entries
        return PLACEHOLDER_PATTERN.sub(
            lambda match: self.resolve(int(match.group(1))), content
        )

    def restore(self, text: str) -> str:
        """
        replaces every placeholder in text with its stored content.

        Args:
            text: text containing placeholders

        Returns:
            text with placeholders resolved

        Raises:
            StoreConsumedError: if the store was already used
            DanglingPlaceholderError: if a placeholder has no entry
        """
        if self._consumed:
            raise StoreConsumedError()
        self._consumed = True

        return PLACEHOLDER_PATTERN.sub(
            lambda match: self.resolve(int(match.group(1))), text
        )
