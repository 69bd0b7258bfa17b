"""tests for the math store."""

import pytest

from mdmath.core.errors import DanglingPlaceholderError, StoreConsumedError
from mdmath.core.store import MathStore, make_placeholder


def test_make_placeholder_format() -> None:
    """placeholders are @@N@@."""
    assert make_placeholder(0) == "@@0@@"
    assert make_placeholder(17) == "@@17@@"


def test_add_assigns_indices_in_order() -> None:
    """entries are indexed by append order."""
    store = MathStore()
    assert store.add("$a$") == "@@0@@"
    assert store.add("$b$") == "@@1@@"
    assert len(store) == 2
    assert store.entries == ("$a$", "$b$")


def test_restore_substitutes_entries() -> None:
    """placeholders are replaced by stored content without re-escaping."""
    store = MathStore()
    store.add("$a&lt;b$")
    store.add("$$c$$")
    assert store.restore("<p>@@0@@ and @@1@@</p>") == "<p>$a&lt;b$ and $$c$$</p>"


def test_restore_marks_store_consumed() -> None:
    """a store serves one restoration only."""
    store = MathStore()
    store.add("$a$")
    assert not store.consumed
    store.restore("@@0@@")
    assert store.consumed
    with pytest.raises(StoreConsumedError):
        store.restore("@@0@@")


def test_restore_dangling_placeholder_raises() -> None:
    """unknown indices are reported rather than left in the output."""
    store = MathStore()
    store.add("$a$")
    with pytest.raises(DanglingPlaceholderError) as exc_info:
        store.restore("@@0@@ @@4@@")
    assert exc_info.value.index == 4
    assert exc_info.value.size == 1


def test_literal_entries_are_not_expanded() -> None:
    """a captured placeholder comes back as its original text."""
    store = MathStore()
    store.add_literal("@@0@@")
    assert store.is_literal(0)
    assert store.restore("x @@0@@ y") == "x @@0@@ y"


def test_span_entries_expand_embedded_literals() -> None:
    """placeholders embedded in a span resolve to their literal entries."""
    store = MathStore()
    store.add_literal("@@7@@")
    store.add("$a @@0@@ b$")
    assert store.resolve(1) == "$a @@7@@ b$"


def test_resolve_out_of_range() -> None:
    """resolve rejects negative and too-large indices."""
    store = MathStore()
    with pytest.raises(DanglingPlaceholderError):
        store.resolve(0)
    with pytest.raises(DanglingPlaceholderError):
        store.resolve(-1)
