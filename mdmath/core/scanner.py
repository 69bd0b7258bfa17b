"""Span scanner: finds math spans in tokenized text and stores them."""

import html
import logging
import re

from mdmath.core.models import ScanState
from mdmath.core.store import MathStore

logger = logging.getLogger(__name__)

INLINE_DELIMITER = "$"
DISPLAY_DELIMITER = "$$"
LIST_INDENT = "    "

PARAGRAPH_BREAK_PATTERN = re.compile(r"\n.*\n")
# "$" also matches before a final newline, so "\n    \n" counts as indented
LIST_INDENT_PATTERN = re.compile(LIST_INDENT + "$")


def scan_blocks(blocks: list[str], store: MathStore) -> None:
    """
    replaces math spans in blocks with placeholders, in place.

    Delimiters sit at odd indices. Backtick code spans are tracked so math
    markers inside them are ignored, but code is never stored. Spans that
    run into a paragraph break or the end of input are salvaged at the last
    brace-enclosed end delimiter when there is one and dropped otherwise.

    Args:
        blocks: output of split_blocks(); mutated in place
        store: store receiving the span content
    """
    state = ScanState()
    captured: set[int] = set()
    count = len(blocks)

    i = 1
    while i < count:
        # placeholder-shaped input is stored so it survives restoration;
        # tokens revisited after an aborted span are not captured twice
        if blocks[i].startswith("@") and i not in captured:
            captured.add(i)
            blocks[i] = store.add_literal(blocks[i])

        if state.span_start is not None:
            i = _scan_in_span(blocks, i, state.span_start, state, store)
        else:
            _scan_idle(blocks[i], i, state)

        i += 2

    if (
        state.span_start is not None
        and state.fallback_end is not None
        and state.brace_balance >= 0
    ):
        _process_math(blocks, state.span_start, state.fallback_end, state, store)


def _scan_idle(block: str, i: int, state: ScanState) -> None:
    """looks for a span start delimiter."""
    if block in (INLINE_DELIMITER, DISPLAY_DELIMITER):
        state.open(i, block)
    elif block[1:6] == "begin":
        state.open(i, "\\end" + block[6:])
    elif block.startswith("`"):
        state.open(i, block, brace_balance=-1)
    elif block.startswith("\n") and LIST_INDENT_PATTERN.search(block):
        state.indent_seen = True


def _scan_in_span(
    blocks: list[str], i: int, start: int, state: ScanState, store: MathStore
) -> int:
    """
    advances the span opened at start by one delimiter.

    Returns:
        index the scan continues from; earlier than i when an aborted span
        rewinds to its fallback end
    """
    block = blocks[i]

    if block == state.end_delimiter:
        if state.brace_balance > 0:
            state.fallback_end = i
        elif state.brace_balance == 0:
            _process_math(blocks, start, i, state, store)
        else:
            state.reset()
    elif PARAGRAPH_BREAK_PATTERN.search(block) or i + 2 >= len(blocks):
        fallback = state.fallback_end
        if fallback is not None:
            if state.brace_balance >= 0:
                logger.debug("salvaging math span at tokens %d-%d", start, fallback)
                _process_math(blocks, start, fallback, state, store)
            i = fallback
        else:
            logger.debug("dropping unterminated span opened at token %d", start)
        state.reset()
    elif block == "{" and state.brace_balance >= 0:
        state.brace_balance += 1
    elif block == "}" and state.brace_balance > 0:
        state.brace_balance -= 1

    return i


def _process_math(
    blocks: list[str], start: int, last: int, state: ScanState, store: MathStore
) -> None:
    """collapses blocks start..last into one stored span."""
    content = html.escape("".join(blocks[start : last + 1]), quote=False)
    if state.indent_seen:
        content = content.replace("\n" + LIST_INDENT, "\n")

    for j in range(start + 1, last + 1):
        blocks[j] = ""
    blocks[start] = store.add(content)

    state.reset()
