"""Splits markdown text into plain text and math/code delimiter tokens."""

import re

# math delimiters, environment boundaries, escapes, braces, newline runs,
# existing placeholders and backtick fences, in that priority order
MATH_SPLIT_PATTERN = re.compile(
    r"(\$\$?"
    r"|\\(?:begin|end)\{[a-z]*\*?\}"
    r"|\\[\\{}$]"
    r"|[{}]"
    r"|(?:\n\s*)+"
    r"|@@\d+@@"
    r"|`+)",
    re.IGNORECASE,
)

NEWLINE_PATTERN = re.compile(r"\r\n?")


def normalize_newlines(text: str) -> str:
    """converts CRLF and lone CR line endings to LF."""
    return NEWLINE_PATTERN.sub("\n", text)


def split_blocks(text: str) -> list[str]:
    """
    splits text on math delimiters, keeping the delimiters.

    Args:
        text: input text

    Returns:
        list alternating plain text (even indices) and delimiters (odd
        indices); always of odd length
    """
    return MATH_SPLIT_PATTERN.split(normalize_newlines(text))
