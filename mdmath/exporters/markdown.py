"""markdown to HTML conversion with math protection."""

from dataclasses import dataclass
from typing import Optional, cast

from markdown_it import MarkdownIt

from mdmath.core.mathjax import remove_math, replace_math


@dataclass
class RenderOptions:
    """options controlling markdown rendering."""

    mathjax: bool = True
    tables: bool = True
    allow_html: bool = False


def build_parser(options: RenderOptions) -> MarkdownIt:
    """
    builds a commonmark parser configured from options.

    Args:
        options: render options

    Returns:
        configured MarkdownIt instance
    """
    md = MarkdownIt()
    if options.tables:
        md.enable("table")
    if not options.allow_html:
        # disables HTML to prevent injection attacks
        md.disable("html_inline")
        md.disable("html_block")
    return md


def markdown_to_html(text: str, options: Optional[RenderOptions] = None) -> str:
    """
    converts markdown to HTML, passing math through untouched.

    Args:
        text: markdown text
        options: render options (defaults to RenderOptions())

    Returns:
        rendered HTML with math restored, HTML-escaped
    """
    options = options or RenderOptions()
    md = build_parser(options)

    if not options.mathjax:
        return cast(str, md.render(text))

    protected_text, store = remove_math(text)
    result = cast(str, md.render(protected_text))
    return replace_math(result, store)
