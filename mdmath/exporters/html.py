"""HTML exporter for markdown documents with MathJax."""

import html as html_lib
import logging
from pathlib import Path
from typing import Optional

from mdmath.core.models import Document
from mdmath.exporters.base import Exporter
from mdmath.exporters.markdown import RenderOptions, markdown_to_html

logger = logging.getLogger(__name__)

MATHJAX_URL = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-chtml.js"

# matches the delimiters the math scanner protects
MATHJAX_CONFIG = """MathJax = {
    tex: {
        inlineMath: [["$", "$"]],
        displayMath: [["$$", "$$"]],
        processEscapes: true,
        processEnvironments: true
    }
};"""


class HTMLExporter(Exporter):  # pylint: disable=too-few-public-methods
    """exports markdown documents to HTML files."""

    def __init__(
        self,
        options: Optional[RenderOptions] = None,
        standalone: bool = True,
        mathjax_url: str = MATHJAX_URL,
    ) -> None:
        self.options = options or RenderOptions()
        self.standalone = standalone
        self.mathjax_url = mathjax_url

    def export(
        self,
        document: Document,
        destination: Path,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> Optional[Path]:
        """exports document to <destination>/<stem>.html."""
        output_path = destination / f"{document.path.stem}.html"

        if dry_run:
            logger.info("Would write to: %s", output_path)
            return output_path

        if output_path.exists() and not overwrite:
            logger.info("Skipping existing file: %s", output_path)
            return None

        html_content = self.render(document)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return output_path

    def render(self, document: Document) -> str:
        """renders document to an HTML fragment or standalone page."""
        body = markdown_to_html(document.text, self.options)
        if not self.standalone:
            return body

        title_escaped = html_lib.escape(document.title)
        url_escaped = html_lib.escape(self.mathjax_url)
        mathjax_head = ""
        if self.options.mathjax:
            mathjax_head = f"""
    <script>
{MATHJAX_CONFIG}
    </script>
    <script id="MathJax-script" async src="{url_escaped}"></script>"""

        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title_escaped}</title>{mathjax_head}
</head>
<body>
{body}</body>
</html>
"""
