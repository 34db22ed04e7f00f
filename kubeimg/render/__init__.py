"""Rendering of inventory and comparison tables.

Submodules:
    table    -- fixed-width text tables and HTML table fragments.
    document -- full HTML pages for list and compare output.
"""

from kubeimg.render.document import Side, render_compare_document, render_list_document, write_document
from kubeimg.render.table import html_escape, render_html, render_text

__all__ = [
    "Side",
    "html_escape",
    "render_compare_document",
    "render_html",
    "render_list_document",
    "render_text",
    "write_document",
]
