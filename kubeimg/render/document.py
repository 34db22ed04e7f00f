"""Standalone HTML documents embedding rendered tables."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from kubeimg.models.diff import DiffResult
from kubeimg.render.table import html_escape, render_html

_STYLE = """\
table.compare-tbl { border-collapse:collapse; margin-bottom:1rem; }
table.compare-tbl th, table.compare-tbl td { border:1px solid #444; padding:8px; text-align:left; }
table.compare-tbl thead th { background:#f0f0f0; }
table.compare-tbl tbody tr:nth-child(even) { background:#fafafa; }
h1 { font-family:sans-serif; margin-bottom:1rem; }
h2 { font-family:sans-serif; }
pre.context { background:#1e1e1e; color:#d4d4d4; font-family:monospace; padding:0.5rem 1rem; border-radius:4px; display:inline-block; margin-bottom:2rem; }"""


@dataclass(frozen=True)
class Side:
    """Context and namespace a snapshot was taken from."""

    context: str
    namespace: str


def _page(body: list[str]) -> str:
    head = f'<!DOCTYPE html><html><head><meta charset="utf-8">\n<style>\n{_STYLE}\n</style></head><body>'
    return "\n".join([head, *body, "</body></html>"]) + "\n"


def _label(caption: str, value: str) -> str:
    return f"<pre class='context'>{caption}: {html_escape(value)}</pre>"


def render_list_document(
    context: str,
    namespace: str,
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> str:
    body = [
        "<h1>Resources in:</h1>",
        _label("Context", context),
        _label("Namespace", namespace),
        render_html(header, rows),
    ]
    return _page(body)


def render_compare_document(
    side_a: Side,
    side_b: Side,
    header: Sequence[str],
    result: DiffResult,
) -> str:
    """Render both row sets, differences first, under escaped side labels."""
    body = [
        "<h1>Resources in:</h1>",
        _label("Context 1", side_a.context),
        _label("Namespace 1", side_a.namespace),
        _label("Context 2", side_b.context),
        _label("Namespace 2", side_b.namespace),
        "<h1>Differences</h1>",
        render_html(header, [row.cells() for row in result.differences]),
        "<h1>Matches</h1>",
        render_html(header, [row.cells() for row in result.matches]),
    ]
    return _page(body)


def write_document(path: Path, html: str) -> None:
    path.write_text(html, encoding="utf-8")
