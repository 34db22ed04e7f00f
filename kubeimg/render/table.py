"""Fixed-width text and HTML table rendering.

Rows are rendered in the order given; nothing here sorts or filters.
"""

from __future__ import annotations

from collections.abc import Sequence

TABLE_CLASS = "compare-tbl"


def html_escape(text: str) -> str:
    """Escape ``&``, ``<`` and ``>``; ampersand first so new entities stay intact."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _check_arity(header: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    for index, row in enumerate(rows):
        if len(row) != len(header):
            raise ValueError(f"Row {index} has {len(row)} cells, header has {len(header)}")


def column_widths(header: Sequence[str], rows: Sequence[Sequence[str]]) -> list[int]:
    widths = [len(label) for label in header]
    for row in rows:
        for col, cell in enumerate(row):
            widths[col] = max(widths[col], len(cell))
    return widths


def _border(widths: Sequence[int]) -> str:
    return "+" + "".join("-" * (w + 2) + "+" for w in widths)


def _line(cells: Sequence[str], widths: Sequence[int]) -> str:
    return "| " + " | ".join(cell.ljust(w) for cell, w in zip(cells, widths, strict=True)) + " |"


def render_text(header: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a border-delimited table; every line has the border's length."""
    _check_arity(header, rows)
    widths = column_widths(header, rows)
    border = _border(widths)
    lines = [border, _line(header, widths), border]
    lines.extend(_line(row, widths) for row in rows)
    lines.append(border)
    return "\n".join(lines)


def render_html(
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
    title: str | None = None,
) -> str:
    """Render an HTML table fragment with every cell escaped."""
    _check_arity(header, rows)
    parts: list[str] = []
    if title is not None:
        parts.append(f"<h2>{html_escape(title)}</h2>")
    parts.append(f'<table class="{TABLE_CLASS}">')
    head = "".join(f"<th>{html_escape(label)}</th>" for label in header)
    parts.append(f"<thead><tr>{head}</tr></thead><tbody>")
    for row in rows:
        cells = "".join(f"<td>{html_escape(cell)}</td>" for cell in row)
        parts.append(f"<tr>{cells}</tr>")
    parts.append("</tbody></table>")
    return "\n".join(parts)
