"""List and compare use cases.

Wires context resolution → validation → snapshot building → diff →
rendering. The CLI owns argument parsing, file output and exit codes;
everything here returns values or raises KubeImgError subclasses.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from kubeimg.collector.contexts import NamespaceChecker, check_context, check_namespace, resolve_context
from kubeimg.diff.engine import diff_snapshots
from kubeimg.models.diff import DiffResult
from kubeimg.models.resources import DEFAULT_KINDS, Snapshot
from kubeimg.observability.logging import get_logger
from kubeimg.render.document import Side, render_compare_document, render_list_document
from kubeimg.render.table import render_text
from kubeimg.snapshot.builder import Retriever, build_snapshot

_logger = get_logger("app")

LIST_HEADER: tuple[str, ...] = ("TYPE", "NAME", "IMAGES", "VERSIONS")
DIFFERENCES_TITLE = "Differences"
MATCHES_TITLE = "Matches"


class ClusterRetriever(Retriever, NamespaceChecker, Protocol):
    """A retriever that can also confirm a namespace exists."""


def prepare_side(context: str | None, namespace: str, kubeconfig: str | None = None) -> Side:
    """Resolve the default context and check it exists in the kubeconfig."""
    resolved = resolve_context(context, kubeconfig)
    check_context(resolved, kubeconfig)
    return Side(context=resolved, namespace=namespace)


def compare_header(side_a: Side, side_b: Side) -> tuple[str, ...]:
    """Column labels for a comparison; sides with the same namespace are labelled context/namespace."""
    if side_a.namespace == side_b.namespace:
        label_a = f"{side_a.context}/{side_a.namespace}"
        label_b = f"{side_b.context}/{side_b.namespace}"
    else:
        label_a, label_b = side_a.namespace, side_b.namespace
    return ("TYPE", "NAME", "IMAGES", label_a, label_b)


@dataclass(frozen=True)
class ListReport:
    side: Side
    snapshot: Snapshot

    @property
    def rows(self) -> list[list[str]]:
        return [record.cells() for record in self.snapshot.records()]

    def to_text(self) -> str:
        return render_text(LIST_HEADER, self.rows)

    def to_html(self) -> str:
        return render_list_document(self.side.context, self.side.namespace, LIST_HEADER, self.rows)


@dataclass(frozen=True)
class CompareReport:
    side_a: Side
    side_b: Side
    result: DiffResult

    @property
    def header(self) -> tuple[str, ...]:
        return compare_header(self.side_a, self.side_b)

    def to_text(self) -> str:
        """Differences table then matches table; an empty section is omitted."""
        sections: list[str] = []
        for title, rows in ((DIFFERENCES_TITLE, self.result.differences), (MATCHES_TITLE, self.result.matches)):
            if rows:
                sections.append(f"{title}\n{render_text(self.header, [row.cells() for row in rows])}")
        return "\n\n".join(sections)

    def to_html(self) -> str:
        return render_compare_document(self.side_a, self.side_b, self.header, self.result)


async def list_namespace(
    retriever: ClusterRetriever,
    side: Side,
    kinds: Iterable[str] = DEFAULT_KINDS,
) -> ListReport:
    await check_namespace(retriever, side.context, side.namespace)
    snapshot = await build_snapshot(retriever, side.context, side.namespace, kinds)
    return ListReport(side=side, snapshot=snapshot)


async def compare_namespaces(
    retriever: ClusterRetriever,
    side_a: Side,
    side_b: Side,
    kinds: Iterable[str] = DEFAULT_KINDS,
) -> CompareReport:
    """Snapshot both sides sequentially and diff them."""
    kinds = tuple(kinds)
    await check_namespace(retriever, side_a.context, side_a.namespace)
    await check_namespace(retriever, side_b.context, side_b.namespace)

    snapshot_a = await build_snapshot(retriever, side_a.context, side_a.namespace, kinds)
    snapshot_b = await build_snapshot(retriever, side_b.context, side_b.namespace, kinds)
    result = diff_snapshots(snapshot_a, snapshot_b)
    _logger.info("compare_finished", a=snapshot_a.label, b=snapshot_b.label, **result.summary)
    return CompareReport(side_a=side_a, side_b=side_b, result=result)
