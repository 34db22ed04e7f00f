"""Set-union comparison of two snapshots."""

from __future__ import annotations

from kubeimg.models.diff import MISSING, PRESENT, DiffResult, DiffRow
from kubeimg.models.resources import ResourceKind, Snapshot, kind_sort_key
from kubeimg.observability.logging import get_logger

_logger = get_logger("diff.engine")


def row_sort_key(row: DiffRow) -> tuple[int, str, str]:
    order, kind = kind_sort_key(row.kind)
    return (order, kind, row.name)


def _side_value(snapshot: Snapshot, key: tuple[str, str]) -> str:
    kind, _ = key
    record = snapshot.get(key)
    if record is None:
        return MISSING
    if kind == ResourceKind.SERVICE:
        return PRESENT
    return record.joined_versions


def compare_key(snapshot_a: Snapshot, snapshot_b: Snapshot, key: tuple[str, str]) -> DiffRow:
    """Build the row for one composite key; the key may be absent from either side."""
    kind, name = key
    images = ""
    if kind != ResourceKind.SERVICE:
        record = snapshot_a.get(key) or snapshot_b.get(key)
        if record is not None:
            images = record.joined_images
    return DiffRow(
        kind=kind,
        name=name,
        images=images,
        value_a=_side_value(snapshot_a, key),
        value_b=_side_value(snapshot_b, key),
    )


def diff_snapshots(snapshot_a: Snapshot, snapshot_b: Snapshot) -> DiffResult:
    """Classify every key of either snapshot as a match or a difference.

    Both sequences are ordered by kind (enumeration order) and then name.
    """
    all_keys = set(snapshot_a) | set(snapshot_b)
    differences: list[DiffRow] = []
    matches: list[DiffRow] = []

    for key in all_keys:
        row = compare_key(snapshot_a, snapshot_b, key)
        (matches if row.is_match else differences).append(row)

    differences.sort(key=row_sort_key)
    matches.sort(key=row_sort_key)

    result = DiffResult(differences=tuple(differences), matches=tuple(matches))
    _logger.info("diff_computed", a=snapshot_a.label, b=snapshot_b.label, **result.summary)
    return result
