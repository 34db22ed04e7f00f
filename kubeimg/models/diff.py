"""Comparison rows produced by the diff engine."""

from __future__ import annotations

from dataclasses import dataclass

PRESENT = "<present>"
MISSING = "<missing>"


@dataclass(frozen=True)
class DiffRow:
    """One composite key compared across two snapshots.

    ``value_a`` / ``value_b`` hold comma-joined versions for workloads, or a
    presence marker for services and for workloads absent from a side.
    """

    kind: str
    name: str
    images: str
    value_a: str
    value_b: str

    @property
    def is_match(self) -> bool:
        return self.value_a == self.value_b

    def cells(self) -> list[str]:
        return [self.kind, self.name, self.images, self.value_a, self.value_b]


@dataclass(frozen=True)
class DiffResult:
    """Differences and matches, each sorted by (kind, name)."""

    differences: tuple[DiffRow, ...] = ()
    matches: tuple[DiffRow, ...] = ()

    @property
    def has_differences(self) -> bool:
        return bool(self.differences)

    @property
    def summary(self) -> dict[str, int]:
        return {"differences": len(self.differences), "matches": len(self.matches)}

    def rows(self) -> tuple[DiffRow, ...]:
        return self.differences + self.matches

