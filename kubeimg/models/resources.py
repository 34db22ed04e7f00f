"""Normalized resource records and the per-namespace snapshot index."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class ResourceKind(StrEnum):
    """Resource kinds inspected for images.

    Declaration order is significant: it is the retrieval order and the
    primary sort order of comparison output.
    """

    DEPLOYMENT = "Deployment"
    STATEFUL_SET = "StatefulSet"
    DAEMON_SET = "DaemonSet"
    JOB = "Job"
    CRON_JOB = "CronJob"
    SERVICE = "Service"


DEFAULT_KINDS: tuple[ResourceKind, ...] = tuple(ResourceKind)

_KIND_ORDER: dict[str, int] = {kind.value: index for index, kind in enumerate(ResourceKind)}


def kind_sort_key(kind: str) -> tuple[int, str]:
    """Sort key placing recognized kinds in declaration order, others after, alphabetically."""
    return (_KIND_ORDER.get(kind, len(_KIND_ORDER)), kind)


def parse_kinds(value: str) -> tuple[ResourceKind, ...]:
    """Parse a comma-separated kind list into enumeration order.

    Matching is case-insensitive. Raises ValueError on an unknown kind.
    """
    by_lower = {kind.value.lower(): kind for kind in ResourceKind}
    selected: set[ResourceKind] = set()
    for part in value.split(","):
        name = part.strip()
        if not name:
            continue
        kind = by_lower.get(name.lower())
        if kind is None:
            raise ValueError(f"Unknown resource kind: {name}. Must be one of {[k.value for k in ResourceKind]}")
        selected.add(kind)
    return tuple(kind for kind in ResourceKind if kind in selected)


@dataclass(frozen=True)
class ContainerImage:
    """Image name and tag of a single container."""

    image: str
    version: str


@dataclass(frozen=True)
class ResourceRecord:
    """One workload or service, reduced to its container images.

    ``images[i]`` and ``versions[i]`` describe the i-th declared container.
    """

    kind: str
    name: str
    images: tuple[str, ...] = ()
    versions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.images) != len(self.versions):
            raise ValueError(
                f"{self.kind}/{self.name}: {len(self.images)} images but {len(self.versions)} versions"
            )

    @classmethod
    def from_containers(cls, kind: str, name: str, containers: list[ContainerImage]) -> ResourceRecord:
        return cls(
            kind=kind,
            name=name,
            images=tuple(c.image for c in containers),
            versions=tuple(c.version for c in containers),
        )

    @property
    def key(self) -> tuple[str, str]:
        """Return the composite (kind, name) key."""
        return (self.kind, self.name)

    @property
    def containers(self) -> tuple[ContainerImage, ...]:
        return tuple(ContainerImage(image=i, version=v) for i, v in zip(self.images, self.versions, strict=True))

    @property
    def joined_images(self) -> str:
        return ",".join(self.images)

    @property
    def joined_versions(self) -> str:
        return ",".join(self.versions)

    def cells(self) -> list[str]:
        """Return the TYPE / NAME / IMAGES / VERSIONS cells for list output."""
        return [self.kind, self.name, self.joined_images, self.joined_versions]


class Snapshot(Mapping[tuple[str, str], ResourceRecord]):
    """Records captured for one (context, namespace) pair.

    A read-only mapping from (kind, name) to ResourceRecord that preserves
    the order records were built in.
    """

    def __init__(
        self,
        context: str,
        namespace: str,
        records: Mapping[tuple[str, str], ResourceRecord] | None = None,
    ) -> None:
        self._context = context
        self._namespace = namespace
        self._records = MappingProxyType(dict(records or {}))

    @property
    def context(self) -> str:
        return self._context

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def label(self) -> str:
        return f"{self._context}/{self._namespace}"

    def __getitem__(self, key: tuple[str, str]) -> ResourceRecord:
        return self._records[key]

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"Snapshot(context={self._context!r}, namespace={self._namespace!r}, records={len(self)})"

    def records(self) -> list[ResourceRecord]:
        """Return records in build order."""
        return list(self._records.values())
