"""Snapshot construction for one (context, namespace) pair."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Protocol

from kubeimg.errors import RetrievalUnavailableError
from kubeimg.models.resources import DEFAULT_KINDS, ResourceKind, ResourceRecord, Snapshot
from kubeimg.observability.logging import get_logger
from kubeimg.snapshot.extractor import extract_record, resource_name

_logger = get_logger("snapshot.builder")


class Retriever(Protocol):
    """Lists raw objects of one kind in one namespace of one context.

    Implementations return an empty sequence when the kind has no instances
    and raise RetrievalUnavailableError when the kind cannot be listed.
    """

    async def retrieve(self, context: str, namespace: str, kind: str) -> Sequence[Mapping[str, Any]]: ...


def _ordered_kinds(kinds: Iterable[str]) -> list[ResourceKind]:
    wanted = {ResourceKind(k) for k in kinds}
    return [kind for kind in ResourceKind if kind in wanted]


def _records_for_kind(kind: ResourceKind, objects: Sequence[Mapping[str, Any]]) -> list[ResourceRecord]:
    if kind == ResourceKind.SERVICE:
        objects = sorted(objects, key=resource_name)
    return [extract_record(kind, obj) for obj in objects]


async def build_snapshot(
    retriever: Retriever,
    context: str,
    namespace: str,
    kinds: Iterable[str] = DEFAULT_KINDS,
) -> Snapshot:
    """Retrieve every kind in enumeration order and index the records by (kind, name).

    A kind whose listing is unavailable contributes no records. If a key
    repeats, the later record replaces the earlier one.
    """
    records: dict[tuple[str, str], ResourceRecord] = {}
    log = _logger.bind(context=context, namespace=namespace)

    for kind in _ordered_kinds(kinds):
        try:
            objects = await retriever.retrieve(context, namespace, kind.value)
        except RetrievalUnavailableError as exc:
            log.warning("retrieval_unavailable", kind=kind.value, reason=exc.reason)
            continue

        for record in _records_for_kind(kind, objects):
            if record.key in records:
                log.debug("duplicate_key", kind=record.kind, name=record.name)
            records[record.key] = record
        log.debug("kind_retrieved", kind=kind.value, count=len(objects))

    snapshot = Snapshot(context=context, namespace=namespace, records=records)
    log.info("snapshot_built", records=len(snapshot))
    return snapshot
