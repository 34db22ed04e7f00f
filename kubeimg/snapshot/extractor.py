"""Reduce raw workload and service definitions to ResourceRecords.

Raw objects are plain dicts in the API's camelCase layout, as produced by
``ApiClient.sanitize_for_serialization`` or ``kubectl get -o json``.
Extraction never fails on content: missing paths mean zero containers and
image references without separators fall back to the whole string or "".
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kubeimg.models.resources import ContainerImage, ResourceKind, ResourceRecord

# Pod-template container paths, tried in order.
_CONTAINER_PATHS: tuple[tuple[str, ...], ...] = (
    ("spec", "template", "spec", "containers"),
    ("spec", "jobTemplate", "spec", "template", "spec", "containers"),
)


def parse_image_reference(reference: str) -> ContainerImage:
    """Split an image reference into its base name and tag.

    >>> parse_image_reference("registry.example.com/team/api-server:v1.2.3")
    ContainerImage(image='api-server', version='v1.2.3')
    """
    image = reference.rsplit("/", 1)[-1].split(":", 1)[0]
    _, sep, version = reference.partition(":")
    return ContainerImage(image=image, version=version if sep else "")


def _dig(obj: Any, path: tuple[str, ...]) -> Any:
    current = obj
    for key in path:
        if not isinstance(current, Mapping) or key not in current:
            return None
        current = current[key]
    return current


def _containers(obj: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    for path in _CONTAINER_PATHS:
        containers = _dig(obj, path)
        if isinstance(containers, list):
            return [c for c in containers if isinstance(c, Mapping)]
    return []


def resource_name(obj: Mapping[str, Any]) -> str:
    name = _dig(obj, ("metadata", "name"))
    return str(name) if name is not None else ""


def extract_record(kind: str, obj: Mapping[str, Any]) -> ResourceRecord:
    """Build the ResourceRecord for one raw object of the given kind."""
    name = resource_name(obj)
    if kind == ResourceKind.SERVICE:
        return ResourceRecord(kind=kind, name=name)

    images = [parse_image_reference(str(c.get("image") or "")) for c in _containers(obj)]
    return ResourceRecord.from_containers(kind, name, images)
