"""Core data structures for kubeimg."""

from kubeimg.models.config import KubeImgConfig
from kubeimg.models.diff import MISSING, PRESENT, DiffResult, DiffRow
from kubeimg.models.resources import (
    DEFAULT_KINDS,
    ContainerImage,
    ResourceKind,
    ResourceRecord,
    Snapshot,
    kind_sort_key,
)

__all__ = [
    "DEFAULT_KINDS",
    "MISSING",
    "PRESENT",
    "ContainerImage",
    "DiffResult",
    "DiffRow",
    "KubeImgConfig",
    "ResourceKind",
    "ResourceRecord",
    "Snapshot",
    "kind_sort_key",
]
