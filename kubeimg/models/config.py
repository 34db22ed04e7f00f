"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from kubeimg.models.resources import DEFAULT_KINDS, ResourceKind


@dataclass
class ClusterConfig:
    """Kubernetes API access configuration."""

    kubeconfig: str = ""  # empty: kubernetes-asyncio default (~/.kube/config or $KUBECONFIG)
    request_timeout: int = 30


@dataclass
class InventoryConfig:
    """Which resource kinds are inspected."""

    kinds: tuple[ResourceKind, ...] = DEFAULT_KINDS


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "warning"


@dataclass
class KubeImgConfig:
    """Top-level kubeimg configuration."""

    cluster: ClusterConfig = field(default_factory=ClusterConfig)
    inventory: InventoryConfig = field(default_factory=InventoryConfig)
    log: LogConfig = field(default_factory=LogConfig)
