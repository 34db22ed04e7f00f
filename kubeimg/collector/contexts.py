"""Kubeconfig context resolution and namespace validation."""

from __future__ import annotations

from typing import Protocol

from kubernetes_asyncio import config as k8s_config  # type: ignore[import-untyped]

from kubeimg.errors import ConfigError, ContextNotFoundError, NamespaceNotFoundError


class NamespaceChecker(Protocol):
    async def namespace_exists(self, context: str, namespace: str) -> bool: ...


def list_contexts(kubeconfig: str | None = None) -> tuple[list[str], str]:
    """Return all context names and the current-context name."""
    try:
        contexts, active = k8s_config.list_kube_config_contexts(config_file=kubeconfig or None)
    except (k8s_config.ConfigException, OSError) as exc:
        raise ConfigError(f"cannot read kubeconfig: {exc}") from exc
    names = [ctx["name"] for ctx in contexts or []]
    current = active["name"] if active else ""
    return names, current


def resolve_context(requested: str | None, kubeconfig: str | None = None) -> str:
    """Return *requested*, or the kubeconfig current-context when it is empty."""
    if requested:
        return requested
    _, current = list_contexts(kubeconfig)
    if not current:
        raise ConfigError("no context given and kubeconfig has no current-context")
    return current


def check_context(context: str, kubeconfig: str | None = None) -> None:
    names, _ = list_contexts(kubeconfig)
    if context not in names:
        raise ContextNotFoundError(context)


async def check_namespace(checker: NamespaceChecker, context: str, namespace: str) -> None:
    if not await checker.namespace_exists(context, namespace):
        raise NamespaceNotFoundError(context, namespace)
