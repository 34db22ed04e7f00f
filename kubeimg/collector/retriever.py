"""Namespace listings backed by kubernetes-asyncio.

One ApiClient is created per kubeconfig context and reused until the
retriever is closed.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import aiohttp
from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]
from kubernetes_asyncio import config as k8s_config  # type: ignore[import-untyped]
from kubernetes_asyncio.client.exceptions import ApiException  # type: ignore[import-untyped]

from kubeimg.errors import ConfigError, RetrievalUnavailableError
from kubeimg.models.resources import ResourceKind
from kubeimg.observability.logging import get_logger

_logger = get_logger("collector.retriever")

# kind -> (API group class, namespaced list method)
_LIST_METHODS: dict[str, tuple[Callable[..., Any], str]] = {
    ResourceKind.DEPLOYMENT: (k8s_client.AppsV1Api, "list_namespaced_deployment"),
    ResourceKind.STATEFUL_SET: (k8s_client.AppsV1Api, "list_namespaced_stateful_set"),
    ResourceKind.DAEMON_SET: (k8s_client.AppsV1Api, "list_namespaced_daemon_set"),
    ResourceKind.JOB: (k8s_client.BatchV1Api, "list_namespaced_job"),
    ResourceKind.CRON_JOB: (k8s_client.BatchV1Api, "list_namespaced_cron_job"),
    ResourceKind.SERVICE: (k8s_client.CoreV1Api, "list_namespaced_service"),
}

_TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


class KubernetesRetriever:
    """Lists raw resource objects from live clusters.

    Args:
        kubeconfig:      Path to the kubeconfig file; None uses the
                         kubernetes-asyncio default location.
        request_timeout: Per-request timeout in seconds.
    """

    def __init__(self, kubeconfig: str | None = None, request_timeout: float = 30.0) -> None:
        self._kubeconfig = kubeconfig or None
        self._request_timeout = request_timeout
        self._clients: dict[str, Any] = {}

    async def __aenter__(self) -> KubernetesRetriever:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _api_client(self, context: str) -> Any:
        api_client = self._clients.get(context)
        if api_client is None:
            try:
                api_client = await k8s_config.new_client_from_config(
                    config_file=self._kubeconfig,
                    context=context,
                    persist_config=False,
                )
            except (k8s_config.ConfigException, OSError) as exc:
                raise ConfigError(f"cannot load context '{context}': {exc}") from exc
            self._clients[context] = api_client
            _logger.debug("api_client_created", context=context)
        return api_client

    async def retrieve(self, context: str, namespace: str, kind: str) -> list[dict[str, Any]]:
        """Return every object of *kind* in *namespace* as a camelCase dict.

        Raises:
            RetrievalUnavailableError: the kind is unknown, unsupported by the
                cluster, forbidden, or the request failed.
        """
        if kind not in _LIST_METHODS:
            raise RetrievalUnavailableError(kind, "unsupported kind")
        api_cls, method_name = _LIST_METHODS[kind]

        api_client = await self._api_client(context)
        list_fn = getattr(api_cls(api_client), method_name)
        try:
            result = await list_fn(namespace, _request_timeout=self._request_timeout)
        except ApiException as exc:
            raise RetrievalUnavailableError(kind, f"API returned {exc.status} {exc.reason}") from exc
        except _TRANSPORT_ERRORS as exc:
            raise RetrievalUnavailableError(kind, str(exc) or type(exc).__name__) from exc

        items = [api_client.sanitize_for_serialization(item) for item in result.items or []]
        _logger.debug("listed", context=context, namespace=namespace, kind=kind, count=len(items))
        return items

    async def namespace_exists(self, context: str, namespace: str) -> bool:
        api_client = await self._api_client(context)
        try:
            await k8s_client.CoreV1Api(api_client).read_namespace(
                namespace, _request_timeout=self._request_timeout
            )
        except ApiException as exc:
            _logger.debug("namespace_lookup_failed", context=context, namespace=namespace, status=exc.status)
            return False
        except _TRANSPORT_ERRORS as exc:
            _logger.warning(
                "namespace_lookup_failed", context=context, namespace=namespace, error=str(exc) or type(exc).__name__
            )
            return False
        return True

    async def close(self) -> None:
        """Close every ApiClient; safe to call more than once."""
        clients, self._clients = self._clients, {}
        for context, api_client in clients.items():
            try:
                await api_client.close()
            except Exception as exc:
                _logger.warning("api_client_close_failed", context=context, error=str(exc))
