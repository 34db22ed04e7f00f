"""Collector package for kubeimg.

Provides the Kubernetes-facing collaborators of the snapshot builder.

Submodules
----------
retriever -- KubernetesRetriever: per-context ApiClients, namespaced listings.
contexts  -- kubeconfig context resolution, context and namespace checks.
"""

from kubeimg.collector.contexts import check_context, check_namespace, list_contexts, resolve_context
from kubeimg.collector.retriever import KubernetesRetriever

__all__ = [
    "KubernetesRetriever",
    "check_context",
    "check_namespace",
    "list_contexts",
    "resolve_context",
]
