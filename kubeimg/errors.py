"""Exception hierarchy for kubeimg."""

from __future__ import annotations


class KubeImgError(Exception):
    """Base class for all kubeimg errors."""


class ConfigError(KubeImgError, ValueError):
    """Raised when a KUBEIMG_* setting cannot be parsed."""


class RetrievalUnavailableError(KubeImgError):
    """Raised by a retriever when a kind cannot be listed in a namespace.

    The snapshot builder treats this exactly like an empty listing.
    """

    def __init__(self, kind: str, reason: str) -> None:
        super().__init__(f"Cannot list {kind}: {reason}")
        self.kind = kind
        self.reason = reason


class ContextNotFoundError(KubeImgError):
    """Raised when a kubeconfig context does not exist."""

    def __init__(self, context: str) -> None:
        super().__init__(f"context '{context}' not found")
        self.context = context


class NamespaceNotFoundError(KubeImgError):
    """Raised when a namespace cannot be read in the given context."""

    def __init__(self, context: str, namespace: str) -> None:
        super().__init__(f"namespace '{namespace}' not in context '{context}'")
        self.context = context
        self.namespace = namespace
