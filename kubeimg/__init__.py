"""kubeimg -- container image inventory and cross-namespace comparison for Kubernetes."""

__version__ = "0.3.0"
