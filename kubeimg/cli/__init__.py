"""kubeimg command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``kubeimg`` script).
"""

from kubeimg.cli.main import cli

__all__ = ["cli"]
