"""Entry point for `python -m kubeimg`.

Usage:
    python -m kubeimg list -n my-namespace
    python -m kubeimg compare -n1 staging -n2 production
"""

from __future__ import annotations

from kubeimg.cli import cli

cli(prog_name="kubeimg")
