"""Diff engine comparing two namespace snapshots."""

from kubeimg.diff.engine import diff_snapshots

__all__ = ["diff_snapshots"]
