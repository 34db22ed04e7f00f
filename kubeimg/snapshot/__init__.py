"""Snapshot layer: record extraction and per-namespace indexing.

Submodules:
    extractor -- raw object → ResourceRecord (image / tag parsing).
    builder   -- sequential retrieval of every kind into a Snapshot.
"""

from kubeimg.snapshot.builder import Retriever, build_snapshot
from kubeimg.snapshot.extractor import extract_record, parse_image_reference

__all__ = ["Retriever", "build_snapshot", "extract_record", "parse_image_reference"]
