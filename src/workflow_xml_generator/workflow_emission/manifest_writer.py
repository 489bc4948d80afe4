"""Manifest serialization."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


def write_manifest(manifest_path: Path | str, file_names: Sequence[str]) -> Path:
    """Write one generated file name per line, in the given order."""
    destination = Path(manifest_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text("\n".join(file_names), encoding="utf-8")
    return destination
