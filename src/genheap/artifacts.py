"""Manifest artifact locations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class ManifestPaths:
    base_dir: Path

    @property
    def json_path(self) -> Path:
        return self.base_dir / "manifest.json"

    @property
    def markdown_path(self) -> Path:
        return self.base_dir / "manifest.md"
