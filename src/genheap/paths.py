"""Shared project path helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

PROJECT_ROOT: Final[Path] = (
    Path(os.environ["GENHEAP_HOME"]).expanduser().resolve()
    if "GENHEAP_HOME" in os.environ
    else Path.cwd()
)


def profile_file() -> Path:
    return PROJECT_ROOT / "genheap.yaml"


def templates_dir() -> Path:
    return PROJECT_ROOT / "templates"
