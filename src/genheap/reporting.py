"""Manifest rendering."""

from __future__ import annotations

import os
from dataclasses import asdict
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from . import __version__
from .artifacts import ManifestPaths
from .models import Fixture
from .paths import templates_dir
from .utils import dump_json, timestamp_now


def _jinja_environment() -> Environment:
    template_path = templates_dir()
    loader = FileSystemLoader(str(template_path)) if template_path.exists() else None
    return Environment(
        loader=loader,
        autoescape=select_autoescape(enabled_extensions=("html",)),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _render_template(env: Environment, template_name: str, fallback: str, context: Dict[str, Any]) -> str:
    if env.loader is not None:
        try:
            return env.get_template(template_name).render(**context)
        except TemplateNotFound:
            pass
    return env.from_string(fallback).render(**context)


def manifest_payload(fixture: Fixture, pause_s: float) -> Dict[str, Any]:
    return {
        "pid": os.getpid(),
        "created_at": timestamp_now(),
        "passes": fixture.passes,
        "policy": fixture.policy.value,
        "seed": fixture.seed,
        "pause_s": pause_s,
        "shape": asdict(fixture.shape()),
        "genheap": __version__,
    }


def write_manifest(fixture: Fixture, pause_s: float, paths: ManifestPaths) -> Dict[str, Any]:
    payload = manifest_payload(fixture, pause_s)
    dump_json(payload, paths.json_path)
    markdown = _render_template(
        _jinja_environment(),
        "manifest.md.j2",
        fallback=_DEFAULT_MARKDOWN_TEMPLATE,
        context={"manifest": payload},
    )
    paths.markdown_path.write_text(markdown, encoding="utf-8")
    return payload


_DEFAULT_MARKDOWN_TEMPLATE = """# Heap Fixture Manifest

- PID: {{ manifest.pid }}
- Created: {{ manifest.created_at }}
- Passes: {{ manifest.passes }}
- Batching: {{ manifest.policy }}
- Seed: {{ manifest.seed if manifest.seed is not none else "n/a" }}
- Pause Seconds: {{ manifest.pause_s }}

| Structure | Entries |
|-----------|---------|
| Scalar table | {{ manifest.shape.scalar_entries }} |
| Batch table | {{ manifest.shape.batches }} |
| Flushed records | {{ manifest.shape.flushed_records }} |
| Discarded records | {{ manifest.shape.discarded_records }} |
| Dominance table | {{ manifest.shape.dominance_entries }} |
| Dominance array | {{ manifest.shape.dominance_shared }} |
"""
