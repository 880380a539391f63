"""Fixture profile loading."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import ValidationError
from .models import BatchingPolicy
from .paths import profile_file
from .utils import load_yaml

DEFAULT_PAUSE_S = 60.0

_KNOWN_KEYS = ("pause_s", "batching", "seed", "manifest_dir")


@dataclass(slots=True)
class FixtureProfile:
    pause_s: float = DEFAULT_PAUSE_S
    batching: BatchingPolicy = BatchingPolicy.FIXED
    seed: Optional[int] = None
    manifest_dir: Optional[Path] = None

    def merged(
        self,
        pause_s: Optional[float] = None,
        batching: Optional[BatchingPolicy] = None,
        seed: Optional[int] = None,
        manifest_dir: Optional[Path] = None,
    ) -> "FixtureProfile":
        """Return a copy with any explicitly given value taking precedence."""
        return FixtureProfile(
            pause_s=self.pause_s if pause_s is None else pause_s,
            batching=self.batching if batching is None else batching,
            seed=self.seed if seed is None else seed,
            manifest_dir=self.manifest_dir if manifest_dir is None else manifest_dir,
        )


def parse_pause(value: Any, context: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{context}: pause_s must be a number")
    try:
        pause = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{context}: pause_s must be a number, got {value!r}") from exc
    if not math.isfinite(pause):
        raise ValidationError(f"{context}: pause_s must be finite, got {value!r}")
    if pause < 0:
        raise ValidationError(f"{context}: pause_s must not be negative")
    return pause


def parse_policy(value: Any, context: str) -> BatchingPolicy:
    try:
        return BatchingPolicy(str(value).lower())
    except ValueError as exc:
        allowed = ", ".join(policy.value for policy in BatchingPolicy)
        raise ValidationError(f"{context}: batching must be one of {allowed}") from exc


def parse_profile(payload: Dict[str, Any], context: str, base_dir: Path) -> FixtureProfile:
    unknown = sorted(set(payload) - set(_KNOWN_KEYS))
    if unknown:
        raise ValidationError(f"{context}: unknown keys {', '.join(unknown)}")

    profile = FixtureProfile()
    if payload.get("pause_s") is not None:
        profile.pause_s = parse_pause(payload["pause_s"], context)
    if payload.get("batching") is not None:
        profile.batching = parse_policy(payload["batching"], context)
    seed = payload.get("seed")
    if seed is not None:
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise ValidationError(f"{context}: seed must be integer")
        profile.seed = seed
    manifest_dir = payload.get("manifest_dir")
    if manifest_dir is not None:
        if not isinstance(manifest_dir, str):
            raise ValidationError(f"{context}: manifest_dir must be a path string")
        path = Path(manifest_dir).expanduser()
        profile.manifest_dir = path if path.is_absolute() else base_dir / path
    return profile


def load_profile(path: Path) -> FixtureProfile:
    payload = load_yaml(path)
    if payload is None:
        return FixtureProfile()
    if not isinstance(payload, dict):
        raise ValidationError(f"{path}: expected mapping at root")
    return parse_profile(payload, f"{path}", path.parent)


def resolve_profile(path: Path | None = None) -> FixtureProfile:
    """Load ``path`` if given, else the project profile when one exists."""
    if path is not None:
        return load_profile(path)
    default = profile_file()
    if default.exists():
        return load_profile(default)
    return FixtureProfile()
