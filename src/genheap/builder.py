"""Fixture construction and the snapshot pause."""

from __future__ import annotations

import os
import random
import time
from typing import Callable, Dict, List, Tuple

from .artifacts import ManifestPaths
from .config import FixtureProfile
from .console import stderr_console
from .models import (
    BATCH_SIZE,
    SCALAR_ENTRIES,
    BatchingPolicy,
    DominanceFixture,
    Fixture,
    Thing1,
)
from .reporting import write_manifest
from .utils import ensure_seed


def build_scalar_table(entries: int = SCALAR_ENTRIES) -> Dict[int, str]:
    table: Dict[int, str] = {}
    for key in range(entries):
        table[key] = str(key)
    return table


def _should_flush(index: int, policy: BatchingPolicy) -> bool:
    if policy is BatchingPolicy.RANDOM:
        return random.randrange(BATCH_SIZE) == 0
    return index % BATCH_SIZE == 0


def build_batch_table(
    passes: int,
    policy: BatchingPolicy = BatchingPolicy.FIXED,
) -> Tuple[Dict[int, List[Thing1]], List[Thing1]]:
    """Build the batch table for ``passes`` records.

    Returns the table together with the trailing batch that was never
    flushed. Callers keep that list only as a local so its records are
    reachable from the stack but not from the table. Under the random
    policy the global ``random`` state must already be seeded.
    """
    table: Dict[int, List[Thing1]] = {}
    pending: List[Thing1] = []
    for index in range(1, passes + 1):
        pending.append(Thing1.around(index))
        if _should_flush(index, policy):
            table[index] = pending
            pending = []
    return table, pending


def announce_ready(fixture: Fixture, pause_s: float) -> None:
    stderr_console.print(
        f"[success]Fixture ready[/success] pid={os.getpid()} passes={fixture.passes} "
        f"batches={len(fixture.batch_table)}; pausing {pause_s:g}s for snapshot",
        style="info",
        soft_wrap=True,
    )


def generate(
    passes: int,
    profile: FixtureProfile | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Fixture:
    profile = profile or FixtureProfile()
    seed = profile.seed
    if profile.batching is BatchingPolicy.RANDOM:
        seed = ensure_seed(seed)

    scalar_table = build_scalar_table()
    batch_table, pending = build_batch_table(passes, profile.batching)
    dominance = DominanceFixture.build()
    fixture = Fixture(
        passes=passes,
        policy=profile.batching,
        seed=seed,
        scalar_table=scalar_table,
        batch_table=batch_table,
        dominance=dominance,
        discarded_records=len(pending),
    )

    if profile.manifest_dir is not None:
        write_manifest(fixture, profile.pause_s, ManifestPaths(profile.manifest_dir))

    announce_ready(fixture, profile.pause_s)
    # pending stays alive only through this frame while the snapshot is taken.
    sleep(profile.pause_s)
    return fixture
