"""Data models for genheap.

The class names and layouts here are what a heap analyzer sees in the
snapshot, so they are kept deliberately plain.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Tuple

SCALAR_ENTRIES = 10_000
BATCH_SIZE = 10
DOMINANCE_OFFSET = 1_000_000
DOMINANCE_ENTRIES = 1000
DOMINANCE_SHARED = 100


class BatchingPolicy(str, Enum):
    FIXED = "fixed"
    RANDOM = "random"


@dataclass(slots=True)
class Thing2:
    value: int

    # Padding owned by the type, built once at class definition.
    FILLER: ClassVar[Tuple[int, ...]] = tuple(range(200))


@dataclass(slots=True)
class Thing1:
    things: Tuple[Thing2, Thing2, Thing2]

    FILLER: ClassVar[Tuple[int, ...]] = tuple(range(100))

    @classmethod
    def around(cls, index: int) -> "Thing1":
        """Build the record for build index ``index`` holding ``(index-1, index, index+1)``."""
        return cls(things=(Thing2(index - 1), Thing2(index), Thing2(index + 1)))

    @property
    def values(self) -> Tuple[int, int, int]:
        first, second, third = self.things
        return first.value, second.value, third.value


@dataclass(slots=True)
class DominanceFixture:
    """Large ints held by a table and, for the first entries, also by an array.

    ``array[j]`` is the very object stored at ``table[DOMINANCE_OFFSET + j]``,
    so a dominator analysis sees two parents for each shared value.
    """

    table: Dict[int, int]
    array: List[int]

    @classmethod
    def build(
        cls,
        entries: int = DOMINANCE_ENTRIES,
        shared: int = DOMINANCE_SHARED,
        offset: int = DOMINANCE_OFFSET,
    ) -> "DominanceFixture":
        table: Dict[int, int] = {}
        for j in range(entries):
            number = offset + j
            table[number] = number
        array = [table[offset + j] for j in range(shared)]
        return cls(table=table, array=array)


@dataclass(slots=True)
class FixtureShape:
    passes: int
    policy: str
    scalar_entries: int
    batches: Optional[int]
    flushed_records: Optional[int]
    discarded_records: Optional[int]
    dominance_entries: int
    dominance_shared: int

    @classmethod
    def expected(cls, passes: int, policy: BatchingPolicy) -> "FixtureShape":
        batches = flushed = discarded = None
        if policy is BatchingPolicy.FIXED:
            batches = passes // BATCH_SIZE
            flushed = batches * BATCH_SIZE
            discarded = passes - flushed
        return cls(
            passes=passes,
            policy=policy.value,
            scalar_entries=SCALAR_ENTRIES,
            batches=batches,
            flushed_records=flushed,
            discarded_records=discarded,
            dominance_entries=DOMINANCE_ENTRIES,
            dominance_shared=DOMINANCE_SHARED,
        )


@dataclass(slots=True)
class Fixture:
    passes: int
    policy: BatchingPolicy
    seed: Optional[int]
    scalar_table: Dict[int, str]
    batch_table: Dict[int, List[Thing1]]
    dominance: DominanceFixture
    discarded_records: int = 0

    def shape(self) -> FixtureShape:
        flushed = sum(len(batch) for batch in self.batch_table.values())
        return FixtureShape(
            passes=self.passes,
            policy=self.policy.value,
            scalar_entries=len(self.scalar_table),
            batches=len(self.batch_table),
            flushed_records=flushed,
            discarded_records=self.discarded_records,
            dominance_entries=len(self.dominance.table),
            dominance_shared=len(self.dominance.array),
        )
