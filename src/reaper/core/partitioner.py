"""Token spaces of the supported data store partitioners."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from reaper.core.errors import ReaperException
from reaper.core.tokens import greater_than, lower_than


class PartitionerKind(StrEnum):
    """Partitioner class names, matched as a suffix of the configured name."""

    RANDOM = "RandomPartitioner"
    MURMUR3 = "Murmur3Partitioner"


@dataclass(frozen=True)
class Partitioner:
    name: str
    range_min: int
    range_max: int

    @property
    def range_size(self) -> int:
        return self.range_max - self.range_min + 1

    def contains(self, token: int) -> bool:
        return not (
            lower_than(token, self.range_min) or greater_than(token, self.range_max)
        )

    @classmethod
    def from_name(cls, name: str) -> Partitioner:
        """Resolve a partitioner by (fully qualified) class name.

        Raises:
            ReaperException: If the partitioner is not supported
        """
        if name.endswith(PartitionerKind.RANDOM):
            return cls(name=name, range_min=0, range_max=2**127 - 1)
        if name.endswith(PartitionerKind.MURMUR3):
            return cls(name=name, range_min=-(2**63), range_max=2**63 - 1)
        raise ReaperException(f"Unsupported partitioner {name}")
