"""Split a token ring into repair segments.

Each node owns the range between its predecessor's token and its own. Every
token range is divided into a number of segments proportional to its share
of the ring, so that ``total_segment_count`` segments (rounded up per range)
cover the whole ring with no gaps and no overlaps.
"""

from __future__ import annotations

from typing import Optional, Sequence

from reaper.core.errors import ReaperException
from reaper.core.partitioner import Partitioner
from reaper.core.ring_range import RingRange
from reaper.core.tokens import greater_than, lower_than_or_equal
from reaper.utils.logger import logger


class SegmentGenerator:
    """Generates repair segments for the token space of one partitioner."""

    def __init__(self, partitioner: str | Partitioner):
        if isinstance(partitioner, str):
            partitioner = Partitioner.from_name(partitioner)
        self.partitioner = partitioner

    @property
    def range_min(self) -> int:
        return self.partitioner.range_min

    @property
    def range_max(self) -> int:
        return self.partitioner.range_max

    @property
    def range_size(self) -> int:
        return self.partitioner.range_size

    def in_range(self, token: int) -> bool:
        return self.partitioner.contains(token)

    def token_ranges(self, ring_tokens: Sequence[int]) -> list[RingRange]:
        """Ranges owned by each node, given the sorted node tokens."""
        count = len(ring_tokens)
        return [
            RingRange(ring_tokens[i], ring_tokens[(i + 1) % count])
            for i in range(count)
        ]

    def generate_segments(
        self, total_segment_count: int, ring_tokens: Sequence[int]
    ) -> list[RingRange]:
        """
        Tile the whole ring with repair segments.

        Args:
            total_segment_count: Approximate number of segments for the whole ring
            ring_tokens: Sorted tokens of the nodes in the ring

        Returns:
            Segments in ring order, starting at the first node token

        Raises:
            ReaperException: On invalid tokens or if the segments would not
                cover the entire ring
        """
        if not ring_tokens:
            raise ReaperException("Cannot generate segments for an empty ring")
        if total_segment_count < 1:
            raise ReaperException(
                f"Segment count must be positive, got {total_segment_count}"
            )

        token_range_count = len(ring_tokens)
        repair_segments: list[RingRange] = []

        for token_range in self.token_ranges(ring_tokens):
            start, stop = token_range.start, token_range.end

            if not self.in_range(start) or not self.in_range(stop):
                raise ReaperException(
                    f"Tokens ({start},{stop}) not in range of {self.partitioner.name}"
                )
            if start == stop and token_range_count != 1:
                raise ReaperException(
                    f"Tokens ({start},{stop}): two nodes have the same token"
                )

            range_size = stop - start
            if lower_than_or_equal(range_size, 0):
                # wraparound
                range_size += self.range_size

            # ceil(range_size / ring size * total_segment_count), exactly
            quotient, remainder = divmod(
                range_size * total_segment_count, self.range_size
            )
            segment_count = quotient + (1 if remainder else 0)

            endpoints = []
            for j in range(segment_count + 1):
                token = start + range_size * j // segment_count
                if greater_than(token, self.range_max):
                    token -= self.range_size
                endpoints.append(token)

            logger.debug(
                "Token range %s split into %s segments", token_range, segment_count
            )
            repair_segments.extend(
                RingRange(endpoints[j], endpoints[j + 1]) for j in range(segment_count)
            )

        total = sum(segment.span(self.range_size) for segment in repair_segments)
        if total != self.range_size:
            raise ReaperException("Not entire ring would get repaired")

        logger.info(
            "Generated %s segments for %s token ranges",
            len(repair_segments),
            token_range_count,
        )
        return repair_segments

    def find_owning_range(
        self, segment: RingRange, ring_tokens: Sequence[int]
    ) -> Optional[RingRange]:
        """First node token range that fully encloses ``segment``, if any.

        A single-token ring has one range ``(t, t]`` which, as in
        :meth:`generate_segments`, stands for the whole ring.
        """
        ranges = self.token_ranges(ring_tokens)
        if len(ranges) == 1:
            return ranges[0]
        for token_range in ranges:
            if token_range.encloses(segment):
                return token_range
        return None

    def validate_segments(
        self, segments: Sequence[RingRange], ring_tokens: Sequence[int]
    ) -> None:
        """Check that every segment lies within a single node's range.

        Raises:
            ReaperException: Naming the first segment that straddles two ranges
        """
        for segment in segments:
            if self.find_owning_range(segment, ring_tokens) is None:
                raise ReaperException(
                    f"Segment {segment} is not enclosed by any token range"
                )
