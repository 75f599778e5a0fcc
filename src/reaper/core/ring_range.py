"""Half-open arcs on a modular token ring."""

from __future__ import annotations

from dataclasses import dataclass

from reaper.core.tokens import greater_than_or_equal, lower_than_or_equal


@dataclass(frozen=True)
class RingRange:
    """The arc ``(start, end]`` walking forward on the ring.

    The ring size is not stored; callers pass it to :meth:`span` and must
    keep it consistent with the positions used here. No bounds checking is
    done at construction: ``start`` and ``end`` are expected to be valid
    tokens of whatever ring the caller tracks.

    ``start == end`` is not special-cased. :meth:`span` reports it as a full
    revolution, while :meth:`encloses` treats it as non-wrapping.
    """

    start: int
    end: int

    def span(self, ring_size: int) -> int:
        """Forward length of the arc on a ring of ``ring_size`` tokens."""
        if greater_than_or_equal(self.start, self.end):
            return self.end - self.start + ring_size
        return self.end - self.start

    def encloses(self, other: RingRange) -> bool:
        """Whether ``other`` lies entirely within this arc.

        Both ranges must come from the same ring. Either may wrap through
        the origin independently.
        """
        if lower_than_or_equal(self.start, self.end):
            # A non-wrapping arc never contains one that crosses the origin
            return (
                lower_than_or_equal(other.start, other.end)
                and greater_than_or_equal(other.start, self.start)
                and lower_than_or_equal(other.end, self.end)
            )
        elif lower_than_or_equal(other.start, other.end):
            # Non-wrapping inner arc sits before or after the origin
            return greater_than_or_equal(
                other.start, self.start
            ) or lower_than_or_equal(other.end, self.end)
        else:
            return greater_than_or_equal(
                other.start, self.start
            ) and lower_than_or_equal(other.end, self.end)

    def __str__(self) -> str:
        return f"({self.start},{self.end}]"
