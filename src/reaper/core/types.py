from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from reaper.core.segments import SegmentGenerator


class SegmentInfo(BaseModel):
    """A single repair segment and the node range that owns it."""

    start: str = Field(..., description="Exclusive start token")
    end: str = Field(..., description="Inclusive end token")
    span: str = Field(..., description="Number of tokens covered")
    owner_start: Optional[str] = Field(
        None, description="Start token of the enclosing node range"
    )
    owner_end: Optional[str] = Field(
        None, description="End token of the enclosing node range"
    )


class SegmentPlan(BaseModel):
    """Repair segments covering a full ring.

    Tokens are strings: 127-bit values do not survive most JSON decoders.
    """

    partitioner: str = Field(..., description="Partitioner class name")
    ring_size: str = Field(..., description="Number of tokens in the ring")
    segment_count: int = Field(..., description="Number of generated segments")
    segments: List[SegmentInfo] = Field(..., description="Segments in ring order")


def build_segment_plan(
    generator: SegmentGenerator, total_segment_count: int, ring_tokens: Sequence[int]
) -> SegmentPlan:
    """Generate segments and annotate each with its owning token range."""
    segments = generator.generate_segments(total_segment_count, ring_tokens)
    infos = []
    for segment in segments:
        owner = generator.find_owning_range(segment, ring_tokens)
        infos.append(
            SegmentInfo(
                start=str(segment.start),
                end=str(segment.end),
                span=str(segment.span(generator.range_size)),
                owner_start=None if owner is None else str(owner.start),
                owner_end=None if owner is None else str(owner.end),
            )
        )
    return SegmentPlan(
        partitioner=generator.partitioner.name,
        ring_size=str(generator.range_size),
        segment_count=len(infos),
        segments=infos,
    )
