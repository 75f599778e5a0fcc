"""CLI entry point for planning repair segments over a token ring."""

from argparse import ArgumentParser
from typing import Optional, Sequence

from reaper.core.errors import ReaperException
from reaper.core.segments import SegmentGenerator
from reaper.core.types import SegmentPlan, build_segment_plan
from reaper.utils.args import string_to_tokens
from reaper.utils.logger import logger


def format_plan(plan: SegmentPlan) -> str:
    lines = [
        f"{plan.partitioner}: {plan.segment_count} segments over {plan.ring_size} tokens"
    ]
    for seg in plan.segments:
        owner = (
            f"({seg.owner_start},{seg.owner_end}]"
            if seg.owner_start is not None
            else "none"
        )
        lines.append(f"({seg.start},{seg.end}]  span={seg.span}  owner={owner}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Get default values from settings
    from reaper.config import get_settings

    settings = get_settings()

    ap = ArgumentParser(description="Split a token ring into repair segments")
    ap.add_argument(
        "tokens",
        type=string_to_tokens,
        help='Node tokens as a list literal, e.g. "[0, 42, 1000]"',
    )
    ap.add_argument(
        "-p",
        "--partitioner",
        type=str,
        default=settings.segments.partitioner,
        help=f"Partitioner class name (default: {settings.segments.partitioner})",
    )
    ap.add_argument(
        "-n",
        "--segments",
        type=int,
        default=settings.segments.count,
        help=f"Approximate number of segments (default: {settings.segments.count})",
    )
    ap.add_argument(
        "--json",
        action="store_true",
        help="Print the segment plan as JSON",
    )
    args = ap.parse_args(argv)

    try:
        generator = SegmentGenerator(args.partitioner)
        plan = build_segment_plan(generator, args.segments, args.tokens)
    except ReaperException as e:
        logger.error("Segment generation failed: %s", e)
        return 1

    if args.json:
        print(plan.model_dump_json(indent=2))
    else:
        print(format_plan(plan))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
