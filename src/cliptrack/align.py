"""Caption alignment - source-media caption spans to timeline text clips.

A transcription service returns caption spans timed against the full,
untrimmed source file. A video clip on the timeline only shows the trim
window [source_offset, source_offset + timeline_duration) of that file,
placed at timeline_start. Alignment maps each span through three steps:

  1. Keep the span only if it overlaps the trim window (half-open test).
  2. Shift into clip-local time (subtract source_offset) and clamp to
     [0, timeline_duration].
  3. Shift into timeline time (add timeline_start) and emit a text clip.

Spans that collapse to zero length after clamping are dropped. Spans with
start >= end (or missing fields) are reported as malformed, never turned
into negative-duration clips. Every dropped span is listed in the result
with its input index and reason, and one bad span never stops the rest of
the batch.

The result distinguishes "nothing was transcribed" (empty_input) from
"nothing survived trimming" (nothing_survived).
"""

import math

from .clips import make_clip, trim_window
from .common import new_clip_id


STATUS_ALIGNED = "aligned"
STATUS_EMPTY_INPUT = "empty_input"
STATUS_NOTHING_SURVIVED = "nothing_survived"

REASON_NO_OVERLAP = "no_overlap"
REASON_DEGENERATE = "degenerate"
REASON_MALFORMED = "malformed"


def _is_number(value) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _check_caption(caption) -> str | None:
    """Return a description of what is wrong with *caption*, or None."""
    if not isinstance(caption, dict):
        return f"expected a mapping, got {type(caption).__name__}"
    for field in ("start", "end"):
        if not _is_number(caption.get(field)):
            return f"'{field}' must be a finite number, got {caption.get(field)!r}"
    if not isinstance(caption.get("text"), str):
        return f"'text' must be a string, got {caption.get('text')!r}"
    if caption["start"] >= caption["end"]:
        return f"start ({caption['start']}) must be < end ({caption['end']})"
    return None


def place_caption(source_clip: dict, start: float, end: float) -> tuple[float, float] | None:
    """Map one source-time span onto the timeline for *source_clip*.

    Returns:
        (timeline_start, timeline_duration), or None when the span does not
        overlap the trim window or collapses to zero length after clamping.
    """
    offset, window_end = trim_window(source_clip)
    if not (start < window_end and end > offset):
        return None

    duration = source_clip["timeline_duration"]
    local_start = max(0.0, start - offset)
    local_end = min(duration, end - offset)
    if local_end - local_start <= 0:
        return None

    return source_clip["timeline_start"] + local_start, local_end - local_start


def align_captions(source_clip: dict, captions: list[dict]) -> dict:
    """Turn source-time caption spans into timeline text clips.

    Args:
        source_clip: The video clip the captions were transcribed from.
        captions: Ordered spans {"start", "end", "text"} in source time.

    Returns:
        {
            "status": "aligned" | "empty_input" | "nothing_survived",
            "clips": [text clip dicts, in caption order],
            "skipped": [{"index", "reason", "detail"}, ...],
        }

    Raises:
        ValueError: If source_clip is not a video clip.
    """
    if source_clip.get("kind") != "video":
        raise ValueError(
            f"Captions can only be aligned to a video clip, "
            f"got kind {source_clip.get('kind')!r}"
        )

    if not captions:
        return {"status": STATUS_EMPTY_INPUT, "clips": [], "skipped": []}

    offset, window_end = trim_window(source_clip)
    clips = []
    skipped = []
    for i, caption in enumerate(captions):
        problem = _check_caption(caption)
        if problem:
            skipped.append({"index": i, "reason": REASON_MALFORMED, "detail": problem})
            continue

        if not (caption["start"] < window_end and caption["end"] > offset):
            skipped.append({
                "index": i,
                "reason": REASON_NO_OVERLAP,
                "detail": (
                    f"span {caption['start']}-{caption['end']}s is outside "
                    f"trim window {offset}-{window_end}s"
                ),
            })
            continue

        placed = place_caption(source_clip, caption["start"], caption["end"])
        if placed is None:
            skipped.append({
                "index": i,
                "reason": REASON_DEGENERATE,
                "detail": "span has zero length after clamping to the clip",
            })
            continue

        timeline_start, timeline_duration = placed
        clips.append(make_clip(
            "text",
            label=caption["text"],
            timeline_start=timeline_start,
            timeline_duration=timeline_duration,
            clip_id=new_clip_id("caption"),
        ))

    status = STATUS_ALIGNED if clips else STATUS_NOTHING_SURVIVED
    return {"status": status, "clips": clips, "skipped": skipped}
