"""Clip records - the sole entity of the timeline model.

A clip is a plain dict with a closed set of kinds:

    {
        "id": "clip-...",          # unique, never reused
        "kind": "video",           # "video" | "image" | "text"
        "source": "/media/a.mp4",  # empty for text clips
        "label": "Talk",           # caption content for text clips
        "timeline_start": 0.0,     # seconds, >= 0
        "timeline_duration": 4.0,  # seconds, > 0
        "source_offset": 2.0,      # seconds into the source, 0 for text
    }

Two coordinate spaces meet here. Timeline time positions the clip at
[timeline_start, timeline_start + timeline_duration). Source-media time
is native to the backing asset; the trim window of a media clip is
[source_offset, source_offset + timeline_duration).

Clips are never mutated in place. Edits build a new dict (see
`replace_clip_fields`) and swap it into the store.
"""

import math

from .common import new_clip_id


VALID_KINDS = {"video", "image", "text"}

VISUAL_KINDS = {"video", "image"}


class InvalidClip(ValueError):
    """A clip violates a data-model invariant and must not be stored."""


def validate_clip(clip: dict) -> None:
    """Check every data-model invariant on a clip dict.

    Raises:
        InvalidClip: Unknown kind, empty id, non-finite numbers,
            timeline_duration <= 0, timeline_start < 0, negative
            source_offset, or a text clip carrying an offset.
    """
    cid = clip.get("id")
    if not isinstance(cid, str) or not cid:
        raise InvalidClip(f"Clip id must be a non-empty string, got {cid!r}")

    kind = clip.get("kind")
    if kind not in VALID_KINDS:
        raise InvalidClip(
            f"Clip {cid}: invalid kind {kind!r}. Valid: {sorted(VALID_KINDS)}"
        )

    for field in ("timeline_start", "timeline_duration", "source_offset"):
        value = clip.get(field)
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise InvalidClip(f"Clip {cid}: {field} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise InvalidClip(f"Clip {cid}: {field} must be finite, got {value!r}")

    if clip["timeline_duration"] <= 0:
        raise InvalidClip(
            f"Clip {cid}: timeline_duration must be > 0, got {clip['timeline_duration']}"
        )
    if clip["timeline_start"] < 0:
        raise InvalidClip(
            f"Clip {cid}: timeline_start must be >= 0, got {clip['timeline_start']}"
        )
    if clip["source_offset"] < 0:
        raise InvalidClip(
            f"Clip {cid}: source_offset must be >= 0, got {clip['source_offset']}"
        )
    if kind == "text" and clip["source_offset"] != 0:
        raise InvalidClip(f"Clip {cid}: text clips have no source, offset must be 0")


def make_clip(
    kind: str,
    label: str,
    timeline_start: float,
    timeline_duration: float,
    source: str = "",
    source_offset: float = 0.0,
    clip_id: str | None = None,
) -> dict:
    """Build and validate a new clip dict.

    Args:
        kind: "video", "image", or "text".
        label: Display name; for text clips, the caption text.
        timeline_start: Position on the timeline in seconds.
        timeline_duration: Length on the timeline in seconds.
        source: Opaque media locator. Ignored (forced empty) for text.
        source_offset: Trim start within the source. Must be 0 for text.
        clip_id: Explicit id. A fresh one is generated when None.

    Returns:
        Validated clip dict.

    Raises:
        InvalidClip: If any invariant is violated.
    """
    clip = {
        "id": clip_id if clip_id is not None else new_clip_id(),
        "kind": kind,
        "source": "" if kind == "text" else str(source),
        "label": str(label),
        "timeline_start": timeline_start,
        "timeline_duration": timeline_duration,
        "source_offset": source_offset,
    }
    validate_clip(clip)
    return clip


def replace_clip_fields(clip: dict, **changes) -> dict:
    """Return a validated copy of *clip* with *changes* applied."""
    updated = {**clip, **changes}
    validate_clip(updated)
    return updated


def clip_end(clip: dict) -> float:
    """Timeline time at which the clip stops being active (exclusive)."""
    return clip["timeline_start"] + clip["timeline_duration"]


def contains_time(clip: dict, time: float) -> bool:
    """True if *time* falls in [timeline_start, timeline_start + duration)."""
    return clip["timeline_start"] <= time < clip_end(clip)


def trim_window(clip: dict) -> tuple[float, float]:
    """Visible source-media interval [offset, offset + duration)."""
    offset = clip["source_offset"]
    return offset, offset + clip["timeline_duration"]


def timeline_extent(clips: list[dict]) -> float:
    """Furthest end point of any clip on the timeline (0 when empty)."""
    return max((clip_end(c) for c in clips), default=0.0)
