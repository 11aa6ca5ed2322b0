"""Clip store - the editor state context object.

The editor state is a plain dict passed explicitly to every operation:

    {
        "clips": [...],             # insertion order, not time order
        "current_time": 0.0,        # playhead, seconds
        "duration": 0.0,            # total timeline length, 0 = unknown
        "is_playing": False,
        "selected_clip_id": None,
    }

Writers never mutate the clips list in place; each change swaps in a new
list. A snapshot taken by a reader (e.g. the projector) therefore never
changes underneath it.
"""

from .clips import InvalidClip, validate_clip


DEFAULT_SEEK_SPAN = 10.0   # seek range used while the duration is unknown


def new_editor_state(duration: float = 0.0) -> dict:
    """Return an empty editor state."""
    return {
        "clips": [],
        "current_time": 0.0,
        "duration": duration,
        "is_playing": False,
        "selected_clip_id": None,
    }


# ── Lookup ─────────────────────────────────────────────────────────


def get_clip(state: dict, clip_id: str) -> dict | None:
    """Return the clip with *clip_id*, or None."""
    for clip in state["clips"]:
        if clip["id"] == clip_id:
            return clip
    return None


def selected_clip(state: dict) -> dict | None:
    """Return the currently selected clip, or None."""
    if state["selected_clip_id"] is None:
        return None
    return get_clip(state, state["selected_clip_id"])


# ── Clip collection writes ─────────────────────────────────────────


def insert_clip(state: dict, clip: dict) -> dict:
    """Append a well-formed clip to the store.

    Raises:
        InvalidClip: Invariant violation or duplicate id. The store is
            left unchanged.
    """
    validate_clip(clip)
    if get_clip(state, clip["id"]) is not None:
        raise InvalidClip(f"Duplicate clip id: '{clip['id']}'")
    state["clips"] = [*state["clips"], clip]
    return clip


def insert_clips(state: dict, clips: list[dict]) -> list[dict]:
    """Append several clips atomically: all are stored or none are."""
    seen = {c["id"] for c in state["clips"]}
    for clip in clips:
        validate_clip(clip)
        if clip["id"] in seen:
            raise InvalidClip(f"Duplicate clip id: '{clip['id']}'")
        seen.add(clip["id"])
    state["clips"] = [*state["clips"], *clips]
    return clips


def delete_clip(state: dict, clip_id: str) -> bool:
    """Remove the clip with *clip_id*. Absent ids are a no-op.

    Clears the selection if the deleted clip was selected.

    Returns:
        True if a clip was removed.
    """
    remaining = [c for c in state["clips"] if c["id"] != clip_id]
    removed = len(remaining) != len(state["clips"])
    if removed:
        state["clips"] = remaining
    if state["selected_clip_id"] == clip_id:
        state["selected_clip_id"] = None
    return removed


def replace_clip(state: dict, clip_id: str, new_clips: list[dict]) -> None:
    """Swap one clip for zero or more clips at the same list position.

    Used for edits that rewrite a clip (duration resolution, splits). The
    whole replacement is validated before the store changes.

    Raises:
        KeyError: No clip with *clip_id*.
        InvalidClip: A replacement is malformed or collides with an id
            already in the store.
    """
    index = next(
        (i for i, c in enumerate(state["clips"]) if c["id"] == clip_id), None,
    )
    if index is None:
        raise KeyError(f"Unknown clip id: '{clip_id}'")

    others = {c["id"] for c in state["clips"] if c["id"] != clip_id}
    for clip in new_clips:
        validate_clip(clip)
        if clip["id"] in others:
            raise InvalidClip(f"Duplicate clip id: '{clip['id']}'")
        others.add(clip["id"])

    clips = state["clips"]
    state["clips"] = [*clips[:index], *new_clips, *clips[index + 1:]]
    if state["selected_clip_id"] == clip_id and not any(
        c["id"] == clip_id for c in new_clips
    ):
        state["selected_clip_id"] = None


# ── Selection ──────────────────────────────────────────────────────


def select_clip(state: dict, clip_id: str) -> None:
    """Select a clip by id.

    Raises:
        ValueError: No clip with *clip_id* exists. Selection is unchanged.
    """
    if get_clip(state, clip_id) is None:
        raise ValueError(f"Cannot select unknown clip id: '{clip_id}'")
    state["selected_clip_id"] = clip_id


def clear_selection(state: dict) -> None:
    state["selected_clip_id"] = None


# ── Playhead and transport ─────────────────────────────────────────


def set_duration(state: dict, duration: float) -> None:
    """Record the total timeline duration once the player knows it."""
    if duration < 0:
        raise ValueError(f"Duration must be >= 0, got {duration}")
    state["duration"] = duration
    if duration and state["current_time"] > duration:
        state["current_time"] = duration


def seek(state: dict, time: float) -> float:
    """Move the playhead, clamped to [0, duration].

    While the duration is still unknown (0), the range is
    [0, DEFAULT_SEEK_SPAN].
    """
    span = state["duration"] or DEFAULT_SEEK_SPAN
    state["current_time"] = max(0.0, min(span, time))
    return state["current_time"]


def seek_fraction(state: dict, fraction: float) -> float:
    """Seek to a 0..1 position along the timeline ruler."""
    fraction = max(0.0, min(1.0, fraction))
    return seek(state, fraction * (state["duration"] or DEFAULT_SEEK_SPAN))


def toggle_playback(state: dict) -> bool:
    state["is_playing"] = not state["is_playing"]
    return state["is_playing"]
