"""Editing operations - the only writers of the editor state.

Each operation is one UI event's worth of change: insert a clip at the
playhead, drop an upload onto an empty timeline, delete the selection,
add captions for the selected video, split at the playhead, or record a
media duration once it is known. All of them go through the store
primitives, so clip invariants are enforced in one place.
"""

from .align import align_captions
from .clips import InvalidClip, contains_time, make_clip, replace_clip_fields
from .common import new_clip_id
from .projector import active_visual_clip
from .store import (
    delete_clip,
    get_clip,
    insert_clip,
    insert_clips,
    replace_clip,
    selected_clip,
)


DEFAULT_CLIP_DURATION = 5.0    # seconds, clips added from the media library
PLACEHOLDER_DURATION = 10.0    # seconds, uploads before metadata is loaded

DEFAULT_LABELS = {
    "video": "Video Clip",
    "image": "Generated Image",
}


# ── Inserting ──────────────────────────────────────────────────────


def add_clip(
    state: dict,
    kind: str,
    source: str,
    label: str,
    duration: float = DEFAULT_CLIP_DURATION,
    at: float | None = None,
) -> dict:
    """Create a clip and insert it at *at* (default: the playhead).

    Raises:
        InvalidClip: If the resulting clip is malformed.
    """
    start = state["current_time"] if at is None else at
    clip = make_clip(
        kind,
        label=label,
        timeline_start=start,
        timeline_duration=duration,
        source=source,
    )
    return insert_clip(state, clip)


def add_to_timeline(state: dict, source: str, kind: str) -> dict:
    """Insert a library asset at the playhead with the default length."""
    if kind not in DEFAULT_LABELS:
        raise InvalidClip(f"Only video or image assets can be added, got {kind!r}")
    return add_clip(state, kind, source, DEFAULT_LABELS[kind])


def add_generated_image(state: dict, locator: str) -> dict:
    """Insert an image returned by the image-generation service."""
    return add_to_timeline(state, locator, "image")


def add_uploaded_media(state: dict, source: str, name: str, kind: str) -> dict | None:
    """Handle a fresh upload.

    An upload onto an empty timeline is placed at 0 with a placeholder
    duration and selected, so captions can be generated right away. If
    the timeline already has clips, the upload only goes to the library
    and the state is unchanged.

    Returns:
        The inserted clip, or None if nothing was inserted.

    Raises:
        InvalidClip: *kind* is not "video" or "image".
    """
    if kind not in DEFAULT_LABELS:
        raise InvalidClip(f"Only video or image files can be uploaded, got {kind!r}")
    if state["clips"]:
        return None
    clip = add_clip(
        state, kind, source, name,
        duration=PLACEHOLDER_DURATION,
        at=0.0,
    )
    state["selected_clip_id"] = clip["id"]
    return clip


def resolve_media_duration(state: dict, clip_id: str, natural_duration: float) -> dict:
    """Replace a placeholder duration with the source's real length.

    The trim window keeps its offset, so the new duration is whatever
    remains of the source after source_offset.

    Raises:
        KeyError: Unknown clip id.
        ValueError: Text clips have no source duration.
        InvalidClip: Nothing of the source remains after the offset.
    """
    clip = get_clip(state, clip_id)
    if clip is None:
        raise KeyError(f"Unknown clip id: '{clip_id}'")
    if clip["kind"] == "text":
        raise ValueError(f"Clip {clip_id}: text clips have no source duration")

    updated = replace_clip_fields(
        clip, timeline_duration=natural_duration - clip["source_offset"],
    )
    replace_clip(state, clip_id, [updated])
    return updated


# ── Removing ───────────────────────────────────────────────────────


def remove_selected(state: dict) -> bool:
    """Delete the selected clip. No selection is a no-op.

    Returns:
        True if a clip was removed.
    """
    if state["selected_clip_id"] is None:
        return False
    return delete_clip(state, state["selected_clip_id"])


# ── Captions ───────────────────────────────────────────────────────


def apply_captions(state: dict, captions: list[dict]) -> dict:
    """Align captions to the selected video clip and insert the results.

    Returns:
        The aligner result dict (status, clips, skipped). Nothing is
        inserted unless status is "aligned".

    Raises:
        ValueError: No clip selected, or the selection is not a video.
    """
    source_clip = selected_clip(state)
    if source_clip is None or source_clip["kind"] != "video":
        raise ValueError("Select a video clip on the timeline to generate captions for")

    result = align_captions(source_clip, captions)
    if result["clips"]:
        insert_clips(state, result["clips"])
    return result


# ── Splitting ──────────────────────────────────────────────────────


def split_clip(clip: dict, time: float) -> tuple[dict, dict]:
    """Cut *clip* at timeline *time* into a left and right piece.

    Both pieces share the source. The right piece starts later in the
    source by the local split time; text pieces keep offset 0.

    Raises:
        ValueError: *time* is not strictly inside the clip.
    """
    local = time - clip["timeline_start"]
    if not 0 < local < clip["timeline_duration"]:
        raise ValueError(
            f"Clip {clip['id']}: split time {time}s must fall strictly inside "
            f"{clip['timeline_start']}-{clip['timeline_start'] + clip['timeline_duration']}s"
        )

    left = replace_clip_fields(
        clip, id=new_clip_id(), timeline_duration=local,
    )
    right_offset = 0.0 if clip["kind"] == "text" else clip["source_offset"] + local
    right = replace_clip_fields(
        clip,
        id=new_clip_id(),
        timeline_start=time,
        timeline_duration=clip["timeline_duration"] - local,
        source_offset=right_offset,
    )
    return left, right


def split_at_playhead(state: dict) -> tuple[dict, dict]:
    """Split the selected clip (or the active visual clip) at the playhead.

    The original is replaced by both pieces in one step. If the original
    was selected, the left piece becomes the selection.

    Raises:
        ValueError: No clip under the playhead to split, or the playhead
            sits exactly on a clip boundary.
    """
    time = state["current_time"]
    target = selected_clip(state)
    if target is None or not contains_time(target, time):
        target = active_visual_clip(state["clips"], time)
    if target is None or not contains_time(target, time):
        raise ValueError(f"No clip under the playhead at {time}s to split")

    was_selected = state["selected_clip_id"] == target["id"]
    left, right = split_clip(target, time)
    replace_clip(state, target["id"], [left, right])
    if was_selected:
        state["selected_clip_id"] = left["id"]
    return left, right
