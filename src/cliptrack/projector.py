"""Timeline projector - what the player shows at a given playhead time.

Resolves, for one time value, the single active visual clip (video or
image) and the ordered list of active caption texts. Pure: it reads the
clip list and never writes to it, so it can be called as often as the
playhead moves.

Overlap policy for visual clips:
  - When several video/image clips contain the time, the most recently
    inserted one wins (last match in collection order).
  - When none contains the time, fall back to the first video clip in
    the store regardless of its interval, so the player is not empty
    before the playhead reaches any clip. Images are never a fallback.
"""

from .clips import VISUAL_KINDS, contains_time


def active_visual_clip(clips: list[dict], time: float) -> dict | None:
    """Return the visual clip to play at *time* (see module docstring)."""
    active = None
    for clip in clips:
        if clip["kind"] in VISUAL_KINDS and contains_time(clip, time):
            active = clip
    if active is not None:
        return active

    for clip in clips:
        if clip["kind"] == "video":
            return clip
    return None


def active_captions(clips: list[dict], time: float) -> list[str]:
    """Return caption texts of every text clip containing *time*.

    Insertion order is kept and identical texts are not merged.
    """
    return [
        clip["label"] for clip in clips
        if clip["kind"] == "text" and contains_time(clip, time)
    ]


def project(clips: list[dict], time: float) -> dict:
    """Resolve the presentation at *time*.

    Returns:
        {"active_visual_clip": clip dict or None,
         "active_captions": list of caption strings}
    """
    return {
        "active_visual_clip": active_visual_clip(clips, time),
        "active_captions": active_captions(clips, time),
    }


def project_state(state: dict) -> dict:
    """Project the editor state at its current playhead."""
    return project(state["clips"], state["current_time"])
