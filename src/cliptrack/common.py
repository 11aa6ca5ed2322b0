"""cliptrack.common - shared utilities for the timeline model.

Contains: path variable resolution, clip id generation, and timecode
formatting for player readouts.
"""

import re
import uuid


# ── Path utilities ─────────────────────────────────────────────────

def resolve_path_vars(text: str, paths: dict[str, str]) -> str:
    """Replace ${name} variables in a string using the paths dict."""
    def _replace(match):
        key = match.group(1)
        if key not in paths:
            raise ValueError(f"Unknown path variable: ${{{key}}}")
        return paths[key]
    return re.sub(r"\$\{(\w+)\}", _replace, text)


# ── Clip ids ───────────────────────────────────────────────────────

def new_clip_id(prefix: str = "clip") -> str:
    """Return a fresh, collision-resistant clip id like 'clip-3f2a...'.

    Ids are never derived from wall-clock time: two clips created in the
    same millisecond (e.g. a batch of captions) must still differ.
    """
    return f"{prefix}-{uuid.uuid4().hex}"


# ── Time formatting ────────────────────────────────────────────────

def format_timecode(seconds: float) -> str:
    """Format seconds as 'MM:SS:cc' (minutes, seconds, centiseconds)."""
    seconds = max(0.0, seconds)
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    centis = int((seconds % 1) * 100)
    return f"{minutes:02d}:{secs:02d}:{centis:02d}"
