"""Media source resolution - locators, kinds, and natural durations.

Uses moviepy for duration probing (imageio_ffmpeg does NOT bundle
ffprobe). Images have no natural duration.
"""

import mimetypes
from pathlib import Path

from moviepy import VideoFileClip


def media_kind(path: str | Path) -> str:
    """Return "video" or "image" from the file's MIME type.

    Raises:
        ValueError: Neither a video nor an image.
    """
    mime, _ = mimetypes.guess_type(str(path))
    if mime and mime.startswith("video"):
        return "video"
    if mime and mime.startswith("image"):
        return "image"
    raise ValueError(f"Unsupported media type for '{path}': {mime or 'unknown'}")


def resolve_source(path: str | Path) -> str:
    """Return a stable locator (absolute path) for an uploaded file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Media file not found: {path}")
    return str(p.resolve())


def probe_duration(path: str | Path) -> float | None:
    """Natural duration in seconds of a video, or None for images."""
    if media_kind(path) == "image":
        return None
    with VideoFileClip(str(path)) as clip:
        return clip.duration
