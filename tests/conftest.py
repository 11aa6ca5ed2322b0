"""Shared test fixtures for cliptrack tests."""

import subprocess

import pytest
import imageio_ffmpeg

_FFMPEG = imageio_ffmpeg.get_ffmpeg_exe()


@pytest.fixture
def source_video(tmp_path):
    """Create a 5-second test video (320x240, 10fps) with audio using ffmpeg.

    Shared across test_media.py and test_transcribe.py.
    """
    out = tmp_path / "source.mp4"
    subprocess.run(
        [
            _FFMPEG, "-y",
            "-f", "lavfi", "-i", "color=c=blue:s=320x240:d=5:r=10",
            "-f", "lavfi", "-i", "anullsrc=r=44100:cl=mono",
            "-shortest",
            "-c:v", "libx264", "-crf", "28", "-pix_fmt", "yuv420p",
            "-c:a", "aac", "-b:a", "32k",
            str(out),
        ],
        check=True,
        capture_output=True,
    )
    return out


@pytest.fixture
def editor_state():
    """Editor state with one trimmed video [0,10) and one caption [3,5)."""
    from cliptrack.clips import make_clip
    from cliptrack.store import insert_clip, new_editor_state

    state = new_editor_state(duration=10.0)
    insert_clip(state, make_clip(
        "video", label="Talk", timeline_start=0.0, timeline_duration=10.0,
        source="/media/talk.mp4", source_offset=2.0, clip_id="talk",
    ))
    insert_clip(state, make_clip(
        "text", label="Hello", timeline_start=3.0, timeline_duration=2.0,
        clip_id="hello",
    ))
    return state
