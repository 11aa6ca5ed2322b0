"""CLI for uploads - turn a media file into a timeline clip entry.

An upload onto an empty timeline lands at 0 with a placeholder length,
then takes the file's real duration once it is known. Prints the clip as
an edit manifest entry, ready to paste under 'clips:'.

Usage:
    cliptrack upload talk.mp4
    cliptrack upload still.png --label "Title card"
"""

import argparse
from pathlib import Path

import yaml

from .edits import add_uploaded_media, resolve_media_duration
from .media import media_kind, probe_duration, resolve_source
from .store import new_editor_state


def _parse_args(args=None):
    parser = argparse.ArgumentParser(
        description="Build a timeline clip entry for a video or image file.",
    )
    parser.add_argument(
        "source",
        help="Path to video or image file",
    )
    parser.add_argument(
        "--label", default=None,
        help="Clip label (default: file name)",
    )
    return parser.parse_args(args)


def main(args=None):
    parsed = _parse_args(args)

    source = resolve_source(parsed.source)
    kind = media_kind(source)
    state = new_editor_state()
    clip = add_uploaded_media(state, source, parsed.label or Path(source).name, kind)

    duration = probe_duration(source)
    if duration is not None:
        clip = resolve_media_duration(state, clip["id"], duration)
        print(f"  LENGTH {kind} {duration:.2f}s")
    else:
        print(f"  PLACE  {kind} {clip['timeline_duration']:.2f}s (placeholder)")

    entry = {
        "id": clip["id"],
        "kind": clip["kind"],
        "source": clip["source"],
        "label": clip["label"],
        "start": clip["timeline_start"],
        "duration": clip["timeline_duration"],
    }
    print(yaml.safe_dump([entry], sort_keys=False), end="")


if __name__ == "__main__":
    main()
