"""CLI for previewing the timeline - what plays at given playhead times.

Usage:
    cliptrack preview --manifest edit.yaml
    cliptrack preview --manifest edit.yaml --time 4 --time 6.5
"""

import argparse

from .common import format_timecode
from .manifest import load_edit_manifest
from .projector import project


def _parse_args(args=None):
    parser = argparse.ArgumentParser(
        description="Show the active clip and captions at playhead positions.",
    )
    parser.add_argument(
        "--manifest", required=True,
        help="Path to edit manifest YAML",
    )
    parser.add_argument(
        "--time", type=float, action="append", default=None,
        help="Playhead time in seconds (repeatable, default: manifest playhead)",
    )
    return parser.parse_args(args)


def _describe(clip: dict | None) -> str:
    if clip is None:
        return "(none)"
    return (
        f"{clip['id']} [{clip['kind']}] {clip['label']}  "
        f"src {clip['source_offset']:.2f}s+  {clip['source']}"
    )


def main(args=None):
    parsed = _parse_args(args)

    state = load_edit_manifest(parsed.manifest)
    times = parsed.time or [state["current_time"]]

    print(f"Timeline: {len(state['clips'])} clips, {format_timecode(state['duration'])}")
    for t in times:
        view = project(state["clips"], t)
        print(f"\n{format_timecode(t)}")
        print(f"  VISUAL {_describe(view['active_visual_clip'])}")
        if not view["active_captions"]:
            print("  TEXT   (none)")
        for text in view["active_captions"]:
            print(f"  TEXT   {text}")


if __name__ == "__main__":
    main()
