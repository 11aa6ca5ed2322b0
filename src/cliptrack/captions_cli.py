"""CLI for captioning - place transcribed captions on a trimmed video clip.

Two-step workflow:
  1. Transcribe the clip's full source file (cliptrack transcribe).
  2. Align the captions to the clip's trim window on the timeline.

Usage:
    cliptrack captions --manifest edit.yaml --captions talk.captions.json
    cliptrack captions --manifest edit.yaml --captions c.json --clip talk
"""

import argparse
import sys

from .align import STATUS_EMPTY_INPUT, STATUS_NOTHING_SURVIVED
from .captions_io import load_captions
from .edits import apply_captions
from .manifest import load_edit_manifest, validate_media_sources
from .store import select_clip


def _parse_args(args=None):
    parser = argparse.ArgumentParser(
        description="Align source-time captions to a video clip on the timeline.",
    )
    parser.add_argument(
        "--manifest", required=True,
        help="Path to edit manifest YAML",
    )
    parser.add_argument(
        "--captions", required=True,
        help="Captions JSON from 'cliptrack transcribe'",
    )
    parser.add_argument(
        "--clip", default=None,
        help="Video clip id to caption (default: manifest selection)",
    )
    return parser.parse_args(args)


def main(args=None):
    parsed = _parse_args(args)

    state = load_edit_manifest(parsed.manifest)
    validate_media_sources(state)
    if parsed.clip is not None:
        select_clip(state, parsed.clip)

    captions = load_captions(parsed.captions)
    print(f"Aligning {len(captions)} captions to clip {state['selected_clip_id']}")

    try:
        result = apply_captions(state, captions)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    for skip in result["skipped"]:
        print(f"  SKIP   #{skip['index']} {skip['reason']}: {skip['detail']}")
    for clip in result["clips"]:
        end = clip["timeline_start"] + clip["timeline_duration"]
        print(f"  ADD    {clip['timeline_start']:.2f}s - {end:.2f}s  {clip['label']}")

    if result["status"] == STATUS_EMPTY_INPUT:
        print("\nNo speech detected: the captions file is empty.")
        sys.exit(1)
    if result["status"] == STATUS_NOTHING_SURVIVED:
        print("\nCaptions generated but none fall within the trimmed video segment.")
        sys.exit(1)

    print(f"\nDone: {len(result['clips'])} caption clips, {len(result['skipped'])} skipped")


if __name__ == "__main__":
    main()
