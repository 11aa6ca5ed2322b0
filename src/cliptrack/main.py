"""Subcommand dispatcher for cliptrack.

Usage:
    cliptrack preview    --manifest edit.yaml --time 4
    cliptrack captions   --manifest edit.yaml --captions talk.captions.json
    cliptrack transcribe talk.mp4 --output talk.captions.json
    cliptrack upload     talk.mp4
"""

import argparse
import sys


def main(args=None):
    parser = argparse.ArgumentParser(
        prog="cliptrack",
        description="Timeline clip model: preview, caption alignment, transcription, and uploads.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands. Each delegates to its own module's main().
    subparsers.add_parser("preview", help="Show what plays at a playhead time")
    subparsers.add_parser("captions", help="Align transcribed captions to a video clip")
    subparsers.add_parser("transcribe", help="Transcribe video/audio into caption spans")
    subparsers.add_parser("upload", help="Build a clip entry for a media file")

    # Parse only the subcommand name, pass the rest to the subcommand's parser.
    parsed, remaining = parser.parse_known_args(args)

    if parsed.command is None:
        parser.print_help()
        sys.exit(1)

    if parsed.command == "preview":
        from .preview_cli import main as preview_main
        preview_main(remaining)
    elif parsed.command == "captions":
        from .captions_cli import main as captions_main
        captions_main(remaining)
    elif parsed.command == "transcribe":
        from .transcribe_cli import main as transcribe_main
        transcribe_main(remaining)
    elif parsed.command == "upload":
        from .upload_cli import main as upload_main
        upload_main(remaining)


if __name__ == "__main__":
    main()
