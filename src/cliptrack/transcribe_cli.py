"""CLI for transcription - caption spans in source-media time.

Usage:
    cliptrack transcribe source.mp4
    cliptrack transcribe source.mp4 --model large-v3
    cliptrack transcribe source.mp4 --language en --output captions.json
"""

import argparse

from .transcribe import default_output_path, transcribe


def _parse_args(args=None):
    parser = argparse.ArgumentParser(
        description="Transcribe video/audio into timed caption spans.",
    )
    parser.add_argument(
        "source",
        help="Path to video or audio file",
    )
    parser.add_argument(
        "--output", default=None,
        help="Output JSON path (default: <source>.captions.json)",
    )
    parser.add_argument(
        "--model", default="medium",
        help="Whisper model size (default: medium)",
    )
    parser.add_argument(
        "--language", default=None,
        help="Source language code (default: auto-detect)",
    )
    return parser.parse_args(args)


def main(args=None):
    parsed = _parse_args(args)

    print(f"Transcribing: {parsed.source}")
    print(f"Model: {parsed.model}")

    result = transcribe(
        source=parsed.source,
        model=parsed.model,
        language=parsed.language,
        output=parsed.output,
    )

    print(f"\nDone: {len(result['captions'])} captions, language={result['language']}")
    print(f"Output: {parsed.output or default_output_path(parsed.source)}")


if __name__ == "__main__":
    main()
