"""Captions file loader.

Reads the JSON written by `cliptrack transcribe`:

  {
    "source": "talk.mp4",
    "captions": [
      {"start": 0.0, "end": 1.8, "text": "Hello"},
      ...
    ]
  }

A bare JSON list of spans is accepted too. Only the file shape is checked
here; per-span problems (start >= end, bad numbers) are left for the
aligner, which reports them individually instead of failing the batch.
"""

import json
from pathlib import Path


def load_captions(path: str | Path) -> list[dict]:
    """Load caption spans from a captions JSON file.

    Raises:
        ValueError: The file is not a captions document.
    """
    with open(path) as f:
        raw = json.load(f)

    if isinstance(raw, dict):
        if "captions" not in raw:
            raise ValueError(f"Captions file {path}: missing required 'captions' field")
        captions = raw["captions"]
    else:
        captions = raw

    if not isinstance(captions, list):
        raise ValueError(
            f"Captions file {path}: 'captions' must be a list, "
            f"got {type(captions).__name__}"
        )
    return captions
