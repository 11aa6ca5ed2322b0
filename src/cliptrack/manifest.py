"""Edit manifest loader - build an editor state from YAML.

Follows the same ${var} path resolution as the other loaders. The
manifest is an input description of the timeline; nothing writes it back.

Edit manifest schema:
  paths:
    media: "/data/media"
  editor:
    current_time: 0        # optional, default 0
    duration: 30           # optional, default = furthest clip end
  clips:
    - id: talk             # optional, generated if missing
      kind: video          # video | image | text
      source: "${media}/talk.mp4"
      label: Talk          # optional for media, default = source file name
      start: 0
      duration: 10
      offset: 2            # optional, default 0, must be 0 for text
    - kind: text
      label: "Hello there"
      start: 3
      duration: 2
  selected: talk           # optional
"""

from pathlib import Path

import yaml

from .clips import VALID_KINDS, InvalidClip, make_clip, timeline_extent
from .common import resolve_path_vars
from .store import insert_clip, new_editor_state, seek, select_clip


def _number(entry: dict, field: str, label: str, default=None) -> float:
    if field not in entry:
        if default is None:
            raise ValueError(f"{label}: missing required field '{field}'")
        return default
    value = entry[field]
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ValueError(f"{label}: {field} must be a number, got {value!r}")
    return float(value)


def _parse_clip(i: int, entry: dict, paths: dict[str, str]) -> dict:
    """Validate one manifest clip entry and build the clip dict."""
    if not isinstance(entry, dict):
        raise ValueError(f"Clip {i}: expected a mapping, got {type(entry).__name__}")

    kind = entry.get("kind")
    if kind not in VALID_KINDS:
        raise ValueError(
            f"Clip {i}: invalid kind {kind!r}. Valid: {sorted(VALID_KINDS)}"
        )
    label = f"Clip {i}" + (f" ({entry['id']})" if "id" in entry else "")

    start = _number(entry, "start", label)
    duration = _number(entry, "duration", label)
    offset = _number(entry, "offset", label, default=0.0)

    if kind == "text":
        if entry.get("source"):
            raise ValueError(f"{label}: text clips cannot have a source")
        if "label" not in entry:
            raise ValueError(f"{label}: text clips require a 'label' (the caption)")
        source = ""
        name = str(entry["label"])
    else:
        if "source" not in entry:
            raise ValueError(f"{label}: missing required field 'source'")
        source = resolve_path_vars(str(entry["source"]), paths)
        name = str(entry.get("label", Path(source).name))

    try:
        return make_clip(
            kind,
            label=name,
            timeline_start=start,
            timeline_duration=duration,
            source=source,
            source_offset=offset,
            clip_id=str(entry["id"]) if "id" in entry else None,
        )
    except InvalidClip as e:
        raise ValueError(f"{label}: {e}") from e


def load_edit_manifest(manifest_path: str | Path) -> dict:
    """Load and validate an edit manifest into an editor state.

    Processing pipeline:
      1. Parse YAML.
      2. Resolve ${path} variables in clip sources.
      3. Validate each clip entry and insert it in file order.
      4. Apply editor settings (duration, playhead) and selection.

    Args:
        manifest_path: Path to the YAML edit manifest.

    Returns:
        Editor state dict (see cliptrack.store).

    Raises:
        ValueError: Missing/invalid fields or duplicate clip ids.
    """
    with open(manifest_path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(
            f"Edit manifest: expected a mapping at top level, got {type(raw).__name__}"
        )
    if "clips" not in raw:
        raise ValueError("Edit manifest: missing required 'clips' field")
    if not isinstance(raw["clips"], list):
        raise ValueError("Edit manifest: 'clips' must be a list")

    paths = raw.get("paths") or {}
    if not isinstance(paths, dict):
        raise ValueError("Edit manifest: 'paths' must be a mapping")
    state = new_editor_state()

    for i, entry in enumerate(raw["clips"]):
        clip = _parse_clip(i, entry, paths)
        try:
            insert_clip(state, clip)
        except InvalidClip as e:
            raise ValueError(f"Clip {i}: {e}") from e

    editor = raw.get("editor") or {}
    if not isinstance(editor, dict):
        raise ValueError("Edit manifest: 'editor' must be a mapping")
    duration = _number(
        editor, "duration", "Edit manifest editor",
        default=timeline_extent(state["clips"]),
    )
    if duration < 0:
        raise ValueError(f"Edit manifest: editor.duration must be >= 0, got {duration}")
    state["duration"] = duration
    seek(state, _number(editor, "current_time", "Edit manifest editor", default=0.0))

    if raw.get("selected") is not None:
        select_clip(state, str(raw["selected"]))

    return state


def validate_media_sources(state: dict) -> None:
    """Check that every media clip's source exists on disk.

    Raises:
        FileNotFoundError: Lists all missing files.
    """
    missing = []
    for clip in state["clips"]:
        if clip["kind"] != "text" and not Path(clip["source"]).exists():
            missing.append(clip["source"])

    if missing:
        msg = f"Missing {len(missing)} media file(s):\n"
        for p in missing:
            msg += f"  - {p}\n"
        raise FileNotFoundError(msg)
