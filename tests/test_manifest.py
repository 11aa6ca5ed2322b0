"""Tests for edit manifest loader."""

import tempfile

import pytest
import yaml


def _write_manifest(content: dict) -> str:
    """Write a manifest dict to a temp YAML file, return path."""
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    yaml.dump(content, f)
    f.close()
    return f.name


def _write_manifest_text(text: str) -> str:
    """Write raw YAML text to a temp file, return path."""
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    f.write(text)
    f.close()
    return f.name


def _video(**overrides):
    c = {
        "id": "talk", "kind": "video", "source": "/m/talk.mp4",
        "start": 0, "duration": 10, "offset": 2,
    }
    c.update(overrides)
    return c


def _text(**overrides):
    c = {"kind": "text", "label": "Hello", "start": 3, "duration": 2}
    c.update(overrides)
    return c


class TestLoadEditManifest:
    def test_parses_clips_in_order(self):
        from cliptrack.manifest import load_edit_manifest

        state = load_edit_manifest(_write_manifest({"clips": [_video(), _text()]}))
        assert [c["kind"] for c in state["clips"]] == ["video", "text"]
        talk = state["clips"][0]
        assert talk["id"] == "talk"
        assert talk["source_offset"] == 2.0
        assert talk["label"] == "talk.mp4"

    def test_generates_missing_ids(self):
        from cliptrack.manifest import load_edit_manifest

        state = load_edit_manifest(_write_manifest({"clips": [_text(), _text()]}))
        ids = [c["id"] for c in state["clips"]]
        assert len(set(ids)) == 2

    def test_resolves_path_variables_in_source(self):
        from cliptrack.manifest import load_edit_manifest

        m = {
            "paths": {"media": "/data/media"},
            "clips": [_video(source="${media}/talk.mp4")],
        }
        state = load_edit_manifest(_write_manifest(m))
        assert state["clips"][0]["source"] == "/data/media/talk.mp4"

    def test_duration_defaults_to_extent(self):
        from cliptrack.manifest import load_edit_manifest

        m = {"clips": [_video(), _text(start=12)]}
        state = load_edit_manifest(_write_manifest(m))
        assert state["duration"] == 14.0

    def test_editor_settings(self):
        from cliptrack.manifest import load_edit_manifest

        m = {"editor": {"duration": 30, "current_time": 4}, "clips": [_video()], "selected": "talk"}
        state = load_edit_manifest(_write_manifest(m))
        assert state["duration"] == 30.0
        assert state["current_time"] == 4.0
        assert state["selected_clip_id"] == "talk"

    def test_current_time_clamped(self):
        from cliptrack.manifest import load_edit_manifest

        m = {"editor": {"duration": 10, "current_time": 99}, "clips": []}
        state = load_edit_manifest(_write_manifest(m))
        assert state["current_time"] == 10.0


class TestEditManifestValidation:
    def test_missing_clips_raises(self):
        from cliptrack.manifest import load_edit_manifest

        with pytest.raises(ValueError, match="clips"):
            load_edit_manifest(_write_manifest({"paths": {}}))

    def test_invalid_kind_raises(self):
        from cliptrack.manifest import load_edit_manifest

        with pytest.raises(ValueError, match="invalid kind"):
            load_edit_manifest(_write_manifest({"clips": [_video(kind="audio")]}))

    def test_missing_start_raises(self):
        from cliptrack.manifest import load_edit_manifest

        entry = _video()
        del entry["start"]
        with pytest.raises(ValueError, match="start"):
            load_edit_manifest(_write_manifest({"clips": [entry]}))

    def test_zero_duration_raises(self):
        from cliptrack.manifest import load_edit_manifest

        with pytest.raises(ValueError, match="timeline_duration"):
            load_edit_manifest(_write_manifest({"clips": [_video(duration=0)]}))

    def test_negative_start_raises(self):
        from cliptrack.manifest import load_edit_manifest

        with pytest.raises(ValueError, match="timeline_start"):
            load_edit_manifest(_write_manifest({"clips": [_video(start=-1)]}))

    def test_media_without_source_raises(self):
        from cliptrack.manifest import load_edit_manifest

        entry = _video()
        del entry["source"]
        with pytest.raises(ValueError, match="source"):
            load_edit_manifest(_write_manifest({"clips": [entry]}))

    def test_text_with_source_raises(self):
        from cliptrack.manifest import load_edit_manifest

        with pytest.raises(ValueError, match="cannot have a source"):
            load_edit_manifest(_write_manifest({"clips": [_text(source="/m/a.mp4")]}))

    def test_text_without_label_raises(self):
        from cliptrack.manifest import load_edit_manifest

        entry = _text()
        del entry["label"]
        with pytest.raises(ValueError, match="label"):
            load_edit_manifest(_write_manifest({"clips": [entry]}))

    def test_duplicate_ids_raises(self):
        from cliptrack.manifest import load_edit_manifest

        m = {"clips": [_video(id="dup"), _video(id="dup", start=20)]}
        with pytest.raises(ValueError, match="[Dd]uplicate"):
            load_edit_manifest(_write_manifest(m))

    def test_unknown_selection_raises(self):
        from cliptrack.manifest import load_edit_manifest

        with pytest.raises(ValueError, match="unknown clip"):
            load_edit_manifest(_write_manifest({"clips": [_video()], "selected": "nope"}))

    def test_empty_editor_block_uses_defaults(self):
        from cliptrack.manifest import load_edit_manifest

        path = _write_manifest_text(
            "editor:\n"
            "clips:\n"
            "  - {kind: text, label: hi, start: 0, duration: 1}\n"
        )
        state = load_edit_manifest(path)
        assert state["duration"] == 1.0
        assert state["current_time"] == 0.0

    def test_empty_paths_block_allowed(self):
        from cliptrack.manifest import load_edit_manifest

        path = _write_manifest_text(
            "paths:\n"
            "clips:\n"
            "  - {kind: video, source: /m/talk.mp4, start: 0, duration: 4}\n"
        )
        state = load_edit_manifest(path)
        assert state["clips"][0]["source"] == "/m/talk.mp4"

    def test_editor_must_be_mapping(self):
        from cliptrack.manifest import load_edit_manifest

        with pytest.raises(ValueError, match="editor"):
            load_edit_manifest(_write_manifest({"editor": [1, 2], "clips": [_text()]}))

    def test_top_level_list_raises(self):
        from cliptrack.manifest import load_edit_manifest

        with pytest.raises(ValueError, match="mapping"):
            load_edit_manifest(_write_manifest([_text()]))


class TestValidateMediaSources:
    def test_existing_sources_pass(self, tmp_path):
        from cliptrack.manifest import load_edit_manifest, validate_media_sources

        src = tmp_path / "talk.mp4"
        src.write_text("fake")
        state = load_edit_manifest(_write_manifest({"clips": [_video(source=str(src)), _text()]}))
        validate_media_sources(state)  # should not raise

    def test_missing_sources_listed(self):
        from cliptrack.manifest import load_edit_manifest, validate_media_sources

        state = load_edit_manifest(_write_manifest({"clips": [_video(source="/nonexistent/a.mp4")]}))
        with pytest.raises(FileNotFoundError, match="/nonexistent/a.mp4"):
            validate_media_sources(state)
