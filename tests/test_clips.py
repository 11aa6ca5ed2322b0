"""Tests for clip records and their invariants."""

import math

import pytest

from cliptrack.clips import (
    InvalidClip,
    clip_end,
    contains_time,
    make_clip,
    replace_clip_fields,
    timeline_extent,
    trim_window,
)


def _video(**overrides):
    kwargs = {
        "kind": "video", "label": "Talk", "timeline_start": 1.0,
        "timeline_duration": 4.0, "source": "/m/talk.mp4", "source_offset": 2.0,
    }
    kwargs.update(overrides)
    return make_clip(**kwargs)


class TestMakeClip:
    def test_builds_all_fields(self):
        clip = _video(clip_id="v1")
        assert clip == {
            "id": "v1",
            "kind": "video",
            "source": "/m/talk.mp4",
            "label": "Talk",
            "timeline_start": 1.0,
            "timeline_duration": 4.0,
            "source_offset": 2.0,
        }

    def test_generates_id(self):
        assert _video()["id"] != _video()["id"]

    def test_text_clip_has_empty_source(self):
        clip = make_clip("text", "Hi", 0.0, 1.0, source="/ignored.mp4")
        assert clip["source"] == ""
        assert clip["source_offset"] == 0.0


class TestClipInvariants:
    @pytest.mark.parametrize("duration", [0.0, -1.0])
    def test_non_positive_duration_rejected(self, duration):
        with pytest.raises(InvalidClip, match="timeline_duration"):
            _video(timeline_duration=duration)

    def test_negative_start_rejected(self):
        with pytest.raises(InvalidClip, match="timeline_start"):
            _video(timeline_start=-0.5)

    def test_negative_offset_rejected(self):
        with pytest.raises(InvalidClip, match="source_offset"):
            _video(source_offset=-1.0)

    def test_unknown_kind_rejected(self):
        with pytest.raises(InvalidClip, match="kind"):
            _video(kind="audio")

    def test_text_offset_rejected(self):
        with pytest.raises(InvalidClip, match="offset must be 0"):
            make_clip("text", "Hi", 0.0, 1.0, source_offset=1.0)

    def test_nan_rejected(self):
        with pytest.raises(InvalidClip, match="finite"):
            _video(timeline_duration=math.nan)

    def test_zero_start_allowed(self):
        assert _video(timeline_start=0.0)["timeline_start"] == 0.0

    def test_invalid_clip_is_value_error(self):
        assert issubclass(InvalidClip, ValueError)


class TestReplaceClipFields:
    def test_returns_copy(self):
        clip = _video()
        updated = replace_clip_fields(clip, timeline_duration=2.0)
        assert updated["timeline_duration"] == 2.0
        assert clip["timeline_duration"] == 4.0

    def test_validates(self):
        with pytest.raises(InvalidClip):
            replace_clip_fields(_video(), timeline_duration=0.0)


class TestIntervals:
    def test_clip_end(self):
        assert clip_end(_video()) == 5.0

    def test_contains_is_half_open(self):
        clip = _video()
        assert contains_time(clip, 1.0)
        assert contains_time(clip, 4.999)
        assert not contains_time(clip, 5.0)
        assert not contains_time(clip, 0.999)

    def test_trim_window(self):
        assert trim_window(_video()) == (2.0, 6.0)

    def test_timeline_extent(self):
        clips = [_video(), _video(timeline_start=10.0)]
        assert timeline_extent(clips) == 14.0

    def test_timeline_extent_empty(self):
        assert timeline_extent([]) == 0.0
