"""Transcription - caption spans from speech via faster-whisper.

Requires optional dependencies: pip install cliptrack[transcribe]
Import-guarded so the rest of cliptrack works without the model stack.

Output spans are timed against the full source file (source-media time);
placing them on the timeline is the aligner's job.
"""

import json
import subprocess
from pathlib import Path

import imageio_ffmpeg

_FFMPEG = imageio_ffmpeg.get_ffmpeg_exe()

# Import-guarded heavy dependency.
try:
    from faster_whisper import WhisperModel
    _WHISPER_AVAILABLE = True
except ImportError:
    WhisperModel = None
    _WHISPER_AVAILABLE = False


class TranscriptionError(RuntimeError):
    """The speech model or audio extraction failed for a source."""


def _extract_audio(source: str, work_dir: Path) -> str:
    """Extract audio from video to WAV using ffmpeg.

    Returns path to the extracted WAV file.
    """
    wav_path = str(work_dir / "audio.wav")
    cmd = [
        _FFMPEG, "-y",
        "-i", source,
        "-vn",
        "-acodec", "pcm_s16le",
        "-ar", "16000",
        "-ac", "1",
        wav_path,
    ]
    subprocess.run(cmd, check=True, capture_output=True)
    return wav_path


def _segments_to_captions(segments) -> list[dict]:
    """Convert whisper segments to caption spans, dropping empty text."""
    captions = []
    for segment in segments:
        text = segment.text.strip()
        if not text:
            continue
        captions.append({
            "start": round(segment.start, 3),
            "end": round(segment.end, 3),
            "text": text,
        })
    return captions


def _build_output(
    source: str,
    duration_s: float,
    model: str,
    language: str,
    captions: list[dict],
) -> dict:
    """Build the output dict matching the captions JSON schema."""
    return {
        "source": source,
        "duration_s": duration_s,
        "model": model,
        "language": language,
        "captions": captions,
    }


def default_output_path(source: str) -> str:
    """Captions path written next to *source*: <stem>.captions.json."""
    source_path = Path(source)
    return str(source_path.with_name(source_path.stem + ".captions.json"))


def transcribe(
    source: str,
    model: str = "medium",
    language: str | None = None,
    output: str | None = None,
) -> dict:
    """Run the transcription pipeline on a video/audio file.

    Args:
        source: Path to video or audio file.
        model: Whisper model size (tiny, base, small, medium, large-v3).
        language: Language code or None for auto-detection.
        output: Output JSON path. If None, uses <source-stem>.captions.json.

    Returns:
        Captions dict (also written to output path).

    Raises:
        RuntimeError: If cliptrack[transcribe] is not installed.
        TranscriptionError: If audio extraction or decoding fails.
    """
    if not _WHISPER_AVAILABLE:
        raise RuntimeError(
            "Transcription requires extra dependencies.\n"
            "Run: pip install cliptrack[transcribe]"
        )

    import tempfile

    source_path = Path(source)
    if output is None:
        output = default_output_path(source)

    with tempfile.TemporaryDirectory() as work_dir:
        try:
            wav_path = _extract_audio(source, Path(work_dir))
        except subprocess.CalledProcessError as e:
            raise TranscriptionError(f"Could not extract audio from {source}") from e

        whisper_model = WhisperModel(model)
        try:
            segments, info = whisper_model.transcribe(wav_path, language=language)
            # Segments are a lazy generator; decoding happens here.
            captions = _segments_to_captions(segments)
        except (RuntimeError, ValueError) as e:
            raise TranscriptionError(f"Transcription failed for {source}: {e}") from e

    result = _build_output(
        source=str(source_path.name),
        duration_s=round(info.duration, 1),
        model=model,
        language=language or info.language,
        captions=captions,
    )

    Path(output).parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w") as f:
        json.dump(result, f, indent=2)

    return result
