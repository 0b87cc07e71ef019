"""Combined audio + subtitle metadata analysis."""

from __future__ import annotations

import os

from audio_core.errors import NotFoundError
from audio_core.models import AudioMetadata
from audio_core.probe import probe_file
from audio_core.subtitles import scan_srt_file


def analyze_audio_metadata(audio_path: str, srt_path: str) -> AudioMetadata:
    """Analyze an audio file and its SRT subtitles.

    The audio file is checked and probed before the subtitle file is
    touched, so a bad audio path fails without any subtitle parsing.
    """
    if not os.path.isfile(audio_path):
        raise NotFoundError(audio_path, "audio")

    props = probe_file(audio_path)

    if not os.path.isfile(srt_path):
        raise NotFoundError(srt_path, "subtitle")

    stats = scan_srt_file(srt_path)

    return AudioMetadata(
        duration_seconds=props.duration_seconds,
        sample_rate=props.sample_rate,
        bitrate=props.bitrate,
        channels=props.channels,
        srt_segments=stats.segments,
        srt_speech_duration=stats.speech_duration,
        srt_avg_segment_duration=stats.avg_segment_duration,
    )


def format_duration(seconds: float) -> str:
    """Format seconds as M:SS or H:MM:SS, truncating fractions."""
    if seconds < 0:
        return "-" + format_duration(-seconds)
    total_seconds = int(seconds)
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    secs = total_seconds % 60
    if hours > 0:
        return "{}:{:02d}:{:02d}".format(hours, minutes, secs)
    return "{}:{:02d}".format(minutes, secs)
