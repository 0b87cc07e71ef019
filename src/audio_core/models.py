from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class AudioProperties:
    """Container-level properties of an audio file."""

    duration_seconds: float
    sample_rate: int  # 0 if unknown
    bitrate: int  # in kbps, 0 if unknown
    channels: int  # 0 if unknown


@dataclass(frozen=True)
class SubtitleStats:
    """Timing totals collected from the timestamp lines of an SRT file."""

    segments: int
    speech_duration: float

    @property
    def avg_segment_duration(self) -> float:
        if self.segments > 0:
            return self.speech_duration / self.segments
        return 0.0


@dataclass(frozen=True)
class AudioMetadata:
    """Audio properties combined with subtitle speech statistics."""

    duration_seconds: float
    sample_rate: int
    bitrate: int
    channels: int
    srt_segments: int
    srt_speech_duration: float
    srt_avg_segment_duration: float

    @property
    def speech_density(self) -> float | None:
        """Percentage of the audio covered by subtitle speech, if known."""
        if self.duration_seconds <= 0:
            return None
        return self.srt_speech_duration / self.duration_seconds * 100.0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class RecordingInfo:
    """Filesystem stats for one stored recording."""

    filename: str
    size_bytes: int
    size_kb: float
    size_mb: float
    created_timestamp: int  # Unix seconds
    created_date: str

    def to_dict(self) -> dict:
        return asdict(self)
