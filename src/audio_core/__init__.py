"""Audio + SRT metadata analysis and a flat recordings store."""

from audio_core.errors import (
    AudioCoreError,
    AudioReadError,
    NotFoundError,
    StorageIOError,
    TimeError,
)
from audio_core.metadata import analyze_audio_metadata
from audio_core.models import AudioMetadata, RecordingInfo
from audio_core.store import RecordingStore

__all__ = [
    "AudioCoreError",
    "AudioMetadata",
    "AudioReadError",
    "NotFoundError",
    "RecordingInfo",
    "RecordingStore",
    "StorageIOError",
    "TimeError",
    "analyze_audio_metadata",
]
