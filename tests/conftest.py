"""Shared test fixtures."""

from __future__ import annotations

import os
import tempfile
import wave

import pytest

SAMPLE_SRT = (
    "1\n00:00:01,000 --> 00:00:03,500\nHello\n\n"
    "2\n00:00:05,000 --> 00:00:06,000\nWorld\n"
)


@pytest.fixture
def tmp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def make_wav(tmp_dir):
    """Factory fixture that creates silent 16-bit PCM WAV files."""

    def _make(
        filename: str = "audio.wav",
        duration_s: float = 1.0,
        sample_rate: int = 16000,
        channels: int = 1,
    ) -> str:
        path = os.path.join(tmp_dir, filename)
        frames = int(duration_s * sample_rate)
        with wave.open(path, "wb") as wf:
            wf.setnchannels(channels)
            wf.setsampwidth(2)
            wf.setframerate(sample_rate)
            wf.writeframes(b"\x00\x00" * channels * frames)
        return path

    return _make


@pytest.fixture
def make_srt(tmp_dir):
    """Factory fixture that writes SRT text to a file."""

    def _make(content: str = SAMPLE_SRT, filename: str = "audio.srt") -> str:
        path = os.path.join(tmp_dir, filename)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    return _make
