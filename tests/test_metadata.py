"""Tests for combined audio + subtitle analysis."""

import pytest

from audio_core.errors import AudioReadError, NotFoundError
from audio_core.metadata import analyze_audio_metadata, format_duration
from audio_core.models import AudioMetadata, AudioProperties


def _fake_probe(duration=10.0, sample_rate=44100, bitrate=128, channels=2):
    def _probe(path):
        return AudioProperties(duration, sample_rate, bitrate, channels)
    return _probe


def test_analyze_combines_audio_and_subtitles(make_wav, make_srt):
    audio = make_wav(duration_s=1.0)
    srt = make_srt()

    metadata = analyze_audio_metadata(audio, srt)

    assert metadata.duration_seconds == pytest.approx(1.0, abs=0.01)
    assert metadata.sample_rate == 16000
    assert metadata.channels == 1
    assert metadata.srt_segments == 2
    assert metadata.srt_speech_duration == pytest.approx(3.5)
    assert metadata.srt_avg_segment_duration == pytest.approx(1.75)
    # speech can exceed the audio length; nothing is validated
    assert metadata.srt_speech_duration > metadata.duration_seconds


def test_analyze_missing_audio_fails_before_subtitles(monkeypatch, tmp_dir, make_srt):
    srt = make_srt()

    def _unexpected(path):
        raise AssertionError("subtitles should not be parsed")

    monkeypatch.setattr("audio_core.metadata.scan_srt_file", _unexpected)

    with pytest.raises(NotFoundError) as exc_info:
        analyze_audio_metadata(tmp_dir + "/missing.wav", srt)
    assert exc_info.value.kind == "audio"
    assert "missing.wav" in str(exc_info.value)


def test_analyze_unreadable_audio(tmp_dir, make_srt):
    path = tmp_dir + "/fake.txt"
    with open(path, "wb") as f:
        f.write(b"plain text")

    with pytest.raises(AudioReadError):
        analyze_audio_metadata(path, make_srt())


def test_analyze_missing_subtitle(make_wav, tmp_dir):
    with pytest.raises(NotFoundError) as exc_info:
        analyze_audio_metadata(make_wav(), tmp_dir + "/missing.srt")
    assert exc_info.value.kind == "subtitle"


def test_analyze_without_segments(monkeypatch, make_wav, make_srt):
    monkeypatch.setattr("audio_core.metadata.probe_file", _fake_probe())
    metadata = analyze_audio_metadata(make_wav(), make_srt("no timestamps here\n"))

    assert metadata.srt_segments == 0
    assert metadata.srt_speech_duration == 0.0
    assert metadata.srt_avg_segment_duration == 0.0


def test_analyze_passes_through_audio_properties(monkeypatch, make_wav, make_srt):
    monkeypatch.setattr(
        "audio_core.metadata.probe_file",
        _fake_probe(duration=7.0, sample_rate=0, bitrate=0, channels=0),
    )
    metadata = analyze_audio_metadata(make_wav(), make_srt())

    assert metadata == AudioMetadata(
        duration_seconds=7.0,
        sample_rate=0,
        bitrate=0,
        channels=0,
        srt_segments=2,
        srt_speech_duration=3.5,
        srt_avg_segment_duration=1.75,
    )
    assert metadata.speech_density == pytest.approx(50.0)


def test_speech_density_unknown_for_zero_duration():
    metadata = AudioMetadata(0.0, 0, 0, 0, 1, 2.0, 2.0)
    assert metadata.speech_density is None


def test_to_dict():
    metadata = AudioMetadata(1.5, 44100, 128, 2, 1, 1.0, 1.0)
    assert metadata.to_dict() == {
        "duration_seconds": 1.5,
        "sample_rate": 44100,
        "bitrate": 128,
        "channels": 2,
        "srt_segments": 1,
        "srt_speech_duration": 1.0,
        "srt_avg_segment_duration": 1.0,
    }


def test_format_duration():
    assert format_duration(0) == "0:00"
    assert format_duration(5.9) == "0:05"
    assert format_duration(65) == "1:05"
    assert format_duration(3661) == "1:01:01"
    assert format_duration(-2.5) == "-0:02"
