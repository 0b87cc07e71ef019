"""mutagen wrapper for reading audio container properties."""

from __future__ import annotations

import logging

import mutagen
from mutagen import MutagenError

from audio_core.errors import AudioReadError
from audio_core.models import AudioProperties

logger = logging.getLogger(__name__)


def _int_property(info, name: str) -> int:
    """Return an integer stream property, or 0 if the format lacks it."""
    value = getattr(info, name, None)
    if not value:
        return 0
    return int(value)


def probe_file(filepath: str) -> AudioProperties:
    """Read duration, sample rate, bitrate and channels from an audio file.

    Raises AudioReadError if mutagen cannot identify or parse the container.
    """
    try:
        audio = mutagen.File(filepath)
    except (MutagenError, OSError) as e:
        raise AudioReadError(filepath, e) from e

    if audio is None or audio.info is None:
        raise AudioReadError(filepath, ValueError("unrecognized audio format"))

    info = audio.info
    duration_s = float(getattr(info, "length", 0.0) or 0.0)

    # mutagen reports bits per second
    bitrate_kbps = _int_property(info, "bitrate") // 1000

    props = AudioProperties(
        duration_seconds=duration_s,
        sample_rate=_int_property(info, "sample_rate"),
        bitrate=bitrate_kbps,
        channels=_int_property(info, "channels"),
    )
    logger.debug("Probed %s: %s", filepath, props)
    return props
