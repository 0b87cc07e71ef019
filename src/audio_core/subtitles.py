"""SRT timestamp parsing and speech-duration aggregation."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from audio_core.errors import StorageIOError
from audio_core.models import SubtitleStats

logger = logging.getLogger(__name__)

# 00:00:01,000 --> 00:00:03,500, matched anywhere in the line
TIMESTAMP_RE = re.compile(
    r"(\d{2}):(\d{2}):(\d{2}),(\d{3}) --> (\d{2}):(\d{2}):(\d{2}),(\d{3})",
    re.ASCII,
)


def _to_seconds(hours: str, minutes: str, seconds: str, millis: str) -> float:
    return int(hours) * 3600 + int(minutes) * 60 + int(seconds) + int(millis) / 1000


def parse_timestamp_line(line: str) -> tuple[float, float] | None:
    """Return (start, end) in seconds for an SRT timestamp line, else None.

    Examples:
        "00:00:01,000 --> 00:00:03,500" -> (1.0, 3.5)
        "00:00:01,000 --> 00:00:03,500 X1:40" -> (1.0, 3.5)
        "Hello" -> None
    """
    match = TIMESTAMP_RE.search(line)
    if match is None:
        return None
    groups = match.groups()
    return _to_seconds(*groups[:4]), _to_seconds(*groups[4:])


def scan_srt_lines(lines: Iterable[str]) -> SubtitleStats:
    """Count timestamp lines and sum their durations.

    Index numbers, caption text and blank lines are skipped. Segments whose
    end precedes their start still count, and reduce the total.
    """
    segments = 0
    total = 0.0
    for line in lines:
        span = parse_timestamp_line(line)
        if span is None:
            continue
        start, end = span
        total += end - start
        segments += 1
    return SubtitleStats(segments=segments, speech_duration=total)


def scan_srt_file(filepath: str) -> SubtitleStats:
    """Scan an SRT file on disk. Raises StorageIOError on read failures."""
    try:
        with open(filepath, "r", encoding="utf-8", newline="\n") as f:
            stats = scan_srt_lines(f)
    except (OSError, UnicodeDecodeError) as e:
        raise StorageIOError("Failed to read SRT file {}".format(filepath), e) from e

    logger.debug(
        "Scanned %s: %d segments, %.3fs speech",
        filepath, stats.segments, stats.speech_duration,
    )
    return stats
