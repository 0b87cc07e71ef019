"""Errors raised by the analyzer and the recording store.

Each failure mode has its own class so callers can tell them apart without
parsing messages. The underlying exception, if any, is kept on ``cause``.
"""

from __future__ import annotations


class AudioCoreError(Exception):
    """Base class for all audio-core failures."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class NotFoundError(AudioCoreError):
    """An input file or stored recording does not exist."""

    def __init__(self, path: str, kind: str):
        labels = {
            "audio": "Audio file",
            "subtitle": "SRT file",
            "recording": "Recording file",
        }
        super().__init__(
            "{} not found: {}".format(labels.get(kind, "File"), path)
        )
        self.path = path
        self.kind = kind


class AudioReadError(AudioCoreError):
    """The audio container could not be parsed."""

    def __init__(self, path: str, cause: BaseException | None = None):
        message = "Failed to read audio file: {}".format(path)
        if cause is not None:
            message = "{} ({})".format(message, cause)
        super().__init__(message, cause)
        self.path = path


class StorageIOError(AudioCoreError):
    """Creating, reading, writing or removing a file or directory failed."""

    def __init__(self, message: str, cause: BaseException | None = None):
        if cause is not None:
            message = "{}: {}".format(message, cause)
        super().__init__(message, cause)


class TimeError(AudioCoreError):
    """A file's creation time could not be read or converted."""

    def __init__(self, path: str, cause: BaseException | None = None):
        message = "Failed to get creation time: {}".format(path)
        if cause is not None:
            message = "{} ({})".format(message, cause)
        super().__init__(message, cause)
        self.path = path
