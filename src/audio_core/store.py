"""Flat on-disk store of saved recordings."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from stat import S_ISREG

from audio_core.errors import NotFoundError, StorageIOError, TimeError
from audio_core.models import RecordingInfo

logger = logging.getLogger(__name__)

DEFAULT_STORE_ROOT = "recordings"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def format_utc(timestamp: float) -> str:
    """Render a Unix timestamp as a UTC date string, or "Unknown"."""
    try:
        dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return "Unknown"
    return dt.strftime(DATE_FORMAT)


def _creation_time(st: os.stat_result) -> float:
    # st_birthtime is missing on most Linux builds; inode change time is
    # the closest stand-in for a file written once by save().
    birthtime = getattr(st, "st_birthtime", None)
    if birthtime is not None:
        return birthtime
    return st.st_ctime


class RecordingStore:
    """Save, list, delete and stat recordings under a single directory.

    The directory is created on the first save. Nothing is cached: every
    call reads the filesystem directly.
    """

    def __init__(self, root: str = DEFAULT_STORE_ROOT):
        self.root = os.fspath(root)

    def path_for(self, filename: str) -> str:
        """Return the path of a recording inside the store root."""
        if (
            not filename
            or filename in (".", "..")
            or "/" in filename
            or os.sep in filename
            or (os.altsep and os.altsep in filename)
        ):
            raise ValueError("Invalid recording filename: {!r}".format(filename))
        return os.path.join(self.root, filename)

    def save(self, audio_data: bytes, filename: str) -> str:
        """Write audio bytes to the store, overwriting any existing file.

        Returns a confirmation message with the size and the time of saving.
        """
        path = self.path_for(filename)

        if not os.path.isdir(self.root):
            try:
                os.makedirs(self.root, exist_ok=True)
            except OSError as e:
                raise StorageIOError(
                    "Failed to create recordings directory {}".format(self.root), e
                ) from e
            logger.debug("Created recordings directory: %s", self.root)

        try:
            with open(path, "wb") as f:
                f.write(audio_data)
        except OSError as e:
            raise StorageIOError("Failed to write audio file {}".format(path), e) from e

        size = len(audio_data)
        timestamp = datetime.now(timezone.utc).strftime(DATE_FORMAT)
        logger.info("Audio recording saved: %s (%d bytes) at %s", filename, size, timestamp)

        return "Audio recording saved successfully: {} ({:.2f} KB) at {}".format(
            filename, size / 1024, timestamp
        )

    def list(self) -> list[str]:
        """List recording filenames, sorted by name descending.

        Names that embed a sortable timestamp therefore come newest first.
        A store whose directory does not exist yet is simply empty.
        """
        if not os.path.isdir(self.root):
            return []

        try:
            with os.scandir(self.root) as entries:
                recordings = [
                    entry.name
                    for entry in entries
                    if entry.is_file(follow_symlinks=False)
                ]
        except OSError as e:
            raise StorageIOError(
                "Failed to read recordings directory {}".format(self.root), e
            ) from e

        recordings.sort(reverse=True)
        return recordings

    def _lookup(self, filename: str) -> tuple[str, os.stat_result]:
        """Return the path and lstat result of a stored recording.

        Only regular files count as recordings, matching list(); symlinks
        and directories inside the root are reported as not found.
        """
        path = self.path_for(filename)
        try:
            st = os.lstat(path)
        except (FileNotFoundError, NotADirectoryError) as e:
            raise NotFoundError(filename, "recording") from e
        except OSError as e:
            raise StorageIOError("Failed to get file metadata for {}".format(filename), e) from e

        if not S_ISREG(st.st_mode):
            raise NotFoundError(filename, "recording")
        return path, st

    def delete(self, filename: str) -> str:
        """Remove a recording. Returns a confirmation message."""
        path, _ = self._lookup(filename)

        try:
            os.remove(path)
        except FileNotFoundError as e:
            # removed between the lookup and the call
            raise NotFoundError(filename, "recording") from e
        except OSError as e:
            raise StorageIOError("Failed to delete recording {}".format(filename), e) from e

        logger.info("Recording deleted: %s", filename)
        return "Recording deleted successfully: {}".format(filename)

    def stat(self, filename: str) -> RecordingInfo:
        """Return size and creation-time details for a recording.

        created_timestamp is the file's birth time where the platform
        reports one (macOS, BSD, Windows). On Linux it is the inode change
        time, so overwriting a recording with save() moves it forward.
        """
        _, st = self._lookup(filename)

        created = _creation_time(st)
        if created < 0:
            raise TimeError(filename, ValueError("creation time precedes the Unix epoch"))
        created_timestamp = int(created)

        size = st.st_size
        return RecordingInfo(
            filename=filename,
            size_bytes=size,
            size_kb=size / 1024,
            size_mb=size / (1024 * 1024),
            created_timestamp=created_timestamp,
            created_date=format_utc(created_timestamp),
        )

    def latest(self) -> RecordingInfo | None:
        """Stat the first recording in list order, or None if the store is empty."""
        recordings = self.list()
        if not recordings:
            return None
        return self.stat(recordings[0])
