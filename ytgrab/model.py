"""Data model for queued downloads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DownloadStatus(Enum):
    """Lifecycle state of a download."""

    DOWNLOADING = "Downloading"
    DONE = "Done"


@dataclass
class DownloadTask:
    """A single video download and its progress as a fraction in [0, 1]."""

    title: str
    video_id: str
    status: DownloadStatus = DownloadStatus.DOWNLOADING
    progress: float = 0.0