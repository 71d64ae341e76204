"""Running yt-dlp and reporting its progress."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from typing import Callable

from ytgrab.progress import parse_progress_from_line

_HEIGHTS = {
    "1080p": "1080",
    "720p": "720",
    "480p": "480",
    "360p": "360",
    "Audio Only": "bestaudio",
}

PROGRESS_TEMPLATE = "downloaded_bytes:%(progress._percent_str)s"


class DownloadError(Exception):
    """Raised when the downloader cannot be found or started."""


def format_selector(quality: str) -> str:
    """Return the yt-dlp ``-f`` selector for a quality label."""
    return f"best[height<={_HEIGHTS.get(quality, 'best')}]"


def build_args(url: str, quality: str, download_folder: str) -> list[str]:
    """Return the yt-dlp command-line arguments for one download."""
    return [
        "-f",
        format_selector(quality),
        "--progress-template",
        PROGRESS_TEMPLATE,
        "--newline",
        "-o",
        f"{download_folder}/%(title)s.%(ext)s",
        url,
    ]


def find_executable() -> str:
    """Locate the yt-dlp program on the search path."""
    name = "yt-dlp.exe" if os.name == "nt" else "yt-dlp"
    path = shutil.which(name)
    if path is None:
        raise DownloadError("Missing yt-dlp")
    return path


def spawn_download(
    url: str,
    quality: str,
    download_folder: str,
    on_progress: Callable[[float], None],
    executable: str | None = None,
) -> int:
    """Run a download, calling ``on_progress`` with each fraction reported.

    Returns the exit code of the downloader.
    """
    program = executable if executable is not None else find_executable()
    command = [program, *build_args(url, quality, download_folder)]
    try:
        process = subprocess.Popen(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise DownloadError(f"cannot start {program}: {exc}") from exc

    with process:
        assert process.stdout is not None
        for raw in process.stdout:
            line = raw.rstrip("\r\n")
            print(f"DBG> {line}", file=sys.stdout, flush=True)
            pct = parse_progress_from_line(line)
            if pct is not None:
                on_progress(pct)
    return process.wait()