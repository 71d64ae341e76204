"""Parsing of progress lines emitted by the downloader."""

from __future__ import annotations

PREFIX = "downloaded_bytes:"


def parse_progress_from_line(line: str) -> float | None:
    """Return the fraction done from a ``downloaded_bytes:NN.N%`` line, or None."""
    if not line.startswith(PREFIX):
        return None
    rest = line[len(PREFIX):].strip()
    if not rest.endswith("%"):
        return None
    number = rest[:-1].strip()
    if not number or "_" in number:
        return None
    try:
        value = float(number)
    except ValueError:
        return None
    return value / 100.0