"""Desktop YouTube downloader built around yt-dlp, with progress tracking and thumbnails."""

__version__ = "0.1.0"
__all__ = ["model", "progress", "downloader", "thumbnail", "app"]