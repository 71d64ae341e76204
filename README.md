# ytgrab

A small desktop application for downloading YouTube videos. You paste a
video URL and choose a download folder and a quality. ytgrab then runs
`yt-dlp` in the background. A side panel lists the downloads, each with its
thumbnail and a progress bar.

## Requirements

- Python 3.10 or later, with Tk available (`tkinter`)
- The `yt-dlp` program on your `PATH` (`yt-dlp.exe` on Windows)

## Installation

```
pip install .
```

## Usage

Start the application:

```
ytgrab
```

1. Paste a YouTube video URL, for example
   `https://www.youtube.com/watch?v=abc123`. The video id is taken from the
   `v=` parameter. An address without one is ignored.
2. Choose the download folder. The default is `./downloads`. **Browse…**
   opens a folder picker.
3. Choose a quality: `1080p`, `720p` (the default), `480p`, `360p` or
   `Audio Only`.
4. Press **Download**.

Each download appears in the *Active Downloads* panel. Its title is
`Video ID: <id>`. Progress only ever moves forward. At 100% the task is
marked done and two buttons appear:

- **Open Folder** opens the download folder in the file manager: `explorer`
  on Windows, `open` on macOS, `xdg-open` elsewhere.
- **❌** removes the entry from the list.

Files are saved as `<title>.<ext>` in the chosen folder. Every line that
`yt-dlp` prints on standard output is echoed to the terminal with a `DBG> `
prefix.

## Using the pieces from Python

```python
from ytgrab.progress import parse_progress_from_line
from ytgrab.downloader import build_args, format_selector, spawn_download
from ytgrab.app import extract_video_id, DownloadManager

parse_progress_from_line("downloaded_bytes: 42.5%")   # 0.425
extract_video_id("https://www.youtube.com/watch?v=abc123&t=10")  # "abc123"
format_selector("480p")                                # "best[height<=480]"
build_args("https://www.youtube.com/watch?v=abc123", "720p", "./downloads")
```

- `ytgrab.downloader.spawn_download(url, quality, download_folder, on_progress, executable=None)`
  runs `yt-dlp` and calls `on_progress` with each fraction it reports. It
  returns the program's exit code. Without `executable` it looks up `yt-dlp`
  with `find_executable()`. It raises `DownloadError` if the program is
  missing or cannot be started.
- `ytgrab.thumbnail.fetch_thumbnail(video_id)` downloads the video's
  `hqdefault.jpg` thumbnail as an RGBA Pillow image. It returns `None` if
  the thumbnail cannot be fetched or decoded.
- `ytgrab.app.DownloadManager` holds the list of `DownloadTask`s. Its
  methods are `add`, `get`, `apply_progress` and `remove`. `apply_progress`
  ignores progress that does not move forward. At 1.0 it sets the status to
  `DownloadStatus.DONE`.

## What it does not do

- It does not ship `yt-dlp`. The program must already be installed.
- A running download cannot be cancelled or paused. Removing an entry only
  hides it from the list.
- Errors from `yt-dlp` are not shown in the window. Its standard error is
  discarded, and a task that fails stays marked as downloading.
- The download list is not saved between runs.

## Running the tests

```
pip install ".[test]"
pytest
```