"""Desktop front end: queue downloads, show their progress and thumbnails."""

from __future__ import annotations

import argparse
import queue
import subprocess
import sys
import threading
import tkinter as tk
from tkinter import filedialog, ttk
from typing import Iterable

from PIL import Image, ImageTk

from ytgrab.downloader import DownloadError, spawn_download
from ytgrab.model import DownloadStatus, DownloadTask
from ytgrab.thumbnail import fetch_thumbnail

WINDOW_TITLE = "YouTube Downloader"
DEFAULT_FOLDER = "./downloads"
DEFAULT_QUALITY = "720p"
QUALITY_OPTIONS = ("1080p", "720p", "480p", "360p", "Audio Only")
POLL_INTERVAL_MS = 100
THUMBNAIL_SIZE = (160, 120)

_STATUS_TEXT = {
    DownloadStatus.DOWNLOADING: "\u2b07\ufe0f Downloading",
    DownloadStatus.DONE: "\u2705 Done",
}

_BG = "#1b1b1b"
_PANEL = "#242424"
_FG = "#dcdcdc"


def extract_video_id(url: str) -> str | None:
    """Return the value of the ``v=`` parameter in a video address, or None."""
    parts = url.split("v=")
    if len(parts) < 2:
        return None
    return parts[1].split("&")[0]


def open_folder(folder: str) -> None:
    """Open a folder in the platform's file manager, ignoring failures."""
    if sys.platform.startswith("win"):
        opener = "explorer"
    elif sys.platform == "darwin":
        opener = "open"
    else:
        opener = "xdg-open"
    try:
        subprocess.Popen([opener, folder])
    except OSError:
        pass


class DownloadManager:
    """The list of downloads and the rules for updating them."""

    def __init__(self) -> None:
        self.downloads: list[DownloadTask] = []

    def add(self, video_id: str) -> DownloadTask:
        """Queue a new download for a video and return its task."""
        task = DownloadTask(title=f"Video ID: {video_id}", video_id=video_id)
        self.downloads.append(task)
        return task

    def apply_progress(self, video_id: str, progress: float) -> None:
        """Record progress for a video; progress never goes backwards."""
        task = self.get(video_id)
        if task is None or progress <= task.progress:
            return
        task.progress = progress
        if task.progress >= 1.0:
            task.status = DownloadStatus.DONE

    def remove(self, video_ids: Iterable[str]) -> None:
        """Drop every download whose video id is among ``video_ids``."""
        doomed = set(video_ids)
        self.downloads = [t for t in self.downloads if t.video_id not in doomed]

    def get(self, video_id: str) -> DownloadTask | None:
        """Return the first download for a video, or None."""
        return next((t for t in self.downloads if t.video_id == video_id), None)


class _TaskRow:
    """Widgets showing one download in the side panel."""

    def __init__(self, parent: tk.Widget, app: DownloaderApp, task: DownloadTask) -> None:
        self.task = task
        self.frame = ttk.Frame(parent, padding=6, relief="groove")
        self.frame.pack(fill="x", pady=3)

        self.image_label = ttk.Label(self.frame)
        self.image_label.pack(side="left", padx=(0, 6))
        self._image_set = False

        body = ttk.Frame(self.frame)
        body.pack(side="left", fill="both", expand=True)
        ttk.Label(body, text=task.title).pack(anchor="w")
        self.status_label = ttk.Label(body)
        self.status_label.pack(anchor="w")
        bar_row = ttk.Frame(body)
        bar_row.pack(fill="x")
        self.bar = ttk.Progressbar(bar_row, maximum=100, length=160)
        self.bar.pack(side="left")
        self.percent_label = ttk.Label(bar_row, width=5)
        self.percent_label.pack(side="left", padx=4)

        self.buttons = ttk.Frame(body)
        ttk.Button(
            self.buttons,
            text="Open Folder",
            command=lambda: open_folder(app.folder_var.get()),
        ).pack(side="left")
        tk.Button(
            self.buttons,
            text="\u274c",
            bg="red",
            activebackground="#b00000",
            command=lambda: app.remove_downloads([task.video_id]),
        ).pack(side="left", padx=4)
        self._buttons_shown = False

    def refresh(self, thumbnail: ImageTk.PhotoImage | None) -> None:
        task = self.task
        self.status_label.configure(text=_STATUS_TEXT[task.status])
        self.bar.configure(value=task.progress * 100)
        self.percent_label.configure(text=f"{task.progress * 100:.0f}%")
        if thumbnail is not None and not self._image_set:
            self.image_label.configure(image=thumbnail)
            self._image_set = True
        if task.status is DownloadStatus.DONE and not self._buttons_shown:
            self.buttons.pack(anchor="w", pady=(4, 0))
            self._buttons_shown = True

    def destroy(self) -> None:
        self.frame.destroy()


class DownloaderApp:
    """Main window: address entry, folder and quality choice, download list."""

    def __init__(self, root: tk.Tk) -> None:
        self.root = root
        self.manager = DownloadManager()
        self.url_var = tk.StringVar(master=root)
        self.folder_var = tk.StringVar(master=root, value=DEFAULT_FOLDER)
        self.quality_var = tk.StringVar(master=root, value=DEFAULT_QUALITY)

        self._progress_queues: dict[str, queue.Queue[float]] = {}
        self._thumb_lock = threading.Lock()
        self._thumb_results: list[tuple[str, Image.Image]] = []
        self._thumbnails: dict[str, ImageTk.PhotoImage] = {}
        self._rows: dict[int, _TaskRow] = {}

        self._apply_dark_theme()
        self._build()
        self.root.after(POLL_INTERVAL_MS, self._tick)

    def _apply_dark_theme(self) -> None:
        self.root.configure(bg=_BG)
        style = ttk.Style(self.root)
        style.theme_use("clam")
        style.configure(".", background=_BG, foreground=_FG, fieldbackground=_PANEL)
        style.configure("TFrame", background=_BG)
        style.configure("TLabel", background=_BG, foreground=_FG)
        style.configure("Heading.TLabel", font=("TkDefaultFont", 14, "bold"))
        style.configure("TButton", background=_PANEL, foreground=_FG)

    def _build(self) -> None:
        side = ttk.Frame(self.root, padding=8)
        side.pack(side="right", fill="y")
        ttk.Label(side, text="Active Downloads", style="Heading.TLabel").pack(anchor="w")
        ttk.Separator(side).pack(fill="x", pady=4)

        canvas = tk.Canvas(side, bg=_BG, highlightthickness=0, width=340)
        scrollbar = ttk.Scrollbar(side, orient="vertical", command=canvas.yview)
        self._list_frame = ttk.Frame(canvas)
        self._list_frame.bind(
            "<Configure>",
            lambda _e: canvas.configure(scrollregion=canvas.bbox("all")),
        )
        canvas.create_window((0, 0), window=self._list_frame, anchor="nw")
        canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        canvas.pack(side="left", fill="both", expand=True)

        main = ttk.Frame(self.root, padding=12)
        main.pack(side="left", fill="both", expand=True)
        ttk.Label(main, text=WINDOW_TITLE, style="Heading.TLabel").pack(anchor="w")

        ttk.Label(main, text="Paste YouTube video URL:").pack(anchor="w", pady=(8, 0))
        ttk.Entry(main, textvariable=self.url_var, width=50).pack(anchor="w", fill="x")

        folder_row = ttk.Frame(main)
        folder_row.pack(anchor="w", fill="x", pady=6)
        ttk.Label(folder_row, text="Download folder:").pack(side="left")
        ttk.Entry(folder_row, textvariable=self.folder_var, width=30).pack(
            side="left", padx=4, fill="x", expand=True
        )
        ttk.Button(folder_row, text="Browse\u2026", command=self._browse).pack(side="left")

        ttk.Label(main, text="Select Video Quality:").pack(anchor="w")
        ttk.Combobox(
            main,
            textvariable=self.quality_var,
            values=QUALITY_OPTIONS,
            state="readonly",
        ).pack(anchor="w")

        ttk.Button(main, text="Download", command=self.start_download).pack(
            anchor="w", pady=10
        )

    def _browse(self) -> None:
        folder = filedialog.askdirectory(initialdir=self.folder_var.get())
        if folder:
            self.folder_var.set(folder)

    def start_download(self) -> None:
        """Queue the download for the address typed in, then clear the entry."""
        url = self.url_var.get().strip()
        quality = self.quality_var.get()
        folder = self.folder_var.get()

        video_id = extract_video_id(url)
        if video_id is not None:
            self.manager.add(video_id)
            threading.Thread(
                target=self._fetch_thumbnail, args=(video_id,), daemon=True
            ).start()

            progress: queue.Queue[float] = queue.Queue()
            self._progress_queues[video_id] = progress
            threading.Thread(
                target=self._run_download,
                args=(url, quality, folder, progress),
                daemon=True,
            ).start()

        self.url_var.set("")

    def _fetch_thumbnail(self, video_id: str) -> None:
        img = fetch_thumbnail(video_id)
        if img is not None:
            with self._thumb_lock:
                self._thumb_results.append((video_id, img))

    @staticmethod
    def _run_download(
        url: str, quality: str, folder: str, progress: queue.Queue[float]
    ) -> None:
        try:
            spawn_download(url, quality, folder, progress.put)
        except DownloadError as exc:
            print(exc, file=sys.stderr)

    def remove_downloads(self, video_ids: Iterable[str]) -> None:
        """Remove downloads from the list and stop listening to their progress."""
        ids = list(video_ids)
        self.manager.remove(ids)
        for video_id in ids:
            self._progress_queues.pop(video_id, None)
        self._refresh_rows()

    def poll(self) -> None:
        """Take in reported progress and fetched thumbnails, then redraw."""
        for video_id, progress in self._progress_queues.items():
            while True:
                try:
                    value = progress.get_nowait()
                except queue.Empty:
                    break
                self.manager.apply_progress(video_id, value)

        with self._thumb_lock:
            pending, self._thumb_results = self._thumb_results, []
        for video_id, img in pending:
            small = img.copy()
            small.thumbnail(THUMBNAIL_SIZE)
            self._thumbnails[video_id] = ImageTk.PhotoImage(small, master=self.root)

        self._refresh_rows()

    def _refresh_rows(self) -> None:
        current = {id(task): task for task in self.manager.downloads}
        for key in [k for k in self._rows if k not in current]:
            self._rows.pop(key).destroy()
        for key, task in current.items():
            row = self._rows.get(key)
            if row is None:
                row = self._rows[key] = _TaskRow(self._list_frame, self, task)
            row.refresh(self._thumbnails.get(task.video_id))

    def _tick(self) -> None:
        self.poll()
        self.root.after(POLL_INTERVAL_MS, self._tick)


def main(argv: list[str] | None = None) -> int:
    """Open the downloader window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="ytgrab", description=WINDOW_TITLE)
    parser.parse_args(argv)
    root = tk.Tk()
    root.title(WINDOW_TITLE)
    DownloaderApp(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())