from unittest import mock

import pytest

from ytgrab.app import DownloadManager, extract_video_id, open_folder
from ytgrab.model import DownloadStatus


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://www.youtube.com/watch?v=abc123&t=10", "abc123"),
        ("https://www.youtube.com/watch?v=abc123", "abc123"),
        ("https://www.youtube.com/watch?list=xyz&v=qwerty", "qwerty"),
        ("https://www.youtube.com/watch?v=", ""),
    ],
)
def test_extract_video_id(url, expected):
    assert extract_video_id(url) == expected


def test_extract_video_id_without_parameter():
    assert extract_video_id("https://youtu.be/abc123") is None
    assert extract_video_id("") is None


def test_add_creates_downloading_task():
    manager = DownloadManager()
    task = manager.add("abc")
    assert task.title == "Video ID: abc"
    assert task.video_id == "abc"
    assert task.status is DownloadStatus.DOWNLOADING
    assert task.progress == 0.0
    assert manager.downloads == [task]


def test_get_returns_task_or_none():
    manager = DownloadManager()
    task = manager.add("abc")
    assert manager.get("abc") is task
    assert manager.get("missing") is None


def test_progress_only_increases():
    manager = DownloadManager()
    manager.add("abc")
    manager.apply_progress("abc", 0.5)
    manager.apply_progress("abc", 0.25)
    task = manager.get("abc")
    assert task.progress == 0.5
    assert task.status is DownloadStatus.DOWNLOADING


def test_full_progress_marks_done():
    manager = DownloadManager()
    manager.add("abc")
    manager.apply_progress("abc", 1.0)
    task = manager.get("abc")
    assert task.progress == 1.0
    assert task.status is DownloadStatus.DONE


def test_progress_for_unknown_video_is_ignored():
    manager = DownloadManager()
    task = manager.add("abc")
    manager.apply_progress("other", 0.9)
    assert task.progress == 0.0
    assert len(manager.downloads) == 1


def test_progress_goes_to_first_task_with_id():
    manager = DownloadManager()
    first = manager.add("abc")
    second = manager.add("abc")
    manager.apply_progress("abc", 0.4)
    assert first.progress == 0.4
    assert second.progress == 0.0


def test_remove_drops_all_matching_tasks():
    manager = DownloadManager()
    manager.add("abc")
    keep = manager.add("def")
    manager.add("abc")
    manager.remove(["abc"])
    assert manager.downloads == [keep]
    assert manager.get("abc") is None


@pytest.mark.parametrize(
    ("platform", "opener"),
    [("linux", "xdg-open"), ("darwin", "open"), ("win32", "explorer")],
)
def test_open_folder_uses_platform_opener(monkeypatch, platform, opener):
    monkeypatch.setattr("sys.platform", platform)
    with mock.patch("ytgrab.app.subprocess.Popen") as popen:
        result = open_folder("/tmp/videos")
    assert result is None
    assert popen.call_count == 1
    assert popen.call_args.args[0] == [opener, "/tmp/videos"]


def test_open_folder_ignores_failure(monkeypatch):
    monkeypatch.setattr("sys.platform", "linux")
    with mock.patch("ytgrab.app.subprocess.Popen", side_effect=OSError) as popen:
        assert open_folder("/tmp/videos") is None
    assert popen.call_count == 1