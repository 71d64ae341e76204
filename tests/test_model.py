from dataclasses import replace

from ytgrab.model import DownloadStatus, DownloadTask


def test_new_task_starts_downloading_with_no_progress():
    task = DownloadTask(title="Video ID: abc", video_id="abc")
    assert task.status is DownloadStatus.DOWNLOADING
    assert task.progress == 0.0


def test_task_fields_are_kept():
    task = DownloadTask("Video ID: xyz", "xyz", DownloadStatus.DONE, 1.0)
    assert (task.title, task.video_id, task.status, task.progress) == (
        "Video ID: xyz",
        "xyz",
        DownloadStatus.DONE,
        1.0,
    )


def test_task_is_mutable_and_replace_round_trips():
    task = DownloadTask(title="t", video_id="v")
    task.progress = 0.5
    task.status = DownloadStatus.DONE
    copy = replace(task)
    assert copy == task
    assert copy is not task


def test_status_lookup_by_value():
    assert DownloadStatus("Done") is DownloadStatus.DONE
    assert DownloadStatus("Downloading") is DownloadStatus.DOWNLOADING