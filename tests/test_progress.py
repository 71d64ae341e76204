import pytest

from ytgrab.progress import parse_progress_from_line


def test_parses_padded_percentage():
    assert parse_progress_from_line("downloaded_bytes:  45.3%") == pytest.approx(0.453)


def test_full_progress_is_one():
    assert parse_progress_from_line("downloaded_bytes:100%") == pytest.approx(1.0)


def test_space_before_percent_sign_is_allowed():
    assert parse_progress_from_line("downloaded_bytes: 50 %") == pytest.approx(0.5)


@pytest.mark.parametrize(
    "line",
    [
        "",
        "[download] Destination: x.mp4",
        " downloaded_bytes:10%",
        "downloaded_bytes:10",
        "downloaded_bytes:%",
        "downloaded_bytes:abc%",
        "downloaded_bytes:1_0%",
        "downloaded_bytes:N/A",
    ],
)
def test_unrecognised_lines_give_none(line):
    assert parse_progress_from_line(line) is None


@pytest.mark.parametrize("pct", [0, 1, 12.5, 33.3, 99.9])
def test_result_matches_percentage_over_hundred(pct):
    result = parse_progress_from_line(f"downloaded_bytes:{pct}%")
    assert result == pytest.approx(pct / 100.0)
    assert 0.0 <= result <= 1.0