import pytest

from iptv_playlist.models import StreamType
from iptv_playlist.parser.stream_type import detect_stream_type


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://h/live/index.m3u8", StreamType.HLS),
        ("https://h/live/manifest.mpd", StreamType.DASH),
        ("rtmp://h/s", StreamType.RTMP),
        ("rtsp://h/s", StreamType.RTSP),
        ("https://h/plain.ts", StreamType.AUTO),
        ("https://h/Channel.ism/Manifest", StreamType.SMOOTH_STREAMING),
        ("https://h/smoothstreaming/live", StreamType.SMOOTH_STREAMING),
    ],
)
def test_stream_type_table(url, expected):
    assert detect_stream_type(url) is expected


def test_m3u8_matches_anywhere_in_the_url():
    assert detect_stream_type("https://h/play?format=m3u8") is StreamType.HLS


def test_dash_matches_as_a_substring():
    assert detect_stream_type("https://dashcdn.example.com/live.ts") is StreamType.DASH


def test_first_match_wins():
    assert detect_stream_type("https://h/dash/index.m3u8") is StreamType.HLS
    assert detect_stream_type("rtmp://h/live/dash") is StreamType.DASH
