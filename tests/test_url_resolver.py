from iptv_playlist.parser.url_resolver import is_absolute, resolve_url, title_from_url

BASE = "https://a.com/playlists/x.m3u8"


def test_relative_line_resolves_against_base():
    assert resolve_url("sub/ch.m3u8", BASE) == "https://a.com/playlists/sub/ch.m3u8"
    assert resolve_url("../live/ch.ts", BASE) == "https://a.com/live/ch.ts"
    assert resolve_url("/root.ts", BASE) == "https://a.com/root.ts"


def test_absolute_lines_are_unchanged():
    assert resolve_url("rtsp://h/s", BASE) == "rtsp://h/s"
    assert resolve_url("rtmp://h/app/s", BASE) == "rtmp://h/app/s"
    assert resolve_url("http://other/a.ts", BASE) == "http://other/a.ts"


def test_without_base_the_line_is_kept():
    assert resolve_url("sub/ch.m3u8") == "sub/ch.m3u8"


def test_malformed_base_falls_back_to_raw_line():
    assert resolve_url("sub/ch.m3u8", "not a url") == "sub/ch.m3u8"
    assert resolve_url("sub/ch.m3u8", "http://[broken/x") == "sub/ch.m3u8"


def test_is_absolute_only_knows_stream_schemes():
    assert is_absolute("https://h/a")
    assert not is_absolute("udp://@239.0.0.1:1234")


def test_title_from_url():
    assert title_from_url("https://h/a.ts") == "a"
    assert title_from_url("https://h/archive.tar.gz") == "archive.tar"
    assert title_from_url("https://h/live/stream") == "stream"


def test_title_from_url_falls_back_to_host():
    assert title_from_url("https://h.example/") == "h.example"
    assert title_from_url("https://h.example") == "h.example"


def test_title_from_url_without_scheme_is_unknown():
    assert title_from_url("sub/a.ts") == "Unknown Channel"


def test_file_base_resolves_relative_lines():
    assert resolve_url("ch/a.ts", "file:///home/u/list.m3u") == "file:///home/u/ch/a.ts"
    assert resolve_url("../b.ts", "file:///home/u/lists/list.m3u") == "file:///home/u/b.ts"
