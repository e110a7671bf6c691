from iptv_checker.models import PlaylistEntry
from iptv_checker.playlist import directive_name, is_stream_url, parse, read_playlist
from iptv_checker.utils import write_lines


def test_parse_pairs_names_with_urls_in_order():
    lines = [
        "#EXTM3U",
        "#EXTINF:-1,Channel A",
        "http://good.example/stream",
        "#EXTINF:-1,Channel B",
        "https://other.example/live.m3u8",
        "#EXTINF:-1,Channel C",
        "rtmp://media.example/app/key",
    ]
    entries = parse(lines)
    assert entries == [
        PlaylistEntry(name="Channel A", url="http://good.example/stream"),
        PlaylistEntry(name="Channel B", url="https://other.example/live.m3u8"),
        PlaylistEntry(name="Channel C", url="rtmp://media.example/app/key"),
    ]


def test_parse_empty_playlist():
    assert parse([]) == []
    assert parse(["#EXTM3U", "", "# just a comment"]) == []


def test_parse_url_without_directive_has_empty_name():
    entries = parse(["http://first.example/a", "#EXTINF:-1,Named", "http://second.example/b"])
    assert entries[0].name == ""
    assert entries[1].name == "Named"


def test_parse_keeps_pending_name_for_following_urls():
    entries = parse(["#EXTINF:-1,Shared", "http://one.example/a", "http://two.example/b"])
    assert [entry.name for entry in entries] == ["Shared", "Shared"]


def test_parse_uses_text_after_last_comma():
    entries = parse(['#EXTINF:-1 tvg-id="x" group-title="News, World",BBC World', "http://bbc.example/live"])
    assert entries[0].name == "BBC World"


def test_parse_strips_trailing_whitespace_and_carriage_return():
    entries = parse(["#EXTINF:-1,Channel A\r", "http://good.example/stream \r"])
    assert entries == [PlaylistEntry(name="Channel A", url="http://good.example/stream")]


def test_parse_ignores_unknown_schemes_and_relative_paths():
    entries = parse(["#EXTINF:-1,Ftp", "ftp://files.example/a", "segment.ts", "udp://@239.0.0.1:1234"])
    assert entries == []


def test_is_stream_url_is_case_insensitive():
    assert is_stream_url("HTTP://UPPER.example/Stream") is True
    assert is_stream_url("Rtmp://host/app") is True
    assert is_stream_url("http://has space.example/x") is False
    assert is_stream_url("#EXTINF:-1,http://not-a-url-line") is False


def test_directive_name():
    assert directive_name("#EXTINF:-1,Channel A") == "Channel A"
    assert directive_name("#EXTINF:-1") is None
    assert directive_name("#EXTM3U") is None


def test_read_playlist(tmp_path):
    playlist = tmp_path / "index.m3u"
    playlist.write_bytes("#EXTM3U\r\n#EXTINF:-1,Café\r\nhttp://a.example/s\r\n".encode("utf-8"))
    assert read_playlist(str(playlist)) == ["#EXTM3U", "#EXTINF:-1,Café", "http://a.example/s"]


def test_invalid_bytes_survive_read_and_write(tmp_path):
    raw = b"#EXTM3U\n#EXTINF:-1,Caf\xe9\nhttp://a.example/s\n"
    source = tmp_path / "latin1.m3u"
    source.write_bytes(raw)

    lines = read_playlist(str(source))
    target = tmp_path / "copy.m3u"
    write_lines(str(target), lines)

    assert target.read_bytes() == raw
    assert parse(lines) == [PlaylistEntry(name="Caf\ufffd", url="http://a.example/s")]
