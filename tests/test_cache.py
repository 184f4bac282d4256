import pytest

from daizen.cache import decode, encode, encode_count, load_cache, save_cache
from daizen.model import CacheEntry, Config

SAMPLES = [b"", b"plain", b"a|b\nc", b"\n\n||", b"line one\nline | two\n"]


@pytest.mark.parametrize("raw", SAMPLES)
def test_round_trip(raw):
    assert decode(encode(raw)) == raw


@pytest.mark.parametrize("raw", SAMPLES)
def test_encoded_has_no_separators(raw):
    encoded = encode(raw)
    assert b"\n" not in encoded
    assert b"|" not in encoded


@pytest.mark.parametrize("raw", SAMPLES)
def test_encode_count_matches(raw):
    assert encode_count(raw) == len(encode(raw))


def test_escape_sequences():
    assert encode(b"|") == b"\\/"
    assert encode(b"\n") == b"\\n"


def test_decode_lone_backslash_kept():
    assert decode(b"\\") == b"\\"
    assert decode(b"x\\") == b"x\\"


def test_save_and_load(tmp_path):
    target = tmp_path / "cache"
    entries = {
        "posts/a.html": CacheEntry(
            time=1_700_000_000_123_456_789,
            content=b"<p>hi|there</p>\n",
            raw_content=b"hi|there\nsecond",
            meta=Config({"title": "A", "layout": "post"}),
        ),
        "old|file.txt": CacheEntry(time=-5, content=b"", raw_content=b"raw", meta=Config()),
    }
    save_cache(entries, str(target))
    assert load_cache(str(target)) == entries


def test_none_meta_loads_empty(tmp_path):
    target = tmp_path / "cache"
    save_cache({"x": CacheEntry(time=1, raw_content=b"r")}, str(target))
    loaded = load_cache(str(target))
    assert loaded["x"].meta == Config()
    assert loaded["x"].raw_content == b"r"


def test_load_missing_file(tmp_path):
    assert load_cache(str(tmp_path / "missing")) == {}


def test_load_skips_short_lines(tmp_path):
    target = tmp_path / "cache"
    target.write_bytes(b"a|b\n\n")
    assert load_cache(str(target)) == {}


def test_load_drops_short_timestamp(tmp_path):
    target = tmp_path / "cache"
    target.write_bytes(b"name|abc|{}|raw|content\n")
    assert load_cache(str(target)) == {}


def test_save_empty(tmp_path):
    target = tmp_path / "cache"
    save_cache({}, str(target))
    assert target.read_bytes() == b""
    assert load_cache(str(target)) == {}