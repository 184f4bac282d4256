import pytest

from daizen.frontmatter import FrontMatterError, front_matter


def write(tmp_path, data):
    path = tmp_path / "page.md"
    path.write_bytes(data)
    return str(path)


def test_yaml_front_matter(tmp_path):
    raw = b"---\ntitle: Hi\ntags: [a, b]\n---\nbody text"
    meta, content = front_matter(write(tmp_path, raw))
    assert meta == {"title": "Hi", "tags": ["a", "b"]}
    assert content == raw


def test_yaml_after_leading_whitespace(tmp_path):
    raw = b"\n\n  ---\nauthor: me\n---\nx"
    meta, content = front_matter(write(tmp_path, raw))
    assert meta.get_string("author") == "me"
    assert content == raw


def test_toml_front_matter(tmp_path):
    raw = b'+++\ntitle = "Hi"\ncount = 3\n---\nbody'
    meta, _ = front_matter(write(tmp_path, raw))
    assert meta == {"title": "Hi", "count": 3}


def test_json_front_matter(tmp_path):
    raw = b';;;\n{"title": "Hi"}\n---\nbody'
    meta, _ = front_matter(write(tmp_path, raw))
    assert meta == {"title": "Hi"}


def test_empty_yaml_block_gives_empty_mapping(tmp_path):
    meta, _ = front_matter(write(tmp_path, b"---\n\n---\nbody"))
    assert meta == {}


def test_plain_file_has_no_front_matter(tmp_path):
    raw = b"# Just markdown\n"
    assert front_matter(write(tmp_path, raw)) == (None, raw)


def test_short_file_returned_unchanged(tmp_path):
    raw = b" a"
    assert front_matter(write(tmp_path, raw)) == (None, raw)


def test_unterminated_block_gives_empty_content(tmp_path):
    assert front_matter(write(tmp_path, b"---\ntitle: x\n")) == (None, b"")


def test_invalid_yaml_raises(tmp_path):
    with pytest.raises(FrontMatterError):
        front_matter(write(tmp_path, b"---\ntitle: [unclosed\n---\nbody"))


def test_non_mapping_yaml_raises(tmp_path):
    with pytest.raises(FrontMatterError):
        front_matter(write(tmp_path, b"---\n- a\n- b\n---\nbody"))


def test_brace_object_alone_yields_no_metadata(tmp_path):
    raw = b'{"a": 1}'
    assert front_matter(write(tmp_path, raw)) == (None, raw)


def test_brace_object_followed_by_text_raises(tmp_path):
    with pytest.raises(FrontMatterError):
        front_matter(write(tmp_path, b'{"a": 1}\nbody text'))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        front_matter(str(tmp_path / "missing.md"))