import pytest

from objstream.formats.tag import Tag, TagKind, classify


@pytest.mark.parametrize("text, kind", [
    ("f", TagKind.F),
    ("v", TagKind.V),
    ("vn", TagKind.VN),
    ("vt", TagKind.VT),
])
def test_known_tags(text, kind):
    tag = classify(text)
    assert tag == Tag(kind, text)
    assert tag.is_known


@pytest.mark.parametrize("text", ["foo", "V", "vtx", "", "usemtl"])
def test_unknown_tag_keeps_raw_text(text):
    tag = classify(text)
    assert tag.kind is TagKind.UNKNOWN
    assert tag.text == text
    assert not tag.is_known
