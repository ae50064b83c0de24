#!/usr/bin/env python3
"""
Tests for the .properties parser.
"""

import pytest

from propmerge.config.errors import PropertiesParseError
from propmerge.config.properties import load_properties, read_properties_file


def test_separators_and_empty_values():
    props = load_properties("a=1\nb:2\nc 3\nd\nempty=\n")
    assert props == {"a": "1", "b": "2", "c": "3", "d": "", "empty": ""}


def test_whitespace_around_separator():
    props = load_properties("key  =  value  \n   indented:yes\nspaced  :  x\n")
    assert props["key"] == "value  "
    assert props["indented"] == "yes"
    assert props["spaced"] == "x"


def test_comments_and_blank_lines_are_skipped():
    text = "# comment\n  ! another comment\n\n   \nreal=value\n"
    assert load_properties(text) == {"real": "value"}


def test_comment_ending_in_backslash_does_not_continue():
    assert load_properties("# note \\\nkey=value\n") == {"key": "value"}


def test_line_continuation():
    text = "fruits  apple, banana, \\\n    pear\nnext=1\n"
    props = load_properties(text)
    assert props["fruits"] == "apple, banana, pear"
    assert props["next"] == "1"


def test_even_backslashes_do_not_continue():
    props = load_properties("path=c:\\\\\nnext=1\n")
    assert props == {"path": "c:\\", "next": "1"}


def test_continuation_at_end_of_input():
    assert load_properties("a=1\\") == {"a": "1"}


def test_escapes():
    props = load_properties(
        "tab=a\\tb\\nc\n"
        "uni=caf\\u00e9\n"
        "smile=\\ud83d\\ude00\n"
        "other=\\q\\#\n"
    )
    assert props["tab"] == "a\tb\nc"
    assert props["uni"] == "café"
    assert props["smile"] == "\U0001F600"
    assert props["other"] == "q#"


def test_escaped_characters_in_key():
    props = load_properties("my\\ key\\=x = v\n")
    assert props == {"my key=x": "v"}


def test_malformed_unicode_escape_reports_line():
    with pytest.raises(PropertiesParseError) as exc_info:
        load_properties("ok=1\nbad=\\u12G4\n")
    assert exc_info.value.line_number == 2
    assert isinstance(exc_info.value, ValueError)


def test_mixed_line_endings():
    assert load_properties("a=1\r\nb=2\rc=3") == {"a": "1", "b": "2", "c": "3"}


def test_last_duplicate_wins_and_into_is_updated():
    existing = {"a": "0", "keep": "yes"}
    result = load_properties("a=1\na=2\n", into=existing)
    assert result is existing
    assert existing == {"a": "2", "keep": "yes"}


def test_read_properties_file(tmp_path):
    path = tmp_path / "app.properties"
    path.write_text("name=app\ngreeting=h\u00e9llo\n", encoding="utf-8")
    assert read_properties_file(path) == {"name": "app", "greeting": "h\u00e9llo"}


def test_read_properties_file_with_other_encoding(tmp_path):
    path = tmp_path / "latin.properties"
    path.write_bytes("greeting=h\u00e9llo\n".encode("latin-1"))
    assert read_properties_file(path, encoding="latin-1") == {"greeting": "h\u00e9llo"}


def test_read_properties_file_undecodable(tmp_path):
    path = tmp_path / "bad.properties"
    path.write_bytes(b"key=\xff\xfe\xfa\n")
    with pytest.raises(PropertiesParseError):
        read_properties_file(path)


def test_read_properties_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_properties_file(tmp_path / "missing.properties")


def test_lone_surrogate_is_kept():
    props = load_properties("lone=a\\ud83db\n")
    assert props["lone"] == "a\ud83db"
