import pytest

from cubkit.wordtab import str_str, str_str_quoted, str_to_wordtab


def test_wordtab_splits_on_spaces_and_tabs():
    assert str_to_wordtab("  42 42\t4  1 ") == ["42", "42", "4", "1"]


def test_wordtab_empty_and_blank():
    assert str_to_wordtab("") == []
    assert str_to_wordtab(" \t  ") == []


def test_wordtab_keeps_other_characters():
    words = str_to_wordtab("a\nb c")
    assert words == ["a\nb", "c"]


def test_wordtab_stops_at_nul():
    assert str_to_wordtab("x y\0z") == ["x", "y"]


def test_str_str_finds_first_occurrence():
    text = "abc abc"
    pos = str_str(text, "bc", len(text))
    assert pos == 1
    assert text[pos:pos + 2] == "bc"


def test_str_str_missing_and_too_long():
    assert str_str("abc", "zz", 3) is None
    assert str_str("abcdef", "abc", 2) is None


def test_str_str_rejects_empty_find():
    with pytest.raises(ValueError):
        str_str("abc", "", 3)


def test_quoted_skips_match_inside_quotes():
    text = '"/*"/*'
    plain = str_str(text, "/*", len(text))
    quoted = str_str_quoted(text, "/*", len(text))
    assert plain == 1
    assert quoted is not None
    assert quoted > text.index('"', 1)
    assert text[quoted:quoted + 2] == "/*"


def test_quoted_without_quotes_matches_plain():
    text = "static char // note"
    assert str_str_quoted(text, "//", len(text)) == str_str(text, "//", len(text))


def test_quoted_all_inside_quotes():
    text = '"a // b"'
    assert str_str_quoted(text, "//", len(text)) is None