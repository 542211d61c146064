import pytest

from cubkit.strings import (
    strchr,
    strcmp,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


@pytest.mark.parametrize("s", ["", "a", "hello world", "tripouille"])
def test_strlen_matches_length(s):
    assert strlen(s) == len(s)


def test_strchr_finds_first_occurrence():
    s = "hello"
    index = strchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[:index]


def test_strchr_accepts_integer_code_and_masks_low_byte():
    s = "012345"
    assert strchr(s, 256 + ord("2")) == strchr(s, "2")


def test_strchr_nul_returns_end():
    s = "abc"
    assert strchr(s, 0) == len(s)


def test_strchr_missing_returns_none():
    assert strchr("abc", "z") is None


def test_strrchr_finds_last_occurrence():
    s = "hello"
    index = strrchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[index + 1:]
    assert index > strchr(s, "l")


def test_strrchr_nul_and_missing():
    s = "abc"
    assert strrchr(s, 0) == len(s)
    assert strrchr(s, "q") is None


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_sign_and_difference():
    result = strncmp("abc", "abd", 3)
    assert result < 0
    assert result == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) == -result


def test_strncmp_shorter_string_compares_with_terminator():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("same", "same", 100) == 0


def test_strncmp_negative_raises():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strcmp():
    assert strcmp("hello", "hello") == 0
    assert strcmp("a", "b") == ord("a") - ord("b")
    assert strcmp("abc", "ab") == ord("c")
    assert strcmp("", "") == 0


def test_strnstr_finds_within_length():
    haystack = "foo bar baz"
    index = strnstr(haystack, "bar", len(haystack))
    assert haystack[index:index + 3] == "bar"


def test_strnstr_respects_length():
    haystack = "foo bar baz"
    start = haystack.index("bar")
    assert strnstr(haystack, "bar", start + 2) is None
    assert strnstr(haystack, "bar", start + 3) == start


def test_strnstr_empty_needle_and_missing():
    assert strnstr("anything", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None


def test_strlcpy_fits():
    text, length = strlcpy("coucou", 10)
    assert text == "coucou"
    assert length == len("coucou")


def test_strlcpy_truncates_to_size_minus_one():
    text, length = strlcpy("coucou", 6)
    assert text == "couco"
    assert length == len("coucou")


def test_strlcpy_zero_size():
    assert strlcpy("coucou", 0) == ("", len("coucou"))


def test_strlcat_appends_when_room():
    text, total = strlcat("foo", "bar", 20)
    assert text == "foobar"
    assert total == len("foobar")


def test_strlcat_truncates():
    size = 5
    text, total = strlcat("foo", "bar", size)
    assert text == "foob"
    assert len(text) == size - 1
    assert total == len("foobar")


def test_strlcat_size_smaller_than_dst():
    text, total = strlcat("foobar", "xy", 3)
    assert text == "foobar"
    assert total == len("xy") + 3


def test_strlcat_size_equal_to_dst():
    text, total = strlcat("foo", "bar", 3)
    assert text == "foo"
    assert total == len("foobar")


def test_strdup_copies():
    for s in ["", "x", "-2147483648"]:
        assert strdup(s) == s