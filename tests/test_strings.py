import pytest

from ftkit.characters import to_upper
from ftkit.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strlen_nl,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_counts_characters():
    assert strlen("hello") == len("hello")
    assert strlen("") == 0


def test_strlen_nl_stops_at_newline():
    assert strlen_nl("abc\ndef") == len("abc")
    assert strlen_nl("no newline") == len("no newline")
    assert strlen_nl("\nstart") == 0


@pytest.mark.parametrize("text,ch", [("hello", "l"), ("banana", "a"), ("xyz", "x")])
def test_strchr_finds_first_occurrence(text, ch):
    index = strchr(text, ch)
    assert text[index] == ch
    assert ch not in text[:index]


@pytest.mark.parametrize("text,ch", [("hello", "l"), ("banana", "a"), ("xyz", "z")])
def test_strrchr_finds_last_occurrence(text, ch):
    index = strrchr(text, ch)
    assert text[index] == ch
    assert ch not in text[index + 1:]


def test_strchr_and_strrchr_missing():
    assert strchr("hello", "q") is None
    assert strrchr("hello", "q") is None


def test_nul_search_finds_terminator():
    assert strchr("hello", "\0") == len("hello")
    assert strrchr("hello", "\0") == len("hello")


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_difference_of_first_mismatch():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_finds_within_limit():
    big, little = "lorem ipsum dolor", "ipsum"
    index = strnstr(big, little, len(big))
    assert big[index:index + len(little)] == little


def test_strnstr_match_must_fit_in_limit():
    big, little = "lorem ipsum", "ipsum"
    assert strnstr(big, little, len(big) - 1) is None
    assert strnstr(big, "dolor", len(big)) is None


def test_strnstr_empty_little_and_zero_length():
    assert strnstr("anything", "", 0) == 0
    assert strnstr("abc", "a", 0) is None


def test_strdup_copies():
    assert strdup("hello") == "hello"
    assert strdup("") == ""


def test_substr_cases():
    assert substr("hello", 1, 100) == "ello"
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 0, 0) == ""
    assert substr("hello", 0, 2) == "he"


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_concatenates():
    s1, s2 = "foo", "bar"
    joined = strjoin(s1, s2)
    assert joined.startswith(s1) and joined.endswith(s2)
    assert len(joined) == len(s1) + len(s2)


def test_strtrim_strips_both_ends():
    assert strtrim("xxabcxyx", "xy") == "abc"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_split_drops_empty_words():
    text = "  a bb  ccc "
    words = split(text, " ")
    assert "".join(words) == text.replace(" ", "")
    assert all(word and " " not in word for word in words)
    assert words == ["a", "bb", "ccc"]


def test_split_only_separators():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_strmapi_applies_function():
    assert strmapi("abc", lambda i, c: to_upper(c)) == "ABC"
    indices = strmapi("xyz", lambda i, c: str(i))
    assert [int(d) for d in indices] == list(range(len("xyz")))


def test_striteri_modifies_in_place():
    chars = list("abc")
    striteri(chars, lambda i, c: to_upper(c))
    assert chars == ["A", "B", "C"]


def test_strlcpy_copies_and_terminates():
    dest = bytearray(10)
    result = strlcpy(dest, b"hello", 10)
    assert result == len(b"hello")
    assert dest[:6] == b"hello\0"


def test_strlcpy_truncates():
    src = b"hello world"
    dest = bytearray(b"#" * 8)
    result = strlcpy(dest, src, 6)
    assert result == len(src)
    assert dest[:6] == b"hello\0"
    assert dest[6:] == b"##"


def test_strlcpy_zero_size_leaves_dest():
    dest = bytearray(b"abc")
    assert strlcpy(dest, b"xyz", 0) == len(b"xyz")
    assert dest == bytearray(b"abc")


def test_strlcat_appends():
    dest = bytearray(b"foo" + b"\0" * 7)
    result = strlcat(dest, b"bar", 10)
    assert result == len(b"foobar")
    assert dest[:7] == b"foobar\0"


def test_strlcat_truncates():
    dest = bytearray(b"foo" + b"\0" * 3)
    result = strlcat(dest, b"barbaz", 6)
    assert result == len(b"foo") + len(b"barbaz")
    assert dest[:6] == b"fooba\0"


def test_strlcat_size_not_larger_than_dest_string():
    dest = bytearray(b"foobar\0\0")
    assert strlcat(dest, b"xyz", 3) == 3 + len(b"xyz")
    assert dest == bytearray(b"foobar\0\0")


def test_bounded_copy_size_exceeding_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"abc", 5)
    with pytest.raises(ValueError):
        strlcat(bytearray(2), b"abc", 5)