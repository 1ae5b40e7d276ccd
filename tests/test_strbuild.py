import pytest

from pipex.strbuild import (
    split,
    strjoin,
    strmapi,
    striteri,
    strrtrim,
    strs_expand,
    strs_len,
    strsjoin,
    strtrim,
)


def test_split_command_line():
    assert split("ls -l", " ") == ["ls", "-l"]


def test_split_drops_empty_pieces():
    words = split("  grep   -v  foo ", " ")
    assert words == ["grep", "-v", "foo"]
    assert all(word and " " not in word for word in words)


def test_split_single_spaced_round_trip():
    text = "wc -l -c"
    assert " ".join(split(text, " ")) == text


def test_split_only_separators_and_empty():
    assert split(":::", ":") == []
    assert split("", ":") == []


def test_split_path_list():
    assert split("/usr/bin:/bin", ":") == ["/usr/bin", "/bin"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_charset_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


def test_strrtrim_keeps_span_between_charset_chars():
    assert strrtrim("abXcdXef", "X") == "XcdX"


def test_strrtrim_without_match_is_empty():
    assert strrtrim("hello", "z") == ""


def test_strjoin_both_and_missing_sides():
    assert strjoin("/bin", "/ls") == "/bin/ls"
    assert strjoin(None, "ls") == "ls"
    assert strjoin("ls", None) == "ls"


def test_strjoin_both_missing_raises():
    with pytest.raises(TypeError):
        strjoin(None, None)


def test_strsjoin_builds_path():
    assert strsjoin("/usr/bin", "/", "cat") == "/usr/bin/cat"
    assert strsjoin() == ""


def test_strs_expand_appends_and_copies():
    original = ["a", "b"]
    expanded = strs_expand(original, "c")
    assert expanded == ["a", "b", "c"]
    assert original == ["a", "b"]


def test_strs_expand_from_none():
    assert strs_expand(None, "only") == ["only"]


def test_strmapi_uses_indices():
    calls = []

    def record(index, ch):
        calls.append(index)
        return ch

    assert strmapi("abc", record) == "abc"
    assert calls == [2, 1, 0]


def test_strmapi_transforms():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"


def test_strmapi_rejects_bad_result():
    with pytest.raises(ValueError):
        strmapi("ab", lambda i, c: c * 2)


def test_striteri_forward_order_and_replacement():
    calls = []

    def upper_even(index, ch):
        calls.append(index)
        return ch.upper() if index % 2 == 0 else None

    assert striteri("abcd", upper_even) == "AbCd"
    assert calls == [0, 1, 2, 3]


def test_strs_len():
    assert strs_len(["a", "b", "c"]) == 3
    assert strs_len(["a", None, "c"]) == 1
    assert strs_len(None) == 0
    assert strs_len([]) == 0