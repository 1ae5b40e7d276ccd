import pytest

from pipex.strcopy import (
    CopyResult,
    strcat,
    strcpy,
    strdup,
    strlcat,
    strlcpy,
    strncat,
    substr,
)


def test_strcat_joins():
    dest, src = "foo", "bar"
    assert strcat(dest, src) == dest + src


def test_strcat_stops_at_nul():
    assert strcat("ab\0x", "cd\0y") == "abcd"


def test_strncat_limits_src():
    dest, src = "foo", "barbaz"
    assert strncat(dest, src, 3) == dest + src[:3]
    assert strncat(dest, src, len(src) + 10) == dest + src
    assert strncat(dest, src, 0) == dest


def test_strcpy_and_strdup_copy_up_to_nul():
    assert strcpy("abc\0def") == "abc"
    assert strdup("abc\0def") == strcpy("abc\0def")
    assert strdup("") == ""


def test_strlcpy_fits():
    src = "hello"
    assert strlcpy(src, len(src) + 1) == CopyResult(src, len(src))


def test_strlcpy_truncates():
    src = "hello"
    result = strlcpy(src, 3)
    assert result.text == src[:2]
    assert result.length == len(src)


def test_strlcpy_zero_size():
    src = "hello"
    assert strlcpy(src, 0) == CopyResult("", len(src))


@pytest.mark.parametrize("size", range(1, 10))
def test_strlcpy_never_overflows(size):
    src = "abcdef"
    result = strlcpy(src, size)
    assert len(result.text) < size
    assert src.startswith(result.text)


def test_strlcat_appends_when_room():
    dst, src = "foo", "bar"
    result = strlcat(dst, src, 32)
    assert result == CopyResult(dst + src, len(dst) + len(src))


def test_strlcat_truncates_to_size():
    dst, src = "foo", "barbaz"
    size = 6
    result = strlcat(dst, src, size)
    assert len(result.text) == size - 1
    assert result.text.startswith(dst)
    assert result.length == len(dst) + len(src)


def test_strlcat_full_dst_unchanged():
    dst, src = "foobar", "baz"
    result = strlcat(dst, src, 4)
    assert result.text == dst
    assert result.length == 4 + len(src)


def test_substr_window():
    s = "hello world"
    assert substr(s, 6, 5) == s[6:]
    assert substr(s, 0, 100) == s


def test_substr_past_end_is_empty():
    s = "hello"
    assert substr(s, len(s) + 3, 2) == ""
    assert substr(s, len(s), 2) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 1, -2)