import pytest

from pipex.numfmt import (
    atoi,
    atol,
    char_to_str,
    int_len,
    itoa,
    uint_len,
    ulong_len,
    ultobase,
    utoa,
)


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 123456, -98765, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert int_len(n) == len(itoa(n))


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"
    assert int_len(-2147483648) == len("-2147483648")


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r+42abc") == 42
    assert atoi("   -42") == -42
    assert atoi("abc") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_like_32_bit():
    assert atoi("2147483648") == -2147483648
    assert atol("2147483648") == 2147483648


def test_atol_round_trip():
    n = -9223372036854775807
    assert atol(str(n)) == n


@pytest.mark.parametrize("n", [0, 7, 10, 4294967295])
def test_utoa_round_trip(n):
    text = utoa(n)
    assert int(text) == n
    assert uint_len(n) == len(text)
    assert ulong_len(n) == len(text)


def test_utoa_rejects_negative():
    with pytest.raises(OverflowError):
        utoa(-1)


@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
@pytest.mark.parametrize("n", [1, 35, 255, 2**64 - 1])
def test_ultobase_round_trip(n, base):
    text = ultobase(n, base)
    assert int(text, base) == n
    assert text == text.lower()


def test_ultobase_zero_and_bad_base():
    assert ultobase(0, 16) == "0"
    assert ultobase(255, 1) == "0"
    assert ultobase(255, 37) == "0"


def test_ultobase_hex_lowercase():
    assert ultobase(255, 16) == "ff"


def test_char_to_str():
    assert char_to_str("a") == "a"
    assert char_to_str(ord("Z")) == "Z"
    assert char_to_str(0) == ""
    assert len(char_to_str(200)) == 1