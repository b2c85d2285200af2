import pytest

from minitalk.textutil import atoi, itoa, split, strnstr, strtrim, substr


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_single_sign_only():
    assert atoi("+-5") == 0


def test_atoi_wraps_like_int():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, 12345, -987654, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_words_have_no_separator():
    words = split("a:bb::ccc:", ":")
    assert all(":" not in w and w for w in words)
    assert "".join(words) == "a:bb::ccc:".replace(":", "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strtrim_both_ends():
    assert strtrim("xyhixy", "xy") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_substr_bounds():
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 1, 100) == "hello"[1:]
    assert substr("hello", 0, 0) == ""


def test_substr_length_invariant():
    for start in range(7):
        for length in range(7):
            assert len(substr("hello", start, length)) <= length


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_finds_within_limit():
    hay = "hello world"
    assert strnstr(hay, "world", len(hay)) == hay.index("world")
    assert strnstr(hay, "world", len(hay) - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("", "", 0) == 0
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "zz", 3) is None


def test_strnstr_negative_length_raises():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)