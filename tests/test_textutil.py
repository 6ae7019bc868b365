import pytest

from minishell.textutil import (
    atoi,
    isalpha,
    itoa,
    split,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("number", [0, 1, -1, 7, 123456, -98765, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_matches_str():
    for number in (0, 5, -5, 1000, -2147483648):
        assert itoa(number) == str(number)


def test_itoa_int_min_literal():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r+17xyz") == atoi("17")
    assert atoi("   -17") == -atoi("17")


def test_atoi_stops_at_non_digit():
    assert atoi("12ab34") == atoi("12")


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("+-5") == 0


def test_atoi_long_overflow():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


def test_atoi_wraps_to_int():
    assert atoi("2147483648") == -2147483648
    assert atoi("4294967296") == 0


def test_split_drops_empty_words():
    assert split("  echo   hello  world ", " ") == ["echo", "hello", "world"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("     ", " ") == []


def test_split_rejoin_invariant():
    text = "a,,b,c,,,d"
    words = split(text, ",")
    assert ",".join(words) == "a,b,c,d"
    assert all(words)


def test_split_requires_single_character():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strncmp_equal_and_prefix():
    assert strncmp("echo", "echo", 4) == 0
    assert strncmp("echoes", "echo", 4) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("abc", "ab", 3) > 0


def test_strncmp_difference_is_code_difference():
    assert strncmp("a", "c", 1) == ord("a") - ord("c")


def test_isalpha():
    assert isalpha("a")
    assert isalpha("Z")
    assert not isalpha("1")
    assert not isalpha("#")
    assert isalpha(ord("q"))
    assert not isalpha(256 + ord("a"))


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("abcba", "ab") == "c"
    assert strtrim("aaaa", "a") == ""
    assert strtrim(" keep ", "") == " keep "


def test_strnstr_found_and_limits():
    haystack = "hello world"
    assert strnstr(haystack, "world", len(haystack)) == haystack.index("world")
    assert strnstr(haystack, "world", len(haystack) - 1) is None
    assert strnstr(haystack, "", 0) == 0
    assert strnstr(haystack, "xyz", 100) is None
    assert strnstr(haystack, "h", 0) is None


def test_substr():
    assert substr("minishell", 4, 5) == "shell"
    assert substr("minishell", 4, 100) == "shell"
    assert substr("minishell", 9, 3) == ""
    assert substr("minishell", 20, 3) == ""
    assert substr("minishell", 0, 0) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)