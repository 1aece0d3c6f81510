import pytest

from algodrills.text import (
    decode_string,
    find_replace_string,
    full_justify,
    is_valid_parentheses,
    parse_int,
    str_str,
)


def test_decode_plain_text_is_unchanged():
    assert decode_string("hello") == "hello"


def test_decode_simple_repeat():
    assert decode_string("2[ab]") == "ab" * 2


def test_decode_nested_repeat():
    assert decode_string("2[a3[b]]") == ("a" + "b" * 3) * 2


def test_decode_multi_digit_count():
    assert decode_string("x10[y]z") == "x" + "y" * 10 + "z"


def test_decode_unbalanced_raises():
    with pytest.raises(ValueError):
        decode_string("ab]")
    with pytest.raises(ValueError):
        decode_string("2[ab")


def test_find_replace_example():
    assert find_replace_string("abcd", [0, 2], ["a", "cd"], ["eee", "ffff"]) == "eeebffff"


def test_find_replace_skips_mismatch():
    assert find_replace_string("abcd", [0, 2], ["ab", "ec"], ["eee", "ffff"]) == "eeecd"


def test_find_replace_source_past_end_is_ignored():
    assert find_replace_string("abc", [2], ["cde"], ["z"]) == "abc"


@pytest.mark.parametrize(
    "haystack, needle",
    [("sadbutsad", "sad"), ("leetcode", "code"), ("aaaaab", "aab"), ("abc", "")],
)
def test_str_str_matches_find(haystack, needle):
    assert str_str(haystack, needle) == haystack.find(needle)


def test_str_str_missing_gives_minus_one():
    assert str_str("leetcode", "leeto") == -1


@pytest.mark.parametrize("text", ["42", "   -42", "+17", "0032"])
def test_parse_int_plain_numbers(text):
    assert parse_int(text) == int(text)


def test_parse_int_stops_at_non_digit():
    assert parse_int("4193 with words") == int("4193")


def test_parse_int_leading_words_give_zero():
    assert parse_int("words and 987") == 0


def test_parse_int_clamps():
    assert parse_int("91283472332") == 2**31 - 1
    assert parse_int("-91283472332") == -(2**31)
    assert parse_int("9" * 5000) == 2**31 - 1


@pytest.mark.parametrize("text", ["()", "()[]{}", "{[()]}", ""])
def test_valid_parentheses(text):
    assert is_valid_parentheses(text)


@pytest.mark.parametrize("text", ["(]", "([)]", "(", ")", "(a)"])
def test_invalid_parentheses(text):
    assert not is_valid_parentheses(text)


WORDS = ["This", "is", "an", "example", "of", "text", "justification."]


def test_full_justify_example():
    assert full_justify(WORDS, 16) == [
        "This    is    an",
        "example  of text",
        "justification.  ",
    ]


@pytest.mark.parametrize("width", [14, 16, 20, 30])
def test_full_justify_invariants(width):
    lines = full_justify(WORDS, width)
    assert all(len(line) == width for line in lines)
    assert [word for line in lines for word in line.split()] == WORDS
    assert lines[-1].rstrip() == " ".join(lines[-1].split())


def test_full_justify_single_word_is_left_aligned():
    assert full_justify(["a"], 3) == ["a".ljust(3)]


def test_full_justify_word_too_long():
    with pytest.raises(ValueError):
        full_justify(["abcdef"], 3)