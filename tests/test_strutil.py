import base64

import pytest

from beankit import strutil


@pytest.mark.parametrize("value", ["", "   ", "\t\n", " \r\n "])
def test_blank_values(value):
    assert strutil.is_blank(value)
    assert not strutil.is_not_blank(value)


def test_not_blank():
    assert strutil.is_not_blank(" a ")
    assert not strutil.is_blank("x")


def test_empty():
    assert strutil.is_empty("")
    assert not strutil.is_empty(" ")
    assert strutil.is_not_empty(" ")
    assert not strutil.is_not_empty("")


def test_is_equals_any():
    assert strutil.is_equals_any("b", "a", "b", "c")
    assert not strutil.is_equals_any("d", "a", "b", "c")
    assert not strutil.is_equals_any("a")


@pytest.mark.parametrize(
    "url",
    ["https://example.com", "http://example.com:8080/path?q=1", "ftp://files.example.com/x"],
)
def test_valid_urls(url):
    assert strutil.is_valid_url(url)


@pytest.mark.parametrize(
    "url",
    ["", "example.com", "/just/a/path", "http://", "http://exa mple.com", "http://example.com:abc", "http://a\x01b.com"],
)
def test_invalid_urls(url):
    assert not strutil.is_valid_url(url)


def test_default_if_nil():
    assert strutil.default_if_nil("", "fallback") == "fallback"
    assert strutil.default_if_nil(" ", "fallback") == " "
    assert strutil.default_if_nil("value", "fallback") == "value"


def test_default_if_blank():
    assert strutil.default_if_blank("  ", "fallback") == "fallback"
    assert strutil.default_if_blank("value", "fallback") == "value"


@pytest.mark.parametrize("i,j", [(0, 1), (1, 3), (0, 5), (2, 100)])
def test_substring_within_bounds(i, j):
    word = "manju"
    assert strutil.substring(word, i, j) == word[i:min(j, len(word))]


def test_substring_edge_cases():
    word = "manju"
    assert strutil.substring(word, 5, 7) == ""
    assert strutil.substring(word, 3, 2) == ""
    assert strutil.substring(word, 2, -1) == word[2:]
    assert strutil.substring(word, -1, 2) == word[:2]
    assert strutil.substring(word, -1, -1) == word


def test_substring_counts_characters():
    text = "日本語テキスト"
    assert strutil.substring(text, 0, 3) == text[:3]


def test_is_match_all_substrings():
    assert strutil.is_match_all_substrings("hello world", "hello", "world")
    assert not strutil.is_match_all_substrings("hello world", "hello", "moon")
    assert strutil.is_match_all_substrings("anything")


def test_match_all_substrings_in_a_string():
    subs = ("hello", "world")
    matched, count = strutil.match_all_substrings_in_a_string("hello world", *subs)
    assert matched and count == len(subs)

    matched, count = strutil.match_all_substrings_in_a_string("hello there", "hello", "moon")
    assert not matched and count == 1

    matched, count = strutil.match_all_substrings_in_a_string("x", "a", "b")
    assert not matched and count == 0


def test_contains():
    assert strutil.contains(["a", "b"], "b")
    assert not strutil.contains(["a", "b"], "c")
    assert not strutil.contains([], "a")


def test_left_pad():
    assert strutil.left_pad_to_length("7", "0", 3) == "007"
    padded = strutil.left_pad_to_length("42", "ab", 9)
    assert len(padded) == 9
    assert padded.endswith("42")


def test_left_pad_truncates_from_left():
    value = "abcdefgh"
    assert strutil.left_pad_to_length(value, "0", 3) == value[-3:]


def test_right_pad():
    padded = strutil.right_pad_to_length("42", "x", 6)
    assert len(padded) == 6
    assert padded.startswith("42")
    assert set(padded[2:]) == {"x"}


def test_right_pad_truncates_from_right():
    value = "abcdefgh"
    assert strutil.right_pad_to_length(value, "0", 3) == value[:3]


def test_pad_with_empty_pad_string_fails():
    with pytest.raises(ValueError):
        strutil.left_pad_to_length("a", "", 3)
    with pytest.raises(ValueError):
        strutil.right_pad_to_length("a", "", 3)


def test_pad_too_short_fails():
    with pytest.raises(ValueError):
        strutil.left_pad_to_length("", "ab", 5)


def test_alpha_numeric_random_string():
    value = strutil.alpha_numeric_random_string(40)
    assert len(value) == 40
    assert value.isascii() and value.isalnum()


def test_generate_random_bytes():
    assert len(strutil.generate_random_bytes(16)) == 16
    assert strutil.generate_random_bytes(0) == b""
    with pytest.raises(ValueError):
        strutil.generate_random_bytes(-1)


@pytest.mark.parametrize("length", [1, 7, 32, 100])
def test_generate_random_string_without_special(length):
    value = strutil.generate_random_string(length, False)
    assert len(value) == length
    assert "-" not in value and "_" not in value


def test_generate_random_string_with_special_decodes():
    value = strutil.generate_random_string(12, True)
    padding = "=" * (-len(value) % 4)
    assert len(base64.urlsafe_b64decode(value + padding)) == 12


def test_remove_leading_zeros():
    items = ["007", "0", "100", "abc"]
    result = strutil.remove_leading_zeros_from_slice(items)
    assert result == [item.lstrip("0") for item in items]
    assert strutil.remove_leading_zeros_from_slice([]) == []


def test_to_snake_case():
    assert strutil.to_snake_case("HelloWorld") == "hello_world"
    assert strutil.to_snake_case("hello world") == "hello_world"


def test_to_snake_case_invariants():
    result = strutil.to_snake_case("Some-Mixed.Value42Here")
    assert result == result.lower()
    assert "-" not in result and "." not in result
    assert strutil.to_snake_case(result) == result