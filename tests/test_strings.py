import pytest

from algokit.strings import is_palindrome, reverse_string, sort_by_length


@pytest.mark.parametrize(
    "text, expected",
    [("abba", True), ("abc", False), ("abccad", False)],
)
def test_source_palindrome_examples(text, expected):
    assert is_palindrome(text) is expected


@pytest.mark.parametrize("text", ["", "x", "racecar", "noon"])
def test_short_and_symmetric_strings_are_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["", "a", "hello", "Today is a day"])
def test_reverse_round_trip(text):
    reversed_text = reverse_string(text)
    assert reverse_string(reversed_text) == text
    assert len(reversed_text) == len(text)


def test_reverse_swaps_ends():
    text = "algorithm"
    reversed_text = reverse_string(text)
    assert reversed_text[0] == text[-1]
    assert reversed_text[-1] == text[0]


def test_reverse_agrees_with_palindrome_check():
    for text in ["level", "levels", "abba", "abcd"]:
        assert (reverse_string(text) == text) is is_palindrome(text)


def test_sort_by_length_example():
    assert sort_by_length(["a", "bb", "ab", "ccc"]) == ["ccc", "ab", "bb", "a"]


def test_sort_by_length_invariants():
    words = ["pear", "fig", "banana", "kiwi", "apple", "date", "plum"]
    result = sort_by_length(words)
    assert sorted(result) == sorted(words)
    for first, second in zip(result, result[1:]):
        assert len(first) >= len(second)
        if len(first) == len(second):
            assert first <= second