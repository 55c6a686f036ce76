from hypothesis import given
from hypothesis import strategies as st

from dpkit.sequences import (
    edit_operations,
    is_subsequence,
    lcs_length,
    lcs_length_recursive,
    longest_common_subsequence,
    longest_common_substring_length,
    longest_palindromic_subsequence_length,
    longest_repeating_subsequence_length,
    min_deletions_to_palindrome,
    min_insertions_to_palindrome,
    shortest_supersequence,
    shortest_supersequence_length,
)

texts = st.text(alphabet="abc", max_size=9)


def test_print_lcs_example():
    assert longest_common_subsequence("acbcf", "abcdaf") == "abcf"


def test_edit_operations_example():
    assert edit_operations("heap", "pea") == (2, 1)


def test_pattern_matching_example():
    assert is_subsequence("axy", "adxcpy")
    assert not is_subsequence("ayx", "adxcpy")


def test_identical_strings():
    word = "billionare"
    assert lcs_length(word, word) == len(word)
    assert longest_common_substring_length(word, word) == len(word)


@given(texts, texts)
def test_lcs_variants_agree(x, y):
    expected = lcs_length(x, y)
    assert lcs_length_recursive(x, y) == expected
    assert lcs_length(y, x) == expected
    assert len(longest_common_subsequence(x, y)) == expected


@given(texts, texts)
def test_lcs_string_is_common(x, y):
    common = longest_common_subsequence(x, y)
    assert is_subsequence(common, x)
    assert is_subsequence(common, y)


@given(texts, texts)
def test_substring_not_longer_than_subsequence(x, y):
    assert longest_common_substring_length(x, y) <= lcs_length(x, y)


@given(texts, st.integers(0, 9), st.integers(0, 9))
def test_substring_of_x_found_whole(x, start, size):
    piece = x[start:start + size]
    assert longest_common_substring_length(x, piece) == len(piece)


@given(texts, texts)
def test_supersequence_contains_both(x, y):
    sup = shortest_supersequence(x, y)
    assert len(sup) == shortest_supersequence_length(x, y)
    assert is_subsequence(x, sup)
    assert is_subsequence(y, sup)


@given(texts, texts)
def test_edit_operations_balance(x, y):
    ops = edit_operations(x, y)
    assert len(x) - ops.deletions == len(y) - ops.insertions
    assert ops.deletions + ops.insertions + 2 * lcs_length(x, y) == len(x) + len(y)


@given(texts)
def test_palindrome_deletions_equal_insertions(s):
    assert min_deletions_to_palindrome(s) == min_insertions_to_palindrome(s)
    assert min_deletions_to_palindrome(s) + longest_palindromic_subsequence_length(s) == len(s)


@given(texts)
def test_palindrome_needs_no_changes(s):
    pal = s + s[::-1]
    assert longest_palindromic_subsequence_length(pal) == len(pal)
    assert min_insertions_to_palindrome(pal) == min_deletions_to_palindrome(pal) - min_deletions_to_palindrome(pal)


@given(texts)
def test_string_is_subsequence_of_itself(s):
    assert is_subsequence(s, s)
    assert is_subsequence("", s)


def test_distinct_characters_have_no_repeat():
    assert longest_repeating_subsequence_length("abcdef") == 0