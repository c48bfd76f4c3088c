"""Tests for name and path similarity scoring."""

import pytest

from spec_bridge.mapping.scoring import (
    is_parameter_segment,
    levenshtein_distance,
    path_similarity,
    string_similarity,
)


def test_levenshtein_distance():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("abc", "") == 3
    assert levenshtein_distance("same", "same") == 0


def test_string_similarity_identical_is_one():
    assert string_similarity("test", "test") == 1.0


def test_string_similarity_empty_is_zero():
    assert string_similarity("", "x") == 0.0
    assert string_similarity("x", "") == 0.0


def test_string_similarity_one_edit():
    score = string_similarity("abc", "abd")
    assert 0.6 < score < 0.9
    assert score == pytest.approx(2 / 3)


def test_string_similarity_is_case_insensitive():
    assert string_similarity("UserName", "username") == 1.0


def test_is_parameter_segment():
    assert is_parameter_segment("{id}")
    assert not is_parameter_segment("users")
    assert not is_parameter_segment("{id")


def test_path_similarity_parameter_segments():
    """One exact segment and one placeholder pair average to 0.9."""
    assert path_similarity("/users/{id}", "/users/{userId}") == pytest.approx(0.9)


def test_path_similarity_identical_paths():
    assert path_similarity("/a/b/c", "/a/b/c") == 1.0


def test_path_similarity_root_paths():
    assert path_similarity("/", "/") == 1.0


def test_path_similarity_similar_segment():
    # "transaction" vs "transactions" is one edit apart
    assert path_similarity("/transaction", "/transactions") == pytest.approx(0.6)


def test_path_similarity_length_mismatch():
    # Missing trailing segment scores zero
    assert path_similarity("/users", "/users/{id}") == pytest.approx(0.5)


def test_path_similarity_unrelated():
    assert path_similarity("/orders", "/customers") == 0.0
