"""Tests for endpoint path matching."""

import pytest

from spec_bridge.mapping.paths import MatchStrategy, PathMatcher


def test_matches_best_target_per_source():
    matcher = PathMatcher()
    matches = matcher.find_common_paths(
        ["/users/{id}", "/orders"],
        ["/orders", "/users/{userId}", "/users"],
    )

    pairs = {m.path1: m.path2 for m in matches}
    assert pairs == {"/orders": "/orders", "/users/{id}": "/users/{userId}"}


def test_matches_are_sorted_by_similarity():
    matcher = PathMatcher()
    matches = matcher.find_common_paths(["/users/{id}", "/orders"], ["/orders", "/users/{uid}"])

    assert [m.path1 for m in matches] == ["/orders", "/users/{id}"]
    assert matches[0].similarity == 1.0
    assert matches[1].similarity == pytest.approx(0.9)


def test_threshold_is_exclusive():
    # "/users" vs "/users/{id}" scores exactly 0.5
    assert PathMatcher(threshold=0.5).find_common_paths(["/users"], ["/users/{id}"]) == []
    assert len(PathMatcher(threshold=0.4).find_common_paths(["/users"], ["/users/{id}"])) == 1


def test_ties_keep_document_order():
    matcher = PathMatcher()
    matches = matcher.find_common_paths(["/items/{id}"], ["/items/{a}", "/items/{b}"])

    assert len(matches) == 1
    assert matches[0].path2 == "/items/{a}"


def test_several_sources_may_share_a_target():
    matcher = PathMatcher()
    matches = matcher.find_common_paths(["/items/{id}", "/items/{key}"], ["/items/{itemId}"])

    assert [m.path2 for m in matches] == ["/items/{itemId}", "/items/{itemId}"]


def test_no_paths_no_matches():
    assert PathMatcher().find_common_paths([], ["/a"]) == []
    assert PathMatcher().find_common_paths(["/a"], []) == []


def test_path_matcher_satisfies_match_strategy():
    strategy: MatchStrategy = PathMatcher()
    matches = strategy.match(["/a"], ["/a"])
    assert matches[0].to_dict() == {"path1": "/a", "path2": "/a", "similarity": 1.0}
