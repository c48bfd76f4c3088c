"""Endpoint path matching between two specification documents."""

from collections.abc import Iterable
from typing import Protocol

from spec_bridge.mapping.models import PathMatch
from spec_bridge.mapping.scoring import path_similarity
from spec_bridge.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PATH_THRESHOLD = 0.6


class MatchStrategy(Protocol):
    """Pairs up endpoint paths from the old and the new document.

    Implementations must return at most one match per source path and must
    be deterministic for identical inputs.
    """

    def match(self, candidates_a: Iterable[str], candidates_b: Iterable[str]) -> list[PathMatch]:
        ...


class PathMatcher:
    """Match paths by comparing every old path with every new path.

    Cost is O(P1 x P2) path comparisons. That is fine for API surfaces of
    tens to low hundreds of endpoints; larger documents need an indexed
    strategy.
    """

    def __init__(self, threshold: float = DEFAULT_PATH_THRESHOLD):
        """Initialize path matcher.

        Args:
            threshold: Similarity a pair must exceed to be kept
        """
        self.threshold = threshold

    def match(self, candidates_a: Iterable[str], candidates_b: Iterable[str]) -> list[PathMatch]:
        return self.find_common_paths(candidates_a, candidates_b)

    def find_common_paths(
        self, paths1: Iterable[str], paths2: Iterable[str]
    ) -> list[PathMatch]:
        """Find the best corresponding new path for each old path.

        Args:
            paths1: Path templates of the old document
            paths2: Path templates of the new document

        Returns:
            Matches sorted by descending similarity, one per old path
        """
        targets = list(paths2)
        candidates: list[PathMatch] = []

        for path1 in paths1:
            for path2 in targets:
                similarity = path_similarity(path1, path2)
                if similarity > self.threshold:
                    candidates.append(PathMatch(path1=path1, path2=path2, similarity=similarity))

        # Stable sort keeps document order among equal similarities
        candidates.sort(key=lambda m: m.similarity, reverse=True)

        matches: list[PathMatch] = []
        seen: set[str] = set()
        for candidate in candidates:
            if candidate.path1 in seen:
                continue
            seen.add(candidate.path1)
            matches.append(candidate)

        logger.debug(
            "paths_matched",
            candidate_pairs=len(candidates),
            matches=len(matches),
            threshold=self.threshold,
        )

        return matches
