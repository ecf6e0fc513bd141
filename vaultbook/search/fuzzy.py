"""Fuzzy ranking of folder paths for starting-folder selection."""

from __future__ import annotations

SEGMENT_BOUNDARIES = "/_- ."
LEAF_MATCH_BONUS = 25


def fuzzy_score(query: str, candidate: str) -> int | None:
    """Score a folder path, favouring queries that end inside its last segment; ``None`` if no match."""
    if not query:
        return 0
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()
    leaf_start = candidate_folded.rstrip("/").rfind("/") + 1

    score = 0
    prev_idx = -1
    run = 0
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or candidate_folded[idx - 1] in SEGMENT_BOUNDARIES:
            score += 35
        prev_idx = idx

    if prev_idx >= leaf_start:
        score += LEAF_MATCH_BONUS
    score -= len(candidate_folded) // 5
    return score


def substring_index(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    idx = candidate.casefold().find(query.casefold())
    return idx if idx >= 0 else None


def rank_paths(query: str, paths: list[str], limit: int = 200) -> list[tuple[str, int]]:
    """Rank ``paths`` against ``query`` as ``(path, score)``, best first.

    Substring hits win outright, ordered by position then length; only when
    no path contains the query are subsequence matches scored.
    """
    max_results = max(1, limit)
    substring_hits: list[tuple[int, int, str]] = []
    for path in paths:
        position = substring_index(query, path)
        if position is not None:
            substring_hits.append((position, len(path), path))
    if substring_hits:
        substring_hits.sort()
        return [
            (path, 10_000 - (position * 50) - length)
            for position, length, path in substring_hits[:max_results]
        ]

    scored: list[tuple[int, int, str]] = []
    for path in paths:
        score = fuzzy_score(query, path)
        if score is not None:
            scored.append((score, len(path), path))
    scored.sort(key=lambda item: (-item[0], item[1], item[2]))
    return [(path, score) for score, _length, path in scored[:max_results]]


__all__ = [
    "fuzzy_score",
    "substring_index",
    "rank_paths",
]
