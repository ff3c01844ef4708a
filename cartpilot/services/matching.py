from __future__ import annotations


def is_subsequence(text: str, pattern: str) -> bool:
    """True when every character of ``pattern`` appears in ``text`` in order."""
    position = 0
    for char in text:
        if position == len(pattern):
            break
        if char == pattern[position]:
            position += 1
    return position == len(pattern)


def matches(candidate: str, query: str) -> bool:
    """Case-insensitive fuzzy match of ``query`` against ``candidate``.

    A contiguous substring always matches. Otherwise the query matches when its
    characters appear in the candidate in order, so "mk" matches "Milk". It is
    permissive and will report matches a human would not. An empty query
    matches everything.
    """
    candidate_lower = candidate.lower()
    query_lower = query.lower()

    if query_lower in candidate_lower:
        return True
    return is_subsequence(candidate_lower, query_lower)


__all__ = ["matches", "is_subsequence"]
