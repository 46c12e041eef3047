"""
Name lookup — "did you mean" resolution of family and order names

Names are compared case-insensitively by Levenshtein distance. A query whose
closest name is too far away is reported as a suggestion rather than treated
as a match.
"""

from dataclasses import dataclass
from typing import Iterable, Optional


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LookupConfig:
    """Lookup configuration."""

    # Distance at which the closest name stops counting as a match
    max_edit_distance: int = 4


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class LookupResult:
    """Closest candidate for a query."""

    query: str
    match: str
    distance: int

    # False when distance >= max_edit_distance
    is_match: bool


# =============================================================================
# EDIT DISTANCE
# =============================================================================


def levenshtein_distance(a: str, b: str) -> int:
    """
    Edit distance (insertions, deletions, substitutions) between two strings.

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("", "abc")
        3
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current
    return previous[-1]


def did_you_mean(candidates: Iterable[str], query: str) -> Optional[tuple[int, str]]:
    """
    Closest candidate to query.

    Returns:
        (distance, candidate), ties broken alphabetically; None when there
        are no candidates
    """
    query_folded = query.casefold()
    scored = sorted(
        (levenshtein_distance(candidate.casefold(), query_folded), candidate)
        for candidate in set(candidates)
    )
    if not scored:
        return None
    return scored[0]


def resolve_name(
    candidates: Iterable[str], query: str, config: Optional[LookupConfig] = None
) -> Optional[LookupResult]:
    """
    Resolve a family/order name typed by a user.

    Returns:
        LookupResult, or None when there are no candidates
    """
    config = config or LookupConfig()
    closest = did_you_mean(candidates, query)
    if closest is None:
        return None
    distance, match = closest
    return LookupResult(
        query=query,
        match=match,
        distance=distance,
        is_match=distance < config.max_edit_distance,
    )
