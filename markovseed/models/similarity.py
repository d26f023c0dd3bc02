"""Nearest-key search used when generation reaches a dead end.

Every call is a linear scan: O(|table| * n^2) for n-symbol keys. It only
runs on the fallback path, never for keys the table already knows.
"""

from typing import Optional, Sequence, Tuple

from markovseed.models.table import TransitionTable


def edit_distance(a: Sequence[str], b: Sequence[str]) -> int:
    """Levenshtein distance between two symbol sequences.

    Insertions, deletions and substitutions each cost 1. Only two rows of
    the (len(a)+1) x (len(b)+1) table are kept.
    """
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, sa in enumerate(a, start=1):
        current = [i]
        for j, sb in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,              # deletion
                current[j - 1] + 1,           # insertion
                previous[j - 1] + (sa != sb)  # substitution
            ))
        previous = current
    return previous[-1]


def find_similar(
    table: TransitionTable,
    target: str,
) -> Optional[Tuple[str, int]]:
    """Find the key closest to ``target`` among keys with successors.

    Ties keep the first key encountered. The scan stops early on an exact
    match.

    Returns:
        ``(key, distance)``, or None when no key has successors
    """
    best_key = None
    best_distance = -1
    for key, successors in table.items():
        if not successors:
            continue
        distance = edit_distance(target, key)
        if best_key is None or distance < best_distance:
            best_key, best_distance = key, distance
            if distance == 0:
                break
    if best_key is None:
        return None
    return best_key, best_distance
