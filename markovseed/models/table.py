"""Transition table mapping n-gram keys to their observed successors."""

from typing import Dict, Iterator, List, Optional, Tuple


class TransitionTable:
    """Mapping from an n-symbol key to the list of symbols seen after it.

    Successor lists keep duplicates: a symbol recorded k times is k times
    as likely to be drawn during generation.
    """

    def __init__(self, entries: Optional[Dict[str, List[str]]] = None):
        """
        Args:
            entries: Optional initial key -> successors mapping (copied)
        """
        self._entries: Dict[str, List[str]] = {}
        if entries:
            for key, successors in entries.items():
                self._entries[key] = list(successors)

    def add(self, key: str, successor: str) -> None:
        """Record one observation of ``successor`` following ``key``."""
        self._entries.setdefault(key, []).append(successor)

    def successors(self, key: str) -> List[str]:
        """Return the successor list for ``key`` (empty if unknown)."""
        return self._entries.get(key, [])

    def keys(self) -> List[str]:
        return list(self._entries)

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        return iter(self._entries.items())

    def to_dict(self) -> Dict[str, List[str]]:
        """Return a plain, JSON-ready copy of the table."""
        return {key: list(successors) for key, successors in self._entries.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"TransitionTable(keys={len(self._entries)})"
