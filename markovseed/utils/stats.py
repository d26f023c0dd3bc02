"""Aggregate statistics and structural checks for transition tables."""

from dataclasses import asdict, dataclass
from typing import Dict, Union

from markovseed.errors import InvalidModelError
from markovseed.models.table import TransitionTable


@dataclass
class ModelStats:
    key_count: int = 0
    total_transitions: int = 0
    avg_transitions: float = 0.0
    max_transitions: int = 0
    min_transitions: int = -1  # -1 when the table has no keys
    dead_end_count: int = 0

    def to_dict(self) -> Dict[str, Union[int, float]]:
        return asdict(self)

    def format(self) -> str:
        """Human-readable statistics block."""
        return (
            "Model Statistics:\n"
            f"- N-Grams: {self.key_count}\n"
            f"- Total Transitions: {self.total_transitions}\n"
            f"- Average Transitions: {self.avg_transitions:.2f}\n"
            f"- Max Transitions: {self.max_transitions}\n"
            f"- Min Transitions: {self.min_transitions}\n"
            f"- Dead Ends: {self.dead_end_count}\n"
        )


def compute_stats(table: TransitionTable) -> ModelStats:
    """Single pass over the table."""
    stats = ModelStats()
    for _, successors in table.items():
        count = len(successors)
        stats.key_count += 1
        stats.total_transitions += count
        stats.max_transitions = max(stats.max_transitions, count)
        if stats.min_transitions == -1 or count < stats.min_transitions:
            stats.min_transitions = count
        if count == 0:
            stats.dead_end_count += 1

    if stats.key_count > 0:
        stats.avg_transitions = stats.total_transitions / stats.key_count
    return stats


def validate(n: int, table: TransitionTable, allow_dead_ends: bool = False) -> None:
    """Check that ``n`` is positive and every key is a well-formed n-gram.

    Raises:
        InvalidModelError: naming the first offending key
    """
    if n <= 0:
        raise InvalidModelError(f"invalid n value: {n}")

    for key, successors in table.items():
        if len(key) != n:
            raise InvalidModelError(
                f"invalid key length: {key!r} has {len(key)} symbols (expected {n})"
            )
        if not allow_dead_ends and not successors:
            raise InvalidModelError(f"key {key!r} has no successors")
