"""Utilities for training and generation."""

import logging
from typing import Callable, List, Optional, Tuple

from markovseed.data import sequencer
from markovseed.errors import (
    GenerationStalledError,
    InvalidInputError,
    UntrainedModelError,
)
from markovseed.models.similarity import find_similar
from markovseed.models.table import TransitionTable
from markovseed.utils.sampling import UniformSampler


logger = logging.getLogger(__name__)


class Trainer:
    """Builds a transition table from text."""

    def __init__(self, n: int):
        """
        Args:
            n: Number of symbols per key
        """
        self.n = n

    def train(self, text: str) -> Tuple[TransitionTable, str]:
        """Build a fresh table from ``text``.

        Returns:
            The table and the sanitized text it was built from
        """
        clean = sequencer.sanitize(text)
        # One symbol per code point, so str slices are symbol windows.
        if len(clean) <= self.n:
            raise InvalidInputError(
                f"text length {len(clean)} must be greater than n {self.n}"
            )

        table = TransitionTable()
        for i in range(len(clean) - self.n):
            table.add(clean[i:i + self.n], clean[i + self.n])
        return table, clean


class Generator:
    """Walks a transition table to produce text."""

    def __init__(
        self,
        table: TransitionTable,
        sampler: UniformSampler,
        n: int,
        text: str = '',
        log: Optional[Callable[[str], None]] = None,
    ):
        """
        Args:
            table: Trained transition table
            sampler: Source of uniform random indices
            n: Number of symbols per key
            text: Sanitized training text used as the last-resort fallback
            log: Sink for diagnostic messages (module logger by default)
        """
        self.table = table
        self.sampler = sampler
        self.n = n
        self.text = text
        self.log = log or logger.debug

    def pick_seed(self, start_with: Optional[str] = None) -> str:
        """Return the starting key for a generation run."""
        if start_with is not None:
            clean = sequencer.sanitize(start_with)
            if len(clean) >= self.n:
                key = clean[:self.n]
                if key in self.table:
                    self.log(f"Starting generation with: {key}")
                    return key

        key = self.sampler.choice(self.table.keys())
        if start_with is not None:
            self.log(f"Warning: Starting text {start_with!r} not found, using random n-gram")
        return key

    def next_symbol(self, key: str) -> str:
        """Sample the symbol that follows ``key``, falling back on dead ends."""
        successors = self.table.successors(key)
        if not successors:
            match = find_similar(self.table, key)
            if match is not None:
                similar, distance = match
                self.log(f"Fallback: using similar n-gram {similar!r} for {key!r} (distance {distance})")
                successors = self.table.successors(similar)

        if successors:
            return self.sampler.choice(successors)

        if not self.text:
            raise GenerationStalledError(
                f"no transitions for {key!r} and no text available for fallback"
            )
        return self.sampler.choice(self.text)

    def generate(self, length: int, start_with: Optional[str] = None) -> str:
        """Generate exactly ``length`` symbols of text."""
        if not self.table:
            raise UntrainedModelError("untrained model")
        if length < self.n:
            raise InvalidInputError(f"length {length} must be at least n {self.n}")

        output: List[str] = sequencer.split(self.pick_seed(start_with))
        while len(output) < length:
            current = sequencer.join(output[-self.n:])
            output.append(self.next_symbol(current))
        return sequencer.join(output[:length])
