"""Character-level n-gram Markov model."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from markovseed import config
from markovseed.data import sequencer
from markovseed.errors import InvalidInputError
from markovseed.models import similarity
from markovseed.models.table import TransitionTable
from markovseed.utils import stats, store
from markovseed.utils.logs import LogBuffer
from markovseed.utils.sampling import UniformSampler, make_sampler
from markovseed.utils.trainer import Generator, Trainer


logger = logging.getLogger(__name__)


class MarkovModel:
    """Trains on text and generates text that resembles it.

    The model owns its order ``n``, the transition table, the sanitized
    training text (kept for the random-symbol fallback) and a buffer of
    verbose diagnostics. Instances share no state with each other.

    Loading a model file whose ``n`` differs from this instance's ``n``
    is rejected unless ``adopt_n=True`` is passed to ``load``.
    """

    def __init__(
        self,
        n: int = config.DEFAULT_N,
        verbose: bool = False,
        secure_random: bool = True,
        seed: Optional[int] = None,
        sampler: Optional[UniformSampler] = None,
    ):
        """
        Args:
            n: Number of symbols per key, must be positive
            verbose: Buffer timestamped diagnostics for ``get_logs``
            secure_random: Draw from the OS CSPRNG instead of torch
            seed: Seed for the torch sampler (implies ``secure_random=False``)
            sampler: Explicit random source, overrides the two flags above
        """
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise InvalidInputError(f"n must be a positive integer, got {n!r}")
        self.n = n
        self.table = TransitionTable()
        self.text = ''
        self.sampler = sampler or make_sampler(secure_random, seed)
        self._logs = LogBuffer(logger, enabled=verbose)

    @property
    def verbose(self) -> bool:
        return self._logs.enabled

    def _log(self, message: str) -> None:
        self._logs.log(message)

    def get_logs(self) -> List[str]:
        return self._logs.lines

    def clear_logs(self) -> None:
        self._logs.clear()

    def train(self, text: str) -> None:
        """Replace the table with one built from ``text``."""
        table, clean = Trainer(self.n).train(text)
        self.table = table
        self.text = clean
        self._log(f"Trained model with {len(self.table)} n-grams")

    def train_from_file(
        self,
        path: Union[str, Path],
        max_size: int = config.MAX_TRAINING_FILE_SIZE,
    ) -> None:
        self._log(f"Training from file: {path}")
        self.train(sequencer.read_training_file(path, max_size))

    def generate(self, length: int, start_with: Optional[str] = None) -> str:
        """Generate ``length`` symbols, optionally starting from ``start_with``.

        The first ``n`` symbols of ``start_with`` are used as the starting key
        when the table knows them; otherwise a random key is used.
        """
        generator = Generator(self.table, self.sampler, self.n, self.text, log=self._log)
        return generator.generate(length, start_with)

    def find_similar(self, target: str) -> Optional[str]:
        """Return the known key closest to ``target`` by edit distance."""
        match = similarity.find_similar(self.table, target)
        return match[0] if match else None

    def save(self, path: Union[str, Path]) -> None:
        store.save_model(path, self.n, self.table)
        self._log(f"Model saved to {path}")

    def load(self, path: Union[str, Path], adopt_n: bool = False) -> None:
        """Replace the table with the one stored at ``path``.

        The retained training text is cleared, since it belongs to the
        previous table.

        Raises:
            InvalidInputError: if the file's ``n`` differs and ``adopt_n`` is off
        """
        n, table, _ = store.load_model(path)
        if n != self.n:
            if not adopt_n:
                raise InvalidInputError(
                    f"loaded model n={n} does not match current n={self.n}"
                )
            self._log(f"Adopting n={n} from {path} (was {self.n})")
            self.n = n
        self.table = table
        self.text = ''
        self._log(f"Model loaded from {path} with {len(self.table)} n-grams")

    def reset(self) -> None:
        self.table = TransitionTable()
        self.text = ''
        self.clear_logs()

    def validate(self, allow_dead_ends: bool = False) -> None:
        stats.validate(self.n, self.table, allow_dead_ends)

    def compute_stats(self) -> stats.ModelStats:
        return stats.compute_stats(self.table)

    def summary(self) -> str:
        return self.compute_stats().format()

    def keys(self) -> List[str]:
        return self.table.keys()

    def transitions(self, key: str) -> List[str]:
        return list(self.table.successors(key))

    def __repr__(self) -> str:
        return f"MarkovModel(n={self.n}, keys={len(self.table)})"
