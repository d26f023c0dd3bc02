"""Uniform integer samplers used for every random draw during generation."""

import secrets
from abc import ABC, abstractmethod
from typing import Optional, Sequence, TypeVar

import torch


T = TypeVar('T')


class UniformSampler(ABC):
    """Draws integers uniformly from ``[0, upper)``."""

    @abstractmethod
    def _draw(self, upper: int) -> int:
        ...

    def randbelow(self, upper: int) -> int:
        """Return a uniform integer in ``[0, upper)``; 0 when ``upper <= 0``."""
        if upper <= 0:
            return 0
        return self._draw(upper)

    def choice(self, seq: Sequence[T]) -> T:
        """Pick one element by uniform index, so duplicates weight the draw."""
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.randbelow(len(seq))]


class SecureSampler(UniformSampler):
    """Sampler backed by the OS CSPRNG.

    ``secrets.randbelow`` rejects out-of-range draws instead of reducing
    modulo ``upper``, so there is no modulo bias.
    """

    def _draw(self, upper: int) -> int:
        return secrets.randbelow(upper)


class TorchSampler(UniformSampler):
    """Sampler backed by a private, optionally seeded ``torch.Generator``.

    Reproducible when seeded. For ranges below 2**32 torch reduces a 32-bit
    draw modulo ``upper``, so the residual bias of any single outcome is at
    most ``upper / 2**32``.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Seed for the generator; a fresh random seed when None
        """
        self.generator = torch.Generator()
        if seed is None:
            self.seed = self.generator.seed()
        else:
            self.seed = seed
            self.generator.manual_seed(seed)

    def _draw(self, upper: int) -> int:
        return int(torch.randint(0, upper, (1,), generator=self.generator).item())

    def __repr__(self) -> str:
        return f"TorchSampler(seed={self.seed})"


def make_sampler(secure: bool = True, seed: Optional[int] = None) -> UniformSampler:
    """Return a ``SecureSampler``, or a ``TorchSampler`` when ``secure`` is off.

    A seed only makes sense for the torch sampler; passing one selects it.
    """
    if secure and seed is None:
        return SecureSampler()
    return TorchSampler(seed)
