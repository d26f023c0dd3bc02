"""Shared test doubles."""

from typing import List

from markovseed.utils.sampling import UniformSampler


class ScriptedSampler(UniformSampler):
    """Returns a fixed script of draws, each reduced into range."""

    def __init__(self, draws: List[int]):
        self.draws = list(draws)
        self.calls: List[int] = []

    def _draw(self, upper: int) -> int:
        self.calls.append(upper)
        value = self.draws.pop(0) if self.draws else 0
        return value % upper
