"""Error types raised by the Markov model and its helpers."""


class MarkovSeedError(Exception):
    """Base class for every error raised by markovseed."""


class InvalidInputError(MarkovSeedError, ValueError):
    """Bad constructor or argument value."""


class UntrainedModelError(MarkovSeedError, RuntimeError):
    """Generation requested before the model holds any n-grams."""


class GenerationStalledError(MarkovSeedError, RuntimeError):
    """No successors, no similar n-gram and no training text to fall back on."""


class ModelIOError(MarkovSeedError, OSError):
    """A training or model file could not be read or written."""


class CorruptModelError(MarkovSeedError, ValueError):
    """Persisted model data is missing required fields or is malformed."""


class InvalidModelError(MarkovSeedError, ValueError):
    """A loaded or trained model breaks a structural invariant."""
