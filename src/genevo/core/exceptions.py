"""
Error types raised by the genevo engine.

All errors are raised synchronously at the point of violation and propagate
to the immediate caller; the engine never retries internally.
"""


class GenevoError(Exception):
    """Base class for all engine errors."""


class EmptyPopulationError(GenevoError):
    """Raised when best/sorted queries are made on a state with no fitness entries."""


class InvalidFitnessError(GenevoError):
    """Raised when fitness values cannot be used for proportional selection."""


class InvalidCrossoverConfigError(GenevoError, ValueError):
    """Raised for impossible cut counts or parents of mismatched length."""


class ConfigurationError(GenevoError, ValueError):
    """Raised when engine configuration values are out of range."""


class PersistenceError(GenevoError):
    """Raised when a checkpoint cannot be written, read or parsed."""
