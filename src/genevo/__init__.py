"""
genevo: a generic evolutionary-search engine.

Evolves a fixed-size population of individuals (tuples of genes) toward
higher fitness using pluggable selection, crossover and mutation operators,
with optional checkpointing of engine state.
"""

__version__ = "0.1.0"

from .core import (
    GenevoError,
    EmptyPopulationError,
    InvalidFitnessError,
    InvalidCrossoverConfigError,
    ConfigurationError,
    PersistenceError,
    EngineState,
    as_individual,
    setup_population,
    evaluate,
    rank,
    sorted_population,
    best_fit,
)
from .selection import BestFitSelector, RandomSelector, RouletteWheelSelector
from .variation import (
    SinglePointCrossover,
    MultiPointCrossover,
    UniformCrossover,
    GeneMutator,
    gene_mutate,
    mutate_with_rate,
)
from .optimization import (
    EvolutionEngine,
    EvolutionEngineConfig,
    GenerationHistory,
    CheckpointRecord,
)
from .utils.random_source import RandomSource, NumpyRandomSource

__all__ = [
    "GenevoError",
    "EmptyPopulationError",
    "InvalidFitnessError",
    "InvalidCrossoverConfigError",
    "ConfigurationError",
    "PersistenceError",
    "EngineState",
    "as_individual",
    "setup_population",
    "evaluate",
    "rank",
    "sorted_population",
    "best_fit",
    "BestFitSelector",
    "RandomSelector",
    "RouletteWheelSelector",
    "SinglePointCrossover",
    "MultiPointCrossover",
    "UniformCrossover",
    "GeneMutator",
    "gene_mutate",
    "mutate_with_rate",
    "EvolutionEngine",
    "EvolutionEngineConfig",
    "GenerationHistory",
    "CheckpointRecord",
    "RandomSource",
    "NumpyRandomSource",
]
