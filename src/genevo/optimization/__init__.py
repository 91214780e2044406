"""
Optimization module for genevo.

This module contains the evolution engine, which composes selection, crossover,
mutation and fitness evaluation into a generational loop, together with its
configuration and checkpoint persistence.
"""

from .engine import EvolutionEngine
from .config import EvolutionEngineConfig, GenerationHistory
from .checkpoint import CheckpointRecord

__all__ = [
    "EvolutionEngine",
    "EvolutionEngineConfig",
    "GenerationHistory",
    "CheckpointRecord",
]
