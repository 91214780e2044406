"""
Configuration and data classes for the genevo evolution engine.
"""

import logging
import os
from dataclasses import dataclass, field, fields
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..core.exceptions import ConfigurationError
from ..selection import SELECTORS
from ..variation import CROSSOVERS

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config_values(config_path: Path) -> Dict[str, Any]:
    """
    Read the evolution settings from a YAML file.

    Settings may sit under an ``evolution`` key or at the top level.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Mapping of config field names to values

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping
    """
    try:
        with open(config_path) as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot load config {config_path}: {e}") from e

    # Extract nested parameters if present
    evolution_config = config.get("evolution", config) if isinstance(config, dict) else config
    if not isinstance(evolution_config, dict):
        raise ConfigurationError(f"Config {config_path} must hold a mapping of settings")

    return evolution_config


@dataclass
class EvolutionEngineConfig:
    """
    Configuration for the evolution engine.

    Holds the data part of the engine configuration. Operators (generator,
    selector, crossover, mutation, fitness function) are passed to the engine
    separately because they cannot be serialized. The engine never modifies
    its config.
    """

    # Generation transition
    population_size: int = 50
    mutation_rate: float = 0.05
    keep_n: int = 10
    ranked: bool = False

    # Operator choice (used by factories and the CLI)
    selection: str = "roulette"
    crossover: str = "single_point"
    n_points: int = 2

    # Run control
    iteration_limit: int = 1000
    fitness_threshold: Optional[float] = None

    # Checkpoint
    save_checkpoints: bool = False
    checkpoint_interval: int = 10

    # Evaluation
    max_workers: Optional[int] = None

    # Reproducibility
    seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"
    log_generation_stats: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.population_size < 1:
            raise ConfigurationError("population_size must be at least 1")
        if not 0 <= self.keep_n <= self.population_size:
            raise ConfigurationError(
                f"keep_n must be between 0 and population_size ({self.population_size}), got {self.keep_n}"
            )
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ConfigurationError("mutation_rate must be between 0 and 1")
        if self.selection not in SELECTORS:
            raise ConfigurationError(
                f"selection must be one of {', '.join(SELECTORS)}, got {self.selection}"
            )
        if self.crossover not in CROSSOVERS:
            raise ConfigurationError(
                f"crossover must be one of {', '.join(CROSSOVERS)}, got {self.crossover}"
            )
        if self.n_points < 0:
            raise ConfigurationError("n_points must be non-negative")
        if self.checkpoint_interval < 1:
            raise ConfigurationError("checkpoint_interval must be at least 1")
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1")
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

        if self.keep_n == self.population_size:
            logger.warning(
                "keep_n equals population_size: every generation is pure elitism "
                "and offspring are never kept"
            )

    @classmethod
    def from_yaml(cls, config_path: Path) -> "EvolutionEngineConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            EvolutionEngineConfig instance
        """
        return cls.from_dict(load_config_values(config_path))

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "EvolutionEngineConfig":
        """
        Create a config from a mapping of field values.

        Args:
            values: Field name -> value

        Returns:
            EvolutionEngineConfig instance

        Raises:
            ConfigurationError: If a key is not a config field
        """
        unknown = set(values) - {f.name for f in fields(cls)}
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(map(str, unknown)))}")

        return cls(**values)

    @classmethod
    def from_env(cls) -> "EvolutionEngineConfig":
        """
        Load configuration from environment variables.

        Reads the following environment variables:
        - POPULATION_SIZE: population_size
        - MUTATION_RATE: mutation_rate
        - KEEP_N: keep_n
        - RANKED: ranked ("true"/"false")
        - SELECTION_METHOD: selection
        - CROSSOVER_METHOD: crossover
        - CROSSOVER_POINTS: n_points
        - ITERATION_LIMIT: iteration_limit
        - FITNESS_THRESHOLD: fitness_threshold
        - CHECKPOINT_INTERVAL: checkpoint_interval
        - MAX_WORKERS: max_workers
        - SEED: seed
        - LOG_LEVEL: log_level

        Returns:
            EvolutionEngineConfig instance
        """
        return cls(
            population_size=int(os.getenv("POPULATION_SIZE", "50")),
            mutation_rate=float(os.getenv("MUTATION_RATE", "0.05")),
            keep_n=int(os.getenv("KEEP_N", "10")),
            ranked=_parse_bool(os.getenv("RANKED", "false")),
            selection=os.getenv("SELECTION_METHOD", "roulette"),
            crossover=os.getenv("CROSSOVER_METHOD", "single_point"),
            n_points=int(os.getenv("CROSSOVER_POINTS", "2")),
            iteration_limit=int(os.getenv("ITERATION_LIMIT", "1000")),
            fitness_threshold=_optional_float(os.getenv("FITNESS_THRESHOLD")),
            checkpoint_interval=int(os.getenv("CHECKPOINT_INTERVAL", "10")),
            max_workers=_optional_int(os.getenv("MAX_WORKERS")),
            seed=_optional_int(os.getenv("SEED")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "population_size": self.population_size,
            "mutation_rate": self.mutation_rate,
            "keep_n": self.keep_n,
            "ranked": self.ranked,
            "selection": self.selection,
            "crossover": self.crossover,
            "n_points": self.n_points,
            "iteration_limit": self.iteration_limit,
            "fitness_threshold": self.fitness_threshold,
            "save_checkpoints": self.save_checkpoints,
            "checkpoint_interval": self.checkpoint_interval,
            "max_workers": self.max_workers,
            "seed": self.seed,
            "log_level": self.log_level,
            "log_generation_stats": self.log_generation_stats,
        }

    def to_yaml(self, save_path: Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            save_path: Path where to save the configuration
        """
        with open(save_path, 'w') as f:
            yaml.dump({"evolution": self.to_dict()}, f, default_flow_style=False)

        logger.info(f"Saved configuration to {save_path}")


@dataclass
class GenerationHistory:
    """
    Statistics for a single generation of evolution.

    Tracks key metrics to monitor evolution progress. Scores are ranks when
    the engine runs in ranked mode.
    """

    generation: int
    population_size: int
    distinct_individuals: int
    avg_fitness: Optional[float]
    best_fitness: Optional[float]
    worst_fitness: Optional[float]
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "generation": self.generation,
            "population_size": self.population_size,
            "distinct_individuals": self.distinct_individuals,
            "avg_fitness": self.avg_fitness,
            "best_fitness": self.best_fitness,
            "worst_fitness": self.worst_fitness,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationHistory":
        """Create instance from dictionary."""
        return cls(**data)
