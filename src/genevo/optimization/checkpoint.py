"""
Checkpoint persistence for the genevo evolution engine.

A checkpoint holds only the data part of an engine state: the population,
the fitness map and the generation counter. Operators and configuration are
never written; a restored state is always paired with live operators supplied
by the caller.
"""

import logging
import numbers
import os
import pickle
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from ..core.exceptions import PersistenceError
from ..core.population import EngineState, FitnessMap, Population

logger = logging.getLogger(__name__)

RECORD_FIELDS = frozenset({"population", "fitness", "generation"})

PathLike = Union[str, Path]


@dataclass(frozen=True)
class CheckpointRecord:
    """
    Data-only snapshot of an engine state.

    Attributes:
        population: Ordered individuals
        fitness: Individual -> score or rank
        generation: Generation counter at the time of the snapshot
    """

    population: Population
    fitness: FitnessMap
    generation: int

    @classmethod
    def from_state(cls, state: EngineState) -> "CheckpointRecord":
        """Build a record from an engine state."""
        return cls(
            population=tuple(state.population),
            fitness=dict(state.fitness_map),
            generation=state.generation,
        )

    def to_state(self) -> EngineState:
        """Convert the record back into an engine state."""
        return EngineState(
            population=tuple(self.population),
            fitness_map=dict(self.fitness),
            generation=self.generation,
        )

    def to_dict(self) -> dict:
        """Convert to the persisted layout."""
        return {
            "population": tuple(self.population),
            "fitness": dict(self.fitness),
            "generation": self.generation,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "CheckpointRecord":
        """
        Create a record from the persisted layout.

        Args:
            data: Object read back from storage

        Returns:
            CheckpointRecord instance

        Raises:
            PersistenceError: If the structure does not match exactly
        """
        if not isinstance(data, dict) or set(data.keys()) != RECORD_FIELDS:
            found = sorted(data.keys()) if isinstance(data, dict) else type(data).__name__
            raise PersistenceError(
                f"Checkpoint must have exactly the fields {sorted(RECORD_FIELDS)}, found {found}"
            )

        population = data["population"]
        fitness = data["fitness"]
        generation = data["generation"]

        if not isinstance(population, (tuple, list)) or not all(isinstance(i, tuple) for i in population):
            raise PersistenceError("Checkpoint population must be a sequence of individuals")
        if not isinstance(fitness, dict):
            raise PersistenceError("Checkpoint fitness must be a mapping")

        try:
            known = set(population)
        except TypeError as e:
            raise PersistenceError(f"Checkpoint individuals must be hashable: {e}") from e

        for individual, score in fitness.items():
            if individual not in known:
                raise PersistenceError(f"Checkpoint fitness entry {individual!r} is not in the population")
            if isinstance(score, bool) or not isinstance(score, numbers.Real):
                raise PersistenceError(f"Checkpoint score for {individual!r} must be a real number, got {score!r}")

        if isinstance(generation, bool) or not isinstance(generation, int) or generation < 0:
            raise PersistenceError(f"Checkpoint generation must be a non-negative integer, got {generation!r}")

        return cls(population=tuple(population), fitness=fitness, generation=generation)

    def save(self, location: PathLike) -> None:
        """
        Save the record, overwriting any previous content at ``location``.

        The record is written to a temporary file next to ``location`` and
        then moved into place, so a failed save leaves the previous
        checkpoint intact.

        Args:
            location: Path where to save the checkpoint

        Raises:
            PersistenceError: If the location cannot be written
        """
        checkpoint_path = Path(location)
        temp_file = None

        try:
            checkpoint_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                'wb',
                dir=checkpoint_path.parent,
                prefix=f".{checkpoint_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                temp_file = Path(f.name)
                pickle.dump(self.to_dict(), f)
            os.replace(temp_file, checkpoint_path)
            temp_file = None
        except (OSError, pickle.PicklingError, TypeError, AttributeError) as e:
            raise PersistenceError(f"Failed to write checkpoint to {checkpoint_path}: {e}") from e
        finally:
            if temp_file is not None:
                temp_file.unlink(missing_ok=True)

        logger.info(f"Saved checkpoint at generation {self.generation} to {checkpoint_path}")

    @classmethod
    def load(cls, location: PathLike) -> "CheckpointRecord":
        """
        Load a record from disk.

        Args:
            location: Path to checkpoint file

        Returns:
            CheckpointRecord instance

        Raises:
            PersistenceError: If the file is missing, unreadable or malformed
        """
        checkpoint_path = Path(location)

        try:
            with open(checkpoint_path, 'rb') as f:
                data = pickle.load(f)
        except OSError as e:
            raise PersistenceError(f"Cannot read checkpoint {checkpoint_path}: {e}") from e
        except Exception as e:
            # Corrupt pickles surface as arbitrary builtin errors (TypeError, OverflowError, MemoryError, ...)
            raise PersistenceError(f"Checkpoint {checkpoint_path} is not a valid record: {e}") from e

        record = cls.from_dict(data)

        logger.info(f"Loaded checkpoint from generation {record.generation} at {checkpoint_path}")
        return record
