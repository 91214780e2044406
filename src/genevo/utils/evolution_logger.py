"""
Evolution logger for tracking a genevo run on disk.

This module records snapshots of every stage of the evolutionary loop:
- Initial population
- Each new generation
- Early stopping when the stop predicate holds
- Final best individual

Logs are written as one JSON file per event under ``output_dir/run_<id>``.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from ..core.population import EngineState, Individual, Score

logger = logging.getLogger(__name__)


class EvolutionLogger:
    """
    Detailed on-disk logger for an evolution run.

    Failures to write a log file are reported and do not interrupt the run.
    """

    def __init__(self, output_dir: Path, run_id: str):
        """
        Initialize the evolution logger.

        Args:
            output_dir: Base output directory
            run_id: Run identifier (used for the subdirectory name)
        """
        self.output_dir = Path(output_dir) / f"run_{run_id}"
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.run_id = run_id

        logger.info(f"EvolutionLogger initialized for run {run_id} at {self.output_dir}")

    def log_initial_population(self, state: EngineState):
        """
        Log the initial population.

        Args:
            state: Freshly initialized engine state
        """
        data = {
            "run_id": self.run_id,
            "generation": state.generation,
            "phase": "initial_population",
            "timestamp": datetime.now().isoformat(),
            "individuals": self._state_to_list(state),
            "statistics": state.statistics(),
        }

        self._save_json(f"generation_{state.generation}_initial.json", data)

    def log_new_generation(self, state: EngineState):
        """
        Log a generation produced by a transition.

        Args:
            state: Engine state after the transition
        """
        data = {
            "run_id": self.run_id,
            "generation": state.generation,
            "phase": "new_generation",
            "timestamp": datetime.now().isoformat(),
            "individuals": self._state_to_list(state),
            "population_size": state.size,
            "statistics": state.statistics(),
        }

        self._save_json(f"generation_{state.generation}_population.json", data)
        logger.debug(f"Logged new generation {state.generation}: {state.size} individuals")

    def log_early_stop(self, individual: Individual, score: Score, generation: int):
        """
        Log the stop predicate being satisfied.

        Args:
            individual: Best individual when the predicate held
            score: Its score (a rank in ranked mode)
            generation: Generation number when the run stopped
        """
        data = {
            "run_id": self.run_id,
            "generation": generation,
            "phase": "early_stop",
            "timestamp": datetime.now().isoformat(),
            "best_individual": list(individual),
            "score": score,
        }

        self._save_json(f"generation_{generation}_early_stop.json", data)
        logger.info(f"Logged early stop at generation {generation} with score {score}")

    def log_final_best(self, individual: Individual, score: Score, generation: int):
        """
        Log the final best individual.

        Args:
            individual: Best individual found
            score: Its score (a rank in ranked mode)
            generation: Final generation number
        """
        data = {
            "run_id": self.run_id,
            "final_generation": generation,
            "phase": "final_best",
            "timestamp": datetime.now().isoformat(),
            "best_individual": list(individual),
            "score": score,
        }

        self._save_json("final_best.json", data)
        logger.info(f"Logged final best individual with score {score}")

    def _state_to_list(self, state: EngineState) -> List[Dict[str, Any]]:
        return [
            {
                "index": i,
                "genes": list(individual),
                "fitness": state.fitness_map.get(individual),
            }
            for i, individual in enumerate(state.population)
        ]

    def _save_json(self, filename: str, data: Dict):
        """
        Save data to a JSON file.

        Args:
            filename: Name of the file
            data: Data to save
        """
        filepath = self.output_dir / filename

        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False, default=str)
        except OSError as e:
            logger.error(f"Failed to save {filename}: {e}")
