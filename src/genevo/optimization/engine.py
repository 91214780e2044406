"""
Evolution engine for genevo.

This module composes selection, crossover, mutation and fitness evaluation
into a generational transition, drives that transition until a stop predicate
holds or an iteration budget is spent, and periodically checkpoints the
resulting state.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from ..core.exceptions import ConfigurationError
from ..core.fitness import FitnessFn, best_fit, evaluate, rank, sorted_population
from ..core.population import EngineState, Gene, Individual, Score, setup_population
from ..selection import get_selector
from ..utils.random_source import NumpyRandomSource, RandomSource
from ..variation import GeneMutator, get_crossover, mutate_with_rate
from .checkpoint import CheckpointRecord
from .config import EvolutionEngineConfig, GenerationHistory

logger = logging.getLogger(__name__)

Generator = Callable[[], Iterable[Gene]]
Selector = Callable[[EngineState], Sequence[Tuple[Individual, Individual]]]
Crossover = Callable[[Individual, Individual], Tuple[Individual, Individual]]
Mutator = Callable[[Individual], Individual]
Predicate = Callable[[Score], bool]


class EvolutionEngine:
    """
    Generational genetic algorithm over caller-supplied operators.

    The engine holds only configuration, operators and run history; the
    evolving population lives in immutable ``EngineState`` values that every
    method takes and returns. Given the same random draws, ``step`` always
    produces the same next state.

    Example usage:
        ```python
        engine = EvolutionEngine(
            generator=make_individual,
            selector=RouletteWheelSelector(rng),
            crossover=SinglePointCrossover(rng),
            mutation=GeneMutator(mutate_gene, rng),
            fitness_fn=score,
            config=EvolutionEngineConfig(population_size=50, keep_n=10),
            rng=rng,
        )

        state = engine.initialize()
        state = engine.evolve(state, iteration_limit=1000, predicate=lambda s: s > 0.999)
        ```
    """

    def __init__(
        self,
        generator: Generator,
        selector: Selector,
        crossover: Crossover,
        mutation: Mutator,
        fitness_fn: FitnessFn,
        config: EvolutionEngineConfig,
        rng: Optional[RandomSource] = None,
        output_dir: Optional[Path] = None,
        run_id: Optional[str] = None,
    ):
        """
        Initialize the evolution engine.

        Args:
            generator: Zero-argument factory producing one individual
            selector: Selection strategy producing mating pairs from a state
            crossover: Operator producing two children from two parents
            mutation: Individual-level mutator applied with ``config.mutation_rate``
            fitness_fn: Function the engine maximizes
            config: Engine configuration
            rng: Randomness source for mutation decisions (seeded from config if None)
            output_dir: Output directory for detailed logging (optional)
            run_id: Run ID for logging (optional)
        """
        self.generator = generator
        self.selector = selector
        self.crossover = crossover
        self.mutation = mutation
        self.fitness_fn = fitness_fn
        self.config = config
        self.rng = rng if rng is not None else NumpyRandomSource(config.seed)

        self.history: List[GenerationHistory] = []

        # Evolution logger (optional, for detailed logging)
        self.evo_logger = None
        if output_dir and run_id:
            from ..utils.evolution_logger import EvolutionLogger
            self.evo_logger = EvolutionLogger(output_dir, run_id)

        # Configure logging
        logging.getLogger().setLevel(getattr(logging, config.log_level))

        logger.info(
            f"Initialized EvolutionEngine with population size {config.population_size}, "
            f"keep_n={config.keep_n}, mutation_rate={config.mutation_rate}, ranked={config.ranked}"
        )

    @classmethod
    def from_config(
        cls,
        config: EvolutionEngineConfig,
        generator: Generator,
        fitness_fn: FitnessFn,
        gene_mutator: Callable[[Gene], Gene],
        rng: Optional[RandomSource] = None,
        output_dir: Optional[Path] = None,
        run_id: Optional[str] = None,
    ) -> "EvolutionEngine":
        """
        Build an engine whose operators are chosen by name in ``config``.

        All built-in operators share one randomness source.

        Args:
            config: Engine configuration (selection, crossover and n_points are used)
            generator: Zero-argument individual factory
            fitness_fn: Function the engine maximizes
            gene_mutator: Gene-level mutation function
            rng: Shared randomness source (seeded from config if None)
            output_dir: Output directory for detailed logging (optional)
            run_id: Run ID for logging (optional)

        Returns:
            Configured EvolutionEngine
        """
        rng = rng if rng is not None else NumpyRandomSource(config.seed)

        return cls(
            generator=generator,
            selector=get_selector(config.selection, rng),
            crossover=get_crossover(config.crossover, rng, n_points=config.n_points),
            mutation=GeneMutator(gene_mutator, rng),
            fitness_fn=fitness_fn,
            config=config,
            rng=rng,
            output_dir=output_dir,
            run_id=run_id,
        )

    def initialize(self) -> EngineState:
        """
        Create the initial state: generate the population and evaluate it once.

        The initial fitness map holds raw scores even in ranked mode; ranking
        applies from the first transition on.

        Returns:
            EngineState at generation 0
        """
        logger.info(f"Generating initial population of {self.config.population_size} individuals...")

        population = setup_population(self.generator, self.config.population_size)
        fitness = evaluate(self.fitness_fn, population, max_workers=self.config.max_workers)
        state = EngineState(population=population, fitness_map=fitness, generation=0)

        if self.evo_logger:
            self.evo_logger.log_initial_population(state)

        return state

    def step(self, state: EngineState) -> EngineState:
        """
        Compute one generation.

        Steps:
        1. Keep the ``keep_n`` best individuals as elites
        2. Generate offspring by selection and crossover, then mutate each
           offspring with probability ``mutation_rate``
        3. Take the first ``population_size`` individuals of elites + offspring
        4. Evaluate fitness (and rank it in ranked mode)

        The selection strategy must yield enough offspring to refill the
        population; otherwise the population shrinks.

        Args:
            state: Current state

        Returns:
            State of the next generation
        """
        elite = [individual for individual, _ in sorted_population(state)[:self.config.keep_n]]

        offspring = [
            child
            for i1, i2 in self.selector(state)
            for child in self.crossover(i1, i2)
        ]
        offspring = [
            mutate_with_rate(self.config.mutation_rate, self.mutation, child, self.rng)
            for child in offspring
        ]

        new_population = tuple(elite + offspring)[:self.config.population_size]

        if len(new_population) < self.config.population_size:
            logger.warning(
                f"Population shrank to {len(new_population)} (expected {self.config.population_size}): "
                f"{len(elite)} elites + {len(offspring)} offspring"
            )

        new_fitness = evaluate(self.fitness_fn, new_population, max_workers=self.config.max_workers)
        if self.config.ranked:
            new_fitness = rank(new_fitness)

        logger.debug(
            f"Generation {state.generation + 1}: {len(elite)} elites + {len(offspring)} offspring "
            f"-> {len(new_population)} individuals"
        )

        return EngineState(
            population=new_population,
            fitness_map=new_fitness,
            generation=state.generation + 1,
        )

    def evolve(
        self,
        state: EngineState,
        iteration_limit: Optional[int] = None,
        predicate: Optional[Predicate] = None,
    ) -> EngineState:
        """
        Evolve until the predicate holds or the iteration limit is reached.

        After every step the predicate receives the best score of the new
        state, which is a rank (not the raw fitness) in ranked mode.

        Args:
            state: Starting state
            iteration_limit: Maximum number of steps (defaults to config.iteration_limit)
            predicate: Stop condition on the best score (defaults to the
                config.fitness_threshold check)

        Returns:
            First state satisfying the predicate, or the state after the last
            step (the starting state if iteration_limit <= 0)
        """
        if iteration_limit is None:
            iteration_limit = self.config.iteration_limit
        if predicate is None:
            predicate = self.default_predicate()

        for _ in range(max(iteration_limit, 0)):
            state = self.step(state)
            self._log_generation_stats(state)

            if self.evo_logger:
                self.evo_logger.log_new_generation(state)

            individual, score = best_fit(state)
            if predicate(score):
                logger.info(f"Stop condition met at generation {state.generation} (best score {score})")
                if self.evo_logger:
                    self.evo_logger.log_early_stop(individual, score, state.generation)
                break

        return state

    def evolve_with_checkpoints(
        self,
        state: EngineState,
        iteration_limit: Optional[int] = None,
        predicate: Optional[Predicate] = None,
        location: Union[str, Path, None] = None,
        interval: Optional[int] = None,
    ) -> EngineState:
        """
        Evolve in chunks of ``interval`` generations, checkpointing after each.

        Each chunk runs to completion before its checkpoint is written, and a
        write failure ends the run. The remaining budget is checked before it
        is decremented, so the run stops only once it has gone negative or
        the predicate holds; the total number of generations can therefore
        exceed ``iteration_limit`` by up to two chunks.

        Args:
            state: Starting state
            iteration_limit: Generation budget (defaults to config.iteration_limit)
            predicate: Stop condition on the best score
            location: Checkpoint path, overwritten on every save
            interval: Generations per chunk (defaults to config.checkpoint_interval)

        Returns:
            Final state

        Raises:
            ConfigurationError: If no location is given or interval < 1
            PersistenceError: If a checkpoint cannot be written
        """
        if location is None:
            raise ConfigurationError("A checkpoint location is required")
        if iteration_limit is None:
            iteration_limit = self.config.iteration_limit
        if predicate is None:
            predicate = self.default_predicate()
        if interval is None:
            interval = self.config.checkpoint_interval
        if interval < 1:
            raise ConfigurationError(f"Checkpoint interval must be at least 1, got {interval}")

        remaining = iteration_limit

        while True:
            state = self.evolve(state, interval, predicate)
            CheckpointRecord.from_state(state).save(location)

            if predicate(best_fit(state)[1]) or remaining < 0:
                return state

            remaining -= interval

    def restore(self, location: Union[str, Path]) -> EngineState:
        """
        Restore a state saved by ``evolve_with_checkpoints``.

        Only data is restored; this engine's operators and config are used
        from here on.

        Args:
            location: Checkpoint path

        Returns:
            Restored state

        Raises:
            PersistenceError: If the checkpoint is missing or malformed
        """
        state = CheckpointRecord.load(location).to_state()

        if state.size != self.config.population_size:
            logger.warning(
                f"Restored population has {state.size} individuals, "
                f"config expects {self.config.population_size}"
            )

        logger.info(f"Resumed from generation {state.generation}, population size {state.size}")
        return state

    def default_predicate(self) -> Predicate:
        """
        Build the stop condition from ``config.fitness_threshold``.

        Returns:
            ``score >= threshold``, or a predicate that never holds when no
            threshold is configured
        """
        threshold = self.config.fitness_threshold
        if threshold is None:
            return lambda score: False
        return lambda score: score >= threshold

    def report(self, state: EngineState) -> Tuple[Individual, Score]:
        """
        Log and return the best individual of a state.

        Args:
            state: Final state of a run

        Returns:
            (individual, score) of the best entry
        """
        individual, score = best_fit(state)
        logger.info(f"Evolution complete at generation {state.generation}. Best score: {score}")

        if self.evo_logger:
            self.evo_logger.log_final_best(individual, score, state.generation)

        return individual, score

    def _log_generation_stats(self, state: EngineState) -> None:
        """
        Record and log statistics for a generation.

        In ranked mode the recorded scores are ranks and are logged as such.

        Args:
            state: State of the generation
        """
        if not self.config.log_generation_stats:
            return

        stats = state.statistics()

        history = GenerationHistory(
            generation=state.generation,
            population_size=stats["size"],
            distinct_individuals=stats["distinct"],
            avg_fitness=stats["avg_fitness"],
            best_fitness=stats["best_fitness"],
            worst_fitness=stats["worst_fitness"],
        )
        self.history.append(history)

        if stats["avg_fitness"] is None:
            logger.info(f"Gen {state.generation}: empty population")
            return

        label = "rank" if self.config.ranked else "fitness"
        logger.info(
            f"Gen {state.generation}: "
            f"{label}={stats['avg_fitness']:.4f}/{stats['best_fitness']:.4f}, "
            f"distinct={stats['distinct']}, "
            f"pop_size={stats['size']}"
        )
