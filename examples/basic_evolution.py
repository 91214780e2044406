#!/usr/bin/env python3
"""
Basic example of using the genevo evolution engine.

This script demonstrates how to:
1. Wire custom operators into the engine by hand
2. Build an engine from a config with named operators
3. Run evolution with checkpoints and resume from the saved state
"""

import logging
from pathlib import Path

from genevo.core.fitness import best_fit
from genevo.optimization import EvolutionEngine, EvolutionEngineConfig
from genevo.problems import create_phrase_problem, create_target_sum_problem
from genevo.selection import RouletteWheelSelector
from genevo.utils.random_source import NumpyRandomSource
from genevo.variation import GeneMutator, UniformCrossover

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def evolve_phrase():
    """Example: Evolve a phrase with hand-wired operators."""

    logger.info("=" * 80)
    logger.info("EXAMPLE 1: Phrase Evolution")
    logger.info("=" * 80)

    rng = NumpyRandomSource(seed=42)
    problem = create_phrase_problem(rng=rng, phrase="hello genetic world")

    config = EvolutionEngineConfig(
        population_size=200,
        mutation_rate=0.5,
        keep_n=5,
        iteration_limit=300,
        fitness_threshold=problem.threshold,
        log_level="INFO"
    )

    engine = EvolutionEngine(
        generator=problem.generator,
        selector=RouletteWheelSelector(rng),
        crossover=UniformCrossover(rng),
        mutation=GeneMutator(problem.gene_mutator, rng),
        fitness_fn=problem.fitness_fn,
        config=config,
        rng=rng
    )

    state = engine.evolve(engine.initialize())
    individual, score = engine.report(state)

    logger.info(f"Best phrase: {''.join(individual)!r} (score {score:.4f})")

    # Print generation statistics
    logger.info("-" * 80)
    for history in engine.history[-5:]:
        logger.info(
            f"Gen {history.generation}: "
            f"fitness={history.avg_fitness:.3f}/{history.best_fitness:.3f}, "
            f"distinct={history.distinct_individuals}"
        )


def evolve_target_sum_with_checkpoints():
    """Example: Evolve ten reals summing to 7, checkpointing and resuming."""

    logger.info("\n\n" + "=" * 80)
    logger.info("EXAMPLE 2: Checkpointed Target Sum")
    logger.info("=" * 80)

    rng = NumpyRandomSource(seed=7)
    problem = create_target_sum_problem(rng=rng)
    config = EvolutionEngineConfig(**problem.settings, fitness_threshold=problem.threshold)

    engine = EvolutionEngine.from_config(
        config,
        generator=problem.generator,
        fitness_fn=problem.fitness_fn,
        gene_mutator=problem.gene_mutator,
        rng=rng
    )

    checkpoint_path = Path("outputs/checkpoints/sum7_example.pkl")

    state = engine.evolve_with_checkpoints(
        engine.initialize(),
        iteration_limit=50,
        location=checkpoint_path,
        interval=10
    )
    logger.info(f"First run stopped at generation {state.generation}, best {best_fit(state)[1]:.6f}")

    # A fresh engine only needs the checkpoint to continue
    resumed_engine = EvolutionEngine.from_config(
        config,
        generator=problem.generator,
        fitness_fn=problem.fitness_fn,
        gene_mutator=problem.gene_mutator,
        rng=NumpyRandomSource(seed=8)
    )
    state = resumed_engine.evolve(resumed_engine.restore(checkpoint_path), iteration_limit=100)
    individual, score = resumed_engine.report(state)

    logger.info(f"Genes: {[round(gene, 4) for gene in individual]}")
    logger.info(f"Sum: {sum(individual):.6f} (score {score:.6f})")


def main():
    """Main entry point."""

    try:
        evolve_phrase()
        evolve_target_sum_with_checkpoints()

    except Exception as e:
        logger.error(f"Error during evolution: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
