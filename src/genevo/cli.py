"""
genevo command-line runner.

Runs one of the bundled example problems through the evolution engine, with
optional YAML configuration, checkpointing and resume.

Usage:
    genevo --problem sum7
    genevo --problem phrase --config config/evolution.yaml --seed 42
    genevo --problem sum7 --checkpoint runs/sum7.pkl --interval 25 --resume
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .core.exceptions import GenevoError
from .optimization import EvolutionEngine, EvolutionEngineConfig
from .optimization.config import load_config_values
from .problems import PROBLEMS, get_problem
from .utils.random_source import NumpyRandomSource

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a genetic algorithm on a bundled example problem",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Evolve ten reals that sum to 7
  genevo --problem sum7

  # Evolve a phrase with a custom config and a fixed seed
  genevo --problem phrase --config config/evolution.yaml --seed 42

  # Checkpoint every 25 generations and resume from an earlier run
  genevo --problem sum7 --checkpoint runs/sum7.pkl --interval 25 --resume
        """
    )

    parser.add_argument(
        "--problem",
        type=str,
        required=True,
        choices=sorted(PROBLEMS),
        help="Bundled problem to solve"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to evolution engine config YAML (overrides the problem's defaults)"
    )

    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Maximum number of generations (default: config iteration_limit)"
    )

    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Stop once the best score reaches this value (default: the problem's threshold)"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible runs"
    )

    parser.add_argument(
        "--checkpoint",
        type=str,
        default=None,
        help="Checkpoint file written every --interval generations"
    )

    parser.add_argument(
        "--interval",
        type=int,
        default=None,
        help="Generations between checkpoints (default: config checkpoint_interval)"
    )

    parser.add_argument(
        "--resume",
        action="store_true",
        default=False,
        help="Resume from --checkpoint if the file exists"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for per-generation JSON logs (disabled by default)"
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace, settings: Dict[str, Any]) -> EvolutionEngineConfig:
    """
    Merge problem defaults, the YAML file and command-line overrides.

    Args:
        args: Parsed command-line arguments
        settings: Problem-recommended config values

    Returns:
        Validated EvolutionEngineConfig
    """
    values = dict(settings)

    if args.config:
        values.update(load_config_values(Path(args.config)))
        logger.info(f"Loaded evolution config from: {args.config}")

    if args.iterations is not None:
        values["iteration_limit"] = args.iterations
    if args.threshold is not None:
        values["fitness_threshold"] = args.threshold
    if args.seed is not None:
        values["seed"] = args.seed
    if args.interval is not None:
        values["checkpoint_interval"] = args.interval
    if args.checkpoint:
        values["save_checkpoints"] = True

    return EvolutionEngineConfig.from_dict(values)


def run(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Run one evolution and return a summary.

    Args:
        args: Parsed command-line arguments

    Returns:
        Summary dictionary with the best individual, its score and the generation
    """
    defaults = get_problem(args.problem)
    settings = dict(defaults.settings)
    settings.setdefault("fitness_threshold", defaults.threshold)
    config = build_config(args, settings)

    seed_rng = NumpyRandomSource(config.seed)
    problem = get_problem(args.problem, rng=seed_rng)

    output_dir = Path(args.output_dir) if args.output_dir else None
    run_id = f"{problem.name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

    engine = EvolutionEngine.from_config(
        config,
        generator=problem.generator,
        fitness_fn=problem.fitness_fn,
        gene_mutator=problem.gene_mutator,
        rng=seed_rng,
        output_dir=output_dir,
        run_id=run_id,
    )

    checkpoint_path = Path(args.checkpoint) if args.checkpoint else None

    if args.resume and checkpoint_path and checkpoint_path.exists():
        logger.info(f"Attempting to resume from checkpoint: {checkpoint_path}")
        state = engine.restore(checkpoint_path)
    else:
        state = engine.initialize()

    if config.save_checkpoints and checkpoint_path:
        state = engine.evolve_with_checkpoints(state, location=checkpoint_path)
    else:
        state = engine.evolve(state)

    individual, score = engine.report(state)

    return {
        "problem": problem.name,
        "generation": state.generation,
        "best_score": score,
        "best_individual": individual,
        "solved": problem.is_solved(score),
    }


def format_individual(individual) -> str:
    """Render an individual compactly for the terminal."""
    if all(isinstance(gene, str) and len(gene) == 1 for gene in individual):
        return "".join(individual)
    return "[" + ", ".join(f"{gene:.4f}" if isinstance(gene, float) else str(gene) for gene in individual) + "]"


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the ``genevo`` console script."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    args = parse_arguments(argv)

    try:
        summary = run(args)
    except GenevoError as e:
        logger.error(f"Evolution failed: {e}")
        return 1

    print("=" * 60)
    print(f"Problem:     {summary['problem']}")
    print(f"Generation:  {summary['generation']}")
    print(f"Best score:  {summary['best_score']}")
    print(f"Solved:      {summary['solved']}")
    print(f"Individual:  {format_individual(summary['best_individual'])}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
