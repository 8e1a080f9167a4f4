"""Runs a small OneMax genetic algorithm to compare selection operators."""

import argparse

import numpy as np

from config.config_loader import load_config
from config.selection_factory import create_selection_from_config
from genetic.selection.base_selection import BaseSelection
from genetic.selection.factory import elite_selection
from utils.chromosome import Chromosome
from utils.population import Population
from utils.status_info import StatusInfo
from utils.logger import set_logging_level


def onemax(genes: np.ndarray) -> float:
    # +1 keeps the total fitness positive even for an all-zero population
    return float(genes.sum()) + 1.0


def random_population(size: int, length: int, rng: np.random.Generator) -> Population:
    chromosomes = []
    for _ in range(size):
        genes = rng.integers(0, 2, size=length)
        chromosomes.append(Chromosome(genes=genes, fitness=onemax(genes)))
    return Population(chromosomes)


def breed(parent1: Chromosome, parent2: Chromosome, mutation_rate: float, rng: np.random.Generator) -> Chromosome:
    """Single point crossover followed by bit flip mutation."""
    cut = int(rng.integers(1, len(parent1.genes)))
    genes = np.concatenate([parent1.genes[:cut], parent2.genes[cut:]])
    flips = rng.random(len(genes)) < mutation_rate
    genes = np.where(flips, 1 - genes, genes)
    return Chromosome(genes=genes, fitness=onemax(genes))


def run(selection: BaseSelection, generations: int, population_size: int, length: int,
        num_elite: int, mutation_rate: float, rng: np.random.Generator, verbose: bool = True) -> Population:
    """Evolves a random population for a fixed number of generations and returns the last one."""
    elite = elite_selection(num_elite)
    population = random_population(population_size, length, rng)
    status = StatusInfo(best_fitness=population.best().fitness)

    for _ in range(generations):
        elite.init(status, population)
        next_generation = list(elite.select(population))

        selection.init(status, population)
        while len(next_generation) < population_size:
            # elite presets return a single chromosome, which then mates with itself
            parents = selection.select(population)
            next_generation.append(breed(parents[0], parents[-1], mutation_rate, rng))

        population = Population(next_generation)
        status = status.next_generation(
            evaluations=population_size - num_elite,
            best_fitness=population.best().fitness,
        )
        if verbose:
            print(f"Generation {status.generation:3d} | best: {population.best().fitness:5.1f} "
                  f"| mean: {population.mean_fitness():6.2f}")

    return population


def main():
    parser = argparse.ArgumentParser(description="Compare selection operators on OneMax")
    parser.add_argument("--config", type=str, default="config/configs/default.yaml",
                        help="Path to YAML config file")
    parser.add_argument("--preset", type=str,
                        help="Selection preset (overrides config)")
    parser.add_argument("--seed", type=int,
                        help="Random seed (overrides config)")
    parser.add_argument("--generations", type=int, default=30)
    parser.add_argument("--population_size", type=int, default=40)
    parser.add_argument("--length", type=int, default=64)
    parser.add_argument("--num_elite", type=int, default=2)
    parser.add_argument("--mutation_rate", type=float, default=0.01)

    args = parser.parse_args()

    print(f"Loading configuration from: {args.config}")
    cli_overrides = {
        'selection.preset': args.preset,
        'random.seed': args.seed,
    }
    config = load_config(args.config, cli_overrides=cli_overrides)
    set_logging_level(config.get('logging.level', 'INFO'))

    rng = np.random.default_rng(config.seed)
    selection = create_selection_from_config(config.selection, rng=rng)
    print(f"Selection operator: {selection}")

    population = run(selection, args.generations, args.population_size, args.length,
                     args.num_elite, args.mutation_rate, rng)
    print(f"Best fitness after {args.generations} generations: {population.best().fitness}")


if __name__ == "__main__":
    main()
