import pytest

from utils.chromosome import Chromosome
from utils.population import Population


def make_population(fitnesses):
    return Population(Chromosome(genes=i, fitness=f) for i, f in enumerate(fitnesses))


@pytest.fixture
def population_factory():
    """Builds an unsorted population from a list of fitness values; genes hold the original position."""
    return make_population


@pytest.fixture
def unsorted_population():
    return make_population([3.0, 9.0, 5.0, 7.0])


@pytest.fixture
def sorted_population():
    population = make_population([9.0, 7.0, 5.0, 3.0])
    population.sort_chromosomes()
    return population


@pytest.fixture
def ten_population():
    population = make_population([float(f) for f in range(1, 11)])
    population.sort_chromosomes()
    return population
