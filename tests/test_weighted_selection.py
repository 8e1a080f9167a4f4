"""Tests for the sampler based selection operators: weighted roulette and rank."""

import logging

import numpy as np
import pytest

from genetic.errors import PreconditionViolation, SamplerBuildError
from genetic.selection.rank import RankSelection
from genetic.selection.weighted_roulette import WeightedRouletteSelection
from utils.status_info import StatusInfo


def frequencies(operator, population, draws):
    counts = {}
    for _ in range(draws // 2):
        for chromosome in operator.select(population):
            counts[chromosome.genes] = counts.get(chromosome.genes, 0) + 1
    return {genes: count / draws for genes, count in counts.items()}


class TestWeightedRouletteSelection:

    def test_returns_pair(self, unsorted_population):
        operator = WeightedRouletteSelection(rng=0)
        operator.init(StatusInfo(), unsorted_population)
        assert len(operator.select(unsorted_population)) == 2

    def test_proportional_to_fitness(self, population_factory):
        population = population_factory([1.0, 2.0, 3.0, 4.0])
        operator = WeightedRouletteSelection(rng=1)
        operator.init(StatusInfo(), population)
        observed = frequencies(operator, population, 100_000)
        for genes, expected in enumerate([0.1, 0.2, 0.3, 0.4]):
            assert observed[genes] == pytest.approx(expected, abs=0.01)

    def test_dominant_chromosome(self, population_factory):
        population = population_factory([100.0, 1.0, 1.0, 1.0])
        operator = WeightedRouletteSelection(rng=2)
        operator.init(StatusInfo(), population)
        observed = frequencies(operator, population, 50_000)
        assert observed[0] == pytest.approx(100 / 103, abs=0.01)

    def test_zero_fitness_never_selected(self, population_factory):
        population = population_factory([0.0, 5.0, 0.0])
        operator = WeightedRouletteSelection(rng=3)
        operator.init(StatusInfo(), population)
        assert set(frequencies(operator, population, 2_000)) == {1}

    def test_seeded_selection_repeats(self, population_factory):
        population = population_factory([4.0, 1.0, 3.0, 2.0, 6.0])
        runs = []
        for _ in range(2):
            operator = WeightedRouletteSelection(rng=1234)
            operator.init(StatusInfo(), population)
            runs.append([c.genes for _ in range(50) for c in operator.select(population)])
        assert runs[0] == runs[1]

    def test_tiny_fitness_never_picks_zero_fitness(self, population_factory):
        population = population_factory([1e-310, 0.0, 0.0])
        operator = WeightedRouletteSelection(rng=9)
        operator.init(StatusInfo(), population)
        assert set(frequencies(operator, population, 4_000)) == {0}

    def test_all_zero_fitness(self, population_factory):
        operator = WeightedRouletteSelection(rng=0)
        with pytest.raises(SamplerBuildError):
            operator.init(StatusInfo(), population_factory([0.0, 0.0, 0.0]))

    def test_negative_fitness(self, population_factory):
        operator = WeightedRouletteSelection(rng=0)
        with pytest.raises(SamplerBuildError):
            operator.init(StatusInfo(), population_factory([3.0, -1.0, 2.0]))

    def test_select_before_init(self, unsorted_population):
        with pytest.raises(PreconditionViolation):
            WeightedRouletteSelection(rng=0).select(unsorted_population)

    def test_population_grew_after_init(self, population_factory):
        population = population_factory([1.0, 2.0])
        operator = WeightedRouletteSelection(rng=0)
        operator.init(StatusInfo(), population)
        population.extend(population_factory([3.0]))
        with pytest.raises(PreconditionViolation):
            operator.select(population)

    def test_init_rebuilds_sampler(self, population_factory):
        operator = WeightedRouletteSelection(rng=0)
        operator.init(StatusInfo(), population_factory([1.0, 1.0]))
        first = operator.sampler
        operator.init(StatusInfo(generation=1), population_factory([1.0, 1.0, 1.0]))
        assert operator.sampler is not first
        assert len(operator.sampler) == 3


class TestRankSelection:

    def test_rank_weights(self):
        assert RankSelection.rank_weights(5) == [5, 4, 3, 2, 1]
        assert sum(RankSelection.rank_weights(5)) == 15

    def test_weights_after_init(self, population_factory):
        population = population_factory([2.0, 8.0, 4.0, 16.0, 1.0])
        operator = RankSelection(rng=0)
        operator.init(StatusInfo(), population)
        assert operator.weights == [5, 4, 3, 2, 1]
        assert population.fitnesses() == [16.0, 8.0, 4.0, 2.0, 1.0]

    def test_proportional_to_rank(self, population_factory):
        # fitness spread is huge, rank weights flatten it
        population = population_factory([1.0, 10.0, 100.0, 1000.0, 10000.0])
        operator = RankSelection(rng=5)
        operator.init(StatusInfo(), population)
        observed = frequencies(operator, population, 150_000)
        expected = {4: 5 / 15, 3: 4 / 15, 2: 3 / 15, 1: 2 / 15, 0: 1 / 15}
        for genes, probability in expected.items():
            assert observed[genes] == pytest.approx(probability, abs=0.01)

    def test_zero_fitness_still_selectable(self, population_factory):
        population = population_factory([0.0, 0.0, 0.0])
        operator = RankSelection(rng=6)
        operator.init(StatusInfo(), population)
        assert set(frequencies(operator, population, 3_000)) == {0, 1, 2}

    def test_single_chromosome(self, population_factory):
        population = population_factory([0.5])
        operator = RankSelection(rng=7)
        operator.init(StatusInfo(), population)
        assert operator.select(population) == [population[0], population[0]]

    def test_sampler_tables_match_ranks(self, population_factory):
        operator = RankSelection(rng=8)
        operator.init(StatusInfo(), population_factory([1.0, 2.0, 3.0]))
        sampler = operator.sampler
        implied = np.zeros(3)
        for i, (p, a) in enumerate(zip(sampler.probabilities, sampler.aliases)):
            implied[i] += p / 3
            implied[a] += (1 - p) / 3
        assert np.allclose(implied, [3 / 6, 2 / 6, 1 / 6])

    def test_select_before_init(self, sorted_population):
        with pytest.raises(PreconditionViolation):
            RankSelection(rng=0).select(sorted_population)

    def test_logs_rebuild(self, sorted_population, caplog):
        caplog.set_level(logging.DEBUG, logger='genetic')
        RankSelection(rng=0).init(StatusInfo(generation=3), sorted_population)
        assert "generation 3" in caplog.text
