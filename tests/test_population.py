import random

import pytest

from tspgenetic.field import Field
from tspgenetic.population import Population, pmx_crossover


class _FixedRandom(random.Random):
    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def randint(self, a, b):
        return self.value


@pytest.fixture
def field():
    rng = random.Random(11)
    return Field.from_coords(
        [(rng.uniform(0, 100), rng.uniform(0, 100)) for _ in range(12)]
    )


@pytest.fixture
def population(field):
    return Population(field, random.Random(42), size=20)


def _is_permutation(route, count):
    return sorted(route) == list(range(count))


def test_pmx_worked_example():
    child1, child2 = pmx_crossover([0, 1, 2, 3, 4], [0, 4, 3, 2, 1], 1, 2)
    assert child1 == [0, 4, 3, 2, 1]
    assert child2 == [0, 1, 2, 3, 4]


def test_pmx_identical_parents():
    parent = [0, 3, 1, 4, 2, 5]
    assert pmx_crossover(parent, parent, 1, 3) == (parent, parent)


@pytest.mark.parametrize("seed", range(10))
def test_pmx_children_are_permutations_with_swapped_segment(seed):
    rng = random.Random(seed)
    parent1 = rng.sample(range(9), 9)
    parent2 = rng.sample(range(9), 9)
    point1, point2 = sorted(rng.sample(range(8), 2))
    child1, child2 = pmx_crossover(parent1, parent2, point1, point2)
    assert _is_permutation(child1, 9)
    assert _is_permutation(child2, 9)
    assert child1[point1:point2 + 1] == parent2[point1:point2 + 1]
    assert child2[point1:point2 + 1] == parent1[point1:point2 + 1]
    segment = set(parent2[point1:point2 + 1])
    for i, value in enumerate(parent1):
        if not point1 <= i <= point2 and value not in segment:
            assert child1[i] == value


def test_population_sorted_and_valid(population, field):
    fitnesses = [individual.fitness for individual in population.individuals]
    assert len(fitnesses) == 20
    assert fitnesses == sorted(fitnesses)
    for individual in population.individuals:
        assert _is_permutation(individual.chrom, field.node_count)
        assert individual.fitness == field.tour_length(individual.chrom)


def test_too_few_cities_rejected():
    with pytest.raises(ValueError):
        Population(Field.from_coords([(0, 0), (1, 1)]), random.Random(1))


def test_alternate_preserves_size_and_never_worsens_best(population, field):
    previous = population.best.fitness
    for _ in range(15):
        population.alternate()
        assert len(population.individuals) == 20
        assert population.best.fitness <= previous
        previous = population.best.fitness
        assert _is_permutation(population.best.chrom, field.node_count)


def test_odd_population_size(field):
    population = Population(field, random.Random(3), size=7)
    population.alternate()
    assert len(population.individuals) == 7


def test_ranking_select_bounds(population):
    population.rng = _FixedRandom(0)
    assert population.ranking_select() == 0
    population.rng = _FixedRandom(20 * 21 // 2)
    assert population.ranking_select() == 19


def test_ranking_select_in_range(population):
    picks = {population.ranking_select() for _ in range(300)}
    assert picks <= set(range(20))


def test_roulette_select_in_range(population):
    picks = {population.roulette_select() for _ in range(300)}
    assert picks <= set(range(20))


def test_full_tournament_picks_best(population):
    assert population.tournament_select(20) == 0


def test_tournament_too_large_rejected(population):
    with pytest.raises(ValueError):
        population.tournament_select(21)


def test_crossover_children(population, field):
    child1, child2 = population.crossover(0, 1)
    assert _is_permutation(child1.chrom, field.node_count)
    assert _is_permutation(child2.chrom, field.node_count)
    assert child1.fitness is None


def test_format_route(population):
    lines = population.format_route().splitlines()
    assert lines[0].split() == [str(c + 1) for c in population.best.chrom]
    assert lines[1].startswith("Total Distance : ")
    assert float(lines[1].split(":")[1]) == pytest.approx(
        population.best.fitness, abs=1e-6
    )