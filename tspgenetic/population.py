"""A population of tours evolved by a generational genetic algorithm."""

from __future__ import annotations

import random
from typing import Sequence

from tspgenetic.field import Field
from tspgenetic.individual import Individual

POP_SIZE = 100
ELITE = 1
TOURNAMENT_SIZE = 30


def pmx_crossover(
    parent1: Sequence[int], parent2: Sequence[int], point1: int, point2: int
) -> tuple[list[int], list[int]]:
    """Partially mapped crossover over the inclusive segment [point1, point2]."""

    def child(donor: Sequence[int], segment_source: Sequence[int]) -> list[int]:
        result = list(donor)
        used = set()
        mapping = {}
        for j in range(point1, point2 + 1):
            result[j] = segment_source[j]
            used.add(segment_source[j])
            mapping.setdefault(segment_source[j], donor[j])
        for i, key in enumerate(donor):
            if point1 <= i <= point2:
                continue
            while key in used and key in mapping:
                key = mapping[key]
            result[i] = key
            used.add(key)
        return result

    return child(parent1, parent2), child(parent2, parent1)


class Population:
    """Individuals kept sorted from shortest to longest tour."""

    def __init__(
        self, field: Field, rng: random.Random | None = None, size: int = POP_SIZE
    ) -> None:
        if field.node_count < 3:
            raise ValueError("at least three cities are needed")
        if size <= ELITE:
            raise ValueError(f"population size must exceed {ELITE}")
        self.field = field
        self.rng = rng if rng is not None else random.Random()
        self.size = size
        self.individuals = [Individual.random(field, self.rng) for _ in range(size)]
        self.evaluate()

    def evaluate(self) -> None:
        """Evaluate every individual and sort by fitness."""
        for individual in self.individuals:
            individual.evaluate()
        self.individuals.sort(key=lambda individual: individual.fitness)

    def alternate(self) -> None:
        """Replace the population with the next generation."""
        offspring = [
            Individual(self.field, list(individual.chrom))
            for individual in self.individuals[:ELITE]
        ]
        while len(offspring) < self.size - 1:
            p1 = self.ranking_select()
            p2 = self.ranking_select()
            for child in self.crossover(p1, p2):
                child.mutate(self.rng)
                offspring.append(child)
        if len(offspring) < self.size:
            offspring.append(Individual.random(self.field, self.rng))
        self.individuals = offspring
        self.evaluate()

    def ranking_select(self) -> int:
        """Pick a parent index, better ranks being more likely."""
        denom = self.size * (self.size + 1) // 2
        r = self.rng.randint(0, denom)
        num = self.size
        while num > 0:
            if r <= num:
                break
            r -= num
            num -= 1
        return self.size - num

    def roulette_select(self) -> int:
        """Pick a parent index with probability scaled by relative fitness."""
        best = self.individuals[0].fitness
        worst = self.individuals[-1].fitness
        if worst == best:
            weights = [1.0] * self.size
        else:
            weights = [
                (worst - individual.fitness) / (worst - best)
                for individual in self.individuals
            ]
        denom = sum(weights)
        r = self.rng.random()
        for rank, weight in enumerate(weights[:-1]):
            prob = weight / denom
            if r <= prob:
                return rank
            r -= prob
        return self.size - 1

    def tournament_select(self, tournament_size: int = TOURNAMENT_SIZE) -> int:
        """Pick the fittest of ``tournament_size`` distinct random individuals."""
        if not 1 <= tournament_size <= self.size:
            raise ValueError("tournament size must be between 1 and the population size")
        entrants = self.rng.sample(range(self.size), tournament_size)
        return min(entrants, key=lambda index: self.individuals[index].fitness)

    def crossover(self, p1: int, p2: int) -> tuple[Individual, Individual]:
        """Two children of individuals ``p1`` and ``p2`` by PMX at random points."""
        span = self.field.node_count - 1
        point1 = self.rng.randrange(span)
        while True:
            point2 = self.rng.randrange(span)
            if point2 != point1:
                break
        point1, point2 = sorted((point1, point2))
        chrom1, chrom2 = pmx_crossover(
            self.individuals[p1].chrom, self.individuals[p2].chrom, point1, point2
        )
        return Individual(self.field, chrom1), Individual(self.field, chrom2)

    @property
    def best(self) -> Individual:
        """The individual with the shortest tour."""
        return self.individuals[0]

    def format_route(self) -> str:
        """The best tour (cities numbered from 1) and its total distance."""
        best = self.best
        route = " ".join(str(city + 1) for city in best.chrom)
        return f"{route}\nTotal Distance : {best.fitness:f}"