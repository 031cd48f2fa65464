"""Candidate tours and their genetic operators."""

from __future__ import annotations

import random
from dataclasses import dataclass

from tspgenetic.field import Field

MUTATE_PROB = 0.01


def random_route(node_count: int, rng: random.Random) -> list[int]:
    """A random tour that starts at city 0."""
    if node_count <= 0:
        return []
    return [0] + rng.sample(range(1, node_count), node_count - 1)


@dataclass(eq=False)
class Individual:
    """A tour (chromosome) and its length (fitness, lower is better)."""

    field: Field
    chrom: list[int]
    fitness: float | None = None

    @classmethod
    def random(cls, field: Field, rng: random.Random) -> "Individual":
        """A new individual with a random tour, not yet evaluated."""
        return cls(field, random_route(field.node_count, rng))

    def evaluate(self) -> float:
        """Compute, store and return the tour length."""
        self.fitness = self.field.tour_length(self.chrom)
        return self.fitness

    def mutate(self, rng: random.Random, probability: float = MUTATE_PROB) -> None:
        """Swap each city after the first with another position at the given rate."""
        size = len(self.chrom)
        for i in range(1, size):
            if rng.random() < probability:
                while True:
                    r = rng.randrange(size)
                    if r != i:
                        break
                self.chrom[i], self.chrom[r] = self.chrom[r], self.chrom[i]