"""Command-line entry point: solve a bundled data set with the genetic algorithm."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from tspgenetic.field import Field
from tspgenetic.population import Population

GEN_MAX = 1000
DATASETS = ("berlin52", "eil51", "eil76", "kroA100", "test")


def dataset_path(data_dir: str | Path, number: int) -> Path:
    """Path of the data set with the given 1-based menu number."""
    if not 1 <= number <= len(DATASETS):
        raise ValueError(f"data set number must be between 1 and {len(DATASETS)}")
    return Path(data_dir) / f"{DATASETS[number - 1]}.tsp"


def run(
    field: Field, generations: int = GEN_MAX, rng: random.Random | None = None
) -> Population:
    """Evolve a population over ``field`` for the given number of generations."""
    population = Population(field, rng)
    for _ in range(generations):
        population.alternate()
    return population


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tspgenetic", description="Solve a TSP instance with a genetic algorithm."
    )
    parser.add_argument("number", nargs="?", type=int, help="data set number")
    parser.add_argument("--data-dir", default="./TSPdata")
    parser.add_argument("--generations", type=int, default=GEN_MAX)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)

    number = args.number
    if number is None:
        print("Enter the number of the data set to run.")
        for index, name in enumerate(DATASETS, 1):
            print(f"{index} : {name}")
        try:
            number = int(input())
        except (EOFError, ValueError):
            print("invalid data set number", file=sys.stderr)
            return 1

    try:
        path = dataset_path(args.data_dir, number)
        field = Field.from_file(path)
        population = run(field, args.generations, random.Random(args.seed))
    except OSError as error:
        print(f"cannot open {error.filename}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    print(population.format_route())
    return 0


if __name__ == "__main__":
    sys.exit(main())