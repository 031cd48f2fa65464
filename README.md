# tspgenetic

Solves travelling salesman instances with a genetic algorithm. Cities are read
from TSPLIB-style files (a `DIMENSION` line followed by a `NODE_COORD_SECTION`
of `number x y` entries), distances are Euclidean, and tours are evolved with
ranking selection, partially mapped crossover (PMX), swap mutation and
elitism. City 1 is always the start of a tour.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running from the command line

```
tspgenetic [NUMBER] [--data-dir DIR] [--generations N] [--seed SEED]
```

`NUMBER` picks one of the data set names `berlin52`, `eil51`, `eil76`,
`kroA100` and `test` (1 to 5). If it is left out, the command lists the names
and reads the number from standard input. It then loads `<name>.tsp` from the
data directory (`./TSPdata` unless `--data-dir` is given), evolves a
population of 100 tours for `--generations` generations (1000 by default),
and prints the best tour as 1-based city numbers followed by its length:

```
1 4 3 2 ...
Total Distance : 123.456789
```

`--seed` makes a run repeatable. An unreadable file, a malformed file or a
number out of range is reported on standard error and the command exits
with status 1.

The `.tsp` files themselves are not included; put them in the data directory
before running the command.

## Using it as a library

```python
import random

from tspgenetic.field import Field
from tspgenetic.population import Population

field = Field.from_coords([(0.0, 0.0), (3.0, 0.0), (3.0, 4.0), (0.0, 4.0)])
print(field.node_count)                # 4
print(field.tour_length([0, 1, 2, 3])) # 14.0

population = Population(field, random.Random(1), 100)
for _ in range(200):
    population.alternate()
print(population.best.chrom, population.best.fitness)
print(population.format_route())
```

- `tspgenetic.field`: `Field.from_coords`, `Field.from_text` and
  `Field.from_file` build a field; the latter two raise `FieldFormatError`
  (a `ValueError`) when the `DIMENSION` line, the `NODE_COORD_SECTION` marker
  or a city's coordinates are missing or malformed, or when cities are not
  numbered 1, 2, 3, … in order. `Field.distances` holds the distance matrix.
- `tspgenetic.individual`: `random_route(node_count, rng)` gives a random
  tour starting at city 0; `Individual` holds a tour (`chrom`) and its length
  (`fitness`), with `Individual.random`, `evaluate()` and
  `mutate(rng, probability)`.
- `tspgenetic.population`: `Population(field, rng, size)` needs at least three
  cities and a size above one. Besides `alternate()`, it offers
  `ranking_select()`, `roulette_select()` and `tournament_select(size)` for
  choosing parent indices, `crossover(p1, p2)`, `best` and `format_route()`.
  `pmx_crossover(parent1, parent2, point1, point2)` returns the two children
  of two routes for an inclusive cut segment.
- `tspgenetic.cli`: `dataset_path(data_dir, number)`,
  `run(field, generations, rng)` and `main(argv)`.