"""Travelling-salesman problem instances: loading and distance lookup."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

_DIMENSION_KEY = "DIMENSION"
_SECTION_KEY = "NODE_COORD_SECTION"
_INTEGER = re.compile(r"\s*([+-]?\d+)")


class FieldFormatError(ValueError):
    """Raised when a problem description cannot be parsed."""


@dataclass(frozen=True)
class Field:
    """A set of cities and the Euclidean distances between them."""

    distances: tuple[tuple[float, ...], ...]

    @classmethod
    def from_coords(cls, coords: Iterable[Sequence[float]]) -> "Field":
        """Build a field from (x, y) coordinates."""
        points = [(float(x), float(y)) for x, y in coords]
        return cls(
            tuple(
                tuple(math.hypot(ax - bx, ay - by) for bx, by in points)
                for ax, ay in points
            )
        )

    @classmethod
    def from_text(cls, text: str) -> "Field":
        """Parse a TSPLIB-style description with EUC_2D node coordinates."""
        lines = text.splitlines(keepends=True)
        for index, line in enumerate(lines):
            position = line.find(_DIMENSION_KEY)
            if position >= 0:
                break
        else:
            raise FieldFormatError("no DIMENSION line present")

        colon = line.find(":", position + len(_DIMENSION_KEY))
        if colon < 0:
            raise FieldFormatError("DIMENSION entry is malformed")
        match = _INTEGER.match(line, colon + 1)
        if match is None:
            raise FieldFormatError("DIMENSION entry is malformed")
        node_count = int(match.group(1))
        if node_count < 0:
            raise FieldFormatError("DIMENSION must not be negative")

        tokens = "".join(lines[index + 1:]).split()
        try:
            start = tokens.index(_SECTION_KEY) + 1
        except ValueError:
            raise FieldFormatError("no NODE_COORD_SECTION line present") from None

        coords = []
        for number in range(1, node_count + 1):
            chunk = tokens[start + 3 * (number - 1): start + 3 * number]
            try:
                if len(chunk) < 3:
                    raise ValueError("truncated")
                city = int(chunk[0])
                x, y = float(chunk[1]), float(chunk[2])
            except ValueError:
                raise FieldFormatError(
                    f"coordinate data of city {number} is malformed"
                ) from None
            if city != number:
                raise FieldFormatError(
                    f"coordinate data of city {number} is malformed"
                )
            coords.append((x, y))
        return cls.from_coords(coords)

    @classmethod
    def from_file(cls, path: str | Path) -> "Field":
        """Read and parse a problem file."""
        return cls.from_text(Path(path).read_text())

    @property
    def node_count(self) -> int:
        """Number of cities."""
        return len(self.distances)

    def tour_length(self, route: Sequence[int]) -> float:
        """Length of the closed tour visiting ``route`` in order."""
        if not route:
            return 0.0
        closing = self.distances[route[-1]][route[0]]
        return closing + sum(
            self.distances[a][b] for a, b in zip(route, route[1:])
        )