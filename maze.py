from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Protocol

logger = logging.getLogger(__name__)


class Direction(Enum):
    N = (1, 0, -1)
    E = (2, 1, 0)
    S = (4, 0, 1)
    W = (8, -1, 0)

    @property
    def bit(self) -> int:
        return self.value[0]

    @property
    def delta(self) -> tuple[int, int]:
        return self.value[1], self.value[2]

    @property
    def opposite(self) -> "Direction":
        return {
            Direction.N: Direction.S,
            Direction.S: Direction.N,
            Direction.E: Direction.W,
            Direction.W: Direction.E,
        }[self]

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> "Direction | None":
        for d in cls:
            if d.delta == (dx, dy):
                return d
        return None


FULL_WALLS = Direction.N.bit | Direction.E.bit | Direction.S.bit | Direction.W.bit


@dataclass(frozen=True)
class Position:
    x: int
    y: int


@dataclass
class Cell:
    walls: int = FULL_WALLS
    visited: bool = False


@dataclass
class Player:
    x: int = 0
    y: int = 0

    @property
    def pos(self) -> Position:
        return Position(self.x, self.y)


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Grid:
    """Fixed-size W x H array of cells, row-major, origin top-left."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._rows: list[list[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]

    def reset(self) -> None:
        for row in self._rows:
            for cell in row:
                cell.walls = FULL_WALLS
                cell.visited = False

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise ValueError(f"Out of bounds cell: ({x}, {y})")
        return self._rows[y][x]

    def wall(self, x: int, y: int, direction: Direction) -> bool:
        return bool(self.cell(x, y).walls & direction.bit)

    def knock(self, x: int, y: int, nx: int, ny: int) -> None:
        """Remove the wall shared by two 4-adjacent cells, on both sides."""
        direction = Direction.from_delta(nx - x, ny - y)
        if direction is None:
            raise ValueError(f"Cells ({x}, {y}) and ({nx}, {ny}) are not adjacent")
        here = self.cell(x, y)
        there = self.cell(nx, ny)
        here.walls &= ~direction.bit
        there.walls &= ~direction.opposite.bit

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                yield x, y, cell

    def wall_masks(self) -> bytes:
        return bytes(cell.walls for _, _, cell in self.cells())

    def passage_count(self) -> int:
        # Count each passage once, from its west or north side.
        count = 0
        for x, y, cell in self.cells():
            if x + 1 < self.width and not cell.walls & Direction.E.bit:
                count += 1
            if y + 1 < self.height and not cell.walls & Direction.S.bit:
                count += 1
        return count


def generate_maze(grid: Grid, rng: RandomSource, start: tuple[int, int] = (0, 0)) -> int:
    """Carve a perfect maze into a freshly reset grid.

    Iterative recursive backtracker: walk from the top of an explicit stack
    to a random unvisited neighbour, knocking down the wall between them, and
    pop when the top cell has nowhere left to go. Returns the number of walls
    knocked down, which is always width * height - 1.
    """
    sx, sy = start
    if not grid.in_bounds(sx, sy):
        raise ValueError(f"Start cell out of bounds: {start}")

    capacity = grid.width * grid.height
    knocks = 0

    grid.cell(sx, sy).visited = True
    stack: list[tuple[int, int]] = [(sx, sy)]

    while stack:
        x, y = stack[-1]

        neighbors: list[tuple[int, int]] = []
        for d in Direction:
            dx, dy = d.delta
            nx, ny = x + dx, y + dy
            if grid.in_bounds(nx, ny) and not grid.cell(nx, ny).visited:
                neighbors.append((nx, ny))

        if not neighbors:
            stack.pop()
            continue

        nx, ny = neighbors[rng.randrange(len(neighbors))]
        grid.knock(x, y, nx, ny)
        grid.cell(nx, ny).visited = True
        stack.append((nx, ny))
        knocks += 1
        assert len(stack) <= capacity, "backtracker stack exceeded grid size"

    for _, _, cell in grid.cells():
        cell.visited = False

    logger.debug("Generated %dx%d maze from %s with %d passages", grid.width, grid.height, start, knocks)
    return knocks


def try_move(grid: Grid, player: Player, dx: int, dy: int) -> bool:
    """Step the player one cell if the target is in bounds and no wall blocks it."""
    direction = Direction.from_delta(dx, dy)
    if direction is None:
        raise ValueError(f"Not a unit cardinal step: ({dx}, {dy})")
    nx, ny = player.x + dx, player.y + dy
    if not grid.in_bounds(nx, ny):
        return False
    # Reciprocity means the source-side bit is enough.
    if grid.wall(player.x, player.y, direction):
        return False
    player.x, player.y = nx, ny
    return True
