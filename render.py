from __future__ import annotations

from typing import Iterator, Protocol

import pygame

import config
from maze import Direction, Grid, Player

Color = tuple[int, int, int]


class Surface(Protocol):
    """Drawing target: three primitives plus a window title."""

    def clear(self, color: Color) -> None: ...

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None: ...

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None: ...

    def set_title(self, title: str) -> None: ...


def window_size(width: int, height: int) -> tuple[int, int]:
    return (
        2 * config.PAD + width * config.CELL,
        2 * config.PAD + height * config.CELL,
    )


def cell_rect(x: int, y: int, inset: int = 0) -> tuple[int, int, int, int]:
    return (
        config.PAD + x * config.CELL + inset,
        config.PAD + y * config.CELL + inset,
        config.CELL - 2 * inset,
        config.CELL - 2 * inset,
    )


def wall_lines(grid: Grid) -> Iterator[tuple[int, int, int, int]]:
    for x, y, cell in grid.cells():
        x0, y0, _, _ = cell_rect(x, y)
        x1, y1 = x0 + config.CELL, y0 + config.CELL
        if cell.walls & Direction.N.bit:
            yield x0, y0, x1, y0
        if cell.walls & Direction.E.bit:
            yield x1, y0, x1, y1
        if cell.walls & Direction.S.bit:
            yield x0, y1, x1, y1
        if cell.walls & Direction.W.bit:
            yield x0, y0, x0, y1


def draw_frame(surface: Surface, grid: Grid, player: Player) -> None:
    surface.clear(config.BG_COLOR)

    for x0, y0, x1, y1 in wall_lines(grid):
        surface.draw_line(x0, y0, x1, y1, config.WALL_COLOR)

    # Goal first so a player standing on it stays visible.
    surface.fill_rect(*cell_rect(grid.width - 1, grid.height - 1, config.GOAL_INSET), config.GOAL_COLOR)
    surface.fill_rect(*cell_rect(player.x, player.y, config.PLAYER_INSET), config.PLAYER_COLOR)


class PygameSurface:
    def __init__(self, screen: pygame.Surface):
        self.screen = screen

    def clear(self, color: Color) -> None:
        self.screen.fill(color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        pygame.draw.line(self.screen, color, (x0, y0), (x1, y1))

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        pygame.draw.rect(self.screen, color, pygame.Rect(x, y, w, h))

    def set_title(self, title: str) -> None:
        pygame.display.set_caption(title)
