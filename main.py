from __future__ import annotations

import logging
import random
import sys
import time
from enum import Enum
from typing import Protocol

import pygame

import config
from maze import Grid, Player, Position, RandomSource, generate_maze, try_move
from render import PygameSurface, draw_frame, window_size

logger = logging.getLogger(__name__)


class Key(Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    R = "r"
    ESCAPE = "escape"


MOVES: dict[Key, tuple[int, int]] = {
    Key.UP: (0, -1),
    Key.W: (0, -1),
    Key.RIGHT: (1, 0),
    Key.D: (1, 0),
    Key.DOWN: (0, 1),
    Key.S: (0, 1),
    Key.LEFT: (-1, 0),
    Key.A: (-1, 0),
}

KEY_BINDINGS: dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_r: Key.R,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def key_from_pygame(code: int) -> Key | None:
    return KEY_BINDINGS.get(code)


class TitleSink(Protocol):
    def set_title(self, title: str) -> None: ...


class SessionState(Enum):
    PLAYING = "playing"
    WON = "won"


class Session:
    """
    Owns the grid, the player and the won latch; turns key presses into moves.
    """

    def __init__(self, *, width: int, height: int, rng: RandomSource, titles: TitleSink):
        self._grid = Grid(width, height)
        self._player = Player()
        self._rng = rng
        self._titles = titles
        self._won = False
        self.running = True

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def player(self) -> Player:
        return self._player

    @property
    def won(self) -> bool:
        return self._won

    @property
    def goal(self) -> Position:
        return Position(self._grid.width - 1, self._grid.height - 1)

    @property
    def state(self) -> SessionState:
        return SessionState.WON if self._won else SessionState.PLAYING

    def regenerate(self) -> None:
        self._grid.reset()
        generate_maze(self._grid, self._rng, start=(0, 0))
        self._player.x, self._player.y = 0, 0
        self._won = False
        self._titles.set_title(config.TITLE_PLAYING)
        logger.info("New %dx%d maze", self._grid.width, self._grid.height)
        # A 1x1 grid starts on its goal.
        self._check_goal()

    def _check_goal(self) -> None:
        if self._player.pos != self.goal:
            return
        self._won = True
        self._titles.set_title(config.TITLE_WON)
        logger.info("Goal reached at %s", self.goal)

    def on_move_attempt(self, dx: int, dy: int) -> bool:
        if self._won:
            return False
        moved = try_move(self._grid, self._player, dx, dy)
        self._check_goal()
        return moved

    def on_quit(self) -> None:
        self.running = False

    def on_key(self, key: Key) -> bool:
        if key is Key.ESCAPE:
            self.on_quit()
            return True

        if key is Key.R:
            self.regenerate()
            return True

        delta = MOVES.get(key)
        if delta is None:
            return False
        return self.on_move_attempt(*delta)


def main() -> int:
    logging.basicConfig(level=logging.WARNING)
    rng = random.Random(int(time.time()))

    try:
        pygame.display.init()
        screen = pygame.display.set_mode(window_size(config.MAZE_W, config.MAZE_H))
    except pygame.error as e:
        print(f"Failed to create window: {e}", file=sys.stderr)
        logger.error("Display initialisation failed: %s", e)
        pygame.quit()
        return 1

    surface = PygameSurface(screen)
    session = Session(width=config.MAZE_W, height=config.MAZE_H, rng=rng, titles=surface)
    session.regenerate()
    clock = pygame.time.Clock()

    try:
        while session.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    session.on_quit()
                elif event.type == pygame.KEYDOWN:
                    key = key_from_pygame(event.key)
                    if key is not None:
                        session.on_key(key)

            draw_frame(surface, session.grid, session.player)
            pygame.display.flip()
            clock.tick(config.FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
