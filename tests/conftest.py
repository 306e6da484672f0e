import random

import pytest

from maze import Grid, generate_maze


class _TitleRecorder:
    """
    Title sink that remembers every title it was given, newest last.
    """

    def __init__(self):
        self.titles: list[str] = []

    def set_title(self, title: str) -> None:
        self.titles.append(title)

    @property
    def current(self) -> str | None:
        return self.titles[-1] if self.titles else None


class _RecordingSurface(_TitleRecorder):
    """
    Drawing surface that logs primitive calls instead of drawing pixels.
    """

    def __init__(self):
        super().__init__()
        self.calls: list[tuple] = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def draw_line(self, x0, y0, x1, y1, color):
        self.calls.append(("line", x0, y0, x1, y1, color))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))


@pytest.fixture
def titles():
    return _TitleRecorder()


@pytest.fixture
def surface():
    return _RecordingSurface()


@pytest.fixture
def make_maze():
    def _make(width: int = 21, height: int = 15, seed: int = 0, start=(0, 0)) -> Grid:
        grid = Grid(width, height)
        generate_maze(grid, random.Random(seed), start=start)
        return grid

    return _make


