import random

import pytest

from gridsnake.food import RandomFoodPlacer


class ScriptedPlacer(RandomFoodPlacer):
    """Hands out the given cells in order, then falls back to seeded random placement."""

    def __init__(self, cells=(), seed=0):
        super().__init__(random.Random(seed))
        self.cells = list(cells)

    def place(self, occupied, cols, rows):
        if self.cells:
            return self.cells.pop(0)
        return super().place(occupied, cols, rows)


@pytest.fixture
def scripted():
    return ScriptedPlacer
