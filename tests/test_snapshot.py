"""Tests for the read-only Snapshot handed to renderers."""

import dataclasses

import numpy as np
import pytest

from gridsnake.config import Config, LEFT
from gridsnake.game import GameSession
from gridsnake.snapshot import Snapshot, State, EMPTY, BODY, FOOD, HEAD


@pytest.fixture
def session(scripted):
    return GameSession(Config(cols=6, rows=4, initial_length=3), placer=scripted([(0, 0), (5, 3)]))


class TestSnapshot:

    def test_fields(self, session):
        snap = session.snapshot()
        assert (snap.cols, snap.rows) == (6, 4)
        assert snap.body == ((3, 2), (2, 2), (1, 2))
        assert snap.head == (3, 2)
        assert snap.food == (0, 0)
        assert snap.score == 0
        assert snap.state is State.RUNNING
        assert snap.move_interval == pytest.approx(0.12)
        assert snap.end_reason is None

    def test_is_frozen(self, session):
        snap = session.snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.score = 100
        assert isinstance(snap.body, tuple)

    def test_detached_from_live_session(self, session):
        snap = session.snapshot()
        session.step()
        assert snap.body == ((3, 2), (2, 2), (1, 2))
        assert session.snapshot().body == ((4, 2), (3, 2), (2, 2))

    def test_to_grid(self, session):
        grid = session.snapshot().to_grid()
        assert grid.shape == (4, 6)
        assert grid.dtype == np.int8
        assert grid[2, 3] == HEAD
        assert grid[2, 2] == BODY and grid[2, 1] == BODY
        assert grid[0, 0] == FOOD
        assert (grid == EMPTY).sum() == 6 * 4 - 4

    def test_to_grid_skips_off_board_head(self, scripted):
        session = GameSession(
            Config(cols=3, rows=3, initial_length=1, start=(0, 1), start_direction=LEFT),
            placer=scripted([(2, 2)]),
        )
        session.step()
        snap = session.snapshot()
        assert snap.state is State.GAME_OVER
        assert snap.end_reason == "wall"
        assert (snap.to_grid() == FOOD).sum() == 1
        assert (snap.to_grid() == HEAD).sum() == 0

    def test_render_text(self, session):
        assert session.snapshot().render_text() == "\n".join([
            "*.....",
            "......",
            ".oo@..",
            "......",
        ])

    def test_head_drawn_over_body_on_self_hit(self):
        snap = Snapshot(
            cols=3, rows=3, body=((1, 1), (1, 0), (0, 0), (0, 1), (1, 1)),
            food=(2, 2), score=0, state=State.GAME_OVER, move_interval=0.12,
        )
        assert snap.to_grid()[1, 1] == HEAD
