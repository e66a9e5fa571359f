"""Tests for the tile animation grid and the shape-cycle timing."""
from __future__ import annotations

import math

import pytest
from ripple_grid.easing import linear
from ripple_grid.emitters import EmitterField
from ripple_grid.shapes import STAGES
from ripple_grid.tiles import (
    REST_FRAME,
    Tile,
    TileFrame,
    TileGrid,
    TilePhase,
    Timing,
    cycle_frame,
)


def _renders_square(frame: TileFrame) -> bool:
    """Start of square->circle or end of triangle->square."""
    return (frame.stage == 0 and frame.k == 0.0) or (frame.stage == 2 and frame.k == 1.0)


def _origin(row: int, col: int) -> tuple[float, float]:
    return (0.0, 0.0)


@pytest.fixture
def field() -> EmitterField:
    return EmitterField(wave_speed=0.8, activation_band=40.0, max_emitters=800)


@pytest.fixture
def timing() -> Timing:
    return Timing(half_ms=300.0, hold_ms=1500.0)


class TestTiming:
    def test_derived_lengths(self, timing: Timing) -> None:
        assert timing.segment_ms == 1800.0
        assert timing.cycle_ms == 5400.0


class TestCycleFrame:
    def test_start_is_square(self, timing: Timing) -> None:
        assert cycle_frame(0.0, timing) == REST_FRAME

    def test_stages_follow_segments(self, timing: Timing) -> None:
        assert cycle_frame(100.0, timing).stage == 0
        assert cycle_frame(1800.0, timing).stage == 1
        assert cycle_frame(3599.0, timing).stage == 1
        assert cycle_frame(3600.0, timing).stage == 2
        assert cycle_frame(5399.0, timing).stage == 2
        assert cycle_frame(5400.0, timing).stage == 0

    def test_k_eases_during_transition(self, timing: Timing) -> None:
        assert cycle_frame(150.0, timing).k == pytest.approx(0.5)
        assert cycle_frame(75.0, timing).k == pytest.approx(4 * 0.25 ** 3)

    def test_k_holds_during_dwell(self, timing: Timing) -> None:
        assert cycle_frame(300.0, timing) == TileFrame(0, 1.0)
        assert cycle_frame(1799.0, timing) == TileFrame(0, 1.0)
        assert cycle_frame(1800.0 + 300.0, timing) == TileFrame(1, 1.0)

    def test_cycle_boundaries_render_square_for_all_holds(self) -> None:
        for hold in range(30, 3001, 97):
            timing = Timing(half_ms=300.0, hold_ms=float(hold))
            for n in range(6):
                frame = cycle_frame(n * timing.cycle_ms, timing)
                assert _renders_square(frame), (hold, n, frame)

    def test_stage_pairs(self) -> None:
        assert STAGES == (
            ("square", "circle"),
            ("circle", "triangle"),
            ("triangle", "square"),
        )


class TestTileGridBasics:
    def test_initial_tiles_unset(self) -> None:
        grid = TileGrid(rows=8, cols=6)
        assert grid.rows == 8
        assert grid.cols == 6
        assert grid.count(TilePhase.UNSET) == 48

    def test_invalid_dimensions(self) -> None:
        with pytest.raises(ValueError):
            TileGrid(rows=0, cols=3)

    def test_tile_out_of_bounds(self) -> None:
        grid = TileGrid(rows=2, cols=2)
        with pytest.raises(IndexError):
            grid.tile(2, 0)

    def test_reset(self) -> None:
        grid = TileGrid(rows=2, cols=2)
        tile = grid.tile(1, 1)
        tile.phase = TilePhase.DONE
        tile.planned_stop_at_ms = 10.0
        grid.reset()
        assert grid.tile(1, 1) == Tile()

    def test_rest_frames(self, timing: Timing) -> None:
        grid = TileGrid(rows=2, cols=3)
        frames = grid.frames(1234.0, timing)
        assert len(frames) == 2
        assert all(f == REST_FRAME for line in frames for f in line)


class TestSampling:
    def test_no_trigger_without_long_press(self, field: EmitterField, timing: Timing) -> None:
        grid = TileGrid(rows=1, cols=1)
        field.spawn(0.0, 0.0, 0.0)
        triggered, _ = grid.sample(0.0, False, timing, field, _origin)
        assert triggered == []
        assert grid.tile(0, 0).phase is TilePhase.UNSET

    def test_trigger_records_time(self, field: EmitterField, timing: Timing) -> None:
        grid = TileGrid(rows=1, cols=1)
        field.spawn(1000.0, 0.0, 0.0)
        triggered, finished = grid.sample(1000.0, True, timing, field, _origin)
        assert triggered == [(0, 0)]
        assert finished == []
        tile = grid.tile(0, 0)
        assert tile.phase is TilePhase.ANIMATING
        assert tile.triggered_at_ms == 1000.0
        assert tile.planned_stop_at_ms is None

    def test_trigger_only_once(self, field: EmitterField, timing: Timing) -> None:
        grid = TileGrid(rows=1, cols=1)
        field.spawn(0.0, 0.0, 0.0)
        grid.sample(0.0, True, timing, field, _origin)
        field.spawn(20.0, 0.0, 0.0)
        triggered, _ = grid.sample(20.0, True, timing, field, _origin)
        assert triggered == []
        assert grid.tile(0, 0).triggered_at_ms == 0.0

    def test_loops_while_long_press(self, field: EmitterField, timing: Timing) -> None:
        grid = TileGrid(rows=1, cols=1)
        field.spawn(0.0, 0.0, 0.0)
        grid.sample(0.0, True, timing, field, _origin)
        for now in range(0, 50_000, 1000):
            _, finished = grid.sample(float(now), True, timing, field, _origin)
            assert finished == []
        tile = grid.tile(0, 0)
        assert tile.phase is TilePhase.ANIMATING
        assert tile.planned_stop_at_ms is None

    def test_release_plans_stop_at_next_boundary(
        self, field: EmitterField, timing: Timing
    ) -> None:
        """Triggered at 1000, released at 2000, cycle 5400 -> stop at 6400."""
        grid = TileGrid(rows=1, cols=1)
        field.spawn(1000.0, 0.0, 0.0)
        grid.sample(1000.0, True, timing, field, _origin)

        _, finished = grid.sample(2000.0, False, timing, field, _origin)
        tile = grid.tile(0, 0)
        assert finished == []
        assert tile.planned_stop_at_ms == 6400.0
        assert tile.phase is TilePhase.ANIMATING

        grid.sample(6399.0, False, timing, field, _origin)
        assert tile.phase is TilePhase.ANIMATING

        _, finished = grid.sample(6400.0, False, timing, field, _origin)
        assert finished == [(0, 0)]
        assert tile.phase is TilePhase.DONE
        assert grid.frame_at(0, 0, 6400.0, timing) == REST_FRAME

    def test_stop_time_frozen_after_hold_change(
        self, field: EmitterField, timing: Timing
    ) -> None:
        grid = TileGrid(rows=1, cols=1)
        field.spawn(0.0, 0.0, 0.0)
        grid.sample(0.0, True, timing, field, _origin)
        grid.sample(100.0, False, timing, field, _origin)
        assert grid.tile(0, 0).planned_stop_at_ms == 5400.0

        faster = Timing(half_ms=300.0, hold_ms=30.0)
        grid.sample(200.0, False, faster, field, _origin)
        assert grid.tile(0, 0).planned_stop_at_ms == 5400.0

    def test_done_is_terminal_until_reset(
        self, field: EmitterField, timing: Timing
    ) -> None:
        grid = TileGrid(rows=1, cols=1)
        field.spawn(0.0, 0.0, 0.0)
        grid.sample(0.0, True, timing, field, _origin)
        grid.sample(10.0, False, timing, field, _origin)
        grid.sample(5400.0, False, timing, field, _origin)
        assert grid.tile(0, 0).phase is TilePhase.DONE

        field.spawn(6000.0, 0.0, 0.0)
        triggered, _ = grid.sample(6000.0, True, timing, field, _origin)
        assert triggered == []
        assert grid.tile(0, 0).phase is TilePhase.DONE

        grid.reset()
        triggered, _ = grid.sample(6000.0, True, timing, field, _origin)
        assert triggered == [(0, 0)]

    @pytest.mark.parametrize("release_after", [1.0, 2700.0, 5399.0, 5401.0, 12000.0])
    def test_release_completes_whole_cycles(
        self, field: EmitterField, timing: Timing, release_after: float
    ) -> None:
        grid = TileGrid(rows=1, cols=1)
        field.spawn(500.0, 0.0, 0.0)
        grid.sample(500.0, True, timing, field, _origin)
        grid.sample(500.0 + release_after, False, timing, field, _origin)

        tile = grid.tile(0, 0)
        assert tile.planned_stop_at_ms is not None
        cycles = (tile.planned_stop_at_ms - 500.0) / timing.cycle_ms
        assert cycles == math.floor(cycles)
        assert tile.planned_stop_at_ms >= 500.0 + release_after
        assert _renders_square(cycle_frame(tile.planned_stop_at_ms - 500.0, timing))


def test_cycle_frame_custom_easing() -> None:
    timing = Timing(half_ms=300.0, hold_ms=1500.0)
    assert cycle_frame(75.0, timing, easing=linear).k == pytest.approx(0.25)
