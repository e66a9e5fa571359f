"""Tests for the wave emitter field."""
from __future__ import annotations

import pytest
from ripple_grid.emitters import Emitter, EmitterField


@pytest.fixture
def field() -> EmitterField:
    return EmitterField(wave_speed=0.8, activation_band=40.0, max_emitters=800)


class TestSpawn:
    def test_spawn_appends_in_order(self, field: EmitterField) -> None:
        field.spawn(0.0, 1.0, 2.0)
        field.spawn(10.0, 3.0, 4.0)
        assert list(field) == [Emitter(1.0, 2.0, 0.0), Emitter(3.0, 4.0, 10.0)]

    def test_spawn_returns_emitter(self, field: EmitterField) -> None:
        emitter = field.spawn(5.0, 7.0, 8.0)
        assert emitter == Emitter(7.0, 8.0, 5.0)

    def test_capacity_discards_oldest(self) -> None:
        field = EmitterField(wave_speed=1.0, activation_band=1.0, max_emitters=3)
        for i in range(5):
            field.spawn(float(i), float(i), 0.0)
        assert len(field) == 3
        assert [e.emitted_at_ms for e in field] == [2.0, 3.0, 4.0]

    def test_capacity(self, field: EmitterField) -> None:
        assert field.capacity == 800

    def test_invalid_capacity(self) -> None:
        with pytest.raises(ValueError):
            EmitterField(wave_speed=1.0, activation_band=1.0, max_emitters=0)

    def test_clear(self, field: EmitterField) -> None:
        field.spawn(0.0, 0.0, 0.0)
        field.clear()
        assert len(field) == 0


class TestCoversPoint:
    def test_empty_field_covers_nothing(self, field: EmitterField) -> None:
        assert field.covers_point(100.0, 0.0, 0.0) is False

    def test_origin_covered_while_ring_within_band(self, field: EmitterField) -> None:
        field.spawn(1000.0, 50.0, 50.0)
        # band / speed = 50ms
        assert field.covers_point(1000.0, 50.0, 50.0)
        assert field.covers_point(1025.0, 50.0, 50.0)
        assert field.covers_point(1049.9, 50.0, 50.0)
        assert not field.covers_point(1050.1, 50.0, 50.0)
        assert not field.covers_point(2000.0, 50.0, 50.0)

    def test_future_emitter_never_matches(self, field: EmitterField) -> None:
        field.spawn(500.0, 0.0, 0.0)
        assert not field.covers_point(499.0, 0.0, 0.0)
        assert not field.covers_point(0.0, 0.0, 0.0)

    def test_ring_window_at_distance_100(self, field: EmitterField) -> None:
        """R = 0.8 * age, |100 - R| <= 40  =>  age in [75, 175]."""
        field.spawn(0.0, 0.0, 0.0)
        assert not field.covers_point(74.9, 100.0, 0.0)
        assert field.covers_point(75.01, 100.0, 0.0)
        assert field.covers_point(125.0, 0.0, 100.0)
        assert field.covers_point(174.99, 60.0, 80.0)
        assert not field.covers_point(175.1, 100.0, 0.0)

    def test_points_outside_every_band(self, field: EmitterField) -> None:
        field.spawn(0.0, 0.0, 0.0)
        field.spawn(100.0, 500.0, 500.0)
        now = 200.0
        # rings: 160px around (0,0), 80px around (500,500)
        for x, y in [(0.0, 0.0), (300.0, 0.0), (500.0, 500.0), (500.0, 700.0)]:
            assert not field.covers_point(now, x, y)
        assert field.covers_point(now, 160.0, 0.0)
        assert field.covers_point(now, 500.0, 580.0)

    def test_any_emitter_suffices(self, field: EmitterField) -> None:
        field.spawn(0.0, 1000.0, 1000.0)
        field.spawn(0.0, 0.0, 0.0)
        assert field.covers_point(10.0, 0.0, 0.0)


class TestPrune:
    def test_prune_drops_out_of_reach_from_oldest(self) -> None:
        field = EmitterField(wave_speed=1.0, activation_band=5.0, max_emitters=10)
        field.spawn(0.0, 0.0, 0.0)
        field.spawn(10.0, 0.0, 0.0)
        field.spawn(20.0, 0.0, 0.0)
        # radii at t=100: 100, 90, 80
        assert field.prune(100.0, 85.0) == 2
        assert [e.emitted_at_ms for e in field] == [20.0]

    def test_prune_keeps_reachable(self) -> None:
        field = EmitterField(wave_speed=1.0, activation_band=5.0, max_emitters=10)
        field.spawn(0.0, 0.0, 0.0)
        assert field.prune(50.0, 100.0) == 0
        assert len(field) == 1

    def test_prune_everything(self) -> None:
        field = EmitterField(wave_speed=1.0, activation_band=5.0, max_emitters=10)
        for t in (0.0, 1.0, 2.0):
            field.spawn(t, 0.0, 0.0)
        assert field.prune(1000.0, 10.0) == 3
        assert len(field) == 0

    def test_radius_of(self, field: EmitterField) -> None:
        emitter = field.spawn(100.0, 0.0, 0.0)
        assert field.radius_of(emitter, 200.0) == pytest.approx(80.0)
