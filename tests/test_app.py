import math
import random

import pytest

from chargefield.app import (
    MAX_ARROW_LENGTH,
    arrow_segments,
    build_field_lines,
    build_particles,
    main,
)
from chargefield.args import SimulationSetup
from chargefield.fieldline import FieldLine
from chargefield.vector import Vec2


def test_circular_preset():
    particles = build_particles(SimulationSetup.CIRCULAR, random.Random(1))
    assert len(particles) == 2
    heavy, light = particles
    assert heavy.mass == 1000000.0
    assert heavy.charge == 100.0
    assert heavy.position == Vec2(400.0, 300.0)
    assert light.charge == -10.0
    assert light.velocity == Vec2(0.0, 489.559033858)


def test_circular_moving_preset():
    particles = build_particles(SimulationSetup.CIRCULAR_MOVING, random.Random(1))
    assert [p.position for p in particles] == [Vec2(100.0, 300.0), Vec2(25.0, 300.0)]
    assert all(p.velocity.x == 35.0 for p in particles)


def test_four_preset():
    particles = build_particles(SimulationSetup.FOUR, random.Random(1))
    assert [p.charge for p in particles] == [-35.0, -45.0, 25.0, 45.0]
    assert [p.mass for p in particles] == [10.0, 10.0, 5.0, 15.0]


@pytest.mark.parametrize("setup", [SimulationSetup.INPUT, None])
def test_empty_presets(setup):
    assert build_particles(setup, random.Random(1)) == []


def test_random_preset_ranges():
    particles = build_particles(SimulationSetup.RANDOM, random.Random(42))
    assert len(particles) == 10
    for p in particles:
        assert 0 < p.mass <= 5
        assert 250 <= p.position.x < 550
        assert 200 <= p.position.y < 400
        assert -30 <= p.velocity.x < 30
        assert -30 <= p.velocity.y < 30
        assert -75 <= p.charge < 75


def test_random_preset_is_deterministic_for_a_seed():
    first = build_particles(SimulationSetup.RANDOM, random.Random(7))
    second = build_particles(SimulationSetup.RANDOM, random.Random(7))
    assert [(p.mass, p.charge, p.position, p.velocity) for p in first] == [
        (p.mass, p.charge, p.position, p.velocity) for p in second
    ]


def test_field_lines_grid():
    lines = build_field_lines()
    assert len(lines) == 600
    assert lines[0].position == Vec2(0.0, 0.0)
    assert lines[1].position == Vec2(20.0, 20.0)
    assert all(line.field == Vec2() for line in lines)
    assert all(0 <= line.position.x <= 800 and 0 <= line.position.y <= 600 for line in lines)


def test_weak_field_has_no_arrow():
    line = FieldLine(Vec2(100.0, 100.0), Vec2(1.0, 1.0))
    assert arrow_segments(line) == []


def test_short_arrow_follows_field():
    line = FieldLine(Vec2(100.0, 100.0), Vec2(10.0, 0.0))
    segments = arrow_segments(line)
    assert len(segments) == 3
    (start, end), (tip_base_l, left), (tip_base_r, right) = segments
    assert start == Vec2(100.0, 100.0)
    assert end == Vec2(110.0, 100.0)
    assert tip_base_l == end and tip_base_r == end
    assert left.x < end.x and right.x < end.x
    assert left.y == pytest.approx(200.0 - right.y)
    assert (left - end).length() == pytest.approx((right - end).length())


def test_long_arrow_is_capped():
    line = FieldLine(Vec2(100.0, 100.0), Vec2(0.0, 500.0))
    (start, end), _, _ = arrow_segments(line)
    assert (end - start).length() == pytest.approx(MAX_ARROW_LENGTH)
    assert end.x == pytest.approx(100.0)
    assert end.y > start.y


def test_tip_angle_is_fifteen_degrees():
    line = FieldLine(Vec2(0.0, 0.0), Vec2(20.0, 0.0))
    (_, end), (_, left), _ = arrow_segments(line)
    back = left - end
    angle = math.atan2(back.y, back.x)
    assert angle == pytest.approx(math.pi - math.radians(15))


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "<simulation_setup>" in captured.out
    assert "Missing required argument" in captured.err


def test_main_help_exits_cleanly(capsys):
    assert main(["circular", "--help"]) == 0
    assert "--ignore-field" in capsys.readouterr().out


def test_main_rejects_unknown_argument(capsys):
    assert main(["nonsense"]) == 1
    assert "Unrecognized argument 'nonsense'" in capsys.readouterr().err