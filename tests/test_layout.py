import random

import pytest

from solar_system.bodies import BODY_STYLES
from solar_system.config import CANONICAL_ORDER, ORBIT_CLEARANCE
from solar_system.ellipse import on_ellipse
from solar_system.layout import Position, compute_initial_positions, compute_major_radii


def test_major_radii_follow_recurrence():
    display_radii = [160.0, 4.0, 7.0]

    major_radii = compute_major_radii(display_radii)

    assert major_radii == [
        display_radii[0] * 2 + ORBIT_CLEARANCE,
        display_radii[0] * 2 + ORBIT_CLEARANCE + display_radii[1] * 2 + ORBIT_CLEARANCE,
    ]
    assert major_radii == [520.0, 728.0]


def test_major_radii_for_full_catalog():
    display_radii = [BODY_STYLES[name].display_radius for name in CANONICAL_ORDER]

    major_radii = compute_major_radii(display_radii)

    assert len(major_radii) == len(display_radii) - 1
    for i, major_radius in enumerate(major_radii):
        expected = sum(2 * display_radii[j] + ORBIT_CLEARANCE for j in range(i + 1))
        assert major_radius == pytest.approx(expected)
    assert all(inner < outer for inner, outer in zip(major_radii, major_radii[1:]))


def test_central_body_alone_has_no_orbits():
    assert compute_major_radii([160.0]) == []
    assert compute_major_radii([]) == []


@pytest.mark.parametrize("seed", range(20))
def test_initial_positions_lie_on_their_ellipses(seed):
    major_radii = compute_major_radii([160.0, 4.0, 7.0, 8.0, 5.0, 32.0, 28.0, 20.0, 19.0])

    positions = compute_initial_positions(major_radii, rng=random.Random(seed))

    assert len(positions) == len(major_radii)
    for position, major_radius in zip(positions, major_radii):
        assert isinstance(position, Position)
        assert 1 <= abs(position.x) <= major_radius
        assert position.x == int(position.x)
        assert on_ellipse(position.x, position.z, major_radius)


def test_initial_positions_are_reproducible_with_a_seed():
    major_radii = [520.0, 728.0]

    first = compute_initial_positions(major_radii, rng=random.Random(42))
    second = compute_initial_positions(major_radii, rng=random.Random(42))

    assert first == second


class ScriptedRandom:
    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


def test_initial_position_draw_order():
    # x draw, sign draw (>= .5 keeps positive), branch draw (>= .5 is lower half)
    positions = compute_initial_positions([520.0, 520.0], rng=ScriptedRandom([0.5, 0.9, 0.1, 0.5, 0.1, 0.9]))

    assert positions[0].x == 261.0
    assert positions[0].z > 0
    assert positions[1].x == -261.0
    assert positions[1].z < 0
