"""
Position Updater
================
Advances every orbiting body along its ellipse once per frame.

No angle is stored. The next point is found from the sign of the current
(x, z) pair: x grows while the body is on the upper half (z > 0) and shrinks
on the lower half, and at x = +/-major radius the body turns onto the other
half. Near those turning points the step falls back to a small constant so
the body slows down instead of jumping past the cusp.
"""
import enum
from typing import List, Sequence

from solar_system.config import BOUNDARY_MARGIN, BOUNDARY_STEP
from solar_system.ellipse import z_from_x
from solar_system.layout import Position


class Quadrant(enum.Enum):
    UPPER_RIGHT = "upper_right"  # x > 0, z > 0
    LOWER_RIGHT = "lower_right"  # x > 0, z <= 0
    TOP = "top"  # x == 0, z > 0
    BOTTOM = "bottom"  # x == 0, z < 0
    UPPER_LEFT = "upper_left"  # x < 0, z >= 0
    LOWER_LEFT = "lower_left"  # x < 0, z < 0
    ORIGIN = "origin"  # x == 0, z == 0


def classify(x, z):
    if x > 0:
        return Quadrant.UPPER_RIGHT if z > 0 else Quadrant.LOWER_RIGHT
    if x < 0:
        return Quadrant.LOWER_LEFT if z < 0 else Quadrant.UPPER_LEFT
    if z > 0:
        return Quadrant.TOP
    if z < 0:
        return Quadrant.BOTTOM
    return Quadrant.ORIGIN


def relative_step(major_radius, abs_x, base_speed):
    """Step along x, largest at x = 0 and shrinking towards the cusps."""
    if abs_x + BOUNDARY_MARGIN >= major_radius:
        return BOUNDARY_STEP + base_speed
    return (major_radius - abs_x) / major_radius + base_speed


def _increase(x, major_radius, increment):
    return Position(x + increment, z_from_x(x + increment, major_radius, False))


def _decrease(x, major_radius, increment):
    return Position(x - increment, z_from_x(x - increment, major_radius, True))


def _upper_right(x, major_radius, increment):
    headroom = major_radius - x
    if increment > headroom:
        # Reach +a, then spend what is left heading back along the lower half
        x = major_radius - (increment - headroom)
        return Position(x, z_from_x(x, major_radius, True))
    return _increase(x, major_radius, increment)


def _lower_left(x, major_radius, increment):
    headroom = major_radius - abs(x)
    if increment > headroom:
        x = -major_radius + (increment - headroom)
        return Position(x, z_from_x(x, major_radius, False))
    return _decrease(x, major_radius, increment)


TRANSITIONS = {
    Quadrant.UPPER_RIGHT: _upper_right,
    Quadrant.LOWER_RIGHT: _decrease,
    Quadrant.TOP: _increase,
    Quadrant.BOTTOM: _decrease,
    Quadrant.UPPER_LEFT: _increase,
    Quadrant.LOWER_LEFT: _lower_left,
}


def step_body(position, major_radius, base_speed):
    """Next position of one body."""
    x, z = position
    quadrant = classify(x, z)
    transition = TRANSITIONS.get(quadrant)
    if transition is None:
        # (0, 0) is not on any orbit, leave it where it is
        return Position(x, z)
    increment = relative_step(major_radius, abs(x), base_speed)
    return transition(x, major_radius, increment)


def advance(positions: Sequence[Position], major_radii: Sequence[float],
            speeds: Sequence[float]) -> List[Position]:
    return [
        step_body(position, major_radius, speed)
        for position, major_radius, speed in zip(positions, major_radii, speeds)
    ]


class SimulationState:
    """Positions of the orbiting bodies, owned by the frame loop."""

    def __init__(self, major_radii, speeds, positions):
        if not (len(major_radii) == len(positions) and len(speeds) >= len(major_radii)):
            raise ValueError(
                f"Need one position and one speed per orbit, got {len(major_radii)} orbits, "
                f"{len(positions)} positions and {len(speeds)} speeds"
            )
        self.major_radii = list(major_radii)
        self.speeds = list(speeds[:len(major_radii)])
        self.positions = list(positions)

    def tick(self):
        self.positions = advance(self.positions, self.major_radii, self.speeds)
        return self.positions
