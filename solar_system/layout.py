"""Orbit sizes and starting points.

Orbits are packed, not scaled: every body sits one neighbour diameter plus a
fixed clearance further out than the previous one.
"""
import logging
import math
import random
from typing import List, NamedTuple, Sequence

from solar_system.config import ORBIT_CLEARANCE
from solar_system.ellipse import z_from_x

logger = logging.getLogger(__name__)


class Position(NamedTuple):
    x: float
    z: float


def compute_major_radii(display_radii: Sequence[float]) -> List[float]:
    """Major radius of every orbiting body.

    `display_radii` starts with the central body, which gets no orbit, so the
    result is one shorter than the input.
    """
    major_radii = []
    major_radius = 0.0
    for i in range(1, len(display_radii)):
        major_radius += display_radii[i - 1] * 2 + ORBIT_CLEARANCE
        major_radii.append(major_radius)
    return major_radii


def compute_initial_positions(major_radii: Sequence[float], rng=random) -> List[Position]:
    positions = []
    for major_radius in major_radii:
        # 1 <= |x| <= major radius
        x = math.floor(rng.random() * major_radius + 1)
        if math.floor(rng.random() * 2) != 1:
            x = -x

        negative_branch = math.floor(rng.random() * 2) == 1
        z = z_from_x(x, major_radius, negative_branch)
        positions.append(Position(float(x), z))

    logger.debug("Initial positions: %s", positions)
    return positions
