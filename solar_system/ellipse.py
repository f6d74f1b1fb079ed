import math

from solar_system.config import MINOR_RATIO


def minor_radius(major_radius):
    return major_radius * MINOR_RATIO


def z_from_x(x, major_radius, negative_branch):
    """z on the orbit ellipse for a given x.

    x alone is two-valued, `negative_branch` picks the lower (z < 0) half.
    """
    b = minor_radius(major_radius)
    # z^2 = b^2 (1 - x^2 / a^2)
    value = b * b * (1 - (x * x) / (major_radius * major_radius))

    # |x| can overshoot the major radius by a rounding error
    if value < 0:
        value = -value

    z = math.sqrt(value)
    return -z if negative_branch else z


def on_ellipse(x, z, major_radius, tolerance=1e-6):
    b = minor_radius(major_radius)
    lhs = (z * z) / (b * b) + (x * x) / (major_radius * major_radius)
    return abs(lhs - 1.0) <= tolerance
