import math

from ursina import Entity, Mesh, Vec3, color

from solar_system.config import CENTRAL_OFFSET, ORBIT_SEGMENTS
from solar_system.ellipse import minor_radius

TAU = math.tau


def build_body_entities(bodies):
    """One sphere per body, the central body parked at its fixed offset."""
    entities = []
    for body in bodies:
        entity = Entity(
            name=body.name,
            model="sphere",
            color=color.hex(body.color),
            scale=body.display_radius * 2,
        )
        if body.is_central:
            entity.position = Vec3(*CENTRAL_OFFSET)
        else:
            entity.position = Vec3(body.major_radius, 0, 0)
        entities.append(entity)
    return entities


def make_orbit_ellipse_mesh(major_radius, segments=ORBIT_SEGMENTS):
    vertices = []
    a = major_radius
    b = minor_radius(major_radius)
    for i in range(segments + 1):
        t = TAU * i / segments
        vertices.append(Vec3(a * math.cos(t), 0, b * math.sin(t)))
    return Mesh(vertices=vertices, mode="line")


def build_orbit_rings(bodies, enabled=False):
    rings = []
    for body in bodies:
        if body.is_central:
            continue
        ring = Entity(
            model=make_orbit_ellipse_mesh(body.major_radius),
            color=color.Color(1, 1, 1, 0.16),
        )
        ring.enabled = enabled
        rings.append(ring)
    return rings


def place_bodies(entities, positions):
    # entities[0] is the central body
    for entity, position in zip(entities[1:], positions):
        entity.position = Vec3(position.x, 0, position.z)
