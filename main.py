import logging
import random
import sys

from panda3d.core import loadPrcFileData
from ursina import (
    Ursina,
    EditorCamera,
    Text,
    camera,
    color,
    window,
)

from solar_system import config
from solar_system.bodies import build_bodies
from solar_system.catalog import CatalogError, load_catalog
from solar_system.layout import compute_initial_positions, compute_major_radii
from solar_system.logging_config import setup_logging
from solar_system.scene import build_body_entities, build_orbit_rings, place_bodies
from solar_system.ui import PropertyPanel, make_buttons
from solar_system.updater import SimulationState

loadPrcFileData("", "gl-version 2 1")
loadPrcFileData("", "glsl-version 120")

setup_logging(config.LOG_LEVEL, config.LOG_FILE)
logger = logging.getLogger("solar_system.main")

try:
    records = load_catalog(config.DATA_FILE, config.SAVE_FILE)
except CatalogError as e:
    logger.error("Body catalog unavailable, not starting: %s", e)
    sys.exit(1)

bodies = build_bodies(records)
major_radii = compute_major_radii([body.display_radius for body in bodies])
for body, major_radius in zip(bodies[1:], major_radii):
    body.major_radius = major_radius

state = SimulationState(
    major_radii,
    config.SPEED_TABLE,
    compute_initial_positions(major_radii, rng=random.Random()),
)

app = Ursina()
window.title = config.WINDOW_TITLE
window.borderless = False
window.exit_button.visible = False
window.fps_counter.enabled = False
camera.clear_color = color.hex(config.BACKGROUND_RGB)

camera.orthographic = True
camera.fov = config.CAMERA_FOV
camera.clip_plane_far = 20000
editor_camera = EditorCamera(rotation_x=config.CAMERA_TILT_DEG)

entities = build_body_entities(bodies)
orbit_rings = build_orbit_rings(bodies)
rings_enabled = False

panel = PropertyPanel()
buttons = make_buttons(bodies, panel.toggle)
place_bodies(entities, state.positions)

hud = Text(
    text="Controls: mouse drag rotate, scroll zoom, n orbits, f fullscreen, esc hide table",
    position=(-0.85, -0.45),
    scale=0.8,
    origin=(-0.5, 0.5),
)


def input(key):
    global rings_enabled

    if key == "n":
        rings_enabled = not rings_enabled
        for ring in orbit_rings:
            ring.enabled = rings_enabled
    elif key == "f":
        window.fullscreen = not window.fullscreen
    elif key == "escape":
        panel.clear()


def update():
    positions = state.tick()
    place_bodies(entities, positions)


logger.info("Simulating %d orbits: %s", len(major_radii), major_radii)
app.run()
