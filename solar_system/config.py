"""
Configuration
=============
Global constants for the orbit model, the renderer and the body catalog.
Deployment specific values (API endpoint, credentials, log level) can be
overridden through environment variables.
"""
import os

# Orbit model
ORBIT_CLEARANCE = 200.0  # world units between neighbouring orbits
MINOR_RATIO = 0.9  # minor radius / major radius
BOUNDARY_MARGIN = 0.1
BOUNDARY_STEP = 0.01

# Innermost planets orbit faster
SPEED_TABLE = (2.00, 1.75, 1.50, 1.25, 1.00, 0.75, 0.50, 0.25)

CENTRAL_BODY = "Sun"
CANONICAL_ORDER = (
    "Sun",
    "Mercury",
    "Venus",
    "Earth",
    "Mars",
    "Jupiter",
    "Saturn",
    "Uranus",
    "Neptune",
)
# Offset to hint at perihelion/aphelion
CENTRAL_OFFSET = (-20.0, 0.0, 0.0)

# Renderer
WINDOW_TITLE = "Solar System (Approximate)"
BACKGROUND_RGB = "#05080f"
CAMERA_TILT_DEG = 8.6
CAMERA_FOV = 4200
ORBIT_SEGMENTS = 128

# Body catalog
API_URL = os.environ.get(
    "SOLAR_SYSTEM_API_URL", "https://api.le-systeme-solaire.net/rest/bodies/"
)
API_KEY = os.environ.get("SOLAR_SYSTEM_API_KEY")
API_TIMEOUT = float(os.environ.get("SOLAR_SYSTEM_API_TIMEOUT", "10"))
DATA_FILE = os.environ.get("SOLAR_SYSTEM_DATA_FILE")
SAVE_FILE = os.environ.get("SOLAR_SYSTEM_SAVE_FILE")

LOG_LEVEL = os.environ.get("SOLAR_SYSTEM_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("SOLAR_SYSTEM_LOG_FILE")
