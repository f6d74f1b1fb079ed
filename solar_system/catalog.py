"""
Body Catalog
============
Fetches the Sun and the planets from the le-systeme-solaire bodies API and
shapes the raw feed into clean records in canonical order.

The planet query returns more than the eight planets (dwarf planets and
error entries show up with ``isPlanet`` set), so only the first record for
each canonical name is kept.
"""
import json
import logging
from pathlib import Path

import requests

from solar_system import config

logger = logging.getLogger(__name__)

CENTRAL_DROPPED_FIELDS = (
    "alternativeName",
    "aroundPlanet",
    "dimension",
    "discoveredBy",
    "discoveryDate",
    "id",
    "isPlanet",
    "moons",
    "name",
    "rel",
    "vol",
)
PLANET_DROPPED_FIELDS = ("id", "isPlanet", "name", "rel")

CENTRAL_FILTER = f"englishName,eq,{config.CENTRAL_BODY}"
PLANET_FILTER = "isPlanet,neq,false"


class CatalogError(Exception):
    """The body catalog could not be fetched or is incomplete."""


def _is_empty(value):
    if value is None:
        return True
    if isinstance(value, (str, list, dict)):
        return not value
    return value == 0


def shape_central_body(record):
    return {key: value for key, value in record.items() if key not in CENTRAL_DROPPED_FIELDS}


def shape_planet(record):
    shaped = {}
    for key, value in record.items():
        if _is_empty(value) or key in PLANET_DROPPED_FIELDS:
            continue
        if key == "moons":
            if not isinstance(value, list):
                raise CatalogError(f"{record.get('englishName')!r} has malformed moons: {value!r}")
            value = len(value)
        shaped[key] = value
    return shaped


def _check_entries(entries, source):
    for entry in entries:
        if not isinstance(entry, dict):
            raise CatalogError(f"{source} holds a malformed body entry: {entry!r}")
    return entries


def order_records(records, order=config.CANONICAL_ORDER):
    """Canonical ordering; unknown names and repeated names are dropped."""
    by_name = {}
    for record in records:
        name = record.get("englishName")
        if name not in order:
            logger.debug("Discarding catalog entry %r", name)
            continue
        if name in by_name:
            logger.debug("Discarding duplicate catalog entry %r", name)
            continue
        by_name[name] = record

    missing = [name for name in order if name not in by_name]
    if missing:
        raise CatalogError(f"Catalog is missing: {', '.join(missing)}")
    return [by_name[name] for name in order]


def _fetch(session, params):
    headers = {}
    if config.API_KEY:
        headers["Authorization"] = f"Bearer {config.API_KEY}"
    try:
        response = session.get(config.API_URL, params=params, headers=headers,
                               timeout=config.API_TIMEOUT)
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as e:
        raise CatalogError(f"Request with {params} failed: {e}") from e

    bodies = payload.get("bodies") if isinstance(payload, dict) else None
    if not isinstance(bodies, list):
        raise CatalogError(f"Response to {params} has no 'bodies' list")
    return _check_entries(bodies, f"Response to {params}")


def fetch_records(session=None):
    """Shaped records for the Sun and the eight planets."""
    session = session or requests.Session()

    logger.info("Querying %s for the central body...", config.API_URL)
    central = _fetch(session, {"filter[]": CENTRAL_FILTER})
    if not central:
        raise CatalogError("Central body query returned no bodies")
    records = [shape_central_body(central[0])]

    # Planets only once the Sun is known
    logger.info("Querying %s for planetary bodies...", config.API_URL)
    planets = _fetch(session, {"filter[]": PLANET_FILTER})
    records.extend(shape_planet(record) for record in planets)

    records = order_records(records)
    logger.info("Fetched %d bodies.", len(records))
    return records


def load_records(path):
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            records = json.load(f)
    except (OSError, ValueError) as e:
        raise CatalogError(f"Could not read {path}: {e}") from e
    if not isinstance(records, list):
        raise CatalogError(f"{path} does not hold a list of bodies")
    _check_entries(records, path)
    logger.info("Loaded %d bodies from %s", len(records), path)
    return order_records(records)


def save_records(records, path):
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8") as f:
            json.dump(records, f, indent=2)
    except OSError as e:
        raise CatalogError(f"Could not write {path}: {e}") from e
    logger.info("Saved %d bodies to %s", len(records), path)


def load_catalog(data_file=None, save_file=None, session=None):
    """Records from a snapshot file when given, else from the API.

    Fetched records are written to `save_file` for later replay. A snapshot
    that cannot be written does not stop startup.
    """
    if data_file:
        return load_records(data_file)

    records = fetch_records(session=session)
    if save_file:
        try:
            save_records(records, save_file)
        except CatalogError as e:
            logger.warning("Snapshot not saved: %s", e)
    return records
