import pytest
import requests


def planet(name, **fields):
    record = {
        "id": name.lower(),
        "name": name,
        "englishName": name,
        "isPlanet": True,
        "moons": None,
        "semimajorAxis": 1000,
        "rel": f"https://api.le-systeme-solaire.net/rest/bodies/{name.lower()}",
    }
    record.update(fields)
    return record


@pytest.fixture
def sun_record():
    return {
        "id": "soleil",
        "name": "Le Soleil",
        "englishName": "Sun",
        "isPlanet": False,
        "moons": None,
        "alternativeName": "",
        "aroundPlanet": None,
        "dimension": "",
        "discoveredBy": "",
        "discoveryDate": "",
        "rel": "https://api.le-systeme-solaire.net/rest/bodies/soleil",
        "vol": {"volValue": 1.412, "volExponent": 18},
        "mass": {"massValue": 1.989, "massExponent": 30},
        "gravity": 274,
        "meanRadius": 695508,
    }


@pytest.fixture
def planet_records():
    # Feed order is not orbital order and carries entries that are not planets
    return [
        planet("Pluto"),
        planet("Uranus", moons=[{"moon": "Ariel"}, {"moon": "Umbriel"}]),
        planet("Neptune", moons=[{"moon": "Triton"}]),
        planet("Jupiter", moons=[{"moon": "Io"}, {"moon": "Europa"}, {"moon": "Ganymede"}]),
        planet("Mars", moons=[{"moon": "Phobos"}, {"moon": "Deimos"}], inclination=1.85),
        planet("Ceres"),
        planet("Mercury", discoveredBy="", inclination=7.0),
        planet("Saturn", moons=[{"moon": "Titan"}]),
        planet("Earth", moons=[{"moon": "La Lune"}], inclination=0),
        planet("Venus", mass={"massValue": 4.86747, "massExponent": 24}),
        planet("Earth", semimajorAxis=1),
    ]


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_session(sun_record, planet_records):
    return FakeSession(
        FakeResponse({"bodies": [sun_record]}),
        FakeResponse({"bodies": planet_records}),
    )
