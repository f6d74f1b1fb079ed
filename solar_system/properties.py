"""Label/value/unit rows for the property table of a body."""
from typing import List, NamedTuple

SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def superscript(value):
    return str(value).translate(SUPERSCRIPTS)


class PropertyRow(NamedTuple):
    label: str
    value: str
    unit: str

    @property
    def text(self):
        return f"{self.value} {self.unit}" if self.unit else self.value


class Field(NamedTuple):
    label: str
    unit: str = ""
    # keys of a {value, exponent} object, for fields given in scientific form
    scientific: tuple = ()


FIELDS = {
    "englishName": Field("Name"),
    "bodyType": Field("Type"),
    "moons": Field("Moons"),
    "semimajorAxis": Field("Semi-major axis", "km"),
    "perihelion": Field("Perihelion", "km"),
    "aphelion": Field("Aphelion", "km"),
    "eccentricity": Field("Eccentricity"),
    "inclination": Field("Inclination", "°"),
    "mass": Field("Mass", "kg", ("massValue", "massExponent")),
    "vol": Field("Volume", "km" + superscript(3), ("volValue", "volExponent")),
    "density": Field("Density", "g/cm" + superscript(3)),
    "gravity": Field("Gravity", "m/s" + superscript(2)),
    "escape": Field("Escape velocity", "m/s"),
    "meanRadius": Field("Mean radius", "km"),
    "equaRadius": Field("Equatorial radius", "km"),
    "polarRadius": Field("Polar radius", "km"),
    "flattening": Field("Flattening"),
    "sideralOrbit": Field("Sidereal orbit", "d"),
    "sideralRotation": Field("Sidereal rotation", "h"),
    "axialTilt": Field("Axial tilt", "°"),
    "avgTemp": Field("Mean temperature", "K"),
    "discoveredBy": Field("Discoverer"),
    "discoveryDate": Field("Discovered"),
}


def format_value(value, field):
    if field.scientific:
        value_key, exponent_key = field.scientific
        if not isinstance(value, dict) or value.get(value_key) is None:
            return None
        exponent = value.get(exponent_key)
        if exponent is None:
            return str(value[value_key])
        return f"{value[value_key]} × 10{superscript(exponent)}"
    if isinstance(value, (dict, list)):
        return None
    return str(value)


def format_properties(record) -> List[PropertyRow]:
    """Rows in the record's own key order.

    Keys without a label and values that are missing are left out.
    """
    rows = []
    for key, value in record.items():
        field = FIELDS.get(key)
        if field is None or value is None:
            continue
        text = format_value(value, field)
        if text is None:
            continue
        # Angles hug their number
        unit = field.unit
        if unit == "°":
            rows.append(PropertyRow(field.label, text + unit, ""))
        else:
            rows.append(PropertyRow(field.label, text, unit))
    return rows


def as_table(rows, separator="  "):
    width = max((len(row.label) for row in rows), default=0)
    return "\n".join(f"{row.label.ljust(width)}{separator}{row.text}" for row in rows)
