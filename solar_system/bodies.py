from typing import NamedTuple, Optional


class BodyStyle(NamedTuple):
    display_radius: float
    label: str
    color: str


BODY_STYLES = {
    "Sun": BodyStyle(160.0, "sun", "#ffc850"),
    "Mercury": BodyStyle(4.0, "MeRcury", "#b4aaa0"),
    "Venus": BodyStyle(7.0, "Venus", "#e6c896"),
    "Earth": BodyStyle(8.0, "eARtH", "#5a8cf0"),
    "Mars": BodyStyle(5.0, "MARs", "#d2785a"),
    "Jupiter": BodyStyle(32.0, "jupiteR", "#d2a06e"),
    "Saturn": BodyStyle(28.0, "sAtuRn", "#dcc88c"),
    "Uranus": BodyStyle(20.0, "uRAnus", "#aadcdc"),
    "Neptune": BodyStyle(19.0, "neptune", "#5a78dc"),
}


class Body:
    def __init__(self, name, display_radius, label, color, attributes=None,
                 major_radius: Optional[float] = None):
        self.name = name
        self.display_radius = display_radius
        self.label = label
        self.color = color
        self.attributes = attributes or {}
        self.major_radius = major_radius

    @property
    def is_central(self):
        return self.major_radius is None

    def __repr__(self):
        return f"Body({self.name!r}, display_radius={self.display_radius}, major_radius={self.major_radius})"


def build_bodies(records):
    """Bodies for shaped catalog records, in record order."""
    bodies = []
    for record in records:
        name = record["englishName"]
        style = BODY_STYLES.get(name)
        if style is None:
            raise ValueError(f"No display style for body {name!r}")
        bodies.append(
            Body(
                name=name,
                display_radius=style.display_radius,
                label=style.label,
                color=style.color,
                attributes=record,
            )
        )
    return bodies
