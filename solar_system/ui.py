import logging

from ursina import Button, Text, camera, color

from solar_system.properties import as_table, format_properties

logger = logging.getLogger(__name__)

BUTTON_SCALE = (0.13, 0.04)
BUTTON_SPACING = 0.045


def make_buttons(bodies, on_select, origin=(-0.8, 0.45)):
    """A column of buttons, one per body, calling `on_select(body)`."""
    buttons = []
    x, y = origin
    for i, body in enumerate(bodies):
        button = Button(
            text=body.label,
            parent=camera.ui,
            scale=BUTTON_SCALE,
            position=(x, y - i * BUTTON_SPACING),
            color=color.tint(color.hex(body.color), -0.4),
        )
        button.on_click = lambda body=body: on_select(body)
        buttons.append(button)
    return buttons


class PropertyPanel:
    """Two text columns, property names on the left and values on the right."""

    def __init__(self, position=(0.45, 0.45), column_gap=0.22, scale=0.8):
        self.labels = Text(
            text="",
            parent=camera.ui,
            position=position,
            origin=(-0.5, 0.5),
            scale=scale,
            background=True,
        )
        self.values = Text(
            text="",
            parent=camera.ui,
            position=(position[0] + column_gap, position[1]),
            origin=(-0.5, 0.5),
            scale=scale,
        )
        self.body = None

    def toggle(self, body):
        """Show `body`, or hide the panel when it already shows `body`."""
        if self.body is body:
            self.clear()
        else:
            self.show(body)

    def show(self, body):
        rows = format_properties(body.attributes)
        self.labels.text = "\n".join(row.label for row in rows)
        self.values.text = "\n".join(row.text for row in rows)
        self.body = body
        logger.debug("Properties of %s:\n%s", body.name, as_table(rows))

    def clear(self):
        self.labels.text = ""
        self.values.text = ""
        self.body = None
