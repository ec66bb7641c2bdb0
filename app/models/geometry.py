"""
Preview geometry for component symbols.

Pure functions that turn a kind plus grid placement into an ordered list
of drawing primitives in device units. No Qt dependency: GUI/renderers.py
maps these primitives onto QPainter calls.

Coordinates: a grid point (gx, gy) with a view offset (ox, oy), both in
grid units, lands at device ((gx + ox) * grid_size, (gy + oy) * grid_size).
Device y grows downwards, the same direction as grid y.

Each primitive carries a colour role:
    "component"  - normal stroke colour
    "selected"   - stroke colour of the selected instance
    "background" - canvas colour, used to blank the inside of bodies
"""

from dataclasses import dataclass
from functools import partial
from typing import Optional, Union

from .component import ComponentInstance
from .exceptions import InvalidKind
from .kinds import ComponentKind, KindClass, spec_for

ROLE_COMPONENT = "component"
ROLE_SELECTED = "selected"
ROLE_BACKGROUND = "background"

LABEL_FONT_SIZE = 10
LABEL_PADDING = 3
# Baseline sits 2 device units below the label anchor
LABEL_BASELINE_SHIFT = 2


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    role: str = ROLE_COMPONENT


@dataclass(frozen=True)
class Oval:
    """Ellipse inscribed in the box at (x, y) with the given size."""

    x: float
    y: float
    width: float
    height: float
    role: str = ROLE_COMPONENT
    filled: bool = False


@dataclass(frozen=True)
class Polygon:
    points: tuple
    role: str = ROLE_COMPONENT
    filled: bool = False


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    role: str = ROLE_COMPONENT
    filled: bool = False


Primitive = Union[Line, Oval, Polygon, Rect]


def _stroke_role(selected: bool) -> str:
    return ROLE_SELECTED if selected else ROLE_COMPONENT


def _scaled_line(x, y, g, role, x1, y1, x2, y2) -> Line:
    """Line between two points given in grid units relative to (x, y)."""
    return Line(g * (x + x1), g * (y + y1), g * (x + x2), g * (y + y2), role)


def _body(points, role) -> list[Primitive]:
    """Closed body: blank the inside with the background, then stroke it."""
    points = tuple(points)
    return [Polygon(points, ROLE_BACKGROUND, filled=True), Polygon(points, role)]


# --- Per-symbol generators: (x, y) in grid units, g = grid size ---

def _ground(x, y, g, role):
    cx, cy = g * x, g * y
    return [
        Line(cx - g / 4, cy, cx + g / 4, cy, role),
        Line(cx - g / 8, cy + g / 8, cx + g / 8, cy + g / 8, role),
        Line(cx - g / 16, cy + 2 * g / 8, cx + g / 16, cy + 2 * g / 8, role),
    ]


def _vss(x, y, g, role):
    cx, cy = g * x, g * y
    tip = cy + g / 3
    wing = cy + g / 5 - g / 8
    return [
        Line(cx, cy, cx, tip, role),
        Line(cx, tip, cx - g / 8, wing, role),
        Line(cx, tip, cx + g / 8, wing, role),
    ]


def _vcc(x, y, g, role):
    cx, cy = g * x, g * y
    tip = cy - g / 3
    wing = cy - g / 5 + g / 8
    return [
        Line(cx, cy, cx, tip, role),
        Line(cx, tip, cx - g / 8, wing, role),
        Line(cx, tip, cx + g / 8, wing, role),
    ]


def _transistor(x, y, g, role):
    cx, cy = g * x, g * y
    box = (cx - g / 3, cy - g / 3, g * 2 / 3, g * 2 / 3)
    return [
        Line(cx, cy, cx, cy - g, role),
        Line(cx, cy, cx, cy + g, role),
        Line(cx, cy, cx - g, cy, role),
        Oval(*box, role=ROLE_BACKGROUND, filled=True),
        Oval(*box, role=role),
    ]


def _transformer(x, y, g, role):
    line = partial(_scaled_line, x, y, g, role)
    return [
        line(-1, 1, -0.25, 1),
        line(-1, -1, -0.25, -1),
        line(0.25, 1, 0.25, -1),
        line(-0.25, 1, -0.25, -1),
        line(1, 1, 0.25, 1),
        line(1, -1, 0.25, -1),
        Rect(g * (x - 0.35), g * (y - 0.5), 0.2 * g, g, role, filled=True),
        Rect(g * (x + 0.15), g * (y - 0.5), 0.2 * g, g, role, filled=True),
    ]


def _opamp_body(x, y, g):
    return [(g * (x + 0.8), g * y), (g * (x - 1), g * (y - 1)), (g * (x - 1), g * (y + 1))]


def _opamp_inputs(line):
    return [line(-1.5, -0.5, -1, -0.5), line(-1.5, 0.5, -1, 0.5)]


def _opamp(x, y, g, role, five_terminal=False):
    line = partial(_scaled_line, x, y, g, role)
    prims = [line(0.8, 0, 1.2, 0)]
    prims += _body(_opamp_body(x, y, g), role)
    prims += _opamp_inputs(line)
    prims += [
        line(-0.4, -0.5, -0.8, -0.5),
        line(-0.6, 0.7, -0.6, 0.3),
        line(-0.4, 0.5, -0.8, 0.5),
    ]
    if five_terminal:
        for dy in (-1, 1):
            prims.append(Oval(g * x - g / 8, g * (y + dy) - g / 8, g / 4, g / 4,
                              role, filled=True))
    return prims


def _opamp_5t(x, y, g, role):
    return _opamp(x, y, g, role, five_terminal=True)


def _differential_input_markers(line):
    return [
        line(-0.7, -0.5, -0.9, -0.5),
        line(-0.8, 0.6, -0.8, 0.4),
        line(-0.7, 0.5, -0.9, 0.5),
    ]


def _fd_opamp(x, y, g, role):
    line = partial(_scaled_line, x, y, g, role)
    prims = [line(-0.1, -0.5, 0.75, -0.5), line(-0.1, 0.5, 0.75, 0.5)]
    prims += _body(_opamp_body(x, y, g), role)
    prims += _opamp_inputs(line)
    prims += _differential_input_markers(line)
    prims += [
        line(-0.4, 0.4, -0.2, 0.4),
        line(-0.3, -0.5, -0.3, -0.3),
        line(-0.4, -0.4, -0.2, -0.4),
    ]
    return prims


def _gm_amp(x, y, g, role):
    line = partial(_scaled_line, x, y, g, role)
    body = [
        (g * (x + 0.8), g * (y + 0.5)),
        (g * (x + 0.8), g * (y - 0.5)),
        (g * (x - 1), g * (y - 1)),
        (g * (x - 1), g * (y + 1)),
    ]
    prims = [line(-0.1, 0, 1.25, 0)]
    prims += _body(body, role)
    prims += _opamp_inputs(line)
    prims += _differential_input_markers(line)
    return prims


def _buffer(x, y, g, role):
    line = partial(_scaled_line, x, y, g, role)
    body = [(g * (x + 0.3), g * y), (g * (x - 0.5), g * (y - 0.5)),
            (g * (x - 0.5), g * (y + 0.5))]
    prims = [line(0.4, 0, 0.6, 0)]
    prims += _body(body, role)
    prims.append(line(-1, 0, -0.5, 0))
    return prims


def _block(x, y, g, role):
    body = [
        (g * (x - 1), g * (y - 0.5)),
        (g * (x + 1), g * (y - 0.5)),
        (g * (x + 1), g * (y + 0.5)),
        (g * (x - 1), g * (y + 0.5)),
    ]
    return _body(body, role)


def _mixer(x, y, g, role):
    return [Oval(g * (x - 0.5), g * (y - 0.5), g, g, role)]


def _node(x, y, g, role):
    body = [
        (g * (x + 0.2), g * y),
        (g * (x + 0.2), g * (y + 0.4)),
        (g * (x - 0.2), g * (y + 0.4)),
        (g * (x - 0.2), g * y),
    ]
    return _body(body, role)


SYMBOL_GENERATORS = {
    "ground": _ground,
    "vcc": _vcc,
    "vss": _vss,
    "node": _node,
    "transistor": _transistor,
    "transformer": _transformer,
    "opamp": _opamp,
    "opamp_5t": _opamp_5t,
    "fd_opamp": _fd_opamp,
    "gm_amp": _gm_amp,
    "buffer": _buffer,
    "block": _block,
    "mixer": _mixer,
}


def symbol_primitives(kind, position, grid_size: float, selected: bool = False,
                      offset=(0.0, 0.0)) -> list[Primitive]:
    """Primitives for a point kind placed at a grid position."""
    spec = spec_for(kind)
    if spec.kind_class is not KindClass.POINT:
        raise InvalidKind(spec.kind, f"{spec.kind.name} is not a point kind")
    generator = SYMBOL_GENERATORS[spec.symbol]
    x = position[0] + offset[0]
    y = position[1] + offset[1]
    return generator(x, y, grid_size, _stroke_role(selected))


def segment_primitives(start, end, grid_size: float, selected: bool = False,
                       offset=(0.0, 0.0)) -> list[Primitive]:
    """Segment kinds preview as a single straight line."""
    g = grid_size
    ox, oy = offset
    return [Line(g * (start[0] + ox), g * (start[1] + oy),
                 g * (end[0] + ox), g * (end[1] + oy), _stroke_role(selected))]


def preview_primitives(kind, grid_size: float, position=None, start=None, end=None,
                       selected: bool = False, offset=(0.0, 0.0)) -> list[Primitive]:
    """Dispatch on the kind's class; used for in-progress placement previews."""
    if spec_for(kind).kind_class is KindClass.SEGMENT:
        return segment_primitives(start, end, grid_size, selected, offset)
    return symbol_primitives(kind, position, grid_size, selected, offset)


def instance_primitives(instance: ComponentInstance, grid_size: float,
                        selected: bool = False, offset=(0.0, 0.0)) -> list[Primitive]:
    if instance.is_path:
        return segment_primitives(instance.start, instance.end, grid_size, selected, offset)
    return symbol_primitives(instance.kind, instance.position, grid_size, selected, offset)


def label_anchor(instance: ComponentInstance, grid_size: float,
                 offset=(0.0, 0.0)) -> tuple[float, float]:
    """
    Device position the label is centred on.

    Segment labels sit on the midpoint, VCC labels above the symbol,
    GND and VSS labels below it, everything else on the position.
    """
    g = grid_size
    ox, oy = offset[0] * g, offset[1] * g
    if instance.is_path:
        (x1, y1), (x2, y2) = instance.start, instance.end
        return ((x1 * g + x2 * g) / 2 + ox, (y1 * g + y2 * g) / 2 + oy)
    x, y = instance.position
    if instance.kind == ComponentKind.VCC:
        return (x * g + ox, y * g - 2 * g / 3 + oy)
    if instance.kind in (ComponentKind.GROUND, ComponentKind.VSS):
        return (x * g + ox, y * g + 2 * g / 3 + oy)
    return (x * g + ox, y * g + oy)


def label_box(anchor, text_width: float, font_size: int = LABEL_FONT_SIZE,
              padding: int = LABEL_PADDING) -> Rect:
    """Bounding box of the opaque label background around its text."""
    lx, ly = anchor
    return Rect(
        lx - text_width / 2 - padding,
        ly + LABEL_BASELINE_SHIFT - font_size - padding,
        text_width + padding * 2,
        font_size + padding * 2,
        ROLE_BACKGROUND,
        filled=True,
    )


def label_baseline(anchor, text_width: float) -> tuple[float, float]:
    """Start of the text baseline for a centred label."""
    lx, ly = anchor
    return (lx - text_width / 2, ly + LABEL_BASELINE_SHIFT)


def snap_to_grid(x: float, y: float, grid_size: float,
                 offset=(0.0, 0.0)) -> tuple[float, float]:
    """
    Map a device position to the nearest half-grid point in grid units.

    The view offset (grid units) is subtracted so the result is a
    document coordinate.
    """
    half = grid_size / 2
    return (0.5 * round(x / half) - offset[0], 0.5 * round(y / half) - offset[1])


def bounding_box(primitives) -> Optional[tuple[float, float, float, float]]:
    """(left, top, right, bottom) of a primitive list, or None if empty."""
    xs: list[float] = []
    ys: list[float] = []
    for prim in primitives:
        if isinstance(prim, Line):
            xs += [prim.x1, prim.x2]
            ys += [prim.y1, prim.y2]
        elif isinstance(prim, Polygon):
            xs += [p[0] for p in prim.points]
            ys += [p[1] for p in prim.points]
        else:
            xs += [prim.x, prim.x + prim.width]
            ys += [prim.y, prim.y + prim.height]
    if not xs:
        return None
    return (min(xs), min(ys), max(xs), max(ys))
