"""Strategy-pattern renderers for schematic drawing primitives.

models.geometry describes every symbol as Qt-free Line / Oval / Polygon /
Rect primitives. Each primitive type has a renderer registered in a
type-keyed registry; ``paint_primitives`` dispatches through
``get_renderer``. The remaining helpers paint labels, the grid and whole
documents onto a QPainter.
"""

from abc import ABC, abstractmethod
from typing import Optional

from models.circuit import CircuitModel
from models.component import ComponentInstance
from models.geometry import (LABEL_FONT_SIZE, LABEL_PADDING, Line, Oval, Polygon,
                             Rect, instance_primitives, label_anchor,
                             label_baseline, label_box, preview_primitives)
from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QFontMetricsF, QPainter, QPolygonF

from .styles import (CURSOR_MARKER_SIZE, GRID_DOT_DIVISIONS, ORIGIN_MARKER_SIZE,
                     ZOOM_MIN, ZOOM_STEP, theme_manager)

# ---------------------------------------------------------------------------
# Abstract base & registry
# ---------------------------------------------------------------------------


class PrimitiveRenderer(ABC):
    """Base class for all primitive renderers."""

    @abstractmethod
    def draw(self, painter: QPainter, primitive) -> None:
        """Draw *primitive* with the pen or brush already set on *painter*."""


_registry: dict[type, PrimitiveRenderer] = {}


def register(primitive_type: type, renderer: PrimitiveRenderer):
    """Register *renderer* for *primitive_type*."""
    _registry[primitive_type] = renderer


def get_renderer(primitive_type: type) -> PrimitiveRenderer:
    """Look up the renderer for *primitive_type*.

    Raises ``KeyError`` if no renderer is registered.
    """
    renderer = _registry.get(primitive_type)
    if renderer is not None:
        return renderer
    raise KeyError(f"No renderer for {primitive_type.__name__!r}")


class LineRenderer(PrimitiveRenderer):
    def draw(self, painter, primitive):
        painter.drawLine(QPointF(primitive.x1, primitive.y1),
                         QPointF(primitive.x2, primitive.y2))


class OvalRenderer(PrimitiveRenderer):
    def draw(self, painter, primitive):
        painter.drawEllipse(QRectF(primitive.x, primitive.y,
                                   primitive.width, primitive.height))


class PolygonRenderer(PrimitiveRenderer):
    def draw(self, painter, primitive):
        painter.drawPolygon(QPolygonF([QPointF(x, y) for x, y in primitive.points]))


class RectRenderer(PrimitiveRenderer):
    def draw(self, painter, primitive):
        painter.drawRect(QRectF(primitive.x, primitive.y,
                                primitive.width, primitive.height))


register(Line, LineRenderer())
register(Oval, OvalRenderer())
register(Polygon, PolygonRenderer())
register(Rect, RectRenderer())

# ---------------------------------------------------------------------------
# Painting helpers
# ---------------------------------------------------------------------------


def _apply_role(painter, primitive, theme):
    """Filled primitives paint an area in their colour, others a stroke."""
    if getattr(primitive, "filled", False):
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(theme.brush(primitive.role))
    else:
        painter.setPen(theme.pen(primitive.role))
        painter.setBrush(Qt.BrushStyle.NoBrush)


def paint_primitives(painter: QPainter, primitives, theme=None) -> None:
    """Paint primitives in order using the colours of *theme*."""
    theme = theme or theme_manager.current_theme
    for primitive in primitives:
        _apply_role(painter, primitive, theme)
        get_renderer(type(primitive)).draw(painter, primitive)


def paint_label(painter: QPainter, instance: ComponentInstance, grid_size: float,
                offset=(0.0, 0.0), theme=None) -> None:
    """Paint an instance label on an opaque, outlined box."""
    theme = theme or theme_manager.current_theme
    painter.setFont(theme.font("label"))
    text_width = QFontMetricsF(painter.font()).horizontalAdvance(instance.label)

    anchor = label_anchor(instance, grid_size, offset)
    box = label_box(anchor, text_width, LABEL_FONT_SIZE, LABEL_PADDING)
    paint_primitives(painter, [box], theme)
    outline = Rect(box.x, box.y, box.width, box.height, "component")
    paint_primitives(painter, [outline], theme)

    painter.setPen(theme.pen("component"))
    painter.drawText(QPointF(*label_baseline(anchor, text_width)), instance.label)


def paint_grid(painter: QPainter, grid_size: float, width: int, height: int,
               origin_offset=(0, 0), theme=None) -> None:
    """Paint the background, grid dots and the origin marker."""
    theme = theme or theme_manager.current_theme
    painter.fillRect(QRectF(0, 0, width, height), theme.color("background"))

    painter.setPen(theme.pen("grid"))
    step = grid_size / GRID_DOT_DIVISIONS
    x = 0.0
    while x < width:
        y = 0.0
        while y < height:
            painter.drawPoint(QPointF(x, y))
            y += step
        x += step

    ox, oy = origin_offset[0] * grid_size, origin_offset[1] * grid_size
    half = ORIGIN_MARKER_SIZE / 2
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(theme.brush("selected"))
    painter.drawEllipse(QRectF(ox - half, oy - half, ORIGIN_MARKER_SIZE, ORIGIN_MARKER_SIZE))


def paint_cursor(painter: QPainter, grid_point, grid_size: float, theme=None) -> None:
    """Mark the pointer position snapped to the grid."""
    theme = theme or theme_manager.current_theme
    half = CURSOR_MARKER_SIZE / 2
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(theme.brush("component"))
    painter.drawEllipse(QRectF(grid_point[0] * grid_size - half,
                               grid_point[1] * grid_size - half,
                               CURSOR_MARKER_SIZE, CURSOR_MARKER_SIZE))


def render_document(painter: QPainter, model: CircuitModel, grid_size: float,
                    origin_offset=(0, 0), selected_index: Optional[int] = None,
                    theme=None) -> None:
    """Paint every instance in document order, highlighting the selection."""
    theme = theme or theme_manager.current_theme
    for index, instance in enumerate(model):
        selected = index == selected_index
        paint_primitives(painter, instance_primitives(instance, grid_size, selected,
                                                      origin_offset), theme)
        paint_label(painter, instance, grid_size, origin_offset, theme)


def render_preview(painter: QPainter, kind, grid_size: float, position,
                   start=None, origin_offset=(0, 0), theme=None) -> None:
    """
    Paint the placement preview for *kind* at the pointer position.

    For segment kinds *start* is the document point where the drag began
    and *position* the current pointer point, both in view grid units.
    """
    if start is not None:
        start = (start[0] + origin_offset[0], start[1] + origin_offset[1])
    primitives = preview_primitives(kind, grid_size, position=position,
                                    start=start, end=position)
    paint_primitives(painter, primitives, theme)


def zoomed_grid_size(grid_size: float, wheel_steps: int) -> float:
    """
    Apply mouse wheel steps to the grid size.

    Positive steps zoom out. Zooming out stops once the grid size is at
    or below ZOOM_MIN; zooming in is unbounded.
    """
    if grid_size > ZOOM_MIN or wheel_steps < 0:
        return grid_size - wheel_steps * ZOOM_STEP
    return grid_size
