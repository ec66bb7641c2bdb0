"""Tests for GUI/renderers.py - painting primitives with QPainter."""

import pytest
from GUI.renderers import (
    PrimitiveRenderer,
    _registry,
    get_renderer,
    paint_cursor,
    paint_grid,
    paint_label,
    paint_primitives,
    register,
    render_document,
    render_preview,
    zoomed_grid_size,
)
from GUI.styles import ZOOM_MIN, DarkTheme, LightTheme
from models.circuit import CircuitModel
from models.component import ComponentInstance
from models.geometry import Line, Oval, Polygon, Rect
from models.kinds import ComponentKind
from PyQt6.QtGui import QColor, QImage, QPainter

SIZE = 200


@pytest.fixture
def image(qapp):
    img = QImage(SIZE, SIZE, QImage.Format.Format_RGB32)
    img.fill(QColor("#FFFFFF"))
    return img


def _paint(image, fn, *args, **kwargs):
    painter = QPainter(image)
    try:
        fn(painter, *args, **kwargs)
    finally:
        painter.end()


def _colours(image):
    return {image.pixelColor(x, y).name() for x in range(image.width())
            for y in range(image.height())}


class TestRegistry:
    @pytest.mark.parametrize("primitive_type", [Line, Oval, Polygon, Rect])
    def test_builtin_renderers(self, primitive_type):
        assert isinstance(get_renderer(primitive_type), PrimitiveRenderer)

    def test_unknown_type_raises(self):
        with pytest.raises(KeyError):
            get_renderer(str)

    def test_custom_renderer_dispatch(self, image):
        class Marker:
            role = "component"

        drawn = []

        class MarkerRenderer(PrimitiveRenderer):
            def draw(self, painter, primitive):
                drawn.append(primitive)

        register(Marker, MarkerRenderer())
        try:
            marker = Marker()
            _paint(image, paint_primitives, [marker], LightTheme())
            assert drawn == [marker]
        finally:
            del _registry[Marker]


class TestPaintPrimitives:
    def test_line_uses_component_colour(self, image):
        _paint(image, paint_primitives, [Line(10, 50, 150, 50)], LightTheme())
        assert "#000000" in _colours(image)

    def test_selected_role_colour(self, image):
        theme = LightTheme()
        _paint(image, paint_primitives, [Line(10, 50, 150, 50, "selected")], theme)
        assert theme.color_hex("selected").lower() in _colours(image)

    def test_filled_background_blanks_area(self, image):
        theme = DarkTheme()
        _paint(image, paint_primitives, [Rect(0, 0, 100, 100, "background", filled=True)], theme)
        assert image.pixelColor(50, 50).name() == theme.color_hex("background").lower()
        assert image.pixelColor(150, 150).name() == "#ffffff"


class TestLabels:
    def test_label_box_is_opaque(self, image, allocator):
        theme = LightTheme()
        image.fill(QColor("#00FF00"))
        gnd = ComponentInstance.create_point((2, 2), ComponentKind.GROUND, allocator)
        _paint(image, paint_label, gnd, 50, (0, 0), theme)
        colours = _colours(image)
        assert "#ffffff" in colours
        assert "#000000" in colours


class TestRenderDocument:
    def test_empty_document_paints_nothing(self, image):
        _paint(image, render_document, CircuitModel(), 50, theme=LightTheme())
        assert _colours(image) == {"#ffffff"}

    def test_paints_every_instance(self, image, amplifier_circuit):
        _paint(image, render_document, amplifier_circuit, 20, (1, 1), theme=LightTheme())
        assert "#000000" in _colours(image)

    def test_selection_highlighted(self, image, amplifier_circuit):
        theme = LightTheme()
        selected = theme.color_hex("selected").lower()
        _paint(image, render_document, amplifier_circuit, 20, (1, 1), theme=theme)
        assert selected not in _colours(image)

        image.fill(QColor("#FFFFFF"))
        _paint(image, render_document, amplifier_circuit, 20, (1, 1),
               selected_index=2, theme=theme)
        assert selected in _colours(image)


class TestRenderPreview:
    def test_point_preview(self, image):
        _paint(image, render_preview, ComponentKind.NPN, 40, (2, 2), theme=LightTheme())
        assert "#000000" in _colours(image)

    def test_segment_preview_from_start(self, image):
        _paint(image, render_preview, ComponentKind.RESISTOR, 40, (4, 1),
               start=(0, 0), origin_offset=(1, 1), theme=LightTheme())
        assert "#000000" in {image.pixelColor(100, y).name() for y in (39, 40, 41)}
        assert image.pixelColor(100, 100).name() == "#ffffff"


class TestGridAndCursor:
    def test_grid_fills_background(self, image):
        theme = DarkTheme()
        _paint(image, paint_grid, 50, SIZE, SIZE, (2, 2), theme)
        assert image.pixelColor(10, 10).name() == theme.color_hex("background").lower()
        assert theme.color_hex("grid").lower() in _colours(image)

    def test_cursor_marker(self, image):
        _paint(image, paint_cursor, (2, 2), 50, LightTheme())
        assert image.pixelColor(100, 100).name() == "#000000"


class TestZoom:
    def test_wheel_out_shrinks_grid(self):
        assert zoomed_grid_size(50, 1) == 49
        assert zoomed_grid_size(50, 3) == 47

    def test_wheel_in_grows_grid(self):
        assert zoomed_grid_size(50, -2) == 52

    def test_zoom_out_stops_at_floor(self):
        assert zoomed_grid_size(ZOOM_MIN + 1, 1) == ZOOM_MIN
        assert zoomed_grid_size(ZOOM_MIN, 1) == ZOOM_MIN

    def test_zoom_in_from_floor(self):
        assert zoomed_grid_size(ZOOM_MIN, -1) == ZOOM_MIN + 1
