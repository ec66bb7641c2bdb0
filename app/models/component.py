"""
ComponentInstance - one placed element of a schematic.

A segment instance spans two grid points (wires, passives, sources,
arrows). A point instance sits on a single grid point (supplies,
transistors, amplifiers, transformers, blocks). Instances carry no Qt
dependencies.
"""

from dataclasses import dataclass, field
from typing import Optional

from .exceptions import InvalidKind, InvalidState
from .identifiers import IdentifierAllocator
from .kinds import ComponentKind, KindClass, default_template, spec_for

Point = tuple[float, float]


def format_number(value) -> str:
    """
    Format a coordinate the way it appears in generated text.

    Integral values print without a decimal point, other values print
    without trailing zeros and negative zero prints as '0'.
    """
    value = round(float(value), 10)
    if value == int(value):
        return str(int(value))
    return f"{value:.10f}".rstrip("0").rstrip(".")


def _as_point(point) -> Point:
    x, y = point
    return (float(x), float(y))


@dataclass
class ComponentInstance:
    """
    A placed component.

    Use create_point() / create_segment() rather than the dataclass
    constructor: they validate the kind against the geometry and
    allocate the identifier for family kinds.
    """

    kind: ComponentKind
    label: str
    code_template: str
    identifier: Optional[int] = None
    _start: Optional[Point] = field(default=None, repr=False)
    _end: Optional[Point] = field(default=None, repr=False)
    _position: Optional[Point] = field(default=None, repr=False)

    @classmethod
    def create_point(cls, position, kind, allocator: IdentifierAllocator) -> "ComponentInstance":
        """
        Create a point instance at a grid position.

        Raises:
            InvalidKind: if kind is a segment kind, a command or unknown.
        """
        spec = spec_for(kind)
        if spec.kind_class is not KindClass.POINT:
            raise InvalidKind(spec.kind, f"{spec.kind.name} is not a point kind")
        identifier = allocator.next(spec.family) if spec.family is not None else None
        return cls(
            kind=spec.kind,
            label=spec.label,
            code_template=default_template(spec.kind, identifier),
            identifier=identifier,
            _position=_as_point(position),
        )

    @classmethod
    def create_segment(cls, start, end, kind, allocator: IdentifierAllocator) -> "ComponentInstance":
        """
        Create a segment instance between two grid points.

        Raises:
            InvalidKind: if kind is a point kind, a command or unknown.
        """
        spec = spec_for(kind)
        if spec.kind_class is not KindClass.SEGMENT:
            raise InvalidKind(spec.kind, f"{spec.kind.name} is not a segment kind")
        return cls(
            kind=spec.kind,
            label=spec.label,
            code_template=spec.template,
            _start=_as_point(start),
            _end=_as_point(end),
        )

    @property
    def is_path(self) -> bool:
        return spec_for(self.kind).is_path

    @property
    def start(self) -> Point:
        if self._start is None:
            raise InvalidState("start", self.kind)
        return self._start

    @property
    def end(self) -> Point:
        if self._end is None:
            raise InvalidState("end", self.kind)
        return self._end

    @property
    def position(self) -> Point:
        if self._position is None:
            raise InvalidState("position", self.kind)
        return self._position

    @property
    def anchor_point(self) -> Point:
        """Position of a point instance, midpoint of a segment instance."""
        if self.is_path:
            (x1, y1), (x2, y2) = self.start, self.end
            return ((x1 + x2) / 2, (y1 + y2) / 2)
        return self.position

    def set_label(self, text: str) -> None:
        self.label = text

    def set_code_template(self, text: str) -> None:
        self.code_template = text

    def summary(self) -> str:
        """One-line description for list views, e.g. 'R [1,2] to [3,2]'."""
        if self.is_path:
            (x1, y1), (x2, y2) = self.start, self.end
            return (f"{self.label} [{format_number(x1)},{format_number(y1)}] "
                    f"to [{format_number(x2)},{format_number(y2)}]")
        x, y = self.position
        return f"{self.label} [{format_number(x)},{format_number(y)}]"


def create_instance(kind, allocator: IdentifierAllocator, position=None, start=None,
                    end=None) -> ComponentInstance:
    """
    Build an instance of either class from a kind and matching geometry.

    Segment kinds need start and end; point kinds need position.
    """
    if spec_for(kind).is_path:
        if start is None or end is None:
            raise InvalidKind(kind, "segment kinds need start and end points")
        return ComponentInstance.create_segment(start, end, kind, allocator)
    if position is None:
        raise InvalidKind(kind, "point kinds need a position")
    return ComponentInstance.create_point(position, kind, allocator)
