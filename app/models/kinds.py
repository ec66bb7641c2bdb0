"""
Component kind registry.

This is the single source of truth for everything that depends on a
component kind: its class (segment or point), default label, default
CircuiTikZ template, identifier family, anchor prefix, breakout wiring
and the preview symbol used by the geometry generator.

The numeric values of ComponentKind are the codes persisted in markup
files and must never change.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from .exceptions import InvalidKind

# Replaced with the allocated identifier when a default template is built
ID_PLACEHOLDER = "#"


class ComponentKind(IntEnum):
    """Closed catalog of placeable component kinds."""

    WIRE = 0
    RESISTOR = 1
    CAPACITOR = 2
    INDUCTOR = 3
    DIODE = 4
    VOLTAGE_SOURCE = 5
    CURRENT_SOURCE = 6
    GROUND = 7
    VCC = 8
    VSS = 9
    NPN = 10
    PNP = 11
    NMOS = 12
    PMOS = 13
    NIGBT = 14
    PIGBT = 15
    OPAMP_3T = 16
    OPAMP_5T = 17
    TRANSFORMER = 18
    TRANSFORMER_CORE = 19
    SWITCH_NOS = 20
    BUFFER = 21
    FD_OPAMP = 22
    GM_AMP = 23
    BLOCK = 24
    MIXER = 25
    ARROW = 26
    NEGATIVE_ARROW = 27
    NODE = 28
    IMPEDANCE = 29
    SACDC = 30
    SDCAC = 31


class EditCommand(IntEnum):
    """Editing pseudo-kinds. Never valid for constructing an instance."""

    DELETE = 1000
    CANCEL = 1001


class KindClass(Enum):
    """Geometry class of a kind."""

    SEGMENT = "segment"
    POINT = "point"

    @property
    def is_path(self) -> bool:
        return self is KindClass.SEGMENT


class IdentifierFamily(Enum):
    """Groups of kinds that share one identifier counter."""

    TRANSISTOR = "transistor"
    OPAMP = "opamp"
    TRANSFORMER = "transformer"
    BUFFER = "buffer"
    BLOCK = "block"
    MIXER = "mixer"


# Anchor name prefix used in templates and breakout lines
FAMILY_PREFIXES = {
    IdentifierFamily.TRANSISTOR: "Q",
    IdentifierFamily.OPAMP: "opamp",
    IdentifierFamily.TRANSFORMER: "T",
    IdentifierFamily.BUFFER: "buffer",
    IdentifierFamily.BLOCK: "block",
    IdentifierFamily.MIXER: "mixer",
}


@dataclass(frozen=True)
class Breakout:
    """One port wired out to a grid point at (x + dx, y + dy)."""

    port: str
    dx: float
    dy: float


@dataclass(frozen=True)
class KindSpec:
    """Static description of a single component kind."""

    kind: ComponentKind
    kind_class: KindClass
    label: str
    template: str
    symbol: str
    family: Optional[IdentifierFamily] = None
    breakouts: tuple = ()
    arrow: bool = False
    fet: bool = False
    y_offset: float = 0.0

    @property
    def is_path(self) -> bool:
        return self.kind_class.is_path


_BJT_NPN = (Breakout("C", 0, -1), Breakout("E", 0, 1), Breakout("B", -1, 0))
_BJT_PNP = (Breakout("E", 0, -1), Breakout("C", 0, 1), Breakout("B", -1, 0))
_FET_N = (Breakout("D", 0, -1), Breakout("S", 0, 1), Breakout("G", -1, 0))
_FET_P = (Breakout("S", 0, -1), Breakout("D", 0, 1), Breakout("G", -1, 0))
_TRANSFORMER = (
    Breakout("A1", -1, -1),
    Breakout("A2", -1, 1),
    Breakout("B1", 1, -1),
    Breakout("B2", 1, 1),
)
_OPAMP = (Breakout("-", -1.5, -0.5), Breakout("+", -1.5, 0.5))
_OPAMP_5T = (Breakout("-", -3, -1), Breakout("+", -3, 1))
_BUFFER = (Breakout("in", -1, 0),)


def _segment(kind, label, template, arrow=False):
    return KindSpec(kind, KindClass.SEGMENT, label, template, "segment", arrow=arrow)


def _point(kind, label, template, symbol, family=None, breakouts=(), fet=False,
           y_offset=0.0):
    return KindSpec(kind, KindClass.POINT, label, template, symbol, family=family,
                    breakouts=breakouts, fet=fet, y_offset=y_offset)


_T = IdentifierFamily.TRANSISTOR
_OP = IdentifierFamily.OPAMP
_TR = IdentifierFamily.TRANSFORMER
_BLK = IdentifierFamily.BLOCK

KIND_SPECS = {
    spec.kind: spec
    for spec in (
        # Segment kinds
        _segment(ComponentKind.WIRE, "Wire", "to[short]"),
        _segment(ComponentKind.RESISTOR, "R", "to[R,l=$R$]"),
        _segment(ComponentKind.CAPACITOR, "C", "to[C,l=$C$]"),
        _segment(ComponentKind.INDUCTOR, "L", "to[L,l=$L$]"),
        _segment(ComponentKind.DIODE, "D", "to[D,l=$D$]"),
        _segment(ComponentKind.VOLTAGE_SOURCE, "V", "to[V,l=$V$]"),
        _segment(ComponentKind.CURRENT_SOURCE, "I", "to[isource,l=$I$]"),
        _segment(ComponentKind.SWITCH_NOS, "NOS", "to[nos]"),
        _segment(ComponentKind.ARROW, "->", "--", arrow=True),
        _segment(ComponentKind.NEGATIVE_ARROW, "-> -",
                 "-- node[at end, xshift=0.25cm, yshift=0.25cm] {$-$}", arrow=True),
        _segment(ComponentKind.IMPEDANCE, "Z", "to[european resistor,l=$Z$]"),
        # Supply and annotation points
        _point(ComponentKind.GROUND, "GND", "node[ground]{}", "ground"),
        _point(ComponentKind.VCC, "VCC", "node[vcc]{VCC}", "vcc"),
        _point(ComponentKind.VSS, "VSS", "node[vss]{VSS}", "vss"),
        _point(ComponentKind.NODE, "x", "node[] {$x$}", "node", y_offset=0.3),
        # Transistors
        _point(ComponentKind.NPN, "NPN Transistor", "node[npn](Q#){Q#}",
               "transistor", _T, _BJT_NPN),
        _point(ComponentKind.PNP, "PNP Transistor", "node[pnp](Q#){Q#}",
               "transistor", _T, _BJT_PNP),
        _point(ComponentKind.NMOS, "N-MOS", "node[nmos](Q#){Q#}",
               "transistor", _T, _FET_N, fet=True),
        _point(ComponentKind.PMOS, "P-MOS", "node[pmos](Q#){Q#}",
               "transistor", _T, _FET_P, fet=True),
        _point(ComponentKind.NIGBT, "N-IGBT", "node[nigbt](Q#){Q#}",
               "transistor", _T, _FET_N),
        _point(ComponentKind.PIGBT, "P-IGBT", "node[pigbt](Q#){Q#}",
               "transistor", _T, _FET_P),
        # Amplifiers
        _point(ComponentKind.OPAMP_3T, "3T OpAmp",
               "node[op amp,scale=1.02] (opamp#) {}", "opamp", _OP, _OPAMP),
        _point(ComponentKind.OPAMP_5T, "5-Term Opamp",
               "node[op amp,scale=2.04] (opamp#) {}", "opamp_5t", _OP, _OPAMP_5T),
        _point(ComponentKind.FD_OPAMP, "FD OpAmp",
               "node[fd op amp, scale=1.02] (opamp#) {}", "fd_opamp", _OP, _OPAMP),
        _point(ComponentKind.GM_AMP, "Gm cell",
               "node[gm amp, scale=1.02] (opamp#) {}", "gm_amp", _OP, _OPAMP),
        _point(ComponentKind.BUFFER, "Buffer",
               "node[buffer, scale=1] (buffer#) {}", "buffer",
               IdentifierFamily.BUFFER, _BUFFER),
        # Transformers
        _point(ComponentKind.TRANSFORMER, "Transformer",
               "node[transformer,scale=.952] (T#) {}", "transformer", _TR, _TRANSFORMER),
        _point(ComponentKind.TRANSFORMER_CORE, "Transformer w/ Core",
               "node[transformer core,scale=.952] (T#) {}", "transformer", _TR,
               _TRANSFORMER),
        # Blocks
        _point(ComponentKind.BLOCK, "Block", "node[block, scale=1] (block#) {}",
               "block", _BLK),
        _point(ComponentKind.SACDC, "SACDC", "node[sacdc, scale=1] (block#) {}",
               "block", _BLK),
        _point(ComponentKind.SDCAC, "SDCAC", "node[sdcac, scale=1] (block#) {}",
               "block", _BLK),
        _point(ComponentKind.MIXER, "X", "node[mixer, scale=1] (mixer#) {}",
               "mixer", IdentifierFamily.MIXER),
    )
}


def coerce_kind(value) -> ComponentKind:
    """
    Convert a numeric code or ComponentKind into a ComponentKind.

    Raises:
        InvalidKind: for editing pseudo-kinds, unknown codes and
            non-integer values.
    """
    if isinstance(value, ComponentKind):
        return value
    if isinstance(value, EditCommand) or isinstance(value, bool):
        raise InvalidKind(value)
    if not isinstance(value, int):
        raise InvalidKind(value)
    try:
        return ComponentKind(value)
    except ValueError:
        raise InvalidKind(value) from None


def spec_for(kind) -> KindSpec:
    """Return the registry entry for a kind (or its numeric code)."""
    return KIND_SPECS[coerce_kind(kind)]


def classify(kind) -> KindClass:
    """Return whether a kind is a segment or a point kind."""
    return spec_for(kind).kind_class


def is_path_kind(kind) -> bool:
    return spec_for(kind).is_path


def identifier_family(kind) -> Optional[IdentifierFamily]:
    """Return the identifier family of a kind, or None if it has none."""
    return spec_for(kind).family


def anchor_name(kind, identifier: int) -> str:
    """Return the TikZ anchor name (e.g. 'Q3', 'opamp1') for an instance."""
    family = identifier_family(kind)
    if family is None:
        raise InvalidKind(kind, f"{kind!r} has no identifier family")
    return f"{FAMILY_PREFIXES[family]}{identifier}"


def default_template(kind, identifier: Optional[int] = None) -> str:
    """
    Return the default CircuiTikZ template for a kind.

    For family kinds the allocated identifier is substituted into the
    anchor name; passing None for a family kind raises InvalidKind.
    """
    spec = spec_for(kind)
    if spec.family is None:
        return spec.template
    if identifier is None:
        raise InvalidKind(kind, f"{spec.kind.name} requires an identifier")
    return spec.template.replace(ID_PLACEHOLDER, str(identifier))


def default_label(kind) -> str:
    return spec_for(kind).label


def breakout_rule(kind) -> tuple:
    """Return the breakout ports of a kind (empty for kinds without any)."""
    return spec_for(kind).breakouts


def is_fet(kind) -> bool:
    """True for MOSFET kinds, which need the MOS style directives."""
    return spec_for(kind).fet


def kinds_of_class(kind_class: KindClass) -> list:
    """Return all kinds of one class in code order (used by pickers)."""
    return [k for k in ComponentKind if KIND_SPECS[k].kind_class is kind_class]
