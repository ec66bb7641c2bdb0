"""
exporters/circuitikz_exporter.py

Export a circuit document to CircuiTikZ LaTeX code.

Grid y grows downwards while TikZ y grows upwards, so every emitted
y coordinate is negated. Multi-port symbols are wired out to the grid
with one short connector per port so neighbouring wires line up.

No Qt dependencies.
"""

import logging

from models.circuit import CircuitModel
from models.component import ComponentInstance, format_number
from models.kinds import anchor_name, breakout_rule, spec_for

logger = logging.getLogger(__name__)

MOS_STYLE_DIRECTIVES = (
    "\\ctikzset{tripoles/mos style/arrows}\n"
    "\\ctikzset{tripoles/pmos style/nocircle}\n"
)
BLOCK_STYLE = (
    "\\tikzstyle{block} = [draw, rectangle, minimum height=1cm, minimum width=2cm]\n"
)
DEFAULT_CAPTION = "Caption"


def _fmt(value):
    """Format a number for TikZ: no trailing zeros, '0' for negative zero."""
    return format_number(value)


def _coord(x, y):
    """TikZ coordinate for a grid point, with the y axis flipped."""
    return f"({_fmt(x)},{_fmt(-y)})"


def _breakout_lines(instance):
    spec = spec_for(instance.kind)
    if not spec.breakouts:
        return []
    anchor = anchor_name(instance.kind, instance.identifier)
    x, y = instance.position
    return [
        f"\\draw ({anchor}.{b.port}) to[short] {_coord(x + b.dx, y + b.dy)};"
        for b in breakout_rule(instance.kind)
    ]


def component_latex(instance: ComponentInstance) -> str:
    """
    Return the code fragment for one instance, newline terminated.

    Segments draw from start to end through their template. Points
    place their template at the position, followed by one breakout
    line per port for multi-port symbols.
    """
    spec = spec_for(instance.kind)
    if spec.is_path:
        (x1, y1), (x2, y2) = instance.start, instance.end
        draw = "\\draw [->] " if spec.arrow else "\\draw "
        return f"{draw}{_coord(x1, y1)} {instance.code_template} {_coord(x2, y2)};\n"

    x, y = instance.position
    lines = [f"\\draw {_coord(x, y + spec.y_offset)} {instance.code_template};"]
    lines.extend(_breakout_lines(instance))
    return "\n".join(lines) + "\n"


def header(wrap_in_figure=True, american_style=True, placement_hint=True):
    """Opening lines of the generated code for the chosen options."""
    if wrap_in_figure:
        figure = "\\begin{figure}[H]" if placement_hint else "\\begin{figure}"
        style = "[american]" if american_style else ""
        return (
            f"{figure}\n"
            "\\centering\n"
            f"\\begin{{circuitikz}}[>=latex']{style}\n"
            f"{BLOCK_STYLE}"
        )

    options = []
    if placement_hint:
        options.append("H")
    if american_style:
        options.append("american")
    if options:
        return f"\\begin{{circuitikz}}[{', '.join(options)}]\n"
    return "\\begin{circuitikz}\n"


def footer(wrap_in_figure=True, caption=DEFAULT_CAPTION):
    """Closing lines of the generated code (no trailing newline)."""
    if wrap_in_figure:
        return f"\\end{{circuitikz}}\n\\caption{{{caption}}}\n\\end{{figure}}"
    return "\\end{circuitikz}"


def generate(components, wrap_in_figure=True, american_style=True,
             placement_hint=True):
    """Generate CircuiTikZ code for a document.

    Args:
        components: CircuitModel or any iterable of ComponentInstance,
            emitted in iteration order
        wrap_in_figure: wrap the circuit in a LaTeX figure with a caption
        american_style: use American symbols
        placement_hint: request [H] placement

    Returns:
        str: the complete CircuiTikZ code
    """
    model = components if isinstance(components, CircuitModel) else CircuitModel(list(components))
    parts = [header(wrap_in_figure, american_style, placement_hint)]
    if model.contains_fet():
        parts.append(MOS_STYLE_DIRECTIVES)
    parts.extend(component_latex(c) for c in model)
    parts.append(footer(wrap_in_figure))
    logger.debug("Generated CircuiTikZ code for %d components", len(model))
    return "".join(parts)


def write_latex(content, filepath):
    """Write generated code to a file.

    Args:
        content: str from generate()
        filepath: output file path
    """
    with open(filepath, "w") as f:
        f.write(content)
