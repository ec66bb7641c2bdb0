"""
Command-line interface for CircuiTikZ tool batch operations.

Convert saved schematics to CircuiTikZ code and inspect them without
the GUI.

Usage::

    python -m cli export circuit.ckt
    python -m cli export circuit.ckt --no-figure --european --output circuit.tex
    python -m cli export circuit.ckt --format markup --output normalized.ckt
    python -m cli list circuit.ckt
"""

import argparse
import logging
import sys
from pathlib import Path

from exporters.circuitikz_exporter import generate
from exporters.markup_codec import dump_document, load_document
from models.circuit import CircuitModel

__version__ = "1.0.0"


def try_load_circuit(filepath: str) -> tuple[CircuitModel | None, str]:
    """Load a markup circuit file without exiting.

    Args:
        filepath: Path to the circuit markup file.

    Returns:
        (model, "") on success, or (None, error_message) on failure.
    """
    path = Path(filepath)
    if not path.exists():
        return None, f"file not found: {filepath}"

    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        return None, f"could not read {filepath}: {e}"

    model = CircuitModel()
    skipped = load_document(text, model)
    if skipped:
        print(f"Warning: skipped {skipped} unreadable record(s) in {filepath}", file=sys.stderr)
    return model, ""


def load_circuit(filepath: str) -> CircuitModel:
    """Load a markup circuit file.

    Raises:
        SystemExit: On file read errors.
    """
    model, error = try_load_circuit(filepath)
    if model is None:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)
    return model


def _write_output(text: str, output, description: str) -> int:
    if output:
        try:
            Path(output).write_text(text)
        except OSError as e:
            print(f"Error writing {output}: {e}", file=sys.stderr)
            return 1
        print(f"{description} written to {output}", file=sys.stderr)
    else:
        print(text)
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Export circuit as CircuiTikZ code or normalized markup."""
    model = load_circuit(args.circuit)

    if args.format == "tex":
        latex = generate(
            model,
            wrap_in_figure=not args.no_figure,
            american_style=not args.european,
            placement_hint=not args.no_placement_hint,
        )
        return _write_output(latex, args.output, "CircuiTikZ code")

    return _write_output(dump_document(model).rstrip("\n"), args.output, "Markup")


def cmd_list(args: argparse.Namespace) -> int:
    """Print one summary line per component."""
    model = load_circuit(args.circuit)
    for index, summary in enumerate(model.summaries()):
        print(f"{index}: {summary}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="circuitikz-tool",
        description="CircuiTikZ tool batch operations: export and inspect saved schematics.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # export
    exp_parser = subparsers.add_parser("export", help="Export circuit as CircuiTikZ code")
    exp_parser.add_argument("circuit", help="Path to circuit markup file")
    exp_parser.add_argument(
        "--format", "-f", choices=["tex", "markup"], default="tex", help="Export format (default: tex)"
    )
    exp_parser.add_argument("--output", "-o", help="Write output to file instead of stdout")
    exp_parser.add_argument("--no-figure", action="store_true", help="Do not wrap in a figure environment")
    exp_parser.add_argument("--european", action="store_true", help="Use European instead of American symbols")
    exp_parser.add_argument("--no-placement-hint", action="store_true", help="Omit the [H] placement hint")

    # list
    list_parser = subparsers.add_parser("list", help="List the components of a circuit")
    list_parser.add_argument("circuit", help="Path to circuit markup file")

    return parser


def main(argv=None) -> int:
    """CLI entry point. Returns exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "export": cmd_export,
        "list": cmd_list,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
