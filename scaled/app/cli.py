from __future__ import annotations

"""CLI for scaled: print a scale on a guitar fretboard."""

import argparse
import sys

from .. import __version__
from ..config.config import load_config, validate_config
from ..render.fretboard import display_fretboard
from ..theory.errors import ScaledError
from ..theory.scale import Scale, Tuning
from ..theory.scales import MODE_NAMES
from ..theory.tuning import tuning_intervals
from . import explain

EXAMPLES = """\
examples:
  scaled --root C --mode major
  scaled -r F# -m dorian -t d
  scaled --root C --mode major --tuning F# --drop
  scaled --root A --mode minor --tuning A#
"""


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="scaled",
        description="Display musical scales on guitar fretboard",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-r", "--root", required=True, metavar="NOTE", help="Root note of the scale (e.g., C, C#, D, F#)")
    p.add_argument("-m", "--mode", required=True, metavar="MODE", help=f"Musical mode: {', '.join(MODE_NAMES)}")
    p.add_argument(
        "-t",
        "--tuning",
        default=None,
        metavar="NOTE",
        help="Lowest string tuning note (e.g., E, D, C#, F#); the other strings follow from it (default: e)",
    )
    p.add_argument("--drop", action="store_true", default=None, help="Drop the lowest string by a whole step (e.g., Drop D, Drop C)")
    p.add_argument("--config", default=None, help="Path to YAML config")
    p.add_argument("--explain", action="store_true", help="Print how the scale and tuning were resolved")
    p.add_argument("--version", action="version", version=f"scaled {__version__}")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    cfg = validate_config(load_config(args.config))
    explain.enable(bool(args.explain or cfg["explain"]))
    explain.trace("config", {"path": args.config, "tuning": cfg["tuning"], "display": cfg["display"]})

    # CLI overrides config
    tuning_root = args.tuning if args.tuning is not None else cfg["tuning"]["root"]
    drop = args.drop if args.drop is not None else cfg["tuning"]["drop"]
    frets = int(cfg["display"]["frets"])

    try:
        scale = Scale.build(args.root, args.mode)
        explain.trace("scale", {"root": scale.root_name, "mode": scale.mode, "notes": list(scale.notes)})
        tuning = Tuning.build(tuning_root, drop)
        explain.trace(
            "tuning",
            {
                "root": tuning.root_name,
                "drop": tuning.drop,
                "intervals": list(tuning_intervals(tuning.drop)),
                "strings": list(tuning.strings),
            },
        )
    except ScaledError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Scale: {args.root.upper()} {args.mode}")
    print(f"Tuning: {tuning_root.upper()} {tuning.label()}")
    print(f"Strings: {tuning.joined()}")
    print()
    display_fretboard(scale, tuning.strings, frets)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
