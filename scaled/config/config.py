from __future__ import annotations

"""Configuration loading and validation for scaled.

This module loads YAML configuration, applies defaults, and validates
that tuning and display values are usable before the CLI reads them.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import sys

import yaml

from ..theory.errors import InvalidNote
from ..theory.note_utils import normalize_note


DEFAULT_TUNING_ROOT = "e"
DEFAULT_FRETS = 12
MAX_FRETS = 24


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"ERROR: Could not parse config file {path}: {e}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"ERROR: Config file {path} must contain a mapping", file=sys.stderr)
        sys.exit(1)
    return data


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Invalid values are reported with a warning and replaced by their
    defaults; a bad config never stops a run on its own.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    # Shallow defaults for missing sections
    for section in ("tuning", "display"):
        if not isinstance(cfg.get(section), dict):
            if section in cfg:
                print(f"WARNING: Config section '{section}' must be a mapping, using defaults.")
            cfg[section] = {}

    tuning = cfg["tuning"]
    display = cfg["display"]

    tuning.setdefault("root", DEFAULT_TUNING_ROOT)
    tuning.setdefault("drop", False)
    display.setdefault("frets", DEFAULT_FRETS)
    cfg.setdefault("explain", False)

    root = tuning.get("root")
    try:
        normalize_note(str(root))
    except InvalidNote:
        print(f"WARNING: Unsupported tuning root '{root}', using '{DEFAULT_TUNING_ROOT}'.")
        tuning["root"] = DEFAULT_TUNING_ROOT
    else:
        tuning["root"] = str(root)

    if not isinstance(tuning.get("drop"), bool):
        print(f"WARNING: tuning.drop must be true or false, got '{tuning.get('drop')}'; using false.")
        tuning["drop"] = False

    frets = display.get("frets")
    # bool is an int subclass; reject it explicitly
    if isinstance(frets, bool) or not isinstance(frets, int) or not 1 <= frets <= MAX_FRETS:
        print(f"WARNING: display.frets must be an integer 1..{MAX_FRETS}, got '{frets}'; using {DEFAULT_FRETS}.")
        display["frets"] = DEFAULT_FRETS

    if not isinstance(cfg.get("explain"), bool):
        print(f"WARNING: explain must be true or false, got '{cfg.get('explain')}'; using false.")
        cfg["explain"] = False

    return cfg
