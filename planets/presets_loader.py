#!/usr/bin/env python3
"""
Preset JSON loading utilities.

Preset JSON (presets/*.json):
{
  "name": "Human-friendly preset name",
  "description": "Optional description",
  "timestamp": "2000-01-01T00:00:00Z",     # UTC; naive timestamps are taken as UTC
  "earth_position": [152100000.0, 0.0, 0.0],   # km, heliocentric
  "earth_velocity": [0.0, 29.3, 0.0],          # km/s
  "moon_position": [151728000.0, 0.0, 0.0],
  "moon_velocity": [0.0, 28.278, 0.0]
}

Users can add their own JSON files into this folder and they'll be picked up by
the loader. Files that cannot be read or parsed are skipped with a warning.
"""
import json
import logging
import os
from datetime import datetime, timezone
from typing import List, Optional

from .data_models import Snapshot
from .presets import Preset
from .utils import try_float
from .vector_utils import Vec3

logger = logging.getLogger(__name__)

PRESETS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "presets")


def _read_json(path: str) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Preset file %s unreadable: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Preset file %s does not hold a JSON object", path)
        return None
    return data


def _coerce_vec3(v) -> Vec3:
    if not isinstance(v, (list, tuple)) or len(v) != 3:
        raise ValueError(f"expected a 3-element list, got {v!r}")
    out = [try_float(c) for c in v]
    if any(c is None for c in out):
        raise ValueError(f"non-numeric component in {v!r}")
    return (out[0], out[1], out[2])


def _parse_timestamp(text: str) -> datetime:
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    ts = datetime.fromisoformat(text)
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def preset_from_dict(data: dict, default_name: str = "Preset") -> Preset:
    """Build a Preset from a parsed preset JSON object; raises KeyError/ValueError/TypeError."""
    snapshot = Snapshot(
        timestamp=_parse_timestamp(data["timestamp"]),
        earth_position=_coerce_vec3(data["earth_position"]),
        earth_velocity=_coerce_vec3(data["earth_velocity"]),
        moon_position=_coerce_vec3(data["moon_position"]),
        moon_velocity=_coerce_vec3(data["moon_velocity"]),
    )
    return Preset(name=str(data.get("name") or default_name), snapshot=snapshot)


def load_preset(path: str) -> Optional[Preset]:
    """Load a single preset file, or None if it is unusable."""
    data = _read_json(path)
    if data is None:
        return None
    default_name = os.path.splitext(os.path.basename(path))[0]
    try:
        return preset_from_dict(data, default_name)
    except (KeyError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Preset file %s is malformed: %s", path, e)
        return None


def load_presets(directory: str = PRESETS_DIR) -> List[Preset]:
    """Load every *.json preset in directory, sorted by file name."""
    presets: List[Preset] = []
    if not os.path.isdir(directory):
        return presets
    for fn in sorted(os.listdir(directory)):
        if not fn.lower().endswith(".json"):
            continue
        preset = load_preset(os.path.join(directory, fn))
        if preset is not None:
            presets.append(preset)
    logger.debug("Loaded %d preset(s) from %s", len(presets), directory)
    return presets
