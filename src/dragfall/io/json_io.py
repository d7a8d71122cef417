# MIT License (see LICENSE)
"""
JSON serialization for session configuration and run history.

Only configuration is read back; a run itself is always recomputed from
its parameters. The history export is one-way, for charting front ends.

JSON Schema Overview:
---------------------
{
  "params": {                      # Optional, defaults shown
    "mass": float,                 # kg, > 0, default 1.0
    "radius": float,               # m, > 0, default 0.5
    "drag_coefficient": float,     # >= 0, default 0.47
    "material": string             # Optional preset name, overrides
                                   # drag_coefficient (see materials.py)
  },
  "config": {                      # Optional, defaults shown
    "fixed_step": float,           # s, default 0.05
    "tick_interval": float,        # s, default 0.05
    "px_per_meter": float,         # default 1.5
    "start_offset_px": float,      # default 60
    "ground_px": float,            # default 870
    "pixel_radius_scale": float    # default 50
  }
}

History format:
---------------
[{"t": float, "v": float, "s": float}, ...]
"""
from __future__ import annotations
import json
import logging
from dataclasses import asdict, fields
from typing import Any

from ..types import SimulationParameters, Snapshot, InvalidParameters
from ..materials import drag_coefficient_for
from ..session import Session, SessionConfig

logger = logging.getLogger(__name__)


def load_session_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a session file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_session(path: str) -> Session:
    """
    Load a Session from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        InvalidParameters: If the body parameters are out of range.
        ValueError: If the config values are invalid.
    """
    logger.info(f"Loading session from: {path}")
    return session_from_json(load_session_raw(path))


def session_from_json(data: dict[str, Any]) -> Session:
    """Construct a Session from a parsed JSON dictionary."""
    params = params_from_json(data.get("params", {}))
    config = config_from_json(data.get("config", {}))
    return Session(params=params, config=config)


def params_from_json(d: dict[str, Any]) -> SimulationParameters:
    """
    Parse body parameters, falling back to defaults for missing fields.

    A "material" entry takes precedence over "drag_coefficient".

    Raises:
        InvalidParameters: If a value is not a number or is out of range.
    """
    defaults = SimulationParameters()
    try:
        mass = float(d.get("mass", defaults.mass))
        radius = float(d.get("radius", defaults.radius))
        cd = float(d.get("drag_coefficient", defaults.drag_coefficient))
    except (TypeError, ValueError) as e:
        raise InvalidParameters(f"Parameters must be numbers: {e}") from e

    if "material" in d:
        cd = drag_coefficient_for(str(d["material"]))

    params = SimulationParameters(mass=mass, radius=radius, drag_coefficient=cd)
    params.validate()
    return params


def params_to_json(params: SimulationParameters) -> dict[str, Any]:
    """Serialize body parameters to a dictionary."""
    return asdict(params)


def config_from_json(d: dict[str, Any]) -> SessionConfig:
    """
    Parse a SessionConfig. Unknown keys are ignored for forward compatibility.

    Raises:
        ValueError: If a value is not a number or is out of range.
    """
    known = {f.name for f in fields(SessionConfig)}
    try:
        kwargs = {k: float(v) for k, v in d.items() if k in known}
    except TypeError as e:
        raise ValueError(f"Config values must be numbers: {e}") from e
    return SessionConfig(**kwargs)


def config_to_json(config: SessionConfig) -> dict[str, Any]:
    """
    Serialize a SessionConfig, skipping values equal to the defaults.
    """
    defaults = SessionConfig()
    return {
        f.name: getattr(config, f.name)
        for f in fields(SessionConfig)
        if getattr(config, f.name) != getattr(defaults, f.name)
    }


def session_to_json(session: Session) -> dict[str, Any]:
    """Serialize the parameters and config of a Session."""
    result: dict[str, Any] = {"params": params_to_json(session.params)}
    config = config_to_json(session.config)
    if config:
        result["config"] = config
    return result


def save_session(session: Session, path: str, indent: int = 2) -> None:
    """Save the parameters and config of a Session to a JSON file on disk."""
    data = session_to_json(session)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.info(f"Session saved to: {path}")


def history_to_json(history: tuple[Snapshot, ...]) -> list[dict[str, float]]:
    """Serialize recorded snapshots as a list of {t, v, s} records."""
    return [
        {"t": s.elapsed_time, "v": s.velocity, "s": s.displacement}
        for s in history
    ]
