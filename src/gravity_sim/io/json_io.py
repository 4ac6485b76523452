# MIT License (see LICENSE)
"""
JSON loading of initial simulation configuration.

Only initial conditions and global parameters are read or written; the
running state of a simulation is never saved.

JSON Schema Overview:
---------------------
{
  "G": float,                      # Default: 1.0
  "dt": float,                     # Fixed timestep, default: 0.1
  "scheme": string,                # "semi_implicit" (default) or "explicit"
  "softening": float,              # Plummer length, default: 0 (off)
  "min_separation": float | null,  # Close-approach guard, default: null
  "bodies": [
    {
      "position": [x, y],          # Required
      "velocity": [vx, vy],        # Default: [0, 0]
      "mass": float                # Default: 1000, must be > 0
    }
  ]
}
"""
from __future__ import annotations
from typing import Any

import json
import logging

from ..config import BodyConfig, SimulationConfig
from ..constants import DEFAULT_DT, DEFAULT_MASS, G as DEFAULT_G, SEMI_IMPLICIT
from ..simulation import Simulation

logger = logging.getLogger(__name__)


def load_config_raw(path: str) -> dict[str, Any]:
    """Read the raw JSON document without building any objects."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_config(path: str) -> SimulationConfig:
    """
    Load a SimulationConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If a body lacks a position or a value is out of range.
    """
    config = config_from_json(load_config_raw(path))
    logger.debug("Loaded %d bodies from %s", len(config.bodies), path)
    return config


def load_simulation(path: str) -> Simulation:
    """Load a JSON configuration and build a ready-to-run Simulation."""
    return Simulation.from_config(load_config(path))


def body_config_from_json(d: dict[str, Any]) -> BodyConfig:
    """Parse a single body entry."""
    if "position" not in d:
        raise ValueError("Body definition missing required 'position' field.")
    return BodyConfig(
        initial_position=tuple(d["position"]),
        initial_velocity=tuple(d.get("velocity", [0.0, 0.0])),
        mass=float(d.get("mass", DEFAULT_MASS)),
    )


def config_from_json(data: dict[str, Any]) -> SimulationConfig:
    """Build a SimulationConfig from a parsed JSON document."""
    min_sep = data.get("min_separation")
    return SimulationConfig(
        bodies=tuple(body_config_from_json(b) for b in data.get("bodies", [])),
        G=float(data.get("G", DEFAULT_G)),
        dt=float(data.get("dt", DEFAULT_DT)),
        scheme=data.get("scheme", SEMI_IMPLICIT),
        softening=float(data.get("softening", 0.0)),
        min_separation=None if min_sep is None else float(min_sep),
    )


def body_config_to_json(body: BodyConfig) -> dict[str, Any]:
    """Serialize one body entry; velocity and mass are omitted when default."""
    result: dict[str, Any] = {"position": list(body.initial_position)}
    if body.initial_velocity != (0.0, 0.0):
        result["velocity"] = list(body.initial_velocity)
    if body.mass != DEFAULT_MASS:
        result["mass"] = body.mass
    return result


def config_to_json(config: SimulationConfig) -> dict[str, Any]:
    """
    Serialize a SimulationConfig to a JSON-compatible dict.

    The output loads back through config_from_json() to an equal config.
    """
    result: dict[str, Any] = {
        "G": config.G,
        "dt": config.dt,
        "bodies": [body_config_to_json(b) for b in config.bodies],
    }
    if config.scheme != SEMI_IMPLICIT:
        result["scheme"] = config.scheme
    if config.softening != 0.0:
        result["softening"] = config.softening
    if config.min_separation is not None:
        result["min_separation"] = config.min_separation
    return result
