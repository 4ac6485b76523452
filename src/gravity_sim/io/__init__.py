# MIT License (see LICENSE)
"""
Configuration input for the simulation.

Typical usage:
    from gravity_sim.io import load_simulation

    sim = load_simulation("three_body.json")
    sim.run(100)
"""
from .json_io import (
    body_config_from_json,
    body_config_to_json,
    config_from_json,
    config_to_json,
    load_config,
    load_config_raw,
    load_simulation,
)

__all__ = [
    # Loading
    "load_config",
    "load_config_raw",
    "load_simulation",
    # Conversion
    "config_from_json",
    "config_to_json",
    "body_config_from_json",
    "body_config_to_json",
]
