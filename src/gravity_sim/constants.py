# MIT License (see LICENSE)
"""
Default simulation constants.

Values are in arbitrary but consistent simulation units: there is no unit
enforcement, so G, masses and distances only need to agree with each other.
The defaults reproduce the classic three-body demo this package grew from.
"""
from __future__ import annotations

# Gravitational constant in simulation units.
G: float = 1.0

# Mass given to bodies that do not specify one.
DEFAULT_MASS: float = 1000.0

# Fixed timestep used by the demo loop when the host does not pass elapsed time.
DEFAULT_DT: float = 0.1

# Default scene: NUM_BODIES bodies placed diagonally at i * spacing + offset.
NUM_BODIES: int = 3
DEFAULT_SPACING: float = 100.0
DEFAULT_OFFSET: float = 10.0

# Integration schemes understood by core.integrators.
SEMI_IMPLICIT: str = "semi_implicit"
EXPLICIT: str = "explicit"
SCHEMES: tuple[str, ...] = (SEMI_IMPLICIT, EXPLICIT)
