# MIT License (see LICENSE)
"""
Rendering adapters for the simulation.

Renderers only read body state; the simulation stays the sole writer.
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text output, one line per body.
    - NullRenderer: No-op renderer for benchmarks.
    - BufferedRenderer: Records frames for later inspection.
"""
from .adapter import (
    BufferedRenderer,
    DebugRenderer,
    NullRenderer,
    RendererAdapter,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
