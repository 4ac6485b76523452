# MIT License (see LICENSE)
"""
Renderer adapters for simulation output.

The simulation has no graphics dependency. A host loop steps the simulation
and hands it to a renderer, which reads each body's position (and velocity)
and must not modify them.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

import sys

from ..types import Body

if TYPE_CHECKING:
    from ..simulation import Simulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses plug in a graphics backend (pygame, matplotlib, a web
    frontend, ...).

    Usage:
        renderer.begin_frame(sim.time)
        for body in sim.bodies:
            renderer.draw_body(body)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render(sim)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time.
        """
        ...

    @abstractmethod
    def draw_body(self, body: Body) -> None:
        """Draw a single body. Must not mutate it."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render(self, sim: "Simulation") -> None:
        """Render every body of a simulation as one frame."""
        self.begin_frame(sim.time)
        for body in sim.bodies:
            self.draw_body(body)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer writing one line per body to a stream (stdout by default).

    Output:
        === Frame t=0.1000 ===
        [1] m=1000.00 @ (10.00, 10.00) v=(0.00, 0.00) a=(0.00, 0.00)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, also print velocity and acceleration.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_body(self, body: Body) -> None:
        pos = body.position
        line = f"[{body.id}] m={body.mass:.2f} @ ({pos[0]:.2f}, {pos[1]:.2f})"
        if self.verbose:
            vel, acc = body.velocity, body.acceleration
            line += f" v=({vel[0]:.2f}, {vel[1]:.2f}) a=({acc[0]:.2f}, {acc[1]:.2f})"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """Renderer that draws nothing."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_body(self, body: Body) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records every frame, e.g. to plot trails afterwards.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.step()
            renderer.render(sim)

        xs = [frame["bodies"][0]["position"][0] for frame in renderer.frames]
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {
            "time": time,
            "bodies": [],
        }

    def draw_body(self, body: Body) -> None:
        if self._current_frame is None:
            return
        self._current_frame["bodies"].append({
            "id": body.id,
            "position": body.position.tolist(),
            "velocity": body.velocity.tolist(),
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def trail(self, body_id: int) -> list[list[float]]:
        """Recorded positions of one body, oldest first."""
        return [
            b["position"]
            for frame in self.frames
            for b in frame["bodies"]
            if b["id"] == body_id
        ]

    def clear(self) -> None:
        self.frames.clear()
