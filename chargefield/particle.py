"""Charged point particles moving inside a rectangular box."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vector import Vec2

RADIUS_LOWER_BOUND = 3.0
RADIUS_UPPER_BOUND = 5.0
RADIUS_RANGE = RADIUS_UPPER_BOUND - RADIUS_LOWER_BOUND
BOUNCE_DAMPEN_FACTOR = 0.35


def _radius_for_mass(mass: float) -> float:
    try:
        denominator = 1 + math.exp(-10 * mass + 5)
    except OverflowError:
        return RADIUS_LOWER_BOUND
    return RADIUS_LOWER_BOUND + RADIUS_RANGE / denominator


@dataclass
class Particle:
    """A particle with mass (kg), charge (µC), position (cm) and velocity (cm/s)."""

    mass: float
    charge: float
    position: Vec2
    velocity: Vec2
    responds_to_field: bool = True
    id: int = -1
    radius: float = field(init=False)

    def __post_init__(self) -> None:
        if self.mass == 0:
            raise ValueError("cannot have mass of zero")
        # Sigmoid in mass keeps the drawn radius between the two bounds.
        self.radius = _radius_for_mass(self.mass)

    def update_position(self, dt: float, sim_width: int, sim_height: int) -> None:
        """Advance the position by the velocity and keep it inside the box."""
        x, y = self.position + self.velocity * dt
        r = self.radius
        if x < r:
            x = r
        if x > sim_width - r:
            x = sim_width - r
        if y < r:
            y = r
        if y > sim_height - r:
            y = sim_height - r
        self.position = Vec2(x, y)

    def update_velocity(self, dt: float, force: Vec2, sim_width: int, sim_height: int) -> None:
        """Apply a force (cN) for ``dt`` seconds and bounce off the walls."""
        if self.responds_to_field:
            self.velocity = self.velocity + force * dt / self.mass

        r = self.radius
        pos = self.position
        if pos.x <= r or pos.x >= sim_width - r:
            v = self.velocity * BOUNCE_DAMPEN_FACTOR
            self.velocity = Vec2(-v.x, v.y)
        if pos.y <= r or pos.y >= sim_height - r:
            v = self.velocity * BOUNCE_DAMPEN_FACTOR
            self.velocity = Vec2(v.x, -v.y)