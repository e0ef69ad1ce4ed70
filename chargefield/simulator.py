"""World containing charged particles and field sample points."""

from __future__ import annotations

from typing import Iterable

from .fieldline import FieldLine
from .particle import Particle
from .vector import Vec2

K_E = 8987.5517862000  # cN cm^2 per µC^2


class Simulator:
    """Coulomb-force simulation of particles in a ``width`` by ``height`` box."""

    def __init__(
        self,
        particles: Iterable[Particle],
        field_lines: Iterable[FieldLine],
        width: int = 800,
        height: int = 600,
    ) -> None:
        self.particle_list: list[Particle] = list(particles)
        self.field_list: list[FieldLine] = list(field_lines)
        self.width = width
        self.height = height

    @property
    def particle_count(self) -> int:
        return len(self.particle_list)

    @property
    def field_count(self) -> int:
        return len(self.field_list)

    def compute_field(self, target: Vec2) -> Vec2:
        """Electric field (cN/µC) at ``target``; particles located exactly there are skipped."""
        total = Vec2()
        for particle in self.particle_list:
            if particle.position == target:
                continue
            offset = target - particle.position
            length_squared = offset.x * offset.x + offset.y * offset.y
            strength = K_E * particle.charge / length_squared
            total = total + strength * offset.normalized()
        return total

    def update(self, dt: float) -> None:
        """Advance the simulation by ``dt`` seconds."""
        for particle in self.particle_list:
            force = particle.charge * self.compute_field(particle.position)
            particle.update_velocity(dt, force, self.width, self.height)

        for particle in self.particle_list:
            particle.update_position(dt, self.width, self.height)

        for line in self.field_list:
            line.update_field(self.compute_field(line.position))