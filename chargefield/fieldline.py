"""Sample points of the electric field."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector import Vec2


@dataclass
class FieldLine:
    """A fixed point in space and the electric field last computed there."""

    position: Vec2
    field: Vec2 = field(default_factory=Vec2)

    def update_field(self, electric_field: Vec2) -> None:
        """Store a newly computed field value."""
        self.field = electric_field