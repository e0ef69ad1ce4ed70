"""Interactive viewer: preset scenes, field arrows and the main window loop."""

from __future__ import annotations

import math
import random
from typing import Sequence

from .args import SimulationSetup, parse_args
from .fieldline import FieldLine
from .particle import Particle
from .simulator import Simulator
from .vector import Vec2

WIDTH = 800
HEIGHT = 600
FRAMERATE_LIMIT = 120

MAX_ARROW_LENGTH = 25.0
MIN_ARROW_LENGTH = 2.5
ARROW_TIP_PROPORTION = 0.45
ARROW_TIP_ANGLE = math.radians(15)

ARROW_COLOR = (255, 255, 0)
NEUTRAL_COLOR = (255, 255, 255)
NEGATIVE_COLOR = (0, 0, 255)
POSITIVE_COLOR = (255, 0, 0)

Segment = tuple[Vec2, Vec2]


def _random_particles(rng: random.Random, count: int = 10) -> list[Particle]:
    particles = []
    positive_count = 0
    for p in range(count):
        if p == 0:
            charge = rng.random() * 75 - 37.5
        else:
            # Bias the charge against the sign that has been most common so far.
            charge = rng.random() * 75 - positive_count / p * 75
        if charge > 0:
            positive_count += 1

        mass = (1.0 - rng.random()) * 5
        position = Vec2(rng.random() * 300 + 250, rng.random() * 200 + 200)
        velocity = Vec2(rng.random() * 60 - 30, rng.random() * 60 - 30)
        particles.append(Particle(mass, charge, position, velocity))
    return particles


def build_particles(setup: SimulationSetup | None, rng: random.Random | None = None) -> list[Particle]:
    """Particles for a preset; mass in kg, charge in µC, position in cm, velocity in cm/s."""
    if setup is SimulationSetup.CIRCULAR:
        return [
            Particle(1000000.0, 100.0, Vec2(400.0, 300.0), Vec2(0.0, 0.0)),
            Particle(0.5, -10.0, Vec2(400.0 - 75.0, 300.0), Vec2(0.0, 489.559033858)),
        ]
    if setup is SimulationSetup.CIRCULAR_MOVING:
        return [
            Particle(1000000.0, 100.0, Vec2(100.0, 300.0), Vec2(35.0, 0.0)),
            Particle(0.5, -10.0, Vec2(100.0 - 75.0, 300.0), Vec2(35.0, 489.559033858)),
        ]
    if setup is SimulationSetup.FOUR:
        return [
            Particle(10.0, -35.0, Vec2(400.0 - 150.0, 300.0), Vec2(10.0, -35.0)),
            Particle(10.0, -45.0, Vec2(400.0 + 150.0, 300.0), Vec2(0.0, -50.0)),
            Particle(5.0, 25.0, Vec2(400.0, 300.0), Vec2(0.0, 30.0)),
            Particle(15.0, 45.0, Vec2(400.0, 300.0 + 75.0), Vec2(-15.0, -5.0)),
        ]
    if setup is SimulationSetup.RANDOM:
        return _random_particles(rng if rng is not None else random.Random())
    return []


def build_field_lines() -> list[FieldLine]:
    """Field sample points on two interleaved grids covering the window."""
    lines = []
    for x in range(0, WIDTH, 40):
        for y in range(0, HEIGHT, 40):
            lines.append(FieldLine(Vec2(float(x), float(y))))
            lines.append(FieldLine(Vec2(float(x + 20), float(y + 20))))
    return lines


def arrow_segments(field_line: FieldLine) -> list[Segment]:
    """Line segments of the arrow drawn for a field sample; empty when the field is weak."""
    field = field_line.field
    strength = field.length()
    if strength < MIN_ARROW_LENGTH:
        return []

    start = field_line.position
    if strength > MAX_ARROW_LENGTH:
        direction = field.normalized()
        end = start + MAX_ARROW_LENGTH * direction
        tip = direction * MAX_ARROW_LENGTH * ARROW_TIP_PROPORTION
    else:
        end = start + field
        tip = field * ARROW_TIP_PROPORTION

    left = end + tip.rotated(math.pi - ARROW_TIP_ANGLE)
    right = end + tip.rotated(math.pi + ARROW_TIP_ANGLE)
    return [(start, end), (end, left), (end, right)]


def _particle_color(particle: Particle) -> tuple[int, int, int]:
    if particle.charge == 0:
        return NEUTRAL_COLOR
    if particle.charge < 0:
        return NEGATIVE_COLOR
    return POSITIVE_COLOR


def _run_window(sim: Simulator) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Particle Engine")
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break

            dt = clock.tick(FRAMERATE_LIMIT) / 1000.0
            sim.update(dt)

            screen.fill((0, 0, 0))
            for line in sim.field_list:
                for start, end in arrow_segments(line):
                    pygame.draw.line(screen, ARROW_COLOR, tuple(start), tuple(end))
            for particle in sim.particle_list:
                pygame.draw.circle(
                    screen, _particle_color(particle), tuple(particle.position), particle.radius
                )
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the simulation window."""
    args = parse_args(argv)
    if args.help:
        args.print_usage()
    if args.error_output:
        return 1
    if args.help:
        return 0

    particles = build_particles(args.sim_setup, random.Random())
    field_lines = [] if args.ignore_field else build_field_lines()
    sim = Simulator(particles, field_lines, WIDTH, HEIGHT)
    _run_window(sim)
    return 0