# chargefield

A small 2D simulation of point charges that push and pull one another
through Coulomb's law. The electric field is sampled on a grid and drawn
as yellow arrows. Each particle is drawn as a circle: red for positive
charges, blue for negative and white for neutral. Particles stay inside an
800 × 600 world. They bounce off its walls and lose some speed on each
bounce.

## Installation

```
pip install .
```

The window is drawn with pygame. The library modules import pygame only
when the window is opened.

## Running

```
chargefield <simulation_setup> [options]
```

Simulation setups:

| Setup             | Description                                                    |
|-------------------|----------------------------------------------------------------|
| `circular`        | A light negative charge orbiting a heavy positive one          |
| `circular-moving` | The same orbit, with the whole system drifting to the right    |
| `four`            | Four charges of mixed sign interacting                         |
| `random`          | Ten particles with random mass, charge, position and velocity  |
| `input`           | Starts with an empty world                                     |

Options:

- `--ignore-field` stops the electric field from being sampled and drawn.
- `--help`, `-h` prints usage and exits with status 0.

With no arguments at all, the command prints an error and the usage text,
then exits with status 1. An unrecognised argument also gives an error and
exit status 1. If several setups are given, the last one is used. Close the
window to quit.

Field arrows are left out where the field is weaker than 2.5. Arrows are
capped at a length of 25, so where the field is stronger than that only the
direction is shown.

## Using the library

```python
from chargefield.vector import Vec2
from chargefield.particle import Particle
from chargefield.fieldline import FieldLine
from chargefield.simulator import Simulator

# mass in kg, charge in microcoulombs, position in cm, velocity in cm/s
heavy = Particle(1_000_000.0, 100.0, Vec2(400.0, 300.0), Vec2(0.0, 0.0))
light = Particle(0.5, -10.0, Vec2(325.0, 300.0), Vec2(0.0, 489.559033858))

sim = Simulator([heavy, light], [FieldLine(Vec2(200.0, 200.0))], 800, 600)
for _ in range(120):
    sim.update(1 / 120)

print(sim.compute_field(Vec2(100.0, 100.0)))
print(sim.field_list[0].field)
```

- `Vec2` is an immutable vector. It supports `+`, `-`, multiplication and
  division by a scalar, `length()`, `normalized()` and `rotated(angle)`.
  Dividing by zero raises `ZeroDivisionError`. Normalizing the zero vector
  raises `ValueError`.
- `Particle` takes mass, charge, position and velocity. Two optional
  arguments follow: `responds_to_field` (default `True`) and `id` (default
  `-1`). The radius is set from the mass by a sigmoid and always lies
  between 3 and 5. A mass of zero raises `ValueError`.
- `Simulator.compute_field(target)` returns the field at a point, in
  centinewtons per microcoulomb. A particle located exactly at the target
  is skipped. `Simulator.update(dt)` updates the particles in this order:
  velocities first, then positions, then the field at every `FieldLine`.
- `chargefield.app` provides the preset scenes (`build_particles`), the
  grid of field sample points (`build_field_lines`) and the line segments
  of each arrow (`arrow_segments`).

## Limitations

The `input` setup does not read particles from the user. It opens an empty
world. Scenes can only be built in code, through the library.