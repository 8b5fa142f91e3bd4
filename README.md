# widgetlab

`widgetlab` is a set of small, self-contained models of interactive widgets.
Each one keeps its own state, changes it through plain method calls (which
return whether a re-render would be needed) and renders itself as HTML or SVG
text.

- **Boids**: a flocking simulation driven by adjustable settings
  (`widgetlab.vector`, `widgetlab.boid`, `widgetlab.simulation`,
  `widgetlab.settings`, `widgetlab.slider`, `widgetlab.boids_app`).
- **Game of Life**: Conway's automaton on a wrapping grid (`widgetlab.life`).
- **Keyed list**: a list of randomly generated people that can be created,
  deleted, swapped, reversed and sorted (`widgetlab.randomness`,
  `widgetlab.person`, `widgetlab.keyed_list`).
- **Markdown**: renders Markdown (with tables) into an `Element` tree that
  serialises to HTML (`widgetlab.markdown`).
- **Counter** and **CRM**: a click counter and a small client register with an
  entry form (`widgetlab.counter`, `widgetlab.crm`).

## Installation

```
pip install widgetlab
```

To run the test suite:

```
pip install "widgetlab[test]"
pytest
```

## Commands

```
widgetlab-boids [--store FILE] [--ticks N] [--seed SEED]
```

Creates the boids app (loading saved settings from the JSON file given with
`--store`, or using the defaults), runs `--ticks` simulation steps (default 0)
and prints the rendered page: a title, the `<svg>` flock and the settings
panel.

```
widgetlab-life [--width W] [--height H] [--steps N] [--seed SEED]
```

Fills a `W` x `H` board (default 53 x 40) at random, advances it `--steps`
generations (default 1) and prints it as text, `#` for a live cell and `.` for
a dead one.

## Library use

Vector maths:

```python
from widgetlab.vector import Vector2D, mean, smallest_angle_between, weighted_mean

v = Vector2D(3.0, 4.0)
v.magnitude()                      # 5.0
v.clamp_magnitude(1.0)             # length 1.0, same direction
smallest_angle_between(0.0, 1.0)   # 1.0, always within [-pi, pi)
mean([1.0, 2.0, 3.0])              # 2.0; None for an empty input
```

A flock:

```python
from widgetlab.settings import Settings, SettingsStore
from widgetlab.simulation import Simulation

simulation = Simulation(Settings())
simulation.tick()            # advance every boid by one step unless paused
svg = simulation.view()      # an <svg> holding one <polygon> per boid

store = SettingsStore("boids.json")   # without a path it keeps data in memory
store.store(Settings(boids=50))
store.load()                          # defaults if nothing valid is stored
```

`BoidsApp` ties these together with a row of `Slider`s and offers
`change_settings`, `reset_settings`, `restart_simulation`, `toggle_pause`
and `view`.

Game of Life:

```python
from widgetlab.life import GameOfLife

game = GameOfLife(width=10, height=8)
game.toggle_cellule(0)
game.step()
html = game.view()
```

Keyed list:

```python
import random
from widgetlab.keyed_list import KeyedList

people = KeyedList(rng=random.Random(1))
people.create_persons(5)
people.sort_by_name()
people.ids_text()
```

Markdown:

```python
from widgetlab.markdown import render_markdown

element = render_markdown("# Title\n\nSome *emphasis* here.")
print(element.to_html())
```

Counter and CRM:

```python
from widgetlab.counter import Counter
from widgetlab.crm import Client, Crm, Scene

counter = Counter()
counter.increment_twice()    # counter.value == 2

crm = Crm("clients.json")    # without a path clients are kept in memory
crm.add_client(Client("Ada", "Lovelace", "First client"))
crm.clear_clients(confirm=lambda question: True)
```

## What it does not do

The rendered HTML is plain text: its buttons and inputs carry no event
handlers, and nothing here runs in a browser, draws a window or runs a timer.
To drive a widget, call its methods yourself (for example `tick()` on a
`Simulation` or `GameOfLife` at whatever interval you like) and render it
again.