"""A flock of boids advanced tick by tick and rendered as SVG."""

from __future__ import annotations

import random
from dataclasses import replace
from datetime import timedelta
from typing import List, Optional

from .boid import SIZE, Boid
from .settings import Settings

__all__ = ["SIZE", "Simulation"]


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


class Simulation:
    """Holds the boids and reacts to ticks and property changes."""

    def __init__(
        self,
        settings: Settings,
        generation: int = 0,
        paused: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.settings = replace(settings)
        self.generation = generation
        self.paused = paused
        self.boids: List[Boid] = [
            Boid.new_random(self.settings, self._rng) for _ in range(self.settings.boids)
        ]

    @property
    def tick_interval(self) -> timedelta:
        return timedelta(milliseconds=self.settings.tick_interval_ms)

    def tick(self) -> bool:
        """Advance the flock unless paused; return whether a re-render is needed."""
        if self.paused:
            return False
        Boid.update_all(self.settings, self.boids)
        return True

    def change(self, settings: Settings, generation: int = 0, paused: bool = False) -> bool:
        """Apply new properties; return whether anything changed."""
        if (settings, generation, paused) == (self.settings, self.generation, self.paused):
            return False
        if generation != self.generation:
            self.boids.clear()
        del self.boids[settings.boids:]
        missing = settings.boids - len(self.boids)
        self.boids.extend(Boid.new_random(settings, self._rng) for _ in range(missing))
        self.settings = replace(settings)
        self.generation = generation
        self.paused = paused
        return True

    def view(self) -> str:
        """Render the whole flock as an SVG document fragment."""
        view_box = f"0 0 {_format_number(SIZE.x)} {_format_number(SIZE.y)}"
        body = "".join(boid.render() for boid in self.boids)
        return f'<svg class="simulation-window" viewBox="{view_box}">{body}</svg>'