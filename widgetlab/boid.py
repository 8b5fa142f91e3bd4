"""Boids: flocking agents with cohesion, separation, alignment and colour adaption."""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, MutableSequence, Optional

from .settings import Settings
from .vector import FRAC_TAU_3, TAU, Vector2D, mean, smallest_angle_between, weighted_mean

SIZE = Vector2D(1600.0, 1000.0)

_SHAPE = (
    (0.0 * FRAC_TAU_3, 2.0),
    (1.0 * FRAC_TAU_3, 1.0),
    (2.0 * FRAC_TAU_3, 1.0),
)


def iter_shape_points(radius: float, rotation: float) -> Iterator[Vector2D]:
    """Yield the corner offsets of a boid's triangle."""
    for angle, radius_mul in _SHAPE:
        yield Vector2D.from_polar(angle + rotation, radius_mul * radius)


@dataclass(frozen=True)
class _VisibleBoid:
    boid: "Boid"
    offset: Vector2D
    distance: float


def _visible_boids(
    others: Iterable["Boid"], position: Vector2D, visible_range: float
) -> List[_VisibleBoid]:
    visible = []
    for other in others:
        offset = other.position - position
        distance = offset.magnitude()
        if not distance > visible_range:
            visible.append(_VisibleBoid(other, offset, distance))
    return visible


@dataclass
class Boid:
    """A single flocking agent."""

    position: Vector2D
    velocity: Vector2D
    radius: float
    hue: float

    @classmethod
    def new_random(cls, settings: Settings, rng: Optional[random.Random] = None) -> "Boid":
        rng = rng if rng is not None else random.Random()
        max_radius = settings.min_distance / 2.0
        min_radius = max_radius / 6.0
        # the third power makes large boids rarer
        radius = min_radius + rng.random() ** 3 * (max_radius - min_radius)
        position = Vector2D(rng.random() * SIZE.x, rng.random() * SIZE.y)
        velocity = Vector2D.from_polar(rng.random() * TAU, settings.max_speed)
        hue = rng.random() * TAU
        return cls(position=position, velocity=velocity, radius=radius, hue=hue)

    def _coherence(self, visible: List[_VisibleBoid], factor: float) -> Vector2D:
        centre = weighted_mean(
            (other.boid.position, other.boid.radius * other.boid.radius) for other in visible
        )
        if centre is None:
            return Vector2D()
        return (centre - self.position) * factor

    def _separation(self, visible: List[_VisibleBoid], settings: Settings) -> Vector2D:
        accel = sum(
            (-other.offset for other in visible if not other.distance > settings.min_distance),
            Vector2D(),
        )
        return accel * settings.separation_factor

    def _alignment(self, visible: List[_VisibleBoid], factor: float) -> Vector2D:
        avg = mean(other.boid.velocity for other in visible)
        if avg is None:
            return Vector2D()
        return (avg - self.velocity) * factor

    def _adapt_color(self, visible: List[_VisibleBoid], factor: float) -> None:
        avg_offset = mean(
            smallest_angle_between(self.hue, other.boid.hue)
            for other in visible
            if other.boid.radius > self.radius
        )
        if avg_offset is not None:
            self.hue += avg_offset * factor

    def _keep_in_bounds(self, settings: Settings) -> None:
        low = SIZE * settings.border_margin
        high = SIZE - low
        turn_speed = self.velocity.magnitude() * settings.turn_speed_ratio
        dx = dy = 0.0
        if self.position.x < low.x:
            dx += turn_speed
        if self.position.x > high.x:
            dx -= turn_speed
        if self.position.y < low.y:
            dy += turn_speed
        if self.position.y > high.y:
            dy -= turn_speed
        self.velocity += Vector2D(dx, dy)

    def _update_velocity(self, settings: Settings, visible: List[_VisibleBoid]) -> None:
        v = (
            self.velocity
            + self._coherence(visible, settings.cohesion_factor)
            + self._separation(visible, settings)
            + self._alignment(visible, settings.alignment_factor)
        )
        self.velocity = v.clamp_magnitude(settings.max_speed)

    def _update(self, settings: Settings, visible: List[_VisibleBoid]) -> None:
        self._adapt_color(visible, settings.color_adapt_factor)
        self._update_velocity(settings, visible)
        self._keep_in_bounds(settings)
        self.position += self.velocity

    @classmethod
    def update_all(cls, settings: Settings, boids: MutableSequence["Boid"]) -> None:
        """Advance every boid by one step, in order, each seeing the others' current state."""
        for i, boid in enumerate(boids):
            others = itertools.chain(boids[:i], boids[i + 1:])
            visible = _visible_boids(others, boid.position, settings.visible_range)
            boid._update(settings, visible)

    def render(self) -> str:
        """Render the boid as an SVG polygon."""
        color = f"hsl({self.hue:.3f}rad, 100%, 50%)"
        points = "".join(
            f"{point.x:.2f},{point.y:.2f} "
            for point in (
                self.position + offset
                for offset in iter_shape_points(self.radius, self.velocity.angle())
            )
        )
        return f'<polygon points="{points}" fill="{color}"/>'