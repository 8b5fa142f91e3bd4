"""The boids application: a simulation with a settings panel."""

from __future__ import annotations

import argparse
import random
from dataclasses import replace
from typing import Callable, List, Optional, Sequence

from .settings import Settings, SettingsStore
from .simulation import Simulation
from .slider import Slider

_GENERATION_MODULUS = 2**64

_SLIDER_SPECS = (
    ("Number of Boids", "boids", {"min": 1.0, "max": 600.0}),
    ("View Distance", "visible_range", {"max": 500.0, "step": 10.0}),
    ("Spacing", "min_distance", {"max": 100.0}),
    ("Max Speed", "max_speed", {"max": 50.0}),
    ("Cohesion", "cohesion_factor", {"max": 0.5, "percentage": True}),
    ("Separation", "separation_factor", {"max": 1.0, "percentage": True}),
    ("Alignment", "alignment_factor", {"max": 0.5, "percentage": True}),
    ("Turn Speed", "turn_speed_ratio", {"max": 1.5, "percentage": True}),
    ("Color Adaption", "color_adapt_factor", {"max": 1.5, "percentage": True}),
)


def _to_count(value: float) -> int:
    if value != value or value <= 0:
        return 0
    return int(value)


class BoidsApp:
    """Top-level application state: settings, generation and pause flag."""

    def __init__(
        self, store: Optional[SettingsStore] = None, rng: Optional[random.Random] = None
    ) -> None:
        self.store = store if store is not None else SettingsStore()
        self.settings = self.store.load()
        self.generation = 0
        self.paused = False
        self.simulation = Simulation(self.settings, self.generation, self.paused, rng=rng)
        self.sliders: List[Slider] = [
            Slider(
                label=label,
                value=float(getattr(self.settings, key)),
                onchange=self._settings_callback(key),
                **options,
            )
            for label, key, options in _SLIDER_SPECS
        ]

    def _settings_callback(self, key: str) -> Callable[[float], bool]:
        def apply(value: float) -> bool:
            new_value = _to_count(value) if key == "boids" else float(value)
            return self.change_settings(replace(self.settings, **{key: new_value}))

        return apply

    def _sync(self) -> None:
        self.simulation.change(self.settings, self.generation, self.paused)
        for slider, (_, key, _) in zip(self.sliders, _SLIDER_SPECS):
            slider.value = float(getattr(self.settings, key))

    def change_settings(self, settings: Settings) -> bool:
        self.settings = settings
        self.store.store(self.settings)
        self._sync()
        return True

    def reset_settings(self) -> bool:
        self.settings = Settings()
        self.store.remove()
        self._sync()
        return True

    def restart_simulation(self) -> bool:
        self.generation = (self.generation + 1) % _GENERATION_MODULUS
        self._sync()
        return True

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        self._sync()
        return True

    def _view_panel(self) -> str:
        pause_text = "Resume" if self.paused else "Pause"
        settings_html = "".join(slider.view() for slider in self.sliders)
        return (
            '<div class="panel">'
            f'<div class="settings">{settings_html}</div>'
            '<div class="panel__buttons">'
            f"<button>{pause_text}</button>"
            "<button>Use Defaults</button>"
            "<button>Restart</button>"
            "</div></div>"
        )

    def view(self) -> str:
        """Render the title, the simulation and the control panel."""
        self._sync()
        return '<h1 class="title">Boids</h1>' + self.simulation.view() + self._view_panel()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the boids simulation and print it as SVG.")
    parser.add_argument("--store", help="JSON file holding saved settings")
    parser.add_argument("--ticks", type=int, default=0, help="simulation steps to run")
    parser.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)
    if args.ticks < 0:
        parser.error("--ticks must not be negative")
    app = BoidsApp(SettingsStore(args.store), rng=random.Random(args.seed))
    for _ in range(args.ticks):
        app.simulation.tick()
    print(app.view())
    return 0