"""Conway's Game of Life on a wrapping grid."""

from __future__ import annotations

import argparse
import itertools
import logging
import random
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

TICK_INTERVAL = timedelta(milliseconds=200)


class State(Enum):
    ALIVE = "alive"
    DEAD = "dead"


@dataclass
class Cellule:
    """A single grid cell."""

    state: State = State.DEAD

    def set_alive(self) -> None:
        self.state = State.ALIVE

    def set_dead(self) -> None:
        self.state = State.DEAD

    def is_alive(self) -> bool:
        return self.state is State.ALIVE

    def toggle(self) -> None:
        if self.is_alive():
            self.set_dead()
        else:
            self.set_alive()

    @staticmethod
    def count_alive_neighbors(neighbors: Sequence["Cellule"]) -> int:
        return sum(1 for n in neighbors if n.is_alive())

    @staticmethod
    def alone(neighbors: Sequence["Cellule"]) -> bool:
        return Cellule.count_alive_neighbors(neighbors) < 2

    @staticmethod
    def overpopulated(neighbors: Sequence["Cellule"]) -> bool:
        return Cellule.count_alive_neighbors(neighbors) > 3

    @staticmethod
    def can_be_revived(neighbors: Sequence["Cellule"]) -> bool:
        return Cellule.count_alive_neighbors(neighbors) == 3


def wrap(coord: int, size: int) -> int:
    """Wrap a coordinate that is at most one grid length outside ``[0, size)``."""
    if coord < 0:
        result = coord + size
    elif coord >= size:
        result = coord - size
    else:
        result = coord
    if not 0 <= result < size:
        raise ValueError(f"coordinate {coord} is too far outside a grid of size {size}")
    return result


class GameOfLife:
    """The board and its controls; methods return whether a re-render is needed."""

    def __init__(self, width: int = 53, height: int = 40) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self.active = False
        self.cellules: List[Cellule] = [Cellule() for _ in range(width * height)]

    def random_mutate(self, rng: Optional[random.Random] = None) -> bool:
        rng = rng if rng is not None else random.Random()
        for cellule in self.cellules:
            if rng.getrandbits(1):
                cellule.set_alive()
            else:
                cellule.set_dead()
        logger.info("Random")
        return True

    def reset(self) -> bool:
        for cellule in self.cellules:
            cellule.set_dead()
        logger.info("Reset")
        return True

    def step(self) -> bool:
        """Advance the board by one generation."""
        to_dead = []
        to_live = []
        for row, col in itertools.product(range(self.height), range(self.width)):
            neighbors = self.neighbors(row, col)
            idx = self.row_col_as_idx(row, col)
            if self.cellules[idx].is_alive():
                if Cellule.alone(neighbors) or Cellule.overpopulated(neighbors):
                    to_dead.append(idx)
            elif Cellule.can_be_revived(neighbors):
                to_live.append(idx)
        for idx in to_dead:
            self.cellules[idx].set_dead()
        for idx in to_live:
            self.cellules[idx].set_alive()
        return True

    def start(self) -> bool:
        self.active = True
        logger.info("Start")
        return False

    def stop(self) -> bool:
        self.active = False
        logger.info("Stop")
        return False

    def tick(self) -> bool:
        if self.active:
            return self.step()
        return False

    def toggle_cellule(self, idx: int) -> bool:
        if not 0 <= idx < len(self.cellules):
            raise IndexError(f"no cellule at index {idx}")
        self.cellules[idx].toggle()
        return True

    def neighbors(self, row: int, col: int) -> List[Cellule]:
        offsets = ((1, 0), (1, 1), (1, -1), (-1, 0), (-1, 1), (-1, -1), (0, -1), (0, 1))
        return [self.cellules[self.row_col_as_idx(row + dr, col + dc)] for dr, dc in offsets]

    def row_col_as_idx(self, row: int, col: int) -> int:
        return wrap(row, self.height) * self.width + wrap(col, self.width)

    def _rows(self) -> List[List[Cellule]]:
        return [
            self.cellules[start:start + self.width]
            for start in range(0, len(self.cellules), self.width)
        ]

    def view(self) -> str:
        """Render the board and its buttons as HTML."""
        rows = []
        for y, row in enumerate(self._rows()):
            cells = "".join(
                f'<div class="game-cellule {"cellule-live" if c.is_alive() else "cellule-dead"}"'
                f' data-index="{y * self.width + x}"></div>'
                for x, c in enumerate(row)
            )
            rows.append(f'<div class="game-row">{cells}</div>')
        buttons = "".join(
            f'<button class="game-button">{name}</button>'
            for name in ("Random", "Step", "Start", "Stop", "Reset")
        )
        return (
            "<div>"
            '<section class="game-container">'
            '<header class="app-header">'
            '<img src="favicon.ico" class="app-logo"/>'
            '<h1 class="app-title">Game of Life</h1>'
            "</header>"
            '<section class="game-area">'
            f'<div class="game-of-life">{"".join(rows)}</div>'
            f'<div class="game-buttons">{buttons}</div>'
            "</section></section>"
            '<footer class="app-footer">'
            '<strong class="footer-text">Game of Life</strong>'
            "</footer>"
            "</div>"
        )

    def _text(self) -> str:
        return "\n".join(
            "".join("#" if c.is_alive() else "." for c in row) for row in self._rows()
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run Conway's Game of Life in the terminal.")
    parser.add_argument("--width", type=int, default=53)
    parser.add_argument("--height", type=int, default=40)
    parser.add_argument("--steps", type=int, default=1)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("grid dimensions must be positive")
    if args.steps < 0:
        parser.error("--steps must not be negative")
    game = GameOfLife(args.width, args.height)
    game.random_mutate(random.Random(args.seed))
    for _ in range(args.steps):
        game.step()
    print(game._text())
    return 0