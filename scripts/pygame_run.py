#!/usr/bin/env python3
"""Pygame visualization launcher for the forest fire simulation.

Animates the cellular automaton one step per frame, with an info panel
showing the step counter and tree statistics.

Usage:
    python scripts/pygame_run.py [--grid-size 100] [--seed 42] ...
"""

import argparse
import logging
import sys
import time
from pathlib import Path

import pygame

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import ConfigurationError, ForestFireModel, SimulationParams, StepLogger
from forest_fire.params import (
    DEFAULT_FIRE_SPREAD_CHANCE,
    DEFAULT_GRID_SIZE,
    DEFAULT_INITIAL_TREES_DENSITY,
    DEFAULT_STEPS,
    DEFAULT_TREE_GROWTH_RATE,
)

from visualization import (
    GridRenderer,
    InfoPanel,
    WHITE,
    DEFAULT_CELL_SIZE,
    DEFAULT_FRAME_DELAY,
    PANEL_HEIGHT,
)

logger = logging.getLogger("pygame_run")


class SimulationRunner:
    """Main simulation runner with Pygame visualization.

    Attributes:
        model: The forest fire simulation model.
        screen: Pygame display surface.
        renderer: Grid renderer for drawing cells.
        info_panel: UI panel for displaying simulation info.
        paused: Whether the simulation is paused.
        frame_delay: Pause between steps in seconds.
    """

    def __init__(self, params: SimulationParams, seed, cell_size: int, frame_delay: float) -> None:
        self.grid_pixels = params.grid_size * cell_size
        self.window_width = max(self.grid_pixels, 480)
        window_height = self.grid_pixels + PANEL_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, window_height))
        pygame.display.set_caption("Forest Fire Simulation")

        self.model = ForestFireModel(params, seed=seed)
        StepLogger().attach(self.model)

        self.renderer = GridRenderer(cell_size)
        self.info_panel = InfoPanel()
        self.paused = False
        self.frame_delay = frame_delay

    def _handle_keyboard_events(self, event: pygame.event.Event) -> bool:
        """Handle keyboard input events.

        Returns:
            False if the simulation should quit, True otherwise.
        """
        if event.key == pygame.K_ESCAPE:
            return False
        elif event.key == pygame.K_SPACE:
            self.paused = not self.paused
        return True

    def _render(self) -> None:
        self.screen.fill(WHITE)
        offset_x = (self.window_width - self.grid_pixels) // 2
        self.renderer.draw_base(self.screen, self.model.grid, offset_x, 0)
        self.info_panel.draw(self.screen, self.model, self.paused, self.window_width, self.grid_pixels)
        pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the user quits."""
        running = True

        while running:
            self._render()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not self._handle_keyboard_events(event):
                        running = False

            if not running:
                self.model.stop()
                self.model.run()  # records the cancellation
            elif not self.paused and not self.model.finished:
                self.model.step()

            time.sleep(self.frame_delay)

        pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Animate the forest fire simulation.")
    parser.add_argument("--grid-size", type=int, default=DEFAULT_GRID_SIZE)
    parser.add_argument("--tree-growth-rate", type=float, default=DEFAULT_TREE_GROWTH_RATE)
    parser.add_argument("--fire-spread-chance", type=float, default=DEFAULT_FIRE_SPREAD_CHANCE)
    parser.add_argument("--initial-trees-density", type=float, default=DEFAULT_INITIAL_TREES_DENSITY)
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE)
    parser.add_argument("--frame-delay", type=float, default=DEFAULT_FRAME_DELAY)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        params = SimulationParams.from_mapping(vars(args))
    except ConfigurationError as exc:
        logger.error("Invalid parameters: %s", exc)
        return 2

    SimulationRunner(params, args.seed, args.cell_size, args.frame_delay).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
