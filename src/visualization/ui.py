"""UI components for the forest fire visualization.

This module contains the info panel showing simulation status and
statistics beneath the grid.
"""

from typing import TYPE_CHECKING, Optional

import pygame

from .colors import WHITE, PANEL_COLOR, PANEL_HEIGHT

if TYPE_CHECKING:
    from forest_fire.model import ForestFireModel


def panel_lines(model: "ForestFireModel", paused: bool) -> list[str]:
    """Text lines shown in the info panel."""
    lines = [f"Time: {model.current_step} / {model.params.steps}" + ("  (PAUSED)" if paused else "")]

    stats = model.statistics.latest
    if stats is not None:
        r = stats.rounded()
        lines.append(
            f"Burning: {r['trees_burning']} ({r['burning_percent']}%)   "
            f"Remaining: {r['trees_remaining']}   Grown: {r['trees_grown']}"
        )
        lines.append(f"Burned total: {r['trees_burned_total']} ({r['burned_percent']}%)")

    if model.outcome is not None:
        lines.append(f"Finished: {model.outcome.kind.value} at step {model.outcome.step}")
    return lines


class InfoPanel:
    """Displays simulation information at the bottom of the screen.

    Attributes:
        font: Main font for primary information.
        small_font: Smaller font for secondary information.
    """

    def __init__(self) -> None:
        """Initialize the info panel with fonts."""
        self.font = pygame.font.Font(None, 26)
        self.small_font = pygame.font.Font(None, 20)

    def draw(
        self,
        screen: pygame.Surface,
        model: "ForestFireModel",
        paused: bool,
        window_width: int,
        panel_y: int,
        help_text: Optional[str] = "SPACE = Pause / Resume   ESC = Quit",
    ) -> None:
        """Draw the panel block beneath the grid."""

        panel_surface = pygame.Surface((window_width, PANEL_HEIGHT), pygame.SRCALPHA)
        panel_surface.fill((*PANEL_COLOR, 200))
        screen.blit(panel_surface, (0, panel_y))

        y = panel_y + 8
        for i, line in enumerate(panel_lines(model, paused)):
            font = self.font if i == 0 else self.small_font
            text = font.render(line, True, WHITE)
            screen.blit(text, (10, y))
            y += text.get_height() + 4

        if help_text:
            hint = self.small_font.render(help_text, True, WHITE)
            screen.blit(hint, (window_width - hint.get_width() - 10, panel_y + 8))
