"""UI rendering for the fish tank game.

This module draws the food panel, the HUD counters and the level/defeat
banners. It reads only ``GameSnapshot`` data and never touches the game.
"""

from typing import Any, Dict, List

import pygame

from fishgame.config import GameConfig
from fishgame.config.display import (
    ALIVE_TEXT_COLOR,
    DEATH_TEXT_COLOR,
    FOOD_ICON_COLOR,
    FOOD_ICON_GAP,
    FOOD_ICON_OUTLINE_COLOR,
    FOOD_ICON_SIZE,
    FOOD_ICON_START_X,
    FOOD_ICON_Y,
    HUD_MARGIN,
    LEVEL_TEXT_COLOR,
    OUTLINE_COLOR,
    PANEL_COLOR,
)
from fishgame.snapshot import GameSnapshot


class UIRenderer:
    """Renders the panel and HUD.

    Attributes:
        screen: Pygame surface to render to
        font: Font for HUD text
        config: Game configuration (panel geometry and capacity)
    """

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, config: GameConfig) -> None:
        self.screen = screen
        self.font = font
        self.config = config

    def draw_food_panel(self, snapshot: GameSnapshot) -> None:
        """Draw the panel strip and one icon per available food charge."""
        panel = self.config.tank.panel_bounds
        rect = (panel.left, panel.top, panel.width, panel.height)
        pygame.draw.rect(self.screen, PANEL_COLOR, rect)
        pygame.draw.line(
            self.screen, OUTLINE_COLOR, (panel.left, panel.bottom - 1), (panel.right, panel.bottom - 1)
        )

        slots = self.config.food.panel_capacity
        shown = min(snapshot.food_charges, slots)
        for i in range(shown):
            x = FOOD_ICON_START_X + i * (FOOD_ICON_SIZE + FOOD_ICON_GAP)
            self.draw_food_icon(x, FOOD_ICON_Y)

        # Unbounded mode can hold more charges than there are slots
        extra = snapshot.food_charges - shown
        if extra > 0:
            text = self.font.render(f"+{extra}", True, FOOD_ICON_OUTLINE_COLOR)
            x = FOOD_ICON_START_X + slots * (FOOD_ICON_SIZE + FOOD_ICON_GAP)
            self.screen.blit(text, (min(x, panel.right - text.get_width()), FOOD_ICON_Y))

    def draw_food_icon(self, x: float, y: float) -> None:
        rect = pygame.Rect(int(x), int(y), FOOD_ICON_SIZE, FOOD_ICON_SIZE)
        pygame.draw.ellipse(self.screen, FOOD_ICON_COLOR, rect)
        pygame.draw.ellipse(self.screen, FOOD_ICON_OUTLINE_COLOR, rect, 2)

    def draw_carried_food(self, snapshot: GameSnapshot) -> None:
        """Draw the food being dragged under the pointer."""
        if not snapshot.dragging or snapshot.pointer is None:
            return
        x, y = snapshot.pointer
        half = FOOD_ICON_SIZE / 2
        self.draw_food_icon(x - half, y - half)

    def draw_hud(self, snapshot: GameSnapshot) -> None:
        """Draw the level, population and casualty counters."""
        lines = [
            (f"Level: {snapshot.level}", LEVEL_TEXT_COLOR),
            (f"Alive: {snapshot.alive} / {snapshot.target_population}", ALIVE_TEXT_COLOR),
            (f"Death: {snapshot.deaths} / {snapshot.casualty_limit}", DEATH_TEXT_COLOR),
        ]
        column_width = (self.config.tank.width - 2 * HUD_MARGIN) // len(lines)
        for i, (text, color) in enumerate(lines):
            surface = self.font.render(text, True, color)
            self.screen.blit(surface, (HUD_MARGIN + i * column_width, HUD_MARGIN))

    def draw_notifications(self, notifications: List[Dict[str, Any]]) -> None:
        """Draw banners centered over the tank, newest at the bottom."""
        tank = self.config.tank.tank_bounds
        center = tank.center
        y_offset = center.y
        for notif in notifications:
            text_surface = self.font.render(notif["message"], True, notif["color"])
            banner = pygame.Surface((text_surface.get_width() + 20, text_surface.get_height() + 10))
            banner.set_alpha(220)
            banner.fill(PANEL_COLOR)

            x_pos = center.x - banner.get_width() / 2
            self.screen.blit(banner, (x_pos, y_offset))
            self.screen.blit(text_surface, (x_pos + 10, y_offset + 5))
            y_offset += banner.get_height() + 5
