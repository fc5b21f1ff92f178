import logging
from typing import Any, Dict, List, Optional

import pygame

from fishgame.clock import FoodChargeTimer
from fishgame.config import GameConfig
from fishgame.config.display import (
    DEFEAT_COLOR,
    FRAME_RATE,
    HUD_FONT_SIZE,
    NOTIFICATION_DURATION_MS,
    VICTORY_COLOR,
)
from fishgame.events import GameOverEvent, LevelCompletedEvent, LevelStartedEvent
from fishgame.game import FishTankGame
from rendering.entity_renderer import EntityRenderer
from rendering.ui_renderer import UIRenderer

logger = logging.getLogger(__name__)


class FishTankApp:
    """Desktop front-end: a pygame window around a ``FishTankGame``.

    Attributes:
        game: The game being played
        food_timer: Adds a food charge every charge interval
        screen: Pygame display surface
        clock: Pygame clock for frame rate
        notifications: Active banners (level complete, game over)
    """

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None) -> None:
        self.game = FishTankGame(config, seed=seed)
        self.food_timer = FoodChargeTimer(
            self.game.add_food_charge, self.game.config.food.charge_interval_ms
        )
        self.clock: pygame.time.Clock = pygame.time.Clock()
        self.screen: Optional[pygame.Surface] = None
        self.ui_renderer: Optional[UIRenderer] = None
        self.entity_renderer: Optional[EntityRenderer] = None
        self.notifications: List[Dict[str, Any]] = []
        self.elapsed_ms: float = 0.0

        events = self.game.events
        events.subscribe(LevelStartedEvent, self._on_level_started)
        events.subscribe(LevelCompletedEvent, self._on_level_completed)
        events.subscribe(GameOverEvent, self._on_game_over)

    def setup_game(self) -> bool:
        """Open the window. Returns False if no display is available."""
        tank = self.game.config.tank
        try:
            self.screen = pygame.display.set_mode((tank.width, tank.height))
            pygame.display.set_caption("Fish Tank")
        except pygame.error as e:
            logger.error("Couldn't set the display mode: %s", e)
            return False

        font = pygame.font.Font(None, HUD_FONT_SIZE)
        self.ui_renderer = UIRenderer(self.screen, font, self.game.config)
        self.entity_renderer = EntityRenderer(self.screen)
        return True

    # Event handlers

    def _on_level_started(self, event: LevelStartedEvent) -> None:
        self.food_timer.reset()

    def _on_level_completed(self, event: LevelCompletedEvent) -> None:
        self.add_notification(f"Level {event.level} complete!", VICTORY_COLOR)

    def _on_game_over(self, event: GameOverEvent) -> None:
        # Stays up until restart
        self.add_notification("Game over - press R to restart", DEFEAT_COLOR, duration=None)

    def add_notification(self, message: str, color, duration: Optional[float] = NOTIFICATION_DURATION_MS) -> None:
        self.notifications.append(
            {"message": message, "color": color, "start": self.elapsed_ms, "duration": duration}
        )

    def update_notifications(self) -> None:
        self.notifications = [
            notif
            for notif in self.notifications
            if notif["duration"] is None or self.elapsed_ms - notif["start"] < notif["duration"]
        ]

    def update(self, dt_ms: float) -> None:
        self.elapsed_ms += dt_ms
        self.game.tick(dt_ms)
        self.food_timer.advance(dt_ms)
        self.update_notifications()

    def render(self) -> None:
        if self.screen is None or self.ui_renderer is None or self.entity_renderer is None:
            return

        snapshot = self.game.snapshot()
        self.ui_renderer.draw_food_panel(snapshot)
        self.ui_renderer.draw_hud(snapshot)
        self.entity_renderer.draw(snapshot, self.game.config.tank.tank_bounds)
        self.ui_renderer.draw_carried_food(snapshot)
        self.ui_renderer.draw_notifications(self.notifications)

        pygame.display.flip()

    def restart(self) -> None:
        self.notifications.clear()
        self.game.restart()

    def handle_events(self) -> bool:
        """Forward mouse input to the game. Returns False to quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.game.on_drag_start(event.pos)
            elif event.type == pygame.MOUSEMOTION:
                self.game.on_drag_move(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.game.on_drag_release(event.pos)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    self.restart()
                elif event.key == pygame.K_ESCAPE:
                    return False
        return True

    def run(self) -> None:
        if not self.setup_game():
            return

        logger.info("Controls: drag food from the top panel into the tank, R restarts, ESC quits")

        while self.handle_events():
            dt_ms = self.clock.tick(FRAME_RATE)
            self.update(dt_ms)
            self.render()

        logger.info("Game ended: %s", self.game.get_stats())


def main(config: Optional[GameConfig] = None, seed: Optional[int] = None) -> None:
    """Entry point for the desktop game."""
    pygame.init()
    app = FishTankApp(config, seed=seed)
    try:
        app.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    main()
