"""Tests for the pygame front-end that do not need a window."""

import pytest

pygame = pytest.importorskip("pygame")

from fishgame.config import GameConfig  # noqa: E402
from fishtank import FishTankApp  # noqa: E402
from rendering.entity_renderer import EntityRenderer  # noqa: E402
from rendering.ui_renderer import UIRenderer  # noqa: E402


@pytest.fixture
def app():
    return FishTankApp(seed=11)


class TestNotifications:
    def test_game_over_banner_persists(self, app):
        app.game.level.record_deaths(5)
        app.update(16)
        assert [n["message"] for n in app.notifications] == ["Game over - press R to restart"]

        app.update(10_000)

        assert len(app.notifications) == 1

    def test_level_banner_expires(self, app):
        app.add_notification("Level 1 complete!", (0, 0, 0))
        app.update(1000)
        assert len(app.notifications) == 1
        app.update(1000)
        assert app.notifications == []

    def test_restart_clears_banners(self, app):
        app.game.level.record_deaths(5)
        app.update(16)

        app.restart()

        assert app.notifications == []
        assert app.game.level.death_count == 0


def test_update_feeds_food_timer(app):
    for _ in range(125):
        app.update(16)
    assert app.game.level.food_charges == 1


def test_render_without_window_is_noop(app):
    app.render()
    assert app.screen is None


def test_renderers_draw_a_snapshot():
    pygame.font.init()
    try:
        config = GameConfig()
        screen = pygame.Surface((config.tank.width, config.tank.height))
        ui = UIRenderer(screen, pygame.font.Font(None, 22), config)
        entities = EntityRenderer(screen)
        app = FishTankApp(config, seed=3)
        app.game.level.food_charges = 3
        snapshot = app.game.snapshot()

        entities.draw(snapshot, config.tank.tank_bounds)
        ui.draw_food_panel(snapshot)
        ui.draw_hud(snapshot)
        ui.draw_carried_food(snapshot)
        ui.draw_notifications([{"message": "Level 1 complete!", "color": (0, 0, 0)}])

        # First panel icon is filled at (START_X, ICON_Y) + half an icon
        assert tuple(screen.get_at((30, 70)))[:3] == (255, 165, 0)
    finally:
        pygame.font.quit()
