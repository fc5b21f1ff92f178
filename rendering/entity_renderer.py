"""Draws the tank, the fish and the falling food from a snapshot."""

import pygame

from fishgame.config.display import FALLING_FOOD_COLOR, OUTLINE_COLOR, WATER_COLOR
from fishgame.math_utils import Bounds
from fishgame.snapshot import FishSnapshot, FoodSnapshot, GameSnapshot


class EntityRenderer:
    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen

    def draw(self, snapshot: GameSnapshot, tank: Bounds) -> None:
        self.draw_tank(tank)
        for food in snapshot.foods:
            self.draw_food(food)
        for fish in snapshot.fishes:
            self.draw_fish(fish)

    def draw_tank(self, tank: Bounds) -> None:
        pygame.draw.rect(self.screen, WATER_COLOR, (tank.left, tank.top, tank.width, tank.height))

    def draw_fish(self, fish: FishSnapshot) -> None:
        rect = pygame.Rect(int(fish.x), int(fish.y), int(fish.size), int(fish.size))
        pygame.draw.ellipse(self.screen, fish.color, rect)
        pygame.draw.ellipse(self.screen, OUTLINE_COLOR, rect, 1)

    def draw_food(self, food: FoodSnapshot) -> None:
        rect = pygame.Rect(int(food.x), int(food.y), int(food.size), int(food.size))
        pygame.draw.ellipse(self.screen, FALLING_FOOD_COLOR, rect)
