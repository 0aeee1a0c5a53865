"""A side-scrolling game: keep the block flying through gaps in the walls."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

WIDTH = 900
HEIGHT = 900
BLOCK_SIZE = 40
WALL_WIDTH = 40
GAP = 200
SPACING = 220
START_X = 200.0
START_Y = 450.0
GRAVITY = 0.3
FLAP_VELOCITY = -7.2
SPEED = 1.3

_INITIAL_WALLS = ((490, 450), (710, 300), (930, 300), (1150, 300), (1370, 450), (1590, 260), (1810, 500))


@dataclass
class Obstacle:
    """A wall with a gap starting at gap_top; scorable until passed."""

    x: float
    gap_top: float
    scorable: bool = True


class FlappyGame:
    """Game state advanced one frame at a time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self) -> None:
        """Put the block and walls back at their starting positions."""
        self.x = START_X
        self.y = START_Y
        self.gravity = GRAVITY
        self.velocity = 0.0
        self.speed = SPEED
        self.score = 0
        self.obstacles = [Obstacle(float(x), float(top)) for x, top in _INITIAL_WALLS]

    def flap(self) -> None:
        self.velocity = FLAP_VELOCITY

    def step(self) -> None:
        """Advance one frame."""
        self.scroll()
        self.apply_gravity()
        self.recycle_obstacles()
        self.check_death()
        self.check_score()

    def scroll(self) -> None:
        for obstacle in self.obstacles:
            obstacle.x -= self.speed

    def apply_gravity(self) -> None:
        if self.velocity != 0:
            self.velocity += self.gravity
        else:
            self.velocity = self.gravity
        self.y += self.velocity

    def recycle_obstacles(self) -> None:
        """Replace the leftmost wall with a new one once it is off screen."""
        if self.obstacles[0].x + WALL_WIDTH < 0:
            self.obstacles.pop(0)
            last_x = math.trunc(self.obstacles[-1].x)
            gap_top = self.rng.randrange(600)
            if gap_top < 200:
                gap_top += 200
            self.obstacles.append(Obstacle(float(last_x + SPACING), float(gap_top)))

    def check_death(self) -> bool:
        """Restart the game if the block hits a wall; report whether it did."""
        for obstacle in self.obstacles:
            if obstacle.x <= self.x + BLOCK_SIZE and self.x <= obstacle.x + WALL_WIDTH:
                if obstacle.gap_top >= self.y or obstacle.gap_top + GAP <= self.y + BLOCK_SIZE:
                    self.reset()
                    return True
        return False

    def check_score(self) -> None:
        for obstacle in self.obstacles:
            if obstacle.scorable and obstacle.x < START_X:
                self.score += 1
                obstacle.scorable = False


def main(argv=None) -> int:
    """Open the game window; space flaps."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("flappy block")
        font = pygame.font.Font(None, 90)
        game = FlappyGame()
        frame_clock = pygame.time.Clock()
        open_ = True
        while open_:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    open_ = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    game.flap()

            screen.fill("white")
            pygame.draw.rect(screen, "black", (game.x, game.y, BLOCK_SIZE, BLOCK_SIZE))
            for obstacle in game.obstacles:
                pygame.draw.rect(screen, "black", (obstacle.x, 0, WALL_WIDTH, obstacle.gap_top))
                lower = obstacle.gap_top + GAP
                pygame.draw.rect(screen, "black", (obstacle.x, lower, WALL_WIDTH, HEIGHT - lower))
            label = font.render(str(game.score), True, "black")
            screen.blit(label, (0.45 * WIDTH, 0.1 * HEIGHT - label.get_height()))
            pygame.display.flip()

            game.step()
            frame_clock.tick(100)
    finally:
        pygame.quit()
    return 0