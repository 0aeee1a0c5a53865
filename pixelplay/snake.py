"""The snake game: steer the snake to the food without leaving the field."""

from __future__ import annotations

import math
import random
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

CELL_SIZE = 30.0
FIELD_SIZE = 30.0
MIN_WINDOW = 400
STEP_MS = 100
INITIAL_LENGTH = 3
BACKGROUND = (226, 233, 127)
SPRITE_PATH = "sprites/snake.png"
RECORD_PATH = "records.txt"
FRUIT_SPRITE = (0, 90)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Direction(Enum):
    """Heading of the snake's head."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3

    @property
    def delta(self) -> tuple[int, int]:
        return {
            Direction.RIGHT: (1, 0),
            Direction.LEFT: (-1, 0),
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
        }[self]

    @property
    def opposite(self) -> Direction:
        return {
            Direction.RIGHT: Direction.LEFT,
            Direction.LEFT: Direction.RIGHT,
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
        }[self]


@dataclass(frozen=True)
class Block:
    """One cell of the snake's body."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Food:
    """The cell the snake is looking for."""

    x: int = 0
    y: int = 0

    @classmethod
    def random(cls, width: float, height: float, rng: random.Random | None = None) -> Food:
        """Place food on a random cell of a field of the given size."""
        rng = rng if rng is not None else random.Random()
        return cls(rng.randrange(int(width)), rng.randrange(int(height)))


class RecordStore:
    """The best score, kept as a number in a text file."""

    def __init__(self, path: str | Path = RECORD_PATH) -> None:
        self.path = Path(path)

    def load(self) -> int:
        """Return the stored record, or 0 if there is none to read."""
        try:
            text = self.path.read_text()
        except OSError:
            return 0
        match = _LEADING_INT.match(text)
        return int(match.group(1)) if match else 0

    def update(self, score: int) -> int:
        """Store the score if it beats the record; return the record."""
        record = max(self.load(), score)
        try:
            self.path.write_text(str(record))
        except OSError:
            pass
        return record


@dataclass(frozen=True)
class SpriteCell:
    """Where a snake cell is drawn and which sprite-sheet offset it uses."""

    x: int
    y: int
    sprite_x: int
    sprite_y: int


class SnakeGame:
    """Game state advanced one step at a time."""

    def __init__(
        self,
        field_width: float = FIELD_SIZE,
        field_height: float = FIELD_SIZE,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.field_width = float(field_width)
        self.field_height = float(field_height)
        self.cell_width = CELL_SIZE
        self.cell_height = CELL_SIZE
        self.reset()

    def reset(self) -> None:
        """Start a new game with a short snake in the middle of the field."""
        self.playing = True
        self.menu = False
        self.direction = Direction.RIGHT
        self.snake = [
            Block(math.trunc(self.field_width / 2 - i), math.trunc(self.field_height / 2))
            for i in range(INITIAL_LENGTH)
        ]
        self.fruit = Food.random(self.field_width, self.field_height, self.rng)
        self.score = 0

    @property
    def head(self) -> Block:
        return self.snake[0]

    def turn(self, direction: Direction) -> bool:
        """Change heading unless that would reverse the snake; report whether it did."""
        if direction is self.direction.opposite:
            return False
        self.direction = direction
        return True

    def move(self) -> None:
        """Move the head one cell forward; the body follows."""
        dx, dy = self.direction.delta
        new_head = Block(self.head.x + dx, self.head.y + dy)
        self.snake = [new_head, *self.snake[:-1]]

    def eat(self) -> bool:
        """Grow and score if the head is on the food; report whether it was."""
        if self.head.x == self.fruit.x and self.head.y == self.fruit.y:
            self.snake.append(Block(-1, -1))
            self.score += 1
            self.fruit = Food.random(self.field_width, self.field_height, self.rng)
            return True
        return False

    def trim_self_collision(self) -> int:
        """Cut the tail off where the head bit into it; return how many cells went."""
        if len(self.snake) <= 4:
            return 0
        pos = next(
            (i for i, block in enumerate(self.snake[1:], start=1) if block == self.head),
            len(self.snake),
        )
        if pos <= 4:
            return 0
        removed = len(self.snake) - pos
        del self.snake[pos:]
        return removed

    def check_bounds(self) -> bool:
        """End the game if the head has left the field; report whether it has."""
        head = self.head
        if (
            head.x < 0
            or head.x >= self.field_width
            or head.y < 0
            or head.y >= self.field_height
        ):
            self.playing = False
            self.menu = True
            return True
        return False

    def step(self) -> None:
        """Advance one tick while the game is running."""
        if not self.playing:
            return
        self.move()
        self.eat()
        self.trim_self_collision()
        self.check_bounds()

    def resize(self, width: float, height: float) -> None:
        """Fit cell and field size to a window of the given pixel size."""
        self.cell_height = self.field_height = math.sqrt(height)
        self.cell_width = self.field_width = math.sqrt(width)

    def sprite_cells(self) -> list[SpriteCell]:
        """Sprite-sheet offsets for the head, body and tail, head first."""
        snake = self.snake
        cells = []

        head, following = snake[0], snake[1]
        offset = (120, 0)
        if head.x == following.x and head.y < following.y:
            offset = (90, 0)
        if head.x < following.x and head.y == following.y:
            offset = (90, 30)
        if head.x == following.x and head.y > following.y:
            offset = (120, 30)
        cells.append(SpriteCell(head.x, head.y, *offset))

        for prev, cur, nxt in zip(snake, snake[1:-1], snake[2:]):
            cells.append(SpriteCell(cur.x, cur.y, *_body_offset(prev, cur, nxt)))

        tail, before = snake[-1], snake[-2]
        offset = (90, 90)
        if tail.x == before.x and tail.y < before.y:
            offset = (120, 90)
        if tail.x < before.x and tail.y == before.y:
            offset = (120, 60)
        if tail.x == before.x and tail.y > before.y:
            offset = (90, 60)
        cells.append(SpriteCell(tail.x, tail.y, *offset))
        return cells


def _body_offset(p: Block, c: Block, n: Block) -> tuple[int, int]:
    offset = (30, 0)
    if c.y != p.y:
        offset = (60, 30)
    rules = (
        (c.x < p.x and c.y == p.y and c.x == n.x and c.y < n.y, (0, 0)),
        (c.x < n.x and c.y == n.y and c.x == p.x and c.y < p.y, (0, 0)),
        (c.x < p.x and c.y == p.y and c.x == n.x and c.y > n.y, (0, 30)),
        (c.x < n.x and c.y == n.y and c.x == p.x and c.y > p.y, (0, 30)),
        (c.x == p.x and c.y < p.y and c.x > n.x and c.y == n.y, (60, 0)),
        (c.x == n.x and c.y < n.y and c.x > p.x and c.y == p.y, (60, 0)),
        (c.x > p.x and c.y == p.y and c.x == n.x and c.y > n.y, (60, 60)),
        (c.x > n.x and c.y == n.y and c.x == p.x and c.y > p.y, (60, 60)),
    )
    for matched, candidate in rules:
        if matched:
            offset = candidate
    return offset


_KEY_DIRECTIONS = {
    "K_RIGHT": Direction.RIGHT,
    "K_LEFT": Direction.LEFT,
    "K_UP": Direction.UP,
    "K_DOWN": Direction.DOWN,
}


def _load_sprite(pygame):
    try:
        return pygame.image.load(SPRITE_PATH).convert_alpha()
    except (pygame.error, FileNotFoundError, OSError):
        return None


def _draw_game(pygame, screen, game: SnakeGame, sprite) -> None:
    screen.fill(BACKGROUND)
    cw, ch = game.cell_width, game.cell_height
    scaled = None
    if sprite is not None:
        scaled = pygame.transform.scale(sprite, (int(5 * cw), int(4 * ch)))

    def blit(x, y, sx, sy, fallback):
        dest = (x * cw, y * ch)
        if scaled is not None:
            screen.blit(scaled, dest, pygame.Rect(sx, sy, int(cw), int(ch)))
        else:
            pygame.draw.rect(screen, fallback, pygame.Rect(dest, (cw, ch)))

    for cell in game.sprite_cells():
        blit(cell.x, cell.y, cell.sprite_x, cell.sprite_y, (40, 120, 40))
    blit(game.fruit.x, game.fruit.y, *FRUIT_SPRITE, (200, 40, 40))


def _menu_buttons(pygame, size):
    w, h = size
    restart = pygame.Rect(int(0.3 * w), int(0.5 * h), int(0.2 * w), int(0.1 * h))
    quit_ = pygame.Rect(int(0.5 * w), int(0.5 * h), int(0.2 * w), int(0.1 * h))
    return restart, quit_


def _draw_menu(pygame, screen, game: SnakeGame, record: int, font, small) -> None:
    screen.fill("white")
    w, h = screen.get_size()
    for text, y in ((f"Your record: {record}", 0.3 * h), (f"Your score: {game.score}", 0.45 * h)):
        label = font.render(text, True, "black")
        screen.blit(label, (0.3 * w, y - label.get_height()))
    for rect, text in zip(_menu_buttons(pygame, (w, h)), ("Restart", "Quit")):
        pygame.draw.rect(screen, (230, 230, 230), rect)
        pygame.draw.rect(screen, "black", rect, 1)
        label = small.render(text, True, "black")
        screen.blit(label, label.get_rect(center=rect.center))


def main(argv=None) -> int:
    """Open the game window; arrow keys steer."""
    import pygame

    pygame.init()
    try:
        size = (int(CELL_SIZE * FIELD_SIZE), int(CELL_SIZE * FIELD_SIZE))
        screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption("snake")
        sprite = _load_sprite(pygame)
        font = pygame.font.Font(None, 48)
        small = pygame.font.Font(None, 32)
        keys = {getattr(pygame, name): direction for name, direction in _KEY_DIRECTIONS.items()}
        records = RecordStore()
        game = SnakeGame()
        record = 0
        step_event = pygame.USEREVENT + 1
        pygame.time.set_timer(step_event, STEP_MS)
        frame_clock = pygame.time.Clock()
        open_ = True
        while open_:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    open_ = False
                elif event.type == pygame.VIDEORESIZE:
                    size = (max(event.w, MIN_WINDOW), max(event.h, MIN_WINDOW))
                    screen = pygame.display.set_mode(size, pygame.RESIZABLE)
                elif event.type == pygame.KEYDOWN and event.key in keys:
                    game.turn(keys[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN and game.menu:
                    restart, quit_ = _menu_buttons(pygame, screen.get_size())
                    if restart.collidepoint(event.pos):
                        game.reset()
                    elif quit_.collidepoint(event.pos):
                        open_ = False
                elif event.type == step_event:
                    was_playing = game.playing
                    game.step()
                    if was_playing and not game.playing:
                        record = records.update(game.score)
                    game.resize(*screen.get_size())
            if game.playing:
                _draw_game(pygame, screen, game, sprite)
            else:
                _draw_menu(pygame, screen, game, record, font, small)
            pygame.display.flip()
            frame_clock.tick(60)
    finally:
        pygame.quit()
    return 0