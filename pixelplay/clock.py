"""An analogue clock face with second, minute and hour hands."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

_PI = 3.1415926

WINDOW_SIZE = 900
TITLE = "Tik-tak"


@dataclass(frozen=True)
class Segment:
    """A straight line to be stroked with a coloured pen."""

    start: tuple[float, float]
    end: tuple[float, float]
    color: str
    width: int


@dataclass(frozen=True)
class Arc:
    """An arc inside a bounding rectangle; angles in degrees, counter-clockwise."""

    rect: tuple[float, float, float, float]
    start_angle: float
    span_angle: float
    color: str
    width: int


def _radians(degrees: float) -> float:
    return degrees * _PI / 180


class ClockFace:
    """State and geometry of the clock.

    Angles are in degrees, measured counter-clockwise from three o'clock,
    so 90 points at twelve.
    """

    def __init__(self, width: int = WINDOW_SIZE, height: int = WINDOW_SIZE) -> None:
        self.second_angle = 90.0
        self.minute_angle = 90.0
        self.hour_angle = 90.0
        self.seconds = 0.0
        self.minutes = 0
        self.hours = 0
        self.running = False
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """Recompute the centre and radii for a new window size."""
        self.width = width
        self.height = height
        side = min(width, height)
        self.r = float(side // 4)
        self.rclock = 1.2 * self.r
        self.cx = float(side // 2)
        self.cy = float(side // 2)

    def tick(self) -> None:
        """Advance the hands by one second."""
        self.seconds += 1
        self.second_angle -= 6
        if self.second_angle + 270 == 0:
            self.second_angle = 90.0

        if self.minute_angle + 270 == 0:
            self.minute_angle = 90.0
        self.minute_angle -= 0.1
        if self.seconds - 60 == 0:
            self.seconds = 0.0
            self.minutes += 1

        self.hour_angle += 0.1 / 60
        if self.hour_angle + 270 == 0:
            self.hour_angle = 90.0
        if self.minutes - 60 == 0:
            self.minutes = 0
            self.hours += 1

    def set_time(self, hours: int, minutes: int, seconds: int) -> None:
        """Point the hands at the given time and start the clock running."""
        self.second_angle = -6.0 * seconds + 90 + 18
        self.seconds = float(seconds)
        self.minute_angle = -6.0 * minutes + 90 - 0.1 * self.seconds
        self.minutes = minutes
        self.hour_angle = -30.0 * (hours % 12) + 90 - 0.5 * self.minutes
        self.hours = hours
        self.running = True

    def _hand(self, angle: float, length: float, tail: float, color: str, width: int) -> Segment:
        x1 = self.cx + length * math.cos(_radians(angle))
        y1 = self.cy - length * math.sin(_radians(angle))
        x2 = (x1 - self.cx) / self.r * tail
        y2 = (y1 - self.cy) / self.r * tail
        return Segment((self.cx - x2, self.cy - y2), (x1, y1), color, width)

    def second_hand(self) -> Segment:
        return self._hand(self.second_angle, self.r, 30, "red", 2)

    def minute_hand(self) -> Segment:
        return self._hand(self.minute_angle, self.r * 0.85, 20, "blue", 3)

    def hour_hand(self) -> Segment:
        return self._hand(self.hour_angle, self.r * 0.7, 20, "green", 5)

    def tick_marks(self) -> list[Segment]:
        """Marks for every minute, with longer marks for each hour."""
        marks = []
        for f in range(90, -271, -6):
            c = math.cos(_radians(f))
            s = math.sin(_radians(f))
            outer = (self.cx + self.rclock * c, self.cy - self.rclock * s)
            if f % 30 == 0:
                inner = (self.cx + self.rclock * c * 0.9, self.cy - self.rclock * s * 0.9)
                marks.append(Segment(outer, inner, "black", 4))
            inner = (self.cx + self.rclock * c * 0.95, self.cy - self.rclock * s * 0.95)
            marks.append(Segment(outer, inner, "black", 4))
        return marks

    def arcs(self) -> list[Arc]:
        """Progress arcs for seconds, minutes and hours, from twelve o'clock."""
        result = []
        for offset, angle, color in (
            (10, self.second_angle, "red"),
            (20, self.minute_angle, "blue"),
            (30, self.hour_angle, "green"),
        ):
            rect = (
                self.cx - self.rclock - offset,
                self.cy - self.rclock - offset,
                2 * self.rclock + 2 * offset,
                2 * self.rclock + 2 * offset,
            )
            result.append(Arc(rect, 90.0, angle - 90, color, 8))
        return result


def _draw(pygame, screen, face: ClockFace, font, button) -> None:
    screen.fill("white")

    rim = face.rclock + 40
    pygame.draw.circle(screen, "black", (face.cx, face.cy), rim, 8)
    for arc in face.arcs():
        if arc.span_angle == 0:
            continue
        a, b = sorted((arc.start_angle, arc.start_angle + arc.span_angle))
        if b - a >= 360:
            a = b - 359.999
        pygame.draw.arc(screen, arc.color, pygame.Rect(arc.rect), math.radians(a), math.radians(b), arc.width)

    for hand in (face.second_hand(), face.minute_hand(), face.hour_hand()):
        pygame.draw.line(screen, hand.color, hand.start, hand.end, hand.width)
    for mark in face.tick_marks():
        pygame.draw.line(screen, mark.color, mark.start, mark.end, mark.width)

    pygame.draw.circle(screen, "white", (face.cx, face.cy), 10)
    pygame.draw.circle(screen, "black", (face.cx, face.cy), 10, 2)

    pygame.draw.rect(screen, "white", button)
    pygame.draw.rect(screen, "black", button, 1)
    label = font.render("set system time", True, "black")
    screen.blit(label, label.get_rect(center=button.center))


def main(argv=None) -> int:
    """Open the clock window and run until it is closed."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
        pygame.display.set_caption(TITLE)
        face = ClockFace(WINDOW_SIZE, WINDOW_SIZE)
        font = pygame.font.Font(None, 28)
        button = pygame.Rect(
            int(0.4 * WINDOW_SIZE), int(0.05 * WINDOW_SIZE),
            int(0.2 * WINDOW_SIZE), int(0.05 * WINDOW_SIZE),
        )
        tick_event = pygame.USEREVENT + 1
        frame_clock = pygame.time.Clock()
        open_ = True
        while open_:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    open_ = False
                elif event.type == pygame.MOUSEBUTTONDOWN and button.collidepoint(event.pos):
                    pygame.time.set_timer(tick_event, 0)
                    now = datetime.now()
                    face.set_time(now.hour, now.minute, now.second)
                    pygame.time.set_timer(tick_event, 1000)
                elif event.type == tick_event:
                    face.tick()
            _draw(pygame, screen, face, font, button)
            pygame.display.flip()
            frame_clock.tick(60)
    finally:
        pygame.quit()
    return 0