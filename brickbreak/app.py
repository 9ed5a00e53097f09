"""The windowed game: difficulty menu, main loop and drawing."""

from __future__ import annotations

import argparse
import os

import pygame

from brickbreak.game import SCREEN_HEIGHT, SCREEN_WIDTH, Controls, Difficulty, Game
from brickbreak.geometry import Rect, Vec2, check_collision_point_rect
from brickbreak.highscore import load_high_score, save_high_score

FPS = 60
TITLE = "Brick Matrix Levels with Non-Breakable Bricks"
HIGH_SCORE_FILE = "highscore.txt"

RAYWHITE = (245, 245, 245)
LIGHTGRAY = (200, 200, 200)
DARKGRAY = (80, 80, 80)
GRAY = (130, 130, 130)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (230, 41, 55)
BLUE = (0, 121, 241)

_BUTTONS: tuple[tuple[Difficulty, Rect, str, int], ...] = (
    (Difficulty.EASY, Rect(300, 150, 200, 50), "Easy", 370),
    (Difficulty.MEDIUM, Rect(300, 250, 200, 50), "Medium", 350),
    (Difficulty.HARD, Rect(300, 350, 200, 50), "Hard", 370),
)


def difficulty_at(point: Vec2) -> Difficulty | None:
    """The difficulty whose menu button lies under ``point``, if any."""
    for difficulty, rect, _, _ in _BUTTONS:
        if check_collision_point_rect(point, rect):
            return difficulty
    return None


def _to_pg(rect: Rect) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))


class _Painter:
    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def text(self, message: str, x: float, y: float, size: int, color) -> None:
        self.screen.blit(self._font(size).render(message, True, color), (int(x), int(y)))

    def centered(self, message: str, y: float, size: int, color) -> None:
        width = self._font(size).size(message)[0]
        self.text(message, self.screen.get_width() / 2 - width / 2, y, size, color)


def _is_quit(event: pygame.event.Event) -> bool:
    return event.type == pygame.QUIT or (
        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
    )


def _choose_difficulty(
    screen: pygame.Surface, clock: pygame.time.Clock, painter: _Painter
) -> Difficulty | None:
    while True:
        for event in pygame.event.get():
            if _is_quit(event):
                return None
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                chosen = difficulty_at(Vec2(*event.pos))
                if chosen is not None:
                    return chosen

        screen.fill(RAYWHITE)
        for _, rect, _, _ in _BUTTONS:
            pygame.draw.rect(screen, LIGHTGRAY, _to_pg(rect))
        painter.text("Select Difficulty", 300, 50, 30, DARKGRAY)
        for _, rect, label, label_x in _BUTTONS:
            painter.text(label, label_x, rect.y + 15, 20, BLACK)
        pygame.display.flip()
        clock.tick(FPS)


def _draw(screen: pygame.Surface, painter: _Painter, game: Game) -> None:
    screen.fill(WHITE)
    width, height = screen.get_size()

    if game.status.platform_protected:
        pygame.draw.rect(screen, BLUE, pygame.Rect(0, height - 10, width, 10))

    if not game.status.game_over:
        pygame.draw.rect(screen, BLACK, _to_pg(game.paddle.rect))
        ball = game.ball
        pygame.draw.circle(screen, BLUE, (ball.position.x, ball.position.y), ball.radius)
        for brick in game.bricks:
            if brick.active:
                pygame.draw.rect(screen, RED if brick.breakable else GRAY, _to_pg(brick.rect))
        powerup = game.powerup
        if powerup.active and powerup.kind is not None:
            pygame.draw.rect(screen, powerup.kind.color, _to_pg(powerup.rect))
        painter.text(f"Score: {game.score}", 10, 10, 20, BLACK)
        painter.text(f"High Score: {game.high_score}", 150, 10, 20, BLACK)
        painter.text(f"Lives: {game.status.lives}", 700, 10, 20, BLACK)
    else:
        painter.text("Game Over!", 300, 250, 40, RED)
        painter.text("Press R to Restart", 300, 300, 20, WHITE)

    if game.paused:
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 128))
        screen.blit(overlay, (0, 0))
        painter.centered("PAUSED", 200, 40, WHITE)
        painter.centered("Press P to Resume", 250, 20, WHITE)
        painter.centered("Press Q to Quit", 280, 20, WHITE)


def _play(
    screen: pygame.Surface, clock: pygame.time.Clock, painter: _Painter, game: Game
) -> None:
    while True:
        dt = clock.tick(FPS) / 1000.0
        launch = pause = restart = False
        for event in pygame.event.get():
            if _is_quit(event):
                return
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_p:
                    pause = not pause
                elif event.key == pygame.K_SPACE:
                    launch = True
                elif event.key == pygame.K_r:
                    restart = True
        keys = pygame.key.get_pressed()
        game.update(
            dt,
            Controls(
                left=bool(keys[pygame.K_LEFT]),
                right=bool(keys[pygame.K_RIGHT]),
                launch=launch,
                pause=pause,
                restart=restart,
            ),
        )
        _draw(screen, painter, game)
        pygame.display.flip()


def run(
    screen: pygame.Surface,
    clock: pygame.time.Clock,
    high_score_path: str | os.PathLike[str] = HIGH_SCORE_FILE,
) -> None:
    """Show the difficulty menu, play until the window closes, keep the high score."""
    pygame.font.init()
    painter = _Painter(screen)
    difficulty = _choose_difficulty(screen, clock, painter)
    high_score = load_high_score(high_score_path)
    if difficulty is not None:
        game = Game(
            difficulty,
            high_score=high_score,
            screen_width=screen.get_width(),
            screen_height=screen.get_height(),
        )
        _play(screen, clock, painter, game)
    save_high_score(high_score_path, high_score)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play."""
    parser = argparse.ArgumentParser(description="Break the bricks with a bouncing ball.")
    parser.add_argument(
        "--high-score-file",
        default=HIGH_SCORE_FILE,
        help="where the high score is kept (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        run(screen, pygame.time.Clock(), args.high_score_file)
    finally:
        pygame.quit()
    return 0