# main.py
import argparse
import logging
import random
from typing import Dict, List, Optional, Tuple

import pygame # type: ignore

from .config import (
    BOARD_SIZE, CELL_SIZE, HUD_HEIGHT,
    BG, BORDER, HEAD, BODY, FOOD, TEXT, MUTED, GOLD,
    Direction, Config, default_high_score_file,
)
from .controls import InputFilter, Intent
from .game import GamePhase, GameSnapshot, SnakeGame
from .observe import board_matrix, BODY as CELL_BODY, HEAD as CELL_HEAD, FOOD as CELL_FOOD
from .scores import HighScoreTracker, InMemoryScoreStore, JsonScoreStore, ScoreStore
from .ticker import Ticker

logger = logging.getLogger(__name__)

PAD_HEIGHT = 120
PAD_BUTTON = 36

CELL_COLORS = {CELL_BODY: BODY, CELL_HEAD: HEAD, CELL_FOOD: FOOD}


# ---------- Layout ----------
def window_size(cell_size: int, board_size: int = BOARD_SIZE) -> Tuple[int, int]:
    side = cell_size * board_size
    return side, HUD_HEIGHT + side + PAD_HEIGHT

def dpad_rects(cell_size: int, board_size: int = BOARD_SIZE) -> Dict[Direction, pygame.Rect]:
    """On-screen arrow buttons below the board, laid out as a plus sign."""
    width, _ = window_size(cell_size, board_size)
    cx = width // 2
    cy = HUD_HEIGHT + cell_size * board_size + PAD_HEIGHT // 2
    half = PAD_BUTTON // 2
    return {
        Direction.UP:    pygame.Rect(cx - half, cy - half - PAD_BUTTON, PAD_BUTTON, PAD_BUTTON),
        Direction.DOWN:  pygame.Rect(cx - half, cy + half, PAD_BUTTON, PAD_BUTTON),
        Direction.LEFT:  pygame.Rect(cx - half - PAD_BUTTON, cy - half, PAD_BUTTON, PAD_BUTTON),
        Direction.RIGHT: pygame.Rect(cx + half, cy - half, PAD_BUTTON, PAD_BUTTON),
    }

def button_at(pos: Tuple[int, int], buttons: Dict[Direction, pygame.Rect]) -> Optional[Direction]:
    for direction, rect in buttons.items():
        if rect.collidepoint(pos):
            return direction
    return None


# ---------- Draw ----------
def draw_board(screen: pygame.Surface, snap: GameSnapshot, cell_size: int, board_size: int) -> None:
    top = HUD_HEIGHT
    side = cell_size * board_size
    grid = board_matrix(snap, board_size)
    for y, x in zip(*grid.nonzero()):
        rect = pygame.Rect(int(x) * cell_size, top + int(y) * cell_size, cell_size, cell_size)
        pygame.draw.rect(screen, CELL_COLORS[int(grid[y, x])], rect, border_radius=3)
    pygame.draw.rect(screen, BORDER, pygame.Rect(0, top, side, side), width=2)

def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: GameSnapshot) -> None:
    title = font.render("Greedy Snake", True, BORDER)
    score = font.render(f"Score: {snap.score}", True, TEXT)
    best  = font.render(f"Best: {snap.high_score}", True, MUTED)
    screen.blit(title, (8, 8))
    screen.blit(best, (screen.get_width() - best.get_width() - score.get_width() - 24, 8))
    screen.blit(score, (screen.get_width() - score.get_width() - 8, 8))

def draw_dpad(screen: pygame.Surface, font: pygame.font.Font, buttons: Dict[Direction, pygame.Rect]) -> None:
    labels = {Direction.UP: "^", Direction.DOWN: "v", Direction.LEFT: "<", Direction.RIGHT: ">"}
    for direction, rect in buttons.items():
        pygame.draw.rect(screen, MUTED, rect, border_radius=6)
        label = font.render(labels[direction], True, TEXT)
        screen.blit(label, label.get_rect(center=rect.center))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines: List[Tuple[str, Tuple[int, int, int]]]) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    cx = screen.get_width() // 2
    y = screen.get_height() // 2 - 16 * len(lines)
    for text, color in lines:
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(cx, y)))
        y += 32

def draw_frame(screen, font, snap: GameSnapshot, buttons, cell_size: int, board_size: int) -> None:
    screen.fill(BG)
    draw_hud(screen, font, snap)
    draw_board(screen, snap, cell_size, board_size)
    draw_dpad(screen, font, buttons)

    if snap.phase is GamePhase.NOT_STARTED:
        draw_overlay(screen, font, [
            ("Greedy Snake", BORDER),
            ("Eat red pellets to grow.", TEXT),
            ("Don't hit walls or your tail!", TEXT),
            ("Press SPACE to start", TEXT),
        ])
    elif snap.phase is GamePhase.GAME_OVER:
        lines = [("GAME OVER", (240, 240, 250)), (f"Final Score: {snap.score}", TEXT)]
        if snap.is_new_record:
            lines.append(("NEW RECORD!", GOLD))
        lines.append((f"Your Best: {snap.high_score}", MUTED))
        lines.append(("Press R to play again", TEXT))
        draw_overlay(screen, font, lines)


# ---------- Setup ----------
def build_store(cfg: Config, no_save: bool = False) -> ScoreStore:
    if no_save:
        return InMemoryScoreStore()
    return JsonScoreStore(cfg.high_score_file)

def build_config(args: argparse.Namespace) -> Config:
    return Config(seed=args.seed, high_score_file=args.high_score_file)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Greedy Snake: eat, grow, don't crash.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="pixels per grid cell")
    parser.add_argument(
        "--high-score-file",
        type=str,
        default=None,
        help="where the best score is kept (default: $GREEDY_SNAKE_HIGHSCORE_FILE "
             "or ~/.greedy_snake/highscore.json)",
    )
    parser.add_argument("--no-save", action="store_true", help="don't read or write the best score")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    if args.high_score_file is None:
        args.high_score_file = default_high_score_file()
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = build_config(args)
    tracker = HighScoreTracker(build_store(cfg, args.no_save))
    game = SnakeGame(tracker, rng=random.Random(cfg.seed), cfg=cfg)
    controls = InputFilter(game)
    ticker = Ticker(game)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(window_size(args.cell_size))
    pygame.display.set_caption("Greedy Snake")
    clock = pygame.time.Clock()
    buttons = dpad_rects(args.cell_size)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if controls.handle_key(pygame.key.name(event.key)) is Intent.QUIT:
                    running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                direction = button_at(event.pos, buttons)
                if direction is not None:
                    controls.press(direction)

        # 2) update
        ticker.poll(pygame.time.get_ticks())

        # 3) render
        draw_frame(screen, font, game.snapshot(), buttons, args.cell_size, game.board_size)
        pygame.display.flip()
        clock.tick(60)  # high FPS; movement gated by the ticker

    pygame.quit()
    print(f"Best score: {tracker.high_score}")

if __name__ == "__main__":
    main()
