# sarcastic_runner/game/render.py
from __future__ import annotations
import pygame
from .config import (
    WIDTH, HEIGHT, GROUND_Y, GROUND_STRIPE_W, PROGRESS_SPAN,
    COLOR_BG, COLOR_BG_FINAL, COLOR_FG, COLOR_HUD_DIM, COLOR_STRIPE_A, COLOR_STRIPE_B,
    COLOR_PLAYER, COLOR_PROGRESS, COLOR_PROGRESS_FRAME
)
from .session import Session, GameState


class Fonts:
    """HUD fonts. Create after pygame.init()."""
    def __init__(self):
        self.big = pygame.font.SysFont("sans", 28)
        self.hud = pygame.font.SysFont("jetbrainsmono", 16)
        self.small = pygame.font.SysFont("sans", 12)


def draw_ground(surf: pygame.Surface, offset: float):
    """Vertical two-tone stripes scrolling with the world."""
    period = GROUND_STRIPE_W * 2
    shift = offset % period
    n = WIDTH // GROUND_STRIPE_W + 3
    for i in range(n):
        x = int(i * GROUND_STRIPE_W - shift)
        color = COLOR_STRIPE_A if i % 2 == 0 else COLOR_STRIPE_B
        pygame.draw.rect(surf, color, pygame.Rect(x, GROUND_Y, GROUND_STRIPE_W, HEIGHT - GROUND_Y))


def draw_stickman(surf: pygame.Surface, player):
    """Stick figure fitted to the player's hitbox (head at the top, feet on the bottom edge)."""
    r = player.rect
    cx = r.centerx
    head_r = 8
    leg = min(20, r.height // 3)
    neck_y = r.top + head_r * 2
    hip_y = r.bottom - leg
    hip_x = cx - 10 if player.ducking else cx   # torso bent forward

    pygame.draw.circle(surf, COLOR_PLAYER, (cx, r.top + head_r), head_r, 3)
    pygame.draw.line(surf, COLOR_PLAYER, (cx, neck_y), (hip_x, hip_y), 3)

    arm_y = neck_y + (hip_y - neck_y) * 0.3
    pygame.draw.line(surf, COLOR_PLAYER, (cx, arm_y), (cx - 15, arm_y + 12), 3)
    pygame.draw.line(surf, COLOR_PLAYER, (cx, arm_y), (cx + 15, arm_y + 12), 3)

    pygame.draw.line(surf, COLOR_PLAYER, (hip_x, hip_y), (hip_x - 8, r.bottom - 2), 3)
    pygame.draw.line(surf, COLOR_PLAYER, (hip_x, hip_y), (hip_x + 8, r.bottom - 2), 3)


def draw_hud(surf: pygame.Surface, fonts: Fonts, session: Session):
    surf.blit(fonts.hud.render(f"Score: {int(session.score)}", True, COLOR_FG), (12, 10))
    surf.blit(fonts.hud.render(f"High: {session.high_score}", True, COLOR_FG), (12, 30))

    # the finish line never comes closer
    frame = pygame.Rect(WIDTH - 240, 12, 220, 16)
    pygame.draw.rect(surf, COLOR_PROGRESS_FRAME, frame, width=1)
    fill_w = int(min(216, (session.fake_progress % PROGRESS_SPAN) / PROGRESS_SPAN * 216))
    pygame.draw.rect(surf, COLOR_PROGRESS, pygame.Rect(WIDTH - 238, 14, fill_w, 12))
    surf.blit(fonts.small.render("Finish Line ->", True, COLOR_FG), (WIDTH - 120, 13))

    if session.message:
        surf.blit(fonts.small.render(session.message, True, COLOR_HUD_DIM), (12, HEIGHT - 24))


def draw_center_text(surf: pygame.Surface, font: pygame.font.Font, text: str, dy: int = 0):
    img = font.render(text, True, COLOR_FG)
    surf.blit(img, (WIDTH // 2 - img.get_width() // 2, HEIGHT // 2 - img.get_height() // 2 + dy))


def draw_start_screen(surf: pygame.Surface, fonts: Fonts, session: Session):
    surf.fill(COLOR_BG)
    draw_center_text(surf, fonts.big, "Press SPACE to start running", -10)
    draw_center_text(surf, fonts.hud, "Jump: Space/Up   Duck: Down   Restart: R   Quit: Q", 24)
    if session.notice:
        draw_center_text(surf, fonts.hud, session.notice, 60)
    if session.high_score:
        draw_center_text(surf, fonts.hud, f"High score: {session.high_score}", -60)


def draw_overlay(surf: pygame.Surface, fonts: Fonts, text: str):
    shade = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 128))
    surf.blit(shade, (0, 0))
    draw_center_text(surf, fonts.big, text)


def render_session(surf: pygame.Surface, fonts: Fonts, session: Session):
    """Draw one frame for whatever state the session is in."""
    if session.state is GameState.WAITING:
        draw_start_screen(surf, fonts, session)
        return

    surf.fill(COLOR_BG_FINAL if session.final_level else COLOR_BG)
    draw_ground(surf, session.fake_progress)
    session.field.draw(surf, session.clock)
    session.cinematic.draw(surf)
    draw_stickman(surf, session.player)
    draw_hud(surf, fonts, session)

    if session.state is GameState.GAMEOVER:
        draw_overlay(surf, fonts, "Game Over - Press R to Restart")
    elif session.state is GameState.WIN:
        draw_overlay(surf, fonts, "YOU WIN (cheater) - Press R to Play Again")
