"""
game_client.py

pygame front end: renders session snapshots, turns SPACE/click into the
single jump/restart input, and hosts the score-submission prompt and the
leaderboard overlay.
"""

import logging
from typing import Optional

import pygame

from .constants import (
    PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT, WATER_HEIGHT, PLAYER_WIDTH, PLAYER_HEIGHT,
    SHARK_WIDTH, BIRD_WIDTH, BIRD_HEIGHT, MAX_PLAYER_NAME_LENGTH, LEADERBOARD_LIMIT,
)
from .data_models import Bird, Shark, Snapshot, format_clock
from .game_engine import GameOver
from .leaderboard import InvalidPlayerName, LeaderboardClient, LeaderboardStore
from .scheduler import GameScheduler
from .session import GameSession

logger = logging.getLogger(__name__)

RENDER_FPS = 60
SHARK_DRAW_HEIGHT = 30

SKY = (135, 206, 235)
WATER = (0, 105, 148)
SUN = (255, 215, 0)
WHITE = (255, 255, 255)
GREY = (200, 200, 200)
RED = (255, 60, 60)
BOAT = (230, 80, 40)
SHARK_GREY = (90, 100, 110)
BIRD_BROWN = (120, 80, 40)
DEAD_BIRD = (60, 60, 60)
PANEL = (20, 30, 50)
GOLD = (255, 215, 0)
SILVER = (192, 192, 192)
BRONZE = (205, 127, 50)

PODIUM = {
    1: ("1st", GOLD),
    2: ("2nd", SILVER),
    3: ("3rd", BRONZE),
}


def rank_style(rank: int):
    """Label and colour for a leaderboard row; the top three get medal colours."""
    return PODIUM.get(rank, (f"#{rank}", WHITE))


class SharkDashClient:
    def __init__(self, store: LeaderboardStore):
        pygame.init()
        self.screen = pygame.display.set_mode((PLAYFIELD_WIDTH, PLAYFIELD_HEIGHT))
        pygame.display.set_caption("Shark Dash")

        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 28)

        # --- Game Logic ---
        self.session = GameSession()
        self.session.on_game_over(self._handle_game_over)
        self.scheduler = GameScheduler(on_frame=self.session.tick, on_second=self.session.countdown)

        # --- Leaderboard ---
        self.leaderboard = LeaderboardClient(store)
        self.final: Optional[GameOver] = None
        self.show_submission = False
        self.show_leaderboard = False
        self.player_name = ""
        self.name_error: Optional[str] = None

        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop."""
        pygame.key.start_text_input()
        running = True
        try:
            while running:
                elapsed_ms = self.clock.tick(RENDER_FPS)

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    else:
                        running = self._handle_event(event)
                    if not running:
                        break

                self.scheduler.advance(elapsed_ms)
                self._poll_leaderboard()
                self._draw(self.session.snapshot())
        finally:
            self.scheduler.cancel()
            self.leaderboard.join(timeout=1.0)
            pygame.quit()

    # -------- Input --------

    def _handle_event(self, event) -> bool:
        """Returns False when the player asked to quit."""
        if self.show_submission:
            self._handle_submission_event(event)
            return True

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                if self.show_leaderboard:
                    self.show_leaderboard = False
                    return True
                return False
            if event.key == pygame.K_l:
                self._open_leaderboard()
                return True
            if event.key == pygame.K_r and self.show_leaderboard:
                self.leaderboard.refresh(LEADERBOARD_LIMIT)
                return True
            if event.key == pygame.K_SPACE:
                self._jump()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if self.show_leaderboard:
                self.show_leaderboard = False
            else:
                self._jump()
        return True

    def _jump(self):
        was_over = self.session.game_over
        self.session.request_jump(self.scheduler.now_ms)
        if was_over:
            self.final = None
            self.scheduler.resume()

    def _handle_submission_event(self, event):
        if event.type == pygame.TEXTINPUT:
            if len(self.player_name) + len(event.text) <= MAX_PLAYER_NAME_LENGTH:
                self.player_name += event.text
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_BACKSPACE:
                self.player_name = self.player_name[:-1]
            elif event.key == pygame.K_ESCAPE:
                self.show_submission = False
            elif event.key == pygame.K_RETURN:
                self._submit_score()

    def _submit_score(self):
        if self.final is None or self.leaderboard.status().submitting:
            return
        try:
            self.leaderboard.submit(self.player_name, self.final.final_score, self.final.final_game_time)
            self.name_error = None
        except InvalidPlayerName as e:
            self.name_error = str(e)

    # -------- Session / leaderboard callbacks --------

    def _handle_game_over(self, signal: GameOver):
        self.scheduler.suspend()
        self.final = signal
        self.show_submission = True
        self.name_error = None
        self.leaderboard.reset_submission()
        logger.info("Final score %d with %s left", signal.final_score, format_clock(signal.final_game_time))

    def _open_leaderboard(self):
        self.show_leaderboard = True
        self.leaderboard.refresh(LEADERBOARD_LIMIT)

    def _poll_leaderboard(self):
        status = self.leaderboard.status()
        if self.show_submission and status.submitted is not None:
            self.show_submission = False
            self.leaderboard.reset_submission()
            self._open_leaderboard()

    # -------- Rendering --------

    def _to_screen_y(self, y: float, height: float) -> float:
        """Bottom-anchored world y to pygame's top-left screen y."""
        return PLAYFIELD_HEIGHT - y - height

    def _draw(self, snapshot: Snapshot):
        """Renders the game state using pygame."""
        screen = self.screen
        screen.fill(SKY)
        pygame.draw.circle(screen, SUN, (PLAYFIELD_WIDTH - 90, 80), 40)
        pygame.draw.rect(screen, WATER, (0, PLAYFIELD_HEIGHT - WATER_HEIGHT, PLAYFIELD_WIDTH, WATER_HEIGHT))

        # Obstacles
        for obstacle in snapshot.obstacles:
            x = obstacle.position.x
            if isinstance(obstacle, Shark):
                top = self._to_screen_y(obstacle.position.y, SHARK_DRAW_HEIGHT)
                pygame.draw.ellipse(screen, SHARK_GREY, (x, top, SHARK_WIDTH, SHARK_DRAW_HEIGHT))
                pygame.draw.polygon(screen, SHARK_GREY, [
                    (x + 14, top + 4), (x + 22, top - 12), (x + 28, top + 4)])
            elif isinstance(obstacle, Bird):
                top = self._to_screen_y(obstacle.position.y, BIRD_HEIGHT)
                color = DEAD_BIRD if obstacle.is_dead else BIRD_BROWN
                pygame.draw.ellipse(screen, color, (x, top, BIRD_WIDTH, BIRD_HEIGHT))

        # Boat
        player = snapshot.player
        top = self._to_screen_y(player.position.y, PLAYER_HEIGHT)
        px = player.position.x
        pygame.draw.polygon(screen, BOAT, [
            (px, top + 15), (px + PLAYER_WIDTH, top + 15),
            (px + PLAYER_WIDTH - 15, top + PLAYER_HEIGHT), (px + 10, top + PLAYER_HEIGHT)])
        pygame.draw.rect(screen, WHITE, (px + 25, top, 25, 15))

        # HUD
        if snapshot.game_over:
            self._draw_game_over(snapshot)
        else:
            score_text = self.large_font.render(f"Score: {snapshot.score}", True, WHITE)
            screen.blit(score_text, (PLAYFIELD_WIDTH // 2 - score_text.get_width() // 2, 20))
            timer_text = self.large_font.render(format_clock(snapshot.time_remaining), True, WHITE)
            screen.blit(timer_text, (20, 20))

        instr = self.font.render("Space / Click = Jump | L = Leaderboard | Esc = Quit", True, GREY)
        screen.blit(instr, (10, PLAYFIELD_HEIGHT - 30))

        if self.show_submission:
            self._draw_submission()
        elif self.show_leaderboard:
            self._draw_leaderboard()

        pygame.display.flip()

    def _draw_game_over(self, snapshot: Snapshot):
        title = self.large_font.render("Game Over", True, RED)
        score = self.font.render(f"Score: {snapshot.score}", True, WHITE)
        hint = self.font.render("Tap to restart", True, WHITE)
        y = PLAYFIELD_HEIGHT // 2 - 80
        for surface in (title, score, hint):
            self.screen.blit(surface, (PLAYFIELD_WIDTH // 2 - surface.get_width() // 2, y))
            y += surface.get_height() + 12

    def _panel(self, width: int, height: int) -> pygame.Rect:
        rect = pygame.Rect(0, 0, width, height)
        rect.center = (PLAYFIELD_WIDTH // 2, PLAYFIELD_HEIGHT // 2)
        pygame.draw.rect(self.screen, PANEL, rect, border_radius=12)
        return rect

    def _draw_submission(self):
        rect = self._panel(460, 260)
        status = self.leaderboard.status()
        final = self.final
        lines = [
            (self.large_font, "Submit Your Score", WHITE),
            (self.font, f"Score: {final.final_score}   Time left: {format_clock(final.final_game_time)}", WHITE),
            (self.font, f"Name: {self.player_name}_", WHITE),
        ]
        if status.submitting:
            lines.append((self.font, "Saving...", GREY))
        elif self.name_error or status.submit_error:
            lines.append((self.font, self.name_error or status.submit_error, RED))
        lines.append((self.font, "Enter = Submit | Esc = Skip", GREY))

        y = rect.top + 20
        for font, text, color in lines:
            surface = font.render(text, True, color)
            self.screen.blit(surface, (rect.left + 20, y))
            y += surface.get_height() + 14

    def _draw_leaderboard(self):
        rect = self._panel(560, 440)
        status = self.leaderboard.status()
        title = self.large_font.render("Leaderboard", True, WHITE)
        self.screen.blit(title, (rect.left + 20, rect.top + 16))

        y = rect.top + 70
        if status.loading:
            message = [("Loading leaderboard...", GREY)]
        elif status.fetch_error:
            message = [(status.fetch_error, RED), ("Press R to try again", GREY)]
        elif not status.entries:
            message = [("No scores yet! Be the first to play!", GREY)]
        else:
            message = []
            for rank, entry in enumerate(status.entries, start=1):
                label, color = rank_style(rank)
                txt = self.font.render(
                    f"{label:<4} {entry.player_name:<20} {entry.score:>4}  "
                    f"{format_clock(entry.game_time)}  {entry.created_at:%Y-%m-%d}", True, color)
                self.screen.blit(txt, (rect.left + 20, y))
                y += 30

        for text, color in message:
            surface = self.font.render(text, True, color)
            self.screen.blit(surface, (rect.left + 20, y))
            y += 30

        hint = self.font.render("R = Refresh | Esc / Click = Close", True, GREY)
        self.screen.blit(hint, (rect.left + 20, rect.bottom - 36))
