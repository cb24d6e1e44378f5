from __future__ import annotations

import logging

import pygame
from pygame import gfxdraw

from core.game import Game
from core.move import Coordinate
from core.pieces import BOARD_SIZE, Cell, Side

logger = logging.getLogger(__name__)


class CheckersGUI:
    def __init__(self, game: Game, square_size: int = 80, info_height: int = 150) -> None:
        self.game = game
        self.square_size = square_size
        self.board_pixels = self.square_size * BOARD_SIZE
        self.info_height = info_height

        self.margin = 40
        self.window_width = self.board_pixels + self.margin * 2
        self.window_height = self.board_pixels + self.info_height + self.margin * 2

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Checkers")

        self.font = pygame.font.SysFont("arial", 24)
        self.small_font = pygame.font.SysFont("arial", 16)
        self.king_font = pygame.font.SysFont("arial", 22, bold=True)
        self.clock = pygame.time.Clock()

        self.hover_cell: Coordinate | None = None
        self.announcement: str | None = None
        self.piece_surfaces: dict[Cell, pygame.Surface] = {}

        self.colors = {
            "light": (233, 210, 173),
            "dark": (145, 104, 66),
            "highlight": (246, 227, 90),
            "selected": (252, 142, 80),
            "red_piece": (196, 40, 40),
            "black_piece": (35, 35, 35),
            "outline": (25, 25, 25),
            "background": (30, 34, 45),
            "info_bg": (40, 46, 60),
            "panel_border": (86, 94, 110),
            "text": (230, 230, 230),
            "board_frame": (82, 54, 29),
            "king": (255, 215, 0),
        }

        self.game.add_win_listener(self._on_win)

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        self.game.reset()
                        self.announcement = None
                elif event.type == pygame.MOUSEMOTION:
                    self.hover_cell = self._board_coords_from_pos(event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

            self._draw()
            pygame.display.flip()
            self.clock.tick(60)

    def _handle_click(self, pos: tuple[int, int]) -> None:
        cell = self._board_coords_from_pos(pos)
        if cell is None:
            return
        self.game.on_cell_click(*cell)

    def _on_win(self, winner: Side) -> None:
        self.announcement = f"{winner.value.capitalize()} wins!"
        logger.info(self.announcement)

    def _board_coords_from_pos(self, pos: tuple[int, int]) -> Coordinate | None:
        x, y = pos
        x -= self.margin
        y -= self.margin
        if x < 0 or y < 0 or x >= self.board_pixels or y >= self.board_pixels:
            return None
        return (y // self.square_size, x // self.square_size)

    def _draw(self) -> None:
        self.screen.fill(self.colors["background"])
        self._draw_board()
        self._draw_selection()
        self._draw_pieces()
        self._draw_info_panel()

    def _draw_board(self) -> None:
        board_rect = pygame.Rect(self.margin, self.margin, self.board_pixels, self.board_pixels)
        frame_rect = board_rect.inflate(20, 20)
        pygame.draw.rect(self.screen, self.colors["board_frame"], frame_rect, border_radius=20)

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                color = self.colors["light"] if (row + col) % 2 == 0 else self.colors["dark"]
                pygame.draw.rect(self.screen, color, self._rect_for_cell(row, col))

    def _draw_selection(self) -> None:
        selection = self.game.get_selection()
        if selection:
            pygame.draw.rect(self.screen, self.colors["selected"], self._rect_for_cell(*selection), 4, border_radius=8)

        destinations = self.game.get_highlighted_destinations()
        for dest in destinations:
            radius = 16 if dest == self.hover_cell else 12
            center = self._center_for_cell(*dest)
            gfxdraw.filled_circle(self.screen, center[0], center[1], radius, (*self.colors["highlight"], 140))
            gfxdraw.aacircle(self.screen, center[0], center[1], radius, self.colors["outline"])

    def _draw_pieces(self) -> None:
        for row, col, cell in self.game.board.pieces():
            surface = self._get_piece_surface(cell)
            rect = surface.get_rect(center=self._center_for_cell(row, col))
            self.screen.blit(surface, rect)

    def _draw_info_panel(self) -> None:
        panel_top = self.margin + self.board_pixels + 30
        info_rect = pygame.Rect(self.margin, panel_top, self.board_pixels, self.info_height - 40)
        pygame.draw.rect(self.screen, self.colors["info_bg"], info_rect, border_radius=16)
        pygame.draw.rect(self.screen, self.colors["panel_border"], info_rect, 2, border_radius=16)

        board = self.game.board
        if self.announcement:
            headline = self.announcement
        else:
            headline = f"{self.game.get_current_player().value.upper()}'s turn"
            if self.game.is_chain_pending:
                headline += " (keep capturing)"
        lines = [
            f"Red: {board.count(Side.RED)} pieces   Black: {board.count(Side.BLACK)} pieces",
            f"Mandatory capture: {'Yes' if self.game.options.mandatory_capture else 'No'}",
            "R: Reset  |  Esc/Q: Quit",
        ]

        self.screen.blit(self.font.render(headline, True, self.colors["text"]), (info_rect.left + 20, info_rect.top + 12))
        y_offset = info_rect.top + 46
        for line in lines:
            self.screen.blit(self.small_font.render(line, True, self.colors["text"]), (info_rect.left + 24, y_offset))
            y_offset += 20

    def _rect_for_cell(self, row: int, col: int) -> pygame.Rect:
        return pygame.Rect(
            self.margin + col * self.square_size,
            self.margin + row * self.square_size,
            self.square_size,
            self.square_size,
        )

    def _center_for_cell(self, row: int, col: int) -> tuple[int, int]:
        return (
            self.margin + col * self.square_size + self.square_size // 2,
            self.margin + row * self.square_size + self.square_size // 2,
        )

    def _get_piece_surface(self, cell: Cell) -> pygame.Surface:
        if cell in self.piece_surfaces:
            return self.piece_surfaces[cell]

        diameter = self.square_size - 14
        radius = diameter // 2
        surface = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
        cx, cy = surface.get_width() // 2, surface.get_height() // 2

        base = self.colors["red_piece"] if cell.side is Side.RED else self.colors["black_piece"]
        pygame.draw.circle(surface, base, (cx, cy), radius)
        pygame.draw.circle(surface, self.colors["outline"], (cx, cy), radius, 2)

        if cell.is_king:
            crown = self.king_font.render("K", True, self.colors["king"])
            surface.blit(crown, crown.get_rect(center=(cx, cy)))

        self.piece_surfaces[cell] = surface
        return surface
