from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import pygame

from woodblock.game import BlockPuzzleEngine, GameState, Place, Rotate, Swap, ghost_cells, numpy_source


logger = logging.getLogger(__name__)

EMPTY_COLOR = (207, 192, 176)
BACKGROUND = (245, 240, 232)

TAG_COLORS: Dict[str, Tuple[int, int, int]] = {
    "amber": (217, 119, 6),
    "orange": (234, 88, 12),
    "yellow": (161, 98, 7),
    "red": (185, 28, 28),
    "emerald": (4, 120, 87),
    "cyan": (14, 116, 144),
    "indigo": (79, 70, 229),
    "rose": (225, 29, 72),
}


def color_for_tag(tag: Optional[str]) -> Tuple[int, int, int]:
    return EMPTY_COLOR if tag is None else TAG_COLORS.get(tag, (200, 200, 200))


def cell_at_pixel(px: int, py: int, cell_size: int, margin: int, size: int) -> Optional[Tuple[int, int]]:
    """Board (row, col) under a pixel, or None outside the board."""
    if px < margin or py < margin:
        return None
    r = (py - margin) // cell_size
    c = (px - margin) // cell_size
    if r >= size or c >= size:
        return None
    return int(r), int(c)


def select_or_rotate(selected: Optional[int], slot: int) -> Tuple[int, bool]:
    """Tapping the selected slot rotates it; tapping another slot selects it."""
    return slot, selected == slot


def draw_board(screen: pygame.Surface, state: GameState, cell_size: int, margin: int) -> None:
    board = state.board
    screen.fill(BACKGROUND)
    for r in range(board.size):
        for c in range(board.size):
            rect = pygame.Rect(margin + c * cell_size, margin + r * cell_size, cell_size - 1, cell_size - 1)
            pygame.draw.rect(screen, color_for_tag(board.color_at(r, c)), rect)


def draw_queue(screen: pygame.Surface, state: GameState, cell_size: int, margin: int, selected: Optional[int]) -> None:
    x0 = margin * 2 + state.board.size * cell_size
    y0 = margin
    for idx, piece in enumerate(state.queue):
        off_y = y0 + idx * (cell_size * 5)
        if piece is None:
            continue
        shape = piece.shape
        for py in range(shape.shape[0]):
            for px in range(shape.shape[1]):
                if shape[py, px]:
                    rect = pygame.Rect(x0 + px * cell_size, off_y + py * cell_size, cell_size - 1, cell_size - 1)
                    pygame.draw.rect(screen, color_for_tag(piece.color), rect)
        if idx == selected:
            outline = pygame.Rect(x0, off_y, shape.shape[1] * cell_size, shape.shape[0] * cell_size)
            pygame.draw.rect(screen, (40, 40, 40), outline, 2)


def draw_ghost(screen: pygame.Surface, state: GameState, origin: Optional[Tuple[int, int]], cell_size: int, margin: int, selected: Optional[int]) -> None:
    if origin is None or selected is None or state.queue[selected] is None:
        return
    piece = state.queue[selected]
    for r, c in ghost_cells(state.board, origin, piece.shape):
        rect = pygame.Rect(margin + c * cell_size, margin + r * cell_size, cell_size - 1, cell_size - 1)
        pygame.draw.rect(screen, color_for_tag(piece.color), rect, 3)


def run(seed: Optional[int] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="[WOODBLOCK] %(asctime)s - %(message)s")
    pygame.init()
    try:
        engine = BlockPuzzleEngine()
        source = numpy_source(seed)
        state = engine.initialize(source)
        best_score = 0

        cell_size = 48
        margin = 20
        board_px = engine.config.grid_size * cell_size
        side_panel_w = 5 * cell_size
        width = margin * 3 + board_px + side_panel_w
        height = max(margin * 2 + board_px, margin + engine.config.queue_size * cell_size * 5 + 140)
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Wood Block")
        font = pygame.font.SysFont(None, 24)

        selected: Optional[int] = None
        key_to_index = {
            pygame.K_1: 0,
            pygame.K_2: 1,
            pygame.K_3: 2,
            pygame.K_KP1: 0,
            pygame.K_KP2: 1,
            pygame.K_KP3: 2,
        }

        running = True
        clock = pygame.time.Clock()
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in key_to_index:
                        slot, should_rotate = select_or_rotate(selected, key_to_index[event.key])
                        if should_rotate:
                            state, _ = engine.apply(state, Rotate(slot), source)
                        elif slot < len(state.queue) and state.queue[slot] is not None:
                            selected = slot
                    elif event.key == pygame.K_r and selected is not None:
                        state, _ = engine.apply(state, Rotate(selected), source)
                    elif event.key == pygame.K_s:
                        state, error = engine.apply(state, Swap(), source)
                        if error is None:
                            selected = None
                    elif event.key == pygame.K_n:
                        state = engine.initialize(source)
                        selected = None
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and selected is not None:
                    origin = cell_at_pixel(*event.pos, cell_size, margin, state.board.size)
                    if origin is not None:
                        state, error = engine.apply(state, Place(selected, origin), source)
                        if error is None:
                            selected = None
                        else:
                            logger.debug("Placement rejected: %s", error.value)
            best_score = max(best_score, state.score)

            draw_board(screen, state, cell_size, margin)
            hover = cell_at_pixel(*pygame.mouse.get_pos(), cell_size, margin, state.board.size)
            draw_ghost(screen, state, hover, cell_size, margin, selected)
            draw_queue(screen, state, cell_size, margin, selected)
            info_lines = [
                f"Score: {state.score}",
                f"Best: {best_score}",
                "Select: 1/2/3 (again to rotate)",
                "Rotate: R",
                f"Swap (-{engine.rules.swap_cost}): S",
                "New game: N",
                "Place: Left click",
            ]
            x_text = margin * 2 + state.board.size * cell_size
            y_text = margin + engine.config.queue_size * cell_size * 5
            for i, txt in enumerate(info_lines):
                img = font.render(txt, True, (60, 50, 40))
                screen.blit(img, (x_text, y_text + i * 20))
            if state.game_over:
                over = font.render("Game Over - Press N for a new game", True, (185, 28, 28))
                screen.blit(over, (margin, 2))

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
