from typing import Any, Dict, Optional, Tuple

import numpy as np
import pygame

from pathfinder.constant import CONSTANT
from pathfinder.grid import Coordinate
from pathfinder.snapshot import CellKind, SearchSnapshot
from pathfinder.ui.draw import Color, draw_grid_lines_on_surface, draw_rectangle_on_surface

KIND_COLORS: Dict[CellKind, Color] = {
    CellKind.EMPTY: CONSTANT.CELL_COLOR.EMPTY,
    CellKind.SETTLED: CONSTANT.CELL_COLOR.SETTLED,
    CellKind.FRONTIER: CONSTANT.CELL_COLOR.FRONTIER,
    CellKind.BLOCKED: CONSTANT.CELL_COLOR.BLOCKED,
    CellKind.PATH: CONSTANT.CELL_COLOR.PATH,
    CellKind.CURRENT: CONSTANT.CELL_COLOR.CURRENT,
    CellKind.ORIGIN: CONSTANT.CELL_COLOR.ORIGIN,
    CellKind.DESTINATION: CONSTANT.CELL_COLOR.DESTINATION,
}


def to_coordinate(pos: Tuple[int, int], cell_size_px: int = CONSTANT.BOARD.CELL_SIZE_PX) -> Optional[Coordinate]:
    """Convert a mouse position in pixels to the board cell under it, None outside of the board."""
    x_px, y_px = pos
    if x_px < 0 or y_px < 0:
        return None
    col_id, row_id = int(x_px // cell_size_px), int(y_px // cell_size_px)
    if col_id >= CONSTANT.BOARD.NUMBER_OF_COLUMNS or row_id >= CONSTANT.BOARD.NUMBER_OF_ROWS:
        return None
    return Coordinate(col_id, row_id)


def painted_cells(cells: np.ndarray) -> Dict[Coordinate, Color]:
    """Colors of every non-empty cell of a CellKind array."""
    colors = dict()
    for row_id, col_id in np.argwhere(cells != CellKind.EMPTY):
        colors[Coordinate(int(col_id), int(row_id))] = KIND_COLORS[CellKind(int(cells[row_id, col_id]))]
    return colors


class BoardDisplay:
    """
    Renders the search board on a pygame surface, one square per cell.

    Attributes
    ----------
    surface : pygame.Surface
        The rendered board, redrawn from a SearchSnapshot on every `update()`.
    """

    def __init__(self):
        self.surface: pygame.Surface = pygame.Surface(
            (CONSTANT.BOARD.WIDTH_PX, CONSTANT.BOARD.HEIGHT_PX)
        )
        self.update(None)

    def update(self, snapshot: Optional[SearchSnapshot]):
        self.surface.fill(pygame.Color(CONSTANT.CELL_COLOR.EMPTY))
        if snapshot is not None:
            cell_size_px = CONSTANT.BOARD.CELL_SIZE_PX
            for coord, color in painted_cells(snapshot.to_array()).items():
                draw_rectangle_on_surface(
                    surface=self.surface,
                    x=coord.x * cell_size_px,
                    y=coord.y * cell_size_px,
                    width=cell_size_px,
                    height=cell_size_px,
                    background_color=color,
                )

        draw_grid_lines_on_surface(
            self.surface,
            number_of_columns=CONSTANT.BOARD.NUMBER_OF_COLUMNS,
            number_of_rows=CONSTANT.BOARD.NUMBER_OF_ROWS,
            cell_size_px=CONSTANT.BOARD.CELL_SIZE_PX,
            color=CONSTANT.CELL_COLOR.GRID_LINE,
        )

    def draw(self, screen: Any):
        screen.blit(self.surface, (0, 0))
