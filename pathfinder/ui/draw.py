from typing import Any, Tuple, Union

import pygame
from pgzero.rect import Rect

Color = Union[str, Tuple[int, ...]]


def draw_rectangle_on_surface(
    surface: pygame.Surface,
    x: int,
    y: int,
    width: int,
    height: int,
    background_color: Color = "white",
    outline_color: Color = None,
):
    # Define the rectangle (x, y, width, height)
    rect = Rect(x, y, width, height)

    # Draw filled color
    pygame.draw.rect(surface, background_color, rect)

    # Draw outline color
    if outline_color:
        pygame.draw.rect(surface, outline_color, rect, width=1)


def draw_grid_lines_on_surface(
    surface: pygame.Surface,
    number_of_columns: int,
    number_of_rows: int,
    cell_size_px: int,
    color: Color = "lightgray",
):
    width_px = number_of_columns * cell_size_px
    height_px = number_of_rows * cell_size_px
    for col_id in range(number_of_columns + 1):
        x = col_id * cell_size_px
        pygame.draw.line(surface, color, (x, 0), (x, height_px))
    for row_id in range(number_of_rows + 1):
        y = row_id * cell_size_px
        pygame.draw.line(surface, color, (0, y), (width_px, y))


def draw_text_on_screen(
    screen: Any,
    text: str,
    x: int,
    y: int,
    max_y: int,
    color: Color = "white",
    font=None,
    line_spacing: int = 5,
):
    """Blit `text` line by line from (x, y); lines that would pass `max_y` are dropped."""
    for line in text.split("\n"):
        line_surface = font.render(line, True, pygame.Color(color))
        if y + line_surface.get_height() > max_y:
            break
        screen.surface.blit(line_surface, (x, y))
        y += line_surface.get_height() + line_spacing
