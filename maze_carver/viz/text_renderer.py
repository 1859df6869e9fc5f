from typing import List
from maze_carver.core.grid import Grid

class TextRenderer:
    CHAR_OPEN = " "
    CHAR_FLOOR = "_"
    CHAR_WALL = "|"

    def __init__(self, grid: Grid, smooth: bool = True):
        self.grid = grid
        # Smoothing only tidies up the look of corridors, it's not needed
        # for the maze to read correctly.
        self.smooth = smooth

    def render_row(self, row: int) -> str:
        grid = self.grid
        out: List[str] = [self.CHAR_WALL]

        for col in range(grid.col_count):
            val = grid.get(row, col)

            # South wall
            out.append(self.CHAR_OPEN if val & Grid.SOUTH else self.CHAR_FLOOR)

            # East wall
            if not val & Grid.EAST:
                out.append(self.CHAR_WALL)
            elif not self.smooth:
                out.append(self.CHAR_OPEN)
            elif (val | grid.get(row, col + 1)) & Grid.SOUTH:
                out.append(self.CHAR_OPEN)
            else:
                out.append(self.CHAR_FLOOR)

        return "".join(out)

    def render(self) -> str:
        lines = [" " + self.CHAR_FLOOR * (self.grid.col_count * 2 - 1)]
        for row in range(self.grid.row_count):
            lines.append(self.render_row(row))
        return "\n".join(lines) + "\n"


def render(grid: Grid, smooth: bool = True) -> str:
    """Returns the maze as box-drawing text. Never modifies the grid."""
    return TextRenderer(grid, smooth=smooth).render()
