from collections import deque
from typing import Dict, Tuple
from maze_carver.core.grid import Grid


def popcount_passages(val: int) -> int:
    c = 0
    if val & Grid.NORTH: c += 1
    if val & Grid.EAST: c += 1
    if val & Grid.SOUTH: c += 1
    if val & Grid.WEST: c += 1
    return c


def count_passages(grid: Grid) -> int:
    """Number of open walls, each shared wall counted once."""
    # Only look East and South so no wall is counted from both sides
    total = 0
    for val in grid.cells:
        if val & Grid.EAST: total += 1
        if val & Grid.SOUTH: total += 1
    return total


def reachable_count(grid: Grid, start: Tuple[int, int] = (0, 0)) -> int:
    """Breadth-first walk over open passages. Returns how many cells it reached."""
    seen = bytearray(grid.cell_count)
    seen[grid.cell_id(*start)] = 1
    queue = deque([start])
    count = 1

    while queue:
        row, col = queue.popleft()
        for nrow, ncol in grid.get_open_neighbors(row, col):
            idx = grid.cell_id(nrow, ncol)
            if not seen[idx]:
                seen[idx] = 1
                count += 1
                queue.append((nrow, ncol))

    return count


def is_symmetric(grid: Grid) -> bool:
    """
    True when every open flag is matched by the opposite flag on the
    neighbor, and no flag points outside the grid.
    """
    for row in range(grid.row_count):
        for col in range(grid.col_count):
            val = grid.get(row, col)
            for direction in Grid.DIRECTIONS:
                if not val & direction:
                    continue
                nrow, ncol = grid.neighbor(row, col, direction)
                if not grid.in_bounds(nrow, ncol):
                    return False
                if not grid.get(nrow, ncol) & Grid.opposite(direction):
                    return False
    return True


def is_perfect(grid: Grid) -> bool:
    """Connected, consistent and loop free: a spanning tree over the grid."""
    return (
        is_symmetric(grid)
        and count_passages(grid) == grid.cell_count - 1
        and reachable_count(grid) == grid.cell_count
    )


def calculate_stats(grid: Grid) -> Dict[str, float]:
    dead_ends = 0
    corridors = 0
    junctions = 0 # 3 or 4 exits

    for val in grid.cells:
        exits = popcount_passages(val)
        if exits == 1: dead_ends += 1
        elif exits == 2: corridors += 1
        elif exits >= 3: junctions += 1

    total = grid.cell_count
    return {
        "dead_ends": dead_ends,
        "corridors": corridors,
        "junctions": junctions,
        "passages": count_passages(grid),
        "dead_end_percent": (dead_ends / total) * 100,
    }
