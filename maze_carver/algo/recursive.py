import logging
from typing import Iterator, List, Tuple
from maze_carver.core.grid import Grid
from maze_carver.algo.base import Generator

logger = logging.getLogger(__name__)

class RecursiveCarver(Generator):
    """
    Randomized depth-first carving (recursive backtracker).

    Each cell tries its four directions in a freshly shuffled order and dives
    into the first unvisited neighbor before trying the next one. The
    recursion is unrolled onto an explicit stack so large grids don't hit
    the interpreter's recursion limit.
    """

    def __init__(self, grid: Grid, rng=None, seed: int = None, start: Tuple[int, int] = (0, 0)):
        super().__init__(grid, rng=rng, seed=seed)
        self.start = start

    def _shuffled_directions(self) -> Iterator[int]:
        dirs = list(Grid.DIRECTIONS)
        self.rng.shuffle(dirs)
        return iter(dirs)

    def run(self) -> Iterator[str]:
        start_row, start_col = self.start
        if not self.grid.in_bounds(start_row, start_col):
            raise IndexError(f"Start ({start_row}, {start_col}) out of bounds")

        # Stack of (row, col, directions still to try)
        stack: List[Tuple[int, int, Iterator[int]]] = [
            (start_row, start_col, self._shuffled_directions())
        ]

        while stack:
            row, col, dirs = stack[-1]

            for direction in dirs:
                nrow, ncol = self.grid.neighbor(row, col, direction)
                # Carve through if the wall is there to take and we
                # haven't already been on the other side.
                if self.grid.in_bounds(nrow, ncol) and not self.grid.is_visited(nrow, ncol):
                    self.grid.set_passage(row, col, direction)
                    stack.append((nrow, ncol, self._shuffled_directions()))
                    self.step_count += 1

                    # Yield every N steps to keep callers responsive without spamming
                    if self.step_count % 100 == 0:
                        yield f"Carving... Stack: {len(stack)}"
                    break
            else:
                # All four exhausted, backtrack
                stack.pop()

        logger.debug("Recursive carve from %s opened %d passages", self.start, self.step_count)
        yield "Done"
