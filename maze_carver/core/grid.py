from array import array
from typing import Iterator, Tuple


class InvalidDimension(ValueError):
    """Raised when a grid is requested with a non-integer or non-positive size."""


class Grid:
    # Bitmask Constants (set bit = wall removed, passage open)
    NORTH = 0b0001
    EAST  = 0b0010
    SOUTH = 0b0100
    WEST  = 0b1000

    ALL_PASSAGES = NORTH | EAST | SOUTH | WEST

    # Fixed order used when enumerating directions
    DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

    __slots__ = ('_row_count', '_col_count', 'cells')

    def __init__(self, row_count: int, col_count: int):
        self._row_count = self._check_dimension("row_count", row_count)
        self._col_count = self._check_dimension("col_count", col_count)
        # 'B' (unsigned char) -> 1 byte per cell, all walls standing
        self.cells = array('B', [0] * (self._row_count * self._col_count))

    @staticmethod
    def _check_dimension(name: str, value) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimension(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidDimension(f"{name} must be positive, got {value}")
        return value

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def col_count(self) -> int:
        return self._col_count

    @property
    def cell_count(self) -> int:
        return self._row_count * self._col_count

    @staticmethod
    def step(direction: int) -> Tuple[int, int, int]:
        """
        Returns (row_delta, col_delta, opposite_direction) for a direction bit.
        """
        if direction == Grid.NORTH:
            return -1, 0, Grid.SOUTH
        elif direction == Grid.EAST:
            return 0, 1, Grid.WEST
        elif direction == Grid.SOUTH:
            return 1, 0, Grid.NORTH
        elif direction == Grid.WEST:
            return 0, -1, Grid.EAST
        raise ValueError(f"Unknown direction {direction!r}")

    @staticmethod
    def opposite(direction: int) -> int:
        return Grid.step(direction)[2]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._row_count and 0 <= col < self._col_count

    def cell_id(self, row: int, col: int) -> int:
        return row * self._col_count + col

    def neighbor(self, row: int, col: int, direction: int) -> Tuple[int, int]:
        # No bounds check, callers decide what to do with the void
        dr, dc, _ = self.step(direction)
        return row + dr, col + dc

    def get(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) out of bounds")
        return self.cells[row * self._col_count + col]

    def set_passage(self, row: int, col: int, direction: int):
        """
        Opens the wall between (row, col) and its neighbor in 'direction'.
        Both cells are updated so the passage is visible from either side.
        """
        dr, dc, opposite = self.step(direction)
        nrow, ncol = row + dr, col + dc

        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) out of bounds")
        if not self.in_bounds(nrow, ncol):
            raise IndexError(f"Cannot carve from ({row}, {col}) into void at ({nrow}, {ncol})")

        self.cells[row * self._col_count + col] |= direction
        self.cells[nrow * self._col_count + ncol] |= opposite

    def has_passage(self, row: int, col: int, direction: int) -> bool:
        return (self.get(row, col) & direction) != 0

    def is_visited(self, row: int, col: int) -> bool:
        # A cell is visited once any of its walls has been carved
        return self.get(row, col) != 0

    def get_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nrow, ncol, direction_to_neighbor) for all in-bounds neighbors.
        Does NOT check passages.
        """
        for direction in self.DIRECTIONS:
            nrow, ncol = self.neighbor(row, col, direction)
            if self.in_bounds(nrow, ncol):
                yield (nrow, ncol, direction)

    def get_open_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nrow, ncol) for neighbors reachable through an open passage.
        """
        val = self.get(row, col)
        for nrow, ncol, direction in self.get_neighbors(row, col):
            if val & direction:
                yield (nrow, ncol)

    def __repr__(self):
        return f"Grid({self._row_count}, {self._col_count})"
