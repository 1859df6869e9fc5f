import logging
from typing import Iterator, List, NamedTuple
from maze_carver.core.grid import Grid
from maze_carver.core.disjoint_set import DisjointSet
from maze_carver.algo.base import Generator

logger = logging.getLogger(__name__)


class Edge(NamedTuple):
    """A candidate passage from (row, col) to its neighbor in 'direction'."""
    row: int
    col: int
    direction: int


class KruskalCarver(Generator):
    """
    Randomized Kruskal's algorithm.

    Every wall between two in-bounds cells is a candidate edge. The edges are
    shuffled and walked once; a wall is knocked down only when the cells on
    either side still belong to different sets, so no loop can ever form.
    """

    def __init__(self, grid: Grid, rng=None, seed: int = None):
        super().__init__(grid, rng=rng, seed=seed)
        self.unions = 0

    def candidate_edges(self) -> List[Edge]:
        """
        All (row, col, direction) whose neighbor is inside the grid.
        Each wall shows up twice, once from each side; the second one is a
        no-op for the union-find.
        """
        edges = []
        for row in range(self.grid.row_count):
            for col in range(self.grid.col_count):
                for nrow, ncol, direction in self.grid.get_neighbors(row, col):
                    edges.append(Edge(row, col, direction))
        return edges

    def run(self) -> Iterator[str]:
        edges = self.candidate_edges()
        self.rng.shuffle(edges)

        # Each cell starts in a set of its own
        sets = DisjointSet(self.grid.cell_count)

        for edge in edges:
            nrow, ncol = self.grid.neighbor(edge.row, edge.col, edge.direction)
            set_a = sets.find(self.grid.cell_id(edge.row, edge.col))
            set_b = sets.find(self.grid.cell_id(nrow, ncol))
            self.step_count += 1

            if set_a != set_b:
                self.grid.set_passage(edge.row, edge.col, edge.direction)
                sets.union(set_a, set_b)
                self.unions += 1

            if self.step_count % 100 == 0:
                yield f"Edges: {self.step_count}/{len(edges)} Unions: {self.unions}"

        logger.debug("Kruskal processed %d edges, %d unions", len(edges), self.unions)
        yield "Done"
