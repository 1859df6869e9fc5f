import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.algo.recursive import RecursiveCarver
from maze_carver.algo.kruskal import KruskalCarver
from maze_carver.core.grid import Grid
from maze_carver.core.analysis import (
    calculate_stats, count_passages, is_perfect, is_symmetric, reachable_count,
)

class TestAnalysis(unittest.TestCase):
    def test_empty_grid(self):
        grid = Grid(3, 4)
        self.assertEqual(count_passages(grid), 0)
        self.assertEqual(reachable_count(grid), 1)
        self.assertTrue(is_symmetric(grid))
        self.assertFalse(is_perfect(grid))

    def test_single_cell_is_perfect(self):
        self.assertTrue(is_perfect(Grid(1, 1)))

    def test_one_sided_flag_is_not_symmetric(self):
        grid = Grid(2, 2)
        grid.set_passage(0, 0, Grid.EAST)
        self.assertTrue(is_symmetric(grid))
        # Knock out the matching flag by hand
        grid.cells[grid.cell_id(0, 1)] &= ~Grid.WEST
        self.assertFalse(is_symmetric(grid))

    def test_flag_into_void_is_not_symmetric(self):
        grid = Grid(2, 2)
        grid.cells[grid.cell_id(0, 0)] |= Grid.NORTH
        self.assertFalse(is_symmetric(grid))

    def test_loop_is_not_perfect(self):
        grid = Grid(2, 2)
        grid.set_passage(0, 0, Grid.EAST)
        grid.set_passage(0, 1, Grid.SOUTH)
        grid.set_passage(1, 1, Grid.WEST)
        self.assertTrue(is_perfect(grid))
        grid.set_passage(1, 0, Grid.NORTH)
        self.assertEqual(count_passages(grid), 4)
        self.assertFalse(is_perfect(grid))

    def test_stats(self):
        w, h = 20, 20
        grid = Grid(h, w)
        RecursiveCarver(grid, seed=42).run_all()

        stats = calculate_stats(grid)
        self.assertEqual(stats["passages"], w * h - 1)
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], w * h)
        self.assertAlmostEqual(stats["dead_end_percent"], stats["dead_ends"] / (w * h) * 100)

    def test_kruskal_branches_more_than_dfs(self):
        # Kruskal mazes are bushier: more dead ends than DFS on the same grid
        dfs = Grid(30, 30)
        RecursiveCarver(dfs, seed=8).run_all()
        kruskal = Grid(30, 30)
        KruskalCarver(kruskal, seed=8).run_all()
        self.assertGreater(calculate_stats(kruskal)["dead_ends"], calculate_stats(dfs)["dead_ends"])

if __name__ == '__main__':
    unittest.main()
