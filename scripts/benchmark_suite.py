import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid
from maze_carver.algo.recursive import RecursiveCarver
from maze_carver.algo.kruskal import KruskalCarver
from maze_carver.core.analysis import calculate_stats, is_perfect

CARVERS = [
    ("Recursive", RecursiveCarver),
    ("Kruskal", KruskalCarver),
]

def benchmark_size(rows: int, cols: int):
    print(f"\n--- Benchmarking {rows}x{cols} ({rows*cols/1e6:.2f}M cells) ---")
    print(f"{'ALGORITHM':<12} | {'TIME (s)':<10} | {'CELLS/S':<12} | {'DEAD ENDS %':<11} | PERFECT")
    print("-" * 65)

    for name, cls in CARVERS:
        grid = Grid(rows, cols)
        algo = cls(grid, seed=42)

        gen_start = time.time()
        algo.run_all()
        gen_time = time.time() - gen_start

        stats = calculate_stats(grid)
        speed = (rows * cols) / gen_time if gen_time > 0 else float("inf")
        print(f"{name:<12} | {gen_time:<10.4f} | {speed:<12,.0f} | {stats['dead_end_percent']:<11.1f} | {is_perfect(grid)}")

def run_suite():
    sizes = [
        (100, 100),
        (500, 500),
        (1000, 1000),      # 1M
    ]

    for rows, cols in sizes:
        benchmark_size(rows, cols)

if __name__ == "__main__":
    run_suite()
