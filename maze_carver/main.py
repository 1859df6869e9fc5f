import argparse
import sys
import logging

from maze_carver.core.grid import Grid, InvalidDimension

DEFAULT_SIZE = 10

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    # Logs go to stderr, stdout is reserved for the maze itself
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        stream=sys.stderr,
    )

def parse_dimension(name: str, text) -> int:
    try:
        value = int(text)
    except (TypeError, ValueError):
        raise InvalidDimension(f"{name} must be a positive integer, got {text!r}") from None
    if value <= 0:
        raise InvalidDimension(f"{name} must be a positive integer, got {value}")
    return value

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Carver: perfect maze generator with ASCII output")
    parser.add_argument("rows", nargs="?", default=str(DEFAULT_SIZE), help="Number of rows (default 10)")
    parser.add_argument("cols", nargs="?", default=str(DEFAULT_SIZE), help="Number of columns (default 10)")
    parser.add_argument("--algo", type=str, default="kruskal", choices=["kruskal", "recursive"], help="Generation Algorithm")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed (default: different every run)")
    parser.add_argument("--start", type=int, nargs=2, metavar=("ROW", "COL"), default=(0, 0), help="Start cell for the recursive carver")
    parser.add_argument("--plain", action="store_true", help="Disable cosmetic corridor smoothing")
    parser.add_argument("--stats", action="store_true", help="Log dead end / corridor / junction counts")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser

def create_generator(algo: str, grid: Grid, seed: int = None, start=(0, 0)):
    if algo == "recursive":
        from maze_carver.algo.recursive import RecursiveCarver
        return RecursiveCarver(grid, seed=seed, start=tuple(start))
    elif algo == "kruskal":
        from maze_carver.algo.kruskal import KruskalCarver
        return KruskalCarver(grid, seed=seed)
    raise ValueError(f"Unknown algorithm {algo!r}")

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_carver")

    try:
        rows = parse_dimension("rows", args.rows)
        cols = parse_dimension("cols", args.cols)
    except InvalidDimension as e:
        parser.error(str(e))

    grid = Grid(rows, cols)
    if args.algo == "recursive" and not grid.in_bounds(*args.start):
        parser.error(f"--start {args.start[0]} {args.start[1]} is outside a {rows}x{cols} grid")

    logger.info(f"Generating {rows}x{cols} maze with {args.algo.upper()}...")
    generator = create_generator(args.algo, grid, seed=args.seed, start=args.start)
    generator.run_all()

    if args.stats:
        from maze_carver.core.analysis import calculate_stats
        logger.info(f"Stats: {calculate_stats(grid)}")

    from maze_carver.viz.text_renderer import render
    sys.stdout.write(render(grid, smooth=not args.plain))
    return 0

if __name__ == "__main__":
    sys.exit(main())
