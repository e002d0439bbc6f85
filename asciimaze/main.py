import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'asciimaze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


USAGE = """Usage: asciimaze generate [width] [height] [OPTIONS]
\ta  - ASCII style maze (default).
\tb  - BLOCK style maze.
\tds - Turn set debug on.
\tdr - Turn row debug on.
\tr  - Turn off random generation.
"""

# Seed used by the 'r' option
FIXED_SEED = 1

logger = logging.getLogger("asciimaze")

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def parse_size(text) -> int:
    """Like atoi: anything that isn't a number counts as 0."""
    try:
        return int(text)
    except (TypeError, ValueError):
        return 0

def parse_options(tokens):
    """
    Reads the generator option words. Later words win when they conflict.
    Returns (style, debug, fixed_seed).
    """
    style = "ascii"
    debug = None
    fixed_seed = False
    for token in tokens:
        if token == "a":
            style = "ascii"
        elif token == "b":
            style = "block"
        elif token == "ds":
            debug = "sets"
        elif token == "dr":
            debug = "rows"
        elif token == "r":
            fixed_seed = True
        else:
            logger.warning(f"Ignoring unknown option '{token}'")
    return style, debug, fixed_seed

def show_visual(grid):
    from asciimaze.viz.renderer import Renderer
    logger.info("Visual mode enabled - Opening window...")
    renderer = Renderer(grid)
    renderer.init_window()
    renderer.run_loop()

def log_stats(grid):
    from asciimaze.core.complexity import MazeStats
    stats = MazeStats.calculate_stats(grid)
    logger.info(f"Stats: {stats}")
    return stats

def run_generate(args) -> int:
    width = parse_size(args.width)
    height = parse_size(args.height)
    if args.width is None or args.height is None:
        sys.stderr.write(USAGE)
        return 1
    if width <= 0 or height <= 0:
        sys.stderr.write("Maze width and height must be greater then 0.\n")
        sys.stderr.write(USAGE)
        return 1

    style, debug, fixed_seed = parse_options(args.options)
    seed = args.seed
    if seed is None:
        seed = FIXED_SEED if fixed_seed else int(time.time())

    from asciimaze.algo.eller import EllerGenerator
    from asciimaze.io.ruled import RuledRenderer, write_lines
    from asciimaze.io.block import BlockRenderer

    logger.info(f"Generating {width}x{height} {style} maze (seed={seed})...")
    generator = EllerGenerator(width, height, seed=seed)
    if style == "block":
        if debug:
            logger.warning("Debug output is only shown for ASCII style mazes")
        renderer = BlockRenderer()
    else:
        renderer = RuledRenderer(debug=debug)

    # Rows are only kept when something needs the whole grid afterwards
    keep_rows = args.stats or args.visual
    rows = []
    for state in generator.run():
        write_lines(renderer.render_state(state), sys.stdout)
        if keep_rows:
            rows.append(state.cells)
    sys.stdout.flush()

    if keep_rows:
        from asciimaze.core.grid import Grid
        grid = Grid.from_rows(width, rows)
        if args.stats:
            log_stats(grid)
        if args.visual:
            show_visual(grid)
    return 0

def run_solve(args) -> int:
    from asciimaze.io.ruled import read_maze, write_lines
    from asciimaze.algo.solvers import PathFinder

    if args.input_file:
        logger.info(f"Loading {args.input_file}...")
        with open(args.input_file, "r") as f:
            maze = read_maze(f)
    else:
        maze = read_maze(sys.stdin)
    logger.info(f"Loaded {maze.width}x{maze.height} maze.")

    solver = PathFinder(maze.grid)
    logger.info(f"Solving from {maze.start} to {maze.destination}...")
    found = solver.solve(maze.start, maze.destination)

    if args.stats:
        log_stats(maze.grid)

    if not found:
        sys.stderr.write("No path found through maze.\n")
        return 1

    logger.info(f"Path Length: {len(solver.path)} (visited {solver.visited_count})")
    maze.mark_path(solver.path)
    write_lines(maze.lines, sys.stdout)
    sys.stdout.flush()

    if args.visual:
        show_visual(maze.grid)
    return 0

def run_benchmark(args) -> int:
    from asciimaze.algo.eller import EllerGenerator
    from asciimaze.io.ruled import RuledRenderer, RuledParser
    from asciimaze.algo.solvers import PathFinder

    width, height = args.width, args.height
    if width <= 0 or height <= 0:
        sys.stderr.write("Benchmark width and height must be greater then 0.\n")
        return 1
    logger.info(f"Running benchmark ({width}x{height})...")

    t0 = time.time()
    renderer = RuledRenderer()
    lines = []
    for state in EllerGenerator(width, height, seed=123).run():
        lines.extend(renderer.render_state(state))
    gen_time = time.time() - t0

    t0 = time.time()
    maze = RuledParser().parse(lines)
    parse_time = time.time() - t0

    t0 = time.time()
    solver = PathFinder(maze.grid)
    solver.solve(maze.start, maze.destination)
    solve_time = time.time() - t0

    print(f"\n{'STAGE':<20} | {'TIME (s)':<10} | {'CELLS/SEC':<12}")
    print("-" * 48)
    cells = width * height
    for name, duration in (("Generate + render", gen_time), ("Parse", parse_time), ("Solve", solve_time)):
        speed = cells / duration if duration > 0 else float("inf")
        print(f"{name:<20} | {duration:<10.4f} | {speed:<12,.0f}")
    print(f"\nPath Length: {len(solver.path)} | Visited: {solver.visited_count}")
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="asciimaze: Eller's algorithm maze generator and text maze solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("width", nargs="?", help="Maze Width")
    gen_parser.add_argument("height", nargs="?", help="Maze Height")
    gen_parser.add_argument("options", nargs="*", help="a | b | ds | dr | r")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed (overrides 'r')")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics")
    gen_parser.add_argument("--visual", action="store_true", help="Show visualization")

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Solve an ASCII maze (stdin by default)")
    solve_parser.add_argument("input_file", nargs="?", help="Path to maze text file")
    solve_parser.add_argument("--stats", action="store_true", help="Log maze statistics")
    solve_parser.add_argument("--visual", action="store_true", help="Show visualization")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation, parsing and solving")
    bench_parser.add_argument("--width", type=int, default=500, help="Benchmark width")
    bench_parser.add_argument("--height", type=int, default=500, help="Benchmark height")

    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 1

    logger.debug(f"Running command: {args.command}")

    if args.command == "generate":
        return run_generate(args)
    elif args.command == "solve":
        return run_solve(args)
    elif args.command == "benchmark":
        return run_benchmark(args)
    return 1

if __name__ == "__main__":
    sys.exit(main())
