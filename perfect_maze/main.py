import argparse
import sys
import os
import logging
import time
from typing import List, Optional, Tuple

# Ensure project root is in path so we can import 'perfect_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.algo.registry import Algorithm, GENERATOR_NAMES, SOLVER_NAMES, create
from perfect_maze.core.analysis import MazeAnalyzer
from perfect_maze.core.maze import Maze, Topology

logger = logging.getLogger("perfect_maze")


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def parse_coord(text: str) -> Tuple[int, int]:
    try:
        row, col = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'row,col', got '{text}'")
    return row, col


def parse_tunnel(text: str) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    ends = text.split(":")
    if len(ends) != 2:
        raise argparse.ArgumentTypeError(f"Expected 'r1,c1:r2,c2', got '{text}'")
    return parse_coord(ends[0]), parse_coord(ends[1])


def add_maze_args(parser: argparse.ArgumentParser):
    parser.add_argument("--rows", type=int, default=20, help="Maze rows")
    parser.add_argument("--cols", type=int, default=20, help="Maze columns")
    parser.add_argument("--topology", type=str, default="normal", choices=[t.value for t in Topology], help="Maze topology")
    parser.add_argument("--tunnel", type=parse_tunnel, action="append", default=[], help="Tunnel 'r1,c1:r2,c2' (repeatable, tunnel topology only)")
    parser.add_argument("--entrance", type=parse_coord, default=None, help="Entrance 'row,col'")
    parser.add_argument("--exit", type=parse_coord, default=None, help="Exit 'row,col'")
    parser.add_argument("--algo", type=str, default="kruskal", choices=GENERATOR_NAMES, help="Generation algorithm")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    parser.add_argument("--visual", action="store_true", help="Show visualization")


def build_maze(args) -> Maze:
    return Maze(args.rows, args.cols, Topology(args.topology),
                entrance=args.entrance, exit=args.exit, tunnels=args.tunnel)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Perfect Maze: spanning-tree maze generator and solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    add_maze_args(gen_parser)

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Generate a maze, then solve it")
    add_maze_args(solve_parser)
    solve_parser.add_argument("--solver", type=str, default="bibfs", choices=SOLVER_NAMES, help="Solver algorithm")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Run every generator/solver pair")
    bench_parser.add_argument("--size", type=int, default=50, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=None, help="Random Seed")

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command in ("generate", "solve"):
        try:
            maze = build_maze(args)
        except (ValueError, IndexError) as e:
            logger.error(f"Invalid maze: {e}")
            return 2

        logger.info(f"Generating {maze} with {args.algo.upper()}...")
        generator = create(args.algo, maze, seed=args.seed)

        solver = None
        renderer = None
        if args.visual:
            from perfect_maze.viz.renderer import Renderer
            renderer = Renderer(maze, generator=generator)

        if args.command == "solve":
            on_explored = renderer.mark_explored if renderer else None
            solver = create(args.solver, maze, seed=args.seed, on_explored=on_explored)
            if renderer:
                renderer.solver = solver

        if renderer:
            logger.info("Visual mode enabled - Opening window...")
            renderer.init_window()
            renderer.run_loop()
            if not renderer.gen_finished:
                logger.info("Window closed before generation finished.")
                return 0
        else:
            generator.run_all()
            if solver:
                solver.solve()

        stats = MazeAnalyzer.calculate_stats(maze)
        logger.info(f"Stats: {stats}")
        logger.info(f"Perfect: {MazeAnalyzer.is_perfect(maze)}")

        if solver:
            logger.info(f"Solving with {args.solver.upper()} from {maze.entrance.coord} to {maze.exit.coord}...")
            print(f"Solved: {solver.is_solved()} | Explored: {solver.cells_explored()}")
        else:
            print("Done.")

    elif args.command == "benchmark":
        logger.info(f"Running benchmark suite (Size: {args.size}x{args.size})...")

        generators = [a for a in Algorithm if a.is_generator]
        solvers = [a for a in Algorithm if a.is_solver]

        print(f"\n{'TOPOLOGY':<8} | {'GENERATOR':<10} | {'SOLVER':<10} | {'GEN (s)':<8} | {'SOLVE (s)':<9} | {'EXPLORED':<8}")
        print("-" * 70)

        for topology in Topology:
            tunnels = []
            if topology == Topology.TUNNEL and args.size > 1:
                tunnels = [((0, 0), (args.size - 1, args.size - 1))]

            for gen in generators:
                for sol in solvers:
                    maze = Maze(args.size, args.size, topology, tunnels=tunnels)

                    t0 = time.time()
                    create(gen, maze, seed=args.seed).run_all()
                    gen_time = time.time() - t0

                    t0 = time.time()
                    result = create(sol, maze, seed=args.seed).solve()
                    solve_time = time.time() - t0

                    print(f"{topology.value:<8} | {gen.value:<10} | {sol.value:<10} | {gen_time:<8.4f} | {solve_time:<9.4f} | {result.cells_explored:<8}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
