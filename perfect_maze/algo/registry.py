from enum import Enum
from typing import Optional, Union

from perfect_maze.algo.base import ExploredCallback, Generator, Solver, SolveResult
from perfect_maze.algo.dfs import RecursiveBacktracker
from perfect_maze.algo.kruskal import KruskalsAlgorithm
from perfect_maze.algo.prim import PrimsAlgorithm
from perfect_maze.algo.solvers import BiDirectionalBFSSolver, RecursiveBacktrackerSolver
from perfect_maze.core.maze import Maze


class Algorithm(Enum):
    KRUSKAL = "kruskal"
    PRIM = "prim"
    BACKTRACKER = "dfs"
    BACKTRACKER_SOLVER = "dfs_solve"
    BIDIRECTIONAL_BFS = "bibfs"

    @property
    def is_generator(self) -> bool:
        return self in _GENERATORS

    @property
    def is_solver(self) -> bool:
        return self in _SOLVERS


_GENERATORS = {
    Algorithm.KRUSKAL: KruskalsAlgorithm,
    Algorithm.PRIM: PrimsAlgorithm,
    Algorithm.BACKTRACKER: RecursiveBacktracker,
}

_SOLVERS = {
    Algorithm.BACKTRACKER_SOLVER: RecursiveBacktrackerSolver,
    Algorithm.BIDIRECTIONAL_BFS: BiDirectionalBFSSolver,
}

GENERATOR_NAMES = [a.value for a in _GENERATORS]
SOLVER_NAMES = [a.value for a in _SOLVERS]


def create(algorithm: Union[Algorithm, str], maze: Maze, seed: int = None,
           on_explored: Optional[ExploredCallback] = None) -> Union[Generator, Solver]:
    algorithm = Algorithm(algorithm)
    if algorithm.is_generator:
        return _GENERATORS[algorithm](maze, seed=seed)
    return _SOLVERS[algorithm](maze, on_explored=on_explored, seed=seed)


def generate(maze: Maze, algorithm: Union[Algorithm, str] = Algorithm.KRUSKAL, seed: int = None):
    """Knocks walls down in place until the maze is perfect."""
    algorithm = Algorithm(algorithm)
    if not algorithm.is_generator:
        raise ValueError(f"{algorithm.name} is not a generator")
    create(algorithm, maze, seed=seed).run_all()


def solve(maze: Maze, algorithm: Union[Algorithm, str] = Algorithm.BIDIRECTIONAL_BFS,
          on_explored: Optional[ExploredCallback] = None, seed: int = None) -> SolveResult:
    algorithm = Algorithm(algorithm)
    if not algorithm.is_solver:
        raise ValueError(f"{algorithm.name} is not a solver")
    return create(algorithm, maze, seed=seed, on_explored=on_explored).solve()
