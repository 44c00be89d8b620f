import random
from abc import ABC, abstractmethod
from typing import Callable, Iterator, NamedTuple, Optional

from perfect_maze.core.maze import Cell, Maze

# Yield a progress string every N steps so a renderer can interleave frames
PROGRESS_INTERVAL = 100

ExploredCallback = Callable[[Cell], None]


class SolveResult(NamedTuple):
    is_solved: bool
    cells_explored: int


class Generator(ABC):
    def __init__(self, maze: Maze, seed: int = None):
        self.maze = maze
        self.seed = seed
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual wall removal happens in-place on self.maze.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass


class Solver(ABC):
    def __init__(self, maze: Maze, on_explored: Optional[ExploredCallback] = None, seed: int = None):
        self.maze = maze
        self.on_explored = on_explored
        # Fixed per instance so re-running a solver retraces the same walk
        self.seed = seed if seed is not None else random.randrange(2 ** 32)
        self.solved = False
        self.explored_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        pass

    def mark_explored(self, cell: Cell):
        self.explored_count += 1
        if self.on_explored:
            self.on_explored(cell)

    def solve(self) -> SolveResult:
        for _ in self.run():
            pass
        return SolveResult(self.is_solved(), self.cells_explored())

    def is_solved(self) -> bool:
        return self.solved

    def cells_explored(self) -> int:
        return self.explored_count

    def _rng(self) -> random.Random:
        return random.Random(self.seed)
