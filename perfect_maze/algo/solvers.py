import logging
from collections import deque
from typing import Deque, Iterator, List, Optional, Set

from perfect_maze.algo.base import Solver, PROGRESS_INTERVAL
from perfect_maze.core.maze import Cell

logger = logging.getLogger(__name__)

TUNNEL = -1


class RecursiveBacktrackerSolver(Solver):
    """
    Walks from the entrance, always stepping to a random unvisited cell
    behind an open wall (or through an unused tunnel), and backtracks along
    an explicit stack at dead ends. Stops as soon as the exit is reached.
    """

    def run(self) -> Iterator[str]:
        rng = self._rng()
        maze = self.maze
        self.solved = False
        self.explored_count = 0

        current = maze.entrance
        visited: Set[Cell] = {current}
        self.mark_explored(current)

        if current is maze.exit:
            self.solved = True
            yield "Solved"
            return

        stack: List[Cell] = []
        steps = 0

        while True:
            options = [d for d in maze.directions
                       if current.neigh[d] is not None
                       and not current.wall[d].present
                       and current.neigh[d] not in visited]
            if current.tunnel_to is not None and current.tunnel_to not in visited:
                options.append(TUNNEL)

            if options:
                direction = rng.choice(options)
                stack.append(current)
                current = current.tunnel_to if direction == TUNNEL else current.neigh[direction]
                visited.add(current)
                self.mark_explored(current)

                if current is maze.exit:
                    self.solved = True
                    break
            elif stack:
                current = stack.pop()
            else:
                break  # Every reachable cell explored without meeting the exit

            steps += 1
            if steps % PROGRESS_INTERVAL == 0:
                yield f"Stack: {len(stack)}"

        logger.debug(f"Backtracker solver: solved={self.solved}, explored={self.explored_count}")
        yield "Solved" if self.solved else "No Path"


class _Frontier:
    """One side of a bidirectional search: a FIFO queue plus visited bookkeeping."""

    def __init__(self, start: Cell):
        self.queue: Deque[Cell] = deque([start])
        self.queued: Set[Cell] = {start}
        self.visited: Set[Cell] = set()

    def __bool__(self):
        return bool(self.queue)

    def pop(self) -> Cell:
        cell = self.queue.popleft()
        self.queued.discard(cell)
        return cell

    def push(self, cell: Cell):
        self.queue.append(cell)
        self.queued.add(cell)

    def seen(self, cell: Cell) -> bool:
        return cell in self.queued or cell in self.visited


class BiDirectionalBFSSolver(Solver):
    """
    Breadth-first search from the entrance and the exit at the same time,
    one expansion per side per round, until a side touches a cell the other
    side has queued or visited.

    Meeting precedence for an expanded cell: its tunnel partner first, then
    its neighbours in direction order; for each candidate the other side's
    queue is checked before its visited set. A candidate still waiting in the
    other side's queue is claimed as visited by the side that found it.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.entry_side: Optional[_Frontier] = None
        self.exit_side: Optional[_Frontier] = None

    def run(self) -> Iterator[str]:
        maze = self.maze
        self.solved = False
        self.explored_count = 0
        self.entry_side = _Frontier(maze.entrance)
        self.exit_side = _Frontier(maze.exit)

        if maze.entrance is maze.exit:
            self.entry_side.visited.add(maze.entrance)
            self.mark_explored(maze.entrance)
            self.solved = True
            yield "Solved"
            return

        rounds = 0
        while self.entry_side or self.exit_side:
            for side, other in ((self.entry_side, self.exit_side), (self.exit_side, self.entry_side)):
                if side and self._expand(side, other):
                    self.solved = True
                    break
            if self.solved:
                break

            rounds += 1
            if rounds % PROGRESS_INTERVAL == 0:
                yield f"Visited: {self.cells_explored()}"

        logger.debug(f"Bidirectional BFS: solved={self.solved}, explored={self.cells_explored()}")
        yield "Solved" if self.solved else "No Path"

    def _expand(self, side: _Frontier, other: _Frontier) -> bool:
        """Expands the head of `side`'s queue. Returns True on meeting."""
        maze = self.maze
        current = side.pop()
        side.visited.add(current)
        self.mark_explored(current)

        partner = current.tunnel_to
        if partner is not None:
            if self._meets(side, other, partner):
                return True
            if maze.is_valid_coordinate(partner.row, partner.col) and not side.seen(partner):
                side.push(partner)

        for d in maze.directions:
            neighbour = current.neigh[d]
            if neighbour is None or current.wall[d].present:
                continue
            if self._meets(side, other, neighbour):
                return True
            if not side.seen(neighbour):
                side.push(neighbour)

        return False

    def _meets(self, side: _Frontier, other: _Frontier, cell: Cell) -> bool:
        if cell in other.queued:
            # Still waiting on the other side, so this side claims it
            side.visited.add(cell)
            self.mark_explored(cell)
            return True
        return cell in other.visited

    def cells_explored(self) -> int:
        if self.entry_side is None:
            return 0
        return len(self.entry_side.visited) + len(self.exit_side.visited)
