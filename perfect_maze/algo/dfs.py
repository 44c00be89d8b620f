import logging
import random
from typing import Iterator, List, Optional, Set

from perfect_maze.algo.base import Generator, PROGRESS_INTERVAL
from perfect_maze.core.maze import Cell

logger = logging.getLogger(__name__)

# Pseudo-direction for moving through a tunnel
TUNNEL = -1


class RecursiveBacktracker(Generator):
    def run(self) -> Iterator[str]:
        rng = random.Random(self.seed)
        maze = self.maze
        total = maze.cell_count

        visited: Set[Cell] = set()
        # Tunnel ends that joined the tree with their partner but were not descended into yet
        locked: Set[Cell] = set()

        def enter(cell: Cell):
            visited.add(cell)
            partner = cell.tunnel_to
            if partner is not None and partner not in visited:
                visited.add(partner)
                locked.add(partner)

        current: Optional[Cell] = rng.choice(list(maze.cells()))
        enter(current)

        stack: List[Cell] = []

        while len(visited) < total:
            options = [d for d, n in maze.adjacent(current) if n not in visited]
            if current.tunnel_to in locked:
                options.append(TUNNEL)

            if options:
                direction = rng.choice(options)
                stack.append(current)
                if direction == TUNNEL:
                    current = current.tunnel_to
                    locked.discard(current)
                else:
                    maze.carve_path(current, direction)
                    current = current.neigh[direction]
                    enter(current)

                self.step_count += 1
                if self.step_count % PROGRESS_INTERVAL == 0:
                    yield f"Carving... Stack: {len(stack)}"
            else:
                # Backtrack
                if not stack:
                    raise RuntimeError(
                        f"Backtracked to the start with {total - len(visited)} cells unreached; topology is disconnected")
                current = stack.pop()
                if self.step_count % PROGRESS_INTERVAL == 0:
                    yield f"Backtracking... Stack: {len(stack)}"

        logger.debug(f"Backtracker: {self.step_count} moves over {total} cells")
        yield "Done"
