import logging
import random
from typing import Iterator, List, Set

from perfect_maze.algo.base import Generator, PROGRESS_INTERVAL
from perfect_maze.core.maze import Cell

logger = logging.getLogger(__name__)


class PrimsAlgorithm(Generator):
    def run(self) -> Iterator[str]:
        rng = random.Random(self.seed)
        maze = self.maze
        total = maze.cell_count

        # Z: cells in the tree. F: unvisited cells adjacent to the tree.
        visited: Set[Cell] = set()
        frontier_set: Set[Cell] = set()
        frontier_list: List[Cell] = []  # For random choice

        def absorb(cell: Cell):
            visited.add(cell)
            if cell in frontier_set:
                frontier_set.remove(cell)
                frontier_list.remove(cell)
            for _, neighbour in maze.adjacent(cell):
                if neighbour not in visited and neighbour not in frontier_set:
                    frontier_set.add(neighbour)
                    frontier_list.append(neighbour)
            # A tunnel partner joins with its near end; no wall to remove
            partner = cell.tunnel_to
            if partner is not None and partner not in visited:
                absorb(partner)

        start = rng.choice(list(maze.cells()))
        absorb(start)

        while len(visited) < total:
            if not frontier_list:
                raise RuntimeError(
                    f"Frontier exhausted with {total - len(visited)} cells unreached; topology is disconnected")

            # Pick random cell from frontier, swap remove for O(1)
            idx = rng.randrange(len(frontier_list))
            c = frontier_list[idx]
            frontier_list[idx] = frontier_list[-1]
            frontier_list.pop()
            frontier_set.remove(c)

            # Carve to one random tree cell next to it
            in_tree = [b for _, b in maze.adjacent(c) if b in visited]
            b = rng.choice(in_tree)
            maze.carve_between(b, c)
            absorb(c)
            self.step_count += 1

            if self.step_count % PROGRESS_INTERVAL == 0:
                yield f"Frontier: {len(frontier_list)}"

        logger.debug(f"Prim: carved {self.step_count} walls over {total} cells")
        yield "Done"
