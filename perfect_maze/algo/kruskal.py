import logging
import random
from typing import Iterator, List, Tuple

from perfect_maze.algo.base import Generator, PROGRESS_INTERVAL
from perfect_maze.core.disjoint_set import DisjointSet
from perfect_maze.core.maze import Cell, Maze

logger = logging.getLogger(__name__)

# One direction of each reciprocal pair, so every edge is listed once
FORWARD_DIRECTIONS = (Maze.EAST, Maze.NORTHEAST, Maze.NORTHWEST)


class KruskalsAlgorithm(Generator):
    """
    Randomized Kruskal:
    1. List every breakable edge and shuffle it.
    2. Put each cell in its own set; tunnel ends start out joined, since a
       tunnel is a passage with no wall to knock down.
    3. For each edge, knock the wall down only if its cells are in
       different sets, then merge those sets.
    Once the list is exhausted the maze is a spanning tree.
    """

    def build_edges(self) -> List[Tuple[Cell, Cell]]:
        edges = []
        for cell in self.maze.cells():
            for d in FORWARD_DIRECTIONS:
                if d not in self.maze.directions:
                    continue
                neighbour = cell.neigh[d]
                if neighbour is not None:
                    edges.append((cell, neighbour))
        return edges

    def run(self) -> Iterator[str]:
        rng = random.Random(self.seed)

        edges = self.build_edges()
        rng.shuffle(edges)

        forest: DisjointSet[Cell] = DisjointSet()
        for cell in self.maze.cells():
            forest.make_set(cell)

        tunnels = self.maze.tunnel_pairs()
        for end1, end2 in tunnels:
            forest.union(end1, end2)

        logger.debug(f"Kruskal: {len(edges)} edges, {len(tunnels)} tunnels pre-joined")

        for c1, c2 in edges:
            if not forest.union(c1, c2):
                continue  # Would close a cycle

            self.maze.carve_between(c1, c2)
            self.step_count += 1

            if self.step_count % PROGRESS_INTERVAL == 0:
                yield f"Sets: {forest.set_count}"

        logger.debug(f"Kruskal: carved {self.step_count} walls")
        yield "Done"
