from collections import deque
from typing import Dict, Set

from perfect_maze.core.maze import Cell, Maze


class MazeAnalyzer:
    @staticmethod
    def open_walls(maze: Maze) -> int:
        """Number of distinct walls that have been knocked down."""
        seen = set()
        for cell in maze.cells():
            for d, _ in maze.adjacent(cell):
                wall = cell.wall[d]
                if not wall.present:
                    seen.add(id(wall))
        return len(seen)

    @staticmethod
    def edge_count(maze: Maze) -> int:
        # Tunnels are edges of the maze graph without a wall to remove
        return MazeAnalyzer.open_walls(maze) + len(maze.tunnel_pairs())

    @staticmethod
    def reachable(maze: Maze, start: Cell = None) -> Set[Cell]:
        """Flood fill over open walls and tunnels."""
        if start is None:
            start = maze.entrance
        seen = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for nxt in maze.connected(current):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

    @staticmethod
    def is_perfect(maze: Maze) -> bool:
        """
        Connected and acyclic: every cell reachable from the entrance and
        exactly cells - 1 edges.
        """
        total = maze.cell_count
        if MazeAnalyzer.edge_count(maze) != total - 1:
            return False
        return len(MazeAnalyzer.reachable(maze)) == total

    @staticmethod
    def degree(maze: Maze, cell: Cell) -> int:
        return sum(1 for _ in maze.connected(cell))

    @staticmethod
    def calculate_stats(maze: Maze) -> Dict[str, float]:
        dead_ends = 0
        corridors = 0
        junctions = 0

        for cell in maze.cells():
            exits = MazeAnalyzer.degree(maze, cell)
            if exits == 1: dead_ends += 1
            elif exits == 2: corridors += 1
            elif exits >= 3: junctions += 1

        total = maze.cell_count
        return {
            "cells": total,
            "open_walls": MazeAnalyzer.open_walls(maze),
            "tunnels": len(maze.tunnel_pairs()),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
