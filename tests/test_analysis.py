import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.algo.dfs import RecursiveBacktracker
from perfect_maze.core.maze import Maze, Topology
from perfect_maze.core.analysis import MazeAnalyzer


class TestAnalysis(unittest.TestCase):
    def test_unwired_maze(self):
        maze = Maze(3, 3)
        self.assertEqual(MazeAnalyzer.open_walls(maze), 0)
        self.assertEqual(MazeAnalyzer.reachable(maze), {maze.entrance})
        self.assertFalse(MazeAnalyzer.is_perfect(maze))

    def test_cycle_is_not_perfect(self):
        maze = Maze(2, 2)
        cell = maze.cell
        maze.carve_between(cell(0, 0), cell(0, 1))
        maze.carve_between(cell(0, 1), cell(1, 1))
        maze.carve_between(cell(1, 1), cell(1, 0))
        self.assertTrue(MazeAnalyzer.is_perfect(maze))

        maze.carve_between(cell(1, 0), cell(0, 0))
        self.assertEqual(MazeAnalyzer.edge_count(maze), 4)
        self.assertFalse(MazeAnalyzer.is_perfect(maze))

    def test_tunnel_counts_as_edge(self):
        maze = Maze(1, 3, Topology.TUNNEL, tunnels=[((0, 0), (0, 2))])
        maze.carve_between(maze.cell(0, 0), maze.cell(0, 1))
        self.assertEqual(MazeAnalyzer.open_walls(maze), 1)
        self.assertEqual(MazeAnalyzer.edge_count(maze), 2)
        self.assertTrue(MazeAnalyzer.is_perfect(maze))

    def test_stats(self):
        maze = Maze(20, 20)
        RecursiveBacktracker(maze, seed=42).run_all()

        stats = MazeAnalyzer.calculate_stats(maze)
        self.assertEqual(stats["open_walls"], 399)
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], 400)

    def test_corridor_stats(self):
        maze = Maze(1, 4)
        for col in range(3):
            maze.carve_path(maze.cell(0, col), Maze.EAST)
        stats = MazeAnalyzer.calculate_stats(maze)
        self.assertEqual(stats["dead_ends"], 2)
        self.assertEqual(stats["corridors"], 2)
        self.assertEqual(stats["junctions"], 0)
        self.assertEqual(stats["dead_end_percent"], 50.0)


if __name__ == '__main__':
    unittest.main()
