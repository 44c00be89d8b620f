import unittest
import sys
import os

# Add project root to path so we can import perfect_maze
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.maze import Maze, Topology


class TestMaze(unittest.TestCase):
    def test_initialization(self):
        maze = Maze(4, 5)
        cells = list(maze.cells())
        self.assertEqual(len(cells), 20)
        self.assertEqual(maze.cell_count, 20)
        # Every wall starts present
        for cell in cells:
            for d in maze.directions:
                self.assertTrue(cell.wall[d].present)

    def test_default_endpoints(self):
        maze = Maze(3, 4)
        self.assertEqual(maze.entrance.coord, (0, 0))
        self.assertEqual(maze.exit.coord, (2, 3))

        hexed = Maze(3, 4, Topology.HEX)
        self.assertEqual(hexed.entrance.coord, (0, 0))
        self.assertEqual(hexed.exit.coord, (2, 4))

    def test_coordinates(self):
        maze = Maze(5, 5)
        self.assertIs(maze.cell(2, 3), maze.grid[2][3])
        with self.assertRaises(IndexError):
            maze.cell(-1, 0)
        with self.assertRaises(IndexError):
            maze.cell(0, 5)

    def test_hex_bounds(self):
        maze = Maze(4, 3, Topology.HEX)
        # Row r holds columns (r+1)//2 .. 3 + (r+1)//2 - 1
        self.assertTrue(maze.is_valid_coordinate(0, 0))
        self.assertFalse(maze.is_valid_coordinate(0, 3))
        self.assertFalse(maze.is_valid_coordinate(1, 0))
        self.assertTrue(maze.is_valid_coordinate(1, 3))
        self.assertTrue(maze.is_valid_coordinate(3, 4))
        self.assertFalse(maze.is_valid_coordinate(3, 1))
        self.assertIsNone(maze.grid[1][0])

        self.assertEqual(len(list(maze.cells())), 12)
        with self.assertRaises(IndexError):
            maze.cell(1, 0)

    def test_neighbors(self):
        maze = Maze(3, 3)
        # Center cell has 4 neighbours, corner has 2
        self.assertEqual(len(list(maze.adjacent(maze.cell(1, 1)))), 4)
        corner = list(maze.adjacent(maze.cell(0, 0)))
        self.assertEqual(len(corner), 2)
        self.assertIn((Maze.EAST, maze.cell(0, 1)), corner)
        self.assertIn((Maze.NORTH, maze.cell(1, 0)), corner)

    def test_hex_neighbors(self):
        maze = Maze(3, 3, Topology.HEX)
        center = maze.cell(1, 2)
        neighbours = dict(maze.adjacent(center))
        self.assertEqual(len(neighbours), 6)
        self.assertIs(neighbours[Maze.NORTHEAST], maze.cell(2, 3))
        self.assertIs(neighbours[Maze.SOUTHWEST], maze.cell(0, 1))

    def test_walls_are_shared(self):
        maze = Maze(3, 3, Topology.HEX)
        for cell in maze.cells():
            for d, neighbour in maze.adjacent(cell):
                self.assertIs(cell.wall[d], neighbour.wall[Maze.OPPOSITE[d]])
                self.assertIs(neighbour.neigh[Maze.OPPOSITE[d]], cell)

    def test_carve_path(self):
        maze = Maze(2, 2)
        a, b = maze.cell(0, 0), maze.cell(0, 1)
        maze.carve_path(a, Maze.EAST)

        self.assertFalse(maze.has_wall(a, Maze.EAST))
        self.assertFalse(maze.has_wall(b, Maze.WEST))
        self.assertTrue(maze.has_wall(a, Maze.NORTH))
        self.assertEqual(list(maze.connected(a)), [b])

        # Boundary walls stay
        maze.carve_path(a, Maze.WEST)
        self.assertTrue(maze.has_wall(a, Maze.WEST))

    def test_carve_between(self):
        maze = Maze(3, 3)
        d = maze.carve_between(maze.cell(1, 1), maze.cell(2, 1))
        self.assertEqual(d, Maze.NORTH)
        self.assertFalse(maze.has_wall(maze.cell(2, 1), Maze.SOUTH))
        with self.assertRaises(ValueError):
            maze.carve_between(maze.cell(0, 0), maze.cell(2, 2))

    def test_tunnels(self):
        maze = Maze(5, 5, Topology.TUNNEL, tunnels=[((0, 0), (4, 4)), ((1, 2), (3, 0))])
        a, b = maze.cell(0, 0), maze.cell(4, 4)
        self.assertIs(a.tunnel_to, b)
        self.assertIs(b.tunnel_to, a)
        self.assertIn(b, list(maze.connected(a)))
        pairs = maze.tunnel_pairs()
        self.assertEqual([(p.coord, q.coord) for p, q in pairs], [((0, 0), (4, 4)), ((1, 2), (3, 0))])

    def test_invalid_construction(self):
        with self.assertRaises(ValueError):
            Maze(0, 3)
        with self.assertRaises(ValueError):
            Maze(3, 3, entrance=(5, 5))
        with self.assertRaises(ValueError):
            Maze(3, 3, Topology.NORMAL, tunnels=[((0, 0), (2, 2))])
        with self.assertRaises(ValueError):
            Maze(3, 3, Topology.TUNNEL, tunnels=[((0, 0), (0, 0))])
        with self.assertRaises(ValueError):
            Maze(3, 3, Topology.TUNNEL, tunnels=[((0, 0), (2, 2)), ((0, 0), (1, 1))])


if __name__ == '__main__':
    unittest.main()
