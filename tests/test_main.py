import unittest
import sys
import os
import io
from contextlib import redirect_stdout

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.main import main, parse_tunnel


class TestCLI(unittest.TestCase):
    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(list(argv))
        return code, out.getvalue()

    def test_generate(self):
        code, out = self.run_cli("generate", "--rows", "6", "--cols", "7", "--algo", "prim", "--seed", "3")
        self.assertEqual(code, 0)
        self.assertIn("Done.", out)

    def test_solve_tunnel_maze(self):
        code, out = self.run_cli("solve", "--rows", "5", "--cols", "5", "--topology", "tunnel",
                                 "--tunnel", "0,0:4,4", "--solver", "dfs_solve", "--seed", "1")
        self.assertEqual(code, 0)
        self.assertIn("Solved: True", out)

    def test_solve_hex(self):
        code, out = self.run_cli("solve", "--rows", "4", "--cols", "4", "--topology", "hex", "--algo", "dfs")
        self.assertEqual(code, 0)
        self.assertIn("Solved: True", out)

    def test_invalid_maze(self):
        code, _ = self.run_cli("generate", "--rows", "3", "--cols", "3", "--tunnel", "0,0:2,2")
        self.assertEqual(code, 2)

    def test_benchmark(self):
        code, out = self.run_cli("benchmark", "--size", "4", "--seed", "5")
        self.assertEqual(code, 0)
        # 3 topologies x 3 generators x 2 solvers
        self.assertEqual(out.count("| bibfs"), 9)
        self.assertEqual(out.count("| dfs_solve"), 9)

    def test_parse_tunnel(self):
        self.assertEqual(parse_tunnel("1,2:3,4"), ((1, 2), (3, 4)))


if __name__ == '__main__':
    unittest.main()
