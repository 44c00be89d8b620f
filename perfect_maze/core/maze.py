from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

Coord = Tuple[int, int]


class Topology(Enum):
    NORMAL = "normal"
    HEX = "hex"
    TUNNEL = "tunnel"


class Wall:
    """A wall shared by two neighbouring cells (or a boundary wall)."""
    __slots__ = ('present',)

    def __init__(self, present: bool = True):
        self.present = present

    def __repr__(self):
        return f"Wall(present={self.present})"


class Cell:
    __slots__ = ('row', 'col', 'neigh', 'wall', 'tunnel_to')

    def __init__(self, row: int, col: int, num_dir: int):
        self.row = row
        self.col = col
        # Direction-indexed; None where the topology has no neighbour
        self.neigh: List[Optional["Cell"]] = [None] * num_dir
        self.wall: List[Optional[Wall]] = [None] * num_dir
        self.tunnel_to: Optional["Cell"] = None

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def __repr__(self):
        return f"Cell({self.row}, {self.col})"


class Maze:
    # Direction Constants (shared by grid and hex layouts)
    EAST = 0
    NORTHEAST = 1
    NORTHWEST = 2
    WEST = 3
    SOUTHWEST = 4
    SOUTHEAST = 5
    # Grid aliases: north is the row above (row + 1)
    NORTH = NORTHWEST
    SOUTH = SOUTHEAST

    NUM_DIR = 6

    # Direction Helpers
    DELTA_R = (0, 1, 1, 0, -1, -1)
    DELTA_C = (1, 1, 0, -1, -1, 0)
    OPPOSITE = (WEST, SOUTHWEST, SOUTHEAST, EAST, NORTHEAST, NORTHWEST)

    GRID_DIRECTIONS = (EAST, NORTH, WEST, SOUTH)
    HEX_DIRECTIONS = (EAST, NORTHEAST, NORTHWEST, WEST, SOUTHWEST, SOUTHEAST)

    def __init__(self, rows: int, cols: int, topology: Topology = Topology.NORMAL,
                 entrance: Coord = None, exit: Coord = None,
                 tunnels: Iterable[Tuple[Coord, Coord]] = ()):
        """
        Allocates a fully-walled maze: every cell linked to its neighbours,
        every wall present, tunnel pairs linked symmetrically.

        Hex mazes use a skewed layout: row r holds the columns
        (r+1)//2 .. cols + (r+1)//2 - 1, so the backing array is wider than
        `cols` and slots outside that range hold None.
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Maze size must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self.topology = topology
        self.directions = self.HEX_DIRECTIONS if topology == Topology.HEX else self.GRID_DIRECTIONS

        width = cols + rows // 2 if topology == Topology.HEX else cols
        self.grid: List[List[Optional[Cell]]] = [
            [Cell(r, c, self.NUM_DIR) if self.is_valid_coordinate(r, c) else None
             for c in range(width)]
            for r in range(rows)
        ]
        self._link()

        tunnels = list(tunnels)
        if tunnels and topology != Topology.TUNNEL:
            raise ValueError("Tunnels are only allowed on TUNNEL mazes")
        for a, b in tunnels:
            self._add_tunnel(a, b)

        if entrance is None:
            entrance = (0, 0)
        if exit is None:
            exit = (rows - 1, self._last_col(rows - 1))
        self.entrance = self._endpoint(entrance, "entrance")
        self.exit = self._endpoint(exit, "exit")

    def _last_col(self, row: int) -> int:
        if self.topology == Topology.HEX:
            return self.cols - 1 + (row + 1) // 2
        return self.cols - 1

    def _link(self):
        for cell in self.cells():
            for d in self.directions:
                nr = cell.row + self.DELTA_R[d]
                nc = cell.col + self.DELTA_C[d]
                if self.is_valid_coordinate(nr, nc):
                    cell.neigh[d] = self.grid[nr][nc]

        # One Wall object per edge, referenced from both sides
        for cell in self.cells():
            for d in self.directions:
                if cell.wall[d] is not None:
                    continue
                wall = Wall()
                cell.wall[d] = wall
                neighbour = cell.neigh[d]
                if neighbour is not None:
                    neighbour.wall[self.OPPOSITE[d]] = wall

    def _endpoint(self, coord: Coord, name: str) -> Cell:
        row, col = coord
        if not self.is_valid_coordinate(row, col):
            raise ValueError(f"Invalid {name} ({row}, {col})")
        return self.grid[row][col]

    def _add_tunnel(self, a: Coord, b: Coord):
        c1 = self._endpoint(a, "tunnel end")
        c2 = self._endpoint(b, "tunnel end")
        if c1 is c2:
            raise ValueError(f"Tunnel at {a} leads to itself")
        for c in (c1, c2):
            if c.tunnel_to is not None:
                raise ValueError(f"Cell {c.coord} already has a tunnel")
        c1.tunnel_to = c2
        c2.tunnel_to = c1

    def is_valid_coordinate(self, row: int, col: int) -> bool:
        if self.topology == Topology.HEX:
            return 0 <= row < self.rows and (row + 1) // 2 <= col < self.cols + (row + 1) // 2
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Cell:
        if self.is_valid_coordinate(row, col):
            return self.grid[row][col]
        raise IndexError(f"Coordinate ({row}, {col}) is not a cell of this maze")

    def cells(self) -> Iterator[Cell]:
        """Yields every real cell in row-major order."""
        for row in self.grid:
            for cell in row:
                if cell is not None:
                    yield cell

    @property
    def cell_count(self) -> int:
        # Every hex row holds exactly `cols` cells too
        return self.rows * self.cols

    def adjacent(self, cell: Cell) -> Iterator[Tuple[int, Cell]]:
        """
        Yields (direction, neighbour) for all geometric neighbours.
        Does NOT check walls and ignores tunnels.
        """
        for d in self.directions:
            neighbour = cell.neigh[d]
            if neighbour is not None:
                yield d, neighbour

    def connected(self, cell: Cell) -> Iterator[Cell]:
        """Yields cells one step away: through removed walls, then the tunnel."""
        for d in self.directions:
            neighbour = cell.neigh[d]
            if neighbour is not None and not cell.wall[d].present:
                yield neighbour
        if cell.tunnel_to is not None:
            yield cell.tunnel_to

    def has_wall(self, cell: Cell, direction: int) -> bool:
        wall = cell.wall[direction]
        return wall is not None and wall.present

    def carve_path(self, cell: Cell, direction: int):
        """Removes the wall between `cell` and its neighbour in `direction`."""
        if cell.neigh[direction] is None:
            return  # Cannot carve into void
        cell.wall[direction].present = False

    def direction_to(self, a: Cell, b: Cell) -> Optional[int]:
        for d in self.directions:
            if a.neigh[d] is b:
                return d
        return None

    def carve_between(self, a: Cell, b: Cell) -> int:
        d = self.direction_to(a, b)
        if d is None:
            raise ValueError(f"{a} and {b} are not adjacent")
        a.wall[d].present = False
        return d

    def tunnel_pairs(self) -> List[Tuple[Cell, Cell]]:
        """Each tunnel once, ordered by its first end in row-major order."""
        pairs = []
        seen = set()
        for cell in self.cells():
            partner = cell.tunnel_to
            if partner is not None and cell not in seen:
                seen.add(partner)
                pairs.append((cell, partner))
        return pairs

    def __repr__(self):
        return f"Maze({self.rows}x{self.cols}, {self.topology.name})"
