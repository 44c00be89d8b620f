import math
from typing import Dict, List, Optional, Set, Tuple

import pygame

from perfect_maze.core.maze import Cell, Maze, Topology

Point = Tuple[float, float]

# Angle (degrees, counter-clockwise from east) each direction faces
GRID_ANGLES = {Maze.EAST: 0, Maze.NORTH: 90, Maze.WEST: 180, Maze.SOUTH: 270}
HEX_ANGLES = {Maze.EAST: 0, Maze.NORTHEAST: 60, Maze.NORTHWEST: 120,
              Maze.WEST: 180, Maze.SOUTHWEST: 240, Maze.SOUTHEAST: 300}

SQRT3 = math.sqrt(3)


def direction_angles(maze: Maze) -> Dict[int, int]:
    return HEX_ANGLES if maze.topology == Topology.HEX else GRID_ANGLES


def cell_center(maze: Maze, cell: Cell, size: float) -> Point:
    """
    Centre of a cell in world units, y pointing down the screen.
    Row 0 is drawn at the bottom since rows grow northwards.
    For hex cells `size` is the centre-to-corner radius.
    """
    flipped = maze.rows - 1 - cell.row
    if maze.topology == Topology.HEX:
        w = SQRT3 * size
        # Undo the per-row column skew so the board renders as a rectangle
        x = (cell.col - cell.row / 2.0) * w + w / 2.0
        y = flipped * 1.5 * size + size
        return x, y
    return cell.col * size + size / 2.0, flipped * size + size / 2.0


def _corner(maze: Maze, center: Point, size: float, angle: float) -> Point:
    if maze.topology == Topology.HEX:
        radius = size
    else:
        radius = size / math.sqrt(2)
    rad = math.radians(angle)
    return center[0] + radius * math.cos(rad), center[1] - radius * math.sin(rad)


def wall_segment(maze: Maze, cell: Cell, direction: int, size: float) -> Tuple[Point, Point]:
    """The edge of the cell's polygon facing `direction`."""
    angles = direction_angles(maze)
    half = 180.0 / len(angles)
    center = cell_center(maze, cell, size)
    angle = angles[direction]
    return (_corner(maze, center, size, angle - half),
            _corner(maze, center, size, angle + half))


def cell_polygon(maze: Maze, cell: Cell, size: float) -> List[Point]:
    angles = direction_angles(maze)
    half = 180.0 / len(angles)
    center = cell_center(maze, cell, size)
    return [_corner(maze, center, size, a + half) for a in sorted(angles.values())]


def world_size(maze: Maze, size: float) -> Point:
    if maze.topology == Topology.HEX:
        return (maze.cols + 0.5) * SQRT3 * size, (1.5 * maze.rows + 0.5) * size
    return maze.cols * size, maze.rows * size


class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_EXPLORED = (60, 100, 160)  # Blue tint
    COLOR_TUNNEL = (200, 80, 200)
    COLOR_ENTRANCE = (80, 200, 80)
    COLOR_EXIT = (220, 60, 60)

    def __init__(self, maze: Maze, generator=None, solver=None, width=1280, height=720):
        self.maze = maze
        self.generator = generator
        self.solver = solver
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.explored: Set[Cell] = set()
        self.running = True
        self.font = None
        self.clock = None
        self.surface: Optional[pygame.Surface] = None
        self.gen_finished = False
        self.solve_finished = False

    def mark_explored(self, cell: Cell):
        """Solver callback, invoked once per explored cell."""
        self.explored.add(cell)

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire maze on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        unit_w, unit_h = world_size(self.maze, 1.0)
        self.cell_size = min(available_w / unit_w, available_h / unit_h)

        total_w, total_h = world_size(self.maze, self.cell_size)
        self.offset_x = (self.screen_width - total_w) / 2
        self.offset_y = (self.screen_height - total_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Perfect Maze - {self.maze.rows}x{self.maze.cols} {self.maze.topology.name}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def to_screen(self, point: Point) -> Point:
        return point[0] + self.offset_x, point[1] + self.offset_y

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(1.0, min(200.0, self.cell_size))

                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_maze(self, surface: pygame.Surface):
        surface.fill(self.COLOR_BG)
        maze = self.maze
        size = self.cell_size

        # 1. Cell backgrounds
        for cell in maze.cells():
            color = None
            if cell is maze.entrance:
                color = self.COLOR_ENTRANCE
            elif cell is maze.exit:
                color = self.COLOR_EXIT
            elif cell in self.explored:
                color = self.COLOR_EXPLORED
            if color:
                points = [self.to_screen(p) for p in cell_polygon(maze, cell, size)]
                pygame.draw.polygon(surface, color, points)

        # 2. Walls, each shared wall drawn once
        drawn = set()
        for cell in maze.cells():
            for d in maze.directions:
                wall = cell.wall[d]
                if not wall.present or id(wall) in drawn:
                    continue
                drawn.add(id(wall))
                a, b = wall_segment(maze, cell, d, size)
                pygame.draw.line(surface, self.COLOR_WALL, self.to_screen(a), self.to_screen(b), 1)

        # 3. Tunnels
        for end1, end2 in maze.tunnel_pairs():
            pygame.draw.line(surface, self.COLOR_TUNNEL,
                             self.to_screen(cell_center(maze, end1, size)),
                             self.to_screen(cell_center(maze, end2, size)), 2)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        status = "Running"
        if self.solver is not None and self.solve_finished:
            status = "Solved" if self.solver.is_solved() else "No Path"
        elif self.generator is not None and self.gen_finished:
            status = "Generated"
        info = [
            f"FPS: {fps}",
            f"Size: {self.maze.rows}x{self.maze.cols} ({self.maze.cell_count:,})",
            f"Explored: {len(self.explored)}",
            f"Status: {status}",
        ]
        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        gen_iter = self.generator.run() if self.generator else None
        solver_iter = None

        while self.running:
            self.handle_input()

            # Generation first, then solving on the finished maze
            if gen_iter and not self.gen_finished:
                try:
                    for _ in range(10):
                        next(gen_iter)
                except StopIteration:
                    self.gen_finished = True
            elif self.solver and not self.solve_finished:
                if solver_iter is None:
                    solver_iter = self.solver.run()
                try:
                    next(solver_iter)
                except StopIteration:
                    self.solve_finished = True

            self.draw_maze(self.surface)
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
