"""
Conway's Game of Life - Visual Implementation with Pygame

Controls:
    SPACE       - Pause/Resume simulation
    N           - Single step while paused
    R           - Reset with random grid
    C           - Clear grid
    G           - Add glider at mouse position
    U           - Add glider gun
    LEFT CLICK  - Draw cells
    RIGHT CLICK - Erase cells
    UP/DOWN     - Increase/Decrease speed
    +/-         - Zoom in/out
    ESC         - Quit

Usage: game-of-life-visual [rows] [cols] [cell_size]
"""
import sys

import pygame

from .patterns import init_glider, init_glider_gun, init_random
from .simulation import Simulation

BLACK = (0, 0, 0)          # background
GRAY = (40, 40, 40)        # grid lines
GREEN = (0, 255, 100)      # alive cells
YELLOW = (255, 255, 0)     # paused UI
WHITE = (255, 255, 255)    # text


class GameOfLifeViewer:
    def __init__(self, rows: int = 80, cols: int = 120, cell_size: int = 10, use_numpy: bool = True):
        pygame.init()  # init pygame modules

        self.rows = rows                 # grid height in cells
        self.cols = cols                 # grid width in cells
        self.cell_size = cell_size       # cell size in pixels
        self.use_numpy = use_numpy       # vectorized step by default

        self.window_width = 1200         # fixed window width
        self.window_height = 800         # fixed window height

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))  # main window
        pygame.display.set_caption("Conway's Game of Life")  # window title

        self.grid_surface = pygame.Surface((cols * cell_size, rows * cell_size))  # grid canvas

        self.init_random()               # random start state, generation 0

        self.running = False             # paused by default
        self.speed = 10                  # sim steps per second

        self.clock = pygame.time.Clock()                 # frame timing
        self.font = pygame.font.Font(None, 28)           # main UI font
        self.small_font = pygame.font.Font(None, 22)     # help UI font

        self.mouse_down = False          # dragging state
        self.mouse_button = None         # 1=left, 3=right

    def init_random(self, density: float = 0.3):
        self.sim = Simulation(self.rows, self.cols, init_random(self.rows, self.cols, density))  # generation 0

    def clear_grid(self):
        self.sim = Simulation(self.rows, self.cols)  # all dead, generation 0

    def stamp(self, pattern):
        for row, col in zip(*pattern.nonzero()):
            self.sim.set_cell(int(row), int(col), True)  # overlay, never erase

    def add_glider(self, x: int, y: int):
        self.stamp(init_glider(self.rows, self.cols, row=y, col=x))  # empty if it does not fit

    def add_glider_gun(self):
        self.stamp(init_glider_gun(self.rows, self.cols))

    def step(self):
        if self.use_numpy:
            self.sim.step_numpy()  # vectorized double buffer
        else:
            self.sim.step()  # two-phase update

    def screen_to_grid(self, sx: int, sy: int) -> tuple[int, int]:
        return sx // self.cell_size, sy // self.cell_size  # pixel -> (col, row)

    def set_cell(self, sx: int, sy: int, alive: bool):
        gx, gy = self.screen_to_grid(sx, sy)  # convert coords
        if 0 <= gx < self.cols and 0 <= gy < self.rows:  # clip to grid
            self.sim.set_cell(gy, gx, alive)  # write cell

    def draw(self):
        self.grid_surface.fill(BLACK)  # clear canvas

        if self.cell_size >= 4:  # avoid clutter when zoomed out
            for x in range(0, self.cols * self.cell_size, self.cell_size):
                pygame.draw.line(self.grid_surface, GRAY, (x, 0), (x, self.rows * self.cell_size))  # vertical
            for y in range(0, self.rows * self.cell_size, self.cell_size):
                pygame.draw.line(self.grid_surface, GRAY, (0, y), (self.cols * self.cell_size, y))  # horizontal

        cells = self.sim.to_array()  # one snapshot per frame
        for row, col in zip(*cells.nonzero()):  # draw only alive cells
            rect = pygame.Rect(
                col * self.cell_size + 1,
                row * self.cell_size + 1,
                self.cell_size - 1,
                self.cell_size - 1
            )
            pygame.draw.rect(self.grid_surface, GREEN, rect)  # filled cell

    def status_text(self) -> str:
        status = "RUNNING" if self.running else "PAUSED"  # state label
        return (f"[{status}]  Gen: {self.sim.get_generation()}  "
                f"Cells: {self.sim.count_live_cells()}  Speed: {self.speed} fps")

    def draw_ui(self):
        pygame.draw.rect(self.screen, (30, 30, 30), (0, self.window_height - 35, self.window_width, 35))  # status bar

        color = GREEN if self.running else YELLOW  # state color
        text = self.font.render(self.status_text(), True, color)
        self.screen.blit(text, (10, self.window_height - 28))  # status text

        if not self.running:  # show help only when paused
            help_bg = pygame.Surface((self.window_width, 25))  # top strip
            help_bg.set_alpha(200)                             # translucent
            help_bg.fill((30, 30, 30))                         # dark bg
            self.screen.blit(help_bg, (0, 0))                  # draw bg

            text = self.small_font.render(
                "SPACE: Play/Pause | N: Step | R: Random | C: Clear | G: Glider | U: Gun | Click: Draw | UP/DOWN: Speed",
                True,
                WHITE
            )
            self.screen.blit(text, (10, 5))  # help text

    def resize_surface(self):
        self.grid_surface = pygame.Surface((self.cols * self.cell_size, self.rows * self.cell_size))

    def handle_key(self, key) -> bool:
        if key == pygame.K_ESCAPE:
            return False  # quit

        elif key == pygame.K_SPACE:
            self.running = not self.running  # toggle run/pause

        elif key == pygame.K_n and not self.running:
            self.step()  # single step

        elif key == pygame.K_r:
            self.init_random()  # random reset

        elif key == pygame.K_c:
            self.clear_grid()  # clear all

        elif key == pygame.K_g:
            gx, gy = self.screen_to_grid(*pygame.mouse.get_pos())  # mouse cell
            self.add_glider(gx, gy)  # stamp glider

        elif key == pygame.K_u:
            self.add_glider_gun()  # fixed position

        elif key == pygame.K_UP:
            self.speed = min(self.speed + 5, 60)  # speed up

        elif key == pygame.K_DOWN:
            self.speed = max(self.speed - 5, 1)  # slow down

        elif key in (pygame.K_PLUS, pygame.K_EQUALS):
            self.cell_size = min(self.cell_size + 2, 50)  # zoom in
            self.resize_surface()

        elif key == pygame.K_MINUS:
            self.cell_size = max(self.cell_size - 2, 2)  # zoom out
            self.resize_surface()

        return True

    def handle_events(self) -> bool:
        for event in pygame.event.get():  # poll events
            if event.type == pygame.QUIT:
                return False  # close window

            elif event.type == pygame.KEYDOWN:
                if not self.handle_key(event.key):
                    return False

            elif event.type == pygame.MOUSEBUTTONDOWN:
                self.mouse_down = True  # start drag
                self.mouse_button = event.button  # store button
                self.set_cell(event.pos[0], event.pos[1], event.button == 1)  # paint once

            elif event.type == pygame.MOUSEBUTTONUP:
                self.mouse_down = False  # stop drag
                self.mouse_button = None  # clear state

            elif event.type == pygame.MOUSEMOTION and self.mouse_down:
                self.set_cell(event.pos[0], event.pos[1], self.mouse_button == 1)  # paint while dragging

        return True  # keep running

    def run(self):
        while self.handle_events():  # main loop
            if self.running:
                self.step()  # advance simulation

            self.screen.fill(BLACK)  # clear window
            self.draw()  # draw grid surface
            self.screen.blit(self.grid_surface, (0, 0))  # blit grid
            self.draw_ui()  # draw overlays

            pygame.display.flip()  # swap buffers

            self.clock.tick(self.speed if self.running else 60)  # sim rate vs UI rate

        pygame.quit()  # clean exit


def main(argv: list[str] | None = None):
    if argv is None:
        argv = sys.argv[1:]

    rows = int(argv[0]) if len(argv) > 0 else 80        # CLI height
    cols = int(argv[1]) if len(argv) > 1 else 120       # CLI width
    cell_size = int(argv[2]) if len(argv) > 2 else 10   # CLI zoom

    GameOfLifeViewer(rows, cols, cell_size).run()  # start app


if __name__ == "__main__":
    main()
