import pygame
from asciimaze.core.grid import Grid

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_VISITED = (60, 100, 160)# Blue tint
    COLOR_SOLUTION = (255, 215, 0)# Gold

    def __init__(self, grid: Grid, width=1280, height=720):
        self.grid = grid
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        if self.grid.width == 0 or self.grid.height == 0:
            return
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        zoom_x = available_w / self.grid.width
        zoom_y = available_h / self.grid.height
        self.cell_size = max(1.0, min(zoom_x, zoom_y))

        # Center
        total_maze_w = self.grid.width * self.cell_size
        total_maze_h = self.grid.height * self.cell_size
        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"asciimaze - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def world_to_screen(self, wx, wy):
        sx = wx * self.cell_size + self.offset_x
        sy = wy * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
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
                self.cell_size = max(0.5, min(100.0, self.cell_size))

                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_grid(self, surface: pygame.Surface):
        surface.fill(self.COLOR_BG)
        screen_w, screen_h = surface.get_size()

        # Culling: visible cell range
        start_x = max(0, int((-self.offset_x) / self.cell_size))
        start_y = max(0, int((-self.offset_y) / self.cell_size))
        end_x = min(self.grid.width, int((screen_w - self.offset_x) / self.cell_size) + 1)
        end_y = min(self.grid.height, int((screen_h - self.offset_y) / self.cell_size) + 1)

        size = int(self.cell_size) + 1

        # 1. Backgrounds
        for y in range(start_y, end_y):
            row = self.grid.rows[y]
            for x in range(start_x, end_x):
                cell = row[x]
                px, py = self.world_to_screen(x, y)
                if cell & Grid.PATH:
                    pygame.draw.rect(surface, self.COLOR_SOLUTION, (int(px), int(py), size, size))
                elif cell & Grid.VISITED:
                    pygame.draw.rect(surface, self.COLOR_VISITED, (int(px), int(py), size, size))

        if self.cell_size <= 4.0:
            return

        # 2. Walls, only where no passage is open
        for y in range(start_y, end_y):
            row = self.grid.rows[y]
            for x in range(start_x, end_x):
                cell = row[x]
                px, py = self.world_to_screen(x, y)
                px, py = int(px), int(py)

                if not cell & Grid.DOWN:
                    pygame.draw.line(surface, self.COLOR_WALL, (px, py + size), (px + size, py + size), 1)
                if not cell & Grid.RIGHT:
                    pygame.draw.line(surface, self.COLOR_WALL, (px + size, py), (px + size, py + size), 1)
                if y == 0 and not cell & Grid.UP:
                    pygame.draw.line(surface, self.COLOR_WALL, (px, py), (px + size, py), 1)
                if x == 0 and not cell & Grid.LEFT:
                    pygame.draw.line(surface, self.COLOR_WALL, (px, py), (px, py + size), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        cells = self.grid.width * self.grid.height
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.width}x{self.grid.height} ({cells:,})",
            f"Zoom: {self.cell_size:.2f}",
        ]
        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.draw_grid(self.surface)
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)
        pygame.quit()
