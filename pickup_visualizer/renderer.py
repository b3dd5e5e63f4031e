"""PyGame-based renderer for the visualizer."""

from typing import Optional

try:
    import pygame
    HAS_PYGAME = True
except ImportError:
    HAS_PYGAME = False
    pygame = None  # type: ignore

from pickup_locator import config as core_config
from pickup_locator.color import heat_to_color
from pickup_locator.harmonics import anti_nodes

from . import config
from .state import VisualizerState


def position_to_x(position: float, length: float, start_x: float, width: float) -> int:
    """Convert a position along the string (mm from bridge) to a screen X."""
    return int(round(start_x + (position / length) * width))


def visualization_height(harmonic_count: int) -> int:
    """Height of the heat map + harmonic rows block, including padding."""
    return (
        config.TOP_PADDING
        - config.LABEL_HEIGHT
        + config.HEAT_MAP_HEIGHT
        + config.GAP_AFTER_HEAT_MAP
        + harmonic_count * config.HARMONIC_SPACING
        + config.BOTTOM_PADDING
    )


class Renderer:
    """PyGame-based renderer for the pickup visualizer."""

    def __init__(self, state: VisualizerState):
        """Initialize the renderer.

        Args:
            state: Shared visualizer state
        """
        if not HAS_PYGAME:
            raise ImportError(
                "pygame is required for visualization. "
                "Install with: pip install pygame"
            )

        self.state = state
        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font: Optional[pygame.font.Font] = None
        self.font_small: Optional[pygame.font.Font] = None
        self.running = False

    def start(self) -> None:
        """Initialize PyGame and create window."""
        pygame.init()
        pygame.font.init()

        self.screen = pygame.display.set_mode(
            (config.WINDOW_WIDTH, config.WINDOW_HEIGHT)
        )
        pygame.display.set_caption(config.WINDOW_TITLE)

        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 18)
        self.running = True

    def stop(self) -> None:
        """Shut down PyGame."""
        self.running = False
        pygame.quit()

    def handle_events(self) -> bool:
        """Process PyGame events. Returns False if should quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                elif event.key == pygame.K_UP:
                    self.state.select(-1)
                elif event.key == pygame.K_DOWN:
                    self.state.select(1)
                elif event.key == pygame.K_LEFT:
                    self.state.adjust(-1)
                elif event.key == pygame.K_RIGHT:
                    self.state.adjust(1)
                elif event.key == pygame.K_p:
                    self.state.cycle_palette()
                elif event.key == pygame.K_r:
                    self.state.reset()
        return True

    def render(self) -> None:
        """Render one frame."""
        if not self.screen:
            return

        self.screen.fill(config.COLOR_BACKGROUND)

        viz_height = visualization_height(len(self.state.weights))
        viz_top = config.WINDOW_HEIGHT - viz_height

        self._draw_panel(config.SIDE_MARGIN, config.PANEL_TOP)
        self._draw_visualization(0, viz_top, config.WINDOW_WIDTH, viz_height)

        pygame.display.flip()

    def _draw_panel(self, x: int, y: int) -> None:
        """Draw parameter rows with value bars, then the results."""
        if not self.font or not self.font_small:
            return

        title = self.font.render("Harmonic Anti-Node Visualizer", True, config.COLOR_TEXT)
        self.screen.blit(title, (x, y))
        y += config.PANEL_ROW_HEIGHT + 6

        for row, (label, value_text, fraction) in enumerate(self.state.parameter_rows()):
            is_selected = row == self.state.selected
            color = config.COLOR_HIGHLIGHT if is_selected else config.COLOR_TEXT
            marker = "> " if is_selected else "  "

            text = self.font_small.render(f"{marker}{label}", True, color)
            self.screen.blit(text, (x, y))

            bar_x = x + 160
            bar_rect = pygame.Rect(bar_x, y + 4, config.BAR_WIDTH, config.BAR_HEIGHT)
            pygame.draw.rect(self.screen, config.COLOR_BAR_BACKGROUND, bar_rect)
            fill = int(config.BAR_WIDTH * min(max(fraction, 0.0), 1.0))
            fill_rect = pygame.Rect(bar_x, y + 4, fill, config.BAR_HEIGHT)
            pygame.draw.rect(self.screen, config.COLOR_BAR_FILL, fill_rect)

            value = self.font_small.render(value_text, True, color)
            self.screen.blit(value, (bar_x + config.BAR_WIDTH + 10, y))

            y += config.PANEL_ROW_HEIGHT

        y += 6
        length = self.state.string_length
        positions = self.state.positions
        for label, position in (
            ("Bridge Pickup", positions.bridge_position),
            ("Neck Pickup", positions.neck_position),
        ):
            text = f"{label}: {position:.2f} mm from bridge ({position / length * 100.0:.1f}%)"
            surface = self.font_small.render(text, True, config.COLOR_HIGHLIGHT)
            self.screen.blit(surface, (x, y))
            y += config.PANEL_ROW_HEIGHT

        hint = "Up/Down select  Left/Right adjust  P palette ({})  R reset  Esc quit".format(
            self.state.palette_name
        )
        self.screen.blit(self.font_small.render(hint, True, config.COLOR_TEXT_DIM), (x, y))

    def _draw_visualization(self, x: int, y: int, w: int, h: int) -> None:
        """Draw heat map, anti-node rows and pickup markers."""
        if not self.font_small:
            return

        pygame.draw.rect(self.screen, config.COLOR_PANEL, (x, y, w, h))

        string_start_x = x + config.SIDE_MARGIN
        string_end_x = x + w - config.SIDE_MARGIN
        string_width = string_end_x - string_start_x
        length = self.state.string_length

        # Heat map: one rectangle per sample, edges rounded so there are no gaps
        heat_map_y = y + config.TOP_PADDING
        normalized = self.state.normalized_heat_map()
        count = len(normalized)
        palette = self.state.palette
        for i, heat in enumerate(normalized):
            x_start = round(string_start_x + (i / count) * string_width)
            x_end = round(string_start_x + ((i + 1) / count) * string_width)
            if x_end <= x_start:
                continue
            color = heat_to_color(heat, palette)[:3]
            pygame.draw.rect(
                self.screen, color,
                (x_start, heat_map_y, x_end - x_start, config.HEAT_MAP_HEIGHT),
            )

        label = self.font_small.render("Heat Map (Anti-Node Proximity)", True, (255, 255, 255))
        self.screen.blit(label, (string_start_x, heat_map_y - config.LABEL_HEIGHT - 12))

        # One string line per harmonic, anti-nodes as dots
        current_y = heat_map_y + config.HEAT_MAP_HEIGHT + config.GAP_AFTER_HEAT_MAP
        for offset in range(len(self.state.weights)):
            harmonic = core_config.FIRST_HARMONIC + offset
            pygame.draw.line(
                self.screen, config.COLOR_STRING,
                (string_start_x, current_y), (string_end_x, current_y), 1,
            )
            for node in anti_nodes(length, harmonic):
                node_x = position_to_x(node, length, string_start_x, string_width)
                pygame.draw.circle(
                    self.screen, config.COLOR_ANTI_NODE,
                    (node_x, current_y), config.ANTI_NODE_RADIUS,
                )
            current_y += config.HARMONIC_SPACING
        last_row_y = current_y - config.HARMONIC_SPACING

        # Pickup markers
        positions = self.state.positions
        for name, position, color in (
            ("Bridge", positions.bridge_position, config.COLOR_BRIDGE_PICKUP),
            ("Neck", positions.neck_position, config.COLOR_NECK_PICKUP),
        ):
            marker_x = position_to_x(position, length, string_start_x, string_width)
            pygame.draw.line(
                self.screen, color,
                (marker_x, heat_map_y), (marker_x, last_row_y),
                config.PICKUP_LINE_WIDTH,
            )
            text = self.font_small.render(name, True, color)
            self.screen.blit(
                text,
                (marker_x - text.get_width() // 2, heat_map_y - config.LABEL_HEIGHT - 30),
            )

        # String ends
        for name, end_x in (("Bridge", string_start_x), ("Nut", string_end_x)):
            text = self.font_small.render(name, True, (255, 255, 255))
            self.screen.blit(
                text,
                (end_x - text.get_width() // 2,
                 last_row_y + config.ANTI_NODE_RADIUS + 4),
            )
