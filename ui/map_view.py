import time
import dearpygui.dearpygui as dpg
from terrain.zones import ZONE_COLORS
from search import settings
from search.session import ANNEALING, HILL_CLIMB, Session

TILE_SIZE = 24
PANEL_WIDTH = 280

HILL_CLIMB_COLOR = (217, 83, 79, 255)
STUCK_COLOR = (240, 200, 40, 255)
ANNEALING_COLOR = (31, 120, 209, 255)
ROAD_COLOR = (120, 92, 58, 160)
HOUSE_COLOR = (150, 60, 40, 255)
TREE_COLOR = (30, 100, 40, 255)
DEAD_TREE_COLOR = (90, 70, 50, 255)
PEAK_COLOR = (60, 45, 30, 255)
GRID_LINE_COLOR = (0, 0, 0, 15)


def cell_to_pixel(x, y, size=TILE_SIZE):
    return x * size, y * size


def cell_center(x, y, size=TILE_SIZE):
    px, py = cell_to_pixel(x, y, size)
    return px + size / 2, py + size / 2


class MapView:
    """Draws a Session's terrain and agents and exposes the run controls."""

    def __init__(self, session: Session, *, temperature=None):
        self.session = session
        grid = session.layout.grid
        self.size = (grid.cols * TILE_SIZE + PANEL_WIDTH, grid.rows * TILE_SIZE)
        start_temp = int(temperature if temperature is not None else settings.DEFAULT_TEMPERATURE)

        dpg.create_context()
        dpg.create_viewport(title="Zone Search", width=self.size[0] + 20, height=self.size[1] + 40)
        with dpg.window(tag="_map_window", no_move=True, no_resize=True, no_title_bar=True):
            with dpg.group(horizontal=True):
                self.canvas = dpg.add_drawlist(width=grid.cols * TILE_SIZE, height=grid.rows * TILE_SIZE)
                # static terrain below, agents redrawn on top every frame
                self.terrain_layer = dpg.add_draw_layer(parent=self.canvas)
                self.agent_layer = dpg.add_draw_layer(parent=self.canvas)
                self._drawn_layout = None
                with dpg.group(width=PANEL_WIDTH - 20):
                    dpg.add_button(label="Regenerate", callback=self._on_regenerate)
                    dpg.add_button(label="Start hill climbing", callback=self._on_start_hill_climb)
                    dpg.add_button(label="Start annealing", callback=self._on_start_annealing)
                    dpg.add_slider_int(
                        label="Temperature",
                        tag="_temperature",
                        min_value=settings.MIN_SLIDER_TEMPERATURE,
                        max_value=settings.MAX_SLIDER_TEMPERATURE,
                        default_value=start_temp,
                    )
                    dpg.add_separator()
                    dpg.add_text("", tag="_hc_pos")
                    dpg.add_text("", tag="_start_area")
                    dpg.add_text("", tag="_sa_pos")
                    dpg.add_text("", tag="_sa_temp")
                    dpg.add_separator()
                    dpg.add_text("", tag="_status", wrap=PANEL_WIDTH - 30)
        dpg.set_primary_window("_map_window", True)
        dpg.setup_dearpygui()
        dpg.show_viewport()

    # button callbacks
    def _on_regenerate(self, sender, app_data):
        self.session.regenerate()

    def _on_start_hill_climb(self, sender, app_data):
        self.session.start_hill_climb(time.time())

    def _on_start_annealing(self, sender, app_data):
        self.session.start_annealing(time.time(), temperature=dpg.get_value("_temperature"))

    def draw_cell(self, x, y, color):
        px, py = cell_to_pixel(x, y)
        dpg.draw_rectangle((px, py), (px + TILE_SIZE, py + TILE_SIZE), color=GRID_LINE_COLOR, fill=color, parent=self.terrain_layer)

    def draw_terrain(self):
        grid = self.session.layout.grid
        for x, y in grid.iter_coords():
            self.draw_cell(x, y, ZONE_COLORS[grid.get(x, y)])

    def draw_road(self):
        for cell in self.session.layout.road:
            px, py = cell_to_pixel(cell.x, cell.y)
            inset = TILE_SIZE * 0.32
            dpg.draw_rectangle((px + inset, py + inset), (px + TILE_SIZE - inset, py + TILE_SIZE - inset), color=ROAD_COLOR, fill=ROAD_COLOR, parent=self.terrain_layer)

    def draw_houses(self):
        layout = self.session.layout
        for house in layout.big_houses:
            px, py = cell_to_pixel(house.x, house.y)
            dpg.draw_rectangle((px + 3, py + 3), (px + 2 * TILE_SIZE - 3, py + 2 * TILE_SIZE - 3), color=(0, 0, 0, 255), fill=HOUSE_COLOR, parent=self.terrain_layer)
        for house in layout.small_houses:
            px, py = cell_to_pixel(house.x, house.y)
            dpg.draw_rectangle((px + 5, py + 5), (px + TILE_SIZE - 5, py + TILE_SIZE - 5), color=(0, 0, 0, 255), fill=HOUSE_COLOR, parent=self.terrain_layer)

    def draw_decorations(self):
        decorations = self.session.layout.decorations
        for tree in decorations.trees:
            dpg.draw_circle(cell_center(tree.x, tree.y), TILE_SIZE / 5, color=TREE_COLOR, fill=TREE_COLOR, parent=self.terrain_layer)
        for tree in decorations.dead_trees:
            cx, cy = cell_center(tree.x, tree.y)
            dpg.draw_line((cx, cy - 6), (cx, cy + 6), color=DEAD_TREE_COLOR, thickness=2, parent=self.terrain_layer)
        for peak in decorations.peaks:
            cx, cy = cell_center(peak.x, peak.y)
            r = TILE_SIZE * 0.4
            dpg.draw_triangle((cx, cy - r), (cx - r, cy + r * 0.7), (cx + r, cy + r * 0.7), color=PEAK_COLOR, fill=PEAK_COLOR, parent=self.terrain_layer)

    def draw_agent(self, position, color):
        dpg.draw_circle(cell_center(position.x, position.y), TILE_SIZE / 3, color=(0, 0, 0, 255), fill=color, parent=self.agent_layer)

    def draw_agents(self):
        states = self.session.snapshot()
        hill = states.get(HILL_CLIMB)
        if hill is not None:
            self.draw_agent(hill.position, STUCK_COLOR if hill.is_stuck else HILL_CLIMB_COLOR)
        else:
            self.draw_agent(self.session.hill_start, HILL_CLIMB_COLOR)
        sa = states.get(ANNEALING)
        self.draw_agent(sa.position if sa is not None else self.session.annealing_start, ANNEALING_COLOR)

    def update_labels(self):
        states = self.session.snapshot()
        hill = states.get(HILL_CLIMB)
        hc_pos = hill.position if hill is not None else self.session.hill_start
        dpg.set_value("_hc_pos", f"Hill climber: ({hc_pos.x}, {hc_pos.y})")
        dpg.set_value("_start_area", f"Zone: {self.session.zone_name_at(hc_pos)}")
        sa = states.get(ANNEALING)
        sa_pos = sa.position if sa is not None else self.session.annealing_start
        dpg.set_value("_sa_pos", f"Annealer: ({sa_pos.x}, {sa_pos.y})")
        if sa is not None and self.session.is_running(ANNEALING):
            dpg.set_value("_sa_temp", f"Temperature: {sa.temperature:.1f}")
            dpg.set_value("_temperature", max(settings.MIN_SLIDER_TEMPERATURE, int(sa.temperature)))
        else:
            dpg.set_value("_sa_temp", f"Temperature: {dpg.get_value('_temperature')}")
        dpg.set_value("_status", self.session.status)

    def draw_static(self):
        """Redraw the terrain layer. Only needed when the session swaps in a new layout."""
        dpg.delete_item(self.terrain_layer, children_only=True)
        self.draw_terrain()
        self.draw_road()
        self.draw_decorations()
        self.draw_houses()
        self._drawn_layout = self.session.layout

    def draw_map(self):
        if self._drawn_layout is not self.session.layout:
            self.draw_static()
        dpg.delete_item(self.agent_layer, children_only=True)
        self.draw_agents()
        self.update_labels()

    def run(self):
        while dpg.is_dearpygui_running():
            self.session.advance(time.time())
            self.draw_map()
            dpg.render_dearpygui_frame()
        dpg.destroy_context()
        return self.session.snapshot()


if __name__ == "__main__":
    view = MapView(Session())
    view.run()
