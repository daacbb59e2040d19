# examples/basic_viewer/main.py

import sys
import os
import json
import logging
import logging.config

import pygame
import pygame_gui

# To import from the project root (fault_terrain) without installing it,
# we add it to the Python path.
# This is necessary because 'examples' is not in the same package as 'fault_terrain'.
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from fault_terrain import Configuration, InvalidConfiguration, TerrainGenerator
from camera import Camera
from renderer import TerrainRenderer

# --- UI Constants (Rule 1) ---
UI_PANEL_WIDTH = 240
UI_ELEMENT_HEIGHT = 25
UI_PADDING = 10
UI_BUTTON_HEIGHT = 40


class Application:
    """The main application class for the fault terrain viewer."""

    def __init__(self):
        self._setup_logging()
        self.logger.info("Application starting.")

        self.config = self._load_config()
        self._setup_pygame()

        # --- Dependency Injection (Rule 7, DIP) ---
        generation_params = self.config.get('terrain_generation_parameters', {})
        self.terrain_configuration = Configuration.from_dict(generation_params)
        self.terrain_generator = TerrainGenerator(
            logger=self.logger,
            seed=generation_params.get('seed')
        )
        self.camera = Camera(self.config, self.screen_width, self.screen_height)
        self.terrain_renderer = TerrainRenderer(logger=self.logger)

        # --- UI Setup ---
        self.ui_manager = None
        self.grid_size_input = None
        self.fault_count_input = None
        self.regenerate_button = None
        self._setup_ui()

        # Regeneration is requested by events and performed at the top of the
        # next frame, so a mesh is never replaced while it is being drawn.
        self.mesh_dirty = True
        self.is_running = True

    def _setup_logging(self):
        """Initializes the logging system from a config file."""
        log_config_path = 'examples/basic_viewer/logging_config.json'
        # This path must match the relative path used in the JSON config.
        log_dir = 'logs'

        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        with open(log_config_path, 'rt') as f:
            log_config = json.load(f)

        # Tell the logger where to create its file, overriding the JSON path.
        log_config['handlers']['file']['filename'] = os.path.join(log_dir, 'viewer.log')

        logging.config.dictConfig(log_config)
        self.logger = logging.getLogger(__name__)

    def _load_config(self) -> dict:
        """Loads viewer and terrain parameters from the config file."""
        config_path = 'examples/basic_viewer/config.json'
        self.logger.info(f"Loading configuration from {config_path}")
        try:
            with open(config_path, 'r') as f:
                return json.load(f)
        except FileNotFoundError:
            self.logger.critical(f"Configuration file not found at {config_path}. Exiting.")
            sys.exit(1)
        except json.JSONDecodeError:
            self.logger.critical(f"Error decoding JSON from {config_path}. Exiting.")
            sys.exit(1)

    def _setup_pygame(self):
        """Initializes Pygame and the display window."""
        pygame.init()
        display_config = self.config['display']
        self.screen_width = display_config['screen_width']
        self.screen_height = display_config['screen_height']

        self.logger.info(f"Initializing display in Windowed mode ({self.screen_width}x{self.screen_height}).")
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
        pygame.display.set_caption("Fault Terrain Viewer")
        self.clock = pygame.time.Clock()
        self.tick_rate = display_config['clock_tick_rate']

    def _setup_ui(self):
        """Builds the side panel with the size inputs and the regenerate button."""
        self.ui_manager = pygame_gui.UIManager((self.screen_width, self.screen_height))
        panel = pygame_gui.elements.UIPanel(
            relative_rect=pygame.Rect(0, 0, UI_PANEL_WIDTH, self.screen_height),
            manager=self.ui_manager
        )
        element_width = UI_PANEL_WIDTH - (UI_PADDING * 2)
        current_y = UI_PADDING

        pygame_gui.elements.UILabel(
            relative_rect=pygame.Rect(UI_PADDING, current_y, element_width, UI_ELEMENT_HEIGHT),
            text="Grid Size",
            manager=self.ui_manager,
            container=panel
        )
        current_y += UI_ELEMENT_HEIGHT
        self.grid_size_input = pygame_gui.elements.UITextEntryLine(
            relative_rect=pygame.Rect(UI_PADDING, current_y, element_width, UI_ELEMENT_HEIGHT),
            manager=self.ui_manager,
            container=panel
        )
        current_y += UI_ELEMENT_HEIGHT + UI_PADDING

        pygame_gui.elements.UILabel(
            relative_rect=pygame.Rect(UI_PADDING, current_y, element_width, UI_ELEMENT_HEIGHT),
            text="Faults",
            manager=self.ui_manager,
            container=panel
        )
        current_y += UI_ELEMENT_HEIGHT
        self.fault_count_input = pygame_gui.elements.UITextEntryLine(
            relative_rect=pygame.Rect(UI_PADDING, current_y, element_width, UI_ELEMENT_HEIGHT),
            manager=self.ui_manager,
            container=panel
        )
        current_y += UI_ELEMENT_HEIGHT + UI_PADDING

        self.regenerate_button = pygame_gui.elements.UIButton(
            relative_rect=pygame.Rect(UI_PADDING, current_y, element_width, UI_BUTTON_HEIGHT),
            text="Regenerate",
            manager=self.ui_manager,
            container=panel
        )
        self._reset_inputs()

    def _reset_inputs(self):
        self.grid_size_input.set_text(str(self.terrain_configuration.grid_size))
        self.fault_count_input.set_text(str(self.terrain_configuration.fault_count))

    def _apply_inputs(self):
        """Validates the text inputs and schedules a regeneration."""
        try:
            self.terrain_configuration = Configuration(
                grid_size=self.grid_size_input.get_text(),
                fault_count=self.fault_count_input.get_text()
            )
        except InvalidConfiguration as e:
            self.logger.warning(f"Invalid terrain settings, keeping the current terrain: {e}")
            self._reset_inputs()
            return
        self.mesh_dirty = True

    def _regenerate(self):
        self.logger.info(
            f"Regenerating terrain (grid size {self.terrain_configuration.grid_size}, "
            f"{self.terrain_configuration.fault_count} faults)..."
        )
        mesh = self.terrain_generator.generate(self.terrain_configuration)
        self.terrain_renderer.set_mesh(mesh)
        self.mesh_dirty = False

    def _handle_events(self):
        """Processes user input and other events."""
        for event in pygame.event.get():
            self.ui_manager.process_events(event)

            if event.type == pygame.QUIT:
                self.is_running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.is_running = False
                elif event.key == pygame.K_r and not self._text_input_focused():
                    self._apply_inputs()
            elif event.type == pygame_gui.UI_BUTTON_PRESSED and event.ui_element == self.regenerate_button:
                self.logger.info("Event: 'Regenerate' button pressed.")
                self._apply_inputs()

    def _text_input_focused(self) -> bool:
        return self.grid_size_input.is_focused or self.fault_count_input.is_focused

    def run(self):
        """The main application loop."""
        self.logger.info("Entering main loop.")
        try:
            while self.is_running:
                time_delta = self.clock.tick(self.tick_rate) / 1000.0

                self._handle_events()
                if self.mesh_dirty:
                    self._regenerate()

                self.camera.update(time_delta)
                self.ui_manager.update(time_delta)

                self.terrain_renderer.draw(self.screen, self.camera)
                self.ui_manager.draw_ui(self.screen)
                pygame.display.flip()
        except Exception:
            self.logger.critical("An unhandled exception occurred in the main loop!", exc_info=True)
        finally:
            self.logger.info("Exiting application.")
            pygame.quit()


if __name__ == '__main__':
    app = Application()
    app.run()
