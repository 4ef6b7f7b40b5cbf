"""
Desktop window for the crab game using pygame.

Runs the fixed-rate loop: poll keys, tick the game, render, present.
"""

import pygame
import asyncio
import logging
from typing import Optional

from crab.config.settings import DisplaySettings
from crab.core.events import Event
from crab.game.engine import CrabGame
from crab.graphics.renderer import Renderer, TextRequest
from crab.simulator.input import KeyboardInput

logger = logging.getLogger(__name__)

TEXT_COLOR = (0, 0, 0)
NORMAL_FONT_SIZE = 24
BIG_FONT_SIZE = 36


class SimulatorWindow:
    """
    Main game window.

    Keyboard Mapping:
        ARROWS: Move the crab
        RETURN: Restart the round
        ESC: Exit
    """

    def __init__(
        self,
        game: CrabGame,
        config: Optional[DisplaySettings] = None,
    ) -> None:
        self.game = game
        self.config = config or DisplaySettings()
        self.width = game.settings.screen_width
        self.height = game.settings.screen_height

        self.renderer = Renderer(self.width, self.height)
        self.input = KeyboardInput()

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0

        # Fonts
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None

        self.game.event_bus.subscribe_all(self._log_event)

        logger.info("SimulatorWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode((self.width, self.height), flags)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(None, NORMAL_FONT_SIZE)
        self._big_font = pygame.font.SysFont(None, BIG_FONT_SIZE)

        logger.info(f"Pygame initialized: {self.width}x{self.height} @ {self.config.fps} fps")

    def _handle_events(self) -> None:
        """Process window events. Key state itself is polled per tick."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

    def _tick(self) -> None:
        controls = self.input.poll(pygame.key.get_pressed())
        if not self.game.update(controls):
            self._running = False

    def _render(self) -> None:
        """Render the game frame and HUD."""
        if not self._screen:
            return

        buffer = self.renderer.render(self.game.draw_requests())
        surface = pygame.surfarray.make_surface(buffer.swapaxes(0, 1))
        self._screen.blit(surface, (0, 0))

        for text in self.game.hud_texts():
            self._render_text(text)

        pygame.display.flip()

    def _render_text(self, text: TextRequest) -> None:
        font = self._big_font if text.big else self._font
        if not font or not self._screen:
            return
        self._screen.blit(font.render(text.text, True, TEXT_COLOR), (text.x, text.y))

    def _log_event(self, event: Event) -> None:
        logger.debug(f"Game event {event.type.name}: {event.data}")

    async def run(self) -> None:
        """Main game loop."""
        self._init_pygame()
        self._running = True

        logger.info("Simulator started")

        try:
            while self._running:
                self._handle_events()
                if self._running:
                    self._tick()
                self._render()

                if self._clock:
                    self._clock.tick(self.config.fps)

                self._frame_count += 1

                # Yield to other tasks
                await asyncio.sleep(0)
        finally:
            self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info(f"Simulator stopped after {self._frame_count} frames")
