"""
Keyboard input for the simulator window.

Maps pygame key state to the game's logical controls:

    ESC: Terminate (on press)
    RETURN: Restart (on press)
    Arrow keys: Move the crab (while held)
"""

from typing import Mapping, Sequence, Union

import pygame

from crab.game.engine import Controls

KeyState = Union[Sequence[bool], Mapping[int, bool]]


class KeyboardInput:
    """
    Turns per-frame key state into Controls.

    Terminate and restart fire once per key press, movement keys
    apply for as long as they are held.
    """

    TERMINATE_KEYS = (pygame.K_ESCAPE,)
    RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)

    def __init__(self) -> None:
        self._was_down: dict[int, bool] = {}

    def poll(self, pressed: KeyState) -> Controls:
        """Build the controls for this tick from a pygame.key.get_pressed() result."""
        return Controls(
            terminate=self._just_pressed(pressed, self.TERMINATE_KEYS),
            restart=self._just_pressed(pressed, self.RESTART_KEYS),
            left=bool(pressed[pygame.K_LEFT]),
            right=bool(pressed[pygame.K_RIGHT]),
            up=bool(pressed[pygame.K_UP]),
            down=bool(pressed[pygame.K_DOWN]),
        )

    def _just_pressed(self, pressed: KeyState, keys: Sequence[int]) -> bool:
        fired = False
        for key in keys:
            down = bool(pressed[key])
            if down and not self._was_down.get(key, False):
                fired = True
            self._was_down[key] = down
        return fired
