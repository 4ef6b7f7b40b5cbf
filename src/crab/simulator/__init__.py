"""Desktop simulator (pygame window) for the crab game."""

from crab.simulator.input import KeyboardInput
from crab.simulator.window import SimulatorWindow

__all__ = ["KeyboardInput", "SimulatorWindow"]
