"""
Main entry point for the crab game.

Loads settings, builds the sprite assets once and runs the game
in a pygame window.
"""

import asyncio
import logging
import random
import sys

from crab.config.settings import Settings, get_settings
from crab.core.events import EventBus


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_simulator(settings: Settings) -> None:
    """Build the game and run it in the simulator window."""
    from crab.game.engine import CrabGame
    from crab.graphics.assets import default_assets, load_assets
    from crab.simulator.window import SimulatorWindow

    logger = logging.getLogger(__name__)

    if settings.assets_path is not None:
        assets = load_assets(settings.assets_path, settings.game)
    else:
        logger.info("No assets path configured, drawing procedural sprites")
        assets = default_assets(settings.game)

    game = CrabGame(
        settings=settings.game,
        assets=assets,
        rng=random.Random(settings.seed),
        event_bus=EventBus(),
    )
    window = SimulatorWindow(game=game, config=settings.display)

    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv
    from pydantic import ValidationError

    from crab.graphics.assets import AssetLoadError

    # Load environment variables
    load_dotenv()

    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logging.getLogger(__name__).error(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("Crab game starting...")

    try:
        asyncio.run(run_simulator(settings))
    except AssetLoadError as e:
        logger.error(f"Error while loading assets: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Crab game stopped")


if __name__ == "__main__":
    main()
