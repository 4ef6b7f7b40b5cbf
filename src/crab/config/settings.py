"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Gameplay constants live in GameSettings so tests can build small,
deterministic worlds without touching the environment.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseSettings):
    """Gameplay constants for the beach world."""

    model_config = SettingsConfigDict(env_prefix="CRAB_GAME_", extra="ignore")

    # Screen
    screen_width: int = Field(default=1000, gt=0)
    screen_height: int = Field(default=800, gt=0)

    # Beach background is drawn scaled; the walkable band is given in beach pixels
    beach_scale_factor: int = Field(default=2, gt=0)
    walkable_min_beach_y: int = Field(default=180, ge=0)
    walkable_max_beach_y: int = Field(default=320, gt=0)

    # Sprite sheet geometry
    sprite_width: int = Field(default=48, gt=0)
    sprite_height: int = Field(default=48, gt=0)
    animation_frame_columns: int = Field(default=4, gt=0)
    crab_animation_row: int = Field(default=0, ge=0)
    bird_animation_row: int = Field(default=0, ge=0)
    bird_scale_factor: float = Field(default=1.5, gt=0.0)

    # Timing
    ticks_per_second: int = Field(default=60, gt=0)
    ticks_per_frame: int = Field(default=15, gt=0)
    default_step_tick: int = Field(default=2, gt=0)

    # Difficulty
    max_bird_count: int = Field(default=3, ge=0)
    max_bird_step_tick: int = Field(default=5, gt=0)
    score_level_divisor: int = Field(default=3, gt=0)

    # HUD text positions
    score_x: int = 10
    score_y: int = 740
    level_x: int = 780
    level_y: int = 740
    game_over_x: int = 200

    @model_validator(mode="after")
    def _check_geometry(self) -> "GameSettings":
        if self.walkable_min_y >= self.walkable_max_y:
            raise ValueError("walkable band is empty")
        if self.walkable_max_y > self.screen_height:
            raise ValueError("walkable band extends below the screen")
        if self.walkable_max_y - self.walkable_min_y <= self.sprite_height:
            raise ValueError("walkable band is too narrow for a sprite")
        if self.screen_width <= self.sprite_width:
            raise ValueError("screen is too narrow for a sprite")
        if self.max_bird_step_tick < self.default_step_tick:
            raise ValueError("max_bird_step_tick must not be below default_step_tick")
        return self

    @property
    def walkable_min_y(self) -> int:
        """Top of the walkable band in screen pixels."""
        return self.walkable_min_beach_y * self.beach_scale_factor

    @property
    def walkable_max_y(self) -> int:
        """Bottom of the walkable band in screen pixels."""
        return self.walkable_max_beach_y * self.beach_scale_factor

    @property
    def game_over_y(self) -> int:
        return self.walkable_min_y

    @property
    def max_level(self) -> int:
        """Maximum difficulty. Each level adds one bird or one bird speed step."""
        return (
            self.max_bird_count
            + (self.max_bird_step_tick - self.default_step_tick) * self.max_bird_count
        )


class DisplaySettings(BaseSettings):
    """Window-related settings."""

    model_config = SettingsConfigDict(env_prefix="CRAB_DISPLAY_", extra="ignore")

    title: str = "Crab Game"
    fps: int = Field(default=60, gt=0)
    fullscreen: bool = False


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CRAB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Directory with crab.png, bird.png, fish.png and beach.png.
    # Procedural sprites are drawn when unset.
    assets_path: Path | None = None

    # Seed for the game's random source (fish spawns, bird speed-ups)
    seed: int | None = None

    # Nested settings
    game: GameSettings = Field(default_factory=GameSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
