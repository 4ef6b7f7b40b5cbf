"""Tests for procedural sprites and sprite sheet loading."""

import numpy as np
import pytest
from PIL import Image

from crab.graphics.assets import (
    AssetLoadError,
    default_assets,
    load_assets,
    read_animation_frames,
)


def save_png(path, width, height, color=(255, 0, 0, 255)):
    Image.new("RGBA", (width, height), color).save(path)


@pytest.fixture
def asset_dir(tmp_path):
    save_png(tmp_path / "beach.png", 500, 400, (238, 214, 160, 255))
    save_png(tmp_path / "fish.png", 48, 48)
    save_png(tmp_path / "crab.png", 192, 192)
    save_png(tmp_path / "bird.png", 192, 192)
    return tmp_path


def test_default_assets_shapes(settings):
    assets = default_assets(settings)

    assert assets.beach.shape == (400, 500, 4)
    assert assets.fish.shape == (48, 48, 4)
    assert len(assets.crab_frames) == settings.animation_frame_columns
    assert len(assets.bird_frames) == settings.animation_frame_columns
    assert all(f.shape == (48, 48, 4) for f in assets.crab_frames + assets.bird_frames)


def test_default_sprites_have_transparent_corners(settings):
    assets = default_assets(settings)
    for frame in (assets.fish, assets.crab_frames[0], assets.bird_frames[0]):
        assert frame[0, 0, 3] == 0
        assert frame[:, :, 3].any()


def test_default_animation_frames_differ(settings):
    frames = default_assets(settings).bird_frames
    assert not np.array_equal(frames[0], frames[2])


def test_load_assets_from_directory(asset_dir, settings):
    assets = load_assets(asset_dir, settings)

    assert assets.beach.shape == (400, 500, 4)
    assert len(assets.crab_frames) == 4
    assert assets.crab_frames[3].shape == (48, 48, 4)
    assert tuple(assets.fish[0, 0]) == (255, 0, 0, 255)


def test_slices_requested_row(settings):
    sheet = np.zeros((96, 192, 4), dtype=np.uint8)
    sheet[48:, 96:144] = (1, 2, 3, 255)

    frames = read_animation_frames(sheet, 1, settings)

    assert tuple(frames[2][0, 0]) == (1, 2, 3, 255)
    assert not frames[1].any()


def test_missing_file_raises(asset_dir, settings):
    (asset_dir / "bird.png").unlink()
    with pytest.raises(AssetLoadError, match="bird.png"):
        load_assets(asset_dir, settings)


def test_corrupt_file_raises(asset_dir, settings):
    (asset_dir / "fish.png").write_bytes(b"not an image")
    with pytest.raises(AssetLoadError):
        load_assets(asset_dir, settings)


def test_sheet_too_small_raises(asset_dir, settings):
    save_png(asset_dir / "crab.png", 96, 48)
    with pytest.raises(AssetLoadError, match="too small"):
        load_assets(asset_dir, settings)
