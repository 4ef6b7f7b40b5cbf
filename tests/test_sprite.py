"""Tests for sprite geometry, collision and frame selection."""

import pytest

from crab.game.sprite import DEFAULT_ROTATION, DEFAULT_SCALE, Rect, Sprite


class TestSize:
    def test_defaults_to_native_size(self):
        sprite = Sprite(x=0, y=0)
        assert sprite.scale == DEFAULT_SCALE
        assert sprite.rotation == DEFAULT_ROTATION
        assert (sprite.width, sprite.height) == (48, 48)

    def test_scale_applies_to_both_axes(self):
        sprite = Sprite(x=0, y=0, scale=1.5)
        assert (sprite.width, sprite.height) == (72, 72)

    def test_fractional_size_is_truncated(self):
        sprite = Sprite(x=0, y=0, scale=1.01)
        assert sprite.width == 48

    def test_bounding_box(self):
        sprite = Sprite(x=10, y=20, scale=2.0)
        assert sprite.bounding_box() == Rect(10, 20, 106, 116)

    def test_rotation_does_not_change_bounding_box(self):
        sprite = Sprite(x=10, y=20, base_width=60, base_height=30)
        before = sprite.bounding_box()
        sprite.rotation = 180.0
        assert sprite.bounding_box() == before
        sprite.rotation = 90.0
        assert sprite.bounding_box() == before


class TestOverlap:
    def test_overlapping_sprites(self):
        a = Sprite(x=0, y=0)
        b = Sprite(x=47, y=47)
        assert a.overlaps(b)
        assert b.overlaps(a)

    @pytest.mark.parametrize("bx, by", [(48, 0), (0, 48), (48, 48), (-48, 0), (0, -48)])
    def test_touching_edges_do_not_overlap(self, bx, by):
        a = Sprite(x=0, y=0)
        b = Sprite(x=bx, y=by)
        assert not a.overlaps(b)
        assert not b.overlaps(a)

    def test_contained_sprite_overlaps(self):
        big = Sprite(x=0, y=0, scale=3.0)
        small = Sprite(x=40, y=40)
        assert big.overlaps(small)
        assert small.overlaps(big)

    def test_empty_rect_never_overlaps(self):
        empty = Rect(10, 10, 10, 30)
        full = Rect(0, 0, 50, 50)
        assert empty.is_empty()
        assert not empty.overlaps(full)
        assert not full.overlaps(empty)

    def test_zero_scale_sprite_never_collides(self):
        ghost = Sprite(x=10, y=10, scale=0.0)
        assert not ghost.overlaps(Sprite(x=0, y=0))


class TestSelectFrame:
    def test_selects_animation_frame(self):
        frames = ["f0", "f1", "f2", "f3"]
        sprite = Sprite(x=0, y=0, image=frames[0], animation=frames)
        sprite.select_frame(2)
        assert sprite.image == "f2"

    def test_index_past_animation_is_ignored(self):
        frames = ["f0", "f1"]
        sprite = Sprite(x=0, y=0, image=frames[1], animation=frames)
        sprite.select_frame(2)
        assert sprite.image == "f1"

    def test_static_sprite_ignores_frames(self):
        sprite = Sprite(x=0, y=0, image="fish")
        sprite.select_frame(0)
        sprite.select_frame(3)
        assert sprite.image == "fish"
