"""Tests for keyboard to control mapping."""

from collections import defaultdict

import pygame

from crab.simulator.input import KeyboardInput


def keys(*down):
    state = defaultdict(bool)
    for key in down:
        state[key] = True
    return state


def test_nothing_pressed():
    controls = KeyboardInput().poll(keys())
    assert not any([
        controls.terminate, controls.restart,
        controls.left, controls.right, controls.up, controls.down,
    ])


def test_arrows_apply_while_held():
    keyboard = KeyboardInput()
    for _ in range(3):
        controls = keyboard.poll(keys(pygame.K_LEFT, pygame.K_DOWN))
        assert controls.left and controls.down
        assert not controls.right and not controls.up


def test_restart_fires_once_per_press():
    keyboard = KeyboardInput()
    assert keyboard.poll(keys(pygame.K_RETURN)).restart
    assert not keyboard.poll(keys(pygame.K_RETURN)).restart
    assert not keyboard.poll(keys()).restart
    assert keyboard.poll(keys(pygame.K_RETURN)).restart


def test_escape_terminates_on_press():
    keyboard = KeyboardInput()
    assert keyboard.poll(keys(pygame.K_ESCAPE)).terminate
    assert not keyboard.poll(keys(pygame.K_ESCAPE)).terminate
