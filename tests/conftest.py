"""Shared pytest fixtures for all tests."""

import pytest

from skycycle.controller import CycleController
from skycycle.scene import build_scene
from skycycle.state import CycleConfig


@pytest.fixture
def cycle_config():
    """Cycle settings with the documented defaults."""
    return CycleConfig(cycle_duration_seconds=60, auto_play=True, current_time=0.5)


@pytest.fixture
def bindings():
    """Headless scene with the default light rig."""
    return build_scene()


@pytest.fixture
def controller(cycle_config, bindings):
    """Controller wired to the default palette and geometry (R=80, H=10)."""
    return CycleController(
        cycle_config,
        bindings,
        celestial_distance=80.0,
        celestial_height=10.0,
        visibility_threshold=0.1,
    )


@pytest.fixture
def manual_controller(controller):
    """Controller with autoplay switched off."""
    controller.config.update(auto_play=False)
    return controller
