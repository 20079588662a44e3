"""Smoke tests for the pygame gallery.

These tests verify that the gallery's main loop can initialise and execute
a handful of frames without crashing when the SDL dummy video driver is
used. They do not check rendering correctness; they only ensure the
integration points between pygame and the library do not raise in a
headless environment.
"""

from __future__ import annotations

import os

# Use the dummy drivers before importing pygame or the application
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")


def test_gallery_runs_headless() -> None:
    """Ensure the gallery can start and run a few frames headlessly."""
    # Import inside the test so that environment variables take effect
    from sandtime.app import run

    exit_code = run(max_frames=3)
    assert exit_code == 0
