"""Pick the asset directory and content scale for a given window height."""

from __future__ import annotations

from dataclasses import dataclass

DESIGN_RESOLUTION = (1920, 1200)
SMALL_RESOLUTION = (640, 400)
MEDIUM_RESOLUTION = (1280, 800)
LARGE_RESOLUTION = (1920, 1200)

WINDOW_TITLE = "BUBBLEGUM BATTLE"
FRAME_RATE = 60


@dataclass(frozen=True)
class ResolutionChoice:
    """Where to look for assets and how much to scale them."""

    search_path: str
    scale_factor: float


def choose_resolution(frame_height: float) -> ResolutionChoice:
    """Return the asset set that suits a window of the given height."""
    design_height = DESIGN_RESOLUTION[1]
    if frame_height > MEDIUM_RESOLUTION[1]:
        return ResolutionChoice("res/HDR", LARGE_RESOLUTION[1] / design_height)
    if frame_height > SMALL_RESOLUTION[1]:
        return ResolutionChoice("res/HD", MEDIUM_RESOLUTION[1] / design_height)
    return ResolutionChoice("res/SD", SMALL_RESOLUTION[1] / design_height)