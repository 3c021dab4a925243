"""Locally controlled actors: bounded movement and follow camera."""

from spawnfield.actor.camera import PORTRAIT_ASPECT, Camera, ViewportRect, letterbox_rect
from spawnfield.actor.controller import ActorController

__all__ = [
    "ActorController",
    "Camera",
    "ViewportRect",
    "letterbox_rect",
    "PORTRAIT_ASPECT",
]
