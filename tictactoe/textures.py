"""Loading images and drawing them onto pygame surfaces."""

from __future__ import annotations

import logging
import os
from typing import Any, Union

import pygame

log = logging.getLogger(__name__)

RectLike = Union[pygame.Rect, tuple, Any]


class TextureError(OSError):
    """Raised when an image cannot be loaded."""


def _as_rect(value: RectLike) -> pygame.Rect:
    """Accept a pygame.Rect, an (x, y, w, h) sequence or any object with x, y, w, h."""
    if isinstance(value, pygame.Rect):
        return pygame.Rect(value)
    if all(hasattr(value, name) for name in ("x", "y", "w", "h")):
        return pygame.Rect(value.x, value.y, value.w, value.h)
    return pygame.Rect(value)


def load_texture(path: str | os.PathLike[str]) -> pygame.Surface:
    """Load an image file into a surface.

    The surface is converted to the display format when a display is open.
    """
    try:
        surface = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as err:
        log.error("Failed to load texture: %s! %s", path, err)
        raise TextureError(f"failed to load texture {os.fspath(path)!r}: {err}") from err
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


def draw(target: pygame.Surface, texture: pygame.Surface, x: int, y: int) -> pygame.Rect:
    """Draw the whole texture at its own size with its top-left corner at (x, y)."""
    return target.blit(texture, (x, y))


def draw_region(
    target: pygame.Surface,
    texture: pygame.Surface,
    src: RectLike,
    dest: RectLike,
) -> pygame.Rect:
    """Draw the ``src`` part of the texture stretched to fill ``dest``."""
    src_rect = _as_rect(src).clip(texture.get_rect())
    dest_rect = _as_rect(dest)
    if src_rect.w == 0 or src_rect.h == 0 or dest_rect.w <= 0 or dest_rect.h <= 0:
        return pygame.Rect(dest_rect.x, dest_rect.y, 0, 0)
    piece = texture.subsurface(src_rect)
    if piece.get_size() != dest_rect.size:
        piece = pygame.transform.scale(piece, dest_rect.size)
    return target.blit(piece, dest_rect.topleft)