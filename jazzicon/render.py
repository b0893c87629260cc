"""Identicon rendering utilities.

This module rasterises an `Identicon` into a PIL Image. Shapes are drawn on
a canonical high-resolution canvas and then scaled down, so a 32px sidebar
icon and a 96px profile icon show the same picture.
"""
import io
import logging
from typing import Optional, Union

from PIL import Image, ImageDraw

from .composer import Identicon, JazzIcon
from .settings import IdenticonSettings, composer_from_settings, get_settings

logger = logging.getLogger(__name__)


def render_identicon(identicon: Identicon, size: Optional[int] = None, *,
                     scale: int = 4, circular: bool = False) -> Image.Image:
    """Draw `identicon` as a square image.

    Args:
        identicon: Output of `JazzIcon.generate`.
        size:      Final edge length in pixels (defaults to the diameter).
        scale:     Supersampling factor for the base canvas.
        circular:  Apply a round alpha mask, giving an RGBA image.

    Returns:
        A PIL RGB (or RGBA when circular) Image of the identicon.
    """
    diameter = identicon.diameter
    if diameter <= 0:
        raise ValueError(f"cannot render an identicon with diameter {diameter}")
    if scale < 1:
        raise ValueError(f"scale must be at least 1, got {scale}")
    if size is None:
        size = max(1, int(round(diameter)))

    base_size = max(1, int(round(diameter * scale)))
    ratio = base_size / diameter

    # background square doubles as the clip mask: anything outside the canvas is dropped
    base_img = Image.new("RGB", (base_size, base_size), identicon.background.rgb8)
    draw = ImageDraw.Draw(base_img)
    for shape in identicon.shapes:
        corners = [(x * ratio, y * ratio) for x, y in shape.corners(diameter)]
        draw.polygon(corners, fill=shape.color.rgb8)

    if circular:
        mask = Image.new("L", (base_size, base_size), 0)
        ImageDraw.Draw(mask).ellipse((0, 0, base_size, base_size), fill=255)
        base_img.putalpha(mask)

    if base_size != size:
        base_img = base_img.resize((size, size), Image.Resampling.LANCZOS)

    logger.debug("Rendered identicon diameter=%s size=%d circular=%s", diameter, size, circular)
    return base_img


def identicon_png(identicon: Identicon, size: Optional[int] = None, **kwargs) -> bytes:
    buf = io.BytesIO()
    render_identicon(identicon, size, **kwargs).save(buf, format="PNG")
    return buf.getvalue()


def render_seed(seed: Union[int, str], size: int = 96, **kwargs) -> Image.Image:
    """Compose and render in one step, with the default palette and shape count."""
    return render_identicon(JazzIcon(seed).generate(size), size, **kwargs)


def render_from_settings(seed: Union[int, str], size: int = 96,
                         settings: Optional[IdenticonSettings] = None) -> Image.Image:
    """Render using palette, shape count, digest and raster options from settings."""
    settings = settings or get_settings()
    icon = composer_from_settings(seed, settings).generate(size)
    return render_identicon(icon, size, scale=settings.render_scale, circular=settings.circular)
