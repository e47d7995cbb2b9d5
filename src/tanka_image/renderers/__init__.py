"""Renderers that turn a LayoutResult into an image."""

from tanka_image.renderers.canvas import ImageCanvas
from tanka_image.renderers.image import ImageRenderer

__all__ = ["ImageCanvas", "ImageRenderer"]
