from __future__ import annotations


class RenderError(Exception):
    """Base class for failures raised while rendering a scene."""


class OutOfCanvasError(RenderError):
    """A primitive footprint or pixel access falls outside the canvas."""


class NoConfigProvidedError(RenderError):
    """Render invoked without a canvas configuration."""


class NoComponentProvidedError(RenderError):
    """Render invoked with an empty scene."""


class NoFontProvidedError(RenderError):
    """A text primitive needs a font but none was configured."""
