"""
Protocols implemented by Canvas Pong collaborators
"""

from canvas_pong.core.interfaces.renderer import Drawable
from canvas_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["Drawable", "RendererProtocol"]
