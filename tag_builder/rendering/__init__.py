"""
Rendering of element trees to markup or to native BeautifulSoup trees.
"""

from .renderer import MarkupRenderer, NativeTreeRenderer, Renderer, get_renderer

__all__ = ['Renderer', 'MarkupRenderer', 'NativeTreeRenderer', 'get_renderer']
