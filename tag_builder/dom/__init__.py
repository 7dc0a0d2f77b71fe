"""
Element model for the tag builder.
"""

from .constants import SELF_CLOSING_TAGS
from .element import Element

__all__ = ['Element', 'SELF_CLOSING_TAGS']
