"""
Selector parsing for the tag builder.
"""

from .parser import ParsedSelector, parse_selector, tokenize_attributes
from .validator import validate_selector

__all__ = ['ParsedSelector', 'parse_selector', 'tokenize_attributes', 'validate_selector']
