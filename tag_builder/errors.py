"""
Exception types raised by the tag builder.
"""

from typing import Optional


class TagBuilderError(Exception):
    """Base class for all tag builder errors."""


class InvalidSelectorError(TagBuilderError, ValueError):
    """
    Raised when a selector cannot seed an element.

    This happens when the selector has no tag name at its start, or when
    strict validation rejects it (combinators, pseudo-classes, groups).
    """

    def __init__(self, selector: Optional[str], message: Optional[str] = None):
        self.selector = selector
        if message is None:
            message = f"The selector provided does not supply a valid tag: {selector!r}"
        super().__init__(message)


class StructuralRenderError(TagBuilderError, ValueError):
    """Raised when a self-closing element carries nested content at render time."""

    def __init__(self, tag_name: str):
        self.tag_name = tag_name
        super().__init__(f'Nested content was provided for "{tag_name}", a self-closing tag')
