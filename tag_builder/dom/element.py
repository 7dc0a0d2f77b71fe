"""
Element implementation.
This module implements the element node built from a selector, with a fluent
API for attaching children, text, attributes and classes.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from ..rendering.renderer import MarkupRenderer, Renderer
from ..selector.parser import parse_selector
from .constants import SELF_CLOSING_TAGS

logger = logging.getLogger(__name__)


def _is_unset(value: Any) -> bool:
    return value is None or value == ''


class Element:
    """
    Element node seeded from a CSS selector.

    The attribute map is the single source of truth for the ``id`` and
    ``class`` attributes; ``id`` and ``classes`` are views over it. Every
    mutator returns the element itself so calls can be chained. Empty or
    missing keys, values and class names are ignored.
    """

    def __init__(self,
                 selector: str,
                 renderer: Optional[Renderer] = None,
                 strict: bool = False):
        """
        Initialize a new Element.

        Args:
            selector: Selector naming the tag and its initial classes, id and attributes
            renderer: Renderer used by render() when none is passed to it
            strict: Validate the selector with cssselect

        Raises:
            InvalidSelectorError: If the selector does not supply a valid tag
        """
        tokens = parse_selector(selector, strict=strict)

        self._name = tokens.tag
        self.attributes: Dict[str, Optional[str]] = tokens.attributes
        self.text = ''
        self.children: List[Union['Element', str]] = []
        self.is_self_closing = self._name in SELF_CLOSING_TAGS
        self.renderer = renderer

    @property
    def name(self) -> str:
        """The lowercase tag name."""
        return self._name

    @property
    def id(self) -> Optional[str]:
        """The value of the id attribute, or None."""
        value = self.attributes.get('id')
        return None if _is_unset(value) else value

    @property
    def classes(self) -> List[str]:
        """Class tokens of the class attribute, in order."""
        return (self.attributes.get('class') or '').split()

    def add(self, *children: Union['Element', str]) -> 'Element':
        """
        Append children in argument order.

        Strings are kept as already rendered markup. Self-closing elements
        accept children here; the renderer rejects them.
        """
        self.children.extend(children)
        return self

    def add_if(self, condition: Any, child: Union['Element', str]) -> 'Element':
        return self.add(child) if condition else self

    def set_text(self, value: Any) -> 'Element':
        """Replace the text content with ``str(value)``."""
        self.text = str(value)
        return self

    def get_attr(self, key: str) -> Optional[str]:
        """
        Get the value of an attribute.

        Args:
            key: The attribute name

        Returns:
            The attribute value, or None if the attribute doesn't exist
        """
        return self.attributes.get(key)

    def set_attr(self, key: str, value: Any) -> 'Element':
        """
        Set an attribute, overwriting any existing value.

        Args:
            key: The attribute name
            value: The attribute value, converted with str()
        """
        if _is_unset(key) or _is_unset(value):
            logger.debug(f"Ignoring set_attr({key!r}, {value!r}) on <{self._name}>")
            return self

        self.attributes[key] = str(value)
        return self

    def add_attr(self, key: str, value: Any) -> 'Element':
        """
        Set an attribute only if it is not already set.

        A key whose value is None or empty counts as not set.

        Args:
            key: The attribute name
            value: The attribute value, converted with str()
        """
        if _is_unset(key) or _is_unset(value):
            logger.debug(f"Ignoring add_attr({key!r}, {value!r}) on <{self._name}>")
            return self

        if _is_unset(self.attributes.get(key)):
            self.attributes[key] = str(value)
        return self

    def merge_attrs(self, attributes: Optional[Mapping[str, Any]]) -> 'Element':
        """
        Add several attributes, keeping any that are already set.

        Args:
            attributes: Mapping of attribute names to values
        """
        for key, value in (attributes or {}).items():
            self.add_attr(key, value)
        return self

    def add_attr_if(self, condition: Any, key: str, value: Any) -> 'Element':
        return self.add_attr(key, value) if condition else self

    def remove_attr(self, key: str) -> 'Element':
        self.attributes.pop(key, None)
        return self

    def remove_attr_if(self, condition: Any, key: str) -> 'Element':
        return self.remove_attr(key) if condition else self

    def add_class(self, class_name: str) -> 'Element':
        """
        Append a class unless the element already has it.

        A name holding several whitespace-separated classes adds each of
        them that is missing.

        Args:
            class_name: The class to add
        """
        if _is_unset(class_name) or not class_name.split():
            logger.debug(f"Ignoring empty class name on <{self._name}>")
            return self

        classes = self.classes
        for token in class_name.split():
            if token not in classes:
                classes.append(token)

        self.attributes['class'] = ' '.join(classes)
        return self

    def remove_class(self, class_name: str) -> 'Element':
        """
        Remove a class wherever it appears in the class attribute.

        A name holding several whitespace-separated classes removes each of
        them. The class attribute is dropped once its last class is removed.

        Args:
            class_name: The class to remove
        """
        classes = self.classes
        removed = set(class_name.split()) if not _is_unset(class_name) else set()
        if not removed.intersection(classes):
            return self

        remaining = [cls for cls in classes if cls not in removed]
        if remaining:
            self.attributes['class'] = ' '.join(remaining)
        else:
            del self.attributes['class']
        return self

    def add_class_if(self, condition: Any, class_name: str) -> 'Element':
        return self.add_class(class_name) if condition else self

    def remove_class_if(self, condition: Any, class_name: str) -> 'Element':
        return self.remove_class(class_name) if condition else self

    def render(self, renderer: Optional[Renderer] = None) -> Any:
        """
        Render this element and its children.

        Args:
            renderer: Renderer to use; defaults to the one given at
                construction, then to a MarkupRenderer

        Returns:
            Whatever the renderer produces: an HTML string for
            MarkupRenderer, a BeautifulSoup tag for NativeTreeRenderer

        Raises:
            StructuralRenderError: If a self-closing element in the tree has children
        """
        renderer = renderer or self.renderer
        if renderer is None:
            renderer = MarkupRenderer()
        return renderer.render(self)

    def __repr__(self) -> str:
        return f"<Element {self._name} attributes={self.attributes!r} children={len(self.children)}>"
