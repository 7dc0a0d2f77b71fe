"""
Strict selector validation backed by cssselect.
"""

import logging

import cssselect
from cssselect.parser import Attrib, Class, Element, Hash

from ..errors import InvalidSelectorError

logger = logging.getLogger(__name__)

# Parts allowed to qualify the element name of a simple selector
SIMPLE_SELECTOR_PARTS = (Class, Hash, Attrib)


def validate_selector(selector: str) -> None:
    """
    Check that a selector is a single simple selector.

    Args:
        selector: The selector string

    Raises:
        InvalidSelectorError: If cssselect cannot parse the selector, or it
            holds a group, a combinator, a pseudo-class or a pseudo-element
    """
    try:
        parsed = cssselect.parse(selector)
    except cssselect.SelectorError as e:
        logger.debug(f"cssselect rejected selector {selector!r}: {e}")
        raise InvalidSelectorError(selector, f"Invalid selector {selector!r}: {e}") from e

    if len(parsed) != 1:
        raise InvalidSelectorError(
            selector, f"Expected a single selector, got {len(parsed)}: {selector!r}")

    if parsed[0].pseudo_element is not None:
        raise InvalidSelectorError(
            selector, f"Pseudo-elements are not supported: {selector!r}")

    node = parsed[0].parsed_tree
    while isinstance(node, SIMPLE_SELECTOR_PARTS):
        node = node.selector

    if not isinstance(node, Element):
        raise InvalidSelectorError(
            selector,
            f"Only tag, class, id and attribute parts are supported: {selector!r}")
