"""
Tag Builder - build HTML elements from CSS selectors.

    >>> tag('div.container').add(tag('span.child')).render()
    '<div class="container"><span class="child"></span></div>'
"""

import logging
from typing import Any, Optional

from tag_builder.dom import SELF_CLOSING_TAGS, Element
from tag_builder.errors import InvalidSelectorError, StructuralRenderError, TagBuilderError
from tag_builder.rendering import MarkupRenderer, NativeTreeRenderer, Renderer, get_renderer
from tag_builder.selector import ParsedSelector, parse_selector
from tag_builder.utils import Config, setup_logging

# Library logging stays silent until the application calls setup_logging()
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Package information
__version__ = "1.0.0"
__description__ = "Build HTML elements from CSS selectors"


def tag(selector: str,
        renderer: Optional[Renderer] = None,
        strict: Optional[bool] = None,
        config: Optional[Any] = None) -> Element:
    """
    Create an element from a selector.

    Args:
        selector: Selector such as ``div.container#main[data-foo="bar"]``
        renderer: Renderer used by the element's render(); taken from
            ``config`` when omitted
        strict: Validate the selector with cssselect; defaults to the
            ``selector.strict`` config key, else False
        config: Optional Config supplying defaults

    Returns:
        The new element

    Raises:
        InvalidSelectorError: If the selector does not supply a valid tag
    """
    if strict is None:
        strict = bool(config.get('selector.strict', False)) if config is not None else False
    if renderer is None and config is not None:
        renderer = get_renderer(config)
    return Element(selector, renderer=renderer, strict=strict)


__all__ = [
    'tag',
    'Element',
    'ParsedSelector',
    'parse_selector',
    'Renderer',
    'MarkupRenderer',
    'NativeTreeRenderer',
    'get_renderer',
    'Config',
    'setup_logging',
    'TagBuilderError',
    'InvalidSelectorError',
    'StructuralRenderError',
    'SELF_CLOSING_TAGS',
    '__version__',
]
