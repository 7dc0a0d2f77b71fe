"""
Renderers for element trees.
This module serializes elements either to an HTML string or to a native
BeautifulSoup tree. The output mode is chosen by the caller, never detected.
"""

import logging
from typing import TYPE_CHECKING, Any, List, Optional

import html5lib
from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import PageElement, Tag

from ..errors import StructuralRenderError

if TYPE_CHECKING:
    from ..dom.element import Element

logger = logging.getLogger(__name__)

RENDER_MODES = ('markup', 'native')


class Renderer:
    """Base class for element renderers."""

    def render(self, element: 'Element') -> Any:
        """
        Render an element and its descendants.

        Args:
            element: The element to render

        Returns:
            The rendered form of the element
        """
        raise NotImplementedError("Subclasses must implement render")

    def _check_structure(self, element: 'Element') -> None:
        if element.is_self_closing and element.children:
            logger.error(f"<{element.name}> is self-closing but has "
                         f"{len(element.children)} children")
            raise StructuralRenderError(element.name)


class MarkupRenderer(Renderer):
    """
    Renders elements to an HTML string.

    Attributes with an empty or missing value are omitted. Text is emitted
    before the children. Nothing is escaped; string children are inserted
    verbatim as pre-rendered markup.
    """

    def render(self, element: 'Element') -> str:
        self._check_structure(element)

        markup = ['<', element.name]
        for name, value in element.attributes.items():
            if value:
                markup.append(f' {name}="{value}"')

        if element.is_self_closing:
            markup.append(' />')
            return ''.join(markup)

        markup.append('>')

        if element.text:
            markup.append(element.text)

        for child in element.children:
            markup.append(child if isinstance(child, str) else self.render(child))

        markup.append(f'</{element.name}>')
        return ''.join(markup)


class NativeTreeRenderer(Renderer):
    """
    Renders elements to BeautifulSoup tags.

    An element without children gets its text as the tag string. Once it has
    children its text is ignored. String children are parsed as HTML
    fragments with ``fragment_parser``.
    """

    def __init__(self, document: Optional[BeautifulSoup] = None, fragment_parser: str = 'html5lib'):
        """
        Initialize the renderer.

        Args:
            document: Document that owns the created tags; a new empty one
                is created when omitted
            fragment_parser: BeautifulSoup tree builder for string children
        """
        self.document = document if document is not None else BeautifulSoup('', 'html.parser')
        self.fragment_parser = fragment_parser

    def render(self, element: 'Element') -> Tag:
        self._check_structure(element)

        attrs = {name: value for name, value in element.attributes.items() if value}
        node = self.document.new_tag(element.name, attrs=attrs)

        if not element.children:
            if element.text and not element.is_self_closing:
                node.string = element.text
            return node

        for child in element.children:
            if isinstance(child, str):
                for fragment_node in self._parse_fragment(child, element.name):
                    node.append(fragment_node)
            else:
                node.append(self.render(child))

        return node

    def _parse_fragment(self, markup: str, container: str) -> List[PageElement]:
        """
        Parse pre-rendered markup into nodes that can be appended to a tag.

        With html5lib the fragment is parsed in the context of ``container``,
        so content such as ``<td>`` inside a ``<tr>`` is kept.

        Args:
            markup: HTML fragment
            container: Tag name of the element the fragment is appended to

        Returns:
            Top-level nodes of the fragment, in document order
        """
        if self.fragment_parser == 'html5lib':
            fragment = html5lib.parseFragment(markup, container=container,
                                              namespaceHTMLElements=False)
            normalized = html5lib.serialize(fragment, tree='etree',
                                            omit_optional_tags=False,
                                            quote_attr_values='always')
            return list(BeautifulSoup(normalized, 'html.parser').contents)

        try:
            soup = BeautifulSoup(markup, self.fragment_parser)
        except FeatureNotFound as e:
            logger.warning(f"{self.fragment_parser} parser unavailable: {e}, falling back to 'html.parser'")
            soup = BeautifulSoup(markup, 'html.parser')

        # lxml wraps fragments in a full document
        if soup.body is not None:
            nodes = list(soup.head.contents) if soup.head is not None else []
            nodes.extend(soup.body.contents)
            return nodes

        return list(soup.contents)


def get_renderer(config: Optional[Any] = None) -> Renderer:
    """
    Create the renderer selected by a configuration.

    Args:
        config: Config providing ``render.mode`` and ``render.fragment_parser``;
            a MarkupRenderer is returned when omitted

    Returns:
        The configured renderer

    Raises:
        ValueError: If ``render.mode`` is not a known mode
    """
    if config is None:
        return MarkupRenderer()

    mode = config.get('render.mode', 'markup')
    if mode == 'markup':
        return MarkupRenderer()
    if mode == 'native':
        return NativeTreeRenderer(fragment_parser=config.get('render.fragment_parser', 'html5lib'))

    raise ValueError(f"Unknown render mode {mode!r}, expected one of {RENDER_MODES}")
