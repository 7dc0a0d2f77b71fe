"""
Selector parser.
This module turns a single simple CSS selector (e.g. ``div.box#main[data-x="1"]``)
into the tag name, classes, id and attributes used to seed an element.
"""

import logging
import re
from typing import Dict, List, Optional

from ..errors import InvalidSelectorError
from .validator import validate_selector

logger = logging.getLogger(__name__)

# An escaped character, a word character or hyphen, or anything above U+00A0
CHARACTER_ENCODING = r'(?:\\.|[\w-]|[^\x00-\xa0])+'
TAG_ENCODING = r'(?:\\.|[\w*-]|[^\x00-\xa0])+'
IDENTIFIER = r'(?:\\.|[\w#-]|[^\x00-\xa0])+'
WHITESPACE = r'[\x20\t\r\n\f]'

_tag_regex = re.compile(WHITESPACE + '*(' + TAG_ENCODING + ')')
_class_regex = re.compile(r'\.(' + CHARACTER_ENCODING + ')')
_id_regex = re.compile(r'#(' + CHARACTER_ENCODING + ')')
_attr_regex = re.compile(
    r'\[' + WHITESPACE + '*(' + CHARACTER_ENCODING + ')' + WHITESPACE +
    r'*(?:([*^$|!~]?=)' + WHITESPACE +
    r'*(?:([\'"])((?:\\.|[^\\])*?)\3|(' + IDENTIFIER + ')|)|)' +
    WHITESPACE + r'*\]'
)


class ParsedSelector:
    """
    The pieces of a selector needed to build an element.

    Attributes:
        tag: Lowercased tag name
        classes: Class tokens in selector order (duplicates kept)
        id: The id token, or None
        attributes: Attribute map, including ``class`` and ``id`` when present
    """

    def __init__(self, tag: str, classes: List[str], id: Optional[str],
                 attributes: Dict[str, Optional[str]]):
        self.tag = tag
        self.classes = classes
        self.id = id
        self.attributes = attributes

    def __repr__(self) -> str:
        return (f"ParsedSelector(tag={self.tag!r}, classes={self.classes!r}, "
                f"id={self.id!r}, attributes={self.attributes!r})")


def tokenize_attributes(selector: str) -> Dict[str, Optional[str]]:
    """
    Collect the bracket tokens of a selector into an attribute map.

    Every operator (``=``, ``^=``, ``$=``, ``*=``, ``|=``, ``!=``, ``~=``)
    assigns the literal value that follows it. A bare ``[attr]`` maps to None.

    Args:
        selector: The selector string

    Returns:
        Attribute map in selector order
    """
    attributes: Dict[str, Optional[str]] = {}

    for match in _attr_regex.finditer(selector):
        name, operator, quote, quoted_value, bare_value = match.groups()

        if operator is None:
            value = None
        elif quote:
            value = quoted_value
        else:
            value = bare_value or ''

        attributes[name] = value

    return attributes


def parse_selector(selector: str, strict: bool = False) -> ParsedSelector:
    """
    Parse a selector into its tag, classes, id and attributes.

    Args:
        selector: A single simple selector, starting with the tag name
        strict: Also validate the selector with cssselect, rejecting
            combinators, pseudo-classes and selector groups

    Returns:
        The parsed selector

    Raises:
        InvalidSelectorError: If the selector has no leading tag name, or
            strict validation fails
    """
    if not isinstance(selector, str) or not selector.strip():
        logger.debug(f"Rejecting empty selector {selector!r}")
        raise InvalidSelectorError(selector)

    tag_match = _tag_regex.match(selector)
    if not tag_match:
        logger.debug(f"No tag name at the start of selector {selector!r}")
        raise InvalidSelectorError(selector)

    if strict:
        validate_selector(selector)

    bracket_attributes = tokenize_attributes(selector)

    # Periods and hashes inside attribute values are not classes or ids
    remainder = _attr_regex.sub('', selector[tag_match.end():])
    classes = _class_regex.findall(remainder)
    id_match = _id_regex.search(remainder)
    element_id = id_match.group(1) if id_match else None

    attributes: Dict[str, Optional[str]] = {}
    if classes:
        attributes['class'] = ' '.join(classes)
    if element_id:
        attributes['id'] = element_id
    for name, value in bracket_attributes.items():
        attributes.setdefault(name, value)

    parsed = ParsedSelector(tag_match.group(1).lower(), classes, element_id, attributes)
    logger.debug(f"Parsed selector {selector!r} into {parsed!r}")
    return parsed
