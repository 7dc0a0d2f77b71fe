import pytest

from tag_builder.errors import InvalidSelectorError
from tag_builder.selector import parse_selector, tokenize_attributes, validate_selector


def test_parse_full_selector():
    parsed = parse_selector('div.class1.class2#main[data-x=val]')

    assert parsed.tag == 'div'
    assert parsed.classes == ['class1', 'class2']
    assert parsed.id == 'main'
    assert parsed.attributes['data-x'] == 'val'
    assert parsed.attributes['class'] == 'class1 class2'
    assert parsed.attributes['id'] == 'main'


def test_parse_tag_only_has_no_class_or_id_keys():
    parsed = parse_selector('section')

    assert parsed.tag == 'section'
    assert parsed.classes == []
    assert parsed.id is None
    assert parsed.attributes == {}


def test_parts_may_appear_in_any_order():
    parsed = parse_selector('a[href="/home"]#nav.link.active')

    assert parsed.tag == 'a'
    assert parsed.classes == ['link', 'active']
    assert parsed.id == 'nav'
    assert parsed.attributes == {'class': 'link active', 'id': 'nav', 'href': '/home'}


def test_tag_is_lowercased_but_classes_are_not():
    parsed = parse_selector('DIV.Box')

    assert parsed.tag == 'div'
    assert parsed.classes == ['Box']


def test_leading_whitespace_is_ignored():
    assert parse_selector('  span.x').tag == 'span'


def test_duplicate_classes_are_kept():
    parsed = parse_selector('div.a.a')

    assert parsed.classes == ['a', 'a']
    assert parsed.attributes['class'] == 'a a'


def test_first_id_wins():
    assert parse_selector('div#one#two').id == 'one'


def test_unicode_and_escaped_identifiers():
    parsed = parse_selector(r'my-élément.héllo.md\:flex')

    assert parsed.tag == 'my-élément'
    assert parsed.classes == ['héllo', r'md\:flex']


@pytest.mark.parametrize(
    "selector,expected",
    [
        ('div[data-foo="bar"]', 'bar'),
        ("div[data-foo='bar']", 'bar'),
        ('div[data-foo=bar]', 'bar'),
        ('div[ data-foo = "bar baz" ]', 'bar baz'),
        ('div[data-foo^="bar"]', 'bar'),
        ('div[data-foo$=bar]', 'bar'),
        ('div[data-foo*="bar"]', 'bar'),
        ('div[data-foo|=bar]', 'bar'),
        ('div[data-foo!=bar]', 'bar'),
        ('div[data-foo~="bar"]', 'bar'),
    ],
)
def test_attribute_operators_assign_the_literal_value(selector, expected):
    assert parse_selector(selector).attributes == {'data-foo': expected}


def test_bare_attribute_has_no_value():
    assert parse_selector('input[disabled]').attributes == {'disabled': None}


def test_attribute_with_empty_value():
    assert parse_selector('input[value=]').attributes == {'value': ''}


def test_periods_and_hashes_inside_attribute_values_are_not_classes_or_ids():
    parsed = parse_selector('a[href="http://example.com/page.html#top"].external')

    assert parsed.classes == ['external']
    assert parsed.id is None
    assert parsed.attributes['href'] == 'http://example.com/page.html#top'


def test_class_and_id_tokens_take_precedence_over_brackets():
    parsed = parse_selector('div.a#b[class=c][id=d]')

    assert parsed.attributes['class'] == 'a'
    assert parsed.attributes['id'] == 'b'


def test_bracket_class_is_used_when_there_are_no_class_tokens():
    parsed = parse_selector('div[class=c]')

    assert parsed.attributes == {'class': 'c'}


def test_tokenize_attributes_keeps_selector_order():
    attributes = tokenize_attributes('div[b=2][a][c="3"]')

    assert list(attributes.items()) == [('b', '2'), ('a', None), ('c', '3')]


@pytest.mark.parametrize("selector", ['', '   ', '.foo', '#main', '[data-x]', '>div', None, 42])
def test_selector_without_leading_tag_is_rejected(selector):
    with pytest.raises(InvalidSelectorError) as exc_info:
        parse_selector(selector)

    assert exc_info.value.selector == selector
    assert 'does not supply a valid tag' in str(exc_info.value)


def test_invalid_selector_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_selector('.foo')


def test_permissive_mode_ignores_unsupported_syntax():
    parsed = parse_selector('div > span')

    assert parsed.tag == 'div'
    assert parsed.attributes == {}


@pytest.mark.parametrize(
    "selector",
    ['div.a#b[c="d"]', 'input[type=checkbox][checked]', 'a[href^="http"]', r'div.md\:flex'],
)
def test_strict_mode_accepts_simple_selectors(selector):
    validate_selector(selector)
    assert parse_selector(selector, strict=True).tag


@pytest.mark.parametrize(
    "selector",
    ['div > span', 'div span', 'div + p', 'div, span', 'a:hover', 'p::before',
     'li:nth-child(2)', 'div:not(.x)', 'div[', 'div..x'],
)
def test_strict_mode_rejects_unsupported_selectors(selector):
    with pytest.raises(InvalidSelectorError):
        parse_selector(selector, strict=True)
