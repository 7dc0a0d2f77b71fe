"""
Constants shared by the element model and the renderers.
"""

# Elements that are emitted as "<name ... />" and may never hold children
SELF_CLOSING_TAGS = frozenset({
    'area', 'base', 'basefont', 'br', 'hr', 'input', 'img', 'link', 'meta'
})
