"""HTML escaping and attribute rendering helpers for part picker components.

Components build markup from plain strings; every dynamic value goes
through one of these helpers so catalog names can never break out of an
attribute or inject tags.
"""

from markupsafe import Markup, escape

__all__ = [
    'Markup',
    'safe',
    'escape_html',
    'render_attr',
    'render_class',
    'render_aria',
    'spread_attrs',
]


def safe(value) -> Markup:
    """Mark a value as trusted HTML that should not be escaped.

    Example:
        >>> safe("<b>bold</b>")
        Markup('<b>bold</b>')
        >>> safe(None)
        Markup('')
    """
    if value is None:
        return Markup('')
    if hasattr(value, '__html__'):
        return Markup(value.__html__())
    return Markup(str(value))


def escape_html(value) -> Markup:
    """Escape a value for HTML output.

    None renders as an empty string. Values with an ``__html__`` method
    (Markup, rendered components) pass through untouched.

    Example:
        >>> escape_html('Wiper "Deluxe" <Switches>')
        Markup('Wiper &#34;Deluxe&#34; &lt;Switches&gt;')
    """
    if value is None:
        return Markup('')
    return escape(value)


def render_attr(name: str, value) -> str:
    """Render a single HTML attribute with a leading space.

    - True: renders just the attribute name (``checked``)
    - False/None: renders nothing
    - Other values: renders name="escaped_value"

    Example:
        >>> render_attr("checked", True)
        ' checked'
        >>> render_attr("checked", False)
        ''
        >>> render_attr("id", 2)
        ' id="2"'
    """
    if value is True:
        return f' {name}'
    if value is False or value is None:
        return ''
    return f' {name}="{escape_html(value)}"'


def render_class(*values) -> str:
    """Join class names into one class attribute value, skipping empty ones.

    Example:
        >>> render_class("form-check-input", "", None, "big")
        'form-check-input big'
    """
    return ' '.join(v for v in values if v)


def render_aria(attrs: dict) -> str:
    """Render ARIA attributes from a dictionary.

    Booleans become the strings "true"/"false", which is what assistive
    technology expects for states such as aria-checked.

    Example:
        >>> render_aria({"checked": True, "label": "Headlights"})
        ' aria-checked="true" aria-label="Headlights"'
    """
    if not attrs:
        return ''
    parts = []
    for k, v in attrs.items():
        if v is None:
            continue
        if isinstance(v, bool):
            v = 'true' if v else 'false'
        parts.append(f' aria-{k}="{escape_html(v)}"')
    return ''.join(parts)


def spread_attrs(attrs: dict) -> str:
    """Render a dictionary as HTML attributes, in insertion order.

    Example:
        >>> spread_attrs({"type": "hidden", "name": "items-0-id", "value": 1})
        ' type="hidden" name="items-0-id" value="1"'
    """
    if not attrs:
        return ''
    return ''.join(render_attr(k, v) for k, v in attrs.items())
