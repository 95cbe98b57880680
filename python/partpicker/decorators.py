"""The @component decorator for generator-based HTML components.

A component is a generator function that yields HTML chunks:

    @component
    def Badge(*, text=""):
        yield f'<span class="badge">{escape_html(text)}</span>'

    html = str(Badge(text="New"))

Components that accept ``_content`` as their first parameter wrap other
markup (a slot), passed in as the first positional argument:

    @component
    def Card(_content=None, *, title=""):
        yield f'<div class="card"><h1>{escape_html(title)}</h1>'
        if _content:
            yield from _content
        yield '</div>'

    html = str(Card(Badge(text="New"), title="Parts"))

Rendered components expose ``__html__`` so they nest inside Markup and
are not escaped a second time.
"""

import inspect

from markupsafe import Markup

__all__ = ["component"]


def component(fn):
    """Wrap a generator function so it can be iterated or rendered to a string.

    Args:
        fn: A generator function yielding HTML chunks.

    Returns:
        A wrapper class; calling it with props creates a renderable instance.
    """
    if not inspect.isgeneratorfunction(fn):
        raise TypeError(f"@component expects a generator function, got {fn!r}")

    params = list(inspect.signature(fn).parameters)
    has_content_param = bool(params) and params[0] == "_content"

    class ComponentWrapper:
        __slots__ = ("_content", "_props")

        def __init__(self, _content=None, **props):
            self._content = _content
            self._props = props

        def _call_fn(self):
            if has_content_param:
                return fn(self._get_content(), **self._props)
            return fn(**self._props)

        def _get_content(self):
            if isinstance(self._content, str):
                return iter([self._content])
            return self._content

        def __iter__(self):
            return iter(self._call_fn())

        def __str__(self):
            return "".join(str(chunk) for chunk in self._call_fn())

        def __html__(self):
            # markupsafe escapes plain str returned from __html__
            return Markup(str(self))

        def render(self) -> Markup:
            return self.__html__()

    ComponentWrapper.__name__ = fn.__name__
    ComponentWrapper.__qualname__ = fn.__qualname__
    ComponentWrapper.__doc__ = fn.__doc__
    ComponentWrapper.__wrapped__ = fn

    return ComponentWrapper
