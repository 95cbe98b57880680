"""Keep ``aria-checked`` in step with checkbox clicks.

Clicking a native checkbox flips its checked state but leaves custom ARIA
attributes alone, so every rendered checkbox gets a click handler that
updates ``aria-checked`` itself. The behaviour exists twice, once per
runtime:

- in Python, as strategies applied to any object with the control
  interface (``get_attribute``, ``set_attribute``, ``add_event_listener``),
  which is what tests and the headless CheckboxElement use;
- in the browser, as the JavaScript emitted by ``bootstrap_script``.

Both come from the same AriaStrategy object so the two cannot drift apart.

Usage:
    controls = select_controls(page_html, "form-check-input")
    set_aria_checked(controls)
    controls[0].click()
"""

import abc
import json
import re
from collections.abc import Callable, Iterable
from html.parser import HTMLParser
from typing import Protocol

from partpicker.errors import ConfigurationError
from partpicker.log import get_logger

__all__ = [
    "Control",
    "CheckboxElement",
    "AriaStrategy",
    "ToggleAriaChecked",
    "ForceAriaCheckedFalse",
    "STRATEGIES",
    "get_strategy",
    "AriaSyncController",
    "set_aria_checked",
    "set_aria_checked_false",
    "bootstrap_script",
    "select_controls",
    "MARKER_CLASS_PATTERN",
]

log = get_logger(__name__)

ARIA_CHECKED = "aria-checked"

# A single CSS class token, safe to drop into a selector and a script
MARKER_CLASS_PATTERN = re.compile(r"-?[A-Za-z_][A-Za-z0-9_-]*")


class Control(Protocol):
    def get_attribute(self, name: str) -> str | None: ...

    def set_attribute(self, name: str, value: str) -> None: ...

    def add_event_listener(self, event: str, handler: Callable[[], None]) -> None: ...


class CheckboxElement:
    """In-memory checkbox that behaves like a DOM input for click purposes.

    ``click()`` flips the native checked flag first and then runs the
    click listeners, which is the order a browser uses.
    """

    def __init__(self, attributes: dict[str, str] | None = None, checked: bool = False):
        self.attributes = dict(attributes or {})
        self.checked = checked
        self._listeners: dict[str, list[Callable[[], None]]] = {}

    def __repr__(self):
        return f"CheckboxElement(id={self.id!r}, checked={self.checked!r}, aria_checked={self.aria_checked!r})"

    @property
    def id(self) -> str | None:
        return self.attributes.get("id")

    @property
    def aria_checked(self) -> str | None:
        return self.attributes.get(ARIA_CHECKED)

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = str(value)

    def add_event_listener(self, event: str, handler: Callable[[], None]) -> None:
        self._listeners.setdefault(event, []).append(handler)

    def dispatch(self, event: str) -> None:
        for handler in list(self._listeners.get(event, ())):
            handler()

    def click(self) -> None:
        self.checked = not self.checked
        self.dispatch("click")


class AriaStrategy(abc.ABC):
    """One way of reacting to a click, in Python and in JavaScript.

    Subclasses set ``mode`` (the configuration name), ``function_name``
    (the client-side function) and ``js_handler_body`` (statements run
    inside the click handler, with ``control`` in scope), and implement
    ``apply``.
    """

    mode: str
    function_name: str
    js_handler_body: str

    @abc.abstractmethod
    def apply(self, control: Control) -> None:
        """Update the control after one click."""

    def bind(self, control: Control) -> None:
        # One closure per control; the handler only ever touches its own control
        def on_click():
            self.apply(control)

        control.add_event_listener("click", on_click)

    def client_function(self) -> str:
        body = "\n".join(f"            {line}" for line in self.js_handler_body.strip().splitlines())
        return (
            f"function {self.function_name}(controls) {{\n"
            f"    for (const control of controls) {{\n"
            f"        control.addEventListener(\"click\", function () {{\n"
            f"{body}\n"
            f"        }});\n"
            f"    }}\n"
            f"}}"
        )


class ToggleAriaChecked(AriaStrategy):
    """Flip aria-checked between "true" and "false".

    Only the attribute's own previous value is consulted, never the native
    checked property. Anything other than "true" (including a missing
    attribute) flips to "true".
    """

    mode = "toggle"
    function_name = "setAriaChecked"
    js_handler_body = """
if (control.getAttribute("aria-checked") === "true") {
    control.setAttribute("aria-checked", "false");
} else {
    control.setAttribute("aria-checked", "true");
}
"""

    def apply(self, control: Control) -> None:
        if control.get_attribute(ARIA_CHECKED) == "true":
            control.set_attribute(ARIA_CHECKED, "false")
        else:
            control.set_attribute(ARIA_CHECKED, "true")


class ForceAriaCheckedFalse(AriaStrategy):
    """Diagnostic mode: every click forces aria-checked to "false"."""

    mode = "force-false"
    function_name = "setAriaCheckedFalse"
    js_handler_body = 'control.setAttribute("aria-checked", "false");'

    def apply(self, control: Control) -> None:
        control.set_attribute(ARIA_CHECKED, "false")


STRATEGIES: dict[str, AriaStrategy] = {
    strategy.mode: strategy for strategy in (ToggleAriaChecked(), ForceAriaCheckedFalse())
}


def get_strategy(mode: str) -> AriaStrategy:
    """Look up an ARIA strategy by its configured mode name."""
    try:
        return STRATEGIES[mode]
    except KeyError:
        raise ConfigurationError("Unknown aria mode", name=mode, choices=STRATEGIES) from None


class AriaSyncController:
    """Attaches one strategy to a collection of checkbox controls.

    Example:
        >>> box = CheckboxElement({"aria-checked": "false"})
        >>> AriaSyncController().initialize([box])
        1
        >>> box.click(); box.aria_checked
        'true'
    """

    def __init__(self, strategy: AriaStrategy | None = None):
        self.strategy = strategy or STRATEGIES["toggle"]

    def initialize(self, controls: Iterable[Control]) -> int:
        """Bind a click handler to every control. Returns how many were bound."""
        count = 0
        for control in controls:
            self.strategy.bind(control)
            count += 1
        log.debug("Bound %s handler to %d controls", self.strategy.mode, count)
        return count


def set_aria_checked(controls: Iterable[Control]) -> int:
    return AriaSyncController(STRATEGIES["toggle"]).initialize(controls)


def set_aria_checked_false(controls: Iterable[Control]) -> int:
    return AriaSyncController(STRATEGIES["force-false"]).initialize(controls)


def _check_marker_class(marker_class: str) -> str:
    if not MARKER_CLASS_PATTERN.fullmatch(marker_class):
        raise ConfigurationError("Marker class must be a single CSS class name", name=marker_class)
    return marker_class


def bootstrap_script(marker_class: str, mode: str = "toggle") -> str:
    """JavaScript that wires the selected strategy once the document has loaded.

    All strategies are defined so either can be called from the browser
    console; only ``mode`` is attached to the page's checkboxes.

    Raises:
        ConfigurationError: Unknown mode or malformed marker class.
    """
    strategy = get_strategy(mode)
    selector = json.dumps("." + _check_marker_class(marker_class))

    functions = "\n\n".join(s.client_function() for s in STRATEGIES.values())
    return (
        f"{functions}\n\n"
        f"document.addEventListener(\"DOMContentLoaded\", function () {{\n"
        f"    {strategy.function_name}(document.querySelectorAll({selector}));\n"
        f"}});\n"
    )


class _CheckboxCollector(HTMLParser):
    def __init__(self, marker_class: str):
        super().__init__()
        self.marker_class = marker_class
        self.controls: list[CheckboxElement] = []

    def handle_starttag(self, tag, attrs):
        if tag != "input":
            return
        attributes = {name: value if value is not None else "" for name, value in attrs}
        if self.marker_class not in attributes.get("class", "").split():
            return
        self.controls.append(CheckboxElement(attributes, checked="checked" in attributes))

    handle_startendtag = handle_starttag


def select_controls(html: str, marker_class: str) -> list[CheckboxElement]:
    """Collect the inputs carrying ``marker_class`` from rendered markup, in document order.

    The Python counterpart of ``document.querySelectorAll(".<marker_class>")``.
    """
    collector = _CheckboxCollector(_check_marker_class(marker_class))
    collector.feed(str(html))
    collector.close()
    return collector.controls
