"""Components that render the selection page.

Markup contract per item (in this order):

    <input type="hidden" name="items-<i>-id" value="<id>">
    <input type="checkbox" id="<id>" class="<marker>" name="items-<i>-checked" value="true"
           [checked] aria-checked="true|false" aria-label="<name>">
    <input type="hidden" name="items-<i>-name" value="<name>">
    <label class="form-check-label" for="<id>"><name></label>

State logic lives in selection and aria; these functions only place
attributes.
"""

from collections.abc import Sequence

from markupsafe import Markup

from partpicker.aria import bootstrap_script
from partpicker.config import Settings
from partpicker.decorators import component
from partpicker.html import escape_html, render_aria, render_attr, render_class, spread_attrs
from partpicker.selection import SelectionViewModel, field_name

__all__ = ["CheckboxItem", "SelectionForm", "Page", "render_selection_page"]


@component
def CheckboxItem(*, item: SelectionViewModel, index: int, marker_class: str):
    yield '<div class="form-check">'
    yield f'<input{spread_attrs({"type": "hidden", "name": field_name(index, "id"), "value": item.id})}>'
    yield (
        '<input type="checkbox"'
        f'{render_attr("id", item.id)}'
        f'{render_attr("class", render_class(marker_class))}'
        f'{render_attr("name", field_name(index, "checked"))}'
        ' value="true"'
        f'{render_attr("checked", item.checked)}'
        f'{render_aria({"checked": item.checked, "label": item.name})}'
        '>'
    )
    yield f'<input{spread_attrs({"type": "hidden", "name": field_name(index, "name"), "value": item.name})}>'
    yield f'<label class="form-check-label"{render_attr("for", item.id)}>{escape_html(item.name)}</label>'
    yield '</div>'


@component
def SelectionForm(*, items: Sequence[SelectionViewModel], marker_class: str, action: str = ""):
    yield f'<form method="post"{render_attr("action", action or None)}>'
    for index, item in enumerate(items):
        yield from CheckboxItem(item=item, index=index, marker_class=marker_class)
    yield '<button type="submit" class="btn btn-primary">Submit</button>'
    yield '</form>'


@component
def Page(_content=None, *, title: str, script: str = ""):
    yield '<!DOCTYPE html>'
    yield '<html lang="en">'
    yield f'<head><meta charset="utf-8"><title>{escape_html(title)}</title></head>'
    yield '<body>'
    yield f'<main><h1>{escape_html(title)}</h1>'
    if _content:
        yield from _content
    yield '</main>'
    # After the markup so the DOMContentLoaded hook finds every checkbox
    if script:
        yield f'<script>\n{script}</script>'
    yield '</body>'
    yield '</html>'


def render_selection_page(items: Sequence[SelectionViewModel], settings: Settings, action: str = "") -> Markup:
    """Render the complete selection page for one request."""
    form = SelectionForm(items=items, marker_class=settings.marker_class, action=action)
    page = Page(
        form,
        title=settings.page_title,
        script=bootstrap_script(settings.marker_class, settings.aria_mode),
    )
    return page.render()
