"""Tests for HTML helpers, the component decorator and the selection page markup."""

import re

import pytest
from markupsafe import Markup

from partpicker.aria import select_controls
from partpicker.components import CheckboxItem, Page, SelectionForm, render_selection_page
from partpicker.config import Settings
from partpicker.decorators import component
from partpicker.html import escape_html, render_aria, render_attr, render_class, safe, spread_attrs
from partpicker.selection import SelectionInitializer, SelectionViewModel


class TestHtmlHelpers:
    """Attribute rendering and escaping."""

    def test_escape_html(self):
        """Special characters are escaped; Markup passes through."""
        assert escape_html('<b>"Wipers" & co</b>') == "&lt;b&gt;&#34;Wipers&#34; &amp; co&lt;/b&gt;"
        assert escape_html(safe("<b>ok</b>")) == "<b>ok</b>"
        assert escape_html(None) == ""

    def test_render_attr(self):
        """Booleans toggle presence, other values are quoted and escaped."""
        assert render_attr("checked", True) == " checked"
        assert render_attr("checked", False) == ""
        assert render_attr("action", None) == ""
        assert render_attr("for", 3) == ' for="3"'
        assert render_attr("value", 'a"b') == ' value="a&#34;b"'

    def test_render_class(self):
        """Non-empty names are joined with spaces."""
        assert render_class("form-check-input", "", None, "big") == "form-check-input big"

    def test_render_aria_booleans(self):
        """Booleans become the strings ARIA expects."""
        assert render_aria({"checked": False, "label": "Headlights"}) == ' aria-checked="false" aria-label="Headlights"'
        assert render_aria({"checked": True, "hidden": None}) == ' aria-checked="true"'
        assert render_aria({}) == ""

    def test_spread_attrs(self):
        """Dict order is kept."""
        assert spread_attrs({"type": "hidden", "value": 1}) == ' type="hidden" value="1"'


class TestComponentDecorator:
    """Generator functions as components."""

    def test_renders_to_string(self):
        """str() joins the yielded chunks."""
        @component
        def Badge(*, text=""):
            yield f'<span>{escape_html(text)}</span>'

        assert str(Badge(text="<new>")) == "<span>&lt;new&gt;</span>"
        assert list(Badge(text="x")) == ["<span>x</span>"]

    def test_content_slot(self):
        """Components with _content wrap a string or another component."""
        @component
        def Box(_content=None, *, tag="div"):
            yield f'<{tag}>'
            if _content:
                yield from _content
            yield f'</{tag}>'

        assert str(Box("<p>hi</p>")) == "<div><p>hi</p></div>"
        assert str(Box(Box("b"), tag="section")) == "<section><div>b</div></section>"
        assert str(Box()) == "<div></div>"

    def test_nests_without_double_escaping(self):
        """Rendered components are Markup-compatible."""
        @component
        def Bold(*, text):
            yield f'<b>{escape_html(text)}</b>'

        assert Markup("<p>{}</p>").format(Bold(text="&")) == "<p><b>&amp;</b></p>"
        assert Markup("<p>%s</p>") % Bold(text="<") == "<p><b>&lt;</b></p>"
        assert Markup("<i>{}</i>").format(Bold(text="x").render()) == "<i><b>x</b></i>"
        assert isinstance(Bold(text="x").__html__(), Markup)
        assert isinstance(Bold(text="x").render(), Markup)

    def test_requires_generator(self):
        """Plain functions are refused."""
        with pytest.raises(TypeError):
            @component
            def NotAGenerator():
                return "<p></p>"


class TestCheckboxMarkup:
    """The per-item markup contract."""

    def test_checked_item(self):
        """A checked item renders hidden id, checkbox, hidden name, label in that order."""
        item = SelectionViewModel(id=2, name="Brake Light Switches", checked=True)
        html = str(CheckboxItem(item=item, index=1, marker_class="form-check-input"))

        assert html == (
            '<div class="form-check">'
            '<input type="hidden" name="items-1-id" value="2">'
            '<input type="checkbox" id="2" class="form-check-input" name="items-1-checked" value="true"'
            ' checked aria-checked="true" aria-label="Brake Light Switches">'
            '<input type="hidden" name="items-1-name" value="Brake Light Switches">'
            '<label class="form-check-label" for="2">Brake Light Switches</label>'
            '</div>'
        )

    def test_unchecked_item(self):
        """Unchecked items have no checked attribute and aria-checked="false"."""
        item = SelectionViewModel(id=1, name="Headlights", checked=False)
        html = str(CheckboxItem(item=item, index=0, marker_class="form-check-input"))

        assert ' checked' not in html.replace('aria-checked', '')
        assert 'aria-checked="false"' in html

    def test_names_are_escaped(self):
        """Catalog names cannot inject markup."""
        item = SelectionViewModel(id=5, name='<script>"x"</script>', checked=False)
        html = str(CheckboxItem(item=item, index=0, marker_class="form-check-input"))

        assert "<script>" not in html
        assert 'aria-label="&lt;script&gt;&#34;x&#34;&lt;/script&gt;"' in html

    def test_form_lists_every_item_once_in_order(self, catalog):
        """The form carries exactly the catalog ids, in catalog order."""
        items = SelectionInitializer().build(catalog.list())
        html = str(SelectionForm(items=items, marker_class="form-check-input"))

        assert re.findall(r'type="checkbox" id="(\d+)"', html) == ["1", "2", "3", "4"]
        assert html.startswith('<form method="post">')
        assert '<button type="submit"' in html


class TestSelectionPage:
    """The full page."""

    def test_page_structure(self, settings, catalog):
        """Title, form and a trailing bootstrap script."""
        items = SelectionInitializer().build(catalog.list())
        html = render_selection_page(items, settings)

        assert isinstance(html, Markup)
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Parts</title>" in html
        assert html.index("</form>") < html.index("<script>")
        assert 'setAriaChecked(document.querySelectorAll(".form-check-input"));' in html

    def test_initial_attributes_match_checked(self, settings, catalog):
        """aria-checked and the native attribute agree on first render."""
        items = SelectionInitializer().build(catalog.list())
        controls = select_controls(render_selection_page(items, settings), settings.marker_class)

        assert [c.aria_checked for c in controls] == ["false", "true", "false", "true"]
        assert [c.checked for c in controls] == [False, True, False, True]
        assert [c.get_attribute("aria-label") for c in controls] == [i.name for i in items]

    def test_custom_marker_and_mode(self, catalog):
        """Settings drive the marker class and the wired mode."""
        settings = Settings(_env_file=None, marker_class="part-box", aria_mode="force-false")
        html = render_selection_page(SelectionInitializer().build(catalog.list()), settings)

        assert len(select_controls(html, "part-box")) == 4
        assert 'setAriaCheckedFalse(document.querySelectorAll(".part-box"));' in html

    def test_page_component_without_script(self):
        """The script tag is omitted when there is nothing to run."""
        html = str(Page("<p>x</p>", title="T"))
        assert "<script>" not in html
        assert "<main><h1>T</h1><p>x</p></main>" in html
