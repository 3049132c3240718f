"""Tests for the ToC renderer."""

from __future__ import annotations

import pytest

from tocgen.renderer import TocRenderer, render_toc
from tocgen.schemas import Item, TocTemplate


@pytest.fixture
def bracket_template() -> TocTemplate:
    """Compact template that makes nesting easy to read in assertions."""
    return TocTemplate(
        item_start="(",
        item_end=")",
        level_start="[",
        level_end="]",
        item_format="{levels}{itemnumber} {title}",
    )


class TestRender:
    """Tests for TocRenderer.render."""

    def test_empty_root_renders_empty_string(self) -> None:
        assert TocRenderer().render(Item.root()) == ""

    def test_flat_list(self, add_item, bracket_template: TocTemplate) -> None:
        root = Item.root()
        for title in ("A", "B", "C"):
            add_item(root, title)

        assert TocRenderer(bracket_template).render(root) == "(1. A)(2. B)(3. C)"

    def test_nested_outline(self, outline: Item, bracket_template: TocTemplate) -> None:
        """Each parent wraps its whole subtree in one level pair."""
        rendered = TocRenderer(bracket_template).render(outline)

        assert rendered == (
            "(1. Intro)"
            "(2. Methods[(2.1 Data[(2.1.1 Sources)])(2.2 Models)])"
            "(3. Results)"
        )

    def test_level_markers_only_for_parents(self, outline: Item) -> None:
        template = TocTemplate(
            item_start="",
            item_end="",
            level_start="<",
            level_end=">",
            item_format="{title};",
        )

        rendered = TocRenderer(template).render(outline)

        # Methods and Data are the only items with children.
        assert rendered.count("<") == 2
        assert rendered.count(">") == 2
        assert rendered == "Intro;Methods;<Data;<Sources;>Models;>Results;"

    def test_default_html_template(self, add_item) -> None:
        root = Item.root()
        section = add_item(root, "Intro")
        add_item(section, "Scope")

        assert render_toc(root) == (
            '<li><a href="#intro">1.&nbsp;Intro</a>'
            '<ul><li><a href="#scope">1.1&nbsp;Scope</a></li></ul>'
            "</li>"
        )

    def test_root_item_is_not_rendered(self, bracket_template: TocTemplate) -> None:
        root = Item(id="root-id", title="Root title", level=0)
        root.append_child(Item(id="a", title="A", level=1))

        rendered = TocRenderer(bracket_template).render(root)

        assert "Root title" not in rendered
        assert rendered == "(1. A)"

    def test_render_section_subtree(self, outline: Item, bracket_template: TocTemplate) -> None:
        """Rendering one section numbers its children within that section."""
        methods = outline.children[1]

        rendered = TocRenderer(bracket_template).render(methods)

        assert rendered == "(2.1 Data[(2.1.1 Sources)])(2.2 Models)"


class TestReplaceTokens:
    """Tests for TocRenderer.replace_tokens."""

    def test_anchor_template(self) -> None:
        template = TocTemplate(
            item_format='<a href="#{id}">{levels}{itemnumber} {title}</a>'
        )
        root = Item.root()
        item = root.append_child(Item(id="sec1", title="Intro", level=1))

        assert TocRenderer(template).replace_tokens(item) == '<a href="#sec1">1. Intro</a>'

    def test_missing_id_and_title_become_empty(self) -> None:
        template = TocTemplate(item_format="[{id}|{levels}{itemnumber}|{title}]")
        root = Item.root()
        item = root.append_child(Item(id=None, title=None, level=1))

        assert TocRenderer(template).replace_tokens(item) == "[|1.|]"

    def test_values_are_not_escaped(self) -> None:
        template = TocTemplate(item_format="{title}")
        root = Item.root()
        item = root.append_child(Item(id="x", title="<b>Bold & bright</b>", level=1))

        assert TocRenderer(template).replace_tokens(item) == "<b>Bold & bright</b>"

    def test_placeholders_inside_values_are_kept(self) -> None:
        """Text substituted for one placeholder is not scanned again."""
        template = TocTemplate(item_format="{id}:{title}")
        root = Item.root()
        item = root.append_child(Item(id="{title}", title="{id}", level=1))

        assert TocRenderer(template).replace_tokens(item) == "{title}:{id}"

    def test_repeated_and_unknown_placeholders(self) -> None:
        template = TocTemplate(item_format="{id}-{id} {unknown}")
        root = Item.root()
        item = root.append_child(Item(id="a", level=1))

        assert TocRenderer(template).replace_tokens(item) == "a-a {unknown}"


class TestReentrancy:
    """The renderer carries no state from one render to the next."""

    def test_render_is_idempotent(self, outline: Item) -> None:
        renderer = TocRenderer()

        assert renderer.render(outline) == renderer.render(outline)

    def test_no_residue_between_trees(
        self, outline: Item, add_item, bracket_template: TocTemplate
    ) -> None:
        renderer = TocRenderer(bracket_template)
        other = Item.root()
        add_item(other, "Only")

        renderer.render(outline)

        assert renderer.render(other) == "(1. Only)"
        assert renderer.render(Item.root()) == ""
