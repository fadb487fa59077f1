"""
test_composer.py - home page composition strategies
"""

from dataclasses import replace

import pytest

from templatesite.catalog import WEBSITE_TEMPLATES, get_website_template_by_id
from templatesite.catalog.kinds import NavigationMode
from templatesite.rendering import PageContentResult, compose_home
from templatesite.rendering.composer import (
    COMPOSITION_STRATEGIES,
    OVERLAY_LINKS,
    HomeStatus,
    compose_standard,
    select_strategy,
)
from templatesite.rendering.nodes import flatten


BLOCKS = ("hero", "intro", "services", "features", "stats", "gallery", "cta")
CONTENT_KINDS = set(BLOCKS) | {"testimonials", "dynamic", "split-hero", "minimal-hero"}


# =============================================================================
# Helpers
# =============================================================================

def full_content():
    return {name: {"title": name.title()} for name in BLOCKS}


def template_with(layout=None, navigation=None, base="classic-business"):
    """Catalog template with its home layout tag and/or navigation replaced."""
    template = get_website_template_by_id(base)
    if layout is not None:
        template = replace(template, pages=replace(template.pages, home=replace(template.pages.home, layout=layout)))
    if navigation is not None:
        template = replace(template, structure=replace(template.structure, navigation=navigation))
    return template


def content_kinds(view):
    return [n.kind for n in flatten(view.nodes) if n.kind in CONTENT_KINDS]


def dynamic_keys(view):
    return [n.key for n in flatten(view.nodes) if n.kind == "dynamic"]


SECTIONS = [
    {"id": "s1", "type": "text", "title": "One"},
    {"id": "s2", "type": "faq", "title": "Two"},
    {"id": "s1", "type": "text", "title": "Duplicate"},
    {"id": "s3", "type": "image-text", "title": "Three"},
]


# =============================================================================
# Load states
# =============================================================================

class TestLoadStates:

    def test_loading_renders_skeleton(self):
        view = compose_home(PageContentResult(loading=True), WEBSITE_TEMPLATES[0])
        assert view.status is HomeStatus.LOADING
        assert [n.kind for n in view.nodes] == ["skeleton-hero", "skeleton-cards"]

    def test_error_renders_fallback(self):
        view = compose_home(PageContentResult(error=RuntimeError("boom")), WEBSITE_TEMPLATES[0])
        assert view.status is HomeStatus.ERROR
        assert view.nodes[0].kind == "fallback"
        assert view.nodes[0].data["title"] == "Error Loading Content"
        assert view.nodes[0].data["admin_url"] == "/admin"

    def test_missing_content_renders_fallback(self):
        view = compose_home(PageContentResult(), WEBSITE_TEMPLATES[0], admin_url="/manage")
        assert view.status is HomeStatus.EMPTY
        assert view.nodes[0].data["title"] == "No Content Available"
        assert view.nodes[0].data["admin_url"] == "/manage"


# =============================================================================
# Strategy selection
# =============================================================================

class TestStrategySelection:

    @pytest.mark.parametrize("layout", ["carousel", "", None, "STANDARD"])
    def test_unrecognised_layout_uses_standard(self, layout):
        template = template_with(layout=layout)
        assert select_strategy(template) is compose_standard

    def test_unrecognised_layout_renders_standard_order(self):
        view = compose_home(
            PageContentResult(content=full_content(), sections=SECTIONS[:1]),
            template_with(layout="carousel"),
        )
        assert view.status is HomeStatus.READY
        assert content_kinds(view) == [
            "hero", "intro", "services", "features", "stats",
            "dynamic", "testimonials", "gallery", "cta",
        ]

    def test_every_catalog_layout_has_a_strategy(self):
        for template in WEBSITE_TEMPLATES:
            assert template.pages.home.layout in COMPOSITION_STRATEGIES


# =============================================================================
# Shared invariants
# =============================================================================

class TestSharedRules:

    @pytest.mark.parametrize("template", WEBSITE_TEMPLATES, ids=lambda t: t.id)
    def test_absent_hero_not_rendered_testimonials_always(self, template):
        content = full_content()
        content["hero"] = None
        view = compose_home(PageContentResult(content=content), template)

        kinds = content_kinds(view)
        assert not {"hero", "split-hero", "minimal-hero"} & set(kinds)
        assert kinds.count("testimonials") == 1

    @pytest.mark.parametrize("template", WEBSITE_TEMPLATES, ids=lambda t: t.id)
    def test_dynamic_sections_once_per_id_in_order(self, template):
        view = compose_home(PageContentResult(content=full_content(), sections=SECTIONS), template)
        assert dynamic_keys(view) == ["section-s1", "section-s2", "section-s3"]

    @pytest.mark.parametrize("template", WEBSITE_TEMPLATES, ids=lambda t: t.id)
    def test_only_present_blocks_rendered(self, template):
        view = compose_home(PageContentResult(content={"stats": {"items": []}}), template)
        assert sorted(set(content_kinds(view))) == ["stats", "testimonials"]

    def test_block_payload_passed_through(self):
        hero = {"title": "Hi", "custom": [1, 2, 3]}
        view = compose_home(PageContentResult(content={"hero": hero}), WEBSITE_TEMPLATES[0])
        assert view.nodes[0].data is hero

    def test_main_padding_except_side_navigation(self):
        content = PageContentResult(content=full_content())
        assert compose_home(content, get_website_template_by_id("classic-business")).main_class == "pt-16"
        assert compose_home(content, get_website_template_by_id("dynamic-interactive")).main_class == ""


# =============================================================================
# Layout specifics
# =============================================================================

class TestSplitHero:

    def test_two_pane_hero_then_masonry(self):
        view = compose_home(
            PageContentResult(content=full_content(), sections=SECTIONS),
            get_website_template_by_id("modern-split"),
        )
        hero, grid = view.nodes
        assert hero.kind == "split-hero"
        assert grid.kind == "masonry"
        assert all(item.kind == "masonry-item" for item in grid.children)
        assert [item.children[0].kind for item in grid.children] == [
            "intro", "services", "features", "testimonials", "stats",
            "dynamic", "dynamic", "dynamic", "gallery", "cta",
        ]


class TestFullscreen:

    def test_side_navigation_scenario(self):
        content = {"hero": {"title": "Hi"}, "services": {"title": "What we do"}}
        template = template_with(layout="fullscreen-sections", navigation="side")
        view = compose_home(PageContentResult(content=content), template)

        side_nav, group = view.nodes
        assert side_nav.kind == "side-nav"
        assert side_nav.data == ["#hero", "#services", "#testimonials"]
        assert group.css_class == "main-content"
        assert [s.anchor for s in group.children] == ["hero", "services", "testimonials"]
        assert all(s.kind == "fullscreen-section" for s in group.children)
        assert content_kinds(view) == ["hero", "services", "testimonials"]

    def test_no_side_nav_for_other_navigation(self):
        template = template_with(layout="fullscreen-sections", navigation=NavigationMode.TOP)
        view = compose_home(PageContentResult(content=full_content()), template)

        assert [n.kind for n in view.nodes] == ["group"]
        assert view.nodes[0].css_class is None

    def test_dynamic_sections_get_anchors(self):
        view = compose_home(
            PageContentResult(content={"hero": {}}, sections=SECTIONS),
            get_website_template_by_id("dynamic-interactive"),
        )
        anchors = [s.anchor for s in view.nodes[1].children]
        assert anchors == ["hero", "testimonials", "section-s1", "section-s2", "section-s3"]


class TestMagazine:

    def test_overlay_nav_above_hero(self):
        view = compose_home(
            PageContentResult(content=full_content()),
            get_website_template_by_id("editorial-magazine"),
        )
        overlay, hero, grid = view.nodes
        assert overlay.kind == "overlay-nav"
        assert [link["label"] for link in overlay.data] == [l["label"] for l in OVERLAY_LINKS]
        assert hero.kind == "hero"
        assert grid.css_class == "magazine-content"

    def test_no_overlay_without_overlay_navigation(self):
        template = template_with(layout="magazine-style", navigation="top")
        view = compose_home(PageContentResult(content=full_content()), template)
        assert "overlay-nav" not in [n.kind for n in view.nodes]


class TestMinimal:

    def test_minimal_hero_then_linear_stack(self):
        view = compose_home(
            PageContentResult(content=full_content()),
            get_website_template_by_id("minimal-focus"),
        )
        hero, group = view.nodes
        assert hero.kind == "minimal-hero"
        assert group.css_class == "minimal-content"
        assert [n.kind for n in group.children] == [
            "intro", "services", "features", "testimonials", "stats", "gallery", "cta",
        ]
