"""
test_lookup.py - template catalogs and lookup by id
"""

from dataclasses import replace

import pytest

from templatesite.catalog import (
    DESIGN_TEMPLATES,
    WEBSITE_TEMPLATES,
    get_design_template_by_id,
    get_website_template_by_id,
    lookup_by_id,
)
from templatesite.catalog.badges import DEFAULT_BADGE_COLOR, category_badge
from templatesite.catalog.kinds import (
    DesignCategory,
    HomeLayout,
    NavigationMode,
    Radius,
    WebsiteCategory,
)


# =============================================================================
# lookup_by_id
# =============================================================================

class TestLookupById:
    """Lookup never fails and defaults to the first entry."""

    def test_known_id(self):
        template = DESIGN_TEMPLATES[2]
        assert lookup_by_id(DESIGN_TEMPLATES, template.id) is template

    @pytest.mark.parametrize("template_id", [None, "", "does-not-exist", "MODERN-GRADIENT"])
    def test_unknown_or_missing_id_returns_first_entry(self, template_id):
        assert lookup_by_id(DESIGN_TEMPLATES, template_id) is DESIGN_TEMPLATES[0]
        assert lookup_by_id(WEBSITE_TEMPLATES, template_id) is WEBSITE_TEMPLATES[0]

    def test_lookup_is_pure(self):
        first = get_website_template_by_id("modern-split")
        second = get_website_template_by_id("modern-split")
        assert first == second

    def test_small_catalog_fallback(self):
        catalog = (
            replace(DESIGN_TEMPLATES[0], id="A"),
            replace(DESIGN_TEMPLATES[1], id="B"),
        )
        assert lookup_by_id(catalog, "Z").id == "A"
        assert lookup_by_id(catalog, "B").id == "B"

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValueError):
            lookup_by_id((), "A")


# =============================================================================
# Catalog contents
# =============================================================================

class TestCatalogs:

    def test_ids_unique(self):
        for catalog in (DESIGN_TEMPLATES, WEBSITE_TEMPLATES):
            ids = [t.id for t in catalog]
            assert len(ids) == len(set(ids))

    def test_every_home_layout_has_a_template(self):
        layouts = {t.pages.home.layout for t in WEBSITE_TEMPLATES}
        assert layouts == set(HomeLayout)

    def test_helpers_fall_back(self):
        assert get_design_template_by_id("nope") is DESIGN_TEMPLATES[0]
        assert get_website_template_by_id(None) is WEBSITE_TEMPLATES[0]


# =============================================================================
# Closed vocabularies
# =============================================================================

class TestKinds:

    def test_coerce_known_value(self):
        assert NavigationMode.coerce("side") is NavigationMode.SIDE
        assert HomeLayout.coerce("magazine-style") is HomeLayout.MAGAZINE_STYLE

    def test_coerce_unknown_value_uses_default(self):
        assert HomeLayout.coerce("carousel") is HomeLayout.STANDARD
        assert NavigationMode.coerce(None) is NavigationMode.TOP
        assert Radius.coerce("huge") is Radius.MEDIUM

    def test_category_badges(self):
        design = category_badge(DesignCategory.BOLD)
        assert design == {"label": "bold", "color": "bg-red-100 text-red-800", "icon": "zap"}

        website = category_badge(WebsiteCategory.CLASSIC)
        assert website["color"] == "bg-amber-100 text-amber-800"

        assert category_badge("unheard-of")["color"] == DEFAULT_BADGE_COLOR
