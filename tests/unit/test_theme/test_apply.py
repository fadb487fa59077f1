"""
test_apply.py - applying templates to the presentation state
"""

from templatesite.catalog import DESIGN_TEMPLATES, WEBSITE_TEMPLATES
from templatesite.theme import (
    PresentationState,
    ThemeRegistry,
    apply_design_template,
    apply_website_template,
)
from templatesite.application.site import sync_presentation


class TestApplyDesignTemplate:

    def test_sets_variables_and_active_id(self, presentation):
        template = DESIGN_TEMPLATES[0]
        apply_design_template(presentation, template)

        assert presentation.design_template_id == template.id
        assert presentation.variables["--card-radius"] == "0.5rem"
        assert presentation.variables["--button-radius"] == "9999px"
        assert presentation.variables["--hero-text-align"] == "center"

    def test_idempotent(self, presentation):
        template = DESIGN_TEMPLATES[3]
        apply_design_template(presentation, template)
        first = presentation.snapshot()

        apply_design_template(presentation, template)
        assert presentation.snapshot() == first

    def test_switching_overwrites_previous(self, presentation):
        apply_design_template(presentation, DESIGN_TEMPLATES[0])
        apply_design_template(presentation, DESIGN_TEMPLATES[2])

        fresh = PresentationState()
        apply_design_template(fresh, DESIGN_TEMPLATES[2])
        assert presentation.snapshot() == fresh.snapshot()


class TestApplyWebsiteTemplate:

    def test_sets_structure_variables(self, presentation):
        template = WEBSITE_TEMPLATES[2]
        apply_website_template(presentation, template)

        assert presentation.website_template_id == "dynamic-interactive"
        assert presentation.variables["--website-navigation"] == "side"

    def test_idempotent(self, presentation):
        apply_website_template(presentation, WEBSITE_TEMPLATES[1])
        first = presentation.snapshot()
        apply_website_template(presentation, WEBSITE_TEMPLATES[1])
        assert presentation.snapshot() == first

    def test_css_block(self, presentation):
        apply_website_template(presentation, WEBSITE_TEMPLATES[0])
        css = presentation.to_css()
        assert css.startswith(":root {")
        assert "--website-layout: standard;" in css


class TestThemeRegistry:

    def test_one_state_per_site(self):
        registry = ThemeRegistry()
        assert registry.get("site-a") is registry.get("site-a")
        assert registry.get("site-a") is not registry.get("site-b")

    def test_seed_runs_until_state_is_applied(self):
        registry = ThemeRegistry()
        calls = []

        def seed(state):
            calls.append(state)
            apply_design_template(state, DESIGN_TEMPLATES[0])
            apply_website_template(state, WEBSITE_TEMPLATES[0])

        registry.get("site-a", seed=seed)
        registry.get("site-a", seed=seed)
        assert len(calls) == 1

    def test_reset(self):
        registry = ThemeRegistry()
        state = registry.get("site-a")
        registry.reset("site-a")
        assert registry.get("site-a") is not state


class TestSyncPresentation:

    def test_settings_override_earlier_selection(self, presentation):
        apply_website_template(presentation, WEBSITE_TEMPLATES[3])

        active = sync_presentation(presentation, {"websiteTemplate": "modern-split"})

        assert active.website.id == "modern-split"
        assert presentation.website_template_id == "modern-split"
        assert presentation.design_template_id == DESIGN_TEMPLATES[0].id

    def test_missing_settings_resolve_to_first_entries(self, presentation):
        apply_design_template(presentation, DESIGN_TEMPLATES[2])

        sync_presentation(presentation, None)

        assert presentation.design_template_id == DESIGN_TEMPLATES[0].id
        assert presentation.website_template_id == WEBSITE_TEMPLATES[0].id
