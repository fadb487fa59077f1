"""
Push template descriptors into a PresentationState.

Both functions only overwrite keys derived from the descriptor, so applying
the same descriptor again leaves the state unchanged.
"""
from __future__ import annotations

from templatesite.catalog.design import DesignTemplate
from templatesite.catalog.kinds import (
    ButtonStyle,
    CardStyle,
    HeroStyle,
    Radius,
    Shadow,
    Spacing,
    TextAlignment,
    LayoutKind,
    NavigationMode,
    HeroArrangement,
)
from templatesite.catalog.website import WebsiteTemplate
from .state import PresentationState

HERO_BACKGROUNDS = {
    HeroStyle.GRADIENT: "linear-gradient(90deg, #60a5fa, #a855f7)",
    HeroStyle.MINIMAL: "#e5e7eb",
    HeroStyle.ANIMATED: "linear-gradient(90deg, #f87171, #f97316)",
    HeroStyle.GEOMETRIC: "linear-gradient(135deg, #f472b6, #a855f7)",
    HeroStyle.SPLIT: "linear-gradient(90deg, #4ade80, #3b82f6)",
    HeroStyle.FLOATING: "linear-gradient(90deg, #818cf8, #06b6d4)",
}
DEFAULT_HERO_BACKGROUND = "#1f2937"

RADII = {
    Radius.NONE: "0",
    Radius.SMALL: "0.125rem",
    Radius.LARGE: "0.5rem",
    Radius.FULL: "9999px",
    Radius.ORGANIC: "1rem 0 1rem 0",
}
DEFAULT_RADIUS = "0.375rem"

SHADOWS = {
    Shadow.NONE: "none",
    Shadow.SMALL: "0 1px 2px rgba(0, 0, 0, 0.05)",
    Shadow.LARGE: "0 10px 15px rgba(0, 0, 0, 0.1)",
    Shadow.NEON: "0 10px 15px rgba(59, 130, 246, 0.25)",
    Shadow.SOFT: "0 20px 25px rgba(209, 213, 219, 0.5)",
}
DEFAULT_SHADOW = "0 4px 6px rgba(0, 0, 0, 0.1)"

CARD_SURFACES = {
    CardStyle.OUTLINED: "transparent",
    CardStyle.GLASS: "rgba(255, 255, 255, 0.8)",
    CardStyle.NEUMORPHISM: "#f3f4f6",
}
DEFAULT_CARD_SURFACE = "#ffffff"

BUTTON_BACKGROUNDS = {
    ButtonStyle.FILLED: "var(--theme-primary)",
    ButtonStyle.GRADIENT: "linear-gradient(90deg, #3b82f6, #a855f7)",
    ButtonStyle.OUTLINED: "transparent",
    ButtonStyle.NEON: "var(--theme-primary)",
    ButtonStyle.GLASS: "rgba(59, 130, 246, 0.8)",
    ButtonStyle.NEUMORPHISM: "#e5e7eb",
}
DEFAULT_BUTTON_BACKGROUND = "transparent"

SECTION_PADDING = {
    Spacing.COMPACT: "3rem",
    Spacing.SPACIOUS: "8rem",
}
DEFAULT_SECTION_PADDING = "5rem"


def apply_design_template(state: PresentationState, template: DesignTemplate) -> None:
    hero = template.components.hero
    cards = template.components.cards
    buttons = template.components.buttons
    sections = template.components.sections

    state.set_variable("--hero-background", HERO_BACKGROUNDS.get(hero.style, DEFAULT_HERO_BACKGROUND))
    state.set_variable("--hero-text-align", TextAlignment.coerce(hero.text_alignment).value)

    state.set_variable("--card-radius", RADII.get(cards.border_radius, DEFAULT_RADIUS))
    state.set_variable("--card-shadow", SHADOWS.get(cards.shadow, DEFAULT_SHADOW))
    state.set_variable("--card-surface", CARD_SURFACES.get(cards.style, DEFAULT_CARD_SURFACE))

    state.set_variable("--button-radius", RADII.get(buttons.border_radius, DEFAULT_RADIUS))
    state.set_variable("--button-background", BUTTON_BACKGROUNDS.get(buttons.style, DEFAULT_BUTTON_BACKGROUND))

    state.set_variable("--section-padding", SECTION_PADDING.get(sections.spacing, DEFAULT_SECTION_PADDING))

    state.design_template_id = template.id


def apply_website_template(state: PresentationState, template: WebsiteTemplate) -> None:
    state.set_variable("--website-layout", LayoutKind.coerce(template.structure.layout).value)
    state.set_variable("--website-navigation", NavigationMode.coerce(template.structure.navigation).value)
    state.set_variable("--website-hero", HeroArrangement.coerce(template.structure.hero_style).value)
    state.set_variable("--home-grid", template.pages.home.grid_style)

    state.website_template_id = template.id
