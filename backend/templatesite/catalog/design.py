"""
Design templates: visual styling of the shared components.
"""
from __future__ import annotations

from dataclasses import dataclass

from .kinds import (
    ButtonStyle,
    CardStyle,
    DesignCategory,
    HeroStyle,
    Radius,
    Shadow,
    Spacing,
    TextAlignment,
)
from .lookup import lookup_by_id


@dataclass(frozen=True)
class HeroDesign:
    style: HeroStyle
    text_alignment: TextAlignment = TextAlignment.CENTER


@dataclass(frozen=True)
class CardDesign:
    style: CardStyle
    border_radius: Radius = Radius.MEDIUM
    shadow: Shadow = Shadow.MEDIUM


@dataclass(frozen=True)
class ButtonDesign:
    style: ButtonStyle
    border_radius: Radius = Radius.MEDIUM


@dataclass(frozen=True)
class SectionDesign:
    spacing: Spacing = Spacing.NORMAL


@dataclass(frozen=True)
class DesignComponents:
    hero: HeroDesign
    cards: CardDesign
    buttons: ButtonDesign
    sections: SectionDesign


@dataclass(frozen=True)
class DesignTemplate:
    id: str
    name: str
    description: str
    preview: str
    category: DesignCategory
    components: DesignComponents


DESIGN_TEMPLATES: tuple[DesignTemplate, ...] = (
    DesignTemplate(
        id="modern-gradient",
        name="Modern Gradient",
        description="Vibrant gradients, glass cards and rounded buttons.",
        preview="🌈",
        category=DesignCategory.MODERN,
        components=DesignComponents(
            hero=HeroDesign(HeroStyle.GRADIENT, TextAlignment.CENTER),
            cards=CardDesign(CardStyle.GLASS, Radius.LARGE, Shadow.LARGE),
            buttons=ButtonDesign(ButtonStyle.GRADIENT, Radius.FULL),
            sections=SectionDesign(Spacing.SPACIOUS),
        ),
    ),
    DesignTemplate(
        id="classic-elegant",
        name="Classic Elegant",
        description="Timeless serif headings with outlined cards.",
        preview="🏛️",
        category=DesignCategory.CLASSIC,
        components=DesignComponents(
            hero=HeroDesign(HeroStyle.DARK, TextAlignment.LEFT),
            cards=CardDesign(CardStyle.OUTLINED, Radius.SMALL, Shadow.SMALL),
            buttons=ButtonDesign(ButtonStyle.OUTLINED, Radius.SMALL),
            sections=SectionDesign(Spacing.NORMAL),
        ),
    ),
    DesignTemplate(
        id="minimal-clean",
        name="Minimal Clean",
        description="Plenty of whitespace, flat cards and quiet buttons.",
        preview="⚪",
        category=DesignCategory.MINIMAL,
        components=DesignComponents(
            hero=HeroDesign(HeroStyle.MINIMAL, TextAlignment.LEFT),
            cards=CardDesign(CardStyle.DEFAULT, Radius.NONE, Shadow.NONE),
            buttons=ButtonDesign(ButtonStyle.GHOST, Radius.NONE),
            sections=SectionDesign(Spacing.SPACIOUS),
        ),
    ),
    DesignTemplate(
        id="bold-energy",
        name="Bold Energy",
        description="Animated hero, neon accents and punchy buttons.",
        preview="⚡",
        category=DesignCategory.BOLD,
        components=DesignComponents(
            hero=HeroDesign(HeroStyle.ANIMATED, TextAlignment.CENTER),
            cards=CardDesign(CardStyle.TILTED, Radius.MEDIUM, Shadow.NEON),
            buttons=ButtonDesign(ButtonStyle.NEON, Radius.LARGE),
            sections=SectionDesign(Spacing.COMPACT),
        ),
    ),
    DesignTemplate(
        id="creative-geometric",
        name="Creative Geometric",
        description="Geometric shapes and organic card corners.",
        preview="🎨",
        category=DesignCategory.CREATIVE,
        components=DesignComponents(
            hero=HeroDesign(HeroStyle.GEOMETRIC, TextAlignment.RIGHT),
            cards=CardDesign(CardStyle.FLOATING, Radius.ORGANIC, Shadow.SOFT),
            buttons=ButtonDesign(ButtonStyle.GLASS, Radius.ORGANIC),
            sections=SectionDesign(Spacing.NORMAL),
        ),
    ),
    DesignTemplate(
        id="professional-soft",
        name="Professional Soft",
        description="Split hero and soft neumorphic surfaces for services businesses.",
        preview="💼",
        category=DesignCategory.PROFESSIONAL,
        components=DesignComponents(
            hero=HeroDesign(HeroStyle.SPLIT, TextAlignment.LEFT),
            cards=CardDesign(CardStyle.NEUMORPHISM, Radius.LARGE, Shadow.SOFT),
            buttons=ButtonDesign(ButtonStyle.NEUMORPHISM, Radius.MEDIUM),
            sections=SectionDesign(Spacing.NORMAL),
        ),
    ),
)


def get_design_template_by_id(template_id: str | None) -> DesignTemplate:
    return lookup_by_id(DESIGN_TEMPLATES, template_id)
