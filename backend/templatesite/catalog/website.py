"""
Website (structure) templates: page arrangement and navigation mode.
"""
from __future__ import annotations

from dataclasses import dataclass

from .kinds import (
    HeroArrangement,
    HomeLayout,
    LayoutKind,
    NavigationMode,
    WebsiteCategory,
)
from .lookup import lookup_by_id


@dataclass(frozen=True)
class WebsiteStructure:
    layout: LayoutKind
    navigation: NavigationMode
    hero_style: HeroArrangement


@dataclass(frozen=True)
class HomePageLayout:
    layout: HomeLayout
    grid_style: str = "standard"


@dataclass(frozen=True)
class WebsitePages:
    home: HomePageLayout


@dataclass(frozen=True)
class WebsiteTemplate:
    id: str
    name: str
    description: str
    preview: str
    category: WebsiteCategory
    structure: WebsiteStructure
    pages: WebsitePages


WEBSITE_TEMPLATES: tuple[WebsiteTemplate, ...] = (
    WebsiteTemplate(
        id="classic-business",
        name="Classic Business",
        description="Top navigation with a linear stack of content sections.",
        preview="🏢",
        category=WebsiteCategory.BUSINESS,
        structure=WebsiteStructure(LayoutKind.STANDARD, NavigationMode.TOP, HeroArrangement.FULLSCREEN),
        pages=WebsitePages(home=HomePageLayout(HomeLayout.STANDARD, "three-column")),
    ),
    WebsiteTemplate(
        id="modern-split",
        name="Modern Split",
        description="Two-pane hero with the rest of the page in a masonry grid.",
        preview="🪟",
        category=WebsiteCategory.MODERN,
        structure=WebsiteStructure(LayoutKind.SPLIT, NavigationMode.FLOATING, HeroArrangement.SPLIT),
        pages=WebsitePages(home=HomePageLayout(HomeLayout.SPLIT_HERO_GRID, "masonry")),
    ),
    WebsiteTemplate(
        id="dynamic-interactive",
        name="Dynamic Interactive",
        description="Full-viewport sections with side dot navigation.",
        preview="🎯",
        category=WebsiteCategory.CREATIVE,
        structure=WebsiteStructure(LayoutKind.FULLSCREEN, NavigationMode.SIDE, HeroArrangement.PARALLAX),
        pages=WebsitePages(home=HomePageLayout(HomeLayout.FULLSCREEN_SECTIONS, "tabbed")),
    ),
    WebsiteTemplate(
        id="editorial-magazine",
        name="Editorial Magazine",
        description="Overlay navigation and a magazine-style masonry grid.",
        preview="📰",
        category=WebsiteCategory.CLASSIC,
        structure=WebsiteStructure(LayoutKind.MAGAZINE, NavigationMode.OVERLAY, HeroArrangement.VIDEO),
        pages=WebsitePages(home=HomePageLayout(HomeLayout.MAGAZINE_STYLE, "masonry")),
    ),
    WebsiteTemplate(
        id="minimal-focus",
        name="Minimal Focus",
        description="Large type, a single call to action and a quiet content column.",
        preview="◻️",
        category=WebsiteCategory.MINIMAL,
        structure=WebsiteStructure(LayoutKind.STANDARD, NavigationMode.TOP, HeroArrangement.MINIMAL),
        pages=WebsitePages(home=HomePageLayout(HomeLayout.HERO_INTRO_STATS_TESTIMONIALS, "single-column")),
    ),
)


def get_website_template_by_id(template_id: str | None) -> WebsiteTemplate:
    return lookup_by_id(WEBSITE_TEMPLATES, template_id)
