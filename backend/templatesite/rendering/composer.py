"""
Home page composition.

``compose_home`` turns loaded page content plus the active website template
into a tree of RenderNodes. Which arrangement is used depends on the
template's home layout tag; an unknown tag gets the standard stack.

Rules shared by every arrangement:
- a named block is rendered only when its field is set on the content
- testimonials are always rendered, they load their own data
- dynamic sections are rendered once per id, in their stored order
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from templatesite.catalog.kinds import HomeLayout, NavigationMode
from templatesite.catalog.website import WebsiteTemplate
from .content import PageContentResult
from .nodes import RenderNode


class HomeStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    READY = "ready"


@dataclass
class HomeView:
    status: HomeStatus
    template_id: str
    main_class: str
    nodes: List[RenderNode] = field(default_factory=list)


FALLBACK_MESSAGES = {
    HomeStatus.ERROR: (
        "Error Loading Content",
        "There was an error loading the page content. Please check your database configuration.",
    ),
    HomeStatus.EMPTY: (
        "No Content Available",
        "Please initialize the default data from the admin panel to see the website content.",
    ),
}

OVERLAY_LINKS = (
    {"href": "/", "label": "Home"},
    {"href": "/about", "label": "About"},
    {"href": "/services", "label": "Services"},
    {"href": "/why", "label": "Why Us"},
    {"href": "/contact", "label": "Contact"},
    {"href": "/join", "label": "Join"},
)

Content = Dict[str, Any]
Sections = List[Dict[str, Any]]


# -------------------------------------------------
# Building blocks
# -------------------------------------------------

def _block(content: Content, name: str) -> Optional[RenderNode]:
    data = content.get(name)
    if data is None:
        return None
    return RenderNode(name, data=data, key=name)


def _testimonials() -> RenderNode:
    return RenderNode("testimonials", key="testimonials")


def _dynamic_sections(sections: Sections) -> List[RenderNode]:
    nodes = []
    seen = set()

    for index, section in enumerate(sections or []):
        section_id = section.get("id")
        key = str(section_id) if section_id is not None else f"index-{index}"
        if key in seen:
            continue
        seen.add(key)
        nodes.append(RenderNode("dynamic", data=section, key=f"section-{key}"))

    return nodes


def _present(nodes: List[Optional[RenderNode]]) -> List[RenderNode]:
    return [node for node in nodes if node is not None]


def _secondary_blocks(content: Content, sections: Sections) -> List[RenderNode]:
    """Blocks after the hero, in the order shared by grid and minimal layouts."""
    return _present([
        _block(content, "intro"),
        _block(content, "services"),
        _block(content, "features"),
        _testimonials(),
        _block(content, "stats"),
        *_dynamic_sections(sections),
        _block(content, "gallery"),
        _block(content, "cta"),
    ])


def _masonry(children: List[RenderNode], css_class: str) -> RenderNode:
    items = [
        RenderNode("masonry-item", key=child.key, css_class="masonry-item", children=[child])
        for child in children
    ]
    return RenderNode("masonry", css_class=css_class, children=items)


def _navigation(template: WebsiteTemplate) -> NavigationMode:
    return NavigationMode.coerce(template.structure.navigation)


# -------------------------------------------------
# Composition strategies
# -------------------------------------------------

def compose_standard(content: Content, sections: Sections, template: WebsiteTemplate) -> List[RenderNode]:
    return _present([
        _block(content, "hero"),
        _block(content, "intro"),
        _block(content, "services"),
        _block(content, "features"),
        _block(content, "stats"),
        *_dynamic_sections(sections),
        _testimonials(),
        _block(content, "gallery"),
        _block(content, "cta"),
    ])


def compose_split_hero(content: Content, sections: Sections, template: WebsiteTemplate) -> List[RenderNode]:
    nodes = []

    hero = content.get("hero")
    if hero is not None:
        nodes.append(RenderNode("split-hero", data=hero, key="hero", css_class="hero-split-container"))

    nodes.append(_masonry(_secondary_blocks(content, sections), "masonry-container"))
    return nodes


def compose_fullscreen(content: Content, sections: Sections, template: WebsiteTemplate) -> List[RenderNode]:
    blocks = _present([_block(content, "hero")]) + _secondary_blocks(content, sections)

    wrapped = [
        RenderNode(
            "fullscreen-section",
            key=block.key,
            anchor=block.key,
            css_class="fullscreen-section",
            children=[block],
        )
        for block in blocks
    ]

    nodes = []
    side_nav = _navigation(template) == NavigationMode.SIDE
    if side_nav:
        nodes.append(RenderNode(
            "side-nav",
            data=[f"#{section.anchor}" for section in wrapped],
            css_class="sidebar-nav",
        ))

    nodes.append(RenderNode(
        "group",
        css_class="main-content" if side_nav else None,
        children=wrapped,
    ))
    return nodes


def compose_magazine(content: Content, sections: Sections, template: WebsiteTemplate) -> List[RenderNode]:
    nodes = []

    if _navigation(template) == NavigationMode.OVERLAY:
        nodes.append(RenderNode("overlay-nav", data=list(OVERLAY_LINKS), css_class="overlay-nav"))

    hero = _block(content, "hero")
    if hero is not None:
        nodes.append(hero)

    nodes.append(_masonry(_secondary_blocks(content, sections), "magazine-content"))
    return nodes


def compose_minimal(content: Content, sections: Sections, template: WebsiteTemplate) -> List[RenderNode]:
    nodes = []

    hero = content.get("hero")
    if hero is not None:
        nodes.append(RenderNode("minimal-hero", data=hero, key="hero", css_class="minimal-hero"))

    nodes.append(RenderNode(
        "group",
        css_class="minimal-content",
        children=_secondary_blocks(content, sections),
    ))
    return nodes


Strategy = Callable[[Content, Sections, WebsiteTemplate], List[RenderNode]]

COMPOSITION_STRATEGIES: Dict[HomeLayout, Strategy] = {
    HomeLayout.STANDARD: compose_standard,
    HomeLayout.SPLIT_HERO_GRID: compose_split_hero,
    HomeLayout.FULLSCREEN_SECTIONS: compose_fullscreen,
    HomeLayout.MAGAZINE_STYLE: compose_magazine,
    HomeLayout.HERO_INTRO_STATS_TESTIMONIALS: compose_minimal,
}


def select_strategy(template: WebsiteTemplate) -> Strategy:
    layout = HomeLayout.coerce(template.pages.home.layout)
    return COMPOSITION_STRATEGIES.get(layout, compose_standard)


# -------------------------------------------------
# Entry point
# -------------------------------------------------

def _skeleton() -> List[RenderNode]:
    return [
        RenderNode("skeleton-hero", key="skeleton-hero"),
        RenderNode("skeleton-cards", data=[1, 2, 3], key="skeleton-cards"),
    ]


def _fallback(status: HomeStatus, admin_url: str) -> List[RenderNode]:
    title, message = FALLBACK_MESSAGES[status]
    return [RenderNode(
        "fallback",
        key=status.value,
        data={"title": title, "message": message, "admin_url": admin_url},
    )]


def compose_home(
    result: PageContentResult,
    template: WebsiteTemplate,
    *,
    admin_url: str = "/admin",
) -> HomeView:
    main_class = "" if _navigation(template) == NavigationMode.SIDE else "pt-16"

    if result.loading:
        return HomeView(HomeStatus.LOADING, template.id, "pt-16", _skeleton())

    if result.error is not None:
        return HomeView(HomeStatus.ERROR, template.id, "pt-16", _fallback(HomeStatus.ERROR, admin_url))

    if not result.content:
        return HomeView(HomeStatus.EMPTY, template.id, "pt-16", _fallback(HomeStatus.EMPTY, admin_url))

    strategy = select_strategy(template)
    nodes = strategy(result.content, result.sections, template)

    return HomeView(HomeStatus.READY, template.id, main_class, nodes)
