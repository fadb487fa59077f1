from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from templatesite.catalog.kinds import Kind, NavigationMode
from templatesite.catalog.website import WebsiteTemplate


class LogoIcon(Kind):
    DUMBBELL = "Dumbbell"
    SPARKLES = "Sparkles"
    UTENSILS_CROSSED = "UtensilsCrossed"
    HEART = "Heart"
    STAR = "Star"
    CROWN = "Crown"
    ZAP = "Zap"
    AWARD = "Award"


# Icon name -> CSS class used by the logo partial
LOGO_ICON_CLASSES = {
    LogoIcon.DUMBBELL: "icon-dumbbell",
    LogoIcon.SPARKLES: "icon-sparkles",
    LogoIcon.UTENSILS_CROSSED: "icon-utensils-crossed",
    LogoIcon.HEART: "icon-heart",
    LogoIcon.STAR: "icon-star",
    LogoIcon.CROWN: "icon-crown",
    LogoIcon.ZAP: "icon-zap",
    LogoIcon.AWARD: "icon-award",
}

DEFAULT_CHROME = "bg-white/95 backdrop-blur-sm border-b border-gray-200"

CHROME_BY_NAVIGATION = {
    NavigationMode.FLOATING: "header-floating",
    NavigationMode.OVERLAY: "header-overlay",
}


class MobileMenu:
    """Open/closed state of the small-screen navigation menu."""

    def __init__(self, is_open: bool = False):
        self.is_open = is_open

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def navigate(self, href: str) -> str:
        # Following a link always closes the menu
        self.is_open = False
        return href


@dataclass
class Logo:
    kind: str  # image | icon
    image_url: Optional[str] = None
    icon: LogoIcon = LogoIcon.DUMBBELL

    @property
    def icon_class(self) -> str:
        return LOGO_ICON_CLASSES.get(self.icon, LOGO_ICON_CLASSES[LogoIcon.DUMBBELL])


@dataclass
class HeaderView:
    chrome_class: str
    site_name: str
    logo: Optional[Logo]
    nav_items: List[Dict[str, Any]] = field(default_factory=list)
    menu_open: bool = False
    loading: bool = False


def visible_items(nav_items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [item for item in nav_items if item.get("visible") is not False]


def resolve_logo(settings: Optional[Dict[str, Any]]) -> Logo:
    settings = settings or {}
    image_url = settings.get("logoImageUrl")

    if settings.get("logoType") == "image" and image_url:
        return Logo(kind="image", image_url=image_url)

    return Logo(kind="icon", icon=LogoIcon.coerce(settings.get("logoIcon")))


def build_header(
    nav_items: List[Dict[str, Any]],
    settings: Optional[Dict[str, Any]],
    template: WebsiteTemplate,
    menu: Optional[MobileMenu] = None,
    *,
    loading: bool = False,
    default_site_name: str = "",
) -> HeaderView:
    if loading:
        return HeaderView(chrome_class=DEFAULT_CHROME, site_name="", logo=None, loading=True)

    navigation = NavigationMode.coerce(template.structure.navigation)
    settings = settings or {}

    return HeaderView(
        chrome_class=CHROME_BY_NAVIGATION.get(navigation, DEFAULT_CHROME),
        site_name=settings.get("siteName") or default_site_name,
        logo=resolve_logo(settings),
        nav_items=visible_items(nav_items),
        menu_open=bool(menu and menu.is_open),
    )
