"""
Category badge presentation for the admin template panels.
"""
from __future__ import annotations

from typing import Any

from .kinds import DesignCategory, WebsiteCategory

DEFAULT_BADGE_COLOR = "bg-gray-100 text-gray-800"
DEFAULT_BADGE_ICON = "palette"

DESIGN_CATEGORY_BADGES: dict[DesignCategory, tuple[str, str]] = {
    DesignCategory.MODERN: ("bg-blue-100 text-blue-800", "sparkles"),
    DesignCategory.CLASSIC: ("bg-purple-100 text-purple-800", "square"),
    DesignCategory.MINIMAL: ("bg-gray-100 text-gray-800", "circle"),
    DesignCategory.BOLD: ("bg-red-100 text-red-800", "zap"),
    DesignCategory.CREATIVE: ("bg-pink-100 text-pink-800", "palette"),
    DesignCategory.PROFESSIONAL: ("bg-green-100 text-green-800", "square"),
}

WEBSITE_CATEGORY_BADGES: dict[WebsiteCategory, str] = {
    WebsiteCategory.BUSINESS: "bg-blue-100 text-blue-800",
    WebsiteCategory.CREATIVE: "bg-purple-100 text-purple-800",
    WebsiteCategory.MODERN: "bg-green-100 text-green-800",
    WebsiteCategory.CLASSIC: "bg-amber-100 text-amber-800",
    WebsiteCategory.MINIMAL: "bg-gray-100 text-gray-800",
}


def category_badge(category: Any) -> dict[str, Any]:
    if isinstance(category, DesignCategory):
        color, icon = DESIGN_CATEGORY_BADGES.get(category, (DEFAULT_BADGE_COLOR, DEFAULT_BADGE_ICON))
        return {"label": category.value, "color": color, "icon": icon}

    if isinstance(category, WebsiteCategory):
        return {
            "label": category.value,
            "color": WEBSITE_CATEGORY_BADGES.get(category, DEFAULT_BADGE_COLOR),
            "icon": None,
        }

    return {"label": str(category), "color": DEFAULT_BADGE_COLOR, "icon": DEFAULT_BADGE_ICON}
