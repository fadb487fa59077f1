"""
Closed vocabularies for template descriptor fields.

Every discrete "kind" field on a template is one of these enums. Values read
from storage or request bodies go through ``coerce`` so an unrecognised value
falls back to the enum's documented default member instead of failing.
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class Kind(str, Enum):
    """str-valued enum with a fallback member."""

    @classmethod
    def default(cls) -> "Kind":
        return next(iter(cls))

    @classmethod
    def coerce(cls, value: Any) -> "Kind":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.default()


# -------------------------------------------------
# Design template kinds
# -------------------------------------------------

class DesignCategory(Kind):
    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"
    BOLD = "bold"
    CREATIVE = "creative"
    PROFESSIONAL = "professional"


class HeroStyle(Kind):
    GRADIENT = "gradient"
    MINIMAL = "minimal"
    ANIMATED = "animated"
    GEOMETRIC = "geometric"
    SPLIT = "split"
    FLOATING = "floating"
    DARK = "dark"


class TextAlignment(Kind):
    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"


class CardStyle(Kind):
    DEFAULT = "default"
    OUTLINED = "outlined"
    GLASS = "glass"
    NEUMORPHISM = "neumorphism"
    FLOATING = "floating"
    TILTED = "tilted"


class Radius(Kind):
    MEDIUM = "medium"
    NONE = "none"
    SMALL = "small"
    LARGE = "large"
    FULL = "full"
    ORGANIC = "organic"


class Shadow(Kind):
    MEDIUM = "medium"
    NONE = "none"
    SMALL = "small"
    LARGE = "large"
    NEON = "neon"
    SOFT = "soft"


class ButtonStyle(Kind):
    FILLED = "filled"
    GRADIENT = "gradient"
    OUTLINED = "outlined"
    NEON = "neon"
    GLASS = "glass"
    NEUMORPHISM = "neumorphism"
    GHOST = "ghost"


class Spacing(Kind):
    NORMAL = "normal"
    COMPACT = "compact"
    SPACIOUS = "spacious"


# -------------------------------------------------
# Website (structure) template kinds
# -------------------------------------------------

class WebsiteCategory(Kind):
    BUSINESS = "business"
    CREATIVE = "creative"
    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"


class LayoutKind(Kind):
    STANDARD = "standard"
    SIDEBAR = "sidebar"
    SPLIT = "split"
    MAGAZINE = "magazine"
    FULLSCREEN = "fullscreen"


class NavigationMode(Kind):
    TOP = "top"
    SIDE = "side"
    FLOATING = "floating"
    OVERLAY = "overlay"
    BOTTOM = "bottom"


class HeroArrangement(Kind):
    STANDARD = "standard"
    FULLSCREEN = "fullscreen"
    SPLIT = "split"
    MINIMAL = "minimal"
    VIDEO = "video"
    PARALLAX = "parallax"


class HomeLayout(Kind):
    STANDARD = "standard"
    SPLIT_HERO_GRID = "split-hero-grid"
    FULLSCREEN_SECTIONS = "fullscreen-sections"
    MAGAZINE_STYLE = "magazine-style"
    HERO_INTRO_STATS_TESTIMONIALS = "hero-intro-stats-testimonials"
