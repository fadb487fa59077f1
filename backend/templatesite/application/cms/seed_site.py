from typing import Any, Dict
from templatesite.extensions import db
from templatesite.models.page import Page
from templatesite.models.navigation_item import NavigationItem
from templatesite.stores.settings import SqlSettingsStore
from templatesite.utils.audit import log_action
from templatesite.utils.transaction import transactional
from .update_page_content import update_page_content


DEFAULT_HOME_CONTENT: Dict[str, Any] = {
    "hero": {
        "title": "Transform Your Life",
        "subtitle": "Start Today",
        "description": "Professional guidance and a community that keeps you moving.",
        "primaryButtonText": "Get Started",
        "primaryButtonLink": "/join",
        "secondaryButtonText": "Learn More",
        "secondaryButtonLink": "/about",
        "backgroundImage": "/static/img/hero.jpg",
    },
    "intro": {
        "title": "Welcome",
        "description": "We help people reach their goals with programs built around them.",
    },
    "services": {
        "title": "Our Services",
        "items": [
            {"title": "Personal Training", "description": "One-to-one sessions."},
            {"title": "Group Classes", "description": "Train together."},
            {"title": "Nutrition", "description": "Plans that fit your week."},
        ],
    },
    "features": {
        "title": "Why Choose Us",
        "items": [
            {"title": "Certified Coaches", "description": "Experienced and accredited."},
            {"title": "Flexible Hours", "description": "Open early, close late."},
        ],
    },
    "stats": {
        "items": [
            {"value": "500+", "label": "Members"},
            {"value": "15", "label": "Coaches"},
            {"value": "10", "label": "Years"},
        ],
    },
    "cta": {
        "title": "Ready to start?",
        "buttonText": "Join Now",
        "buttonLink": "/join",
    },
}

DEFAULT_NAVIGATION = (
    {"href": "/", "label": "Home"},
    {"href": "/about", "label": "About"},
    {"href": "/services", "label": "Services"},
    {"href": "/contact", "label": "Contact"},
)

DEFAULT_SETTINGS = {
    "logoType": "icon",
    "logoIcon": "Dumbbell",
}


def seed_site(*, site_id: str, site_name: str) -> Page:
    """
    Initialise default home content, navigation and branding for a site.

    Edge cases handled:
    - Home page already present: refuse instead of overwriting content
    - Existing settings keep their values, only missing keys are filled
    """
    if Page.query.filter_by(site_id=site_id, slug="home").first():
        raise ValueError("Site content is already initialized")

    page = update_page_content(
        site_id=site_id,
        page_key="home",
        content=DEFAULT_HOME_CONTENT,
        sections=[],
    )

    with transactional():
        if not NavigationItem.query.filter_by(site_id=site_id).first():
            for order, data in enumerate(DEFAULT_NAVIGATION, start=1):
                item = NavigationItem()
                item.site_id = site_id
                item.href = data["href"]
                item.label = data["label"]
                item.order = order
                db.session.add(item)

        log_action(
            action="site.seed",
            entity_type="site",
            entity_id=site_id,
            payload={"page_id": page.id},
        )

    store = SqlSettingsStore(site_id)
    current = store.get_site_settings() or {}
    defaults = {**DEFAULT_SETTINGS, "siteName": site_name}
    store.update_site_settings({**defaults, **current})

    return page
