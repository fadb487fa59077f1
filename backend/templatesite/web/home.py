# templatesite/web/home.py
from flask import g, request, render_template, current_app
from templatesite.application.site import (
    active_from_state,
    seed_presentation,
    sync_presentation,
)
from templatesite.rendering import HomeStatus, MobileMenu, build_header, compose_home
from templatesite.stores.content import load_navigation, load_page_content
from templatesite.stores.exceptions import StoreError
from templatesite.stores.settings import SqlSettingsStore
from . import web_bp


def _load_settings(site_id):
    """Return ``(settings, loaded)``; ``loaded`` is False when the read failed."""
    try:
        return SqlSettingsStore(site_id).get_site_settings(), True
    except StoreError as exc:
        current_app.logger.error(f"Failed to load settings for site {site_id}: {exc}")
        return None, False


def _load_navigation(site_id):
    try:
        return load_navigation(site_id)
    except StoreError as exc:
        current_app.logger.error(f"Failed to load navigation for site {site_id}: {exc}")
        return []


@web_bp.route("/", methods=["GET"])
def home():
    site = g.current_site
    settings, loaded = _load_settings(site.id)

    registry = current_app.extensions["theme_registry"]
    if loaded:
        state = registry.get(site.id)
        active = sync_presentation(state, settings)
    else:
        # Keep rendering with the last applied templates until settings are readable again
        state = registry.get(site.id, seed=lambda s: seed_presentation(s, None))
        active = active_from_state(state)

    menu = MobileMenu(is_open=request.args.get("menu") == "open")
    header = build_header(
        _load_navigation(site.id),
        settings,
        active.website,
        menu,
        default_site_name=site.name or current_app.config.get("DEFAULT_SITE_NAME", ""),
    )

    view = compose_home(
        load_page_content(site.id, "home"),
        active.website,
        admin_url=current_app.config.get("ADMIN_URL", "/admin"),
    )

    status = 503 if view.status == HomeStatus.ERROR else 200
    return render_template(
        "home.html",
        view=view,
        header=header,
        theme_css=state.to_css(),
        design=active.design,
    ), status
