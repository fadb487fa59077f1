# templatesite/api/v1/admin.py
from flask import g, request, jsonify, current_app
from flask_jwt_extended import jwt_required
from templatesite.utils.decorators import site_required, roles_required
from templatesite.application.panels import design_panel, website_panel
from templatesite.application.site import seed_presentation
from templatesite.catalog.design import DESIGN_TEMPLATES
from templatesite.catalog.website import WEBSITE_TEMPLATES
from templatesite.application.cms.update_page_content import update_page_content
from templatesite.application.cms.seed_site import seed_site
from templatesite.stores.settings import SqlSettingsStore
from templatesite.normalizers.page import normalize_page
from templatesite.models.page import Page
from . import v1_bp

PANEL_FACTORIES = {
    "design": design_panel,
    "website": website_panel,
}

PANEL_TEMPLATE_IDS = {
    "design": frozenset(t.id for t in DESIGN_TEMPLATES),
    "website": frozenset(t.id for t in WEBSITE_TEMPLATES),
}


def _mount_panel(kind):
    site = g.current_site
    store = SqlSettingsStore(site.id)
    registry = current_app.extensions["theme_registry"]

    state = registry.get(
        site.id,
        seed=lambda s: seed_presentation(s, store.get_site_settings()),
    )

    panel = PANEL_FACTORIES[kind](store, state)
    panel.mount()
    return panel


# ------------------------
# Template panels
# ------------------------

@v1_bp.route("/admin/templates/<kind>", methods=["GET"])
@jwt_required()
@site_required
@roles_required("admin")
def get_template_panel(kind):
    if kind not in PANEL_FACTORIES:
        return jsonify({"error": "Unknown template panel"}), 404

    panel = _mount_panel(kind)
    return jsonify(panel.to_view()), 200


@v1_bp.route("/admin/templates/<kind>", methods=["PUT"])
@jwt_required()
@site_required
@roles_required("admin")
def select_template(kind):
    if kind not in PANEL_FACTORIES:
        return jsonify({"error": "Unknown template panel"}), 404

    data = request.get_json(silent=True) or {}
    template_id = data.get("template_id")
    if not template_id:
        return jsonify({"error": "template_id is required"}), 400
    if not isinstance(template_id, str) or template_id not in PANEL_TEMPLATE_IDS[kind]:
        return jsonify({"error": f"Unknown {kind} template: {template_id}"}), 400

    panel = _mount_panel(kind)
    saved = panel.select(template_id)
    panel.dispose()

    # The template stays applied even when saving failed
    return jsonify(panel.to_view()), 200 if saved else 502


# ------------------------
# Settings
# ------------------------

@v1_bp.route("/admin/settings", methods=["GET"])
@jwt_required()
@site_required
@roles_required("admin")
def get_settings():
    settings = SqlSettingsStore(g.current_site.id).get_site_settings()
    return jsonify(settings or {}), 200


# ------------------------
# Content
# ------------------------

@v1_bp.route("/admin/pages/<page_key>", methods=["GET"])
@jwt_required()
@site_required
@roles_required("admin")
def get_page_content(page_key):
    page = Page.query.filter_by(
        site_id=g.current_site.id,
        slug=page_key
    ).first_or_404()

    return jsonify(normalize_page(page, admin=True)), 200


@v1_bp.route("/admin/pages/<page_key>", methods=["PUT"])
@jwt_required()
@site_required
@roles_required("admin")
def put_page_content(page_key):
    data = request.get_json(silent=True) or {}

    page = update_page_content(
        site_id=g.current_site.id,
        page_key=page_key,
        content=data.get("content") or {},
        sections=data.get("sections"),
    )

    return jsonify(normalize_page(page, admin=True)), 200


@v1_bp.route("/admin/seed", methods=["POST"])
@jwt_required()
@site_required
@roles_required("admin")
def seed():
    site = g.current_site

    try:
        page = seed_site(site_id=site.id, site_name=site.name)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 409

    current_app.logger.info(f"Seeded default content for site {site.slug}")
    return jsonify({"id": page.id, "message": "Site content initialized"}), 201
