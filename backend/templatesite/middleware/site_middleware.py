from flask import request, g, jsonify, current_app
from templatesite.models.site import Site

# Endpoints served without a site context
PUBLIC_ENDPOINTS = {"static", "openapi_site", "v1.health_check"}
PUBLIC_BLUEPRINTS = {"swagger_ui"}


def site_middleware(app):
    @app.before_request
    def load_site():
        if request.endpoint in PUBLIC_ENDPOINTS or request.blueprint in PUBLIC_BLUEPRINTS:
            return None

        site_id = request.headers.get('X-Site-ID')
        if site_id:
            site = Site.query.filter_by(id=site_id, is_active=True).first()
        else:
            slug = current_app.config.get("DEFAULT_SITE_SLUG")
            if not slug:
                return jsonify({"error": "X-Site-ID header is missing"}), 400
            site = Site.query.filter_by(slug=slug, is_active=True).first()

        if not site:
            return jsonify({"error": "Invalid site"}), 404

        # Attach site to global context
        g.current_site = site
