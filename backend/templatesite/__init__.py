from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.v1 import v1_bp
from .web import web_bp
from .middleware.site_middleware import site_middleware
from .errors import register_error_handlers
from .theme import ThemeRegistry
from flask_swagger_ui import get_swaggerui_blueprint
import os


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # Per-site presentation state, shared by the panels and the renderer
    app.extensions["theme_registry"] = ThemeRegistry()

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    site_middleware(app)

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(web_bp)
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC, NO SITE)
    # -------------------------------------------------
    @app.route("/openapi/site.yaml", methods=["GET"], endpoint="openapi_site")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "site_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("site_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/site.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Template Site API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
