from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate
from .api.v1 import v1_bp
from .web.views import web_bp
from .errors import register_error_handlers
from .dependencies import init_repositories
from flask_swagger_ui import get_swaggerui_blueprint
import click
import os


def create_app(config_name: str = "development", **overrides) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.config.update(overrides)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)

    # Register mappers before any relationship is resolved
    from .models import category, page  # noqa: F401

    init_repositories(app)

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(web_bp)
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # CLI
    # -------------------------------------------------
    @app.cli.command("init-db")
    def init_db_command():
        """Create the pages and categories tables."""
        db.create_all()
        click.echo("Initialized the database.")

    # -------------------------------------------------
    # Serve OpenAPI YAML
    # -------------------------------------------------
    @app.route("/openapi/sharer.yaml", methods=["GET"], endpoint="openapi_sharer")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "sharer_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("sharer_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/sharer.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "HTML Sharer API",
            "deepLinking": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
