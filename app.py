"""
ICE vs BEV Lifecycle CO2 Comparator
Flask application factory.

Serves the comparison page (Jinja2 template) and the REST API for the
emissions engine via registered LifecycleService instances.

Usage:
    python app.py              # Development server on http://localhost:5000
    flask run                  # Same, via Flask CLI
"""

__version__ = "0.1.0"

import logging

from flask import Flask, redirect, render_template, request, url_for

from config import DefaultConfig
from emissions.errors import EmissionsError
from emissions.export import format_distance
from emissions.report import summary
from emissions.services import ServiceRegistry
from emissions.services.comparison import ComparisonService
from emissions.share import encode_query, known_fields

log = logging.getLogger(__name__)


def create_registry():
    """Build and populate the service registry."""
    registry = ServiceRegistry()
    registry.register(ComparisonService())
    return registry


def create_app(config=None):
    """
    Application factory.

    Parameters
    ----------
    config : mapping, optional
        Overrides applied after DefaultConfig and CO2CMP_* env vars.
    """
    app = Flask(
        __name__,
        template_folder="templates",
    )
    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env("CO2CMP")
    if config:
        app.config.update(config)

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    # Make app version available to all templates
    @app.context_processor
    def inject_version():
        return {"version": __version__}

    @app.template_filter("distance")
    def distance_filter(value):
        return format_distance(value)

    registry = create_registry()
    comparison = registry.get("comparison")

    from api.routes import create_api_blueprint
    api = create_api_blueprint(registry)
    app.register_blueprint(api)

    # Comparison page. A query string carrying form fields (e.g. a
    # shared URL) is computed on load; otherwise the defaults are shown.
    @app.route("/")
    def index():
        submitted = known_fields(request.args)
        form = submitted or dict(app.config["FORM_DEFAULTS"])
        context = {"form": form, "result": None, "error": None}

        if submitted:
            try:
                result = comparison.run(submitted)
            except EmissionsError as exc:
                log.info("Calculation rejected: %s", exc)
                context["error"] = str(exc)
            else:
                query = encode_query(submitted)
                context.update(
                    result=result,
                    summary=summary(result),
                    query=query,
                    share_url=url_for("index", _external=True) + "?" + query,
                )
        return render_template("compare.html", **context)

    # Reset: drop the query string and show the defaults
    @app.route("/reset")
    def reset():
        return redirect(url_for("index"))

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, host="127.0.0.1", port=5000)
