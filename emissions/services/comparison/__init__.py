"""
ICE vs BEV Comparison Service.

Implements the LifecycleService interface for the cumulative emissions
comparison and owns its API endpoints under /api/comparison/*.

Endpoints:
    POST /api/comparison/compute    - result JSON for form fields
    GET  /api/comparison/csv        - CSV table for query-string fields
    GET  /api/comparison/chart.png  - PNG chart for query-string fields
    POST /api/comparison/share-url  - share URL for form fields
    GET  /api/comparison/defaults   - default form values

Validation and domain errors propagate to the blueprint error handlers
registered in api/routes.py.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging
from collections.abc import Mapping

from flask import Response, current_app, jsonify, request, url_for

from emissions.services import LifecycleService
from emissions.calculator import calculate
from emissions.chart import render_png
from emissions.errors import ValidationError
from emissions.export import CSV_FILENAME, to_csv
from emissions.parsing import parse_inputs
from emissions.report import summary
from emissions.share import share_url

log = logging.getLogger(__name__)


class ComparisonService(LifecycleService):
    """
    Cumulative lifecycle CO2 of an ICE and a BEV over distance.

    validate() turns raw form fields into an InputRecord; compute()
    runs the calculator and returns a CalculationResult.
    """

    id = "comparison"
    name = "ICE vs BEV Comparison"
    description = "Cumulative lifecycle CO2 and break-even distance"
    route = "/"

    def __init__(self, max_distances=None):
        self.max_distances = max_distances

    def validate(self, config):
        """Validate form fields; raises ValidationError."""
        if config is None:
            raise ValidationError("Request body must be JSON")
        if not isinstance(config, Mapping):
            raise ValidationError("Request body must be a JSON object")
        return parse_inputs(config, max_distances=self._max_distances())

    def compute(self, config):
        """Run the comparison on a validated InputRecord."""
        return calculate(config)

    def run(self, fields):
        """validate() then compute()."""
        return self.compute(self.validate(fields))

    def _max_distances(self):
        if self.max_distances is not None:
            return self.max_distances
        if current_app:
            return current_app.config.get("MAX_DISTANCES")
        return None

    def to_response(self, result):
        """JSON payload: raw result plus display summary."""
        payload = result.to_dict()
        payload.update(summary(result))
        return payload

    def register_routes(self, bp):
        """Mount all comparison endpoints."""
        service = self

        @bp.route("/comparison/compute", methods=["POST"])
        def comparison_compute():
            data = request.get_json(silent=True)
            result = service.run(data)
            return jsonify(service.to_response(result))

        @bp.route("/comparison/csv", methods=["GET"])
        def comparison_csv():
            result = service.run(request.args.to_dict())
            return Response(
                to_csv(result.series),
                mimetype="text/csv",
                headers={
                    "Content-Disposition":
                        "attachment; filename={}".format(CSV_FILENAME),
                },
            )

        @bp.route("/comparison/chart.png", methods=["GET"])
        def comparison_chart():
            result = service.run(request.args.to_dict())
            cfg = current_app.config
            png = render_png(result, size=tuple(cfg["CHART_SIZE"]),
                             dpi=cfg["CHART_DPI"])
            return Response(png, mimetype="image/png")

        @bp.route("/comparison/share-url", methods=["POST"])
        def comparison_share_url():
            data = request.get_json(silent=True)
            # Validate so a shared link always reproduces a result
            service.validate(data)
            base = url_for("index", _external=True)
            return jsonify({"url": share_url(base, data)})

        @bp.route("/comparison/defaults", methods=["GET"])
        def comparison_defaults():
            return jsonify(dict(current_app.config["FORM_DEFAULTS"]))
