"""
Tests for Flask API endpoints.

Integration tests that validate the REST API returns correct status
codes, JSON structure and the reference scenario values.
"""

import json
import pytest


def _post(client, url, payload):
    return client.post(url, data=json.dumps(payload),
                       content_type="application/json")


class TestServicesEndpoint:

    def test_list_services(self, client):
        resp = client.get("/api/services")
        assert resp.status_code == 200
        data = resp.get_json()
        assert [s["id"] for s in data] == ["comparison"]


class TestComputeEndpoint:

    def test_reference_scenario(self, client, reference_form):
        resp = _post(client, "/api/comparison/compute", reference_form)
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["break_even_status"] == "finite"
        assert data["break_even_distance"] == pytest.approx(
            6299.0 / (2.7 / 7.875 - 0.45 / 17.4), rel=1e-9)
        assert data["delta_manuf"] == pytest.approx(6299.0)
        assert len(data["series"]) == 5
        assert data["series"][0]["e_ice"] == pytest.approx(2555.0)
        assert data["derived"]["ice_fuel_economy"] == 7.875
        assert data["break_even_message"].startswith("Break-even at")

    def test_json_numbers_and_aliases(self, client):
        payload = {"distances": [0, 50000], "ice_weight": 1500,
                   "bev_weight": 1800, "bev_energy_use": 15}
        resp = _post(client, "/api/comparison/compute", payload)
        assert resp.status_code == 200
        data = resp.get_json()
        assert "bev_energy_use" not in data["derived"]
        assert data["inputs"]["bev_energy_use"] == 15.0

    def test_no_advantage_has_null_distance(self, client, reference_form):
        reference_form["alpha-grid"] = "20"
        data = _post(client, "/api/comparison/compute", reference_form).get_json()
        assert data["break_even_status"] == "no_advantage"
        assert data["break_even_distance"] is None

    def test_missing_weight(self, client, reference_form):
        del reference_form["bev-weight"]
        resp = _post(client, "/api/comparison/compute", reference_form)
        assert resp.status_code == 400
        assert resp.get_json()["error"] == \
            "Input validation error: BEV weight is required"

    def test_not_json(self, client):
        resp = client.post("/api/comparison/compute", data="x",
                           content_type="text/plain")
        assert resp.status_code == 400

    @pytest.mark.parametrize("body", ["5", "true", "\"distances\"", "[1, 2]"])
    def test_non_object_body(self, client, body):
        resp = client.post("/api/comparison/compute", data=body,
                           content_type="application/json")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Request body must be a JSON object"

    def test_too_many_distances(self, app, client, reference_form):
        app.config["MAX_DISTANCES"] = 2
        resp = _post(client, "/api/comparison/compute", reference_form)
        assert resp.status_code == 400


class TestCsvEndpoint:

    def test_attachment(self, client, reference_form):
        resp = client.get("/api/comparison/csv", query_string=reference_form)
        assert resp.status_code == 200
        assert resp.mimetype == "text/csv"
        assert "ice_vs_bev_emissions.csv" in resp.headers["Content-Disposition"]
        lines = resp.get_data(as_text=True).splitlines()
        assert len(lines) == 6
        assert lines[1] == "0,2555,8854,6299,0.343,0.026,0"

    def test_invalid(self, client):
        resp = client.get("/api/comparison/csv?distances=abc&ice-weight=1")
        assert resp.status_code == 400


class TestChartEndpoint:

    def test_png(self, client, reference_form):
        resp = client.get("/api/comparison/chart.png", query_string=reference_form)
        assert resp.status_code == 200
        assert resp.mimetype == "image/png"
        assert resp.data.startswith(b"\x89PNG")

    def test_distances_short_of_break_even(self, client, reference_form):
        reference_form["distances"] = "0"
        resp = client.get("/api/comparison/chart.png", query_string=reference_form)
        assert resp.status_code == 200
        assert resp.data.startswith(b"\x89PNG")


class TestShareUrlEndpoint:

    def test_url(self, client, reference_form):
        resp = _post(client, "/api/comparison/share-url", reference_form)
        assert resp.status_code == 200
        url = resp.get_json()["url"]
        assert url.startswith("http://localhost/?distances=")
        assert "ice-weight=1750" in url

    @pytest.mark.parametrize("body", ["7", "\"ice-weight\""])
    def test_non_object_body(self, client, body):
        resp = client.post("/api/comparison/share-url", data=body,
                           content_type="application/json")
        assert resp.status_code == 400

    def test_missing_body(self, client):
        resp = client.post("/api/comparison/share-url", data="x",
                           content_type="text/plain")
        assert resp.status_code == 400

    def test_invalid_form_rejected(self, client):
        resp = _post(client, "/api/comparison/share-url", {"distances": ""})
        assert resp.status_code == 400


class TestDefaultsEndpoint:

    def test_defaults(self, client):
        data = client.get("/api/comparison/defaults").get_json()
        assert data["distances"] == "0,20000,40000,60000,100000"
        assert data["alpha-fuel"] == "2.7"
