"""Tests for the FastAPI routes."""
import pytest
from fastapi.testclient import TestClient

from floorplan.api.main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def payload(room, **extra):
    body = {"room": room.model_dump(mode="json")}
    body.update(extra)
    return body


class TestRoutes:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_rules(self, client):
        resp = client.get("/api/rules")
        assert resp.status_code == 200
        ids = [r["id"] for r in resp.json()]
        assert "wall.fill" in ids and "annotation.labels" in ids

    def test_render(self, client, furnished_room):
        resp = client.post("/api/floorplan", json=payload(furnished_room))
        assert resp.status_code == 200
        body = resp.json()
        assert body["wall_count"] == 4
        assert body["rule_count"] == 6
        assert body["scene"]["stats"]["walls"] == 4
        assert body["scene"]["stats"]["furniture"] == 3

    def test_options_and_params(self, client, rect_room):
        resp = client.post("/api/floorplan", json=payload(
            rect_room,
            options={"units": "metric"},
            params={"dimension_offset": 60},
        ))
        dims = resp.json()["scene"]["dimensions"]
        assert {d["label"] for d in dims} == {"4.0 m", "3.0 m"}
        assert all(d["offset_distance"] == 60 for d in dims)

    def test_viewport_centers_plan(self, client, rect_room):
        resp = client.post("/api/floorplan", json=payload(
            rect_room, viewport={"width": 800, "height": 600, "zoom": 1.5},
        ))
        bounds = resp.json()["scene"]["bounds"]
        assert abs((bounds["min_x"] + bounds["max_x"]) / 2 - 400.0) < 1e-6
        assert abs((bounds["min_z"] + bounds["max_z"]) / 2 - 300.0) < 1e-6
        assert abs((bounds["max_x"] - bounds["min_x"]) - 750.0) < 1e-6

    def test_string_confidence_accepted(self, client, rect_room):
        body = payload(rect_room)
        body["room"]["doors"] = [{
            "transform": [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 1, -1.5, 1],
            "dimensions": [0.9, 2.0, 0.1],
            "confidence": "low",
        }]
        resp = client.post("/api/floorplan", json=body)
        assert resp.status_code == 200
        assert resp.json()["scene"]["stats"]["doors"] == 1

    def test_bad_transform_rejected(self, client):
        resp = client.post("/api/floorplan", json={"room": {"walls": [
            {"transform": [1.0] * 15, "dimensions": [1.0, 2.0, 0.1]},
        ]}})
        assert resp.status_code == 422

    def test_bad_viewport_rejected(self, client, rect_room):
        resp = client.post("/api/floorplan", json=payload(
            rect_room, viewport={"width": 0, "height": 600},
        ))
        assert resp.status_code == 422
