"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from backdrop.main import app
from backdrop.models.scene import BlendMode, SceneDocument
from tests.conftest import FRAME_WITH_TEXT, OVERLAPPING_RECTS, document, frame, node, solid


client = TestClient(app)


def _doc(doc) -> dict:
    return doc.model_dump(mode="json")


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["phases_registered"] == 6


def test_blend_modes():
    response = client.get("/api/blend-modes")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 19
    unsupported = {e["mode"] for e in data if not e["supported"]}
    assert unsupported == {"LINEAR_BURN", "LINEAR_DODGE"}


def test_resolve_selected_text():
    response = client.post("/api/resolve", json={"document": _doc(FRAME_WITH_TEXT)})
    assert response.status_code == 200
    data = response.json()
    assert data["node_id"] == "T"
    assert data["background"]["color"] == {"r": 30, "g": 30, "b": 30}
    assert data["background"]["source"] == "parent"
    assert data["background"]["phase"] == 2
    assert data["processing_time_ms"] >= 0


def test_resolve_explicit_node():
    response = client.post("/api/resolve", json={"document": _doc(OVERLAPPING_RECTS), "node_id": "R1"})
    assert response.status_code == 200
    data = response.json()
    assert data["node_id"] == "R1"
    assert data["background"]["source"] == "page"


def test_resolve_same_ids_across_documents():
    first = client.post("/api/resolve", json={"document": _doc(OVERLAPPING_RECTS)})
    assert first.json()["background"]["source"] == "sibling"

    other = document([node("R1", (300, 300, 10, 10), "#FF0000"), node("R2", (50, 50, 100, 100))], selection=["R2"])
    second = client.post("/api/resolve", json={"document": _doc(other)})
    assert second.json()["background"]["source"] == "page"


def test_resolve_unknown_node():
    response = client.post("/api/resolve", json={"document": _doc(FRAME_WITH_TEXT), "node_id": "nope"})
    assert response.status_code == 404


def test_resolve_page_id_is_not_a_node():
    response = client.post("/api/resolve", json={"document": _doc(FRAME_WITH_TEXT), "node_id": "page"})
    assert response.status_code == 404


def test_resolve_without_selection():
    response = client.post("/api/resolve", json={"document": _doc(document([node("a")]))})
    assert response.status_code == 404


def test_resolve_duplicate_ids():
    payload = _doc(document([node("a"), node("a")], selection=["a"]))
    response = client.post("/api/resolve", json={"document": payload})
    assert response.status_code == 422


def test_resolve_malformed_document():
    response = client.post("/api/resolve", json={"document": {"children": [{"name": "no id"}]}})
    assert response.status_code == 422


def test_page_background():
    response = client.post("/api/page-background", json={"document": _doc(FRAME_WITH_TEXT)})
    assert response.status_code == 200
    data = response.json()
    assert data["hex"] == "#FFFFFF"
    assert data["source"] == "page"


def test_page_background_falls_back():
    response = client.post("/api/page-background", json={"document": _doc(document([], background=None))})
    assert response.status_code == 200
    data = response.json()
    assert data["hex"] == "#1E1E1E"
    assert data["source"] == "fallback"


def test_selection_summary():
    doc = document(
        [
            frame("F", (0, 0, 300, 200), "#1E1E1E", children=[
                node(
                    "T",
                    (20, 20, 100, 30),
                    fills=[solid("#FAFAFA", opacity=0.8), solid("#000000", visible=False)],
                ),
            ]),
        ],
        selection=["T"],
    )
    response = client.post("/api/selection", json={"document": _doc(doc)})
    assert response.status_code == 200
    data = response.json()
    assert data["node_id"] == "T"
    assert data["primary_color"] == "#FAFAFA"
    assert data["opacity"] == 0.8
    assert [f["hex"] for f in data["fills"]] == ["#FAFAFA", "#000000"]
    assert data["has_unsupported_blend_mode"] is False
    assert data["css_blend_mode"] == "normal"
    assert data["background"]["color"] == {"r": 30, "g": 30, "b": 30}


def test_selection_with_unsupported_blend():
    doc = document(
        [
            node("R1", (0, 0, 100, 100), "#FF0000"),
            node("R2", (50, 50, 100, 100), "#00FF00", blend_mode=BlendMode.LINEAR_BURN),
        ],
        selection=["R2"],
    )
    response = client.post("/api/selection", json={"document": _doc(doc)})
    assert response.status_code == 200
    data = response.json()
    assert data["has_unsupported_blend_mode"] is True
    assert data["blend_mode"] == "LINEAR_BURN"
    assert data["css_blend_mode"] == "multiply"
    assert data["background"]["source"] == "sibling"


def test_page_background_agrees_with_resolve():
    doc = SceneDocument(
        background=[solid("#000000", opacity=0.0), solid("#FFFFFF")],
        children=[node("S", (10, 10, 10, 10))],
        selection=["S"],
    )
    page = client.post("/api/page-background", json={"document": _doc(doc)}).json()
    resolved = client.post("/api/resolve", json={"document": _doc(doc)}).json()

    assert page["hex"] == "#FFFFFF"
    assert page["source"] == "page"
    assert resolved["background"]["source"] == "page"
    assert resolved["background"]["color"] == page["color"]
