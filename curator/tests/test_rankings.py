from fastapi.testclient import TestClient

from curator.app import app
from curator.catalog.data_store import get_photos

client = TestClient(app)

WEIGHTS = {"technical": 40, "storytelling": 35, "client_alignment": 25}


def _rank(**overrides):
    body = {"weights": WEIGHTS, **overrides}
    return client.post("/rankings", json=body)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_metadata_lists_options():
    resp = client.get("/metadata")
    assert resp.status_code == 200
    body = resp.json()
    assert "Portrait" in body["shot_types"]
    assert "Joyful" in body["moods"]
    assert len(body["highlight_tag_choices"]) <= 12
    assert body["minimum_face_choices"] == [0, 1, 2, 4]
    assert body["slider"] == {"min": 15, "max": 70}
    assert body["catalog_size"] == len(get_photos())


def test_photo_lookup():
    first = get_photos()[0]
    resp = client.get(f"/photos/{first.id}")
    assert resp.status_code == 200
    assert resp.json()["id"] == first.id


def test_photo_lookup_unknown():
    resp = client.get("/photos/frame-999999")
    assert resp.status_code == 404


def test_rankings_returns_results():
    resp = _rank()
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_ranked"] == len(get_photos())
    assert body["total_filtered"] == body["total_ranked"]
    assert len(body["items"]) == 12
    assert body["hero"] == body["items"][0]


def test_rankings_respects_limit():
    resp = _rank(limit=3)
    assert len(resp.json()["items"]) == 3


def test_rankings_score_ordering():
    resp = _rank(limit=50)
    scores = [item["score"] for item in resp.json()["items"]]
    assert scores == sorted(scores, reverse=True)
    assert all(0.0 <= s <= 1.0 for s in scores)


def test_rankings_filters_by_shot_type():
    resp = _rank(filters={"shot_types": ["Portrait"]}, limit=100)
    body = resp.json()
    assert body["total_filtered"] < body["total_ranked"]
    for item in body["items"]:
        assert item["photo"]["shot_type"] == "Portrait"


def test_rankings_search_without_match():
    resp = _rank(filters={"query": "no-such-tag-anywhere"})
    body = resp.json()
    assert body["total_filtered"] == 0
    assert body["items"] == []
    assert body["hero"] is None


def test_rankings_marks_selected():
    first = get_photos()[0]
    resp = _rank(selected_ids=[first.id], filters={"show_selected_only": True})
    body = resp.json()
    assert [item["photo"]["id"] for item in body["items"]] == [first.id]
    assert body["items"][0]["selected"] is True


def test_rankings_profile_never_drops_photos():
    resp = _rank(
        profile={"required_shots": ["Landscape"], "minimum_faces": 4},
        limit=500,
    )
    body = resp.json()
    assert len(body["items"]) == len(get_photos())


def test_rankings_rejects_zero_weights():
    resp = client.post(
        "/rankings",
        json={"weights": {"technical": 0, "storytelling": 0, "client_alignment": 0}},
    )
    assert resp.status_code == 422


def test_rankings_rejects_weights_that_overflow():
    resp = client.post(
        "/rankings",
        json={"weights": {"technical": 1e308, "storytelling": 1e308, "client_alignment": 1e308}},
    )
    assert resp.status_code == 422


def test_rankings_accepts_tiny_weights():
    resp = _rank(weights={"technical": 1e-310, "storytelling": 1e-310, "client_alignment": 1e-310})
    assert resp.status_code == 200


def test_rankings_rejects_negative_weight():
    resp = _rank(weights={"technical": -5, "storytelling": 35, "client_alignment": 25})
    assert resp.status_code == 422


def test_rankings_rejects_bad_limit():
    resp = _rank(limit=0)
    assert resp.status_code == 422


def test_root_serves_dashboard_page():
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Capture Curator" in resp.text
