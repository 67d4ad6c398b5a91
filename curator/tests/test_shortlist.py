from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from curator.app import app
from curator.catalog.data_store import get_photos
from curator.ranking.models import RankedEntry
from curator.shortlist.builder import DISPLAY_SCORE_DEFAULT, build_shortlist


# ── Summary ──────────────────────────────────────────────────────────────


class TestBuildShortlist:
    def test_empty_selection(self, make_photo):
        summary = build_shortlist([make_photo()], set(), [])
        assert summary.count == 0
        assert summary.average_alignment == 0.0
        assert summary.preview == []
        assert summary.remaining == 0

    def test_keeps_catalog_order_and_averages_scores(self, make_photo):
        a, b, c = make_photo("a"), make_photo("b"), make_photo("c")
        rankings = [
            RankedEntry(photo=c, score=0.9),
            RankedEntry(photo=a, score=0.5),
            RankedEntry(photo=b, score=0.1),
        ]
        summary = build_shortlist([a, b, c], {"c", "a"}, rankings)

        assert summary.selected_ids == ["a", "c"]
        assert [item.photo.id for item in summary.preview] == ["a", "c"]
        assert summary.average_alignment == pytest.approx(0.7)
        assert summary.preview[1].label == "Hero candidate"

    def test_unranked_photo_counts_as_zero(self, make_photo):
        a, b = make_photo("a"), make_photo("b")
        summary = build_shortlist([a, b], {"a", "b"}, [RankedEntry(photo=a, score=0.8)])
        assert summary.average_alignment == pytest.approx(0.4)
        assert summary.preview[1].score == DISPLAY_SCORE_DEFAULT

    def test_preview_is_bounded(self, make_photo):
        photos = [make_photo() for _ in range(12)]
        summary = build_shortlist(photos, {p.id for p in photos}, [], preview_size=9)
        assert summary.count == 12
        assert len(summary.preview) == 9
        assert summary.remaining == 3

    def test_ignores_ids_outside_catalog(self, make_photo):
        a = make_photo("a")
        summary = build_shortlist([a], {"a", "ghost"}, [])
        assert summary.count == 1


# ── Endpoints ────────────────────────────────────────────────────────────


def test_toggle_adds_then_removes():
    c = TestClient(app)
    pid = get_photos()[5].id

    resp = c.post(f"/shortlist/{pid}/toggle")
    assert resp.status_code == 200
    assert resp.json() == {"photo_id": pid, "selected": True, "count": 1}

    resp = c.post(f"/shortlist/{pid}/toggle")
    assert resp.json() == {"photo_id": pid, "selected": False, "count": 0}


def test_toggle_unknown_photo():
    c = TestClient(app)
    resp = c.post("/shortlist/frame-999999/toggle")
    assert resp.status_code == 404


def test_shortlist_survives_reranking():
    c = TestClient(app)
    ids = [p.id for p in get_photos()[:3]]
    for pid in ids:
        c.post(f"/shortlist/{pid}/toggle")

    c.put("/dashboard/weights", json={"technical": 15, "storytelling": 70, "client_alignment": 15})
    body = c.get("/shortlist").json()
    assert body["selected_ids"] == ids
    assert body["count"] == 3
    assert 0.0 < body["average_alignment"] <= 1.0


def test_clear_shortlist():
    c = TestClient(app)
    c.post(f"/shortlist/{get_photos()[0].id}/toggle")

    resp = c.delete("/shortlist")
    assert resp.status_code == 200
    assert resp.json()["count"] == 0
    assert c.get("/dashboard").json()["shortlist"]["count"] == 0
