from fastapi.testclient import TestClient

from line_talk_viewer.core.config import get_settings
from line_talk_viewer.main import RateLimiter, create_app


def _upload(client, content: bytes, filename: str = "talk.txt", content_type: str = "text/plain"):
    return client.post("/chat/parse", files={"file": (filename, content, content_type)})


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_parse_upload(client, fixture_path):
    with fixture_path.open("rb") as handle:
        resp = client.post("/chat/parse", files={"file": ("line_chat.txt", handle, "text/plain")})
    assert resp.status_code == 200, resp.text
    payload = resp.json()
    assert [day["date"] for day in payload["days"]] == ["2025-04-18", "2021-11-26", "2025-04-18"]
    assert payload["days"][1]["messages"][0] == {"time": "2:19", "user": "Reina", "text": "通話時間 1:30:01"}
    assert payload["users"] == ["sima", "Reina"]
    assert payload["default_user"] == "sima"
    assert payload["summary"]["discarded_lines"] == 3


def test_parse_upload_without_messages_uses_configured_default(client):
    resp = _upload(client, "2025.04.18 金曜日\n".encode("utf-8"))
    assert resp.status_code == 200
    assert resp.json()["days"] == [{"date": "2025-04-18", "messages": []}]
    assert resp.json()["default_user"] == "Reina"


def test_parse_upload_rejects_bad_files(client):
    assert _upload(client, b"2025.04.18", filename="talk.json").status_code == 400
    assert _upload(client, b"2025.04.18", content_type="image/png").status_code == 400
    assert _upload(client, b"").status_code == 400


def test_parse_upload_size_limit(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "max_upload_size_mb", 0)
    assert _upload(client, b"2025.04.18").status_code == 413


def test_view_endpoint(client):
    days = _upload(client, "2025.04.18\n07:10 sima ありがと\n2021/11/26\n2:19 Reina 通話時間 1:30:01".encode()).json()["days"]
    resp = client.post("/chat/view", json={"days": days, "keyword": "がと", "current_user": "Reina"})
    assert resp.status_code == 200, resp.text
    payload = resp.json()
    assert payload["current_user"] == "Reina"
    assert payload["users"] == ["sima", "Reina"]
    assert payload["days"][0]["messages"][0] == {
        "time": "07:10",
        "user": "sima",
        "text": "ありがと",
        "key": "0-0",
        "is_mine": False,
        "highlighted": True,
    }
    assert payload["days"][1]["messages"][0]["is_mine"] is True
    assert payload["search_hits"] == [
        {
            "key": "0-0",
            "date": "2025-04-18",
            "time": "07:10",
            "user": "sima",
            "text": "ありがと",
            "label": "[2025-04-18 07:10] sima「ありがと」",
        }
    ]


def test_view_endpoint_date_filter(client):
    days = [
        {"date": "2025-04-18", "messages": [{"time": "07:10", "user": "sima", "text": "a"}]},
        {"date": "2021-11-26", "messages": [{"time": "2:19", "user": "Reina", "text": "b"}]},
    ]
    resp = client.post("/chat/view", json={"days": days, "date_filter": "2021"})
    payload = resp.json()
    assert [day["date"] for day in payload["days"]] == ["2021-11-26"]
    assert payload["current_user"] == "sima"
    assert payload["search_hits"] == []


def test_locate_endpoint(client):
    days = [
        {"date": "2025-04-18", "messages": [{"time": "07:10", "user": "sima", "text": "a"}]},
        {"date": "2021-11-26", "messages": [{"time": "2:19", "user": "Reina", "text": "b"}]},
    ]
    resp = client.post("/chat/locate", json={"days": days, "date_filter": "2021", "key": "0-0"})
    assert resp.status_code == 200
    assert resp.json()["user"] == "Reina"

    missing = client.post("/chat/locate", json={"days": days, "key": "5-0"})
    assert missing.status_code == 404


def test_rate_limiter_blocks_after_limit():
    limiter = RateLimiter(limit_per_minute=2)
    assert limiter.hit("a")
    assert limiter.hit("a")
    assert not limiter.hit("a")
    assert limiter.hit("b")


def test_rate_limit_returns_429(monkeypatch):
    monkeypatch.setattr(get_settings(), "rate_limit_per_minute", 1)
    with TestClient(create_app()) as limited:
        assert [limited.get("/health").status_code for _ in range(2)] == [200, 429]


def test_rate_limiter_drops_idle_buckets():
    limiter = RateLimiter(limit_per_minute=1)
    assert limiter.hit("a", now=0)
    assert not limiter.hit("a", now=30)
    assert limiter.hit("b", now=100)
    assert "a" not in limiter._hits
    assert limiter.hit("a", now=100)


def test_parse_upload_replaces_undecodable_bytes(client):
    resp = _upload(client, b"2025.04.18\n10:00 a h\xffi")
    assert resp.status_code == 200
    assert resp.json()["days"][0]["messages"][0]["text"] == "h\ufffdi"


def test_malformed_bodies_are_rejected(client):
    days = [{"messages": [{"time": "07:10", "user": "sima", "text": "a"}]}]
    assert client.post("/chat/view", json={"days": days}).status_code == 422
    assert client.post("/chat/locate", json={"days": days, "key": "0-0"}).status_code == 422
