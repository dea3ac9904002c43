import uuid

from prometheus_client import REGISTRY

from tweets import create_app
from tweets.config.settings import TestingConfig
from tweets.domain.entities import User
from tweets.domain.errors import StorageUnavailable
from tweets.infrastructure.service_container import ServiceContainer


def _post(client, user="alice", text="hello"):
    response = client.post("/api/messages", json={"user": user, "text": text})
    assert response.status_code == 201
    return response.get_json()["id"]


def test_health(client):
    assert client.get("/health").status_code == 200
    assert client.get("/health/live").get_json()["status"] == "alive"


def test_post_and_list_messages(client):
    message_id = _post(client)

    response = client.get("/api/users/alice/messages")

    assert response.status_code == 200
    [message] = response.get_json()
    assert message["id"] == message_id
    assert message["user"] == "alice"
    assert message["likes"] == 0
    assert message["liked"] is False


def test_like_and_dislike(client):
    message_id = _post(client)

    assert client.post(f"/api/messages/{message_id}/like", json={"user": "bob"}).status_code == 204
    assert client.post(f"/api/messages/{message_id}/like", json={"user": "alice"}).status_code == 204
    [message] = client.get("/api/users/alice/messages").get_json()
    assert (message["likes"], message["liked"]) == (2, True)

    assert client.delete(f"/api/messages/{message_id}/like", json={"user": "alice"}).status_code == 204
    [message] = client.get("/api/users/alice/messages").get_json()
    assert (message["likes"], message["liked"]) == (1, False)


def test_like_unknown_message_is_accepted(client):
    response = client.post(f"/api/messages/{uuid.uuid4()}/like", json={"user": "bob"})
    assert response.status_code == 204


def test_popular_messages(client):
    quiet = _post(client, text="quiet")
    loud = _post(client, text="loud")
    client.post(f"/api/messages/{loud}/like", json={"user": "bob"})

    ranked = client.get("/api/messages/popular").get_json()

    assert [(m["id"], m["likes"]) for m in ranked] == [(loud, 1), (quiet, 0)]


def test_rejects_empty_text(client):
    response = client.post("/api/messages", json={"user": "alice", "text": "   "})
    assert response.status_code == 400
    assert response.get_json()["status"] == "error"


def test_rejects_missing_body(client):
    assert client.post("/api/messages", data="nope").status_code == 400


def test_rejects_malformed_message_id(client):
    response = client.post("/api/messages/not-a-uuid/like", json={"user": "bob"})
    assert response.status_code == 400


def test_users_endpoints(client, user_repository):
    response = client.post("/api/users", json={"name": "alice", "display_name": "Alice"})
    assert response.status_code == 201
    assert user_repository.get("alice") == User(name="alice", display_name="Alice")

    assert client.get("/api/users/alice").get_json() == {"name": "alice", "display_name": "Alice"}
    assert client.get("/api/users/nobody").status_code == 404


def test_storage_failure_maps_to_503(client, message_repository, monkeypatch):
    def fail(*args, **kwargs):
        raise StorageUnavailable("down")

    monkeypatch.setattr(message_repository, "get_popular_messages", fail)

    response = client.get("/api/messages/popular")

    assert response.status_code == 503


def _requests_counted(method, endpoint, status):
    value = REGISTRY.get_sample_value(
        "tweets_api_requests_total",
        {"method": method, "endpoint": endpoint, "status": str(status)},
    )
    return value or 0.0


def test_rejected_input_counted_with_its_status(client):
    before_400 = _requests_counted("POST", "post_message", 400)
    before_500 = _requests_counted("POST", "post_message", 500)

    client.post("/api/messages", json={"user": "alice", "text": ""})

    assert _requests_counted("POST", "post_message", 400) == before_400 + 1
    assert _requests_counted("POST", "post_message", 500) == before_500


def test_ready_pings_container_stores(client, message_repository, monkeypatch):
    pinged = []
    monkeypatch.setattr(message_repository, "ping", lambda: pinged.append("mongodb"))

    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.get_json()["checks"] == {"mongodb": True, "redis": True, "overall": True}
    assert pinged == ["mongodb"]


def test_not_ready_when_a_store_is_down(client, user_repository, message_repository, monkeypatch):
    def fail():
        raise StorageUnavailable("down")

    monkeypatch.setattr(message_repository, "ping", lambda: None)
    monkeypatch.setattr(user_repository, "ping", fail)

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.get_json()["checks"]["redis"] is False


class LimitedConfig(TestingConfig):
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URL = "memory://"
    LIKE_RATE_LIMIT = "2 per minute"


def test_like_route_is_rate_limited(message_repository, user_repository):
    container = ServiceContainer()
    container.register(message_repository=message_repository, user_repository=user_repository)
    client = create_app(LimitedConfig, container=container).test_client()
    message_id = _post(client)

    statuses = [
        client.post(f"/api/messages/{message_id}/like", json={"user": f"fan{i}"}).status_code
        for i in range(3)
    ]

    assert statuses == [204, 204, 429]
    assert client.get("/api/users/alice/messages").status_code == 200


def test_only_api_and_health_routes(app):
    rules = {rule.rule for rule in app.url_map.iter_rules()} - {"/static/<path:filename>"}
    assert "/" not in rules
    assert all(rule.startswith(("/api/", "/health")) for rule in rules)
