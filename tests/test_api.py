"""HTTP surface tests."""

from fastapi.testclient import TestClient

from quizboard.app import create_app
from quizboard.core.errors import StoreUnavailable
from quizboard.models import StoreDocument, User
from quizboard.storage import JsonFileStore, MemoryStore


def _submit(client, **body):
    return client.post("/api/submit", json=body)


class TestTaskEndpoint:
    def test_existing_task(self, client):
        assert client.get("/api/task/t1").json() == {"ok": True, "exists": True, "points": 2}

    def test_missing_task(self, client):
        assert client.get("/api/task/zzz").json() == {"ok": True, "exists": False}


class TestSubmitEndpoint:
    def test_correct_answer(self, client):
        response = _submit(client, task="t1", answer="Снег!", userId="abc")
        assert response.status_code == 200
        assert response.json() == {
            "ok": True,
            "correct": True,
            "message": "✅ Правильно! +2 бал.",
            "userId": "local:abc",
            "score": 2,
        }

    def test_platform_identity(self, client):
        body = _submit(client, task="t1", answer="снег", initData={"user": {"id": 5}}).json()
        assert body["userId"] == "platform:5"

    def test_generated_identity_is_returned(self, client):
        body = _submit(client, task="t1", answer="дождь").json()
        assert body["correct"] is False
        assert body["userId"].startswith("local:")
        assert body["score"] == 0

    def test_missing_fields(self, client, store):
        response = _submit(client, task="t1")
        assert response.status_code == 400
        assert response.json()["kind"] == "invalid_request"
        assert _submit(client, answer="x").json()["kind"] == "invalid_request"
        assert store.writes == 0

    def test_unknown_task(self, client, store):
        response = _submit(client, task="nope", answer="x", userId="abc")
        assert response.status_code == 404
        assert response.json() == {
            "ok": False,
            "kind": "task_not_found",
            "message": "Задание не найдено",
        }
        assert store.read().users == {}

    def test_missing_name(self, client):
        response = _submit(client, task="t1", answer="снег", userId="abc", showInRating=True)
        assert response.status_code == 400
        assert response.json()["kind"] == "missing_name"

    def test_profane_name(self, client, store):
        response = _submit(
            client, task="t1", answer="снег", userId="abc", showInRating=True, name="Редиска"
        )
        assert response.status_code == 400
        assert response.json()["kind"] == "profane_name"
        document = store.read()
        assert document.users == {}
        assert document.answers == []


class TestRatingEndpoint:
    def test_only_visible_named_users(self, client):
        _submit(client, task="t1", answer="снег", userId="a", showInRating=True, name="Анна")
        _submit(client, task="t1", answer="снег", userId="b")
        _submit(client, task="t2", answer="hello world", userId="c", showInRating=True, name="Борис")

        items = client.get("/api/rating").json()["items"]
        assert items == [
            {"rank": 1, "name": "Анна", "score": 2},
            {"rank": 2, "name": "Борис", "score": 1},
        ]

    def test_limit(self, client, store):
        document = StoreDocument(
            users={
                f"local:{i}": User(id=f"local:{i}", name=f"U{i}", score=i, show_in_rating=True)
                for i in range(15)
            }
        )
        store.write(document)
        assert len(client.get("/api/rating").json()["items"]) == 10
        assert len(client.get("/api/rating?limit=3").json()["items"]) == 3
        assert len(client.get("/api/rating?limit=-1").json()["items"]) == 10
        assert len(client.get("/api/rating?limit=abc").json()["items"]) == 10


class TestAdminEndpoints:
    auth = ("admin", "changeme")

    def test_requires_credentials(self, client):
        assert client.get("/api/admin/tasks").status_code == 401
        assert client.get("/api/admin/tasks", auth=("admin", "wrong")).status_code == 401

    def test_task_lifecycle(self, client):
        response = client.put("/api/admin/tasks/t3", json={"answer": "Луна", "points": 5}, auth=self.auth)
        assert response.json()["task"] == {"answer": "Луна", "points": 5, "id": "t3"}
        assert client.get("/api/task/t3").json()["points"] == 5

        assert client.delete("/api/admin/tasks/t3", auth=self.auth).status_code == 200
        assert client.get("/api/task/t3").json()["exists"] is False
        assert client.delete("/api/admin/tasks/t3", auth=self.auth).status_code == 404

    def test_invalid_task_payload(self, client):
        assert client.put("/api/admin/tasks/t3", json={}, auth=self.auth).status_code == 400
        bad_points = {"answer": "a", "points": "many"}
        assert client.put("/api/admin/tasks/t3", json=bad_points, auth=self.auth).status_code == 400

    def test_banned_terms_apply_to_names(self, client):
        client.post("/api/admin/banned", json={"term": "BadGuy"}, auth=self.auth)
        assert "badguy" in client.get("/api/admin/banned", auth=self.auth).json()["banned"]
        response = _submit(
            client, task="t1", answer="снег", userId="abc", showInRating=True, name="badguy"
        )
        assert response.json()["kind"] == "profane_name"

        client.delete("/api/admin/banned/badguy", auth=self.auth)
        response = _submit(
            client, task="t1", answer="снег", userId="abc", showInRating=True, name="badguy"
        )
        assert response.json()["correct"] is True

    def test_user_answers(self, client):
        _submit(client, task="t1", answer="дождь", userId="abc")
        _submit(client, task="t1", answer="снег", userId="abc")
        body = client.get("/api/admin/users/local:abc/answers", auth=self.auth).json()
        assert [item["correct"] for item in body["answers"]] == [False, True]


def test_health(client):
    assert client.get("/health").json() == {"ok": True}
    assert client.get("/healthz").json() == {"ok": True}
    assert "webapp_url" in client.get("/config").json()


def test_webhook_disabled_without_bot(client):
    assert client.post("/telegram/webhook", json={"update_id": 1}).status_code == 503


class _ReadOnlyStore(MemoryStore):
    def write(self, document: StoreDocument) -> None:
        raise StoreUnavailable()


def test_write_failure_is_reported(store):
    client = TestClient(create_app(store=_ReadOnlyStore(store.read())))
    response = _submit(client, task="t1", answer="снег", userId="abc")
    assert response.status_code == 503
    assert response.json()["kind"] == "store_unavailable"
    assert "correct" not in response.json()


def test_admin_write_keeps_unreadable_store_intact(tmp_path):
    path = tmp_path / "db.json"
    path.write_text('{"tasks": {"t1": {"answer": "снег"}}, "users": {"u": {"score": -1}}}', encoding="utf-8")
    before = path.read_text(encoding="utf-8")

    client = TestClient(create_app(store=JsonFileStore(path)))
    response = client.put("/api/admin/tasks/t3", json={"answer": "луна"}, auth=("admin", "changeme"))
    assert response.status_code == 503
    assert response.json()["kind"] == "store_unavailable"
    assert path.read_text(encoding="utf-8") == before
