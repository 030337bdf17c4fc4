"""좋아요 토글 동작을 검증하는 자동화 테스트입니다."""

import pytest
from sqlalchemy.exc import IntegrityError

from app.models.comment import Comment
from app.models.project import ProjectLike
from app.services import like_service
from tests.conftest import auth_headers


def _liker_ids(payload):
    return sorted(u["user_id"] for u in payload["likes"])


def test_toggle_like_scenario(client, seed_users, seed_project):
    bob = auth_headers(client, "bob@example.com")
    bob_id = seed_users["bob"].user_id

    resp = client.put(f"/api/projects/{seed_project.project_id}/like", headers=bob)
    assert resp.status_code == 200
    assert _liker_ids(resp.json()) == [bob_id]
    assert resp.json()["like_count"] == 1
    assert resp.json()["likes"][0]["name"] == "Bob"

    resp = client.put(f"/api/projects/{seed_project.project_id}/like", headers=bob)
    assert resp.status_code == 200
    assert resp.json()["likes"] == []


def test_toggle_like_two_users(client, seed_users, seed_project):
    client.put(f"/api/projects/{seed_project.project_id}/like", headers=auth_headers(client, "bob@example.com"))
    resp = client.put(
        f"/api/projects/{seed_project.project_id}/like",
        headers=auth_headers(client, "carol@example.com"),
    )
    assert _liker_ids(resp.json()) == sorted([seed_users["bob"].user_id, seed_users["carol"].user_id])

    detail = client.get(f"/api/projects/{seed_project.project_id}").json()
    assert sorted(u["name"] for u in detail["likes"]) == ["Bob", "Carol"]


def test_toggle_like_own_project_allowed(client, seed_users, seed_project):
    resp = client.put(
        f"/api/projects/{seed_project.project_id}/like",
        headers=auth_headers(client, "alice@example.com"),
    )
    assert resp.status_code == 200
    assert _liker_ids(resp.json()) == [seed_users["alice"].user_id]


def test_toggle_like_involution_preserves_others(client, seed_users, seed_project):
    bob = auth_headers(client, "bob@example.com")
    carol = auth_headers(client, "carol@example.com")
    client.put(f"/api/projects/{seed_project.project_id}/like", headers=bob)

    client.put(f"/api/projects/{seed_project.project_id}/like", headers=carol)
    resp = client.put(f"/api/projects/{seed_project.project_id}/like", headers=carol)
    assert _liker_ids(resp.json()) == [seed_users["bob"].user_id]


def test_toggle_like_project_not_found(client, seed_users):
    resp = client.put("/api/projects/9999/like", headers=auth_headers(client, "bob@example.com"))
    assert resp.status_code == 404


def test_toggle_like_requires_auth(client, seed_project):
    resp = client.put(f"/api/projects/{seed_project.project_id}/like")
    assert resp.status_code == 401


def test_toggle_comment_like(client, db, seed_users, seed_project):
    comment = Comment(content="hi", user_id=seed_users["bob"].user_id, project_id=seed_project.project_id)
    db.add(comment)
    db.commit()
    db.refresh(comment)

    alice = auth_headers(client, "alice@example.com")
    resp = client.put(f"/api/comments/{comment.comment_id}/like", headers=alice)
    assert resp.status_code == 200
    assert _liker_ids(resp.json()) == [seed_users["alice"].user_id]

    resp = client.put(f"/api/comments/{comment.comment_id}/like", headers=alice)
    assert resp.json()["likes"] == []

    listed = client.get(f"/api/comments/project/{seed_project.project_id}").json()
    assert listed[0]["like_count"] == 0


def test_toggle_comment_like_not_found(client, seed_users):
    resp = client.put("/api/comments/9999/like", headers=auth_headers(client, "alice@example.com"))
    assert resp.status_code == 404
    assert resp.json() == {"message": "Comment not found"}


def test_like_service_toggle_returns_state(db, seed_users, seed_project):
    key = {"project_id": seed_project.project_id, "user_id": seed_users["carol"].user_id}
    assert like_service.toggle(db, ProjectLike, **key) is True
    assert db.query(ProjectLike).filter_by(**key).count() == 1
    assert like_service.toggle(db, ProjectLike, **key) is False
    assert db.query(ProjectLike).filter_by(**key).count() == 0


def test_duplicate_like_row_rejected_by_store(db, seed_users, seed_project):
    key = {"project_id": seed_project.project_id, "user_id": seed_users["bob"].user_id}
    db.add(ProjectLike(**key))
    db.commit()
    db.expunge_all()
    db.add(ProjectLike(**key))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


class _StaleDelete:
    """다른 요청이 행을 넣기 직전의 상태를 본 DELETE 를 흉내 낸다."""

    def filter_by(self, **key):
        return self

    def delete(self, synchronize_session=None):
        return 0


def test_like_service_toggle_insert_conflict_cancels_like(db, monkeypatch, seed_users, seed_project):
    key = {"project_id": seed_project.project_id, "user_id": seed_users["bob"].user_id}
    # DELETE 와 INSERT 사이에 같은 사용자의 좋아요가 먼저 커밋된 상황
    db.add(ProjectLike(**key))
    db.commit()
    db.expunge_all()

    real_query = db.query
    calls = []

    def query(*entities, **kwargs):
        calls.append(entities)
        if len(calls) == 1:
            return _StaleDelete()
        return real_query(*entities, **kwargs)

    monkeypatch.setattr(db, "query", query)
    assert like_service.toggle(db, ProjectLike, **key) is False
    monkeypatch.undo()

    assert len(calls) == 2
    assert db.query(ProjectLike).filter_by(**key).count() == 0

    assert like_service.toggle(db, ProjectLike, **key) is True
    assert db.query(ProjectLike).filter_by(**key).count() == 1
