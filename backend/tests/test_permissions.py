import pytest
from fastapi import HTTPException

from app.models.user import User
from app.utils.helpers import clean_technologies, require_text, split_search_terms
from app.utils.permissions import ensure_owner, is_owner


def test_is_owner_compares_identifiers():
    user = User(user_id=7, name="U", email="u@example.com", password_hash="x")
    assert is_owner(7, user) is True
    assert is_owner(8, user) is False
    assert is_owner(None, user) is False


def test_ensure_owner_raises_unauthorized():
    user = User(user_id=1, name="U", email="u@example.com", password_hash="x")
    ensure_owner(1, user)
    with pytest.raises(HTTPException) as exc_info:
        ensure_owner(2, user)
    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Not authorized"


def test_require_text():
    assert require_text("  hi ", "msg") == "hi"
    with pytest.raises(HTTPException) as exc_info:
        require_text(None, "Title is required")
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Title is required"


def test_clean_technologies_keeps_order():
    assert clean_technologies([" React", "", "Node ", "  "]) == ["React", "Node"]
    assert clean_technologies(None) == []


def test_split_search_terms():
    assert split_search_terms("  react   native ") == ["react", "native"]
    assert split_search_terms("") == []
    assert split_search_terms(None) == []
