"""Permissions 관련 공용 유틸리티 헬퍼입니다."""

from fastapi import HTTPException, status

from app.models.user import User


NOT_AUTHORIZED = "Not authorized"


def is_owner(owner_id: int, user: User) -> bool:
    # 저장된 소유자 식별자와 인증된 사용자 식별자를 값으로만 비교한다.
    return owner_id is not None and owner_id == user.user_id


def ensure_owner(owner_id: int, user: User) -> None:
    if not is_owner(owner_id, user):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NOT_AUTHORIZED)
