"""User Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

from fastapi import HTTPException
from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.user import ProfileUpdate
from app.services import project_service
from app.utils.helpers import require_text

PROFILE_FIELDS = ("name", "bio", "location", "website", "github", "linkedin", "avatar")


def list_users(db: Session, search: str | None = None):
    q = db.query(User)
    if search and search.strip():
        keyword = search.strip()
        # % 와 _ 는 와일드카드가 아닌 문자 그대로 비교한다.
        q = q.filter(
            or_(
                User.name.icontains(keyword, autoescape=True),
                User.bio.icontains(keyword, autoescape=True),
            )
        )
    return q.order_by(User.user_id).all()


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.user_id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def get_user_with_projects(db: Session, user_id: int) -> dict:
    user = get_user(db, user_id)
    projects = project_service.get_projects_by_user(db, user.user_id)
    return {"user": user, "projects": projects}


def update_profile(db: Session, data: ProfileUpdate, current_user: User) -> User:
    # 대상은 항상 요청자 본인이며 프로필 필드 외의 값은 반영하지 않는다.
    payload = {k: v for k, v in data.model_dump(exclude_none=True).items() if k in PROFILE_FIELDS}
    if "name" in payload:
        payload["name"] = require_text(payload["name"], "Name is required")
    for key, value in payload.items():
        setattr(current_user, key, value)
    db.commit()
    db.refresh(current_user)
    return current_user
