"""Users 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.middleware.auth_middleware import get_current_user
from app.models.user import User
from app.schemas.project import UserWithProjectsOut
from app.schemas.user import ProfileUpdate, UserOut
from app.services import user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[UserOut])
def list_users(
    search: Optional[str] = Query(None, max_length=100),
    db: Session = Depends(get_db),
):
    return user_service.list_users(db, search=search)


@router.put("/profile", response_model=UserOut)
def update_profile(
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return user_service.update_profile(db, data, current_user)


@router.get("/{user_id}", response_model=UserWithProjectsOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return user_service.get_user_with_projects(db, user_id)
