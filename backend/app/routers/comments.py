"""Comments 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.comment import CommentCreate, CommentUpdate, CommentOut
from app.services import comment_service
from app.middleware.auth_middleware import get_current_user
from app.models.user import User

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.get("/project/{project_id}", response_model=List[CommentOut])
def list_comments(project_id: int, db: Session = Depends(get_db)):
    return comment_service.get_comments(db, project_id)


@router.post("", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
def create_comment(
    data: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return comment_service.create_comment(db, data, current_user)


@router.put("/{comment_id}", response_model=CommentOut)
def update_comment(
    comment_id: int,
    data: CommentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return comment_service.update_comment(db, comment_id, data, current_user)


@router.delete("/{comment_id}")
def delete_comment(comment_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    comment_service.delete_comment(db, comment_id, current_user)
    return {"message": "Comment removed"}


@router.put("/{comment_id}/like", response_model=CommentOut)
def toggle_like(comment_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return comment_service.toggle_like(db, comment_id, current_user)
