"""Comment Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

import logging

from sqlalchemy.orm import Session, joinedload, selectinload
from fastapi import HTTPException
from app.models.comment import Comment, CommentLike
from app.models.project import Project
from app.models.user import User
from app.schemas.comment import CommentCreate, CommentUpdate
from app.services import like_service
from app.utils.helpers import require_text
from app.utils.permissions import ensure_owner
from typing import List

logger = logging.getLogger(__name__)

COMMENT_NOT_FOUND = "Comment not found"


def _comments_query(db: Session):
    return db.query(Comment).options(
        joinedload(Comment.user),
        selectinload(Comment.like_rows).joinedload(CommentLike.user),
    )


def _get_comment_row(db: Session, comment_id: int) -> Comment:
    comment = db.query(Comment).filter(Comment.comment_id == comment_id).first()
    if not comment:
        raise HTTPException(status_code=404, detail=COMMENT_NOT_FOUND)
    return comment


def get_comment(db: Session, comment_id: int) -> Comment:
    comment = _comments_query(db).filter(Comment.comment_id == comment_id).first()
    if not comment:
        raise HTTPException(status_code=404, detail=COMMENT_NOT_FOUND)
    return comment


def get_comments(db: Session, project_id: int) -> List[Comment]:
    # 존재하지 않는 과제 ID라도 404 대신 빈 목록을 돌려준다.
    return (
        _comments_query(db)
        .filter(Comment.project_id == project_id)
        .order_by(Comment.created_at.desc(), Comment.comment_id.desc())
        .all()
    )


def create_comment(db: Session, data: CommentCreate, current_user: User) -> Comment:
    project = db.query(Project.project_id).filter(Project.project_id == data.project_id).first()
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    content = require_text(data.content, "Content is required")
    comment = Comment(content=content, user_id=current_user.user_id, project_id=data.project_id)
    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.info(
        "[comments] created comment_id=%s on project_id=%s by user_id=%s",
        comment.comment_id,
        comment.project_id,
        current_user.user_id,
    )
    return get_comment(db, comment.comment_id)


def update_comment(db: Session, comment_id: int, data: CommentUpdate, current_user: User) -> Comment:
    comment = _get_comment_row(db, comment_id)
    ensure_owner(comment.user_id, current_user)
    comment.content = require_text(data.content, "Content is required")
    db.commit()
    return get_comment(db, comment_id)


def delete_comment(db: Session, comment_id: int, current_user: User):
    comment = _get_comment_row(db, comment_id)
    ensure_owner(comment.user_id, current_user)
    db.delete(comment)
    db.commit()
    logger.info("[comments] deleted comment_id=%s by user_id=%s", comment_id, current_user.user_id)


def toggle_like(db: Session, comment_id: int, current_user: User) -> Comment:
    exists = db.query(Comment.comment_id).filter(Comment.comment_id == comment_id).first()
    if not exists:
        raise HTTPException(status_code=404, detail=COMMENT_NOT_FOUND)
    like_service.toggle(db, CommentLike, comment_id=comment_id, user_id=current_user.user_id)
    return get_comment(db, comment_id)
