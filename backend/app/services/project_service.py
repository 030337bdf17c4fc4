"""Project Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

import json
import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload, selectinload
from fastapi import HTTPException
from app.models.project import Project, ProjectLike
from app.models.comment import Comment
from app.models.user import User
from app.schemas.project import ProjectCreate, ProjectUpdate
from app.services import like_service
from app.utils.helpers import clean_technologies, require_text, split_search_terms
from app.utils.permissions import ensure_owner
from typing import List, Optional

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = "Project not found"


def _dump_technologies(values) -> str:
    return json.dumps(clean_technologies(values), ensure_ascii=False)


def _projects_query(db: Session):
    return db.query(Project).options(
        joinedload(Project.user),
        selectinload(Project.like_rows).joinedload(ProjectLike.user),
    )


def _get_project_row(db: Session, project_id: int) -> Project:
    project = db.query(Project).filter(Project.project_id == project_id).first()
    if not project:
        raise HTTPException(status_code=404, detail=PROJECT_NOT_FOUND)
    return project


def get_projects(
    db: Session,
    search: Optional[str] = None,
    owner_id: Optional[int] = None,
    skip: int = 0,
    limit: Optional[int] = None,
) -> List[Project]:
    query = _projects_query(db)
    terms = split_search_terms(search)
    if terms:
        # 검색어 중 하나라도 제목/설명에 포함되면 일치로 본다.
        query = query.filter(
            or_(*[
                or_(
                    Project.title.icontains(term, autoescape=True),
                    Project.description.icontains(term, autoescape=True),
                )
                for term in terms
            ])
        )
    if owner_id is not None:
        query = query.filter(Project.user_id == owner_id)
    query = query.order_by(Project.created_at.desc(), Project.project_id.desc()).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_project(db: Session, project_id: int) -> Project:
    project = _projects_query(db).filter(Project.project_id == project_id).first()
    if not project:
        raise HTTPException(status_code=404, detail=PROJECT_NOT_FOUND)
    return project


def create_project(db: Session, data: ProjectCreate, current_user: User) -> Project:
    title = require_text(data.title, "Title is required")
    require_text(data.description, "Description is required")
    project = Project(
        title=title,
        description=data.description,
        github_link=data.github_link or "",
        live_link=data.live_link or "",
        demo_link=data.demo_link or "",
        technologies_json=_dump_technologies(data.technologies),
        image=data.image or "",
        user_id=current_user.user_id,
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("[projects] created project_id=%s by user_id=%s", project.project_id, current_user.user_id)
    return get_project(db, project.project_id)


def update_project(db: Session, project_id: int, data: ProjectUpdate, current_user: User) -> Project:
    project = _get_project_row(db, project_id)
    ensure_owner(project.user_id, current_user)

    payload = data.model_dump(exclude_none=True)
    if "title" in payload:
        payload["title"] = require_text(payload["title"], "Title is required")
    if "description" in payload:
        require_text(payload["description"], "Description is required")
    if "technologies" in payload:
        project.technologies_json = _dump_technologies(payload.pop("technologies"))

    for k, v in payload.items():
        setattr(project, k, v)
    db.commit()
    return get_project(db, project_id)


def delete_project(db: Session, project_id: int, current_user: User):
    project = _get_project_row(db, project_id)
    ensure_owner(project.user_id, current_user)
    comment_count = db.query(Comment).filter(Comment.project_id == project_id).count()
    # 댓글과 좋아요는 relationship cascade로 함께 삭제된다.
    db.delete(project)
    db.commit()
    logger.info(
        "[projects] deleted project_id=%s by user_id=%s (comments removed: %s)",
        project_id,
        current_user.user_id,
        comment_count,
    )


def toggle_like(db: Session, project_id: int, current_user: User) -> Project:
    exists = db.query(Project.project_id).filter(Project.project_id == project_id).first()
    if not exists:
        raise HTTPException(status_code=404, detail=PROJECT_NOT_FOUND)
    liked = like_service.toggle(db, ProjectLike, project_id=project_id, user_id=current_user.user_id)
    logger.debug("[projects] like project_id=%s user_id=%s liked=%s", project_id, current_user.user_id, liked)
    return get_project(db, project_id)


def get_projects_by_user(db: Session, user_id: int) -> List[Project]:
    return get_projects(db, owner_id=user_id)
