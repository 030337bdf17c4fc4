"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.user import User
from app.models.project import Project, ProjectLike
from app.models.comment import Comment, CommentLike

__all__ = [
    "User",
    "Project", "ProjectLike",
    "Comment", "CommentLike",
]
