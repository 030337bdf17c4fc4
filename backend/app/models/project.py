"""Project 도메인의 SQLAlchemy 모델 정의입니다."""

import json

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Project(Base):
    __tablename__ = "projects"

    project_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    github_link = Column(String(500), default="")
    live_link = Column(String(500), default="")
    demo_link = Column(String(500), default="")
    technologies_json = Column("technologies", Text, default="[]")  # JSON list
    image = Column(String(500), default="")
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="projects")
    like_rows = relationship(
        "ProjectLike",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ProjectLike.created_at",
    )
    comments = relationship("Comment", back_populates="project", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_project_user", "user_id"),
        Index("idx_project_created", "created_at"),
    )

    @property
    def technologies(self):
        if not self.technologies_json:
            return []
        try:
            parsed = json.loads(self.technologies_json)
            if isinstance(parsed, list):
                return [str(item) for item in parsed]
        except json.JSONDecodeError:
            return []
        return []

    @property
    def likes(self):
        return [row.user for row in self.like_rows]

    @property
    def like_count(self):
        return len(self.like_rows)


class ProjectLike(Base):
    __tablename__ = "project_like"

    # (project_id, user_id) 복합 PK로 사용자당 1회 좋아요를 보장한다.
    project_id = Column(Integer, ForeignKey("projects.project_id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), primary_key=True)
    created_at = Column(DateTime, server_default=func.now())

    project = relationship("Project", back_populates="like_rows")
    user = relationship("User")
