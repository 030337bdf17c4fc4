"""Comment 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Comment(Base):
    __tablename__ = "comments"

    comment_id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(Text, nullable=False)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    project_id = Column(Integer, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="comments")
    project = relationship("Project", back_populates="comments")
    like_rows = relationship(
        "CommentLike",
        back_populates="comment",
        cascade="all, delete-orphan",
        order_by="CommentLike.created_at",
    )

    __table_args__ = (
        Index("idx_comment_project", "project_id", "created_at"),
    )

    @property
    def likes(self):
        return [row.user for row in self.like_rows]

    @property
    def like_count(self):
        return len(self.like_rows)


class CommentLike(Base):
    __tablename__ = "comment_like"

    comment_id = Column(Integer, ForeignKey("comments.comment_id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), primary_key=True)
    created_at = Column(DateTime, server_default=func.now())

    comment = relationship("Comment", back_populates="like_rows")
    user = relationship("User")
