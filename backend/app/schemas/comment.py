"""Comment 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from app.schemas.user import LikerOut, UserSummaryOut


class CommentBase(BaseModel):
    content: str


class CommentCreate(CommentBase):
    # projectId(camelCase)와 project_id 둘 다 받는다.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_id: int


class CommentUpdate(BaseModel):
    content: str


class CommentOut(CommentBase):
    comment_id: int
    project_id: int
    user_id: int
    user: UserSummaryOut
    likes: List[LikerOut] = Field(default_factory=list)
    like_count: int = 0
    created_at: datetime
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}
