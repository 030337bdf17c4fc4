"""Project 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from app.schemas.user import LikerOut, UserOut, UserSummaryOut


class ProjectBase(BaseModel):
    # 요청 본문은 githubLink 같은 camelCase 키와 snake_case 키를 모두 받는다.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    description: str
    github_link: str = ""
    live_link: str = ""
    demo_link: str = ""
    technologies: List[str] = Field(default_factory=list)
    image: str = ""


class ProjectCreate(ProjectBase):
    pass


class ProjectUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # 소유자(user)와 좋아요(likes)는 수정 대상이 아니므로 스키마에 두지 않는다.
    title: Optional[str] = None
    description: Optional[str] = None
    github_link: Optional[str] = None
    live_link: Optional[str] = None
    demo_link: Optional[str] = None
    technologies: Optional[List[str]] = None
    image: Optional[str] = None


class ProjectOut(BaseModel):
    project_id: int
    title: str
    description: str
    github_link: Optional[str] = ""
    live_link: Optional[str] = ""
    demo_link: Optional[str] = ""
    technologies: List[str] = Field(default_factory=list)
    image: Optional[str] = ""
    user_id: int
    user: UserSummaryOut
    likes: List[LikerOut] = Field(default_factory=list)
    like_count: int = 0
    created_at: datetime
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}


class UserWithProjectsOut(BaseModel):
    user: UserOut
    projects: List[ProjectOut]
