# app\schemas\common.py
from enum import Enum
from pydantic import BaseModel, ConfigDict


class AppBaseModel(BaseModel):
    """모든 모델의 부모 클래스: V2 설정 적용"""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        from_attributes=True,
    )


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class UserRole(str, Enum):
    """프로젝트에 대한 '보는 사람'의 역할 (시스템 사용자 권한 아님)"""

    ENGINEER = "engineer"
    ARCHITECT = "architect"
    MANAGER = "manager"
    SUPERVISOR = "supervisor"


class ToDoStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    FINISHED = "finished"


class RosterRole(str, Enum):
    """User Roster 권한"""

    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"
