# app/schemas/project.py
# =============================================================================
# Project / ToDo Schemas (Pydantic v2)
#
# Key Policies:
# - Wire format (export/import) uses camelCase: userRole, finishDate, todoList
# - Explicit "null" is treated as missing so defaults apply (cost, progress, todoList)
# - Dates: ISO-8601 out, anything ISO-parseable in (browser "…Z" timestamps too)
# - Unknown extra fields are ignored (AppBaseModel extra="ignore")
# =============================================================================

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator, model_validator

from app.models.project import Project, ToDo, coerce_date
from .common import AppBaseModel, ProjectStatus, ToDoStatus, UserRole


# =============================================================================
# Helpers: Treat explicit null as "missing"
# =============================================================================
def _drop_none_recursive(obj: Any) -> Any:
    if isinstance(obj, dict):
        out: Dict[str, Any] = {}
        for k, v in obj.items():
            if v is None:
                continue
            out[k] = _drop_none_recursive(v)
        return out
    if isinstance(obj, list):
        return [_drop_none_recursive(v) for v in obj]
    return obj


class _NullStrippingModel(AppBaseModel):
    @model_validator(mode="before")
    @classmethod
    def _strip_nulls(cls, data: Any) -> Any:
        return _drop_none_recursive(data) if isinstance(data, dict) else data


# =============================================================================
# Snapshot records (export / import wire contract)
# =============================================================================
class ToDoRecord(_NullStrippingModel):
    id: Optional[str] = None
    text: str
    date: dt.date
    status: ToDoStatus = ToDoStatus.PENDING

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, v: Any) -> dt.date:
        return coerce_date(v)

    @classmethod
    def from_entity(cls, todo: ToDo) -> "ToDoRecord":
        return cls(id=todo.id, text=todo.text, date=todo.date, status=todo.status)

    def to_fields(self) -> Dict[str, Any]:
        return {"id": self.id, "text": self.text, "date": self.date, "status": self.status}


class ProjectRecord(_NullStrippingModel):
    """스냅샷 한 건. 필드 순서 = export JSON 키 순서."""

    id: Optional[str] = None
    name: str
    description: str
    status: ProjectStatus
    user_role: UserRole = Field(..., alias="userRole")
    cost: float = 0.0
    progress: float = 0.0
    finish_date: dt.date = Field(..., alias="finishDate")
    todo_list: List[ToDoRecord] = Field(default_factory=list, alias="todoList")

    @field_validator("finish_date", mode="before")
    @classmethod
    def _parse_finish_date(cls, v: Any) -> dt.date:
        return coerce_date(v)

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectRecord":
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            status=project.status,
            user_role=project.user_role,
            cost=project.cost,
            progress=project.progress,
            finish_date=project.finish_date,
            todo_list=[ToDoRecord.from_entity(t) for t in project.todo_list],
        )

    def to_fields(self) -> Dict[str, Any]:
        """ProjectStore.add()에 그대로 넘길 수 있는 snake_case 필드 묶음."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status,
            "user_role": self.user_role,
            "cost": self.cost,
            "progress": self.progress,
            "finish_date": self.finish_date,
            "todo_list": [t.to_fields() for t in self.todo_list],
        }


# =============================================================================
# API In / Out
# =============================================================================
class ProjectIn(_NullStrippingModel):
    """새 프로젝트 폼 입력 (이름 길이/중복 검증은 스토어에서)"""

    name: str
    description: str = ""
    status: ProjectStatus = ProjectStatus.ACTIVE
    user_role: UserRole = Field(UserRole.ENGINEER, alias="userRole")
    cost: float = 0.0
    progress: float = 0.0
    finish_date: dt.date = Field(default_factory=dt.date.today, alias="finishDate")

    @field_validator("finish_date", mode="before")
    @classmethod
    def _parse_finish_date(cls, v: Any) -> dt.date:
        return coerce_date(v)


class ProjectUpdate(AppBaseModel):
    """편집 폼 입력 (보낸 필드만 반영)"""

    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    user_role: Optional[UserRole] = Field(default=None, alias="userRole")
    cost: Optional[float] = None
    progress: Optional[float] = None
    finish_date: Optional[dt.date] = Field(default=None, alias="finishDate")

    @field_validator("finish_date", mode="before")
    @classmethod
    def _parse_finish_date(cls, v: Any) -> Any:
        return None if v is None else coerce_date(v)


class ToDoIn(_NullStrippingModel):
    text: str
    date: dt.date = Field(default_factory=dt.date.today)
    status: ToDoStatus = ToDoStatus.PENDING

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, v: Any) -> dt.date:
        return coerce_date(v)


class ToDoStatusIn(AppBaseModel):
    status: ToDoStatus


class ToDoOut(ToDoRecord):
    id: str


class ProjectOut(ProjectRecord):
    id: str
    todo_list: List[ToDoOut] = Field(default_factory=list, alias="todoList")
    initials: str = ""

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectOut":
        record = ProjectRecord.from_entity(project)
        return cls(**record.model_dump(), initials=project.initials)


class ImportFailureOut(AppBaseModel):
    index: int
    name: Optional[str] = None
    reason: str


class ImportReportOut(AppBaseModel):
    created: List[str] = Field(default_factory=list)
    updated: List[str] = Field(default_factory=list)
    failed: List[ImportFailureOut] = Field(default_factory=list)
