# app/models/project.py
"""
Project / ToDo 엔티티.

- 순수 데이터 레코드: 생성 시 기본값 채우기 + id 발급 외에는 아무 동작 없음
- 검증(이름 길이, 중복, progress 범위)은 ProjectStore 책임
- progress는 항상 0~1 분수로 저장 (x100은 표시 계층에서만)
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Mapping

from app.schemas.common import ProjectStatus, ToDoStatus, UserRole


def new_id() -> str:
    """128-bit 랜덤 식별자 (uuid4)."""
    return str(uuid.uuid4())


def coerce_date(value: Any) -> date:
    """
    date / datetime / ISO-8601 문자열 → date.
    브라우저가 내보낸 "2024-05-01T00:00:00.000Z" 형태도 허용.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            raise ValueError(f"invalid date: {value!r}") from None
    raise ValueError(f"invalid date: {value!r}")


def _as_dict(fields: Any) -> Dict[str, Any]:
    if fields is None:
        return {}
    if isinstance(fields, Mapping):
        return dict(fields)
    if hasattr(fields, "model_dump"):
        return fields.model_dump(exclude_unset=True)
    return dict(fields)


@dataclass
class ToDo:
    id: str
    text: str
    date: date
    status: ToDoStatus = ToDoStatus.PENDING


@dataclass
class Project:
    id: str
    name: str
    description: str
    status: ProjectStatus
    user_role: UserRole
    finish_date: date
    cost: float = 0.0
    progress: float = 0.0
    todo_list: List[ToDo] = field(default_factory=list)

    @property
    def initials(self) -> str:
        words = self.name.split(" ")
        if len(words) >= 2 and words[0] and words[1]:
            return (words[0][0] + words[1][0]).upper()
        return self.name[:2].upper()


def create_todo(fields: Any) -> ToDo:
    data = _as_dict(fields)
    return ToDo(
        id=str(data.get("id") or new_id()),
        text=str(data.get("text") or ""),
        date=coerce_date(data.get("date") or date.today()),
        status=ToDoStatus(data.get("status") or ToDoStatus.PENDING),
    )


def create_project(fields: Any) -> Project:
    """
    필드 묶음 → Project.
    - id 없음/빈 값 → 새로 발급, 있으면 그대로 유지 (import)
    - todo_list 없음 → []
    """
    data = _as_dict(fields)
    todos = [t if isinstance(t, ToDo) else create_todo(t) for t in (data.get("todo_list") or [])]
    cost = data.get("cost")
    progress = data.get("progress")
    return Project(
        id=str(data.get("id") or new_id()),
        name=str(data.get("name") or ""),
        description=str(data.get("description") or ""),
        status=ProjectStatus(data.get("status") or ProjectStatus.ACTIVE),
        user_role=UserRole(data.get("user_role") or UserRole.ENGINEER),
        finish_date=coerce_date(data.get("finish_date") or date.today()),
        cost=float(cost) if cost is not None else 0.0,
        progress=float(progress) if progress is not None else 0.0,
        todo_list=todos,
    )
