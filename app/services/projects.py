# app/services/projects.py
"""
Project Store: 프로젝트 목록의 단일 소유자.

- add / get / remove / update + todo 조작
- export_snapshot: JSON 배열 (camelCase wire format)
- import_snapshot: 후보별 upsert-merge (id → name 순서로 매칭, best-effort)
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from loguru import logger
from pydantic import ValidationError as SchemaError

from app.core.errors import DuplicateNameError, NotFoundError, StoreError, ValidationError
from app.models.project import Project, ToDo, coerce_date, create_project, create_todo
from app.schemas.common import ProjectStatus, ToDoStatus, UserRole
from app.schemas.project import ProjectRecord
from .collection import OrderedCollection
from .hooks import HookDispatcher, StoreHooks

MIN_NAME_LENGTH = 5

DEFAULT_PROJECT_NAME = "Default Project"
DEFAULT_PROJECT_DESCRIPTION = "This is just a default app project"

# 편집 폼 / merge 로 덮어쓰는 스칼라 필드
SCALAR_FIELDS = ("name", "description", "status", "user_role", "cost", "progress", "finish_date")


@dataclass
class ImportFailure:
    index: int
    name: Optional[str]
    reason: str


@dataclass
class ImportReport:
    created: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)
    failed: List[ImportFailure] = field(default_factory=list)


# =============================================================================
# Field helpers
# =============================================================================
def _fields_of(fields: Any, *, only_set: bool = False) -> Dict[str, Any]:
    if fields is None:
        return {}
    if hasattr(fields, "model_dump"):
        return fields.model_dump(exclude_unset=only_set)
    return dict(fields)


def _check_name(name: Any) -> str:
    if not isinstance(name, str) or len(name) < MIN_NAME_LENGTH:
        raise ValidationError(
            f"Project name must be at least {MIN_NAME_LENGTH} characters long: {name!r}"
        )
    return name


def _check_cost(value: Any) -> float:
    try:
        cost = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"cost must be a number: {value!r}") from None
    if not cost >= 0:
        raise ValidationError(f"cost must be non-negative: {value!r}")
    return cost


def _check_progress(value: Any) -> float:
    try:
        progress = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"progress must be a number: {value!r}") from None
    # 0~1 분수만 허용 (x100 값이 들어오면 거부)
    if not 0.0 <= progress <= 1.0:
        raise ValidationError(f"progress must be within [0, 1]: {value!r}")
    return progress


class ProjectStore(OrderedCollection[Project]):
    def __init__(self, hooks: Optional[StoreHooks] = None, *, seed_default: bool = False) -> None:
        super().__init__()
        self._hooks = HookDispatcher(hooks)
        if seed_default:
            self.seed_default()

    def subscribe(self, hooks: StoreHooks) -> None:
        self._hooks.subscribe(hooks)

    def find_by_name(self, name: str, *, exclude: Optional[Project] = None) -> Optional[Project]:
        for project in self._items:
            if project.name == name and project is not exclude:
                return project
        return None

    # -------------------------------------------------------------------------
    # CRUD
    # -------------------------------------------------------------------------
    def add(self, fields: Any) -> Project:
        """
        새 프로젝트 생성.
        실패(ValidationError / DuplicateNameError) 시 스토어는 변경되지 않음.
        """
        data = _fields_of(fields)
        name = _check_name(data.get("name"))
        if data.get("cost") is not None:
            data["cost"] = _check_cost(data["cost"])
        if data.get("progress") is not None:
            data["progress"] = _check_progress(data["progress"])
        if self.find_by_name(name) is not None:
            raise DuplicateNameError(name)
        if data.get("id") and self.get(str(data["id"])) is not None:
            raise ValidationError(f"Project id already in use: {data['id']}")

        try:
            project = create_project(data)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid project fields: {exc}") from exc

        self._append(project)
        logger.info("Project created: {} ({})", project.name, project.id)
        self._hooks.created(project)
        return project

    def remove(self, project_id: str) -> bool:
        project = self.get(project_id)
        if project is None:
            return False
        self._items = [p for p in self._items if p is not project]
        logger.info("Project removed: {} ({})", project.name, project.id)
        self._hooks.removed(project_id)
        return True

    def require(self, project_id: str) -> Project:
        project = self.get(project_id)
        if project is None:
            raise NotFoundError(f"Project not found: {project_id}")
        return project

    def update(self, project_id: str, fields: Any) -> Project:
        """편집 폼 제출: 넘어온 스칼라 필드만 반영."""
        project = self.require(project_id)
        data = {
            k: v
            for k, v in _fields_of(fields, only_set=True).items()
            if k in SCALAR_FIELDS and v is not None
        }

        changes: Dict[str, Any] = {}
        try:
            if "name" in data:
                changes["name"] = _check_name(data["name"])
                if self.find_by_name(changes["name"], exclude=project) is not None:
                    raise DuplicateNameError(changes["name"])
            if "description" in data:
                changes["description"] = str(data["description"])
            if "status" in data:
                changes["status"] = ProjectStatus(data["status"])
            if "user_role" in data:
                changes["user_role"] = UserRole(data["user_role"])
            if "cost" in data:
                changes["cost"] = _check_cost(data["cost"])
            if "progress" in data:
                changes["progress"] = _check_progress(data["progress"])
            if "finish_date" in data:
                changes["finish_date"] = coerce_date(data["finish_date"])
        except StoreError:
            raise
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid project fields: {exc}") from exc

        for key, value in changes.items():
            setattr(project, key, value)
        logger.info("Project updated: {} ({}) fields={}", project.name, project.id, sorted(changes))
        self._hooks.updated(project)
        return project

    # -------------------------------------------------------------------------
    # ToDo list
    # -------------------------------------------------------------------------
    def add_todo(self, project_id: str, fields: Any) -> ToDo:
        project = self.require(project_id)
        try:
            todo = create_todo(_fields_of(fields))
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid todo fields: {exc}") from exc
        project.todo_list.append(todo)
        self._hooks.updated(project)
        return todo

    def set_todo_status(self, project_id: str, todo_id: str, status: Any) -> ToDo:
        project = self.require(project_id)
        todo = next((t for t in project.todo_list if t.id == todo_id), None)
        if todo is None:
            raise NotFoundError(f"ToDo not found: {todo_id}")
        try:
            todo.status = ToDoStatus(status)
        except ValueError as exc:
            raise ValidationError(f"Invalid todo status: {status!r}") from exc
        self._hooks.updated(project)
        return todo

    def seed_default(self) -> Optional[Project]:
        """초기 로드 시 빈 화면 방지용 기본 프로젝트."""
        if self.find_by_name(DEFAULT_PROJECT_NAME) is not None:
            return None
        return self.add(
            {
                "name": DEFAULT_PROJECT_NAME,
                "description": DEFAULT_PROJECT_DESCRIPTION,
                "status": ProjectStatus.ACTIVE,
                "user_role": UserRole.ENGINEER,
                "finish_date": date.today(),
            }
        )

    # -------------------------------------------------------------------------
    # Export / Import
    # -------------------------------------------------------------------------
    def export_snapshot(self, indent: Optional[int] = 2) -> str:
        records = [
            ProjectRecord.from_entity(p).model_dump(mode="json", by_alias=True)
            for p in self._items
        ]
        return json.dumps(records, indent=indent, ensure_ascii=False)

    def import_snapshot(self, text: str) -> ImportReport:
        """
        upsert-merge import (문서 순서대로).

        1) id(비어있지 않으면) → 2) name 정확 일치 순으로 기존 프로젝트 탐색
        - 매칭: 스칼라 덮어쓰기 + id 이관 + todoList 통째로 교체
        - 미매칭: add() 경로 (후보 id 유지)
        후보 하나의 실패는 로그만 남기고 다음 후보 계속 진행.
        """
        try:
            payload = json.loads(text)
        except (TypeError, json.JSONDecodeError) as exc:
            raise ValidationError(f"Snapshot is not valid JSON: {exc}") from exc
        if not isinstance(payload, list):
            raise ValidationError("Snapshot must be a JSON array of projects")

        report = ImportReport()
        for index, raw in enumerate(payload):
            try:
                candidate = ProjectRecord.model_validate(raw)
                existing = self._resolve(candidate)
                if existing is None:
                    project = self.add(candidate.to_fields())
                    report.created.append(project.id)
                else:
                    self._merge(existing, candidate)
                    report.updated.append(existing.id)
            except (StoreError, SchemaError) as exc:
                name = raw.get("name") if isinstance(raw, dict) else None
                logger.warning("Import candidate #{} ({!r}) skipped: {}", index, name, exc)
                report.failed.append(
                    ImportFailure(index=index, name=None if name is None else str(name), reason=str(exc))
                )

        logger.info(
            "Import finished: created={} updated={} failed={}",
            len(report.created),
            len(report.updated),
            len(report.failed),
        )
        return report

    def _resolve(self, candidate: ProjectRecord) -> Optional[Project]:
        if candidate.id:
            found = self.get(candidate.id)
            if found is not None:
                return found
        return self.find_by_name(candidate.name)

    def _merge(self, existing: Project, candidate: ProjectRecord) -> None:
        # 먼저 전부 검증/생성 → 그 다음 적용 (후보 단위 원자성)
        _check_name(candidate.name)
        cost = _check_cost(candidate.cost)
        progress = _check_progress(candidate.progress)
        todos = [create_todo(t.to_fields()) for t in candidate.todo_list]

        existing.name = candidate.name
        existing.description = candidate.description
        existing.status = candidate.status
        existing.user_role = candidate.user_role
        existing.cost = cost
        existing.progress = progress
        existing.finish_date = candidate.finish_date
        if candidate.id and candidate.id != existing.id:
            # 로컬에서 만든 프로젝트가 파일의 정식 id를 이어받음
            logger.info("Project id migrated: {} -> {} ({})", existing.id, candidate.id, existing.name)
            existing.id = candidate.id
        existing.todo_list = todos

        logger.info("Project merged: {} ({})", existing.name, existing.id)
        self._hooks.updated(existing)
